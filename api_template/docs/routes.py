"""Docs blueprint: /openapi.json, /docs (Swagger UI), /redoc."""
from __future__ import annotations

from flask import Blueprint, Response, current_app, jsonify

from .openapi import build_openapi

bp = Blueprint("docs", __name__)

_SWAGGER_HTML = """<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>{title} - Swagger UI</title>
  <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@5/swagger-ui.css" />
  <style>body{{margin:0;}} #swagger-ui{{height:100vh;}}</style>
</head>
<body>
  <div id="swagger-ui"></div>
  <script src="https://unpkg.com/swagger-ui-dist@5/swagger-ui-bundle.js"></script>
  <script>window.ui = SwaggerUIBundle({{ url: '/openapi.json', dom_id: '#swagger-ui' }});</script>
</body>
</html>
"""

_REDOC_HTML = """<!doctype html>
<html>
<head>
  <meta charset="utf-8"/>
  <title>{title} - ReDoc</title>
  <style>body{{margin:0;}} #redoc{{height:100vh;}}</style>
  <script src="https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.js"></script>
</head>
<body>
  <redoc spec-url="/openapi.json"></redoc>
</body>
</html>
"""


def _page(template: str) -> Response:
    title = current_app.config.get("APP_NAME", "API")
    return Response(template.format(title=title), mimetype="text/html")


@bp.get("/openapi.json")
def openapi_json() -> Response:
    return jsonify(build_openapi())


@bp.get("/docs")
def swagger_ui() -> Response:
    return _page(_SWAGGER_HTML)


@bp.get("/redoc")
def redoc() -> Response:
    return _page(_REDOC_HTML)
