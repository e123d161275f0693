"""Health check and welcome endpoints."""
from __future__ import annotations

from flask import Blueprint

from ...errors import ok


bp = Blueprint("health", __name__)


@bp.get("/health")
def alive():
    return ok({"status": "ok"})


@bp.get("/")
def root():
    return ok({"message": "Welcome to the API Template"})
