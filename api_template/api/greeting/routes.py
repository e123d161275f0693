"""Greeting endpoints."""
from __future__ import annotations

from flask import Blueprint

from ...errors import ok
from ...services import greeting


bp = Blueprint("greeting", __name__)


@bp.get("/<name>")
def hello(name: str):
    return ok({"message": greeting.hello(name)})


@bp.get("/formal/<name>")
def formal(name: str):
    return ok({"message": greeting.formal(name)})
