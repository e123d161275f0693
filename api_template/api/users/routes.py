"""Users blueprint (CRUD)."""
from __future__ import annotations

import re
from dataclasses import asdict

from flask import Blueprint, current_app, request

from ...domain.errors import InvalidIDError
from ...domain.user import User
from ...errors import ok
from ...services.user_service import UserService
from .schemas import UserCreateIn, UserUpdateIn, UserOut


bp = Blueprint("users", __name__)


def _service() -> UserService:
    return current_app.extensions["user_service"]


_ID_RE = re.compile(r"-?[0-9]+")


def _user_id(raw: str) -> int:
    if not raw.isascii() or not _ID_RE.fullmatch(raw):
        raise InvalidIDError()
    return int(raw)


def _out(user: User) -> dict:
    return UserOut.model_validate(asdict(user)).model_dump(mode="json")


@bp.get("")
def list_users():
    return ok([_out(u) for u in _service().list_users()])


@bp.post("")
def create_user():
    payload = UserCreateIn.model_validate_json(request.get_data())
    user = _service().create_user(payload.name or "", payload.email or "")
    return ok(_out(user), 201)


@bp.get("/<user_id>")
def get_user(user_id: str):
    return ok(_out(_service().get_user(_user_id(user_id))))


@bp.put("/<user_id>")
def update_user(user_id: str):
    uid = _user_id(user_id)
    payload = UserUpdateIn.model_validate_json(request.get_data())
    user = _service().update_user(uid, name=payload.name or "", email=payload.email or "")
    return ok(_out(user))


@bp.delete("/<user_id>")
def delete_user(user_id: str):
    _service().delete_user(_user_id(user_id))
    return "", 204
