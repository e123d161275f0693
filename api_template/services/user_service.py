"""User service encapsulating business rules."""
from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, List

from loguru import logger

from ..db.repositories.user_repo import UserRepository
from ..domain.errors import (
    InvalidEmailFormatError,
    InvalidIDError,
    MissingEmailError,
    MissingNameError,
    RepositoryError,
)
from ..domain.user import User


Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_valid_email(email: str) -> bool:
    """Minimal structural check, not RFC 5322.

    At least 3 chars, exactly one ``@`` that is neither first nor last, and a
    ``.`` somewhere after the ``@`` that is not the final character.
    """
    if len(email) < 3 or email.count("@") != 1:
        return False
    at = email.index("@")
    if at == 0 or at == len(email) - 1:
        return False
    return "." in email[at + 1:-1]


class UserService:
    def __init__(self, repo: UserRepository, clock: Clock = utcnow) -> None:
        self.repo = repo
        self.clock = clock

    def list_users(self) -> List[User]:
        try:
            return self.repo.list()
        except Exception as e:
            raise RepositoryError("list", e) from e

    def get_user(self, user_id: int) -> User:
        _check_id(user_id)
        logger.debug("get user id={}", user_id)
        try:
            return self.repo.get_by_id(user_id)
        except Exception as e:
            raise RepositoryError("get", e) from e

    def create_user(self, name: str, email: str) -> User:
        if not name:
            raise MissingNameError()
        if not email:
            raise MissingEmailError()
        if not is_valid_email(email):
            logger.debug("rejected email {!r}", email)
            raise InvalidEmailFormatError()

        now = self.clock()
        try:
            user = self.repo.create(User(name=name, email=email, created_at=now, updated_at=now))
        except Exception as e:
            raise RepositoryError("create", e) from e
        logger.info("created user id={} email={}", user.id, user.email)
        return user

    def update_user(self, user_id: int, name: str = "", email: str = "") -> User:
        """Partial update: an empty ``name`` or ``email`` keeps the stored value."""
        _check_id(user_id)
        try:
            current = self.repo.get_by_id(user_id)
        except Exception as e:
            raise RepositoryError("get", e) from e

        if email and not is_valid_email(email):
            logger.debug("rejected email {!r}", email)
            raise InvalidEmailFormatError()

        updated = replace(
            current,
            name=name or current.name,
            email=email or current.email,
            updated_at=max(self.clock(), current.updated_at),
        )
        try:
            user = self.repo.update(updated)
        except Exception as e:
            raise RepositoryError("update", e) from e
        logger.info("updated user id={}", user.id)
        return user

    def delete_user(self, user_id: int) -> None:
        _check_id(user_id)
        try:
            self.repo.delete(user_id)
        except Exception as e:
            raise RepositoryError("delete", e) from e
        logger.info("deleted user id={}", user_id)


def _check_id(user_id: int) -> None:
    if user_id <= 0:
        raise InvalidIDError()
