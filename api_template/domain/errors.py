"""User domain errors.

Every failure raised by the user service derives from ``UserServiceError``
so the HTTP layer can map the whole family with one handler. Repository
failures are re-raised as ``RepositoryError`` with the original exception
chained as ``__cause__``.
"""
from __future__ import annotations


class UserServiceError(Exception):
    message = "user operation failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class InvalidIDError(UserServiceError):
    message = "invalid user ID"


class MissingNameError(UserServiceError):
    message = "name is required"


class MissingEmailError(UserServiceError):
    message = "email is required"


class InvalidEmailFormatError(UserServiceError):
    message = "invalid email format"


class NotFoundError(UserServiceError):
    message = "user not found"


class RepositoryError(UserServiceError):
    """A backing-store call failed while running ``operation``."""

    def __init__(self, operation: str, cause: BaseException) -> None:
        super().__init__(f"failed to {operation} user: {cause}")
        self.operation = operation
        self.cause = cause


def is_not_found(err: BaseException | None) -> bool:
    """True if ``err`` or anything in its cause chain is a ``NotFoundError``."""
    seen: set[int] = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, NotFoundError):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False
