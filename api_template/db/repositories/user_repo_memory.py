"""In-process User repository backed by a dict."""
from __future__ import annotations

import threading
from dataclasses import replace
from typing import Dict, List

from loguru import logger

from ...domain.errors import NotFoundError
from ...domain.user import User
from .user_repo import UserRepository


class InMemoryUserRepository(UserRepository):
    """Stores copies of users keyed by id.

    Ids start at 1 and are never reused, even after a delete. All access
    goes through one lock so concurrent requests cannot lose writes.
    """

    def __init__(self) -> None:
        self._users: Dict[int, User] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def list(self) -> List[User]:
        with self._lock:
            return [replace(self._users[k]) for k in sorted(self._users)]

    def get_by_id(self, user_id: int) -> User:
        with self._lock:
            stored = self._users.get(user_id)
            if stored is None:
                raise NotFoundError()
            return replace(stored)

    def create(self, user: User) -> User:
        with self._lock:
            entity = replace(user, id=self._next_id)
            self._users[entity.id] = entity
            self._next_id += 1
        logger.debug("stored user id={}", entity.id)
        return replace(entity)

    def update(self, user: User) -> User:
        with self._lock:
            if user.id not in self._users:
                raise NotFoundError()
            self._users[user.id] = replace(user)
        return replace(user)

    def delete(self, user_id: int) -> None:
        with self._lock:
            if user_id not in self._users:
                raise NotFoundError()
            del self._users[user_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
