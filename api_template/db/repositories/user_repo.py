"""Storage contract for User records.

Concrete backends live next to this module and are picked by
``factory.user_repo``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from ...domain.user import User


class UserRepository(ABC):
    @abstractmethod
    def list(self) -> List[User]:
        """Return every stored user ordered by id."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> User:
        """Return the user with ``user_id``.

        Raises:
            NotFoundError: no user has that id.
        """

    @abstractmethod
    def create(self, user: User) -> User:
        """Assign the next id to ``user``, store it and return the stored record."""

    @abstractmethod
    def update(self, user: User) -> User:
        """Overwrite the record with ``user.id``.

        Raises:
            NotFoundError: no user has that id.
        """

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove the user with ``user_id``.

        Raises:
            NotFoundError: no user has that id.
        """
