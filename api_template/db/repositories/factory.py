"""Repository factory for User (memory)."""
from __future__ import annotations

from .user_repo import UserRepository
from .user_repo_memory import InMemoryUserRepository


def user_repo(backend: str | None = None) -> UserRepository:
    name = (backend or "memory").lower()
    if name == "memory":
        return InMemoryUserRepository()
    raise RuntimeError(f"Unknown USER_REPO_BACKEND: {backend!r}")
