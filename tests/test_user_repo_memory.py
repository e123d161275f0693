from __future__ import annotations

import threading
from datetime import datetime, timezone

import pytest

from api_template.db.repositories.factory import user_repo
from api_template.db.repositories.user_repo_memory import InMemoryUserRepository
from api_template.domain.errors import NotFoundError
from api_template.domain.user import User

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _user(name: str = "John Doe", email: str = "john@example.com") -> User:
    return User(name=name, email=email, created_at=NOW, updated_at=NOW)


def test_full_crud(repo: InMemoryUserRepository) -> None:
    created = repo.create(_user())
    assert created.id == 1
    assert repo.get_by_id(1) == created

    created.name = "Jane Doe"
    repo.update(created)
    assert repo.get_by_id(1).name == "Jane Doe"

    repo.delete(1)
    with pytest.raises(NotFoundError):
        repo.get_by_id(1)
    assert len(repo) == 0


def test_missing_ids_raise_not_found(repo: InMemoryUserRepository) -> None:
    with pytest.raises(NotFoundError):
        repo.get_by_id(999)
    with pytest.raises(NotFoundError):
        repo.update(User(id=999, name="x", email="x@y.z", created_at=NOW, updated_at=NOW))
    with pytest.raises(NotFoundError):
        repo.delete(999)


def test_returned_records_are_copies(repo: InMemoryUserRepository) -> None:
    created = repo.create(_user())
    created.name = "mutated"
    fetched = repo.get_by_id(created.id)
    fetched.email = "mutated@example.com"

    stored = repo.get_by_id(created.id)
    assert stored.name == "John Doe"
    assert stored.email == "john@example.com"


def test_create_does_not_mutate_argument(repo: InMemoryUserRepository) -> None:
    draft = _user()
    repo.create(draft)
    assert draft.id == 0


def test_list_is_ordered_by_id(repo: InMemoryUserRepository) -> None:
    for name in ("c", "a", "b"):
        repo.create(_user(name=name))
    repo.delete(2)
    assert [(u.id, u.name) for u in repo.list()] == [(1, "c"), (3, "b")]


def test_concurrent_creates_get_unique_ids(repo: InMemoryUserRepository) -> None:
    def worker() -> None:
        for _ in range(50):
            repo.create(_user())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    ids = [u.id for u in repo.list()]
    assert ids == list(range(1, 401))


def test_factory_selects_memory_backend() -> None:
    assert isinstance(user_repo("memory"), InMemoryUserRepository)
    assert isinstance(user_repo("MEMORY"), InMemoryUserRepository)
    assert isinstance(user_repo(None), InMemoryUserRepository)


def test_factory_rejects_unknown_backend() -> None:
    with pytest.raises(RuntimeError):
        user_repo("postgres")
