from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from api_template import create_app
from api_template.config import TestConfig
from api_template.db.repositories.user_repo_memory import InMemoryUserRepository
from api_template.services.user_service import UserService


class TickingClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self, start: datetime | None = None, step: timedelta = timedelta(seconds=1)) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.step = step

    def __call__(self) -> datetime:
        current = self.now
        self.now += self.step
        return current


@pytest.fixture()
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture()
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture()
def service(repo: InMemoryUserRepository, clock: TickingClock) -> UserService:
    return UserService(repo, clock=clock)


@pytest.fixture()
def app(service: UserService) -> Flask:
    return create_app(TestConfig(), user_service=service)


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as c:
        yield c
