"""Greeting message formatting."""
from __future__ import annotations


class GreetingError(ValueError):
    pass


def _require(name: str) -> str:
    if not name or not name.strip():
        raise GreetingError("name is required")
    return name


def hello(name: str) -> str:
    return f"Hello, {_require(name)}!"


def formal(name: str) -> str:
    return f"Good day, {_require(name)}. It's a pleasure to meet you."
