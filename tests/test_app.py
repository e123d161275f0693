"""Greeting, health, docs and app wiring."""
from __future__ import annotations

import pytest
from flask.testing import FlaskClient

from api_template import create_app
from api_template.config import TestConfig
from api_template.services import greeting
from api_template.services.greeting import GreetingError


def test_greeting_functions() -> None:
    assert greeting.hello("John") == "Hello, John!"
    assert greeting.formal("Alice") == "Good day, Alice. It's a pleasure to meet you."
    with pytest.raises(GreetingError):
        greeting.hello("   ")


def test_greeting_endpoints(client: FlaskClient) -> None:
    resp = client.get("/greeting/John")
    assert resp.status_code == 200
    assert resp.get_json() == {"data": {"message": "Hello, John!"}}

    resp = client.get("/greeting/formal/Alice")
    assert resp.get_json() == {"data": {"message": "Good day, Alice. It's a pleasure to meet you."}}

    resp = client.get("/greeting/%20")
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "name is required"}


def test_health_and_root(client: FlaskClient) -> None:
    assert client.get("/health").get_json() == {"data": {"status": "ok"}}
    assert client.get("/").get_json() == {"data": {"message": "Welcome to the API Template"}}


def test_unknown_route_and_method_use_error_envelope(client: FlaskClient) -> None:
    resp = client.get("/nope")
    assert resp.status_code == 404
    assert "error" in resp.get_json()

    resp = client.patch("/users")
    assert resp.status_code == 405
    assert "error" in resp.get_json()


def test_openapi_document(client: FlaskClient) -> None:
    resp = client.get("/openapi.json")
    assert resp.status_code == 200
    spec = resp.get_json()
    assert spec["openapi"].startswith("3.")
    assert "/users/{id}" in spec["paths"]
    assert "/greeting/formal/{name}" in spec["paths"]
    assert "UserOut" in spec["components"]["schemas"]


def test_docs_pages(client: FlaskClient) -> None:
    for path in ("/docs", "/redoc"):
        resp = client.get(path)
        assert resp.status_code == 200
        assert resp.mimetype == "text/html"
        assert b"/openapi.json" in resp.get_data()


def test_unhandled_error_returns_500(client: FlaskClient, monkeypatch: pytest.MonkeyPatch) -> None:
    svc = client.application.extensions["user_service"]

    def boom() -> None:
        raise RuntimeError("boom")

    monkeypatch.setattr(svc, "list_users", boom)
    resp = client.get("/users")
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "internal server error"}


def test_create_app_builds_default_service() -> None:
    app = create_app(TestConfig())
    assert app.config["TESTING"] is True
    with app.test_client() as c:
        assert c.post("/users", json={"name": "A", "email": "a@b.co"}).status_code == 201


def test_create_app_rejects_unknown_backend() -> None:
    config = TestConfig()
    config.USER_REPO_BACKEND = "redis"
    with pytest.raises(RuntimeError):
        create_app(config)


def test_test_config_is_not_collected_as_a_test_class() -> None:
    assert TestConfig.__test__ is False
    assert "__test__" not in TestConfig.__dataclass_fields__
