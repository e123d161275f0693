"""Builds a minimal OpenAPI spec from existing Pydantic schemas."""
from __future__ import annotations

from typing import Any, Dict

from flask import current_app, request

from ..api.users.schemas import ErrorOut, UserCreateIn, UserOut, UserUpdateIn


def _schemas() -> Dict[str, Any]:
    return {
        "UserCreateIn": UserCreateIn.model_json_schema(ref_template="#/components/schemas/{model}"),
        "UserUpdateIn": UserUpdateIn.model_json_schema(ref_template="#/components/schemas/{model}"),
        "UserOut": UserOut.model_json_schema(ref_template="#/components/schemas/{model}"),
        "ErrorOut": ErrorOut.model_json_schema(ref_template="#/components/schemas/{model}"),
    }


def _data(schema: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "application/json": {
            "schema": {"type": "object", "properties": {"data": schema}}
        }
    }


def _ref(name: str) -> Dict[str, Any]:
    return {"$ref": f"#/components/schemas/{name}"}


_ERROR = {"content": {"application/json": {"schema": _ref("ErrorOut")}}}
_BAD = {"400": {"description": "Invalid input", **_ERROR}}
_MISSING = {"404": {"description": "User not found", **_ERROR}}
_ID_PARAM = [{"name": "id", "in": "path", "required": True, "schema": {"type": "integer"}}]


def _calculator_path(summary: str) -> Dict[str, Any]:
    return {
        "parameters": [
            {"name": "a", "in": "path", "required": True, "schema": {"type": "number"}},
            {"name": "b", "in": "path", "required": True, "schema": {"type": "number"}},
        ],
        "get": {
            "tags": ["Calculator"],
            "summary": summary,
            "responses": {
                "200": {"description": "OK", "content": _data({"type": "object", "properties": {"result": {"type": "number"}}})},
                **_BAD,
            },
        },
    }


def _greeting_path(summary: str) -> Dict[str, Any]:
    return {
        "parameters": [{"name": "name", "in": "path", "required": True, "schema": {"type": "string"}}],
        "get": {
            "tags": ["Greeting"],
            "summary": summary,
            "responses": {
                "200": {"description": "OK", "content": _data({"type": "object", "properties": {"message": {"type": "string"}}})},
                **_BAD,
            },
        },
    }


def build_openapi() -> Dict[str, Any]:
    base_url = f"{request.scheme}://{request.host}"
    return {
        "openapi": "3.0.3",
        "info": {
            "title": current_app.config.get("APP_NAME", "API Template"),
            "version": current_app.config.get("APP_VERSION", "1.0.0"),
        },
        "servers": [{"url": base_url}],
        "tags": [
            {"name": "Health"},
            {"name": "Users"},
            {"name": "Calculator"},
            {"name": "Greeting"},
        ],
        "paths": {
            "/": {
                "get": {"tags": ["Health"], "summary": "Welcome message", "responses": {"200": {"description": "OK"}}}
            },
            "/health": {
                "get": {"tags": ["Health"], "summary": "Liveness probe", "responses": {"200": {"description": "OK"}}}
            },
            "/users": {
                "get": {
                    "tags": ["Users"], "summary": "List users",
                    "responses": {"200": {"description": "OK", "content": _data({"type": "array", "items": _ref("UserOut")})}},
                },
                "post": {
                    "tags": ["Users"], "summary": "Create user",
                    "requestBody": {"required": True, "content": {"application/json": {"schema": _ref("UserCreateIn")}}},
                    "responses": {"201": {"description": "Created", "content": _data(_ref("UserOut"))}, **_BAD},
                },
            },
            "/users/{id}": {
                "parameters": _ID_PARAM,
                "get": {
                    "tags": ["Users"], "summary": "Get user by id",
                    "responses": {"200": {"description": "OK", "content": _data(_ref("UserOut"))}, **_BAD, **_MISSING},
                },
                "put": {
                    "tags": ["Users"], "summary": "Update user (empty fields are left unchanged)",
                    "requestBody": {"required": True, "content": {"application/json": {"schema": _ref("UserUpdateIn")}}},
                    "responses": {"200": {"description": "OK", "content": _data(_ref("UserOut"))}, **_BAD, **_MISSING},
                },
                "delete": {
                    "tags": ["Users"], "summary": "Delete user",
                    "responses": {"204": {"description": "No Content"}, **_BAD, **_MISSING},
                },
            },
            "/add/{a}/{b}": _calculator_path("Add two numbers"),
            "/subtract/{a}/{b}": _calculator_path("Subtract b from a"),
            "/multiply/{a}/{b}": _calculator_path("Multiply two numbers"),
            "/divide/{a}/{b}": _calculator_path("Divide a by b (b cannot be zero)"),
            "/power/{a}/{b}": _calculator_path("Raise a to a non-negative integer power b"),
            "/greeting/{name}": _greeting_path("Greet a person"),
            "/greeting/formal/{name}": _greeting_path("Formal greeting"),
        },
        "components": {"schemas": _schemas()},
    }
