"""Global HTTP error handling and JSON envelope helpers.

Success bodies are ``{"data": ...}``; failures are ``{"error": "<message>"}``.
"""
from __future__ import annotations

from typing import Any

from flask import Flask, jsonify
from loguru import logger
from pydantic import ValidationError
from werkzeug.exceptions import HTTPException

from .domain.errors import UserServiceError, is_not_found
from .services.calculator import CalculatorError
from .services.greeting import GreetingError


def ok(data: Any, status: int = 200):
    return jsonify({"data": data}), status


def fail(message: str, status: int = 400):
    return jsonify({"error": message}), status


def status_for(err: UserServiceError) -> int:
    return 404 if is_not_found(err) else 400


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(UserServiceError)
    def user_error(err: UserServiceError):
        return fail(str(err), status_for(err))

    @app.errorhandler(CalculatorError)
    def calculator_error(err: CalculatorError):
        return fail(str(err))

    @app.errorhandler(GreetingError)
    def greeting_error(err: GreetingError):
        return fail(str(err))

    @app.errorhandler(ValidationError)
    def invalid_body(err: ValidationError):
        logger.debug("request body rejected: {}", err)
        return fail("invalid JSON")

    @app.errorhandler(HTTPException)
    def http_error(err: HTTPException):
        return fail(err.description or err.name, err.code or 500)

    @app.errorhandler(Exception)
    def internal(err: Exception):
        logger.exception("unhandled error: {}", err)
        return fail("internal server error", 500)
