"""Loguru setup and stdlib logging bridge."""
from __future__ import annotations

import logging
import sys

from flask import Flask, Response, request
from loguru import logger


class InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records (werkzeug, flask) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = "INFO") -> None:
    level = level.upper()
    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
    )
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)


def register_request_logging(app: Flask) -> None:
    @app.after_request
    def log_request(response: Response) -> Response:
        logger.info("{} {} -> {}", request.method, request.path, response.status_code)
        return response
