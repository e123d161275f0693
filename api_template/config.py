"""Application configuration objects."""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class BaseConfig:
    APP_NAME: str = os.getenv("APP_NAME", "API Template")
    APP_VERSION: str = os.getenv("APP_VERSION", "1.0.0")

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8080))
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"
    TESTING: bool = False

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS, comma separated
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Repository backend
    USER_REPO_BACKEND: str = os.getenv("USER_REPO_BACKEND", "memory")


@dataclass
class TestConfig(BaseConfig):
    __test__ = False

    TESTING: bool = True
    LOG_LEVEL: str = "WARNING"
    USER_REPO_BACKEND: str = "memory"
