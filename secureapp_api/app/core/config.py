"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables when it is instantiated.  Defaults are provided
for all fields.  ``create_app`` accepts an explicit ``Settings``
instance, which is how tests pin values without touching the
environment.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from fastapi import Request


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _environment() -> str:
    # APP_ENV wins; NODE_ENV is honoured for deployments that already set it.
    return os.getenv("APP_ENV") or os.getenv("NODE_ENV") or "development"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "SecureApp Customer API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "3.0.0"))

    # Reported by ``GET /`` and otherwise unused.
    environment: str = field(default_factory=_environment)

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "3000")))

    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))
    # Optional path of a log file.  When unset only console logging is used.
    log_file: Optional[str] = field(default_factory=lambda: os.getenv("LOG_FILE") or None)


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()


def get_settings(request: Request) -> Settings:
    """Dependency returning the settings the running app was built with."""
    return request.app.state.settings
