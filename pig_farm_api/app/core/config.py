"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables when it is instantiated.  Defaults are provided
for all fields, so the service starts with an in-memory store and no
configuration at all.  Tests build their own ``Settings`` and pass it
to ``create_app``.
"""

import os
from dataclasses import dataclass, field


def _env(name: str, default: str) -> str:
    return os.getenv(name, default)


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: _env("PROJECT_NAME", "Pig Farm Records API"))
    api_version: str = field(default_factory=lambda: _env("API_VERSION", "1.0.0"))
    debug: bool = field(default_factory=lambda: _env_bool("DEBUG"))
    log_level: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))

    # Optional path of a log file.  Empty means console only.
    log_file: str = field(default_factory=lambda: _env("LOG_FILE", ""))

    # Path of the SQLite database backing the record store.  The
    # default ``:memory:`` keeps records for the lifetime of the
    # process only.  Relative paths are resolved against the project
    # root by the ``db`` module.
    database_url: str = field(default_factory=lambda: _env("DATABASE_URL", ":memory:"))

    host: str = field(default_factory=lambda: _env("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(_env("PORT", "8000")))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
