"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
application runs out of the box against a local ``pets.db`` file.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Pets API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the SQLite database file.  If a relative path is
    # provided, it will be resolved relative to the project root by
    # the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "pets.db")

    # Bind address for ``run.py``.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
