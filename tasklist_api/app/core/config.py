"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first; variables already present in the environment take
precedence over it.  Defaults are provided for all fields so that the
service starts against a local SQLite file when nothing is configured.
"""

import os
from dataclasses import dataclass
from typing import List

from dotenv import load_dotenv

load_dotenv(override=False)

# TLS modes for the store connection.
SSL_DISABLED = "disabled"
SSL_REQUIRED = "required"
SSL_VERIFY = "verify"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Task List API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    server_host: str = os.getenv("SERVER_HOST", "0.0.0.0")
    server_port: int = int(os.getenv("SERVER_PORT", "4000"))

    # Full SQLAlchemy URL.  When set it wins over the individual
    # ``DB_*`` variables below.
    database_url: str = os.getenv("DATABASE_URL", "")

    # MySQL coordinates.  Used only when ``DB_HOST`` is set and
    # ``DATABASE_URL`` is not.
    db_host: str = os.getenv("DB_HOST", "")
    db_port: int = int(os.getenv("DB_PORT", "3306"))
    db_user: str = os.getenv("DB_USER", "")
    db_password: str = os.getenv("DB_PASSWORD", "")
    db_name: str = os.getenv("DB_NAME", "")

    # One of ``disabled``, ``required`` (encrypt, do not verify the
    # server certificate) or ``verify``.
    db_ssl: str = os.getenv("DB_SSL", SSL_DISABLED).lower()

    db_pool_size: int = int(os.getenv("DB_POOL_SIZE", "10"))
    db_pool_timeout: float = float(os.getenv("DB_POOL_TIMEOUT", "30"))

    # Comma‑separated list of origins allowed by CORS.  ``*`` allows
    # any origin; an empty value disables the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "")

    @property
    def cors_origin_list(self) -> List[str]:
        """Return ``cors_origins`` split into a list of non-empty entries."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
