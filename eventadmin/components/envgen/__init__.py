"""Env generator component: DATABASE_URL construction and .env rewriting."""

from .component import (
    DATABASE_URL_KEY,
    build_database_url,
    render_env_file,
    write_env_file,
)
from .models import DB_ENV_VARS, DatabaseSettings

__all__ = [
    "build_database_url",
    "render_env_file",
    "write_env_file",
    "DATABASE_URL_KEY",
    "DB_ENV_VARS",
    "DatabaseSettings",
]
