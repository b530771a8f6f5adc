"""Env generator data models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

DB_ENV_VARS = ("DB_SERVER_NAME", "DB_SERVER", "DB_PORT", "DB_NAME", "DB_USER", "DB_PASS")


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection parts read from DB_* environment variables."""

    server_name: str | None = None
    server: str | None = None
    port: str | None = None
    name: str | None = None
    user: str | None = None
    password: str | None = None

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> DatabaseSettings:
        return cls(
            server_name=environ.get("DB_SERVER_NAME"),
            server=environ.get("DB_SERVER"),
            port=environ.get("DB_PORT"),
            name=environ.get("DB_NAME"),
            user=environ.get("DB_USER"),
            password=environ.get("DB_PASS"),
        )
