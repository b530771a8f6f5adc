"""
Env generator.

Builds a DATABASE_URL from the DB_* environment variables and writes it
into a `.env` file, replacing any previous DATABASE_URL line and keeping
every other line in place.
"""

from __future__ import annotations

import logging
from pathlib import Path
from urllib.parse import quote

from eventadmin.domain.errors import ConfigurationError

from .models import DB_ENV_VARS, DatabaseSettings

logger = logging.getLogger(__name__)

DATABASE_URL_KEY = "DATABASE_URL"

_FIELD_BY_VAR = {
    "DB_SERVER_NAME": "server_name",
    "DB_SERVER": "server",
    "DB_PORT": "port",
    "DB_NAME": "name",
    "DB_USER": "user",
    "DB_PASS": "password",
}


def _enc(value: str | None) -> str:
    return quote(value or "", safe="")


def _require(settings: DatabaseSettings, names: tuple[str, ...]) -> None:
    missing = [n for n in names if not getattr(settings, _FIELD_BY_VAR[n])]
    if missing:
        raise ConfigurationError(
            f"Missing required DB environment variables ({', '.join(missing)})"
        )


def build_database_url(settings: DatabaseSettings) -> str:
    """Return the connection URL for the configured server type."""
    if settings.server_name and settings.server_name.lower() == "sqlite":
        _require(settings, ("DB_NAME",))
        return f"sqlite:///{settings.name}"

    _require(settings, DB_ENV_VARS)
    assert settings.server_name is not None

    user = _enc(settings.user)
    password = _enc(settings.password)
    server = _enc(settings.server)
    port = _enc(settings.port)
    name = _enc(settings.name)

    kind = settings.server_name.lower()
    if kind in ("postgresql", "postgres"):
        return f"postgresql://{user}:{password}@{server}:{port}/{name}?schema=public"
    if kind == "mysql":
        return f"mysql://{user}:{password}@{server}:{port}/{name}"
    if kind in ("sqlserver", "mssql"):
        return (
            f"sqlserver://{server}:{port};database={name};user={user};"
            f"password={password};trustServerCertificate=true"
        )
    raise ConfigurationError(f"Unsupported DB type: {settings.server_name}")


def render_env_file(existing: str, database_url: str) -> str:
    """Replace (or append) the DATABASE_URL line of an .env file's text."""
    lines = existing.split("\n")
    kept = [line for line in lines if not line.startswith(f"{DATABASE_URL_KEY}=")]

    if kept and kept[-1] == "":
        kept.pop()

    kept.append(f'{DATABASE_URL_KEY}="{database_url}"')
    return "\n".join(kept)


def write_env_file(path: Path, database_url: str) -> None:
    existing = path.read_text(encoding="utf-8") if path.exists() else ""
    path.write_text(render_env_file(existing, database_url), encoding="utf-8")
    logger.info("%s updated in %s", DATABASE_URL_KEY, path)
