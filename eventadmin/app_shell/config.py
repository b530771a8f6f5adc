"""
Runtime configuration for the admin tooling.

Values come from the process environment (optionally seeded from a `.env`
file by the entry points) with defaults taken from the rules file.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, SecretStr, ValidationError

from eventadmin.domain.errors import ConfigurationError
from eventadmin.rules.models import Rules

WORK_FACTOR_ENV_VARS = ("PASSWORD_HASH_ROUNDS", "BCRYPT_ROUNDS")


class AdminToolConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    super_admin_password: SecretStr | None = None
    work_factor: int = Field(default=10, ge=1)
    database_url: str
    log_level: str = "WARNING"

    def secret(self) -> str | None:
        if self.super_admin_password is None:
            return None
        return self.super_admin_password.get_secret_value()


def _first_set(environ: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = environ.get(name)
        if value not in (None, ""):
            return value
    return None


def load_config(rules: Rules, environ: Mapping[str, str] | None = None) -> AdminToolConfig:
    """
    Build the tool configuration.

    Raises ConfigurationError when a value is present but malformed. A missing
    SUPER_ADMIN_PASSWORD is not an error here; the gate check reports it.
    """
    env = os.environ if environ is None else environ

    data: dict[str, object] = {
        "super_admin_password": env.get("SUPER_ADMIN_PASSWORD") or None,
        "work_factor": _first_set(env, WORK_FACTOR_ENV_VARS)
        or rules.auth.password_hashing.default_work_factor,
        "database_url": env.get("DATABASE_URL") or rules.ops.default_database_url,
        "log_level": (env.get("LOG_LEVEL") or rules.ops.default_log_level).upper(),
    }

    try:
        config = AdminToolConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration:\n{e}") from e

    if not isinstance(logging.getLevelName(config.log_level), int):
        raise ConfigurationError(f"Unknown LOG_LEVEL: {config.log_level}")
    return config


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )
