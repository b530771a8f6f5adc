"""
Gate check.

A single comparison of the operator-entered secret against the configured
one. There is exactly one attempt per run.
"""

from __future__ import annotations

import hmac

from eventadmin.domain.errors import ConfigurationError

from .models import GateOutcome

SECRET_ENV_VAR = "SUPER_ADMIN_PASSWORD"


def require_secret(configured: str | None) -> str:
    """Return the configured secret or fail before any prompt is shown."""
    if not configured:
        raise ConfigurationError(f"{SECRET_ENV_VAR} must be set in your .env file.")
    return configured


def check_gate(configured: str, entered: str) -> GateOutcome:
    """Grant access iff `entered == configured`."""
    granted = hmac.compare_digest(configured.encode("utf-8"), entered.encode("utf-8"))
    return GateOutcome(granted=granted)
