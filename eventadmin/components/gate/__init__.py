"""Gate check component: one-shot shared-secret comparison."""

from .component import SECRET_ENV_VAR, check_gate, require_secret
from .models import GateOutcome

__all__ = [
    "check_gate",
    "require_secret",
    "SECRET_ENV_VAR",
    "GateOutcome",
]
