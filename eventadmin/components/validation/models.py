"""Validation component data models."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

REASON_DELIMITER = ", "


@dataclass(frozen=True)
class Check:
    """A single predicate paired with the message shown when it fails."""

    predicate: Callable[[str], bool]
    message: str


@dataclass(frozen=True)
class ValidationRule:
    """Named rule: every check must pass for a candidate to be accepted."""

    name: str
    label: str
    checks: tuple[Check, ...]


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one candidate string."""

    value: str | None
    reasons: tuple[str, ...]

    @property
    def ok(self) -> bool:
        return not self.reasons

    @property
    def message(self) -> str:
        return REASON_DELIMITER.join(self.reasons)

    @classmethod
    def accepted(cls, value: str) -> ValidationResult:
        return cls(value=value, reasons=())

    @classmethod
    def rejected(cls, *reasons: str) -> ValidationResult:
        return cls(value=None, reasons=tuple(reasons))
