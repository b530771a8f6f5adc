"""Gate check data models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GateOutcome:
    """Result of the single shared-secret comparison."""

    granted: bool

    @property
    def message(self) -> str:
        if self.granted:
            return "✅ Super Admin Authenticated."
        return "❌ Authentication failed. Exiting."
