"""Admin user component data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eventadmin.domain.entities import User

DUPLICATE_EMAIL_MESSAGE = "User with this email already exists."


@dataclass(frozen=True)
class CreateAdminOutput:
    """Result of the create-admin persistence call."""

    user: User | None
    created: bool
    error: str | None

    @classmethod
    def created_user(cls, user: User) -> CreateAdminOutput:
        return cls(user=user, created=True, error=None)

    @classmethod
    def conflict(cls) -> CreateAdminOutput:
        return cls(user=None, created=False, error=DUPLICATE_EMAIL_MESSAGE)
