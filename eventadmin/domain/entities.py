from datetime import UTC, datetime
from typing import Literal
from uuid import UUID, uuid4

from pydantic import BaseModel, Field

# --- Enums / Literals ---
RoleType = Literal["ADMIN", "ORGANIZER", "ATTENDEE"]

# --- User & Account ---


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Account(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    user_id: UUID
    password_hash: str
    email_verified: bool = False
    created_at: datetime = Field(default_factory=_utcnow)


class User(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    email: str
    name: str
    role: RoleType = "ATTENDEE"
    cellphone_number: str | None = None
    account: Account | None = None
    created_at: datetime = Field(default_factory=_utcnow)
    updated_at: datetime = Field(default_factory=_utcnow)
