"""Confirmation workflow data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class WorkflowState(str, Enum):
    """Linear states of the admin-creation conversation."""

    AWAIT_EMAIL = "await_email"
    AWAIT_EMAIL_CONFIRM = "await_email_confirm"
    AWAIT_NAME = "await_name"
    AWAIT_PASSWORD = "await_password"
    AWAIT_PASSWORD_CONFIRM = "await_password_confirm"
    AWAIT_PHONE = "await_phone"
    AWAIT_PHONE_CONFIRM = "await_phone_confirm"
    READY_TO_PERSIST = "ready_to_persist"


@dataclass(frozen=True)
class WorkflowStep:
    """
    One prompt of the workflow.

    A primary step validates with a named rule and captures `field`.
    A confirmation step (`confirms` set) must equal the captured value of
    that field and captures nothing.
    """

    state: WorkflowState
    prompt: str
    field: str | None = None
    rule: str | None = None
    confirms: str | None = None
    mismatch_message: str | None = None
    masked: bool = False


@dataclass(frozen=True)
class CredentialDraft:
    """Fields collected from the operator; lives only for one workflow run."""

    email: str
    name: str
    password: str
    cellphone_number: str

    def __repr__(self) -> str:
        return (
            f"CredentialDraft(email={self.email!r}, name={self.name!r}, "
            f"password='***', cellphone_number={self.cellphone_number!r})"
        )
