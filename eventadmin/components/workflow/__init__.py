"""Confirmation workflow component: collects and confirms a new admin's details."""

from .component import (
    STEPS,
    ConfirmationWorkflow,
    prompt_validated,
    run_confirmation_workflow,
)
from .models import CredentialDraft, WorkflowState, WorkflowStep

__all__ = [
    # Entry points
    "run_confirmation_workflow",
    "prompt_validated",
    "ConfirmationWorkflow",
    "STEPS",
    # Models
    "CredentialDraft",
    "WorkflowState",
    "WorkflowStep",
]
