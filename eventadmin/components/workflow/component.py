"""
Confirmation workflow.

Drives the admin-creation conversation through a fixed, strictly linear
sequence of prompts:

    email -> confirm email -> name -> password -> confirm password
          -> phone -> confirm phone -> READY_TO_PERSIST

Each state loops on its own validation failure; there is no skipping and
no backward transition. A rejected input leaves both the state and the
draft untouched.
"""

from __future__ import annotations

from collections.abc import Callable

from eventadmin.components.prompt import PromptEngine
from eventadmin.components.validation import (
    PASSWORD_POLICY_MESSAGE,
    ValidationResult,
    validate,
    validate_equals,
)

from .models import CredentialDraft, WorkflowState, WorkflowStep

STEPS: tuple[WorkflowStep, ...] = (
    WorkflowStep(
        state=WorkflowState.AWAIT_EMAIL,
        prompt="Admin email: ",
        field="email",
        rule="email",
    ),
    WorkflowStep(
        state=WorkflowState.AWAIT_EMAIL_CONFIRM,
        prompt="Confirm admin email: ",
        confirms="email",
        mismatch_message="Emails do not match.",
    ),
    WorkflowStep(
        state=WorkflowState.AWAIT_NAME,
        prompt="Admin full name: ",
        field="name",
        rule="name",
    ),
    WorkflowStep(
        state=WorkflowState.AWAIT_PASSWORD,
        prompt=f"Admin password ({PASSWORD_POLICY_MESSAGE}): ",
        field="password",
        rule="password",
        masked=True,
    ),
    WorkflowStep(
        state=WorkflowState.AWAIT_PASSWORD_CONFIRM,
        prompt="Confirm admin password: ",
        confirms="password",
        mismatch_message="Passwords do not match.",
        masked=True,
    ),
    WorkflowStep(
        state=WorkflowState.AWAIT_PHONE,
        prompt="Admin cellphone number (e.g., +27721234567): ",
        field="cellphone_number",
        rule="cellphone",
    ),
    WorkflowStep(
        state=WorkflowState.AWAIT_PHONE_CONFIRM,
        prompt="Confirm admin cellphone number: ",
        confirms="cellphone_number",
        mismatch_message="Cellphone numbers do not match.",
    ),
)

_NEXT_STATE = {
    step.state: (STEPS[i + 1].state if i + 1 < len(STEPS) else WorkflowState.READY_TO_PERSIST)
    for i, step in enumerate(STEPS)
}
_STEP_BY_STATE = {step.state: step for step in STEPS}


class ConfirmationWorkflow:
    def __init__(self) -> None:
        self.state = WorkflowState.AWAIT_EMAIL
        self._captured: dict[str, str] = {}

    @property
    def done(self) -> bool:
        return self.state is WorkflowState.READY_TO_PERSIST

    @property
    def current_step(self) -> WorkflowStep:
        if self.done:
            raise RuntimeError("Workflow already complete")
        return _STEP_BY_STATE[self.state]

    @property
    def captured(self) -> dict[str, str]:
        return dict(self._captured)

    def submit(self, value: str) -> ValidationResult:
        """Validate one answer for the current state; advance only on success."""
        step = self.current_step

        if step.confirms is not None:
            result = validate_equals(
                value, self._captured[step.confirms], step.mismatch_message or ""
            )
        else:
            assert step.rule is not None and step.field is not None
            result = validate(value, step.rule)

        if not result.ok:
            return result

        if step.field is not None:
            self._captured[step.field] = value
        self.state = _NEXT_STATE[step.state]
        return result

    @property
    def draft(self) -> CredentialDraft:
        if not self.done:
            raise RuntimeError(f"Draft incomplete (state={self.state.value})")
        return CredentialDraft(**self._captured)


def prompt_validated(
    engine: PromptEngine,
    prompt: str,
    validator: Callable[[str], ValidationResult],
    *,
    masked: bool = False,
) -> str:
    """Ask the same question until the validator accepts the (trimmed) answer."""
    while True:
        raw = engine.read_secret(prompt) if masked else engine.read_line(prompt)
        result = validator(raw.strip())
        if result.ok:
            return result.value or ""
        engine.warn(f"❌ Validation Error: {result.message}\n")


def run_confirmation_workflow(engine: PromptEngine) -> CredentialDraft:
    """Run the full conversation and return the completed draft."""
    workflow = ConfirmationWorkflow()
    while not workflow.done:
        step = workflow.current_step
        prompt_validated(engine, step.prompt, workflow.submit, masked=step.masked)
    return workflow.draft
