import pytest

from eventadmin.components.prompt import PromptEngine
from eventadmin.components.validation import PASSWORD_POLICY_MESSAGE, validate
from eventadmin.components.workflow import (
    STEPS,
    ConfirmationWorkflow,
    CredentialDraft,
    WorkflowState,
    prompt_validated,
    run_confirmation_workflow,
)
from tests.conftest import FakeTerminal

VALID_ANSWERS = [
    "a@b.com",
    "a@b.com",
    "Jane Doe",
    "Abcdefghi1",
    "Abcdefghi1",
    "+27721234567",
    "+27721234567",
]


def test_states_follow_strict_order():
    workflow = ConfirmationWorkflow()
    visited = []
    for answer in VALID_ANSWERS:
        visited.append(workflow.state)
        assert workflow.submit(answer).ok
    assert visited == [step.state for step in STEPS]
    assert workflow.state is WorkflowState.READY_TO_PERSIST
    assert workflow.done


def test_completed_draft():
    workflow = ConfirmationWorkflow()
    for answer in VALID_ANSWERS:
        workflow.submit(answer)

    assert workflow.draft == CredentialDraft(
        email="a@b.com",
        name="Jane Doe",
        password="Abcdefghi1",
        cellphone_number="+27721234567",
    )


def test_rejection_does_not_advance_or_mutate():
    workflow = ConfirmationWorkflow()
    workflow.submit("a@b.com")
    before = workflow.captured

    for _ in range(3):
        result = workflow.submit("A@B.COM")
        assert not result.ok
        assert result.reasons == ("Emails do not match.",)
        assert workflow.state is WorkflowState.AWAIT_EMAIL_CONFIRM
        assert workflow.captured == before


@pytest.mark.parametrize(
    "prefix,bad,message",
    [
        (VALID_ANSWERS[:4], "Abcdefghi2", "Passwords do not match."),
        (VALID_ANSWERS[:6], "+27721234568", "Cellphone numbers do not match."),
    ],
)
def test_confirmation_mismatch_messages(prefix, bad, message):
    workflow = ConfirmationWorkflow()
    for answer in prefix:
        workflow.submit(answer)
    assert workflow.submit(bad).reasons == (message,)


def test_draft_unavailable_until_complete():
    workflow = ConfirmationWorkflow()
    workflow.submit("a@b.com")
    with pytest.raises(RuntimeError):
        _ = workflow.draft


def test_current_step_after_completion_is_an_error():
    workflow = ConfirmationWorkflow()
    for answer in VALID_ANSWERS:
        workflow.submit(answer)
    with pytest.raises(RuntimeError):
        _ = workflow.current_step


def test_draft_repr_hides_password():
    draft = CredentialDraft("a@b.com", "Jane", "Abcdefghi1", "+27721234567")
    assert "Abcdefghi1" not in repr(draft)


def test_password_steps_are_masked():
    masked = {step.state for step in STEPS if step.masked}
    assert masked == {WorkflowState.AWAIT_PASSWORD, WorkflowState.AWAIT_PASSWORD_CONFIRM}


class TestPromptValidated:
    def test_retries_until_valid(self):
        terminal = FakeTerminal(["x", "", "Jo"])
        engine = PromptEngine(terminal)

        value = prompt_validated(engine, "Name: ", lambda v: validate(v, "name"))

        assert value == "Jo"
        assert terminal.out.count("Name: ") == 3
        assert terminal.err[0].startswith("❌ Validation Error: ")
        assert "Full Name is required" in terminal.err[1]


class TestRunWorkflow:
    def test_happy_path(self):
        terminal = FakeTerminal(VALID_ANSWERS)
        draft = run_confirmation_workflow(PromptEngine(terminal))

        assert draft.email == "a@b.com"
        assert draft.cellphone_number == "+27721234567"
        assert "Abcdefghi1" not in terminal.stdout
        assert terminal.raw_entries == 2

    def test_short_password_reprompts(self):
        answers = VALID_ANSWERS[:3] + ["short1A", "short1A", *VALID_ANSWERS[3:]]
        terminal = FakeTerminal(answers)

        draft = run_confirmation_workflow(PromptEngine(terminal))

        assert draft.password == "Abcdefghi1"
        password_prompt = STEPS[3].prompt
        assert terminal.out.count(password_prompt) == 3
        policy_errors = [e for e in terminal.err if PASSWORD_POLICY_MESSAGE in e]
        assert len(policy_errors) == 2

    def test_input_is_trimmed_before_comparison(self):
        answers = ["  a@b.com ", "a@b.com", *VALID_ANSWERS[2:]]
        draft = run_confirmation_workflow(PromptEngine(FakeTerminal(answers)))
        assert draft.email == "a@b.com"
