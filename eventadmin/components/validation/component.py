"""
Validation component.

A static table of named rules (email, name, password, cellphone) plus the
ad hoc equality rule used by confirmation prompts. Rules are pure: they
never mutate the candidate and return either the accepted value or every
reason it was rejected.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from types import MappingProxyType

from email_validator import EmailNotValidError, validate_email

from .models import Check, ValidationResult, ValidationRule

PASSWORD_MIN_LENGTH = 10
PASSWORD_PATTERN = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d).{10,}$", re.ASCII)
PASSWORD_POLICY_MESSAGE = (
    "Password must be at least 10 characters long and include at least one "
    "uppercase letter, one lowercase letter, and one digit."
)

CELLPHONE_PATTERN = re.compile(r"^\+[1-9]\d{1,14}$", re.ASCII)
CELLPHONE_FORMAT_MESSAGE = (
    "Cellphone number must be in international format (e.g., +27721234567)."
)

NAME_MIN_LENGTH = 2


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def _min_length(n: int) -> Callable[[str], bool]:
    return lambda value: len(value) >= n


def _matches(pattern: re.Pattern[str]) -> Callable[[str], bool]:
    # fullmatch so a trailing newline can never satisfy a `$` anchor
    return lambda value: pattern.fullmatch(value) is not None


def _build_rules() -> MappingProxyType[str, ValidationRule]:
    rules = [
        ValidationRule(
            name="email",
            label="Email",
            checks=(Check(_is_email, "Email must be a valid email"),),
        ),
        ValidationRule(
            name="name",
            label="Full Name",
            checks=(
                Check(
                    _min_length(NAME_MIN_LENGTH),
                    f"Full Name length must be at least {NAME_MIN_LENGTH} characters long",
                ),
            ),
        ),
        # The length check duplicates what the pattern already encodes. Both stay
        # so the two can diverge without silently changing acceptance.
        ValidationRule(
            name="password",
            label="Password",
            checks=(
                Check(
                    _min_length(PASSWORD_MIN_LENGTH),
                    f"Password length must be at least {PASSWORD_MIN_LENGTH} characters long",
                ),
                Check(_matches(PASSWORD_PATTERN), PASSWORD_POLICY_MESSAGE),
            ),
        ),
        ValidationRule(
            name="cellphone",
            label="Cellphone Number",
            checks=(Check(_matches(CELLPHONE_PATTERN), CELLPHONE_FORMAT_MESSAGE),),
        ),
    ]
    return MappingProxyType({rule.name: rule for rule in rules})


RULES = _build_rules()


def get_rule(rule_name: str) -> ValidationRule:
    try:
        return RULES[rule_name]
    except KeyError:
        raise ValueError(f"Unknown validation rule: {rule_name}") from None


def validate(candidate: str, rule_name: str) -> ValidationResult:
    """
    Validate a candidate string against a named rule.

    Empty input is reported once as "<label> is required"; otherwise every
    failing check contributes its message, in table order.
    """
    rule = get_rule(rule_name)

    if not candidate:
        return ValidationResult.rejected(f"{rule.label} is required")

    reasons = [check.message for check in rule.checks if not check.predicate(candidate)]
    if reasons:
        return ValidationResult.rejected(*reasons)
    return ValidationResult.accepted(candidate)


def validate_equals(candidate: str, expected: str, message: str) -> ValidationResult:
    """Exact, case-sensitive equality against a previously captured value."""
    if candidate != expected:
        return ValidationResult.rejected(message)
    return ValidationResult.accepted(candidate)
