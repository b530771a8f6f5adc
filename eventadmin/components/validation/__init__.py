"""Validation component: named field rules and the confirmation equality rule."""

from .component import (
    CELLPHONE_FORMAT_MESSAGE,
    PASSWORD_POLICY_MESSAGE,
    RULES,
    get_rule,
    validate,
    validate_equals,
)
from .models import Check, ValidationResult, ValidationRule

__all__ = [
    # Entry points
    "validate",
    "validate_equals",
    "get_rule",
    "RULES",
    # Messages
    "CELLPHONE_FORMAT_MESSAGE",
    "PASSWORD_POLICY_MESSAGE",
    # Models
    "Check",
    "ValidationResult",
    "ValidationRule",
]
