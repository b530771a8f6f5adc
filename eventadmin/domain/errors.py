"""
Error taxonomy for the admin tooling.

Validation failures and duplicate-email conflicts are reported as result
values by the components; only conditions that end the current invocation
are raised.
"""

from __future__ import annotations


class AdminToolError(Exception):
    """Base class for fatal admin tool errors."""


class ConfigurationError(AdminToolError):
    """Required configuration is missing or malformed."""


class StoreError(AdminToolError):
    """The user store is unreachable or rejected an operation."""
