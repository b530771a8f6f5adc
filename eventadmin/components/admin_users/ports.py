"""
Admin user component port definitions.

Protocol interfaces for the user store and password hashing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from eventadmin.components.workflow import CredentialDraft
    from eventadmin.domain.entities import User


class UserStorePort(Protocol):
    """User persistence, keyed by unique email."""

    def find_user_by_email(self, email: str) -> User | None:
        """Return the user with this email, or None."""
        ...

    def create_admin_user(self, draft: CredentialDraft, password_hash: str) -> User:
        """Create an ADMIN user with a pre-verified account in one atomic call."""
        ...


class ConnectedUserStorePort(UserStorePort, Protocol):
    """A user store whose connection is opened and released by the caller."""

    def connect(self) -> object:
        """Open the connection, applying pending migrations."""
        ...

    def close(self) -> None:
        """Release the connection. Safe to call more than once."""
        ...


class PasswordHasherPort(Protocol):
    """Password hashing with a configurable work factor."""

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password for storage."""
        ...
