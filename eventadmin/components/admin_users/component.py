"""
Admin user creation.

Given a completed credential draft: check the store for an existing user
with the same email and, if there is none, hash the password and create an
ADMIN user whose email is marked verified. Store and hashing failures
propagate to the caller.
"""

from __future__ import annotations

import logging

from eventadmin.components.workflow import CredentialDraft

from .models import CreateAdminOutput
from .ports import PasswordHasherPort, UserStorePort

logger = logging.getLogger(__name__)


def run_create_admin(
    draft: CredentialDraft,
    user_store: UserStorePort,
    hasher: PasswordHasherPort,
) -> CreateAdminOutput:
    """
    Persist a new admin user from a validated draft.

    Args:
        draft: Completed draft from the confirmation workflow.
        user_store: Store used for the existence check and the create call.
        hasher: Password hasher configured with the work factor.

    Returns:
        CreateAdminOutput; `conflict()` when the email is already taken.
    """
    if user_store.find_user_by_email(draft.email) is not None:
        logger.info("Admin creation skipped, email already registered: %s", draft.email)
        return CreateAdminOutput.conflict()

    password_hash = hasher.hash_password(draft.password)
    user = user_store.create_admin_user(draft, password_hash)

    logger.info("Admin user created: id=%s email=%s", user.id, user.email)
    return CreateAdminOutput.created_user(user)
