from unittest.mock import MagicMock

import pytest

from eventadmin.components.admin_users import DUPLICATE_EMAIL_MESSAGE, run_create_admin
from eventadmin.components.workflow import CredentialDraft
from eventadmin.domain.entities import Account, User
from eventadmin.domain.errors import StoreError


@pytest.fixture
def draft():
    return CredentialDraft(
        email="a@b.com",
        name="Jane Doe",
        password="Abcdefghi1",
        cellphone_number="+27721234567",
    )


@pytest.fixture
def mock_hasher():
    hasher = MagicMock()
    hasher.hash_password.return_value = "hashed_password"
    return hasher


def _admin_from(draft, password_hash):
    user = User(email=draft.email, name=draft.name, role="ADMIN",
                cellphone_number=draft.cellphone_number)
    user.account = Account(user_id=user.id, password_hash=password_hash, email_verified=True)
    return user


def test_creates_admin_when_email_free(draft, mock_hasher):
    store = MagicMock()
    store.find_user_by_email.return_value = None
    store.create_admin_user.side_effect = _admin_from

    result = run_create_admin(draft, store, mock_hasher)

    assert result.created is True
    assert result.error is None
    assert result.user.role == "ADMIN"
    assert result.user.account.email_verified is True
    store.find_user_by_email.assert_called_once_with("a@b.com")
    mock_hasher.hash_password.assert_called_once_with("Abcdefghi1")
    store.create_admin_user.assert_called_once_with(draft, "hashed_password")


def test_existing_email_is_a_conflict(draft, mock_hasher):
    store = MagicMock()
    store.find_user_by_email.return_value = MagicMock()

    result = run_create_admin(draft, store, mock_hasher)

    assert result.created is False
    assert result.user is None
    assert result.error == DUPLICATE_EMAIL_MESSAGE
    store.create_admin_user.assert_not_called()
    mock_hasher.hash_password.assert_not_called()


def test_store_errors_propagate(draft, mock_hasher):
    store = MagicMock()
    store.find_user_by_email.side_effect = StoreError("database is locked")

    with pytest.raises(StoreError):
        run_create_admin(draft, store, mock_hasher)
    store.create_admin_user.assert_not_called()
