import logging
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Any
from uuid import UUID, uuid4

from eventadmin.adapters.clock import SystemClock
from eventadmin.adapters.sqlite.migrator import SQLiteMigrator
from eventadmin.components.workflow import CredentialDraft
from eventadmin.domain.entities import Account, User
from eventadmin.domain.errors import ConfigurationError, StoreError

logger = logging.getLogger(__name__)

SQLITE_URL_PREFIX = "sqlite:///"


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def sqlite_path_from_url(database_url: str) -> str:
    """Accept `sqlite:///path`, `:memory:` or a bare filesystem path."""
    if database_url.startswith(SQLITE_URL_PREFIX):
        path = database_url[len(SQLITE_URL_PREFIX) :]
    elif "://" in database_url:
        scheme = database_url.split("://", 1)[0]
        raise ConfigurationError(f"Unsupported DATABASE_URL scheme for this tool: {scheme}")
    else:
        path = database_url
    if not path:
        raise ConfigurationError("DATABASE_URL does not name a database file")
    return path


class SQLiteUserStore:
    """
    User store over one SQLite connection.

    The connection is opened by `connect()` (pending migrations are applied
    there) and released by `close()`; the shell scopes both.
    """

    def __init__(self, db_path: str, clock: Any = None):
        self.db_path = db_path
        self.clock = clock or SystemClock()
        self._conn: sqlite3.Connection | None = None

    @classmethod
    def from_url(cls, database_url: str, clock: Any = None) -> "SQLiteUserStore":
        return cls(sqlite_path_from_url(database_url), clock=clock)

    def connect(self, migrate: bool = True) -> "SQLiteUserStore":
        if self._conn is not None:
            return self
        try:
            if self.db_path != ":memory:":
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path)
            conn.row_factory = dict_factory
            conn.execute("PRAGMA foreign_keys = ON;")
        except (sqlite3.Error, OSError) as e:
            raise StoreError(f"Cannot open database {self.db_path}: {e}") from e

        self._conn = conn
        if migrate:
            self.migrate()
        return self

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StoreError("User store is not connected")
        return self._conn

    def migrate(self) -> list[str]:
        try:
            return SQLiteMigrator(self.conn).run_migrations()
        except RuntimeError as e:
            raise StoreError(str(e)) from e

    def ping(self) -> dict[str, Any]:
        try:
            row: dict[str, Any] = self.conn.execute("SELECT 1 AS ok").fetchone()
            return row
        except sqlite3.Error as e:
            raise StoreError(f"Database check failed: {e}") from e

    def find_user_by_email(self, email: str) -> User | None:
        try:
            row = self.conn.execute(
                "SELECT * FROM users WHERE email = ?", (email,)
            ).fetchone()
            if not row:
                return None
            return self._map_row_to_user(row)
        except sqlite3.Error as e:
            raise StoreError(f"User lookup failed: {e}") from e

    def create_admin_user(self, draft: CredentialDraft, password_hash: str) -> User:
        """Insert the user and its verified account in a single transaction."""
        now = self.clock.now_utc()
        user_id = uuid4()
        account = Account(
            id=uuid4(),
            user_id=user_id,
            password_hash=password_hash,
            email_verified=True,
            created_at=now,
        )
        user = User(
            id=user_id,
            email=draft.email,
            name=draft.name,
            role="ADMIN",
            cellphone_number=draft.cellphone_number,
            account=account,
            created_at=now,
            updated_at=now,
        )

        conn = self.conn
        try:
            conn.execute(
                """
                INSERT INTO users (
                    id, email, name, role, cellphone_number, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
                (
                    str(user.id),
                    user.email,
                    user.name,
                    user.role,
                    user.cellphone_number,
                    user.created_at.isoformat(),
                    user.updated_at.isoformat(),
                ),
            )
            conn.execute(
                """
                INSERT INTO accounts (
                    id, user_id, password_hash, email_verified, created_at
                ) VALUES (?, ?, ?, ?, ?)
            """,
                (
                    str(account.id),
                    str(user.id),
                    account.password_hash,
                    int(account.email_verified),
                    account.created_at.isoformat(),
                ),
            )
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise StoreError(f"Failed to create admin user {draft.email}: {e}") from e

        return user

    def _map_row_to_user(self, row: dict[str, Any]) -> User:
        account_row = self.conn.execute(
            "SELECT * FROM accounts WHERE user_id = ?", (row["id"],)
        ).fetchone()

        account = None
        if account_row:
            account = Account(
                id=UUID(account_row["id"]),
                user_id=UUID(account_row["user_id"]),
                password_hash=account_row["password_hash"],
                email_verified=bool(account_row["email_verified"]),
                created_at=datetime.fromisoformat(account_row["created_at"]),
            )

        return User(
            id=UUID(row["id"]),
            email=row["email"],
            name=row["name"],
            role=row["role"],
            cellphone_number=row["cellphone_number"],
            account=account,
            created_at=datetime.fromisoformat(row["created_at"]),
            updated_at=datetime.fromisoformat(row["updated_at"]),
        )
