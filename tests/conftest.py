from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

import pytest

from eventadmin.adapters.auth.crypto import Argon2PasswordHasher
from eventadmin.adapters.sqlite.repos import SQLiteUserStore
from eventadmin.app_shell.config import AdminToolConfig
from eventadmin.rules.loader import load_rules

GATE_SECRET = "Sup3rSecret!"


class FakeTerminal:
    """Scripted terminal: each scripted line is delivered for line or masked reads."""

    def __init__(self, lines: list[str] | None = None) -> None:
        self._input = "".join(f"{line}\n" for line in (lines or []))
        self._pos = 0
        self.out: list[str] = []
        self.err: list[str] = []
        self.raw = False
        self.raw_entries = 0
        self.closed = False

    def feed(self, text: str) -> None:
        self._input += text

    def write(self, text: str) -> None:
        self.out.append(text)

    def write_error(self, text: str) -> None:
        self.err.append(text)

    def read_line(self) -> str:
        if self._pos >= len(self._input):
            return ""
        end = self._input.find("\n", self._pos)
        end = len(self._input) if end == -1 else end + 1
        line = self._input[self._pos : end]
        self._pos = end
        return line

    def read_char(self) -> str:
        if self._pos >= len(self._input):
            return ""
        char = self._input[self._pos]
        self._pos += 1
        return char

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        self.raw = True
        self.raw_entries += 1
        try:
            yield
        finally:
            self.raw = False

    def close(self) -> None:
        self.closed = True

    @property
    def stdout(self) -> str:
        return "".join(self.out)

    @property
    def stderr(self) -> str:
        return "".join(self.err)


class FakeTime:
    def now_utc(self) -> datetime:
        return datetime(2026, 1, 12, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def rules():
    return load_rules()


@pytest.fixture
def config(tmp_path) -> AdminToolConfig:
    return AdminToolConfig(
        super_admin_password=GATE_SECRET,
        work_factor=1,
        database_url=f"sqlite:///{tmp_path / 'eventadmin.db'}",
    )


@pytest.fixture
def fast_hasher() -> Argon2PasswordHasher:
    return Argon2PasswordHasher(work_factor=1, memory_cost=1024, parallelism=1)


@pytest.fixture
def user_store(tmp_path) -> Iterator[SQLiteUserStore]:
    store = SQLiteUserStore(str(tmp_path / "users.db"), clock=FakeTime()).connect()
    try:
        yield store
    finally:
        store.close()
