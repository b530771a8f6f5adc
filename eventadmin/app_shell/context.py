from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass

from eventadmin.adapters.auth.crypto import Argon2PasswordHasher
from eventadmin.adapters.sqlite.repos import SQLiteUserStore
from eventadmin.adapters.terminal import StdioTerminal
from eventadmin.app_shell.config import AdminToolConfig
from eventadmin.components.admin_users import ConnectedUserStorePort
from eventadmin.components.prompt import PromptEngine, TerminalPort
from eventadmin.rules.models import Rules

logger = logging.getLogger(__name__)


@dataclass
class AdminToolContext:
    """Everything one run of the admin tool needs, constructed explicitly."""

    config: AdminToolConfig
    rules: Rules
    terminal: TerminalPort
    prompt: PromptEngine
    user_store: ConnectedUserStorePort
    hasher: Argon2PasswordHasher

    @classmethod
    def create(
        cls,
        config: AdminToolConfig,
        rules: Rules,
        terminal: TerminalPort | None = None,
        user_store: ConnectedUserStorePort | None = None,
    ) -> AdminToolContext:
        terminal = terminal or StdioTerminal()
        hashing = rules.auth.password_hashing
        return cls(
            config=config,
            rules=rules,
            terminal=terminal,
            prompt=PromptEngine(terminal),
            user_store=user_store or SQLiteUserStore.from_url(config.database_url),
            hasher=Argon2PasswordHasher(
                work_factor=config.work_factor,
                memory_cost=hashing.memory_cost,
                parallelism=hashing.parallelism,
                hash_len=hashing.hash_len,
            ),
        )


@contextmanager
def open_context(
    config: AdminToolConfig,
    rules: Rules,
    terminal: TerminalPort | None = None,
    user_store: ConnectedUserStorePort | None = None,
) -> Iterator[AdminToolContext]:
    """
    Open the store connection and input stream together.

    Both are released on every exit path, including errors and interrupts.
    """
    ctx = AdminToolContext.create(config, rules, terminal=terminal, user_store=user_store)
    try:
        ctx.user_store.connect()
        yield ctx
    finally:
        try:
            ctx.terminal.close()
        finally:
            ctx.user_store.close()
            logger.debug("Admin tool context closed")
