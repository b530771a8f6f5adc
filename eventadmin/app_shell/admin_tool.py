"""
Interactive admin bootstrap tool.

    gate check -> menu loop -> confirmation workflow -> create admin -> report

No flags: everything is asked at the terminal. Configuration comes from the
environment (and `.env`).
"""

from __future__ import annotations

import logging
import sys

from dotenv import find_dotenv, load_dotenv

from eventadmin.adapters.terminal import StdioTerminal
from eventadmin.app_shell.config import AdminToolConfig, configure_logging, load_config
from eventadmin.app_shell.context import AdminToolContext, open_context
from eventadmin.components.admin_users import (
    ConnectedUserStorePort,
    CreateAdminOutput,
    run_create_admin,
)
from eventadmin.components.gate import check_gate, require_secret
from eventadmin.components.prompt import TerminalPort
from eventadmin.components.workflow import run_confirmation_workflow
from eventadmin.domain.errors import AdminToolError, ConfigurationError
from eventadmin.rules.loader import load_rules
from eventadmin.rules.models import Rules

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

MENU_CREATE_ADMIN = "1"
MENU_EXIT = "2"


def create_admin(ctx: AdminToolContext) -> CreateAdminOutput:
    ctx.prompt.say("\n=== Create New Admin User ===\n")

    draft = run_confirmation_workflow(ctx.prompt)
    result = run_create_admin(draft, ctx.user_store, ctx.hasher)

    if not result.created:
        ctx.prompt.warn(f"\n❌ Error: {result.error}")
        return result

    user = result.user
    assert user is not None
    ctx.prompt.say("\n✅ Admin user created successfully!")
    ctx.prompt.say(f"📧 Email: {user.email}")
    ctx.prompt.say(f"👤 Name: {user.name}")
    ctx.prompt.say(f"📱 Phone: {user.cellphone_number}")
    return result


def show_menu(ctx: AdminToolContext) -> None:
    menu = ctx.rules.menu
    while True:
        ctx.prompt.say(f"\n--- {menu.title} ---")
        ctx.prompt.say(f"[{MENU_CREATE_ADMIN}] {menu.create_admin_label}")
        ctx.prompt.say(f"[{MENU_EXIT}] {menu.exit_label}")
        choice = ctx.prompt.read_line("Select an option: ")

        if choice == MENU_CREATE_ADMIN:
            create_admin(ctx)
        elif choice == MENU_EXIT:
            return
        else:
            ctx.prompt.warn("❌ Invalid option. Please try again.")


def run_session(ctx: AdminToolContext, secret: str) -> int:
    """One gate attempt, then the menu loop."""
    entered = ctx.prompt.read_secret("Enter Super Admin Password: ")
    outcome = check_gate(secret, entered)
    if not outcome.granted:
        logger.warning("Super admin gate check failed")
        ctx.prompt.warn(outcome.message)
        return EXIT_FAILURE

    ctx.prompt.say(f"\n{outcome.message}")
    show_menu(ctx)
    return EXIT_OK


def run(
    config: AdminToolConfig,
    rules: Rules,
    terminal: TerminalPort | None = None,
    user_store: ConnectedUserStorePort | None = None,
) -> int:
    terminal = terminal or StdioTerminal()

    try:
        # Checked before the store is opened or any prompt is written.
        secret = require_secret(config.secret())
        with open_context(config, rules, terminal=terminal, user_store=user_store) as ctx:
            return run_session(ctx, secret)
    except ConfigurationError as e:
        terminal.write_error(f"❌ Error: {e}\n")
        return EXIT_FAILURE
    except KeyboardInterrupt:
        terminal.write_error("\nInterrupted.\n")
        return EXIT_INTERRUPTED
    except EOFError:
        terminal.write_error("\n❌ Error: input closed.\n")
        return EXIT_FAILURE
    except AdminToolError as e:
        logger.exception("Admin tool failed")
        terminal.write_error(f"\n❌ Error: {e}\n")
        return EXIT_FAILURE
    except Exception as e:
        logger.exception("Unhandled error in admin tool")
        terminal.write_error(f"\n❌ Error: {e}\n")
        return EXIT_FAILURE
    finally:
        terminal.close()


def main() -> int:
    load_dotenv(find_dotenv(usecwd=True))
    try:
        rules = load_rules()
        config = load_config(rules)
    except (ConfigurationError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return EXIT_FAILURE

    configure_logging(config.log_level)
    return run(config, rules)


if __name__ == "__main__":
    raise SystemExit(main())
