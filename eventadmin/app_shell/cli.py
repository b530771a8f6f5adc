import argparse
import os
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from eventadmin.adapters.sqlite.repos import SQLiteUserStore
from eventadmin.app_shell import admin_tool
from eventadmin.app_shell.config import AdminToolConfig, configure_logging, load_config
from eventadmin.components.envgen import DatabaseSettings, build_database_url, write_env_file
from eventadmin.domain.errors import ConfigurationError, StoreError
from eventadmin.rules.loader import load_rules


def handle_generate_env(args: argparse.Namespace) -> int:
    try:
        url = build_database_url(DatabaseSettings.from_env(os.environ))
    except ConfigurationError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1

    write_env_file(Path(args.env_file), url)
    print(f"DATABASE_URL updated in {args.env_file}")
    return 0


def handle_db_check(config: AdminToolConfig) -> int:
    try:
        store = SQLiteUserStore.from_url(config.database_url)
    except ConfigurationError as e:
        print("❌ Database check failed.", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 1

    try:
        store.connect(migrate=False)
        result = store.ping()
        print("✅ Database connection is healthy.")
        print(result)
        return 0
    except StoreError as e:
        print("❌ Database check failed.", file=sys.stderr)
        print(str(e), file=sys.stderr)
        return 1
    finally:
        store.close()


def handle_migrate(config: AdminToolConfig) -> int:
    try:
        store = SQLiteUserStore.from_url(config.database_url)
    except ConfigurationError as e:
        print(f"❌ Migration failed: {e}", file=sys.stderr)
        return 1

    try:
        store.connect(migrate=False)
        applied = store.migrate()
    except StoreError as e:
        print(f"❌ Migration failed: {e}", file=sys.stderr)
        return 1
    finally:
        store.close()

    for filename in applied:
        print(f"Applied migration: {filename}")
    print("All migrations applied.")
    return 0


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))

    parser = argparse.ArgumentParser(description="Event platform admin utilities")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # create-admin
    subparsers.add_parser("create-admin", help="Interactive super-admin console")

    # generate-env
    env_parser = subparsers.add_parser(
        "generate-env", help="Write DATABASE_URL into .env from DB_* variables"
    )
    env_parser.add_argument("--env-file", default=".env", help="Path to the .env file")

    # db-check
    subparsers.add_parser("db-check", help="Check the database connection")

    # migrate
    subparsers.add_parser("migrate", help="Apply pending database migrations")

    args = parser.parse_args(argv)

    if args.command == "generate-env":
        return handle_generate_env(args)

    try:
        rules = load_rules()
        config = load_config(rules)
    except (ConfigurationError, ValueError) as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return 1
    configure_logging(config.log_level)

    if args.command == "create-admin":
        return admin_tool.run(config, rules)
    if args.command == "db-check":
        return handle_db_check(config)
    if args.command == "migrate":
        return handle_migrate(config)
    parser.error(f"Unknown command: {args.command}")
    return 2


if __name__ == "__main__":
    sys.exit(main())
