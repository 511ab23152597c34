#!/usr/bin/env python3
"""Write an account's credentials into a project directory's Claude settings."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from claude_config.claude_settings import apply_account
from claude_config.config import configure_logging
from claude_config.db.database import Database
from claude_config.db import queries
from claude_config.models import Directory
from claude_config.utils.redact import redact

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Switch a directory to an account")
    parser.add_argument("account", help="Account name")
    parser.add_argument("directory", help="Project directory path")
    parser.add_argument("--sandbox", action="store_true", help="Also set IS_SANDBOX=1")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    configure_logging()

    db = Database(path=Path(args.db_path) if args.db_path else None)
    try:
        db.init()
        account = queries.get_account_by_name(db, args.account)
        if account is None:
            print(f"Unknown account: {args.account}", file=sys.stderr)
            return 1

        path = str(Path(args.directory).expanduser().resolve())
        directory = queries.get_directory_by_path(db, path)
        if directory is None:
            logger.info(f"{path} is not registered; writing settings anyway")
            directory = Directory(path=path, name=Path(path).name)

        try:
            apply_account(account, directory, is_sandbox=args.sandbox)
        except FileNotFoundError as e:
            print(str(e), file=sys.stderr)
            return 1
        print(redact(f"Switched {directory.path} to '{account.name}' ({account.base_url})"))
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
