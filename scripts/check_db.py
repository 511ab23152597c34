#!/usr/bin/env python3
"""Quick check of database state."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from claude_config.config import configure_logging
from claude_config.db.database import Database
from claude_config.db import queries
from claude_config.utils.redact import redact


def main() -> None:
    parser = argparse.ArgumentParser(description="Show database state")
    parser.add_argument("--db-path", type=str, help="Override database path")
    parser.add_argument("--logs", type=int, default=10, help="Number of sync logs to show")
    args = parser.parse_args()

    configure_logging()

    db = Database(path=Path(args.db_path) if args.db_path else None)
    try:
        db.init()
        _report(db, args.logs)
    finally:
        db.close()


def _report(db: Database, log_limit: int) -> None:
    print(f"=== {db.path} ===")
    for table, count in queries.table_counts(db).items():
        print(f"  {table:<20} {count}")

    print("\n=== Base URLs ===")
    for b in queries.list_base_urls(db):
        marker = "*" if b.is_default else " "
        print(f"  {marker} {b.name:<24} {b.url}")

    print("\n=== Active account ===")
    account = queries.active_account(db)
    if account:
        print(redact(f"  {account.name} | {account.base_url} | {account.model} | token {account.masked_token}"))
        for d in queries.directories_for_account(db, account.id):  # type: ignore[arg-type]
            state = "exists" if d.exists() else "missing"
            print(f"    -> {d.name:<20} {d.path} ({state})")
    else:
        print("  (none)")

    print("\n=== Active WebDAV config ===")
    webdav = queries.active_webdav_config(db)
    if webdav:
        auto = f"every {webdav.sync_interval}s" if webdav.auto_sync else "manual"
        print(redact(f"  {webdav.name} | {webdav.remote_url} | {webdav.username} | {auto}"))
        print(f"  last sync: {webdav.last_sync_at or 'never'}")
    else:
        print("  (none)")

    print("\n=== Recent sync logs ===")
    logs = queries.recent_sync_logs(db, limit=log_limit)
    if not logs:
        print("  (none)")
    for log in logs:
        print(redact(f"  {log.synced_at} | {log.sync_type.value:<8} | {log.status.value:<7} | {log.message or ''}"))


if __name__ == "__main__":
    main()
