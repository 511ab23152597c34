#!/usr/bin/env python3
"""Initialize the database and optionally seed extra base URLs from a YAML file."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from claude_config.config import configure_logging
from claude_config.db.database import Database
from claude_config.db.queries import table_counts


def main() -> None:
    parser = argparse.ArgumentParser(description="Initialize the database")
    parser.add_argument("--seed-base-urls", type=str, help="YAML file with base URL definitions")
    parser.add_argument("--db-path", type=str, help="Override database path")
    args = parser.parse_args()

    configure_logging()

    db_path = Path(args.db_path) if args.db_path else None
    db = Database(path=db_path)
    try:
        db.init()
        print(f"Database initialized at: {db.path}")

        if args.seed_base_urls:
            _seed_base_urls(db, Path(args.seed_base_urls))

        for table, count in table_counts(db).items():
            print(f"  {table:<20} {count}")
    finally:
        db.close()
    print("Done.")


def _seed_base_urls(db: Database, path: Path) -> None:
    import yaml
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    entries = data.get("base_urls") or []
    inserted = db.seed_base_urls(entries)
    print(f"  Seeded {inserted} of {len(entries)} base URL(s) from {path}")


if __name__ == "__main__":
    main()
