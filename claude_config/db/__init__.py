"""Database layer: SQLite schema initialisation and read-only inspection."""

from claude_config.db.database import Database, SchemaMismatchError, get_db, reset_db
from claude_config.db.schema import SCHEMA_DDL, SEED_BASE_URLS, TABLES

__all__ = [
    "Database", "SchemaMismatchError", "get_db", "reset_db",
    "SCHEMA_DDL", "SEED_BASE_URLS", "TABLES",
]
