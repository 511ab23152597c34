"""Core database connection with ACID transaction support."""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Generator, Iterable, Mapping, Optional

from claude_config.db.schema import (
    EXPECTED_COLUMNS,
    INSERT_BASE_URL_SQL,
    SCHEMA_DDL,
    SEED_BASE_URLS,
)

logger = logging.getLogger(__name__)

MEMORY = ":memory:"


class SchemaMismatchError(RuntimeError):
    """A table exists under an expected name but lacks expected columns."""

    def __init__(self, table: str, missing: Iterable[str]):
        self.table = table
        self.missing = sorted(missing)
        super().__init__(
            f"Table '{table}' exists with an incompatible structure "
            f"(missing columns: {', '.join(self.missing)})"
        )


class Database:
    """
    SQLite database wrapper with explicit ACID transaction support.

    Every mutation goes through ``transaction()``, which commits on success
    and rolls back on failure.  ``init()`` brings the file to the expected
    schema and is safe to call on every launch.
    """

    def __init__(self, path: Optional[Path | str] = None):
        from claude_config.config import get_db_path
        if path is None:
            self.path: Path = get_db_path()
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self._conn: Optional[sqlite3.Connection] = None

    # -- connection lifecycle --------------------------------------------------

    @property
    def in_memory(self) -> bool:
        return str(self.path) == MEMORY

    def _ensure_dir(self) -> None:
        if not self.in_memory:
            self.path.parent.mkdir(parents=True, exist_ok=True)

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._ensure_dir()
            self._conn = sqlite3.connect(str(self.path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA foreign_keys = ON")
            if not self.in_memory:
                self._conn.execute("PRAGMA journal_mode = WAL")
        return self._conn

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    def init(self) -> None:
        """Create all tables and seed the base URL catalogue (idempotent)."""
        conn = self.connection()
        logger.debug(f"Applying schema to {self.path}")
        conn.executescript(SCHEMA_DDL)
        self.verify_schema()
        with self.transaction() as tx:
            cursor = tx.executemany(INSERT_BASE_URL_SQL, SEED_BASE_URLS)
        if cursor.rowcount > 0:
            logger.info(f"Seeded {cursor.rowcount} base URL(s) into {self.path}")
        logger.info(f"Database ready at {self.path}")

    def verify_schema(self) -> None:
        """Raise ``SchemaMismatchError`` if a table lacks an expected column."""
        for table, expected in EXPECTED_COLUMNS.items():
            present = {col["name"] for col in self.table_info(table)}
            missing = set(expected) - present
            if missing:
                raise SchemaMismatchError(table, missing)

    def table_info(self, table: str) -> list[dict[str, Any]]:
        if table not in EXPECTED_COLUMNS:
            raise ValueError(f"Unknown table: {table}")
        return self.fetchall(f"PRAGMA table_info({table})")

    # -- seeding ---------------------------------------------------------------

    def seed_base_urls(self, entries: Iterable[Mapping[str, Any]]) -> int:
        """
        Insert extra base URL catalogue rows, skipping any whose name or URL
        is already present.  Returns the number of rows actually inserted.
        """
        params = [
            (
                entry["name"],
                entry["url"],
                entry.get("description"),
                1 if entry.get("is_default") else 0,
            )
            for entry in entries
        ]
        if not params:
            return 0
        with self.transaction() as conn:
            cursor = conn.executemany(INSERT_BASE_URL_SQL, params)
        inserted = max(cursor.rowcount, 0)
        logger.info(f"Seeded {inserted} of {len(params)} base URL(s)")
        return inserted

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """ACID transaction: commits on success, rolls back on exception."""
        conn = self.connection()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise

    # -- low-level query helpers -----------------------------------------------

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        return self.connection().execute(sql, params)

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        row = self.connection().execute(sql, params).fetchone()
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        rows = self.connection().execute(sql, params).fetchall()
        return [dict(r) for r in rows]


# -- module singleton ----------------------------------------------------------

_default_db: Optional[Database] = None


def get_db(path: Optional[Path] = None) -> Database:
    """Return (and lazily initialise) the module-level Database singleton."""
    global _default_db
    if _default_db is None:
        _default_db = Database(path)
        _default_db.init()
    return _default_db


def reset_db() -> None:
    """Close and discard the singleton (useful in tests)."""
    global _default_db
    if _default_db is not None:
        _default_db.close()
        _default_db = None
