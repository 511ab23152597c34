"""Shared helpers for the DB tests."""

from __future__ import annotations

import tempfile
from pathlib import Path

from claude_config.db.database import Database


def make_db() -> Database:
    """Return an initialised Database backed by a fresh temporary file."""
    tmp = tempfile.NamedTemporaryFile(suffix=".db", delete=False)
    tmp.close()
    db = Database(path=Path(tmp.name))
    db.init()
    return db


def insert_account(db: Database, name: str = "work", **overrides) -> int:
    values = dict(token="sk-ant-REDACTED", base_url="https://api.anthropic.com")
    values.update(overrides)
    cols = ["name", *values]
    with db.transaction() as conn:
        cursor = conn.execute(
            f"INSERT INTO accounts ({', '.join(cols)}) VALUES ({', '.join('?' * len(cols))})",
            (name, *values.values()),
        )
    return cursor.lastrowid


def insert_directory(db: Database, path: str = "/tmp/project", name: str = "project", **overrides) -> int:
    values = dict(path=path, name=name)
    values.update(overrides)
    with db.transaction() as conn:
        cursor = conn.execute(
            f"INSERT INTO directories ({', '.join(values)}) VALUES ({', '.join('?' * len(values))})",
            tuple(values.values()),
        )
    return cursor.lastrowid


def link(db: Database, account_id: int, directory_id: int) -> int:
    with db.transaction() as conn:
        cursor = conn.execute(
            "INSERT INTO account_directories (account_id, directory_id) VALUES (?, ?)",
            (account_id, directory_id),
        )
    return cursor.lastrowid


def insert_webdav(db: Database, name: str = "nas", **overrides) -> int:
    values = dict(url="https://dav.example.com", username="alice", password="hunter2-secret")
    values.update(overrides)
    cols = ["name", *values]
    with db.transaction() as conn:
        cursor = conn.execute(
            f"INSERT INTO webdav_configs ({', '.join(cols)}) VALUES ({', '.join('?' * len(cols))})",
            (name, *values.values()),
        )
    return cursor.lastrowid


def insert_sync_log(db: Database, config_id: int, sync_type: str = "upload",
                    status: str = "success", message: str | None = None, **overrides) -> int:
    values = dict(webdav_config_id=config_id, sync_type=sync_type, status=status, message=message)
    values.update(overrides)
    with db.transaction() as conn:
        cursor = conn.execute(
            f"INSERT INTO sync_logs ({', '.join(values)}) VALUES ({', '.join('?' * len(values))})",
            tuple(values.values()),
        )
    return cursor.lastrowid
