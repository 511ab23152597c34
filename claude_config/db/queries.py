"""Read-only queries over the store, used at startup and by the scripts."""

from __future__ import annotations

import logging
from typing import Optional

from claude_config.db.database import Database
from claude_config.db.schema import TABLES
from claude_config.models import (
    Account,
    BaseUrl,
    Directory,
    SyncLog,
    WebdavConfig,
)

logger = logging.getLogger(__name__)


def table_counts(db: Database) -> dict[str, int]:
    return {
        table: db.fetchone(f"SELECT COUNT(*) AS n FROM {table}")["n"]  # type: ignore[index]
        for table in TABLES
    }


# -- base URLs -----------------------------------------------------------------

def list_base_urls(db: Database) -> list[BaseUrl]:
    """Catalogue entries, the default first, then alphabetical."""
    rows = db.fetchall("SELECT * FROM base_urls ORDER BY is_default DESC, name")
    return [BaseUrl.from_row(r) for r in rows]


def default_base_url(db: Database) -> Optional[BaseUrl]:
    row = db.fetchone(
        "SELECT * FROM base_urls WHERE is_default = 1 ORDER BY id LIMIT 1"
    )
    return BaseUrl.from_row(row) if row else None


# -- accounts & directories ----------------------------------------------------

def get_account_by_name(db: Database, name: str) -> Optional[Account]:
    row = db.fetchone("SELECT * FROM accounts WHERE name = ?", (name,))
    return Account.from_row(row) if row else None


def get_directory_by_path(db: Database, path: str) -> Optional[Directory]:
    row = db.fetchone("SELECT * FROM directories WHERE path = ?", (path,))
    return Directory.from_row(row) if row else None


def directories_for_account(db: Database, account_id: int) -> list[Directory]:
    rows = db.fetchall(
        """SELECT d.* FROM directories d
           JOIN account_directories ad ON ad.directory_id = d.id
           WHERE ad.account_id = ?
           ORDER BY d.name""",
        (account_id,),
    )
    return [Directory.from_row(r) for r in rows]


def active_account(db: Database) -> Optional[Account]:
    """
    The active account.  Nothing in the schema stops several rows from being
    flagged active; the most recently updated one wins.
    """
    rows = db.fetchall(
        "SELECT * FROM accounts WHERE is_active = 1 ORDER BY updated_at DESC, id DESC"
    )
    if not rows:
        return None
    if len(rows) > 1:
        logger.warning(
            f"{len(rows)} accounts are marked active; using '{rows[0]['name']}'"
        )
    return Account.from_row(rows[0])


# -- WebDAV --------------------------------------------------------------------

def active_webdav_config(db: Database) -> Optional[WebdavConfig]:
    rows = db.fetchall(
        "SELECT * FROM webdav_configs WHERE is_active = 1 ORDER BY updated_at DESC, id DESC"
    )
    if not rows:
        return None
    if len(rows) > 1:
        logger.warning(
            f"{len(rows)} WebDAV configs are marked active; using '{rows[0]['name']}'"
        )
    return WebdavConfig.from_row(rows[0])


def recent_sync_logs(
    db: Database,
    webdav_config_id: Optional[int] = None,
    limit: int = 20,
) -> list[SyncLog]:
    if webdav_config_id is not None:
        rows = db.fetchall(
            """SELECT * FROM sync_logs WHERE webdav_config_id = ?
               ORDER BY synced_at DESC, id DESC LIMIT ?""",
            (webdav_config_id, limit),
        )
    else:
        rows = db.fetchall(
            "SELECT * FROM sync_logs ORDER BY synced_at DESC, id DESC LIMIT ?",
            (limit,),
        )
    return [SyncLog.from_row(r) for r in rows]
