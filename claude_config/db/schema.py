"""Database schema DDL and seed data for the Claude config store."""

# Columns each table must carry; used to reject a pre-existing table of the
# same name with an incompatible shape.
EXPECTED_COLUMNS: dict[str, tuple[str, ...]] = {
    "accounts": (
        "id", "name", "token", "base_url", "model", "is_active",
        "created_at", "updated_at",
    ),
    "directories": ("id", "path", "name", "is_active", "created_at", "updated_at"),
    "base_urls": (
        "id", "name", "url", "description", "is_default",
        "created_at", "updated_at",
    ),
    "account_directories": ("id", "account_id", "directory_id", "created_at"),
    "webdav_configs": (
        "id", "name", "url", "username", "password", "remote_path",
        "auto_sync", "sync_interval", "is_active", "last_sync_at",
        "created_at", "updated_at",
    ),
    "sync_logs": (
        "id", "webdav_config_id", "sync_type", "status", "message", "synced_at",
    ),
}

TABLES: tuple[str, ...] = tuple(EXPECTED_COLUMNS)

SCHEMA_DDL = """
-- ==========================================================================
-- Accounts (API credential sets)
-- ==========================================================================
CREATE TABLE IF NOT EXISTS accounts (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT NOT NULL UNIQUE,
    token       TEXT NOT NULL,
    base_url    TEXT NOT NULL,
    model       TEXT NOT NULL DEFAULT 'claude-sonnet-4-20250514',
    is_active   BOOLEAN NOT NULL DEFAULT FALSE,
    created_at  DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at  DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
);

-- ==========================================================================
-- Project directories
-- ==========================================================================
CREATE TABLE IF NOT EXISTS directories (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    path        TEXT NOT NULL UNIQUE,
    name        TEXT NOT NULL,
    is_active   BOOLEAN NOT NULL DEFAULT FALSE,
    created_at  DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at  DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
);

-- ==========================================================================
-- Base URL catalogue
-- ==========================================================================
CREATE TABLE IF NOT EXISTS base_urls (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    name        TEXT NOT NULL UNIQUE,
    url         TEXT NOT NULL UNIQUE,
    description TEXT,
    is_default  BOOLEAN NOT NULL DEFAULT FALSE,
    created_at  DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at  DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
);

-- ==========================================================================
-- Account <-> Directory links
-- ==========================================================================
CREATE TABLE IF NOT EXISTS account_directories (
    id            INTEGER PRIMARY KEY AUTOINCREMENT,
    account_id    INTEGER NOT NULL,
    directory_id  INTEGER NOT NULL,
    created_at    DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (account_id) REFERENCES accounts (id) ON DELETE CASCADE,
    FOREIGN KEY (directory_id) REFERENCES directories (id) ON DELETE CASCADE,
    UNIQUE(account_id, directory_id)
);

-- ==========================================================================
-- WebDAV sync targets
-- ==========================================================================
CREATE TABLE IF NOT EXISTS webdav_configs (
    id             INTEGER PRIMARY KEY AUTOINCREMENT,
    name           TEXT NOT NULL UNIQUE,
    url            TEXT NOT NULL,
    username       TEXT NOT NULL,
    password       TEXT NOT NULL,
    remote_path    TEXT NOT NULL DEFAULT '/claude-config',
    auto_sync      BOOLEAN NOT NULL DEFAULT FALSE,
    sync_interval  INTEGER NOT NULL DEFAULT 3600,
    is_active      BOOLEAN NOT NULL DEFAULT FALSE,
    last_sync_at   DATETIME,
    created_at     DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    updated_at     DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP
);

-- ==========================================================================
-- Sync Log (audit trail)
-- ==========================================================================
CREATE TABLE IF NOT EXISTS sync_logs (
    id                INTEGER PRIMARY KEY AUTOINCREMENT,
    webdav_config_id  INTEGER NOT NULL,
    sync_type         TEXT NOT NULL CHECK(sync_type IN ('upload', 'download', 'auto')),
    status            TEXT NOT NULL CHECK(status IN ('success', 'failed', 'pending')),
    message           TEXT,
    synced_at         DATETIME NOT NULL DEFAULT CURRENT_TIMESTAMP,
    FOREIGN KEY (webdav_config_id) REFERENCES webdav_configs (id) ON DELETE CASCADE
);
"""

INSERT_BASE_URL_SQL = """INSERT OR IGNORE INTO base_urls
   (name, url, description, is_default)
   VALUES (?, ?, ?, ?)"""

SEED_BASE_URLS: tuple[tuple[str, str, str, int], ...] = (
    ("Anthropic Official", "https://api.anthropic.com", "Official Anthropic API endpoint", 1),
    ("Claude API", "https://api.claude.ai", "Claude API endpoint", 0),
    ("Local Development", "http://localhost:8000", "Local development server", 0),
)
