"""
Central configuration loader.
Reads from environment variables (via .env); validates required keys.
NEVER prints secret values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")

DEFAULT_MODEL = "claude-sonnet-4-20250514"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get(key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    val = os.getenv(key, default)
    if required and not val:
        raise EnvironmentError(f"Missing required environment variable: {key}")
    return val


# ---------------------------------------------------------------------------
# Store config
# ---------------------------------------------------------------------------
@dataclass(frozen=True)
class StoreConfig:
    db_path: Path
    log_level: str
    default_model: str

    @property
    def data_dir(self) -> Path:
        return self.db_path.parent


def get_store_config() -> StoreConfig:
    return StoreConfig(
        db_path=get_db_path(),
        log_level=get_log_level(),
        default_model=_get("CLAUDE_CONFIG_DEFAULT_MODEL", default=DEFAULT_MODEL),  # type: ignore[arg-type]
    )


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
def get_repo_root() -> Path:
    return _REPO_ROOT


def get_db_path() -> Path:
    override = _get("CLAUDE_CONFIG_DB_PATH")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".claude-config" / "claude_config.db"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def get_log_level() -> str:
    level = (_get("CLAUDE_CONFIG_LOG_LEVEL", default="INFO") or "INFO").upper()
    if not isinstance(logging.getLevelName(level), int):
        raise EnvironmentError(f"Unknown log level in CLAUDE_CONFIG_LOG_LEVEL: {level}")
    return level


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger for the maintenance scripts."""
    logging.basicConfig(level=level or get_log_level(), format=LOG_FORMAT)
