"""Row models for the Claude config store tables."""

from claude_config.models.account import Account
from claude_config.models.base_url import BaseUrl
from claude_config.models.directory import AccountDirectory, Directory
from claude_config.models.webdav import SyncLog, SyncLogStatus, SyncType, WebdavConfig

__all__ = [
    "Account",
    "BaseUrl",
    "Directory", "AccountDirectory",
    "WebdavConfig", "SyncLog", "SyncType", "SyncLogStatus",
]
