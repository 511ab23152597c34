"""WebDAV sync target and sync audit-log models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from claude_config.utils.redact import mask_secret

DEFAULT_REMOTE_PATH = "/claude-config"
DEFAULT_SYNC_INTERVAL = 3600


class SyncType(str, Enum):
    UPLOAD = "upload"
    DOWNLOAD = "download"
    AUTO = "auto"


class SyncLogStatus(str, Enum):
    SUCCESS = "success"
    FAILED = "failed"
    PENDING = "pending"


@dataclass
class WebdavConfig:
    """Where and how often configuration is backed up over WebDAV."""

    name: str
    url: str
    username: str
    password: str = field(repr=False)
    remote_path: str = DEFAULT_REMOTE_PATH
    auto_sync: bool = False
    sync_interval: int = DEFAULT_SYNC_INTERVAL
    is_active: bool = False
    last_sync_at: Optional[str] = None
    id: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""

    @property
    def masked_password(self) -> str:
        return mask_secret(self.password)

    @property
    def remote_url(self) -> str:
        """The WebDAV URL joined with the remote path."""
        return self.url.rstrip("/") + "/" + self.remote_path.lstrip("/")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "username": self.username,
            "password": self.password,
            "remote_path": self.remote_path,
            "auto_sync": 1 if self.auto_sync else 0,
            "sync_interval": self.sync_interval,
            "is_active": 1 if self.is_active else 0,
            "last_sync_at": self.last_sync_at,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "WebdavConfig":
        return cls(
            id=row["id"],
            name=row["name"],
            url=row["url"],
            username=row["username"],
            password=row["password"],
            remote_path=row.get("remote_path") or DEFAULT_REMOTE_PATH,
            auto_sync=bool(row.get("auto_sync", 0)),
            sync_interval=int(row.get("sync_interval", DEFAULT_SYNC_INTERVAL)),
            is_active=bool(row.get("is_active", 0)),
            last_sync_at=row.get("last_sync_at"),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )


@dataclass
class SyncLog:
    """One recorded synchronisation attempt."""

    webdav_config_id: int
    sync_type: SyncType
    status: SyncLogStatus
    message: Optional[str] = None
    id: Optional[int] = None
    synced_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "webdav_config_id": self.webdav_config_id,
            "sync_type": self.sync_type.value,
            "status": self.status.value,
            "message": self.message,
            "synced_at": self.synced_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "SyncLog":
        return cls(
            id=row["id"],
            webdav_config_id=row["webdav_config_id"],
            sync_type=SyncType(row["sync_type"]),
            status=SyncLogStatus(row["status"]),
            message=row.get("message"),
            synced_at=row.get("synced_at", ""),
        )
