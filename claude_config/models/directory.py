"""Directory domain model and its link to accounts."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass
class Directory:
    """A project directory whose Claude settings are managed by the store."""

    path: str
    name: str
    is_active: bool = False
    id: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""

    def exists(self) -> bool:
        return Path(self.path).is_dir()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "path": self.path,
            "name": self.name,
            "is_active": 1 if self.is_active else 0,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Directory":
        return cls(
            id=row["id"],
            path=row["path"],
            name=row["name"],
            is_active=bool(row.get("is_active", 0)),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )


@dataclass
class AccountDirectory:
    """Many-to-many link between an account and a directory."""

    account_id: int
    directory_id: int
    id: Optional[int] = None
    created_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "account_id": self.account_id,
            "directory_id": self.directory_id,
            "created_at": self.created_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "AccountDirectory":
        return cls(
            id=row["id"],
            account_id=row["account_id"],
            directory_id=row["directory_id"],
            created_at=row.get("created_at", ""),
        )
