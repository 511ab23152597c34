"""Base URL catalogue model."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class BaseUrl:
    """A named API endpoint that accounts can point at."""

    name: str
    url: str
    description: Optional[str] = None
    is_default: bool = False
    id: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "url": self.url,
            "description": self.description,
            "is_default": 1 if self.is_default else 0,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "BaseUrl":
        return cls(
            id=row["id"],
            name=row["name"],
            url=row["url"],
            description=row.get("description"),
            is_default=bool(row.get("is_default", 0)),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )
