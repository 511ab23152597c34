"""Account domain model: one set of Claude API credentials."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from claude_config.config import DEFAULT_MODEL
from claude_config.utils.redact import mask_secret


@dataclass
class Account:
    """A named API credential set pointing at one base URL."""

    name: str
    token: str = field(repr=False)
    base_url: str
    model: str = DEFAULT_MODEL
    is_active: bool = False
    id: Optional[int] = None
    created_at: str = ""
    updated_at: str = ""

    @property
    def masked_token(self) -> str:
        return mask_secret(self.token)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "token": self.token,
            "base_url": self.base_url,
            "model": self.model,
            "is_active": 1 if self.is_active else 0,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Account":
        return cls(
            id=row["id"],
            name=row["name"],
            token=row["token"],
            base_url=row["base_url"],
            model=row.get("model") or DEFAULT_MODEL,
            is_active=bool(row.get("is_active", 0)),
            created_at=row.get("created_at", ""),
            updated_at=row.get("updated_at", ""),
        )
