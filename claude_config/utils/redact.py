"""Secret redaction utility: strip tokens/passwords from logs and output."""

from __future__ import annotations

import re
from typing import Optional

_PATTERNS = [
    (re.compile(r"sk-ant-[A-Za-z0-9_\-]{8,}"), "[ANTHROPIC_TOKEN]"),
    (re.compile(r"sk-[A-Za-z0-9_\-]{20,}"), "[API_KEY]"),
    (re.compile(r"(https?://)[^/\s:@]+:[^/\s@]+@"), r"\1[CREDENTIALS]@"),
    (re.compile(r"[A-Za-z0-9]{32,}"), "[REDACTED_KEY]"),
]


def redact(text: str) -> str:
    for pattern, replacement in _PATTERNS:
        text = pattern.sub(replacement, text)
    return text


def mask_secret(secret: Optional[str], visible: int = 4) -> str:
    """Show only the last few characters of a secret, e.g. ``****abcd``."""
    if not secret:
        return ""
    if len(secret) <= visible * 2:
        return "*" * len(secret)
    return "*" * 8 + secret[-visible:]
