"""Shared helpers."""

from claude_config.utils.redact import mask_secret, redact

__all__ = ["mask_secret", "redact"]
