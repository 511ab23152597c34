"""
Writes account credentials into a project's Claude settings.

The target file is ``<directory>/.claude/settings.local.json``.  When it does
not exist yet, the current settings are picked up from the first legacy
location that holds any, so switching accounts keeps unrelated keys.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from claude_config.models import Account, Directory
from claude_config.utils.redact import redact

logger = logging.getLogger(__name__)

SETTINGS_DIR = ".claude"
SETTINGS_FILE = "settings.local.json"
LOCAL_MD = "CLAUDE.local.md"
_LOCAL_MD_RESOURCE = Path(__file__).resolve().parent / "resources" / LOCAL_MD

ANTHROPIC_ENV_KEYS = ("ANTHROPIC_API_KEY", "ANTHROPIC_AUTH_TOKEN", "ANTHROPIC_BASE_URL")
# Keys recognised when falling back to a CLAUDE.md file
_CLAUDE_MD_KEYS = ("ANTHROPIC_API_KEY", "ANTHROPIC_BASE_URL", "CLAUDE_API_KEY")


class ClaudeSettingsManager:
    """Reads and writes the ``env`` block of one directory's Claude settings."""

    def __init__(self, directory_path: Path | str):
        self.directory = Path(directory_path)

    # -- paths -----------------------------------------------------------------

    @property
    def claude_dir(self) -> Path:
        return self.directory / SETTINGS_DIR

    @property
    def settings_file(self) -> Path:
        return self.claude_dir / SETTINGS_FILE

    def alternative_settings_files(self) -> list[Path]:
        return [
            self.claude_dir / "settings.json",
            self.claude_dir / "claude_config.json",
            self.directory / ".claude_config",
            self.directory / "CLAUDE.md",
        ]

    # -- reading ---------------------------------------------------------------

    def read_settings(self) -> dict[str, Any]:
        if self.settings_file.exists():
            settings = json.loads(self.settings_file.read_text(encoding="utf-8"))
            return settings if isinstance(settings, dict) else {}

        for alt in self.alternative_settings_files():
            if not alt.exists():
                continue
            if alt.name == "CLAUDE.md":
                return self._parse_claude_md(alt)
            try:
                settings = json.loads(alt.read_text(encoding="utf-8"))
            except json.JSONDecodeError:
                logger.debug(f"Ignoring unparseable settings file {alt}")
                continue
            if isinstance(settings, dict):
                return settings
        return {}

    @staticmethod
    def _parse_claude_md(path: Path) -> dict[str, Any]:
        env: dict[str, str] = {}
        for line in path.read_text(encoding="utf-8").splitlines():
            stripped = line.strip()
            for key in _CLAUDE_MD_KEYS:
                if stripped.startswith(f"{key}="):
                    env[key] = stripped.split("=", 1)[1].strip()
        return {"env": env} if env else {}

    def get_env_config(self) -> dict[str, str]:
        env = self.read_settings().get("env")
        if not isinstance(env, dict):
            return {}
        return {k: v for k, v in env.items() if isinstance(v, str)}

    # -- writing ---------------------------------------------------------------

    def write_settings(self, settings: dict[str, Any]) -> None:
        self.claude_dir.mkdir(parents=True, exist_ok=True)
        self.settings_file.write_text(
            json.dumps(settings, indent=2, ensure_ascii=False), encoding="utf-8"
        )

    def update_env_config(self, token: str, base_url: str, is_sandbox: bool = False) -> bool:
        """Replace the ``env`` block with the given credentials."""
        settings = self.read_settings()
        env: dict[str, str] = {
            "ANTHROPIC_API_KEY": token,
            "ANTHROPIC_AUTH_TOKEN": token,
            "ANTHROPIC_BASE_URL": base_url,
        }
        if is_sandbox:
            env["IS_SANDBOX"] = "1"
        settings["env"] = env

        self.write_settings(settings)
        self.copy_claude_local_md()
        logger.info(redact(f"Wrote credentials for {base_url} to {self.settings_file}"))
        return True

    def clear_env_config(self) -> bool:
        settings = self.read_settings()
        env = settings.get("env")
        if isinstance(env, dict):
            for key in ANTHROPIC_ENV_KEYS:
                env.pop(key, None)
            if not env:
                del settings["env"]
        self.write_settings(settings)
        logger.info(f"Cleared credentials from {self.settings_file}")
        return True

    def copy_claude_local_md(self) -> Path:
        target = self.directory / LOCAL_MD
        target.write_text(_LOCAL_MD_RESOURCE.read_text(encoding="utf-8"), encoding="utf-8")
        logger.debug(f"Wrote {target}")
        return target


def apply_account(account: Account, directory: Directory, is_sandbox: bool = False) -> bool:
    """Point ``directory`` at ``account``'s credentials."""
    if not directory.exists():
        raise FileNotFoundError(f"Directory does not exist: {directory.path}")
    logger.info(f"Switching '{directory.name}' to account '{account.name}'")
    return ClaudeSettingsManager(directory.path).update_env_config(
        account.token, account.base_url, is_sandbox=is_sandbox
    )
