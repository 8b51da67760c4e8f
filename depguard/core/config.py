"""Runtime settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass

from depguard.exceptions import SettingsError

DEFAULT_MANIFEST_PATTERN = "*.csproj"


@dataclass(frozen=True)
class Settings:
    """Process-wide settings for a check run.

    Environment variables:
        DEPGUARD_RULES_FILE       — JSON rule list (default: built-in rules)
        DEPGUARD_MANIFEST_PATTERN — glob for manifest files (default: *.csproj)
        DEPGUARD_MAX_WORKERS      — thread pool size for multi-unit checks
    """

    rules_file: str | None = None
    manifest_pattern: str = DEFAULT_MANIFEST_PATTERN
    max_workers: int | None = None


def _env_positive_int(key: str) -> int | None:
    raw = os.environ.get(key)
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise SettingsError(f"{key} must be an integer, got {raw!r}") from None
    if value < 1:
        raise SettingsError(f"{key} must be at least 1, got {value}")
    return value


def load_settings() -> Settings:
    """Build :class:`Settings` from ``DEPGUARD_*`` environment variables."""
    return Settings(
        rules_file=os.environ.get("DEPGUARD_RULES_FILE") or None,
        manifest_pattern=os.environ.get("DEPGUARD_MANIFEST_PATTERN") or DEFAULT_MANIFEST_PATTERN,
        max_workers=_env_positive_int("DEPGUARD_MAX_WORKERS"),
    )
