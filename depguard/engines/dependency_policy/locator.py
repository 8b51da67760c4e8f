"""Locate the project manifest that owns a source directory."""

from __future__ import annotations

import fnmatch
import os
from pathlib import Path
from typing import Protocol, runtime_checkable

import structlog

from depguard.core.config import DEFAULT_MANIFEST_PATTERN

log = structlog.get_logger("depguard.locator")


@runtime_checkable
class ManifestLocator(Protocol):
    """Strategy for resolving a manifest path from a starting directory."""

    def locate(self, start_dir: Path) -> Path | None: ...


class UpwardManifestLocator:
    """Search *start_dir* and then each ancestor for a manifest file.

    The first directory containing a match wins.  If a directory holds
    several matches, the first one by name is used.  A start directory that
    does not exist, or any directory that cannot be listed, ends the search
    with no manifest.
    """

    def __init__(self, pattern: str = DEFAULT_MANIFEST_PATTERN) -> None:
        self.pattern = pattern

    def locate(self, start_dir: Path) -> Path | None:
        try:
            current = Path(start_dir).resolve()
            if not current.is_dir():
                log.debug("locator.missing_start_dir", start_dir=str(start_dir))
                return None
            for directory in (current, *current.parents):
                hits = self._matches(directory)
                if hits:
                    log.debug("locator.found", manifest=str(hits[0]), candidates=len(hits))
                    return hits[0]
        except OSError as exc:
            # An unreadable directory stops the search rather than looking empty
            log.debug("locator.fs_error", start_dir=str(start_dir), error=str(exc))
            return None

        log.debug("locator.not_found", start_dir=str(start_dir), pattern=self.pattern)
        return None

    def _matches(self, directory: Path) -> list[Path]:
        with os.scandir(directory) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if fnmatch.fnmatch(entry.name, self.pattern) and entry.is_file()
            )
        return [directory / name for name in names]


class StaticManifestLocator:
    """Always resolve to one fixed manifest (explicit path or tests)."""

    def __init__(self, manifest_path: str | Path | None) -> None:
        self.manifest_path = Path(manifest_path) if manifest_path is not None else None

    def locate(self, start_dir: Path) -> Path | None:
        return self.manifest_path
