"""ManifestScanner — extract dependency declarations from an XML project file."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

import structlog

# Ensure parsers are registered before any scan runs.
import depguard.engines.dependency_policy.parsers  # noqa: F401
from depguard.engines.dependency_policy.models import DeclaredDependency
from depguard.engines.dependency_policy.registry import parser_for
from depguard.exceptions import ScanError

log = structlog.get_logger("depguard.scanner")


def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from an element tag."""
    return tag.rsplit("}", 1)[-1]


class ManifestScanner:
    """Parse a manifest into :class:`DeclaredDependency` entries.

    Elements are matched by local name, so the MSBuild 2003 namespace,
    any other namespace, and SDK-style projects without one all work.
    Declarations are returned in document order.
    """

    def scan(self, manifest_path: str | Path) -> list[DeclaredDependency]:
        """Read and scan the manifest at *manifest_path*.

        Raises :class:`ScanError` if the file is missing, unreadable, or
        not well-formed XML.
        """
        path = Path(manifest_path)
        try:
            content = path.read_bytes()
        except OSError as exc:
            raise ScanError(str(path), exc.strerror or type(exc).__name__) from exc
        return self.scan_text(content, str(path))

    def scan_text(self, content: str | bytes, source_file: str = "") -> list[DeclaredDependency]:
        """Scan manifest *content* already held in memory."""
        try:
            root = ET.fromstring(content)
        except ET.ParseError as exc:
            raise ScanError(source_file or "<memory>", f"malformed XML: {exc}") from exc

        deps: list[DeclaredDependency] = []
        for element in root.iter():
            if not isinstance(element.tag, str):
                continue
            parser = parser_for(_local_name(element.tag))
            if parser is None:
                continue
            dep = parser.parse(element, source_file)
            if dep is not None:
                deps.append(dep)

        log.debug("scanner.scanned", source_file=source_file, declarations=len(deps))
        return deps
