"""Parser for legacy ``<Reference Include="name, Version=a.b.c.d" />`` items."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from depguard.engines.dependency_policy.models import DeclarationKind, DeclaredDependency
from depguard.engines.dependency_policy.registry import register_parser

# Assembly versions are always four parts
_VERSION_RE = re.compile(r"Version=([0-9]+\.[0-9]+\.[0-9]+\.[0-9]+)")


class LegacyReferenceParser:
    detection_method = DeclarationKind.LEGACY_REFERENCE.value
    element_name = "Reference"

    def parse(self, element: ET.Element, source_file: str) -> DeclaredDependency | None:
        include = element.get("Include")
        if include is None:
            return None

        # "Newtonsoft.Json, Version=13.0.0.0, Culture=neutral, ..."
        name = include.split(",", 1)[0].strip()
        m = _VERSION_RE.search(include)

        return DeclaredDependency(
            name=name,
            raw_version=m.group(1) if m else None,
            kind=DeclarationKind.LEGACY_REFERENCE,
            source_file=source_file,
        )


register_parser(LegacyReferenceParser())
