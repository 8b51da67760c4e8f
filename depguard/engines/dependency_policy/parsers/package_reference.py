"""Parser for ``<PackageReference Include="name" Version="x.y.z" />`` items."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from depguard.engines.dependency_policy.models import DeclarationKind, DeclaredDependency
from depguard.engines.dependency_policy.registry import register_parser


class PackageReferenceParser:
    detection_method = DeclarationKind.PACKAGE_REFERENCE.value
    element_name = "PackageReference"

    def parse(self, element: ET.Element, source_file: str) -> DeclaredDependency | None:
        name = element.get("Include")
        if name is None:
            # Update="..." / Remove="..." items modify, they don't declare
            return None

        return DeclaredDependency(
            name=name,
            raw_version=element.get("Version", ""),
            kind=DeclarationKind.PACKAGE_REFERENCE,
            source_file=source_file,
        )


register_parser(PackageReferenceParser())
