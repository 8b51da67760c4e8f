"""Declaration parser registry — map manifest elements to parsers."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Protocol, runtime_checkable

from depguard.engines.dependency_policy.models import DeclaredDependency


@runtime_checkable
class DeclarationParser(Protocol):
    """Interface that every declaration-shape parser must satisfy."""

    detection_method: str
    element_name: str

    def parse(self, element: ET.Element, source_file: str) -> DeclaredDependency | None: ...


PARSER_REGISTRY: dict[str, DeclarationParser] = {}


def register_parser(parser: DeclarationParser) -> None:
    """Register a parser instance by its detection_method."""
    PARSER_REGISTRY[parser.detection_method] = parser


def parser_for(element_name: str) -> DeclarationParser | None:
    """Return the parser handling elements with local name *element_name*."""
    for parser in PARSER_REGISTRY.values():
        if parser.element_name == element_name:
            return parser
    return None
