"""Data models for the dependency policy engine."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DeclarationKind(enum.Enum):
    """Syntactic shape a dependency was declared in."""

    PACKAGE_REFERENCE = "package-reference"
    LEGACY_REFERENCE = "legacy-reference"


@dataclass(frozen=True)
class BlockedDependencyRule:
    """A package name plus an optional inclusive version interval.

    Bounds are kept as the configured text and parsed on comparison, so a
    malformed bound simply never matches.  A rule whose lower bound exceeds
    its upper bound is degenerate and never matches either.
    """

    package_name: str
    block_from_version: str | None = None
    block_to_version: str | None = None


@dataclass(frozen=True)
class DeclaredDependency:
    """A single dependency declaration found in a manifest."""

    name: str
    raw_version: str | None
    kind: DeclarationKind
    source_file: str = ""


@dataclass(frozen=True)
class EvaluationOutcome:
    """Result of evaluating one manifest against a rule set."""

    blocked: bool
    rule: BlockedDependencyRule | None = None
    declaration: DeclaredDependency | None = None

    def __bool__(self) -> bool:
        return self.blocked


NOT_BLOCKED = EvaluationOutcome(blocked=False)


@dataclass(frozen=True)
class Diagnostic:
    """A project-wide report raised for a blocked dependency."""

    id: str
    title: str
    message: str
    category: str
    severity: str
    manifest_path: str
    rule: BlockedDependencyRule | None = None
    declaration: DeclaredDependency | None = None
    location: str | None = None
