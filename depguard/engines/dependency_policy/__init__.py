"""Dependency policy engine — flag blocked dependency versions in manifests."""

from depguard.engines.dependency_policy.checker import DIAGNOSTIC_ID, BlockedDependencyCheck
from depguard.engines.dependency_policy.evaluator import evaluate, is_blocked
from depguard.engines.dependency_policy.locator import (
    ManifestLocator,
    StaticManifestLocator,
    UpwardManifestLocator,
)
from depguard.engines.dependency_policy.models import (
    BlockedDependencyRule,
    DeclarationKind,
    DeclaredDependency,
    Diagnostic,
    EvaluationOutcome,
)
from depguard.engines.dependency_policy.rules import (
    DEFAULT_RULES,
    RuleSet,
    load_rules,
    resolve_rules,
)
from depguard.engines.dependency_policy.scanner import ManifestScanner

__all__ = [
    "DEFAULT_RULES",
    "DIAGNOSTIC_ID",
    "BlockedDependencyCheck",
    "BlockedDependencyRule",
    "DeclarationKind",
    "DeclaredDependency",
    "Diagnostic",
    "EvaluationOutcome",
    "ManifestLocator",
    "ManifestScanner",
    "RuleSet",
    "StaticManifestLocator",
    "UpwardManifestLocator",
    "evaluate",
    "is_blocked",
    "load_rules",
    "resolve_rules",
]
