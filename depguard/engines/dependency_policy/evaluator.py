"""PolicyEvaluator — match declared dependencies against blocked ranges."""

from __future__ import annotations

from collections.abc import Iterable

from depguard.engines.dependency_policy.models import (
    NOT_BLOCKED,
    BlockedDependencyRule,
    DeclarationKind,
    DeclaredDependency,
    EvaluationOutcome,
)
from depguard.engines.dependency_policy.versioning import is_greater_or_equal, is_less_or_equal


def name_matches(declaration: DeclaredDependency, rule: BlockedDependencyRule) -> bool:
    """Case-insensitive name match.

    Package references need an exact match.  Legacy references only need to
    start with the rule's package name, so ``Newtonsoft.Json.Extra`` is caught
    by a ``Newtonsoft.Json`` rule in that shape only.
    """
    declared = declaration.name.lower()
    wanted = rule.package_name.lower()
    if declaration.kind is DeclarationKind.LEGACY_REFERENCE:
        return declared.startswith(wanted)
    return declared == wanted


def version_in_range(version_text: str | None, rule: BlockedDependencyRule) -> bool:
    """True if *version_text* falls within the rule's inclusive interval."""
    if rule.block_from_version is not None and not is_greater_or_equal(
        version_text, rule.block_from_version
    ):
        return False
    if rule.block_to_version is not None and not is_less_or_equal(
        version_text, rule.block_to_version
    ):
        return False
    return True


def matches(declaration: DeclaredDependency, rule: BlockedDependencyRule) -> bool:
    """True if *declaration* is blocked by *rule*."""
    if not name_matches(declaration, rule):
        return False
    # A legacy reference without a Version= part carries no version at all
    if declaration.raw_version is None:
        return False
    return version_in_range(declaration.raw_version, rule)


def evaluate(
    declarations: Iterable[DeclaredDependency],
    rules: Iterable[BlockedDependencyRule],
) -> EvaluationOutcome:
    """Return the first (declaration, rule) pair that blocks, if any.

    Declarations are checked in document order, rules in configured order.
    """
    rule_list = list(rules)
    for declaration in declarations:
        for rule in rule_list:
            if matches(declaration, rule):
                return EvaluationOutcome(blocked=True, rule=rule, declaration=declaration)
    return NOT_BLOCKED


def is_blocked(
    declarations: Iterable[DeclaredDependency],
    rules: Iterable[BlockedDependencyRule],
) -> bool:
    return evaluate(declarations, rules).blocked
