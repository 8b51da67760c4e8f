"""Tests for the policy evaluator."""

from __future__ import annotations

import pytest

from depguard.engines.dependency_policy.evaluator import (
    evaluate,
    is_blocked,
    matches,
    name_matches,
)
from depguard.engines.dependency_policy.models import (
    BlockedDependencyRule,
    DeclarationKind,
    DeclaredDependency,
)
from depguard.engines.dependency_policy.rules import DEFAULT_RULES, RuleSet
from depguard.engines.dependency_policy.scanner import ManifestScanner


def _pkg(name: str, version: str | None = "1.0.0") -> DeclaredDependency:
    return DeclaredDependency(name, version, DeclarationKind.PACKAGE_REFERENCE)


def _legacy(name: str, version: str | None = "1.0.0.0") -> DeclaredDependency:
    return DeclaredDependency(name, version, DeclarationKind.LEGACY_REFERENCE)


# ── name matching ────────────────────────────────────────────────────────


class TestNameMatching:
    def test_package_reference_exact_case_insensitive(self):
        rule = BlockedDependencyRule("Newtonsoft.Json")
        assert name_matches(_pkg("newtonsoft.json"), rule)
        assert name_matches(_pkg("NEWTONSOFT.JSON"), rule)
        assert not name_matches(_pkg("Newtonsoft.Json.Extra"), rule)
        assert not name_matches(_pkg("Newtonsoft"), rule)

    def test_legacy_reference_prefix_case_insensitive(self):
        rule = BlockedDependencyRule("Newtonsoft.Json")
        assert name_matches(_legacy("newtonsoft.json"), rule)
        assert name_matches(_legacy("Newtonsoft.Json.Extra"), rule)
        assert not name_matches(_legacy("Newtonsoft"), rule)

    def test_no_unicode_case_folding(self):
        rule = BlockedDependencyRule("STRASSE.Utils")
        assert not name_matches(_pkg("Straße.Utils"), rule)
        assert not name_matches(_legacy("Straße.Utils"), rule)
        assert name_matches(_pkg("strasse.utils"), rule)

    def test_shapes_differ_for_longer_name(self):
        rule = BlockedDependencyRule("Newtonsoft.Json", block_from_version="13.0.0")
        assert matches(_legacy("Newtonsoft.Json.Extra", "13.0.0.0"), rule)
        assert not matches(_pkg("Newtonsoft.Json.Extra", "13.0.0"), rule)


# ── version intervals ────────────────────────────────────────────────────


class TestVersionInterval:
    @pytest.mark.parametrize(
        "version, blocked",
        [("12.9.9", False), ("13.0.0", True), ("13.0", True), ("13.0.3", True), ("99.0", True)],
    )
    def test_lower_bound_only(self, version, blocked):
        rule = BlockedDependencyRule("Foo", block_from_version="13.0.0")
        assert matches(_pkg("Foo", version), rule) is blocked

    @pytest.mark.parametrize(
        "version, blocked",
        [("0.9", True), ("2.0.0", True), ("2.0.0.1", False), ("3.0", False)],
    )
    def test_upper_bound_only(self, version, blocked):
        rule = BlockedDependencyRule("Foo", block_to_version="2.0")
        assert matches(_pkg("Foo", version), rule) is blocked

    @pytest.mark.parametrize(
        "version, blocked",
        [("0.9", False), ("1.0", True), ("1.5.2", True), ("2.0", True), ("2.0.1", False)],
    )
    def test_both_bounds_inclusive(self, version, blocked):
        rule = BlockedDependencyRule("Foo", "1.0", "2.0")
        assert matches(_pkg("Foo", version), rule) is blocked

    def test_no_bounds_blocks_on_name(self):
        rule = BlockedDependencyRule("Foo")
        assert matches(_pkg("Foo", "0.0.1"), rule)
        assert matches(_pkg("Foo", ""), rule)
        assert matches(_pkg("Foo", "not-a-version"), rule)

    def test_inverted_range_never_matches(self):
        rule = BlockedDependencyRule("Foo", "5.0", "1.0")
        for version in ("0.5", "1.0", "3.0", "5.0", "6.0"):
            assert not matches(_pkg("Foo", version), rule)

    @pytest.mark.parametrize("version", ["", "13.0.0-beta", "latest", "$(NewtonsoftVersion)", "[13.0,)"])
    def test_malformed_version_never_blocks_bounded_rule(self, version):
        rule = BlockedDependencyRule("Foo", block_from_version="1.0")
        assert not matches(_pkg("Foo", version), rule)

    def test_malformed_rule_bound_never_blocks(self):
        rule = BlockedDependencyRule("Foo", block_from_version="thirteen")
        assert not matches(_pkg("Foo", "13.0.0"), rule)

    def test_legacy_without_version_never_blocks(self):
        assert not matches(_legacy("Foo", None), BlockedDependencyRule("Foo"))
        assert not matches(_legacy("Foo", None), BlockedDependencyRule("Foo", "1.0"))


# ── evaluate ─────────────────────────────────────────────────────────────


class TestEvaluate:
    def test_returns_triggering_pair(self):
        rules = RuleSet([BlockedDependencyRule("A", "2.0"), BlockedDependencyRule("B")])
        decls = [_pkg("A", "1.0"), _pkg("B", "5.0"), _pkg("A", "3.0")]
        outcome = evaluate(decls, rules)
        assert outcome.blocked
        assert outcome
        assert outcome.declaration == decls[1]
        assert outcome.rule == BlockedDependencyRule("B")

    def test_not_blocked_outcome(self):
        outcome = evaluate([_pkg("A")], RuleSet([BlockedDependencyRule("B")]))
        assert not outcome
        assert outcome.rule is None
        assert outcome.declaration is None

    def test_empty_inputs(self):
        assert not is_blocked([], DEFAULT_RULES)
        assert not is_blocked([_pkg("Newtonsoft.Json", "13.0.0")], RuleSet())

    def test_consumes_generators(self):
        decls = (d for d in [_pkg("X"), _pkg("Newtonsoft.Json", "13.0.1")])
        assert is_blocked(decls, iter(DEFAULT_RULES))


# ── end-to-end scenarios ─────────────────────────────────────────────────


class TestScenarios:
    @pytest.fixture
    def scan(self, project_xml):
        scanner = ManifestScanner()
        return lambda item: scanner.scan_text(project_xml(item))

    def test_package_reference_13_blocked(self, scan):
        decls = scan('<PackageReference Include="Newtonsoft.Json" Version="13.0.3" />')
        assert is_blocked(decls, DEFAULT_RULES)

    def test_package_reference_12_allowed(self, scan):
        decls = scan('<PackageReference Include="Newtonsoft.Json" Version="12.0.3" />')
        assert not is_blocked(decls, DEFAULT_RULES)

    def test_legacy_reference_13_blocked(self, scan):
        decls = scan('<Reference Include="Newtonsoft.Json, Version=13.0.0.0" />')
        assert is_blocked(decls, DEFAULT_RULES)

    def test_legacy_reference_12_allowed(self, scan):
        decls = scan('<Reference Include="Newtonsoft.Json, Version=12.0.3.0" />')
        assert not is_blocked(decls, DEFAULT_RULES)

    def test_unrelated_package_allowed(self, scan):
        decls = scan('<PackageReference Include="System.Text.Json" Version="10.0.0" />')
        assert not is_blocked(decls, DEFAULT_RULES)
