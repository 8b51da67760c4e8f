"""CLI entry point: depguard.

Subcommands:
    depguard check src/Program.cs            # check one compiled unit
    depguard check a/ b/ --rules rules.json  # several units, custom policy
    depguard scan MyApp.csproj --json        # list declarations in a manifest
    depguard rules                           # show the effective rule set
"""

from __future__ import annotations

import json
import sys

import click

from depguard.core.config import Settings, load_settings
from depguard.core.logging import setup_logging
from depguard.engines.dependency_policy.checker import BlockedDependencyCheck
from depguard.engines.dependency_policy.locator import UpwardManifestLocator
from depguard.engines.dependency_policy.models import DeclaredDependency, Diagnostic
from depguard.engines.dependency_policy.rules import RuleSet, dump_rules, resolve_rules
from depguard.engines.dependency_policy.scanner import ManifestScanner
from depguard.exceptions import RuleConfigError, ScanError, SettingsError


def _load_settings_or_exit() -> Settings:
    try:
        return load_settings()
    except SettingsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)


def _load_rules_or_exit(rules_file: str | None) -> RuleSet:
    try:
        return resolve_rules(rules_file)
    except RuleConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)


def _diagnostic_row(d: Diagnostic) -> dict:
    return {
        "id": d.id,
        "severity": d.severity,
        "category": d.category,
        "title": d.title,
        "message": d.message,
        "manifest": d.manifest_path,
        "package": d.declaration.name if d.declaration else None,
        "version": d.declaration.raw_version if d.declaration else None,
        "rule": d.rule.package_name if d.rule else None,
    }


def _declaration_row(dep: DeclaredDependency) -> dict:
    return {
        "name": dep.name,
        "version": dep.raw_version,
        "kind": dep.kind.value,
    }


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """depguard: flag blocked dependency versions in project manifests."""
    try:
        setup_logging("DEBUG" if verbose else None)
    except SettingsError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)


@main.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.option("--rules", "rules_file", default=None, help="JSON rules file")
@click.option("--manifest-pattern", default=None, help="Manifest glob (default: *.csproj)")
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None, help="Parallel checks")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def check(
    paths: tuple[str, ...],
    rules_file: str | None,
    manifest_pattern: str | None,
    jobs: int | None,
    as_json: bool,
) -> None:
    """Check compiled units (source files or directories) against the policy."""
    settings = _load_settings_or_exit()
    rules = _load_rules_or_exit(rules_file or settings.rules_file)
    locator = UpwardManifestLocator(manifest_pattern or settings.manifest_pattern)
    checker = BlockedDependencyCheck(rules, locator=locator)

    max_workers = jobs if jobs is not None else settings.max_workers
    diagnostics = checker.check_units(paths, max_workers=max_workers)

    if as_json:
        click.echo(json.dumps([_diagnostic_row(d) for d in diagnostics], indent=2))
    else:
        for d in diagnostics:
            detail = ""
            if d.declaration is not None:
                detail = f" [{d.declaration.name} {d.declaration.raw_version}]"
            click.echo(f"{d.manifest_path}: {d.severity} {d.id}: {d.message}{detail}")
        if not diagnostics:
            click.echo("No blocked dependencies found.")

    if diagnostics:
        sys.exit(1)


@main.command()
@click.argument("manifest", type=click.Path())
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def scan(manifest: str, as_json: bool) -> None:
    """List the dependency declarations found in MANIFEST."""
    try:
        deps = ManifestScanner().scan(manifest)
    except ScanError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    if as_json:
        click.echo(json.dumps([_declaration_row(d) for d in deps], indent=2))
        return

    if not deps:
        click.echo("No dependencies found.")
        return
    click.echo(f"Found {len(deps)} declaration(s) in {manifest}\n")
    for d in deps:
        version = d.raw_version if d.raw_version is not None else "(no version)"
        click.echo(f"  {d.name} {version}  ({d.kind.value})")


@main.command("rules")
@click.option("--rules", "rules_file", default=None, help="JSON rules file")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def show_rules(rules_file: str | None, as_json: bool) -> None:
    """Print the effective blocked-dependency rules."""
    rules = _load_rules_or_exit(rules_file or _load_settings_or_exit().rules_file)

    if as_json:
        click.echo(json.dumps(dump_rules(rules), indent=2))
        return

    for rule in rules:
        lower = rule.block_from_version or "*"
        upper = rule.block_to_version or "*"
        click.echo(f"{rule.package_name}  [{lower}, {upper}]")


if __name__ == "__main__":
    main()
