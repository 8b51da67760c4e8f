"""Blocked-dependency rule sets and their JSON configuration format."""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path

import structlog
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from depguard.engines.dependency_policy.models import BlockedDependencyRule
from depguard.engines.dependency_policy.versioning import parse_version
from depguard.exceptions import RuleConfigError

log = structlog.get_logger("depguard.rules")


class RuleSet:
    """An ordered, read-only collection of :class:`BlockedDependencyRule`."""

    __slots__ = ("_rules",)

    def __init__(self, rules: Iterable[BlockedDependencyRule] = ()) -> None:
        self._rules: tuple[BlockedDependencyRule, ...] = tuple(rules)

    def __iter__(self) -> Iterator[BlockedDependencyRule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({list(self._rules)!r})"


DEFAULT_RULES = RuleSet(
    [
        BlockedDependencyRule(package_name="Newtonsoft.Json", block_from_version="13.0.0"),
    ]
)


# ── configuration schema ─────────────────────────────────────────────────


class BlockedDependencySchema(BaseModel):
    """One entry of a rules file: ``{packageName, blockFromVersion, blockToVersion}``."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid", frozen=True)

    package_name: str = Field(alias="packageName", min_length=1)
    block_from_version: str | None = Field(default=None, alias="blockFromVersion")
    block_to_version: str | None = Field(default=None, alias="blockToVersion")

    @field_validator("package_name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("packageName must not be blank")
        return value

    @field_validator("block_from_version", "block_to_version")
    @classmethod
    def _check_bound(cls, value: str | None) -> str | None:
        if value is None:
            return None
        if parse_version(value) is None:
            raise ValueError(f"{value!r} is not a dotted numeric version")
        return value

    def to_rule(self) -> BlockedDependencyRule:
        return BlockedDependencyRule(
            package_name=self.package_name,
            block_from_version=self.block_from_version,
            block_to_version=self.block_to_version,
        )


_RULES_ADAPTER = TypeAdapter(list[BlockedDependencySchema])


def parse_rules(data: object) -> RuleSet:
    """Validate a decoded JSON rule list and build a :class:`RuleSet`.

    Raises :class:`RuleConfigError` on any schema violation.
    """
    try:
        entries = _RULES_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise RuleConfigError(f"invalid blocked-dependency rules: {exc}") from exc
    return RuleSet(entry.to_rule() for entry in entries)


def load_rules(path: str | Path) -> RuleSet:
    """Load a JSON rules file from *path*."""
    rules_path = Path(path)
    try:
        data = json.loads(rules_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuleConfigError(f"cannot read rules file {rules_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RuleConfigError(f"rules file {rules_path} is not valid JSON: {exc}") from exc

    rules = parse_rules(data)
    log.debug("rules.loaded", path=str(rules_path), count=len(rules))
    return rules


def dump_rules(rules: RuleSet) -> list[dict[str, str | None]]:
    """Serialise *rules* back into the configuration shape."""
    return [
        BlockedDependencySchema.model_construct(
            package_name=rule.package_name,
            block_from_version=rule.block_from_version,
            block_to_version=rule.block_to_version,
        ).model_dump(by_alias=True)
        for rule in rules
    ]


def resolve_rules(rules_file: str | Path | None) -> RuleSet:
    """Load *rules_file* if given, otherwise fall back to :data:`DEFAULT_RULES`."""
    if rules_file:
        return load_rules(rules_file)
    return DEFAULT_RULES
