"""Dotted numeric version parsing and comparison.

Only plain ``a.b[.c[.d]]`` integer versions are understood.  Anything else
(empty text, pre-release tags, stray separators) is *invalid*, and an invalid
operand never satisfies a bound check.
"""

from __future__ import annotations

import functools
import itertools
import re
from dataclasses import dataclass

_VERSION_RE = re.compile(r"[0-9]+(?:\.[0-9]+)*")


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Version:
    """An ordered sequence of non-negative integer components."""

    components: tuple[int, ...]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) == 0

    def __lt__(self, other: Version) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return compare(self, other) < 0

    def __hash__(self) -> int:
        # 13.0 and 13.0.0 compare equal, so they must hash equal.
        trimmed = list(self.components)
        while trimmed and trimmed[-1] == 0:
            trimmed.pop()
        return hash(tuple(trimmed))

    def __str__(self) -> str:
        return ".".join(str(c) for c in self.components)


def parse_version(text: str | None) -> Version | None:
    """Parse *text* into a :class:`Version`, or return None if malformed."""
    if not text or not _VERSION_RE.fullmatch(text):
        return None
    return Version(tuple(int(part) for part in text.split(".")))


def compare(a: Version, b: Version) -> int:
    """Return -1, 0 or 1; the shorter version is zero-padded on the right."""
    for left, right in itertools.zip_longest(a.components, b.components, fillvalue=0):
        if left != right:
            return -1 if left < right else 1
    return 0


def is_greater_or_equal(version_text: str | None, bound_text: str | None) -> bool:
    """True if *version_text* >= *bound_text*; False if either is invalid."""
    version = parse_version(version_text)
    bound = parse_version(bound_text)
    if version is None or bound is None:
        return False
    return compare(version, bound) >= 0


def is_less_or_equal(version_text: str | None, bound_text: str | None) -> bool:
    """True if *version_text* <= *bound_text*; False if either is invalid."""
    version = parse_version(version_text)
    bound = parse_version(bound_text)
    if version is None or bound is None:
        return False
    return compare(version, bound) <= 0
