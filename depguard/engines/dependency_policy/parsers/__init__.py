"""Declaration parsers — auto-registered on import."""

from depguard.engines.dependency_policy.parsers import (
    legacy_reference,  # noqa: F401
    package_reference,  # noqa: F401
)
