"""Custom exceptions for depguard."""

from __future__ import annotations


class DepguardError(Exception):
    """Base exception for all depguard errors."""


class ScanError(DepguardError):
    """Raised when a manifest cannot be read or parsed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot scan manifest {path}: {reason}")


class RuleConfigError(DepguardError):
    """Raised when a blocked-dependency rule configuration is invalid."""


class SettingsError(DepguardError):
    """Raised when a DEPGUARD_* environment setting has an invalid value."""
