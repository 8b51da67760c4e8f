"""BlockedDependencyCheck — the entry point a host calls per compiled unit."""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import structlog

from depguard.engines.dependency_policy.evaluator import evaluate
from depguard.engines.dependency_policy.locator import ManifestLocator, UpwardManifestLocator
from depguard.engines.dependency_policy.models import NOT_BLOCKED, Diagnostic, EvaluationOutcome
from depguard.engines.dependency_policy.rules import DEFAULT_RULES, RuleSet
from depguard.engines.dependency_policy.scanner import ManifestScanner
from depguard.exceptions import ScanError

log = structlog.get_logger("depguard.checker")

DIAGNOSTIC_ID = "NC0001"
DIAGNOSTIC_TITLE = "Blocked Dependency Detected"
DIAGNOSTIC_MESSAGE = "Project contains blocked dependency. This version is prohibited."
DIAGNOSTIC_CATEGORY = "Compatibility"
DIAGNOSTIC_SEVERITY = "error"


class BlockedDependencyCheck:
    """Evaluate a project's manifest against a fixed :class:`RuleSet`.

    Holds no per-call state, so one instance can serve concurrent checks.
    Any failure to find, read, or parse the manifest yields "not blocked".
    """

    def __init__(
        self,
        rules: RuleSet = DEFAULT_RULES,
        locator: ManifestLocator | None = None,
        scanner: ManifestScanner | None = None,
    ) -> None:
        self._rules = rules
        self._locator = locator or UpwardManifestLocator()
        self._scanner = scanner or ManifestScanner()

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def evaluate_project(self, directory: str | Path) -> EvaluationOutcome:
        outcome, _ = self._evaluate(Path(directory))
        return outcome

    def check_unit(self, source_path: str | Path) -> Diagnostic | None:
        """Check the compiled unit at *source_path* (a source file or directory).

        Returns a single project-wide :class:`Diagnostic` on violation.
        """
        path = Path(source_path)
        directory = path if path.is_dir() else path.parent
        outcome, manifest = self._evaluate(directory)
        if not outcome.blocked or manifest is None:
            return None

        log.info(
            "checker.blocked",
            manifest=str(manifest),
            package=outcome.declaration.name if outcome.declaration else None,
            version=outcome.declaration.raw_version if outcome.declaration else None,
        )
        return Diagnostic(
            id=DIAGNOSTIC_ID,
            title=DIAGNOSTIC_TITLE,
            message=DIAGNOSTIC_MESSAGE,
            category=DIAGNOSTIC_CATEGORY,
            severity=DIAGNOSTIC_SEVERITY,
            manifest_path=str(manifest),
            rule=outcome.rule,
            declaration=outcome.declaration,
        )

    def check_units(
        self,
        source_paths: Iterable[str | Path],
        max_workers: int | None = None,
    ) -> list[Diagnostic]:
        """Check many compiled units in parallel; diagnostics keep input order."""
        paths = list(source_paths)
        if not paths:
            return []
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(self.check_unit, paths))
        return [d for d in results if d is not None]

    # ── internals ───────────────────────────────────────────────────────

    def _evaluate(self, directory: Path) -> tuple[EvaluationOutcome, Path | None]:
        try:
            manifest = self._locator.locate(directory)
            if manifest is None:
                log.debug("checker.no_manifest", directory=str(directory))
                return NOT_BLOCKED, None

            declarations = self._scanner.scan(manifest)
            return evaluate(declarations, self._rules), manifest
        except ScanError as exc:
            log.warning("checker.scan_failed", path=exc.path, reason=exc.reason)
            return NOT_BLOCKED, None
        except Exception:
            log.exception("checker.unexpected_error", directory=str(directory))
            return NOT_BLOCKED, None
