"""Rule registry and report aggregation.

Runs rule evaluators in a fixed order and folds their results into the
JSON shapes emitted by the audit and validate commands.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Mapping

from src.model import Structure
from src.rules import (
    RuleResult,
    Severity,
    validate_accessibility,
    validate_choice_overload,
    validate_contrast,
    validate_dark_mode,
    validate_elevation,
    validate_focus,
    validate_gestalt,
    validate_hierarchy,
    validate_loading_states,
    validate_responsive,
    validate_spacing,
    validate_touch_targets,
    validate_typography,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Registry
# =============================================================================

RuleEvaluator = Callable[[Structure], RuleResult]

RULES: dict[str, RuleEvaluator] = {
    "hierarchy": validate_hierarchy,
    "touch_targets": validate_touch_targets,
    "gestalt": validate_gestalt,
    "accessibility": validate_accessibility,
    "choice_overload": validate_choice_overload,
    "contrast": validate_contrast,
    "spacing": validate_spacing,
    "typography": validate_typography,
    "elevation": validate_elevation,
    "loading_states": validate_loading_states,
    "responsive": validate_responsive,
    "focus": validate_focus,
    "dark_mode": validate_dark_mode,
}

RULE_TITLES: dict[str, str] = {
    "hierarchy": "Visual Hierarchy",
    "touch_targets": "Touch Targets (Fitts's Law)",
    "gestalt": "Gestalt Principles",
    "accessibility": "Accessibility (WCAG)",
    "choice_overload": "Choice Overload (Hick's Law)",
    "contrast": "Color Contrast",
    "spacing": "Spacing Scale (8pt Grid)",
    "typography": "Typography Scale",
    "elevation": "Shadow & Elevation",
    "loading_states": "Loading States",
    "responsive": "Responsive Breakpoints",
    "focus": "Focus Indicators",
    "dark_mode": "Dark Mode Support",
}


class UnknownRuleError(ValueError):
    """Raised when a rule name is not in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown rule '{name}' (available: {', '.join(RULES)})")


def run_rules(structure: Structure, names: Iterable[str] | None = None) -> dict[str, RuleResult]:
    """Evaluate rules against a structure.

    Args:
        structure: Document to check.
        names: Rule names to run; all rules when None. Results are always
            returned in registry order regardless of the order given.

    Returns:
        Mapping of rule name to its result.

    Raises:
        UnknownRuleError: If a name is not registered.
    """
    selected = set(RULES) if names is None else set(names)
    for name in selected:
        if name not in RULES:
            raise UnknownRuleError(name)

    results: dict[str, RuleResult] = {}
    for name, evaluator in RULES.items():
        if name in selected:
            results[name] = evaluator(structure)
            logger.debug("Rule %s: %s (%d issues)", name, results[name].status, len(results[name].issues))
    return results


# =============================================================================
# Aggregation
# =============================================================================


@dataclass
class AuditSummary:
    """Roll-up of several rule results.

    Attributes:
        passed: True when every rule passed.
        total: Number of rules evaluated.
        passed_count: Rules without errors.
        failed_count: Rules with at least one error.
        criticals: Error-severity issues across all rules.
        warnings: Warning-severity issues across all rules.
    """

    passed: bool
    total: int
    passed_count: int
    failed_count: int
    criticals: int
    warnings: int

    @property
    def status(self) -> str:
        return "passed" if self.passed else "failed"

    def to_dict(self) -> dict[str, int]:
        return {
            "total": self.total,
            "passed": self.passed_count,
            "failed": self.failed_count,
            "criticals": self.criticals,
            "warnings": self.warnings,
        }


def aggregate(results: Mapping[str, RuleResult]) -> AuditSummary:
    """Fold rule results into an AuditSummary."""
    passed_count = sum(1 for r in results.values() if r.passed)
    return AuditSummary(
        passed=passed_count == len(results),
        total=len(results),
        passed_count=passed_count,
        failed_count=len(results) - passed_count,
        criticals=sum(1 for r in results.values() for i in r.issues if i.severity == Severity.ERROR),
        warnings=sum(1 for r in results.values() for i in r.issues if i.severity == Severity.WARNING),
    )


# =============================================================================
# Report Shapes
# =============================================================================


def build_audit_report(structure: Structure, results: Mapping[str, RuleResult], file: str) -> dict[str, Any]:
    """JSON document for the audit command."""
    summary = aggregate(results)
    return {
        "file": file,
        "version": structure.version,
        "phase": structure.phase,
        "status": summary.status,
        "components": len(structure.components),
        "summary": summary.to_dict(),
        "audits": {name: result.to_dict() for name, result in results.items()},
    }


def build_validate_report(structure: Structure, results: Mapping[str, RuleResult], file: str) -> dict[str, Any]:
    """JSON document for a successful validate command.

    Schema validation has already passed; each requested rule adds its own
    key next to the envelope fields.
    """
    report: dict[str, Any] = {
        "status": "success",
        "file": file,
        "validation": "passed",
        "version": structure.version,
        "phase": structure.phase,
        "components": len(structure.components),
    }
    for name, result in results.items():
        report[name] = result.to_dict()
    return report


def build_validation_failure(file: str, error: str | Exception) -> dict[str, str]:
    """JSON document for a structure that failed schema validation."""
    return {"status": "failed", "file": file, "validation": "failed", "error": str(error)}


def build_error(message: str, file: str = "") -> dict[str, str]:
    """JSON document for a command that could not run."""
    report = {"status": "error", "error": message}
    if file:
        report["file"] = file
    return report


__all__ = [
    "RuleEvaluator",
    "RULES",
    "RULE_TITLES",
    "UnknownRuleError",
    "run_rules",
    "AuditSummary",
    "aggregate",
    "build_audit_report",
    "build_validate_report",
    "build_validation_failure",
    "build_error",
]
