"""Spacing rule (8pt grid).

Padding, gaps, margins and page spacing must come from the allowed scale.
Each off-grid value yields a warning followed by an info with the nearest
allowed value.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.model import Structure, iter_components

from .lib import Issue, RuleResult, Severity

logger = logging.getLogger(__name__)

GRID_VALUES: tuple[int, ...] = (0, 4, 8, 12, 16, 24, 32, 48, 64, 96, 128)


@dataclass
class SpacingRule:
    """Allowed spacing scale and half-step allowance."""

    allowed_values: tuple[int, ...] = GRID_VALUES
    allow_half_step: bool = True
    max_half_step_usage: int = 5


def is_on_grid(value: int, allowed: tuple[int, ...] = GRID_VALUES) -> bool:
    return value in allowed


def nearest_grid_value(value: int, allowed: tuple[int, ...] = GRID_VALUES) -> int:
    """Closest allowed value; on a tie the first in scan order (the smaller) wins."""
    if not allowed:
        return value
    nearest = allowed[0]
    best = abs(value - nearest)
    for candidate in allowed:
        diff = abs(value - candidate)
        if diff < best:
            best = diff
            nearest = candidate
    return nearest


def is_half_step(value: int) -> bool:
    """Multiples of 4 that are not multiples of 8."""
    return value % 4 == 0 and value % 8 != 0


def validate_spacing(structure: Structure, rule: SpacingRule | None = None) -> RuleResult:
    """Check every spacing value against the grid."""
    rule = rule or SpacingRule()
    issues: list[Issue] = []
    half_steps = 0

    def check(value: int, component: str, prop: str, subject: str) -> None:
        nonlocal half_steps
        if value <= 0 or is_on_grid(value, rule.allowed_values):
            return
        suggested = nearest_grid_value(value, rule.allowed_values)
        issues.append(
            Issue(
                Severity.WARNING,
                f"Spacing: {subject} uses {value}px (not on 8pt grid)",
                component,
                category="off_grid",
                property=prop,
                value=value,
                suggested=suggested,
            )
        )
        issues.append(
            Issue(
                Severity.INFO,
                f"   Suggestion: Use {suggested}px for consistency",
                component,
                category="suggestion",
                property=prop,
                suggested=suggested,
            )
        )
        if is_half_step(value):
            half_steps += 1

    check(structure.layout.spacing, "layout", "spacing", "Layout spacing")
    check(structure.layout.padding, "layout", "padding", "Layout padding")

    for comp in iter_components(structure.components):
        check(comp.layout.padding, comp.id, "padding", f"'{comp.id}' padding")
        check(comp.layout.gap, comp.id, "gap", f"'{comp.id}' gap")
        check(comp.layout.margin_bottom, comp.id, "margin_bottom", f"'{comp.id}' margin_bottom")

    if rule.allow_half_step and half_steps > rule.max_half_step_usage:
        issues.append(
            Issue(
                Severity.WARNING,
                f"Excessive use of 4px half-steps ({half_steps} occurrences) - consider using 8px base unit",
                category="excessive_half_step",
            )
        )

    logger.debug("Spacing: %d issues", len(issues))
    return RuleResult.from_issues(issues)


__all__ = [
    "GRID_VALUES",
    "SpacingRule",
    "is_on_grid",
    "nearest_grid_value",
    "is_half_step",
    "validate_spacing",
]
