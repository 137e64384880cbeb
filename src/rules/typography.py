"""Typography scale rule.

Text sizes must be one of the scale tokens. The numeric scale (a Major
Third from a 16px base by default) is exposed for reporting and for
checking raw pixel sizes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from src.model import ComponentType, Structure, iter_components

from .lib import TYPOGRAPHY_SCALE, Issue, RuleResult, Severity

logger = logging.getLogger(__name__)

PREDEFINED_SCALES: dict[str, float] = {
    "minor-second": 1.067,
    "major-second": 1.125,
    "minor-third": 1.200,
    "major-third": 1.250,
    "perfect-fourth": 1.333,
    "augmented-fourth": 1.414,
    "perfect-fifth": 1.500,
    "golden-ratio": 1.618,
}

# Whole and half steps from the base size
SCALE_STEPS: tuple[float, ...] = tuple(x / 2 for x in range(-10, 11))


@dataclass
class TypographyRule:
    """Scale ratio, base size and token sizes."""

    scale_ratio: float = 1.25
    base_size: float = 16
    tolerance: float = 0.5
    sizes: dict[str, int] = field(default_factory=lambda: dict(TYPOGRAPHY_SCALE))


def is_on_typography_scale(size: float, base: float = 16, ratio: float = 1.25, tolerance: float = 0.5) -> bool:
    """True if size is within tolerance of base * ratio**step for a half step in -5..5."""
    return any(abs(base * ratio**step - size) <= tolerance for step in SCALE_STEPS)


def get_scale_name(ratio: float) -> str:
    """Name of a predefined scale ratio, or "custom"."""
    for name, value in PREDEFINED_SCALES.items():
        if abs(value - ratio) < 0.001:
            return name
    return "custom"


def validate_typography(structure: Structure, rule: TypographyRule | None = None) -> RuleResult:
    """Flag text components using sizes outside the token scale."""
    rule = rule or TypographyRule()
    issues: list[Issue] = []
    valid = ", ".join(rule.sizes)

    for comp in iter_components(structure.components):
        if comp.type != ComponentType.TEXT.value or not comp.size:
            continue
        if comp.size in rule.sizes:
            continue
        issues.append(
            Issue(
                Severity.WARNING,
                f"Typography: '{comp.id}' uses unknown size token '{comp.size}'",
                comp.id,
            )
        )
        issues.append(Issue(Severity.INFO, f"   Valid size tokens: {valid}", comp.id))

    logger.debug("Typography (%s scale): %d issues", get_scale_name(rule.scale_ratio), len(issues))
    return RuleResult.from_issues(issues)


__all__ = [
    "PREDEFINED_SCALES",
    "TypographyRule",
    "is_on_typography_scale",
    "get_scale_name",
    "validate_typography",
]
