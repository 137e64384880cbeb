"""Responsive rule.

Checks fixed widths against each breakpoint and, on mobile, the size of
interactive elements.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.model import Structure, iter_components

from .lib import Issue, RuleResult, Severity, is_interactive

logger = logging.getLogger(__name__)

BREAKPOINTS: tuple[tuple[str, int], ...] = (("mobile", 375), ("tablet", 768), ("desktop", 1440))


@dataclass
class ResponsiveRule:
    """Breakpoints, in the order they are checked, and the mobile target size."""

    breakpoints: tuple[tuple[str, int], ...] = BREAKPOINTS
    min_touch_size: int = 44
    check_overflow: bool = True
    check_touch_targets: bool = True


def validate_responsive(structure: Structure, rule: ResponsiveRule | None = None) -> RuleResult:
    """Flag widths that overflow a breakpoint and small targets on mobile."""
    rule = rule or ResponsiveRule()
    issues: list[Issue] = []
    page_max = structure.layout.max_width

    for viewport, limit in rule.breakpoints:
        if page_max > limit:
            issues.append(
                Issue(
                    Severity.WARNING,
                    f"Layout max-width ({page_max}px) exceeds {viewport} viewport ({limit}px)",
                    "layout",
                    viewport=viewport,
                )
            )

        for comp in iter_components(structure.components):
            width, height = comp.layout.width, comp.layout.height
            if rule.check_overflow and comp.layout.max_width > limit:
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Component '{comp.id}' max-width ({comp.layout.max_width}px) exceeds "
                        f"{viewport} viewport ({limit}px)",
                        comp.id,
                        viewport=viewport,
                    )
                )
            if rule.check_overflow and width > limit:
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Component '{comp.id}' width ({width}px) exceeds {viewport} viewport ({limit}px)",
                        comp.id,
                        viewport=viewport,
                    )
                )
            if (
                viewport == "mobile"
                and rule.check_touch_targets
                and is_interactive(comp)
                and width > 0
                and height > 0
                and (width < rule.min_touch_size or height < rule.min_touch_size)
            ):
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Interactive element '{comp.id}' ({width}x{height}px) is too small for "
                        f"mobile (minimum {rule.min_touch_size}x{rule.min_touch_size}px recommended)",
                        comp.id,
                        viewport=viewport,
                    )
                )

    logger.debug("Responsive: %d issues", len(issues))
    return RuleResult.from_issues(issues)


__all__ = ["BREAKPOINTS", "ResponsiveRule", "validate_responsive"]
