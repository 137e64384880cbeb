"""Dark-mode readiness rule.

Purely advisory: recommends semantic color tokens in place of absolute
black and white.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.model import Structure, iter_components

from .lib import Issue, RuleResult, Severity

BOTH_MODES = "both"


@dataclass
class DarkModeRule:
    """Colors that do not adapt between light and dark themes."""

    absolute_colors: tuple[str, ...] = ("#000000", "#FFFFFF")


def validate_dark_mode(structure: Structure, rule: DarkModeRule | None = None) -> RuleResult:
    rule = rule or DarkModeRule()
    issues = [
        Issue(
            Severity.INFO,
            "Consider defining semantic color tokens for dark mode support "
            "(e.g., 'text.primary', 'background.surface')",
            "structure",
            mode=BOTH_MODES,
        )
    ]
    for comp in iter_components(structure.components):
        if comp.color in rule.absolute_colors:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"Component '{comp.id}' uses absolute color '{comp.color}' which may not "
                    "adapt well to dark mode. Consider using semantic color tokens.",
                    comp.id,
                    mode=BOTH_MODES,
                )
            )
        if comp.layout.background in rule.absolute_colors:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"Component '{comp.id}' uses absolute background color '{comp.layout.background}' "
                    "which may not adapt to dark mode. Consider semantic tokens like 'background.primary'.",
                    comp.id,
                    mode=BOTH_MODES,
                )
            )
    return RuleResult.from_issues(issues)


__all__ = ["DarkModeRule", "validate_dark_mode"]
