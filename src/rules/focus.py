"""Focus indicator rule.

Purely advisory: every interactive element gets a reminder to define a
visible keyboard focus state.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.model import Structure, iter_components

from .lib import Issue, RuleResult, Severity


@dataclass
class FocusRule:
    """What a focus indicator should meet and which types need one."""

    min_outline_width: int = 2
    min_contrast: float = 3.0
    interactive_types: tuple[str, ...] = ("button", "input")


def validate_focus(structure: Structure, rule: FocusRule | None = None) -> RuleResult:
    rule = rule or FocusRule()
    return RuleResult.from_issues(
        Issue(
            Severity.INFO,
            f"Interactive element '{comp.id}' of type '{comp.type}' should define a visible "
            f"focus state for keyboard navigation (WCAG 2.4.7, minimum {rule.min_outline_width}px "
            f"outline at {rule.min_contrast:.1f}:1 contrast)",
            comp.id,
        )
        for comp in iter_components(structure.components)
        if comp.type in rule.interactive_types
    )


__all__ = ["FocusRule", "validate_focus"]
