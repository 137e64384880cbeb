"""Visual hierarchy rule.

Headings of a higher level must be visibly larger than lower-level ones,
the primary call to action must be wide enough and never narrower than a
secondary button, and nested padding should shrink by a steady ratio.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.model import Component, ComponentType, Structure

from .lib import Issue, RuleResult, Severity, heading_level, size_pixels

logger = logging.getLogger(__name__)

DEFAULT_BUTTON_WIDTH = 100
SPACING_TOLERANCE = 0.8


@dataclass
class HierarchyRule:
    """Thresholds for the visual hierarchy rule."""

    min_primary_cta_size: int = 120
    scale_ratio: float = 1.25
    spacing_scale_ratio: float = 1.5


@dataclass
class _Heading:
    component: Component
    level: int
    size: int


@dataclass
class _Button:
    component: Component
    primary: bool
    width: int


def is_primary_button(comp: Component, primary_action: str) -> bool:
    """A button is primary when named so or when it is the intent's primary action."""
    return (
        "primary" in comp.id.lower()
        or "primary" in comp.role.lower()
        or (bool(primary_action) and comp.id == primary_action)
    )


def validate_hierarchy(structure: Structure, rule: HierarchyRule | None = None) -> RuleResult:
    """Check heading sizes, primary CTA widths and padding hierarchy."""
    rule = rule or HierarchyRule()
    issues: list[Issue] = []
    headings: list[_Heading] = []
    buttons: list[_Button] = []

    def visit(comp: Component, parent_spacing: int) -> None:
        level = heading_level(comp)
        if level:
            headings.append(_Heading(comp, level, size_pixels(comp.size)))
        if comp.type == ComponentType.BUTTON.value:
            buttons.append(
                _Button(
                    comp,
                    is_primary_button(comp, structure.intent.primary_action),
                    comp.layout.width or DEFAULT_BUTTON_WIDTH,
                )
            )

        padding = comp.layout.padding
        if 0 < padding < parent_spacing:
            expected = parent_spacing / rule.spacing_scale_ratio
            if padding < expected * SPACING_TOLERANCE:
                issues.append(
                    Issue(
                        Severity.INFO,
                        f"Spacing hierarchy: '{comp.id}' has padding {padding}px "
                        f"(parent has {parent_spacing}px) - consider using "
                        f"{expected:.0f}px for consistent hierarchy",
                        comp.id,
                    )
                )

        for child in comp.children:
            visit(child, padding or parent_spacing)

    for comp in structure.components:
        visit(comp, structure.layout.spacing)

    for i, upper in enumerate(headings):
        for lower in headings[i + 1 :]:
            if upper.level < lower.level and upper.size <= lower.size:
                recommended = lower.size * rule.scale_ratio ** (lower.level - upper.level)
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"h{upper.level} ('{upper.component.id}': {upper.size}px) not "
                        f"sufficiently larger than h{lower.level} ('{lower.component.id}': "
                        f"{lower.size}px) - recommend {recommended:.0f}px "
                        f"({rule.scale_ratio:.2f}x scale)",
                        upper.component.id,
                    )
                )

    primaries = [b for b in buttons if b.primary]
    secondaries = [b for b in buttons if not b.primary]
    for btn in primaries:
        if btn.width < rule.min_primary_cta_size:
            issues.append(
                Issue(
                    Severity.WARNING,
                    f"Primary button '{btn.component.id}' is {btn.width}px wide "
                    f"(recommend minimum {rule.min_primary_cta_size}px)",
                    btn.component.id,
                )
            )
    for primary in primaries:
        for secondary in secondaries:
            if primary.width < secondary.width:
                issues.append(
                    Issue(
                        Severity.ERROR,
                        f"Secondary button '{secondary.component.id}' ({secondary.width}px) "
                        f"larger than primary button '{primary.component.id}' ({primary.width}px)",
                        primary.component.id,
                    )
                )

    if not issues:
        issues.append(Issue(Severity.INFO, "✓ Spacing hierarchy is consistent"))
        if headings:
            issues.append(Issue(Severity.INFO, "✓ Heading sizes follow consistent scale"))
        if primaries:
            issues.append(
                Issue(Severity.INFO, "✓ Primary CTA buttons meet minimum size requirements")
            )

    logger.debug("Hierarchy: %d headings, %d buttons, %d issues", len(headings), len(buttons), len(issues))
    return RuleResult.from_issues(issues)


__all__ = ["HierarchyRule", "is_primary_button", "validate_hierarchy"]
