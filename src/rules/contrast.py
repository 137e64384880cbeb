"""Color contrast rule (WCAG 2.0).

Text is checked against the nearest ancestor background. Failing colors get
a suggested replacement found by darkening, or on dark backgrounds
lightening, the foreground in 10% steps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.model import Component, ComponentType, Structure

from .lib import Issue, RuleResult, Severity, contrast_ratio, hex_to_rgb, is_large_text, relative_luminance, rgb_to_hex

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "#FFFFFF"
DEFAULT_BUTTON_BACKGROUND = "#000000"
DEFAULT_BUTTON_TEXT = "#FFFFFF"


@dataclass
class ContrastRule:
    """Required contrast ratios."""

    normal_text_aa: float = 4.5
    large_text_aa: float = 3.0
    check_aaa: bool = False
    normal_text_aaa: float = 7.0
    large_text_aaa: float = 4.5


def suggest_compliant_color(foreground: str, background: str, required: float) -> str:
    """Find a nearby foreground that meets the required ratio, or "" if none.

    Darkens in 10% steps first; if that fails and the background is dark,
    lightens in 10% steps.
    """
    r, g, b = hex_to_rgb(foreground)
    for i in range(10):
        factor = 1.0 - i * 0.1
        candidate = rgb_to_hex((int(r * factor), int(g * factor), int(b * factor)))
        if contrast_ratio(candidate, background) >= required:
            return candidate
    if relative_luminance(background) < 0.5:
        for i in range(1, 11):
            factor = 1.0 + i * 0.1
            candidate = rgb_to_hex(
                (int(min(255, r * factor)), int(min(255, g * factor)), int(min(255, b * factor)))
            )
            if contrast_ratio(candidate, background) >= required:
                return candidate
    return ""


def validate_contrast(structure: Structure, rule: ContrastRule | None = None) -> RuleResult:
    """Check text and button label contrast against inherited backgrounds."""
    rule = rule or ContrastRule()
    issues: list[Issue] = []

    def check_text(comp: Component, background: str) -> None:
        large = is_large_text(comp.size, comp.weight)
        required = rule.large_text_aa if large else rule.normal_text_aa
        ratio = contrast_ratio(comp.color, background)
        if ratio < required:
            issues.append(
                Issue(
                    Severity.ERROR,
                    f"Contrast: '{comp.id}' ({comp.color}) on {background} fails WCAG AA "
                    f"({ratio:.1f}:1, requires {required:.1f}:1)",
                    comp.id,
                    category="contrast_fail",
                )
            )
            suggestion = suggest_compliant_color(comp.color, background, required)
            if suggestion:
                issues.append(
                    Issue(
                        Severity.INFO,
                        f"   Suggestion: Use {suggestion} or similar for compliance",
                        comp.id,
                        category="contrast_suggestion",
                    )
                )
        elif rule.check_aaa:
            aaa = rule.large_text_aaa if large else rule.normal_text_aaa
            if ratio < aaa:
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Contrast: '{comp.id}' passes AA but fails AAA "
                        f"({ratio:.1f}:1, requires {aaa:.1f}:1 for AAA)",
                        comp.id,
                        category="contrast_aaa",
                    )
                )

    def check_button(comp: Component) -> None:
        background = comp.layout.background or DEFAULT_BUTTON_BACKGROUND
        text = comp.color or DEFAULT_BUTTON_TEXT
        ratio = contrast_ratio(text, background)
        if ratio < rule.normal_text_aa:
            issues.append(
                Issue(
                    Severity.ERROR,
                    f"Contrast: Button '{comp.id}' text ({text}) on {background} fails WCAG AA "
                    f"({ratio:.1f}:1, requires {rule.normal_text_aa:.1f}:1)",
                    comp.id,
                    category="contrast_fail",
                )
            )

    def visit(comp: Component, inherited: str) -> None:
        background = comp.layout.background or inherited
        if comp.type == ComponentType.TEXT.value and comp.color:
            check_text(comp, background)
        if comp.type == ComponentType.BUTTON.value and comp.content:
            check_button(comp)
        for child in comp.children:
            visit(child, background)

    for comp in structure.components:
        visit(comp, DEFAULT_BACKGROUND)

    logger.debug("Contrast: %d issues", len(issues))
    return RuleResult.from_issues(issues)


__all__ = [
    "ContrastRule",
    "DEFAULT_BACKGROUND",
    "suggest_compliant_color",
    "validate_contrast",
]
