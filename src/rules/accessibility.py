"""Accessibility rule.

Interactive elements need labels, headings must not skip levels, nesting
stays shallow, focus indicators are declared visible and the tab order
does not put a button ahead of its own input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.model import Component, ComponentType, Structure, walk_components

from .lib import Issue, RuleResult, Severity, first_token, heading_level, is_interactive

logger = logging.getLogger(__name__)

LABEL_SUFFIXES: tuple[str, ...] = ("-input", "-field", "-button", "-btn")
BLANKET_LABELS = "all_interactive_elements"
VISIBLE_FOCUS = "visible"


@dataclass
class AccessibilityRule:
    """Switches and limits for the accessibility rule."""

    require_labels: bool = True
    check_heading_order: bool = True
    max_nesting_depth: int = 4
    require_focus_indicator: bool = True
    check_tab_order: bool = True


def label_base(component_id: str) -> str:
    """Strip the interactive suffixes from an ID, in order."""
    base = component_id
    for suffix in LABEL_SUFFIXES:
        base = base.removesuffix(suffix)
    return base


def has_label(comp: Component, structure: Structure) -> bool:
    """True if a `<base>-label` text exists, the element has content, or labels are blanket-asserted."""
    label_id = f"{label_base(comp.id)}-label"
    for other, _, _ in walk_components(structure.components):
        if other.id == label_id and other.type == ComponentType.TEXT.value:
            return True
    if comp.content:
        return True
    return structure.accessibility.labels == BLANKET_LABELS


def validate_accessibility(structure: Structure, rule: AccessibilityRule | None = None) -> RuleResult:
    """Check labels, heading order, nesting depth, focus and tab order."""
    rule = rule or AccessibilityRule()
    issues: list[Issue] = []
    ordered: list[Component] = []
    headings: list[tuple[Component, int]] = []
    deepest = 0

    for comp, depth, _ in walk_components(structure.components):
        if depth > rule.max_nesting_depth:
            issues.append(
                Issue(
                    Severity.ERROR,
                    f"A11y: Component '{comp.id}' exceeds max nesting depth "
                    f"({rule.max_nesting_depth} levels)",
                    comp.id,
                )
            )
        deepest = max(deepest, depth)
        ordered.append(comp)
        level = heading_level(comp)
        if level:
            headings.append((comp, level))

    interactive = [c for c in ordered if is_interactive(c)]

    if rule.require_labels:
        for comp in interactive:
            if not has_label(comp, structure):
                issues.append(Issue(Severity.ERROR, f"A11y: '{comp.id}' missing label", comp.id))

    if rule.check_heading_order:
        for (_, prev), (comp, curr) in zip(headings, headings[1:]):
            if curr > prev + 1:
                issues.append(
                    Issue(
                        Severity.ERROR,
                        f"A11y: Heading structure jumps from h{prev} to h{curr} (missing h{prev + 1})",
                        comp.id,
                    )
                )

    focus = structure.accessibility.focus_indicators
    if rule.require_focus_indicator:
        if not focus:
            issues.append(
                Issue(Severity.WARNING, "A11y: Focus indicators not defined in accessibility settings")
            )
        elif focus != VISIBLE_FOCUS:
            issues.append(
                Issue(Severity.WARNING, f"A11y: Focus indicators set to '{focus}' - recommend 'visible'")
            )

    if rule.check_tab_order:
        for curr, nxt in zip(interactive, interactive[1:]):
            if (
                curr.type == ComponentType.BUTTON.value
                and nxt.type == ComponentType.INPUT.value
                and first_token(curr.id) == first_token(nxt.id)
            ):
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"A11y: Tab order may be confusing - '{curr.id}' comes before "
                        f"'{nxt.id}' in layout",
                        curr.id,
                    )
                )

    if structure.accessibility.semantic_structure and not any(c.role for c in ordered):
        issues.append(
            Issue(
                Severity.INFO,
                "A11y: Semantic structure enabled but no roles defined - consider adding "
                "roles like 'header', 'navigation', 'main', 'footer'",
            )
        )

    no_errors = not any(i.severity == Severity.ERROR for i in issues)
    if not issues or (no_errors and len(issues) <= 2):
        if rule.require_labels and interactive:
            issues.append(Issue(Severity.INFO, "✓ All interactive elements have labels"))
        if rule.check_heading_order and headings:
            issues.append(Issue(Severity.INFO, "✓ Heading hierarchy is correct"))
        if rule.require_focus_indicator and focus == VISIBLE_FOCUS:
            issues.append(Issue(Severity.INFO, "✓ Focus indicators are properly defined"))
        if ordered:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"✓ Nesting depth ({deepest}) within acceptable limits ({rule.max_nesting_depth})",
                )
            )

    logger.debug("Accessibility: %d interactive, %d headings, %d issues", len(interactive), len(headings), len(issues))
    return RuleResult.from_issues(issues)


__all__ = [
    "AccessibilityRule",
    "LABEL_SUFFIXES",
    "label_base",
    "has_label",
    "validate_accessibility",
]
