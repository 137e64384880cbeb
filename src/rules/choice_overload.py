"""Choice overload rule (Hick's Law).

Navigation, forms, button groups and card grids each get a maximum number
of options before the user is asked to choose from too many.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.model import Component, ComponentType, Display, Structure, iter_components

from .lib import Issue, RuleResult, Severity, is_interactive

logger = logging.getLogger(__name__)


@dataclass
class ChoiceOverloadRule:
    """Option limits per container kind."""

    max_nav_items: int = 7
    max_form_fields: int = 7
    max_button_group: int = 3
    max_card_grid: int = 12


def is_navigation(comp: Component) -> bool:
    id_lower = comp.id.lower()
    return "nav" in id_lower or "menu" in id_lower or comp.role.lower() in ("navigation", "menu")


def is_form(comp: Component) -> bool:
    id_lower = comp.id.lower()
    return any(k in id_lower for k in ("form", "signup", "login", "register")) or comp.role.lower() == "form"


def is_button_group(comp: Component) -> bool:
    """At least two direct children are buttons."""
    return sum(1 for c in comp.children if c.type == ComponentType.BUTTON.value) >= 2


def is_card_grid(comp: Component) -> bool:
    id_lower = comp.id.lower()
    return (
        any(k in id_lower for k in ("grid", "card", "list"))
        and comp.layout.display == Display.GRID.value
        and bool(comp.children)
    )


def _count(comp: Component, predicate) -> int:
    """Count descendants (not the component itself) matching predicate."""
    return sum(1 for c in iter_components(comp.children) if predicate(c))


def validate_choice_overload(structure: Structure, rule: ChoiceOverloadRule | None = None) -> RuleResult:
    """Flag containers offering more choices than their limit."""
    rule = rule or ChoiceOverloadRule()
    issues: list[Issue] = []

    for comp in iter_components(structure.components):
        nav = is_navigation(comp)
        form = is_form(comp)

        if nav:
            count = _count(comp, is_interactive)
            if count > rule.max_nav_items:
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Choice Overload: Navigation '{comp.id}' has {count} items - consider "
                        f"grouping or secondary menu (recommended max: {rule.max_nav_items})",
                        comp.id,
                        category="navigation_overload",
                    )
                )

        if form:
            count = _count(comp, lambda c: c.type == ComponentType.INPUT.value)
            if count > rule.max_form_fields:
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Choice Overload: Form section '{comp.id}' has {count} fields - consider "
                        f"splitting into steps (recommended max: {rule.max_form_fields})",
                        comp.id,
                        category="form_overload",
                    )
                )

        if not nav and not form and is_button_group(comp):
            count = _count(comp, lambda c: c.type == ComponentType.BUTTON.value)
            if count > rule.max_button_group:
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Choice Overload: Button group '{comp.id}' has {count} buttons - consider "
                        f"reducing options (recommended max: {rule.max_button_group})",
                        comp.id,
                        category="button_group_overload",
                    )
                )

        if is_card_grid(comp):
            count = len(comp.children)
            if count > rule.max_card_grid:
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Choice Overload: Grid '{comp.id}' has {count} items - consider "
                        f"pagination or filtering (recommended max: {rule.max_card_grid})",
                        comp.id,
                        category="card_grid_overload",
                    )
                )

    logger.debug("Choice overload: %d issues", len(issues))
    return RuleResult.from_issues(issues)


__all__ = [
    "ChoiceOverloadRule",
    "is_navigation",
    "is_form",
    "is_button_group",
    "is_card_grid",
    "validate_choice_overload",
]
