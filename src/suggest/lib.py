"""Proactive design suggestions.

Each category has a small analyzer that recognises a UI pattern among the
top-level components (case-insensitive substring match on ID or type) and
returns "good", "consider" or "suggestion" entries. Analyzers are
independent; generate_suggestions runs the requested ones in a fixed order.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

from src.model import Component, ComponentType, Display, Structure

logger = logging.getLogger(__name__)


# =============================================================================
# Types
# =============================================================================


class SuggestionCategory(str, Enum):
    """Pattern families the engine knows about."""

    FORMS = "forms"
    NAVIGATION = "navigation"
    LAYOUTS = "layouts"
    BUTTONS = "buttons"
    CARDS = "cards"
    TABLES = "tables"
    MODALS = "modals"
    ALL = "all"


class SuggestionType(str, Enum):
    """How a suggestion should be read."""

    GOOD = "good"
    CONSIDER = "consider"
    SUGGESTION = "suggestion"


@dataclass
class Suggestion:
    """One piece of advice.

    Attributes:
        category: SuggestionCategory value it belongs to.
        type: SuggestionType value.
        message: Human-readable advice.
        component_id: Component the advice is about, if any.
    """

    category: str
    type: str
    message: str
    component_id: str = ""

    def to_dict(self) -> dict[str, str]:
        data = {"category": self.category, "type": self.type, "message": self.message}
        if self.component_id:
            data["component_id"] = self.component_id
        return data


@dataclass
class SuggestionResult:
    """Suggestions keyed by category; empty categories are omitted."""

    categories: dict[str, list[Suggestion]] = field(default_factory=dict)
    total: int = 0

    def add(self, category: str, suggestions: list[Suggestion]) -> None:
        if not suggestions:
            return
        self.categories[category] = suggestions
        self.total += len(suggestions)

    def to_dict(self) -> dict[str, Any]:
        return {
            "categories": {
                name: [s.to_dict() for s in items] for name, items in self.categories.items()
            },
            "total": self.total,
        }


# =============================================================================
# Matching Helpers
# =============================================================================

INPUT_FIELD_TYPES: tuple[str, ...] = ("input", "text_input", "select", "textarea", "checkbox", "radio")
LABEL_TYPES: tuple[str, ...] = (ComponentType.TEXT.value, "label")
HELP_TEXT_SIZES: tuple[str, ...] = ("xs", "sm")
NAV_ITEM_TYPES: tuple[str, ...] = (ComponentType.TEXT.value, "link", ComponentType.BUTTON.value)
MIN_BUTTON_SIZE = 44
MAX_NAV_ITEMS = 7
MAX_FORM_FIELDS = 5
MAX_PAGE_WIDTH = 1440


def find_components(structure: Structure, *keywords: str) -> list[Component]:
    """Top-level components whose type or ID contains any keyword."""
    found = []
    for comp in structure.components:
        type_lower = comp.type.lower()
        id_lower = comp.id.lower()
        if any(k in type_lower or k in id_lower for k in keywords):
            found.append(comp)
    return found


def is_input_field(component_type: str) -> bool:
    type_lower = component_type.lower()
    return any(t in type_lower for t in INPUT_FIELD_TYPES)


def count_navigation_items(comp: Component) -> int:
    """Texts, links and buttons anywhere below a navigation container."""
    count = 0
    for child in comp.children:
        if child.type in NAV_ITEM_TYPES:
            count += 1
        count += count_navigation_items(child)
    return count


# =============================================================================
# Analyzers
# =============================================================================


def analyze_forms(structure: Structure) -> list[Suggestion]:
    """Label presence, field count and help text."""
    cat = SuggestionCategory.FORMS.value
    fields = find_components(structure, "form", "input", "text_input", "select", "checkbox", "radio")
    if not fields:
        return []

    labelled = 0
    unlabelled: list[str] = []
    for comp in fields:
        if not is_input_field(comp.type):
            continue
        has_label = any(child.type in LABEL_TYPES for child in comp.children) or any(
            other.type in LABEL_TYPES and other.id != comp.id for other in structure.components
        )
        if has_label:
            labelled += 1
        else:
            unlabelled.append(comp.id)

    suggestions: list[Suggestion] = []
    if labelled:
        suggestions.append(
            Suggestion(cat, SuggestionType.GOOD.value, "Labels are above inputs (good for mobile and scanning)")
        )
    if unlabelled:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.SUGGESTION.value,
                f"Add labels for inputs: {', '.join(unlabelled)}",
                unlabelled[0],
            )
        )
    if len(fields) > MAX_FORM_FIELDS:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.SUGGESTION.value,
                f"{len(fields)} form fields detected. Consider grouping related fields with spacing "
                "(24-32px between groups)",
            )
        )

    has_help_text = any(
        comp.type == ComponentType.TEXT.value and comp.size in HELP_TEXT_SIZES for comp in structure.components
    )
    if not has_help_text and len(fields) > 3:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.CONSIDER.value,
                "Add field descriptions or help text for complex inputs (font-size: 12-13px, "
                "color: text.secondary)",
            )
        )
    return suggestions


def analyze_navigation(structure: Structure) -> list[Suggestion]:
    """Navigation placement, item count and active state."""
    cat = SuggestionCategory.NAVIGATION.value
    navs = find_components(structure, "nav", "navbar", "menu", "navigation", "header")
    if not navs:
        return []

    suggestions: list[Suggestion] = []
    for nav in navs:
        if nav.role in ("header", "navigation"):
            suggestions.append(
                Suggestion(
                    cat,
                    SuggestionType.GOOD.value,
                    "Primary navigation is in expected location (header/top)",
                    nav.id,
                )
            )
            break

    items = sum(count_navigation_items(nav) for nav in navs)
    if items > MAX_NAV_ITEMS:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.CONSIDER.value,
                f"{items} navigation items detected. Consider dropdown menus or grouping for less "
                "common items (optimal: 5-7 items)",
            )
        )

    has_active_state = any(
        child.layout.background or child.weight == "bold" for nav in navs for child in nav.children
    )
    if not has_active_state:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.SUGGESTION.value,
                "Add visual indicator for current/active page (background color, underline, or bold text)",
            )
        )
    return suggestions


def analyze_layouts(structure: Structure) -> list[Suggestion]:
    """Grid usage and page max-width."""
    cat = SuggestionCategory.LAYOUTS.value
    suggestions: list[Suggestion] = []

    if any(comp.layout.display == Display.GRID.value for comp in structure.components):
        suggestions.append(Suggestion(cat, SuggestionType.GOOD.value, "Layout uses CSS Grid for consistent structure"))
    elif len(structure.components) > 5:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.SUGGESTION.value,
                "Consider using CSS Grid (display: grid) for consistent alignment",
            )
        )

    max_width = structure.layout.max_width
    if max_width > MAX_PAGE_WIDTH:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.CONSIDER.value,
                f"Max width is {max_width}px. Consider constraining to 1280-1440px for better readability",
            )
        )
    elif max_width > 0:
        suggestions.append(
            Suggestion(cat, SuggestionType.GOOD.value, f"Layout uses appropriate max-width ({max_width}px)")
        )
    return suggestions


def analyze_buttons(structure: Structure) -> list[Suggestion]:
    """Touch size and the number of primary buttons."""
    cat = SuggestionCategory.BUTTONS.value
    buttons = find_components(structure, "button", "cta", "action")
    if not buttons:
        return []

    suggestions: list[Suggestion] = []
    small = [b.id for b in buttons if b.layout.width < MIN_BUTTON_SIZE or b.layout.height < MIN_BUTTON_SIZE]
    if small:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.SUGGESTION.value,
                f"Increase size of buttons to minimum 44x44px: {', '.join(small)}",
                small[0],
            )
        )
    else:
        suggestions.append(
            Suggestion(cat, SuggestionType.GOOD.value, "All buttons meet minimum touch target size (44x44px)")
        )

    primaries = sum(1 for b in buttons if "primary" in b.id.lower() or "primary" in b.type.lower())
    if primaries > 1:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.CONSIDER.value,
                f"{primaries} primary buttons detected. Use only 1 primary button per section for clear "
                "CTA hierarchy",
            )
        )
    return suggestions


def analyze_cards(structure: Structure) -> list[Suggestion]:
    """Spacing between cards and border usage."""
    cat = SuggestionCategory.CARDS.value
    cards = find_components(structure, "card", "panel", "box")
    if not cards:
        return []

    suggestions: list[Suggestion] = []
    if len(cards) > 1:
        for comp in structure.components:
            if comp.layout.display in (Display.GRID.value, Display.FLEX.value) and comp.layout.gap > 0:
                suggestions.append(
                    Suggestion(
                        cat,
                        SuggestionType.GOOD.value,
                        f"Cards use consistent spacing (gap: {comp.layout.gap}px)",
                    )
                )
                break

    bordered = sum(1 for card in cards if card.layout.border)
    if bordered == len(cards):
        suggestions.append(Suggestion(cat, SuggestionType.GOOD.value, "Cards use borders for visual separation"))
    elif bordered == 0:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.CONSIDER.value,
                "Add subtle border to cards for visual separation (e.g., border: 1px solid #E5E5E5)",
            )
        )
    return suggestions


def analyze_tables(structure: Structure) -> list[Suggestion]:
    """Header emphasis and sorting."""
    cat = SuggestionCategory.TABLES.value
    if not find_components(structure, "table", "datagrid", "list"):
        return []

    has_bold_header = any(
        ("header" in comp.role.lower() or "header" in comp.id.lower()) and comp.weight == "bold"
        for comp in structure.components
    )
    if has_bold_header:
        first = Suggestion(cat, SuggestionType.GOOD.value, "Table includes clear headers with appropriate weight")
    else:
        first = Suggestion(
            cat,
            SuggestionType.SUGGESTION.value,
            "Add table headers with bold text (weight: bold) for better scannability",
        )
    return [
        first,
        Suggestion(cat, SuggestionType.CONSIDER.value, "Add sorting indicators (arrows) to sortable columns"),
    ]


def analyze_modals(structure: Structure) -> list[Suggestion]:
    """Backdrop and close affordance."""
    cat = SuggestionCategory.MODALS.value
    modals = find_components(structure, "modal", "dialog", "popup", "overlay")
    if not modals:
        return []

    suggestions: list[Suggestion] = []
    has_backdrop = any(
        "overlay" in comp.type.lower() or "backdrop" in comp.role.lower() for comp in structure.components
    )
    if has_backdrop:
        suggestions.append(Suggestion(cat, SuggestionType.GOOD.value, "Modal includes backdrop/overlay for focus"))
    else:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.SUGGESTION.value,
                "Add semi-transparent backdrop (e.g., background: rgba(0,0,0,0.5)) to focus attention on modal",
            )
        )

    has_close = any(
        "close" in child.id.lower() or "close" in child.type.lower() for modal in modals for child in modal.children
    )
    if has_close:
        suggestions.append(Suggestion(cat, SuggestionType.GOOD.value, "Modal includes a close control"))
    else:
        suggestions.append(
            Suggestion(
                cat,
                SuggestionType.SUGGESTION.value,
                "Add close button (X) in top-right corner for easy dismissal",
            )
        )
    return suggestions


ANALYZERS: dict[str, Callable[[Structure], list[Suggestion]]] = {
    SuggestionCategory.FORMS.value: analyze_forms,
    SuggestionCategory.NAVIGATION.value: analyze_navigation,
    SuggestionCategory.LAYOUTS.value: analyze_layouts,
    SuggestionCategory.BUTTONS.value: analyze_buttons,
    SuggestionCategory.CARDS.value: analyze_cards,
    SuggestionCategory.TABLES.value: analyze_tables,
    SuggestionCategory.MODALS.value: analyze_modals,
}


# =============================================================================
# Entry Point
# =============================================================================


def generate_suggestions(
    structure: Structure, category: SuggestionCategory | str = SuggestionCategory.ALL
) -> SuggestionResult:
    """Run the analyzers for one category, or all of them.

    Args:
        structure: Document to analyze.
        category: A SuggestionCategory (or its value). Unknown names yield
            an empty result.

    Returns:
        SuggestionResult with categories in analyzer order.
    """
    name = category.value if isinstance(category, SuggestionCategory) else str(category).lower()
    result = SuggestionResult()
    for key, analyzer in ANALYZERS.items():
        if name in (SuggestionCategory.ALL.value, key):
            result.add(key, analyzer(structure))
    logger.debug("Suggestions (%s): %d across %d categories", name, result.total, len(result.categories))
    return result


__all__ = [
    "SuggestionCategory",
    "SuggestionType",
    "Suggestion",
    "SuggestionResult",
    "ANALYZERS",
    "find_components",
    "count_navigation_items",
    "generate_suggestions",
]
