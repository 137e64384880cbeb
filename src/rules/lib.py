"""Shared finding types and helpers for the design rule evaluators.

Every evaluator returns a RuleResult holding an ordered list of Issue
values. A result passes when it holds no error-severity issue; warnings and
infos are advisory. The helpers here (color math, size scales, component
classification) are shared so that two rules never disagree about what a
heading or a dangerous action is.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable

from src.model import INTERACTIVE_TYPES, Component, ComponentType, SizeToken, walk_components

# =============================================================================
# Severity and Issues
# =============================================================================


class Severity(str, Enum):
    """How serious a finding is."""

    ERROR = "error"  # Objectively wrong, fails the rule
    WARNING = "warning"  # Likely wrong, context dependent
    INFO = "info"  # Advisory


@dataclass
class Issue:
    """A single finding produced by a rule evaluator.

    Attributes:
        severity: Error, warning or info.
        message: Human-readable description.
        component: ID of the component concerned ("" for document-level
            findings, "layout" for page layout settings).
        category: Rule-specific classification, e.g. "off_grid".
        viewport: Breakpoint name for responsive findings.
        mode: Color mode for dark-mode findings.
        property: Layout property a spacing finding refers to.
        value: Offending value of that property.
        suggested: Suggested replacement value.
    """

    severity: Severity
    message: str
    component: str = ""
    category: str = ""
    viewport: str = ""
    mode: str = ""
    property: str = ""
    value: int = 0
    suggested: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict, dropping unset optional fields."""
        data: dict[str, Any] = {
            "severity": self.severity.value,
            "message": self.message,
            "component": self.component,
        }
        for key in ("category", "viewport", "mode", "property", "value", "suggested"):
            value = getattr(self, key)
            if value:
                data[key] = value
        return data


@dataclass
class RuleResult:
    """Outcome of one rule evaluator."""

    passed: bool = True
    issues: list[Issue] = field(default_factory=list)

    @classmethod
    def from_issues(cls, issues: Iterable[Issue]) -> RuleResult:
        """Build a result; it passes unless an error issue is present."""
        issues = list(issues)
        return cls(
            passed=not any(i.severity == Severity.ERROR for i in issues),
            issues=issues,
        )

    @property
    def status(self) -> str:
        return "passed" if self.passed else "failed"

    @property
    def errors(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def infos(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == Severity.INFO]

    def to_dict(self) -> dict[str, Any]:
        """Convert to the machine-readable report shape."""
        return {
            "status": self.status,
            "issues": [i.to_dict() for i in self.issues],
        }


# =============================================================================
# Size Scales
# =============================================================================

# Nominal pixel heights used for visual comparison and WCAG large text.
SIZE_PIXELS: dict[str, int] = {
    "xs": 12,
    "sm": 14,
    "base": 16,
    "md": 18,
    "lg": 20,
    "xl": 24,
    "2xl": 24,
    "3xl": 30,
    "4xl": 36,
}

# Major Third (1.25) scale from a 16px base, used by the typography rule.
TYPOGRAPHY_SCALE: dict[str, int] = {
    "xs": 12,
    "sm": 14,
    "base": 16,
    "md": 18,
    "lg": 20,
    "xl": 25,
    "2xl": 31,
    "3xl": 39,
    "4xl": 49,
}

SIZE_ORDER: tuple[str, ...] = tuple(t.value for t in SizeToken)

DEFAULT_TEXT_SIZE = SIZE_PIXELS["base"]

_HEADING_PREFIX_RE = re.compile(r"^h([1-6])")
_HEADING_LEVEL_BY_SIZE: dict[str, int] = {"4xl": 1, "3xl": 2, "2xl": 3}


def size_rank(size: str) -> int:
    """Position of a size token on the scale, -1 when unknown or unset."""
    try:
        return SIZE_ORDER.index(size)
    except ValueError:
        return -1


def size_pixels(size: str) -> int:
    """Nominal pixel size of a token; unknown tokens count as base."""
    return SIZE_PIXELS.get(size, DEFAULT_TEXT_SIZE)


def is_large_text(size: str, weight: str = "") -> bool:
    """WCAG large text: xl and above, or lg and above when bold."""
    rank = size_rank(size)
    if rank >= size_rank("xl"):
        return True
    return weight == "bold" and rank >= size_rank("lg")


# =============================================================================
# Component Classification
# =============================================================================

DANGEROUS_KEYWORDS: tuple[str, ...] = ("delete", "remove", "destroy", "clear", "reset", "cancel")


def is_interactive(comp: Component) -> bool:
    """Buttons and inputs are interactive."""
    return comp.type in INTERACTIVE_TYPES


def is_dangerous_action(comp: Component) -> bool:
    """True if the ID or role names a destructive action."""
    id_lower = comp.id.lower()
    role_lower = comp.role.lower()
    return any(k in id_lower or k in role_lower for k in DANGEROUS_KEYWORDS)


def first_token(component_id: str) -> str:
    """First hyphen-separated token of an ID."""
    return component_id.split("-", 1)[0]


def heading_level(comp: Component) -> int:
    """Heading level of a text component, 0 when it is not a heading.

    An ID starting with h1..h6 gives the level directly. Otherwise a text
    whose ID or role mentions "heading" or "title" is a heading when its
    size is 2xl or larger: 4xl is level 1, 3xl level 2, 2xl level 3.
    """
    if comp.type != ComponentType.TEXT.value:
        return 0
    id_lower = comp.id.lower()
    match = _HEADING_PREFIX_RE.match(id_lower)
    if match:
        return int(match.group(1))
    named = any(word in id_lower or word in comp.role.lower() for word in ("heading", "title"))
    if named:
        return _HEADING_LEVEL_BY_SIZE.get(comp.size, 0)
    return 0


# =============================================================================
# Color
# =============================================================================


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """Parse #RRGGBB or #RGB into an RGB triple; malformed input is black."""
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        return (0, 0, 0)
    try:
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
    except ValueError:
        return (0, 0, 0)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """WCAG 2.0 relative luminance of a hex color, in [0, 1]."""
    r, g, b = hex_to_rgb(color)
    return 0.2126 * _linearize(r) + 0.7152 * _linearize(g) + 0.0722 * _linearize(b)


def contrast_ratio(foreground: str, background: str) -> float:
    """WCAG contrast ratio between two hex colors, from 1 to 21."""
    l1 = relative_luminance(foreground)
    l2 = relative_luminance(background)
    lighter, darker = max(l1, l2), min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


__all__ = [
    # Findings
    "Severity",
    "Issue",
    "RuleResult",
    # Sizes
    "SIZE_PIXELS",
    "TYPOGRAPHY_SCALE",
    "SIZE_ORDER",
    "DEFAULT_TEXT_SIZE",
    "size_rank",
    "size_pixels",
    "is_large_text",
    # Classification
    "DANGEROUS_KEYWORDS",
    "is_interactive",
    "is_dangerous_action",
    "first_token",
    "heading_level",
    "walk_components",
    # Color
    "hex_to_rgb",
    "rgb_to_hex",
    "relative_luminance",
    "contrast_ratio",
]
