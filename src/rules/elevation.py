"""Elevation rule.

Recommends a shadow level for components whose type and role have a
canonical elevation, and matches CSS box-shadow values against the fixed
six-level scale.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from src.model import ComponentType, Structure, iter_components

from .lib import Issue, RuleResult, Severity

logger = logging.getLogger(__name__)

ELEVATION_LEVELS: dict[str, str] = {
    "0": "none",
    "1": "0 1px 2px 0 rgba(0,0,0,0.05)",
    "2": "0 2px 4px 0 rgba(0,0,0,0.1)",
    "3": "0 4px 8px 0 rgba(0,0,0,0.12)",
    "4": "0 8px 16px 0 rgba(0,0,0,0.15)",
    "5": "0 16px 32px 0 rgba(0,0,0,0.2)",
}

_BOX_ROLE_LEVELS: dict[str, str] = {
    "card": "1",
    "dropdown": "3",
    "menu": "3",
    "modal": "4",
    "dialog": "4",
}

_WHITESPACE_RE = re.compile(r"\s+")
_BLUR_RE = re.compile(r"(-?\d+)\s+(-?\d+)px\s+(-?\d+)px")


@dataclass
class ElevationRule:
    """Shadow string for each elevation level."""

    levels: dict[str, str] = field(default_factory=lambda: dict(ELEVATION_LEVELS))


def recommended_level(component_type: str, role: str) -> str:
    """Canonical elevation for a (type, role) pair, "" when there is none."""
    if component_type == ComponentType.BUTTON.value:
        return "2"
    if component_type == ComponentType.BOX.value:
        return _BOX_ROLE_LEVELS.get(role, "")
    return ""


def normalize_shadow(shadow: str) -> str:
    return _WHITESPACE_RE.sub(" ", shadow.strip()).lower()


def parse_shadow_value(shadow: str, levels: dict[str, str] | None = None) -> str:
    """Level whose shadow matches after normalization, or ""."""
    levels = levels or ELEVATION_LEVELS
    normalized = normalize_shadow(shadow)
    for level, defined in levels.items():
        if normalized == normalize_shadow(defined):
            return level
    return ""


def extract_blur_radius(shadow: str) -> int:
    """Blur radius (third length) of a box-shadow, 0 if it cannot be read."""
    match = _BLUR_RE.search(shadow)
    return int(match.group(3)) if match else 0


def closest_elevation_level(shadow: str) -> str:
    """Map an unknown shadow to a level by its blur radius."""
    blur = extract_blur_radius(shadow)
    if blur <= 1:
        return "1"
    if blur <= 3:
        return "2"
    if blur <= 6:
        return "3"
    if blur <= 12:
        return "4"
    return "5"


def validate_shadow_value(shadow: str, levels: dict[str, str] | None = None) -> tuple[bool, str, str]:
    """Check a shadow against the scale.

    Returns:
        (ok, level, suggestion): level is set when ok; suggestion names the
        closest level when not.
    """
    levels = levels or ELEVATION_LEVELS
    if not shadow or shadow == "none":
        return True, "0", ""
    level = parse_shadow_value(shadow, levels)
    if level:
        return True, level, ""
    closest = closest_elevation_level(shadow)
    return False, "", f"Consider using elevation {closest}: {levels[closest]}"


def validate_elevation(structure: Structure, rule: ElevationRule | None = None) -> RuleResult:
    """Recommend elevation levels for cards, buttons, menus and dialogs."""
    rule = rule or ElevationRule()
    issues: list[Issue] = []
    for comp in iter_components(structure.components):
        level = recommended_level(comp.type, comp.role)
        if level:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"Info: Component '{comp.id}' ({comp.type}) should use elevation "
                    f"{level}: {rule.levels[level]}",
                    comp.id,
                )
            )
    logger.debug("Elevation: %d recommendations", len(issues))
    return RuleResult.from_issues(issues)


__all__ = [
    "ELEVATION_LEVELS",
    "ElevationRule",
    "recommended_level",
    "normalize_shadow",
    "parse_shadow_value",
    "extract_blur_radius",
    "closest_elevation_level",
    "validate_shadow_value",
    "validate_elevation",
]
