"""Rules module - UX heuristics evaluated against a structure document.

This module provides:
- Shared finding types (Severity, Issue, RuleResult)
- Color, size and classification helpers shared by the rules
- Thirteen evaluators, each a rule dataclass plus validate_<name>()

Every evaluator is pure: it reads the document and returns a RuleResult
that passes unless it holds an error-severity issue.

Example usage:
    >>> from src.rules import validate_contrast
    >>> result = validate_contrast(structure)
    >>> for issue in result.errors:
    ...     print(issue.message)
"""

from .accessibility import AccessibilityRule, validate_accessibility
from .choice_overload import ChoiceOverloadRule, validate_choice_overload
from .contrast import ContrastRule, suggest_compliant_color, validate_contrast
from .dark_mode import DarkModeRule, validate_dark_mode
from .elevation import (
    ELEVATION_LEVELS,
    ElevationRule,
    closest_elevation_level,
    parse_shadow_value,
    validate_elevation,
    validate_shadow_value,
)
from .focus import FocusRule, validate_focus
from .gestalt import GestaltRule, validate_gestalt
from .hierarchy import HierarchyRule, validate_hierarchy
from .lib import (
    SIZE_PIXELS,
    TYPOGRAPHY_SCALE,
    Issue,
    RuleResult,
    Severity,
    contrast_ratio,
    first_token,
    heading_level,
    hex_to_rgb,
    is_dangerous_action,
    is_interactive,
    is_large_text,
    relative_luminance,
    walk_components,
)
from .loading_states import LoadingStateRule, count_components_by_state, validate_loading_states
from .responsive import ResponsiveRule, validate_responsive
from .spacing import SpacingRule, nearest_grid_value, validate_spacing
from .touch_targets import TouchTargetRule, validate_touch_targets
from .typography import (
    PREDEFINED_SCALES,
    TypographyRule,
    get_scale_name,
    is_on_typography_scale,
    validate_typography,
)

__all__ = [
    # Findings
    "Severity",
    "Issue",
    "RuleResult",
    # Helpers
    "SIZE_PIXELS",
    "TYPOGRAPHY_SCALE",
    "walk_components",
    "is_interactive",
    "is_dangerous_action",
    "is_large_text",
    "first_token",
    "heading_level",
    "hex_to_rgb",
    "relative_luminance",
    "contrast_ratio",
    # Hierarchy
    "HierarchyRule",
    "validate_hierarchy",
    # Touch targets
    "TouchTargetRule",
    "validate_touch_targets",
    # Gestalt
    "GestaltRule",
    "validate_gestalt",
    # Accessibility
    "AccessibilityRule",
    "validate_accessibility",
    # Choice overload
    "ChoiceOverloadRule",
    "validate_choice_overload",
    # Contrast
    "ContrastRule",
    "suggest_compliant_color",
    "validate_contrast",
    # Spacing
    "SpacingRule",
    "nearest_grid_value",
    "validate_spacing",
    # Typography
    "PREDEFINED_SCALES",
    "TypographyRule",
    "is_on_typography_scale",
    "get_scale_name",
    "validate_typography",
    # Elevation
    "ELEVATION_LEVELS",
    "ElevationRule",
    "parse_shadow_value",
    "validate_shadow_value",
    "closest_elevation_level",
    "validate_elevation",
    # Loading states
    "LoadingStateRule",
    "count_components_by_state",
    "validate_loading_states",
    # Responsive
    "ResponsiveRule",
    "validate_responsive",
    # Focus
    "FocusRule",
    "validate_focus",
    # Dark mode
    "DarkModeRule",
    "validate_dark_mode",
]
