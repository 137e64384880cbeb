"""Suggest module - Proactive best-practice advice for structures.

This module provides:
- Seven pattern analyzers (forms, navigation, layouts, buttons, cards,
  tables, modals)
- Suggestion and SuggestionResult value types with JSON conversion
- generate_suggestions() to run one category or all of them

Example usage:
    >>> from src.suggest import generate_suggestions
    >>> result = generate_suggestions(structure, "forms")
    >>> for s in result.categories.get("forms", []):
    ...     print(s.type, s.message)
"""

from .lib import (
    ANALYZERS,
    Suggestion,
    SuggestionCategory,
    SuggestionResult,
    SuggestionType,
    count_navigation_items,
    find_components,
    generate_suggestions,
)

__all__ = [
    # Types
    "SuggestionCategory",
    "SuggestionType",
    "Suggestion",
    "SuggestionResult",
    # Analysis
    "ANALYZERS",
    "find_components",
    "count_navigation_items",
    "generate_suggestions",
]
