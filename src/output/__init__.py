"""Output module - Human-readable console formatting.

This module provides:
- Per-rule result blocks for the validate command
- The one-line-per-rule audit table
- Suggestion listings grouped by category
- Structure summaries with a box-drawing component tree
- Version listings and render summaries

Example usage:
    >>> from src.output import format_audit
    >>> print(format_audit(structure, run_rules(structure), "v3.json"))
"""

from src.output.lib import (
    CATEGORY_ICONS,
    RULE_HEADINGS,
    format_audit,
    format_batch_summary,
    format_component_tree,
    format_render,
    format_rule_result,
    format_structure,
    format_suggestions,
    format_validation,
    format_version_list,
)

__all__ = [
    "RULE_HEADINGS",
    "CATEGORY_ICONS",
    # Rule results
    "format_rule_result",
    "format_validation",
    "format_audit",
    # Suggestions
    "format_suggestions",
    # Structures
    "format_component_tree",
    "format_structure",
    "format_version_list",
    # Rendering
    "format_render",
    "format_batch_summary",
]
