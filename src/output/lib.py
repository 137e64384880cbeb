"""Console formatting for command results.

Every formatter returns a string; the CLI decides where it goes. JSON
output is built by src.report and never passes through here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Mapping

from src.model import Component, Structure
from src.project import VersionInfo
from src.report import RULE_TITLES, aggregate
from src.rules import RuleResult
from src.suggest import SuggestionResult, SuggestionType

RULE = "═" * 55
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

# Section headings used by the validate command
RULE_HEADINGS: dict[str, str] = {
    "hierarchy": "📊 Visual Hierarchy Validation:",
    "touch_targets": "👆 Touch Target & Spacing Validation:",
    "gestalt": "🎨 Gestalt Principles Validation:",
    "accessibility": "♿ Accessibility (WCAG) Validation:",
    "choice_overload": "🎯 Choice Overload (Hick's Law) Validation:",
    "contrast": "🎨 Color Contrast (WCAG) Validation:",
    "spacing": "📏 Spacing Scale (8pt Grid) Validation:",
    "typography": "🔤 Typography Scale Validation:",
    "elevation": "⬆️  Shadow & Elevation Validation:",
    "loading_states": "⏳ Loading States Validation:",
    "responsive": "📱 Responsive Breakpoint Validation:",
    "focus": "🎯 Focus Indicator Validation:",
    "dark_mode": "🌓 Dark Mode Support Validation:",
}

CATEGORY_ICONS: dict[str, str] = {
    "forms": "📝",
    "navigation": "🧭",
    "layouts": "📐",
    "buttons": "🔘",
    "cards": "🃏",
    "tables": "📊",
    "modals": "🗨️",
}


def _timestamp(value: datetime | None) -> str:
    return value.strftime(TIME_FORMAT) if value else "unknown"


def _draft_status(structure: Structure) -> str:
    if not structure.locked:
        return "Draft"
    return "Locked (approved)" if structure.approved_by else "Locked"


# =============================================================================
# Rule Results
# =============================================================================


def format_rule_result(heading: str, result: RuleResult) -> str:
    """Format one rule result with issues grouped by severity.

    Example output:
        📏 Spacing Scale (8pt Grid) Validation:
           Status: ⚠️  Issues Found

           Warnings:
             ⚠️  Spacing: Layout spacing uses 20px (not on 8pt grid)
    """
    lines = [heading]
    lines.append("   Status: ✅ Passed" if result.passed else "   Status: ⚠️  Issues Found")
    groups = (
        ("Errors", "❌", result.errors),
        ("Warnings", "⚠️ ", result.warnings),
        ("Info", "ℹ️ ", result.infos),
    )
    for label, icon, issues in groups:
        if not issues:
            continue
        lines.append("")
        lines.append(f"   {label}:")
        lines.extend(f"     {icon} {i.message}" for i in issues)
    return "\n".join(lines)


def format_validation(structure: Structure, results: Mapping[str, RuleResult], file: str) -> str:
    """Console output of a successful validate command."""
    lines = [
        f"✅ Validation passed for {file}",
        f"   Version: {structure.version}",
        f"   Phase: {structure.phase}",
        f"   Components: {len(structure.components)}",
        f"   Status: {'Locked (approved)' if structure.locked else 'Draft'}",
    ]
    for name, result in results.items():
        lines.append("")
        lines.append(format_rule_result(RULE_HEADINGS.get(name, f"{name} Validation:"), result))
    return "\n".join(lines)


def format_audit(structure: Structure, results: Mapping[str, RuleResult], file: str) -> str:
    """Console output of the audit command: one line per rule and a verdict."""
    lines = [
        f"🔍 Design Audit for {file}",
        f"   Version: {structure.version}",
        f"   Phase: {structure.phase}",
        f"   Components: {len(structure.components)}",
        f"   Status: {_draft_status(structure)}",
        "",
        RULE,
    ]
    for name, result in results.items():
        title = RULE_TITLES.get(name, name)
        if result.passed:
            lines.append(f"✅ {title:<35} PASSED")
        else:
            lines.append(f"⚠️  {title:<35} {len(result.issues)} ISSUES")
    lines.append(RULE)

    if aggregate(results).passed:
        lines.append("")
        lines.append("✅ Overall: PASSED - All design principles validated")
    else:
        lines.append("")
        lines.append("⚠️  Overall: ISSUES FOUND - Review recommendations above")
        lines.append("")
        lines.append("Run individual validations for detailed issue breakdown:")
        lines.extend(f"  python . validate --{name.replace('_', '-')}" for name in results)
    return "\n".join(lines)


# =============================================================================
# Suggestions
# =============================================================================


def format_suggestions(structure: Structure, result: SuggestionResult, file: str) -> str:
    """Console output of the suggest command, grouped good/consider/suggestion."""
    lines = [
        f"💡 Design Suggestions for {file}",
        f"   Version: {structure.version}",
        f"   Phase: {structure.phase}",
        f"   Components: {len(structure.components)}",
        "",
    ]
    if result.total == 0:
        lines.append("✨ No suggestions found - design looks good!")
        return "\n".join(lines)

    lines.append(f"Found {result.total} suggestion(s) across {len(result.categories)} categor(ies)")
    lines.append("")
    lines.append(RULE)
    prefixes = (
        (SuggestionType.GOOD.value, "✅ "),
        (SuggestionType.CONSIDER.value, "💭 "),
        (SuggestionType.SUGGESTION.value, "💡 Suggestion: "),
    )
    for category, suggestions in result.categories.items():
        lines.append("")
        lines.append(f"{CATEGORY_ICONS.get(category, '📋')} {category.capitalize()} Best Practices:")
        for kind, prefix in prefixes:
            lines.extend(f"   {prefix}{s.message}" for s in suggestions if s.type == kind)
    lines.append("")
    lines.append(RULE)
    lines.append("")
    lines.append("Run with --category to focus on specific areas:")
    for category in ("forms", "navigation", "layouts"):
        lines.append(f"  python . suggest --category {category}")
    return "\n".join(lines)


# =============================================================================
# Structures and Versions
# =============================================================================


def format_component_tree(components: list[Component]) -> str:
    """Format a component forest as a box-drawing tree.

    Example output:
        header [box, header]
        ├── h1-title [text] "Dashboard"
        └── save-button [button] "Save"
    """
    lines: list[str] = []
    for comp in components:
        _format_component(comp, lines, "", is_last=True, is_root=True)
    return "\n".join(lines)


def _format_component(
    comp: Component,
    lines: list[str],
    prefix: str,
    is_last: bool,
    is_root: bool = False,
) -> None:
    if is_root:
        connector = ""
        child_prefix = ""
    else:
        connector = "└── " if is_last else "├── "
        child_prefix = prefix + ("    " if is_last else "│   ")

    attrs = [comp.type]
    if comp.role:
        attrs.append(comp.role)
    label = f"{comp.id} [{', '.join(attrs)}]"
    if comp.content:
        label += f' "{comp.content.splitlines()[0]}"'
    lines.append(f"{prefix}{connector}{label}")

    for i, child in enumerate(comp.children):
        _format_component(child, lines, child_prefix, i == len(comp.children) - 1)


def format_structure(structure: Structure, file: str) -> str:
    """Console output of the show command."""
    lines = [
        f"Version: {structure.version}",
        f"File: {file}",
        f"Phase: {structure.phase}",
        f"Created: {_timestamp(structure.created_at)}",
    ]
    if structure.locked:
        lines.append("Status: Locked ⚡")
        if structure.locked_at:
            lines.append(f"Locked At: {_timestamp(structure.locked_at)}")
        if structure.approved_by:
            lines.append(f"Approved By: {structure.approved_by}")
    else:
        lines.append("Status: Draft")
    if structure.parent_version:
        lines.append(f"Parent Version: {structure.parent_version}")

    intent = structure.intent
    lines += [
        "",
        "--- Intent ---",
        f"Purpose: {intent.purpose}",
        f"Primary Action: {intent.primary_action}",
        f"User Context: {intent.user_context}",
    ]
    if intent.key_interactions:
        lines.append("Key Interactions:")
        lines.extend(f"  - {k}" for k in intent.key_interactions)

    layout = structure.layout
    lines += [
        "",
        "--- Layout ---",
        f"Type: {layout.type}",
        f"Direction: {layout.direction}",
        f"Spacing: {layout.spacing}px",
        f"Max Width: {layout.max_width}px",
        f"Padding: {layout.padding}px",
        "",
        "--- Components ---",
        f"Total Components: {len(structure.components)}",
    ]
    if structure.components:
        lines.append("")
        lines.append(format_component_tree(structure.components))

    a11y = structure.accessibility
    validation = structure.validation
    lines += [
        "",
        "--- Responsive ---",
        f"Mobile Breakpoint: {structure.responsive.mobile.breakpoint}px",
        f"Tablet Breakpoint: {structure.responsive.tablet.breakpoint}px",
        "",
        "--- Accessibility ---",
        f"Touch Targets Min: {a11y.touch_targets_min}px",
        f"Focus Indicators: {a11y.focus_indicators}",
        f"Labels: {a11y.labels}",
        f"Semantic Structure: {str(a11y.semantic_structure).lower()}",
        "",
        "--- Validation ---",
        f"Visual Hierarchy: {validation.visual_hierarchy}",
        f"Touch Targets: {validation.touch_targets}",
        f"Max Nesting Depth: {validation.max_nesting_depth}",
        f"Responsive Tested: {str(validation.responsive_tested).lower()}",
    ]
    if validation.notes:
        lines.append(f"Notes: {validation.notes}")

    if structure.change_summary:
        lines += ["", "--- Changes ---", f"Summary: {structure.change_summary}"]
        if structure.rationale:
            lines.append(f"Rationale: {structure.rationale}")
    return "\n".join(lines)


def format_version_list(versions: Iterable[VersionInfo], project: str) -> str:
    """Console output of the list command."""
    versions = list(versions)
    if not versions:
        return f"No versions found in {project}"

    lines = [f"Versions in {project}:", ""]
    for v in versions:
        lines.append(f"  {v.version} ⚡" if v.locked else f"  {v.version}")
        lines.append(f"    File: {v.file}")
        lines.append(f"    Status: {'locked' if v.locked else 'draft'}")
        lines.append(f"    Created: {_timestamp(v.created_at)}")
        if v.purpose:
            lines.append(f"    Purpose: {v.purpose}")
        lines.append("")
    lines.append(f"Total: {len(versions)} version(s)")
    return "\n".join(lines)


# =============================================================================
# Rendering
# =============================================================================


def format_render(file: str, output: str, width: int, height: int, viewport: str = "") -> str:
    """Console output for one rendered file."""
    lines = [f"✅ Rendered {file}", f"   Output: {output}", f"   Dimensions: {width}x{height}"]
    if viewport:
        lines.append(f"   Viewport: {viewport}")
    return "\n".join(lines)


def format_batch_summary(total: int, succeeded: int, failed: int) -> str:
    return "\n".join(
        [
            "",
            "📊 Batch rendering complete:",
            f"   Total: {total} versions",
            f"   Success: {succeeded}",
            f"   Failed: {failed}",
        ]
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
