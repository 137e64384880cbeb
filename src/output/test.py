"""Tests for output module."""

import pytest

from src.output import (
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
from src.project import list_versions
from src.report import RULES, run_rules
from src.rules import Issue, RuleResult, Severity
from src.suggest import SuggestionResult, generate_suggestions


class TestFormatRuleResult:
    """Tests for format_rule_result function."""

    @pytest.mark.unit
    def test_passed_without_issues(self):
        """A clean result is just the heading and status."""
        text = format_rule_result("📏 Spacing:", RuleResult())
        assert text == "📏 Spacing:\n   Status: ✅ Passed"

    @pytest.mark.unit
    def test_groups_by_severity(self):
        """Errors, warnings and info appear in that order."""
        result = RuleResult.from_issues(
            [
                Issue(Severity.INFO, "note"),
                Issue(Severity.WARNING, "careful"),
                Issue(Severity.ERROR, "broken"),
            ]
        )
        lines = format_rule_result("Heading:", result).splitlines()
        assert lines[1] == "   Status: ⚠️  Issues Found"
        assert lines.index("   Errors:") < lines.index("   Warnings:") < lines.index("   Info:")
        assert "     ❌ broken" in lines
        assert "     ⚠️  careful" in lines
        assert "     ℹ️  note" in lines

    @pytest.mark.unit
    def test_warnings_only_still_passes(self):
        """Warnings do not flip the status line."""
        result = RuleResult.from_issues([Issue(Severity.WARNING, "careful")])
        assert "Status: ✅ Passed" in format_rule_result("H:", result)

    @pytest.mark.unit
    def test_every_rule_has_heading(self):
        """Each registered rule has a validate heading."""
        assert list(RULE_HEADINGS) == list(RULES)


class TestFormatValidation:
    """Tests for the validate command output."""

    @pytest.mark.unit
    def test_header_and_sections(self, minimal_structure):
        """Header lines precede one block per requested rule."""
        results = run_rules(minimal_structure, ["hierarchy", "spacing"])
        text = format_validation(minimal_structure, results, "v1.json")
        lines = text.splitlines()
        assert lines[0] == "✅ Validation passed for v1.json"
        assert "   Components: 1" in lines
        assert "   Status: Draft" in lines
        assert lines.index(RULE_HEADINGS["hierarchy"]) < lines.index(RULE_HEADINGS["spacing"])


class TestFormatAudit:
    """Tests for the audit table."""

    @pytest.mark.unit
    def test_all_passed(self, minimal_structure):
        """A clean document ends with the overall pass line."""
        text = format_audit(minimal_structure, run_rules(minimal_structure), "approved.json")
        assert text.startswith("🔍 Design Audit for approved.json")
        assert "✅ Touch Targets (Fitts's Law)" in text
        assert text.endswith("✅ Overall: PASSED - All design principles validated")

    @pytest.mark.unit
    def test_issue_counts(self, make_structure):
        """Failing rules show their issue count and validate hints follow."""
        structure = make_structure([{"id": "ok", "type": "button", "content": "OK", "layout": {"width": 20, "height": 20}}])
        results = {"touch_targets": run_rules(structure, ["touch_targets"])["touch_targets"]}
        text = format_audit(structure, results, "v1.json")
        assert "⚠️  Touch Targets (Fitts's Law)" in text
        assert text.splitlines()[7].endswith(" 1 ISSUES")
        assert "⚠️  Overall: ISSUES FOUND - Review recommendations above" in text
        assert "  python . validate --touch-targets" in text

    @pytest.mark.unit
    def test_locked_status(self, make_structure):
        """Approved documents are marked as such."""
        structure = make_structure([], locked=True, approved_by="reviewer")
        assert "   Status: Locked (approved)" in format_audit(structure, {}, "approved.json")


class TestFormatSuggestions:
    """Tests for the suggestion listing."""

    @pytest.mark.unit
    def test_empty(self, minimal_structure):
        """No suggestions prints the all-clear line."""
        text = format_suggestions(minimal_structure, SuggestionResult(), "v1.json")
        assert text.endswith("✨ No suggestions found - design looks good!")

    @pytest.mark.unit
    def test_dashboard(self, dashboard_structure):
        """Categories get their icon and counts are summarised."""
        result = generate_suggestions(dashboard_structure)
        text = format_suggestions(dashboard_structure, result, "v1.json")
        assert "Found 5 suggestion(s) across 3 categor(ies)" in text
        assert "🧭 Navigation Best Practices:" in text
        assert "📐 Layouts Best Practices:" in text
        assert "   ✅ Layout uses appropriate max-width (1200px)" in text
        assert "  python . suggest --category forms" in text


class TestFormatComponentTree:
    """Tests for format_component_tree function."""

    @pytest.mark.unit
    def test_single_component(self, minimal_structure):
        """A leaf prints without connectors."""
        assert format_component_tree(minimal_structure.components) == "x [box]"

    @pytest.mark.unit
    def test_nested_tree(self, dashboard_structure):
        """Children use box-drawing connectors."""
        lines = format_component_tree(dashboard_structure.components).splitlines()
        assert lines[0] == "header [box, header]"
        assert lines[1] == '├── h1-title [text] "Dashboard"'
        assert lines[2] == '└── save-button [button] "Save"'
        assert "├── card-1 [box, card]" in lines
        assert "└── card-3 [image]" in lines


class TestFormatStructure:
    """Tests for the show command output."""

    @pytest.mark.unit
    def test_sections(self, dashboard_structure):
        """Every section heading appears."""
        text = format_structure(dashboard_structure, "v1.json")
        for heading in ("--- Intent ---", "--- Layout ---", "--- Components ---", "--- Responsive ---",
                        "--- Accessibility ---", "--- Validation ---"):
            assert heading in text
        assert "Status: Draft" in text
        assert "Created: unknown" in text
        assert "Max Width: 1200px" in text
        assert "Total Components: 3" in text
        assert "--- Changes ---" not in text

    @pytest.mark.unit
    def test_locked_and_changes(self, make_structure):
        """Locked documents show approval, and change notes are shown."""
        structure = make_structure(
            [],
            locked=True,
            approved_by="reviewer",
            parent_version="v1",
            change_summary="Tightened spacing",
            rationale="Denser layout",
        )
        text = format_structure(structure, "approved.json")
        assert "Status: Locked ⚡" in text
        assert "Approved By: reviewer" in text
        assert "Parent Version: v1" in text
        assert "Summary: Tightened spacing" in text
        assert "Rationale: Denser layout" in text


class TestFormatVersionList:
    """Tests for the list command output."""

    @pytest.mark.integration
    def test_versions(self, project_dir):
        """Versions are listed with status and totals."""
        text = format_version_list(list_versions(project_dir), "demo-project")
        lines = text.splitlines()
        assert lines[0] == "Versions in demo-project:"
        assert "  approved ⚡" in lines
        assert "    Status: locked" in lines
        assert "    Purpose: tenth draft" in lines
        assert lines[-1] == "Total: 4 version(s)"

    @pytest.mark.unit
    def test_empty(self):
        """No versions gives a single line."""
        assert format_version_list([], "demo") == "No versions found in demo"


class TestFormatRender:
    """Tests for render summaries."""

    @pytest.mark.unit
    def test_single(self):
        """Output path, dimensions and viewport are listed."""
        text = format_render("v1.json", "out.png", 1200, 640, "desktop")
        assert text.splitlines() == [
            "✅ Rendered v1.json",
            "   Output: out.png",
            "   Dimensions: 1200x640",
            "   Viewport: desktop",
        ]

    @pytest.mark.unit
    def test_batch(self):
        """Batch summary counts successes and failures."""
        text = format_batch_summary(3, 2, 1)
        assert "📊 Batch rendering complete:" in text
        assert "   Failed: 1" in text
