"""Unit tests for the report aggregator."""

import pytest

from src.report import (
    RULE_TITLES,
    RULES,
    UnknownRuleError,
    aggregate,
    build_audit_report,
    build_error,
    build_validate_report,
    build_validation_failure,
    run_rules,
)
from src.rules import Issue, RuleResult, Severity

RULE_ORDER = [
    "hierarchy",
    "touch_targets",
    "gestalt",
    "accessibility",
    "choice_overload",
    "contrast",
    "spacing",
    "typography",
    "elevation",
    "loading_states",
    "responsive",
    "focus",
    "dark_mode",
]


class TestRegistry:
    """Tests for the rule registry."""

    @pytest.mark.unit
    def test_fixed_order(self):
        """Rules and titles follow the reporting order."""
        assert list(RULES) == RULE_ORDER
        assert list(RULE_TITLES) == RULE_ORDER

    @pytest.mark.unit
    def test_run_all(self, dashboard_structure):
        """Running every rule returns thirteen results in order."""
        results = run_rules(dashboard_structure)
        assert list(results) == RULE_ORDER

    @pytest.mark.unit
    def test_subset_keeps_registry_order(self, minimal_structure):
        """Selected rules come back in registry order."""
        results = run_rules(minimal_structure, ["spacing", "hierarchy"])
        assert list(results) == ["hierarchy", "spacing"]

    @pytest.mark.unit
    def test_unknown_rule(self, minimal_structure):
        """Unregistered names raise."""
        with pytest.raises(UnknownRuleError) as exc_info:
            run_rules(minimal_structure, ["colour"])
        assert exc_info.value.name == "colour"


class TestAggregate:
    """Tests for aggregate()."""

    @pytest.mark.unit
    def test_counts(self):
        """Failed rules and issue severities are counted."""
        results = {
            "a": RuleResult.from_issues([Issue(Severity.ERROR, "e"), Issue(Severity.WARNING, "w")]),
            "b": RuleResult.from_issues([Issue(Severity.WARNING, "w"), Issue(Severity.INFO, "i")]),
            "c": RuleResult.from_issues([]),
        }
        summary = aggregate(results)
        assert not summary.passed
        assert summary.status == "failed"
        assert summary.to_dict() == {"total": 3, "passed": 2, "failed": 1, "criticals": 1, "warnings": 2}

    @pytest.mark.unit
    def test_empty_is_passed(self):
        """No rules means nothing failed."""
        summary = aggregate({})
        assert summary.passed
        assert summary.total == 0

    @pytest.mark.unit
    def test_warnings_never_fail(self, minimal_structure):
        """The minimal document passes every rule."""
        assert aggregate(run_rules(minimal_structure)).passed


class TestReportShapes:
    """Tests for the JSON report builders."""

    @pytest.mark.unit
    def test_audit_report(self, make_structure):
        """The audit report carries the envelope, summary and every rule."""
        structure = make_structure(
            [
                {"id": "save", "type": "button", "content": "Save", "layout": {"width": 100}},
                {"id": "cancel", "type": "button", "content": "Cancel", "layout": {"width": 150}},
            ],
            intent={"primary_action": "save"},
        )
        results = run_rules(structure)
        report = build_audit_report(structure, results, "p/phase1-structure/v1.json")
        assert report["file"] == "p/phase1-structure/v1.json"
        assert report["version"] == "t"
        assert report["phase"] == "structure"
        assert report["components"] == 2
        assert report["status"] == "failed"
        assert report["summary"]["total"] == 13
        assert list(report["audits"]) == RULE_ORDER
        hierarchy = report["audits"]["hierarchy"]
        assert hierarchy["status"] == "failed"
        assert {"severity", "message", "component"} <= set(hierarchy["issues"][0])

    @pytest.mark.unit
    def test_validate_report(self, minimal_structure):
        """Requested rules are keyed next to the envelope."""
        results = run_rules(minimal_structure, ["spacing"])
        report = build_validate_report(minimal_structure, results, "v1.json")
        assert report == {
            "status": "success",
            "file": "v1.json",
            "validation": "passed",
            "version": "t",
            "phase": "structure",
            "components": 1,
            "spacing": {"status": "passed", "issues": []},
        }

    @pytest.mark.unit
    def test_validation_failure(self):
        """Schema failures use the failed envelope."""
        assert build_validation_failure("v1.json", ValueError("bad phase")) == {
            "status": "failed",
            "file": "v1.json",
            "validation": "failed",
            "error": "bad phase",
        }

    @pytest.mark.unit
    def test_error(self):
        """Command errors name the file only when there is one."""
        assert build_error("No structure files found") == {"status": "error", "error": "No structure files found"}
        assert build_error("boom", "v1.json")["file"] == "v1.json"
