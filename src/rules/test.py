"""Unit tests for the shared rule types and helpers."""

import pytest

from src.model import Component

from src.rules import (
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
)
from src.schema import PHASE1_PALETTE


class TestIssue:
    """Tests for Issue serialization."""

    @pytest.mark.unit
    def test_to_dict_drops_unset_fields(self):
        """Only severity, message and component are always present."""
        issue = Issue(Severity.WARNING, "off grid", "card")
        assert issue.to_dict() == {"severity": "warning", "message": "off grid", "component": "card"}

    @pytest.mark.unit
    def test_to_dict_keeps_set_fields(self):
        """Optional fields appear once set."""
        issue = Issue(Severity.INFO, "m", "layout", category="suggestion", property="spacing", suggested=16)
        data = issue.to_dict()
        assert data["category"] == "suggestion"
        assert data["property"] == "spacing"
        assert data["suggested"] == 16
        assert "viewport" not in data and "value" not in data


class TestRuleResult:
    """Tests for RuleResult."""

    @pytest.mark.unit
    def test_warnings_do_not_fail(self):
        """Warnings and infos leave the result passing."""
        result = RuleResult.from_issues(
            [Issue(Severity.WARNING, "w"), Issue(Severity.INFO, "i")]
        )
        assert result.passed
        assert result.status == "passed"
        assert len(result.warnings) == 1 and len(result.infos) == 1

    @pytest.mark.unit
    def test_error_fails(self):
        """A single error fails the result."""
        result = RuleResult.from_issues([Issue(Severity.INFO, "i"), Issue(Severity.ERROR, "e", "x")])
        assert not result.passed
        assert result.errors[0].component == "x"
        assert result.to_dict()["status"] == "failed"
        assert [i["severity"] for i in result.to_dict()["issues"]] == ["info", "error"]

    @pytest.mark.unit
    def test_empty_passes(self):
        """No issues means a pass."""
        assert RuleResult.from_issues([]).to_dict() == {"status": "passed", "issues": []}


class TestColor:
    """Tests for WCAG color math."""

    @pytest.mark.unit
    def test_black_on_white(self):
        """Maximum contrast is 21:1."""
        assert contrast_ratio("#000000", "#FFFFFF") == pytest.approx(21.0, abs=0.1)
        assert contrast_ratio("#FFFFFF", "#000000") == pytest.approx(21.0, abs=0.1)

    @pytest.mark.unit
    def test_same_color(self):
        """A color against itself is 1:1."""
        assert contrast_ratio("#737373", "#737373") == pytest.approx(1.0)

    @pytest.mark.unit
    @pytest.mark.parametrize("color", PHASE1_PALETTE + ("#3B82F6", "#FF0000", "#abc"))
    def test_luminance_bounds(self, color):
        """Relative luminance stays within [0, 1]."""
        assert 0.0 <= relative_luminance(color) <= 1.0

    @pytest.mark.unit
    def test_gray_ratio(self):
        """#737373 on white is just above the AA threshold."""
        assert contrast_ratio("#737373", "#FFFFFF") == pytest.approx(4.74, abs=0.01)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("#000000", (0, 0, 0)),
            ("#FFFFFF", (255, 255, 255)),
            ("#3B82F6", (59, 130, 246)),
            ("#FFF", (255, 255, 255)),
            ("#abc", (170, 187, 204)),
            ("F00", (255, 0, 0)),
            ("#12345", (0, 0, 0)),
            ("#GGGGGG", (0, 0, 0)),
        ],
    )
    def test_hex_to_rgb(self, value, expected):
        """Six and three digit hex parse; anything else is black."""
        assert hex_to_rgb(value) == expected


class TestClassification:
    """Tests for component classification helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "size,weight,expected",
        [
            ("xl", "", True),
            ("4xl", "normal", True),
            ("lg", "bold", True),
            ("lg", "normal", False),
            ("md", "bold", False),
            ("base", "", False),
            ("", "bold", False),
        ],
    )
    def test_large_text(self, size, weight, expected):
        """Large text is xl and up, or lg and up when bold."""
        assert is_large_text(size, weight) is expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "comp,expected",
        [
            ({"id": "h1-title", "type": "text"}, 1),
            ({"id": "H3", "type": "text", "size": "sm"}, 3),
            ({"id": "page-title", "type": "text", "size": "3xl"}, 2),
            ({"id": "intro", "type": "text", "role": "heading", "size": "2xl"}, 3),
            ({"id": "page-title", "type": "text", "size": "xl"}, 0),
            ({"id": "hero", "type": "text", "size": "4xl"}, 0),
            ({"id": "h1", "type": "box"}, 0),
            ({"id": "h7-note", "type": "text"}, 0),
        ],
    )
    def test_heading_level(self, comp, expected):
        """Headings come from an h1-h6 prefix or a heading/title name at 2xl and up."""
        assert heading_level(Component(**comp)) == expected

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "comp,expected",
        [
            ({"id": "delete-account", "type": "button"}, True),
            ({"id": "secondary", "type": "button", "role": "Cancel"}, True),
            ({"id": "reset-filters", "type": "button"}, True),
            ({"id": "save", "type": "button"}, False),
        ],
    )
    def test_dangerous_action(self, comp, expected):
        """Destructive keywords in ID or role mark dangerous actions."""
        assert is_dangerous_action(Component(**comp)) is expected

    @pytest.mark.unit
    def test_interactive(self):
        """Only buttons and inputs are interactive."""
        assert is_interactive(Component(id="b", type="button"))
        assert is_interactive(Component(id="i", type="input"))
        assert not is_interactive(Component(id="t", type="text"))

    @pytest.mark.unit
    def test_first_token(self):
        """IDs split on the first hyphen."""
        assert first_token("email-input") == "email"
        assert first_token("email") == "email"
