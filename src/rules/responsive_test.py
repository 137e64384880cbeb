"""Unit tests for the responsive rule."""

import pytest

from src.rules import ResponsiveRule, validate_responsive


class TestValidateResponsive:
    """Tests for breakpoint overflow and mobile targets."""

    @pytest.mark.unit
    def test_page_max_width(self, dashboard_structure):
        """A 1200px page overflows mobile and tablet only."""
        result = validate_responsive(dashboard_structure)
        assert result.passed
        assert [(i.viewport, i.message) for i in result.issues] == [
            ("mobile", "Layout max-width (1200px) exceeds mobile viewport (375px)"),
            ("tablet", "Layout max-width (1200px) exceeds tablet viewport (768px)"),
        ]
        assert {i.component for i in result.issues} == {"layout"}

    @pytest.mark.unit
    def test_component_width(self, make_structure):
        """Fixed widths are checked against each breakpoint."""
        structure = make_structure([{"id": "table", "type": "box", "layout": {"width": 800}}])
        result = validate_responsive(structure)
        assert [i.viewport for i in result.issues] == ["mobile", "tablet"]
        assert result.issues[0].message == "Component 'table' width (800px) exceeds mobile viewport (375px)"

    @pytest.mark.unit
    def test_component_max_width(self, make_structure):
        """Component max-width is checked like width."""
        structure = make_structure([{"id": "panel", "type": "box", "layout": {"max_width": 500}}])
        result = validate_responsive(structure)
        assert [i.message for i in result.issues] == [
            "Component 'panel' max-width (500px) exceeds mobile viewport (375px)"
        ]

    @pytest.mark.unit
    def test_small_mobile_target(self, make_structure):
        """Small sized interactive elements warn on mobile only."""
        structure = make_structure([{"id": "close", "type": "button", "layout": {"width": 40, "height": 40}}])
        result = validate_responsive(structure)
        assert [(i.viewport, i.message) for i in result.issues] == [
            (
                "mobile",
                "Interactive element 'close' (40x40px) is too small for mobile "
                "(minimum 44x44px recommended)",
            )
        ]

    @pytest.mark.unit
    def test_unsized_target_is_skipped(self, make_structure):
        """Targets without explicit dimensions are not judged."""
        structure = make_structure([{"id": "close", "type": "button"}])
        assert validate_responsive(structure).issues == []

    @pytest.mark.unit
    def test_checks_can_be_disabled(self, make_structure):
        """Overflow and target checks are switchable."""
        structure = make_structure(
            [
                {"id": "table", "type": "box", "layout": {"width": 800}},
                {"id": "close", "type": "button", "layout": {"width": 40, "height": 40}},
            ]
        )
        rule = ResponsiveRule(check_overflow=False, check_touch_targets=False)
        assert validate_responsive(structure, rule).issues == []

    @pytest.mark.unit
    def test_numeric_breakpoint_changes(self, make_structure):
        """Documents declaring numeric breakpoint changes evaluate cleanly."""
        structure = make_structure(
            [{"id": "header", "type": "box", "layout": {"padding": 24}}],
            responsive={
                "mobile": {"breakpoint": 640, "changes": {"layout.padding": 16}},
                "tablet": {"breakpoint": 1024, "changes": {}},
            },
        )
        assert structure.responsive.mobile.changes["layout.padding"] == 16
        result = validate_responsive(structure)
        assert result.passed
        assert result.issues == []
