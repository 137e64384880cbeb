"""Unit tests for the 8pt grid spacing rule."""

import pytest

from src.rules import Severity, SpacingRule, validate_spacing
from src.rules.spacing import is_half_step, is_on_grid, nearest_grid_value


class TestGrid:
    """Tests for the grid helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "value,expected",
        [(20, 16), (40, 32), (100, 96), (200, 128), (10, 8), (6, 4), (2, 0)],
    )
    def test_nearest_grid_value(self, value, expected):
        """Ties resolve to the smaller value; large values clamp to the top."""
        assert nearest_grid_value(value) == expected

    @pytest.mark.unit
    def test_nearest_is_idempotent(self):
        """Grid values map to themselves."""
        for value in (0, 4, 8, 12, 16, 24, 32, 48, 64, 96, 128):
            assert is_on_grid(value)
            assert nearest_grid_value(value) == value

    @pytest.mark.unit
    def test_half_step(self):
        """Half steps are multiples of 4 but not 8."""
        assert is_half_step(12)
        assert is_half_step(20)
        assert not is_half_step(16)
        assert not is_half_step(10)


class TestValidateSpacing:
    """Tests for validate_spacing."""

    @pytest.mark.unit
    def test_off_grid_layout_spacing(self, make_structure):
        """Page spacing of 20 warns and suggests 16."""
        structure = make_structure([{"id": "x", "type": "box"}], layout={"spacing": 20})
        result = validate_spacing(structure)
        assert result.passed
        warning, info = result.issues
        assert warning.severity == Severity.WARNING
        assert warning.message == "Spacing: Layout spacing uses 20px (not on 8pt grid)"
        assert (warning.component, warning.property, warning.value, warning.suggested) == (
            "layout",
            "spacing",
            20,
            16,
        )
        assert info.severity == Severity.INFO
        assert info.message == "   Suggestion: Use 16px for consistency"

    @pytest.mark.unit
    def test_component_properties(self, make_structure):
        """Padding, gap and margin are all checked per component."""
        structure = make_structure(
            [{"id": "card", "type": "box", "layout": {"padding": 18, "gap": 10, "margin_bottom": 40}}]
        )
        result = validate_spacing(structure)
        assert [(i.message, i.suggested) for i in result.warnings] == [
            ("Spacing: 'card' padding uses 18px (not on 8pt grid)", 16),
            ("Spacing: 'card' gap uses 10px (not on 8pt grid)", 8),
            ("Spacing: 'card' margin_bottom uses 40px (not on 8pt grid)", 32),
        ]

    @pytest.mark.unit
    def test_excessive_half_steps(self, make_structure):
        """More than five off-grid half steps add an aggregate warning."""
        boxes = [{"id": f"b{i}", "type": "box", "layout": {"padding": 20}} for i in range(6)]
        result = validate_spacing(make_structure(boxes))
        assert len(result.issues) == 13
        assert result.issues[-1].category == "excessive_half_step"
        assert "(6 occurrences)" in result.issues[-1].message

    @pytest.mark.unit
    def test_half_step_allowance_disabled(self, make_structure):
        """The aggregate warning follows allow_half_step."""
        boxes = [{"id": f"b{i}", "type": "box", "layout": {"padding": 20}} for i in range(6)]
        result = validate_spacing(make_structure(boxes), SpacingRule(allow_half_step=False))
        assert len(result.issues) == 12

    @pytest.mark.unit
    def test_dashboard_is_on_grid(self, dashboard_structure):
        """The dashboard uses only grid values."""
        assert validate_spacing(dashboard_structure).issues == []
