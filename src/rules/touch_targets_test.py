"""Unit tests for the touch target rule."""

import pytest

from src.rules import Severity, TouchTargetRule, validate_touch_targets
from src.rules.touch_targets import TargetPosition, collect_targets, target_spacing


def _row(make_structure, gap, second_id="b-button"):
    """Two 100x44 buttons side by side in a horizontal flex box."""
    return make_structure(
        [
            {
                "id": "toolbar",
                "type": "box",
                "layout": {"display": "flex", "direction": "horizontal", "gap": gap},
                "children": [
                    {"id": "a-button", "type": "button", "layout": {"width": 100, "height": 44}},
                    {"id": second_id, "type": "button", "layout": {"width": 100, "height": 44}},
                ],
            }
        ]
    )


class TestTargetSize:
    """Tests for minimum target dimensions."""

    @pytest.mark.unit
    def test_small_target_is_error(self, make_structure):
        """Targets under 44x44 fail."""
        structure = make_structure([{"id": "tiny", "type": "button", "layout": {"width": 30, "height": 30}}])
        result = validate_touch_targets(structure)
        assert not result.passed
        assert result.errors[0].message == "Touch Target: 'tiny' is 30x30px (requires 44x44px minimum)"

    @pytest.mark.unit
    def test_unsized_targets_use_defaults(self, make_structure):
        """Missing sizes default to 100x44, which passes."""
        structure = make_structure([{"id": "email", "type": "input"}])
        result = validate_touch_targets(structure)
        assert result.passed
        assert [i.message for i in result.issues] == [
            "✓ All interactive elements meet touch target requirements"
        ]


class TestTargetSpacing:
    """Tests for spacing between targets."""

    @pytest.mark.unit
    def test_tight_row_is_warning(self, make_structure):
        """Neighbours closer than 8px warn."""
        result = validate_touch_targets(_row(make_structure, 4))
        assert result.passed
        assert [i.message for i in result.warnings] == [
            "Spacing: 'a-button' only 4px from 'b-button' (requires 8px for interactive elements)"
        ]

    @pytest.mark.unit
    def test_destructive_neighbour_is_error(self, make_structure):
        """Destructive actions need 16px and fail when closer."""
        result = validate_touch_targets(_row(make_structure, 12, "delete-button"))
        assert not result.passed
        assert result.errors[0].message == (
            "Spacing: 'a-button' only 12px from 'delete-button' (requires 16px for destructive action)"
        )

    @pytest.mark.unit
    def test_adequate_spacing(self, make_structure):
        """Well spaced targets report both success infos."""
        result = validate_touch_targets(_row(make_structure, 16))
        assert [i.message for i in result.issues] == [
            "✓ All interactive elements meet touch target requirements",
            "✓ Spacing between interactive elements is adequate",
        ]

    @pytest.mark.unit
    def test_vertical_stack_positions(self, make_structure):
        """Vertical containers advance the cursor by gap and child height."""
        structure = make_structure(
            [
                {
                    "id": "form",
                    "type": "box",
                    "layout": {"direction": "vertical", "gap": 8},
                    "children": [
                        {"id": "name", "type": "input", "layout": {"height": 44}},
                        {"id": "email", "type": "input", "layout": {"height": 44}},
                    ],
                }
            ]
        )
        targets = collect_targets(structure)
        assert [(t.id, t.x, t.y) for t in targets] == [("name", 0, 8), ("email", 0, 60)]

    @pytest.mark.unit
    def test_root_cursor_uses_layout_spacing(self, make_structure):
        """Root components stack by their height plus layout spacing."""
        structure = make_structure(
            [
                {"id": "first", "type": "button", "layout": {"height": 50}},
                {"id": "second", "type": "button", "layout": {"height": 50}},
            ],
            layout={"spacing": 6},
        )
        assert [t.y for t in collect_targets(structure)] == [0, 56]
        result = validate_touch_targets(structure)
        assert result.warnings[0].message == (
            "Spacing: 'first' only 6px from 'second' (requires 8px for interactive elements)"
        )

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            (TargetPosition("a", 0, 0, 100, 44), TargetPosition("b", 110, 0, 100, 44), 10),
            (TargetPosition("a", 110, 0, 100, 44), TargetPosition("b", 0, 0, 100, 44), 10),
            (TargetPosition("a", 0, 0, 100, 44), TargetPosition("b", 0, 50, 100, 44), 6),
            (TargetPosition("a", 0, 0, 100, 44), TargetPosition("b", 200, 200, 100, 44), -1),
            (TargetPosition("a", 0, 0, 100, 44), TargetPosition("b", 50, 10, 100, 44), -1),
        ],
    )
    def test_target_spacing(self, a, b, expected):
        """Aligned targets report their gap; diagonal or overlapping ones -1."""
        assert target_spacing(a, b) == expected


class TestFrequentActions:
    """Tests for frequent action reachability."""

    @pytest.mark.unit
    def test_low_frequent_action(self, make_structure):
        """Frequent actions below y=600 get an info."""
        structure = make_structure(
            [
                {"id": "hero", "type": "box", "layout": {"height": 700}},
                {"id": "buy", "type": "button", "content": "Buy"},
            ]
        )
        result = validate_touch_targets(structure, TouchTargetRule(frequent_actions=("buy",)))
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.severity == Severity.INFO
        assert issue.message == "Frequent action 'buy' may be hard to reach (positioned at Y=700px)"
