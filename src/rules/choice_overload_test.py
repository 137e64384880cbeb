"""Unit tests for the choice overload rule."""

import pytest

from src.rules import ChoiceOverloadRule, validate_choice_overload


def _buttons(prefix: str, count: int) -> list[dict]:
    return [{"id": f"{prefix}-{i}", "type": "button", "content": str(i)} for i in range(count)]


class TestNavigation:
    """Tests for navigation containers."""

    @pytest.mark.unit
    def test_eight_nav_items(self, navigation_structure):
        """A navigation with eight buttons warns once on the container."""
        result = validate_choice_overload(navigation_structure)
        assert result.passed
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.category == "navigation_overload"
        assert issue.component == "top-bar"
        assert issue.message == (
            "Choice Overload: Navigation 'top-bar' has 8 items - consider grouping or "
            "secondary menu (recommended max: 7)"
        )

    @pytest.mark.unit
    def test_limit_is_inclusive(self, make_structure):
        """Exactly seven items is fine."""
        structure = make_structure([{"id": "main-nav", "type": "box", "children": _buttons("link", 7)}])
        assert validate_choice_overload(structure).issues == []

    @pytest.mark.unit
    def test_nested_items_count(self, make_structure):
        """Interactive descendants at any depth count towards the navigation."""
        structure = make_structure(
            [
                {
                    "id": "menu",
                    "type": "box",
                    "children": [
                        {"id": "group-a", "type": "box", "children": _buttons("a", 4)},
                        {"id": "group-b", "type": "box", "children": _buttons("b", 4)},
                    ],
                }
            ]
        )
        result = validate_choice_overload(structure)
        assert [(i.category, i.component) for i in result.issues] == [
            ("navigation_overload", "menu"),
            ("button_group_overload", "group-a"),
            ("button_group_overload", "group-b"),
        ]


class TestContainers:
    """Tests for forms, button groups and card grids."""

    @pytest.mark.unit
    def test_long_form(self, make_structure):
        """More than seven inputs in a form warns."""
        fields = [{"id": f"field-{i}", "type": "input"} for i in range(8)]
        structure = make_structure([{"id": "signup", "type": "box", "children": fields}])
        result = validate_choice_overload(structure)
        assert [i.category for i in result.issues] == ["form_overload"]
        assert "has 8 fields" in result.issues[0].message

    @pytest.mark.unit
    def test_button_group(self, make_structure):
        """More than three buttons in a group warns."""
        structure = make_structure([{"id": "actions", "type": "box", "children": _buttons("act", 4)}])
        result = validate_choice_overload(structure)
        assert [i.message for i in result.issues] == [
            "Choice Overload: Button group 'actions' has 4 buttons - consider reducing "
            "options (recommended max: 3)"
        ]

    @pytest.mark.unit
    def test_form_is_not_button_group(self, make_structure):
        """Buttons inside a form are not judged as a button group."""
        structure = make_structure([{"id": "login", "type": "box", "children": _buttons("act", 4)}])
        assert validate_choice_overload(structure).issues == []

    @pytest.mark.unit
    def test_card_grid(self, make_structure):
        """Grids of more than twelve items warn."""
        cards = [{"id": f"card-{i}", "type": "box", "role": "card"} for i in range(13)]
        structure = make_structure(
            [{"id": "product-grid", "type": "box", "layout": {"display": "grid"}, "children": cards}]
        )
        result = validate_choice_overload(structure)
        assert [i.category for i in result.issues] == ["card_grid_overload"]
        assert "has 13 items" in result.issues[0].message

    @pytest.mark.unit
    def test_grid_needs_grid_display(self, make_structure):
        """A 'grid' container not displayed as a grid is not a card grid."""
        cards = [{"id": f"card-{i}", "type": "box"} for i in range(13)]
        structure = make_structure([{"id": "product-grid", "type": "box", "children": cards}])
        assert validate_choice_overload(structure).issues == []

    @pytest.mark.unit
    def test_custom_limits(self, navigation_structure):
        """Limits are configurable."""
        result = validate_choice_overload(navigation_structure, ChoiceOverloadRule(max_nav_items=8))
        assert result.issues == []
