"""Rule evaluator test fixtures."""

from __future__ import annotations

import pytest

from src.model import Structure


@pytest.fixture
def navigation_structure(make_structure) -> Structure:
    """A navigation bar with eight buttons."""
    return make_structure(
        [
            {
                "id": "top-bar",
                "type": "box",
                "role": "navigation",
                "layout": {"display": "flex", "direction": "horizontal", "gap": 8},
                "children": [
                    {"id": f"nav-item-{i}", "type": "button", "content": f"Item {i}"}
                    for i in range(1, 9)
                ],
            }
        ]
    )


@pytest.fixture
def button_pair_structure(make_structure) -> Structure:
    """Primary 'save' narrower than secondary 'cancel'."""
    return make_structure(
        [
            {"id": "save", "type": "button", "content": "Save", "layout": {"width": 100}},
            {"id": "cancel", "type": "button", "content": "Cancel", "layout": {"width": 150}},
        ],
        intent={"primary_action": "save"},
    )
