"""Render module test fixtures."""

from __future__ import annotations

import pytest

from src.model import Structure


@pytest.fixture
def form_structure(make_structure) -> Structure:
    """A padded form with every drawable component type.

    Returns:
        Structure with text, input, button and image inside a bordered box.
    """
    return make_structure(
        [
            {
                "id": "form",
                "type": "box",
                "layout": {
                    "display": "flex",
                    "direction": "vertical",
                    "padding": 16,
                    "gap": 8,
                    "border": "1px solid #E5E5E5",
                    "background": "#FFFFFF",
                },
                "children": [
                    {"id": "title", "type": "text", "content": "Sign in\n\nWelcome back", "size": "2xl"},
                    {"id": "email-input", "type": "input", "content": "Email"},
                    {"id": "submit-button", "type": "button", "content": "Continue"},
                    {"id": "hero", "type": "image"},
                ],
            }
        ],
        layout={"padding": 24},
    )
