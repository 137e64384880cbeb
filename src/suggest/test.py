"""Unit tests for the suggestion engine."""

import pytest

from src.suggest import (
    Suggestion,
    SuggestionCategory,
    count_navigation_items,
    find_components,
    generate_suggestions,
)


class TestGenerateSuggestions:
    """Tests for category selection and totals."""

    @pytest.mark.unit
    def test_dashboard_all(self, dashboard_structure):
        """Only categories with findings appear, in analyzer order."""
        result = generate_suggestions(dashboard_structure)
        assert list(result.categories) == ["navigation", "layouts", "cards"]
        assert result.total == 5
        assert [s.message for s in result.categories["layouts"]] == [
            "Layout uses CSS Grid for consistent structure",
            "Layout uses appropriate max-width (1200px)",
        ]

    @pytest.mark.unit
    def test_single_category(self, dashboard_structure):
        """A category name restricts the analyzers that run."""
        result = generate_suggestions(dashboard_structure, SuggestionCategory.LAYOUTS)
        assert list(result.categories) == ["layouts"]
        assert result.total == 2
        assert generate_suggestions(dashboard_structure, "layouts").total == 2

    @pytest.mark.unit
    def test_unknown_category(self, dashboard_structure):
        """Unknown categories give an empty result."""
        result = generate_suggestions(dashboard_structure, "colors")
        assert result.categories == {}
        assert result.total == 0

    @pytest.mark.unit
    def test_to_dict(self, dashboard_structure):
        """JSON form omits empty component IDs."""
        data = generate_suggestions(dashboard_structure, "navigation").to_dict()
        assert data == {
            "categories": {
                "navigation": [
                    {
                        "category": "navigation",
                        "type": "good",
                        "message": "Primary navigation is in expected location (header/top)",
                        "component_id": "header",
                    }
                ]
            },
            "total": 1,
        }
        assert Suggestion("cards", "good", "x").to_dict() == {"category": "cards", "type": "good", "message": "x"}


class TestAnalyzers:
    """Tests for individual pattern analyzers."""

    @pytest.mark.unit
    def test_long_unlabelled_form(self, make_structure):
        """Six bare inputs need labels, grouping and help text."""
        inputs = [{"id": f"field-{i}", "type": "input"} for i in range(6)]
        result = generate_suggestions(make_structure(inputs), "forms")
        forms = result.categories["forms"]
        assert [s.type for s in forms] == ["suggestion", "suggestion", "consider"]
        assert forms[0].message == "Add labels for inputs: " + ", ".join(f"field-{i}" for i in range(6))
        assert forms[0].component_id == "field-0"
        assert forms[1].message.startswith("6 form fields detected")

    @pytest.mark.unit
    def test_labelled_form(self, make_structure):
        """A top-level text counts as a label; small text counts as help."""
        structure = make_structure(
            [
                {"id": "email-label", "type": "text", "content": "Email", "size": "sm"},
                {"id": "email-input", "type": "input"},
            ]
        )
        forms = generate_suggestions(structure, "forms").categories["forms"]
        assert [(s.type, s.message) for s in forms] == [
            ("good", "Labels are above inputs (good for mobile and scanning)")
        ]

    @pytest.mark.unit
    def test_crowded_navigation(self, make_structure):
        """More than seven items and no active state."""
        links = [{"id": f"link-{i}", "type": "text", "content": str(i)} for i in range(8)]
        structure = make_structure([{"id": "main-nav", "type": "box", "children": links}])
        nav = generate_suggestions(structure, "navigation").categories["navigation"]
        assert [s.type for s in nav] == ["consider", "suggestion"]
        assert nav[0].message.startswith("8 navigation items detected")

    @pytest.mark.unit
    def test_buttons(self, make_structure):
        """Small buttons and competing primaries are reported."""
        structure = make_structure(
            [
                {"id": "primary-save", "type": "button", "layout": {"width": 30, "height": 30}},
                {"id": "primary-next", "type": "button", "layout": {"width": 120, "height": 44}},
            ]
        )
        buttons = generate_suggestions(structure, "buttons").categories["buttons"]
        assert [(s.type, s.message) for s in buttons] == [
            ("suggestion", "Increase size of buttons to minimum 44x44px: primary-save"),
            (
                "consider",
                "2 primary buttons detected. Use only 1 primary button per section for clear CTA hierarchy",
            ),
        ]

    @pytest.mark.unit
    def test_wide_layout(self, make_structure):
        """Very wide pages and many ungridded components are flagged."""
        boxes = [{"id": f"section-{i}", "type": "text"} for i in range(6)]
        structure = make_structure(boxes, layout={"max_width": 1920})
        layouts = generate_suggestions(structure, "layouts").categories["layouts"]
        assert [s.type for s in layouts] == ["suggestion", "consider"]
        assert layouts[1].message.startswith("Max width is 1920px")

    @pytest.mark.unit
    def test_tables(self, make_structure):
        """Tables always get the sorting reminder."""
        structure = make_structure([{"id": "orders-table", "type": "box"}])
        tables = generate_suggestions(structure, "tables").categories["tables"]
        assert [s.type for s in tables] == ["suggestion", "consider"]

    @pytest.mark.unit
    def test_modal_with_close(self, make_structure):
        """A modal with a close child still needs a backdrop."""
        structure = make_structure(
            [
                {
                    "id": "confirm-modal",
                    "type": "box",
                    "children": [{"id": "close-button", "type": "button", "content": "X"}],
                }
            ]
        )
        modals = generate_suggestions(structure, "modals").categories["modals"]
        assert [s.type for s in modals] == ["suggestion", "good"]


class TestHelpers:
    """Tests for matching helpers."""

    @pytest.mark.unit
    def test_find_components_top_level_only(self, dashboard_structure):
        """Only top-level components are matched, by ID or type."""
        assert [c.id for c in find_components(dashboard_structure, "form")] == ["filters-form"]
        assert find_components(dashboard_structure, "button") == []

    @pytest.mark.unit
    def test_count_navigation_items(self, dashboard_structure):
        """Texts, links and buttons below the container are counted."""
        assert count_navigation_items(dashboard_structure.components[0]) == 2
