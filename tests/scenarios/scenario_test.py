"""End-to-end review scenarios: JSON text through schema, layout, render and rules."""

import json

import pytest

from src.layout import LayoutBox, calculate_layout
from src.model import parse_structure
from src.render import render_structure
from src.report import aggregate, run_rules
from src.rules import (
    Severity,
    validate_choice_overload,
    validate_contrast,
    validate_hierarchy,
    validate_spacing,
)
from src.schema import SchemaValidationError, parse_and_validate_structure


def document(components: list, **fields) -> str:
    """Serialise a Phase 1 document around the given components."""
    doc = {
        "version": "v1",
        "phase": "structure",
        "intent": {"purpose": "scenario"},
        "layout": {"type": "stack"},
        "components": components,
    }
    for key, value in fields.items():
        if isinstance(value, dict) and isinstance(doc.get(key), dict):
            doc[key] = {**doc[key], **value}
        else:
            doc[key] = value
    return json.dumps(doc)


class TestMinimumViable:
    """A single flex box."""

    @pytest.mark.unit
    def test_pipeline(self):
        """Valid, laid out at the top, blank 1200x400 canvas, rules clean."""
        structure = parse_and_validate_structure(
            document(
                [{"id": "x", "type": "box", "layout": {"display": "flex"}}],
                accessibility={"focus_indicators": "visible"},
            )
        )
        assert calculate_layout(structure, 1200) == {"x": LayoutBox(0, 0, 1200, 100)}

        result = render_structure(structure)
        assert result.image.size == (1200, 400)
        assert result.image.getextrema()[:3] == ((255, 255),) * 3

        results = run_rules(structure)
        assert aggregate(results).passed
        for name, rule_result in results.items():
            assert all(i.severity == Severity.INFO for i in rule_result.issues), name


class TestContrastFailure:
    """Gray text just under AA on white."""

    @pytest.mark.unit
    def test_error_and_suggestion(self):
        """One contrast error and one suggestion info."""
        # #777777 sits outside the Phase 1 palette, so only decoding is applied
        structure = parse_structure(
            document(
                [
                    {
                        "id": "panel",
                        "type": "box",
                        "layout": {"background": "#FFFFFF"},
                        "children": [
                            {
                                "id": "hint",
                                "type": "text",
                                "content": "hi",
                                "color": "#777777",
                                "size": "base",
                                "weight": "normal",
                            }
                        ],
                    }
                ]
            )
        )
        result = validate_contrast(structure)
        assert not result.passed
        assert [i.category for i in result.errors] == ["contrast_fail"]
        assert [i.category for i in result.infos] == ["contrast_suggestion"]


class TestDepthOverflow:
    """Six nested boxes."""

    @pytest.mark.unit
    def test_schema_rejects_depth_five(self):
        """The component at depth 5 is named."""
        node = {"id": "level-5", "type": "box"}
        for i in range(4, -1, -1):
            node = {"id": f"level-{i}", "type": "box", "children": [node]}
        with pytest.raises(SchemaValidationError) as exc_info:
            parse_and_validate_structure(document([node]))
        assert exc_info.value.component_id == "level-5"
        assert "max nesting depth" in str(exc_info.value)


class TestOffGridSpacing:
    """Root spacing of 20px."""

    @pytest.mark.unit
    def test_warning_and_suggestion(self):
        """One warning and one info suggesting the smaller neighbour."""
        structure = parse_and_validate_structure(
            document([{"id": "x", "type": "box"}], layout={"spacing": 20})
        )
        result = validate_spacing(structure)
        assert [i.severity for i in result.issues] == [Severity.WARNING, Severity.INFO]
        assert "not on 8pt grid" in result.issues[0].message
        assert result.issues[1].message == "   Suggestion: Use 16px for consistency"


class TestNavigationOverload:
    """Eight buttons in a navigation box."""

    @pytest.mark.unit
    def test_single_warning(self):
        """The container carries one navigation_overload warning."""
        buttons = [{"id": f"nav-{i}", "type": "button", "content": f"Item {i}"} for i in range(8)]
        structure = parse_and_validate_structure(
            document([{"id": "main-nav", "type": "box", "role": "navigation", "children": buttons}])
        )
        result = validate_choice_overload(structure)
        assert [(i.severity, i.category, i.component) for i in result.issues] == [
            (Severity.WARNING, "navigation_overload", "main-nav")
        ]


class TestButtonHierarchy:
    """Primary action narrower than the secondary."""

    @pytest.mark.unit
    def test_warning_and_error(self):
        """A narrow primary warns; a wider secondary is an error."""
        structure = parse_and_validate_structure(
            document(
                [
                    {"id": "save", "type": "button", "content": "Save", "layout": {"width": 100}},
                    {"id": "cancel", "type": "button", "content": "Cancel", "layout": {"width": 150}},
                ],
                intent={"primary_action": "save"},
            )
        )
        result = validate_hierarchy(structure)
        assert not result.passed
        assert "(recommend minimum 120px)" in result.warnings[0].message
        assert "larger than primary button 'save'" in result.errors[0].message


class TestGridThreeColumns:
    """A 3-column grid with four cells."""

    @pytest.mark.unit
    def test_cells(self):
        """Cells are 389px wide at x = 0, 405, 810; the fourth wraps."""
        structure = parse_and_validate_structure(
            document(
                [
                    {
                        "id": "grid",
                        "type": "box",
                        "layout": {"display": "grid", "grid_template_columns": "repeat(3,1fr)", "gap": 16},
                        "children": [{"id": f"cell-{i}", "type": "box"} for i in range(4)],
                    }
                ]
            )
        )
        boxes = calculate_layout(structure, 1200)
        assert [boxes[f"cell-{i}"].x for i in range(4)] == [0, 405, 810, 0]
        assert {boxes[f"cell-{i}"].width for i in range(4)} == {389}
        assert boxes["cell-3"].y > boxes["cell-0"].y
