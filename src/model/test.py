"""Tests for the structure document model."""

import json

import pytest
from pydantic import ValidationError

from .lib import (
    Component,
    ComponentType,
    Structure,
    StructureParseError,
    count_components,
    find_component,
    iter_components,
    load_structure,
    max_depth,
    parse_structure,
    walk_components,
)

SAMPLE_DOCUMENT = {
    "version": "v2",
    "phase": "structure",
    "created_at": "2024-05-01T10:30:00Z",
    "locked": False,
    "parent_version": "v1",
    "intent": {
        "purpose": "Sign in",
        "primary_action": "login-button",
        "user_context": "Returning user",
        "key_interactions": ["type email", "submit"],
    },
    "layout": {"type": "stack", "direction": "vertical", "spacing": 24, "max_width": 480, "padding": 32},
    "components": [
        {
            "id": "login-form",
            "type": "box",
            "role": "form",
            "layout": {"display": "flex", "direction": "vertical", "gap": 16},
            "children": [
                {"id": "email-label", "type": "text", "content": "Email", "size": "sm"},
                {"id": "email-input", "type": "input", "content": "you@example.com"},
                {"id": "login-button", "type": "button", "content": "Sign in"},
            ],
        }
    ],
    "responsive": {"mobile": {"breakpoint": 375, "changes": {"layout": "single column"}}},
    "accessibility": {"touch_targets_min": 44, "focus_indicators": "visible", "labels": "all_interactive_elements"},
    "validation": {"max_nesting_depth": 2, "checks_passed": ["hierarchy"]},
    "unknown_key": "ignored",
}


class TestParseStructure:
    """Tests for parse_structure."""

    @pytest.mark.unit
    def test_parses_full_document(self):
        """All sections decode into their models."""
        structure = parse_structure(json.dumps(SAMPLE_DOCUMENT))
        assert structure.version == "v2"
        assert structure.intent.key_interactions == ["type email", "submit"]
        assert structure.layout.spacing == 24
        assert structure.components[0].children[1].type == ComponentType.INPUT
        assert structure.responsive.mobile.changes == {"layout": "single column"}
        assert structure.created_at.year == 2024

    @pytest.mark.unit
    def test_defaults_for_missing_fields(self):
        """Absent fields fall back to empty defaults."""
        structure = parse_structure('{"components": [{"id": "a"}]}')
        comp = structure.components[0]
        assert comp.type == ""
        assert comp.layout.padding == 0
        assert comp.children == []
        assert comp.skeleton is None
        assert structure.accessibility.semantic_structure is False

    @pytest.mark.unit
    def test_null_lists_become_empty(self):
        """JSON null for list fields decodes as empty lists."""
        structure = parse_structure('{"components": [{"id": "a", "children": null}], "intent": {"key_interactions": null}}')
        assert structure.components[0].children == []
        assert structure.intent.key_interactions == []

    @pytest.mark.unit
    def test_malformed_json_raises(self):
        """Malformed JSON raises StructureParseError."""
        with pytest.raises(StructureParseError, match="failed to parse JSON"):
            parse_structure("{not json")

    @pytest.mark.unit
    def test_wrong_type_raises(self):
        """A field of the wrong type raises StructureParseError with its location."""
        with pytest.raises(StructureParseError, match="layout.spacing"):
            parse_structure('{"layout": {"spacing": "wide"}}')

    @pytest.mark.unit
    def test_round_trip(self):
        """Re-encoding and decoding yields an equal value."""
        structure = parse_structure(json.dumps(SAMPLE_DOCUMENT))
        assert parse_structure(structure.to_json()) == structure

    @pytest.mark.unit
    def test_models_are_frozen(self):
        """Loaded documents cannot be mutated."""
        structure = parse_structure(json.dumps(SAMPLE_DOCUMENT))
        with pytest.raises(ValidationError):
            structure.version = "v3"


class TestResponsiveChanges:
    """Tests for breakpoint change maps with mixed value types."""

    DOCUMENT = {
        "version": "v1",
        "phase": "structure",
        "intent": {"purpose": "Dashboard"},
        "layout": {"type": "stack"},
        "components": [{"id": "header", "type": "box", "layout": {"padding": 24}}],
        "responsive": {
            "mobile": {"breakpoint": 640, "changes": {"layout.padding": 16}},
            "tablet": {"breakpoint": 1024, "changes": {}},
        },
    }

    @pytest.mark.unit
    def test_numeric_change_value(self):
        """Numeric change values decode as numbers."""
        structure = parse_structure(json.dumps(self.DOCUMENT))
        assert structure.responsive.mobile.breakpoint == 640
        assert structure.responsive.mobile.changes == {"layout.padding": 16}
        assert structure.responsive.tablet.changes == {}

    @pytest.mark.unit
    def test_mixed_change_values(self):
        """Strings, numbers and booleans can share one change map."""
        doc = json.loads(json.dumps(self.DOCUMENT))
        doc["responsive"]["mobile"]["changes"] = {"layout": "single column", "columns": 1, "hide_sidebar": True}
        changes = parse_structure(json.dumps(doc)).responsive.mobile.changes
        assert changes == {"layout": "single column", "columns": 1, "hide_sidebar": True}

    @pytest.mark.unit
    def test_round_trip_keeps_number(self):
        """Re-encoding keeps 16 as a JSON number."""
        structure = parse_structure(json.dumps(self.DOCUMENT))
        encoded = json.loads(structure.to_json())
        assert encoded["responsive"]["mobile"]["changes"]["layout.padding"] == 16
        assert isinstance(encoded["responsive"]["mobile"]["changes"]["layout.padding"], int)
        assert parse_structure(structure.to_json()) == structure


class TestLoadStructure:
    """Tests for load_structure."""

    @pytest.mark.integration
    def test_loads_file(self, tmp_path):
        """Reads a UTF-8 file from disk."""
        path = tmp_path / "v1.json"
        path.write_text(json.dumps(SAMPLE_DOCUMENT), encoding="utf-8")
        assert load_structure(path).version == "v2"

    @pytest.mark.integration
    def test_error_carries_source(self, tmp_path):
        """Parse errors record the offending file."""
        path = tmp_path / "broken.json"
        path.write_text("[", encoding="utf-8")
        with pytest.raises(StructureParseError) as exc_info:
            load_structure(path)
        assert exc_info.value.source == str(path)


class TestTraversal:
    """Tests for the shared tree walker."""

    @pytest.fixture
    def forest(self):
        return [
            Component(
                id="a",
                type="box",
                children=[
                    Component(id="a1", type="text"),
                    Component(id="a2", type="box", children=[Component(id="a2x", type="button")]),
                ],
            ),
            Component(id="b", type="image"),
        ]

    @pytest.mark.unit
    def test_walk_order_and_depth(self, forest):
        """Depth-first, document order, roots at depth 0."""
        visited = [(c.id, d, p.id if p else None) for c, d, p in walk_components(forest)]
        assert visited == [
            ("a", 0, None),
            ("a1", 1, "a"),
            ("a2", 1, "a"),
            ("a2x", 2, "a2"),
            ("b", 0, None),
        ]

    @pytest.mark.unit
    def test_walk_custom_start_depth(self, forest):
        """The starting depth can be shifted."""
        depths = [d for _, d, _ in walk_components(forest, depth=1)]
        assert depths == [1, 2, 2, 3, 1]

    @pytest.mark.unit
    def test_count_and_depth(self, forest):
        """Counts every node and reports the deepest level."""
        assert count_components(forest) == 5
        assert max_depth(forest) == 2
        assert max_depth([]) == -1

    @pytest.mark.unit
    def test_find_component(self, forest):
        """Finds nested components by ID."""
        assert find_component(forest, "a2x").type == "button"
        assert find_component(forest, "missing") is None

    @pytest.mark.unit
    def test_iter_components(self, forest):
        """Yields bare components."""
        assert [c.id for c in iter_components(forest)] == ["a", "a1", "a2", "a2x", "b"]

    @pytest.mark.unit
    def test_is_interactive(self):
        """Only buttons and inputs are interactive."""
        assert Component(id="b", type="button").is_interactive
        assert Component(id="i", type="input").is_interactive
        assert not Component(id="t", type="text").is_interactive


class TestStructureDefaults:
    """Tests for Structure construction."""

    @pytest.mark.unit
    def test_empty_structure(self):
        """An empty Structure is constructible."""
        structure = Structure()
        assert structure.components == []
        assert structure.layout.type == ""
