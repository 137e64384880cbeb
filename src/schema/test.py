"""Unit tests for the Schema module."""

import json

import pytest

from src.model import StructureParseError

from src.schema import (
    MAX_NESTING_DEPTH,
    PHASE1_PALETTE,
    SchemaValidationError,
    export_json_schema,
    is_valid_phase1,
    load_and_validate_structure,
    parse_and_validate_structure,
    validate_phase1,
)


def _nested_boxes(levels: int) -> dict:
    """Chain of boxes `levels` deep, ids level-0 .. level-{levels-1}."""
    node = {"id": f"level-{levels - 1}", "type": "box"}
    for i in range(levels - 2, -1, -1):
        node = {"id": f"level-{i}", "type": "box", "children": [node]}
    return node


class TestDocumentLevel:
    """Tests for envelope checks."""

    @pytest.mark.unit
    def test_minimal_document_passes(self, minimal_structure):
        """A single flex box with the full envelope is valid."""
        validate_phase1(minimal_structure)
        assert is_valid_phase1(minimal_structure)

    @pytest.mark.unit
    def test_dashboard_passes(self, dashboard_structure):
        """The realistic fixture is valid Phase 1."""
        validate_phase1(dashboard_structure)

    @pytest.mark.unit
    def test_wrong_phase(self, make_structure):
        """Phase other than 'structure' is rejected first."""
        structure = make_structure([{"id": "x", "type": "box"}], phase="design", version="")
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_phase1(structure)
        assert str(exc_info.value) == "invalid phase: expected 'structure', got 'design'"
        assert exc_info.value.error_type == "invalid_phase"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "fields,message",
        [
            ({"version": ""}, "version is required"),
            ({"intent": {"purpose": ""}}, "intent.purpose is required"),
            ({"layout": {"type": ""}}, "layout.type is required"),
        ],
    )
    def test_missing_required_fields(self, make_structure, fields, message):
        """Required envelope fields are reported by name."""
        structure = make_structure([{"id": "x", "type": "box"}], **fields)
        with pytest.raises(SchemaValidationError, match=f"^{message}$"):
            validate_phase1(structure)

    @pytest.mark.unit
    def test_no_components(self, make_structure):
        """An empty component list is rejected."""
        with pytest.raises(SchemaValidationError, match="at least one component is required"):
            validate_phase1(make_structure([]))

    @pytest.mark.unit
    def test_invalid_layout_type(self, make_structure):
        """Layout type outside stack/grid/sidebar is rejected."""
        structure = make_structure([{"id": "x", "type": "box"}], layout={"type": "masonry"})
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_phase1(structure)
        assert str(exc_info.value) == "invalid layout.type: masonry (must be stack, grid, or sidebar)"


class TestComponentChecks:
    """Tests for per-component checks."""

    @pytest.mark.unit
    def test_missing_id(self, make_structure):
        """Components need an ID."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_phase1(make_structure([{"type": "box"}]))
        assert str(exc_info.value) == "component[0]: component ID is required"
        assert exc_info.value.path == "components[0]"

    @pytest.mark.unit
    def test_missing_type(self, make_structure):
        """Components need a type."""
        with pytest.raises(SchemaValidationError, match="component\\[0\\]: component 'x': type is required"):
            validate_phase1(make_structure([{"id": "x"}]))

    @pytest.mark.unit
    def test_invalid_type(self, make_structure):
        """Unknown component types are rejected."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_phase1(make_structure([{"id": "x", "type": "box"}, {"id": "v", "type": "video"}]))
        assert str(exc_info.value) == (
            "component[1]: component 'v': invalid type 'video' "
            "(must be box, text, input, button, or image)"
        )
        assert exc_info.value.component_id == "v"

    @pytest.mark.unit
    def test_invalid_size_token(self, make_structure):
        """Size tokens outside the scale are rejected."""
        structure = make_structure([{"id": "t", "type": "text", "content": "Hi", "size": "huge"}])
        with pytest.raises(SchemaValidationError, match="invalid size 'huge'"):
            validate_phase1(structure)

    @pytest.mark.unit
    @pytest.mark.parametrize("color", PHASE1_PALETTE)
    def test_palette_colors_pass(self, make_structure, color):
        """Every palette color is accepted for text and background."""
        structure = make_structure(
            [{"id": "x", "type": "box", "color": color, "layout": {"background": color}}]
        )
        validate_phase1(structure)

    @pytest.mark.unit
    def test_color_outside_palette(self, make_structure):
        """Chromatic colors are rejected."""
        structure = make_structure([{"id": "t", "type": "text", "color": "#FF0000"}])
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_phase1(structure)
        assert str(exc_info.value) == (
            "component[0]: component 't': invalid color '#FF0000' "
            "(Phase 1 only allows #FFFFFF, #000000, #E5E5E5, #737373, #525252)"
        )
        assert exc_info.value.error_type == "invalid_color"

    @pytest.mark.unit
    def test_palette_match_is_exact(self, make_structure):
        """Lowercase hex is not treated as a palette color."""
        structure = make_structure([{"id": "t", "type": "text", "color": "#ffffff"}])
        assert not is_valid_phase1(structure)

    @pytest.mark.unit
    def test_background_outside_palette(self, make_structure):
        """Background colors use the same palette."""
        structure = make_structure([{"id": "b", "type": "box", "layout": {"background": "#3B82F6"}}])
        with pytest.raises(SchemaValidationError, match="invalid background color '#3B82F6'"):
            validate_phase1(structure)

    @pytest.mark.unit
    def test_child_error_path(self, make_structure):
        """Errors in children carry the chain of parent IDs."""
        structure = make_structure(
            [
                {
                    "id": "outer",
                    "type": "box",
                    "children": [
                        {"id": "ok", "type": "text"},
                        {"id": "inner", "type": "box", "children": [{"id": "bad", "type": "slider"}]},
                    ],
                }
            ]
        )
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_phase1(structure)
        message = str(exc_info.value)
        assert message.startswith(
            "component[0]: component 'outer'.children[1]: component 'inner'.children[0]: "
        )
        assert "invalid type 'slider'" in message
        assert exc_info.value.path == "components[0].children[1].children[0]"


    @pytest.mark.unit
    def test_duplicate_ids_accepted(self, make_structure):
        """Component IDs are not required to be unique."""
        structure = make_structure([{"id": "card", "type": "box"}, {"id": "card", "type": "box"}])
        validate_phase1(structure)
        assert is_valid_phase1(structure)

    @pytest.mark.unit
    def test_skeleton_types_left_to_rules(self, make_structure):
        """Unknown skeleton element types do not fail the schema."""
        structure = make_structure(
            [{"id": "feed", "type": "box", "skeleton": {"elements": [{"type": "hexagon"}]}}]
        )
        assert is_valid_phase1(structure)


class TestNestingDepth:
    """Tests for the nesting depth limit."""

    @pytest.mark.unit
    def test_five_levels_pass(self, make_structure):
        """Depths 0 through 4 are allowed."""
        validate_phase1(make_structure([_nested_boxes(MAX_NESTING_DEPTH + 1)]))

    @pytest.mark.unit
    def test_six_levels_fail(self, make_structure):
        """The component at depth 5 is reported."""
        with pytest.raises(SchemaValidationError) as exc_info:
            validate_phase1(make_structure([_nested_boxes(6)]))
        message = str(exc_info.value)
        assert "component 'level-5': max nesting depth (4) exceeded" in message
        assert exc_info.value.component_id == "level-5"
        assert exc_info.value.error_type == "max_depth"


class TestParseAndValidate:
    """Tests for the combined parse/validate helpers."""

    @pytest.mark.unit
    def test_valid_document(self, minimal_structure):
        """Valid JSON returns the decoded Structure."""
        structure = parse_and_validate_structure(minimal_structure.to_json())
        assert structure == minimal_structure

    @pytest.mark.unit
    def test_validation_failure_is_prefixed(self, make_structure):
        """Validation errors are wrapped with 'validation failed: '."""
        doc = make_structure([{"id": "x", "type": "box"}], phase="design").to_json()
        with pytest.raises(SchemaValidationError, match="^validation failed: invalid phase"):
            parse_and_validate_structure(doc)

    @pytest.mark.unit
    def test_parse_failure_propagates(self):
        """Malformed JSON raises the parse error, not a validation error."""
        with pytest.raises(StructureParseError):
            parse_and_validate_structure("{")

    @pytest.mark.integration
    def test_load_from_file(self, tmp_path, minimal_structure):
        """Files are read and validated."""
        path = tmp_path / "v1.json"
        path.write_text(minimal_structure.to_json(), encoding="utf-8")
        assert load_and_validate_structure(path).version == "t"

    @pytest.mark.integration
    def test_load_invalid_file(self, tmp_path):
        """Invalid files raise SchemaValidationError."""
        path = tmp_path / "v1.json"
        path.write_text(json.dumps({"phase": "structure"}), encoding="utf-8")
        with pytest.raises(SchemaValidationError, match="version is required"):
            load_and_validate_structure(path)


class TestExportJsonSchema:
    """Tests for JSON Schema export."""

    @pytest.mark.unit
    def test_schema_describes_components(self):
        """Exported schema includes the component definition."""
        schema = export_json_schema()
        assert schema["type"] == "object"
        assert "components" in schema["properties"]
        assert "Component" in schema["$defs"]
