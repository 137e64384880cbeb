"""Unit tests for the layout engine."""

import pytest

from src.model import count_components, iter_components

from src.layout import (
    GridTrack,
    LayoutBox,
    LayoutEngine,
    MAX_GRID_COLUMNS,
    LayoutError,
    calculate_layout,
    content_height,
    estimate_text_width,
    parse_grid_template,
    parse_min_height,
    resolve_track_widths,
    text_height,
)


class TestParseGridTemplate:
    """Tests for grid-template-columns parsing."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "template,expected",
        [
            ("repeat(4, 1fr)", 4),
            ("repeat(3, 1fr)", 3),
            ("repeat(6, 1fr)", 6),
            ("1fr 1fr 1fr 1fr", 4),
            ("200px 1fr 1fr", 3),
            ("", 0),
            ("repeat(abc, 1fr)", 0),
            ("repeat( 4 , 1fr )", 4),
            ("1fr", 1),
            ("1fr 1fr 1fr 1fr 1fr 1fr 1fr 1fr", 8),
        ],
    )
    def test_column_count(self, template, expected):
        """Column counts match the track list."""
        assert len(parse_grid_template(template)) == expected

    @pytest.mark.unit
    def test_track_units(self):
        """Pixel and fraction tracks keep their values."""
        assert parse_grid_template("300px 2fr") == [GridTrack(300.0, "px"), GridTrack(2.0, "fr")]

    @pytest.mark.unit
    def test_unknown_tokens_are_one_fraction(self):
        """auto and minmax() count as 1fr."""
        assert parse_grid_template("auto 1fr") == [GridTrack(1.0, "fr"), GridTrack(1.0, "fr")]
        assert parse_grid_template("minmax(100px,1fr) 2fr") == [GridTrack(1.0, "fr"), GridTrack(2.0, "fr")]

    @pytest.mark.unit
    def test_repeat_count_is_capped(self):
        """Huge repeat counts are clamped to MAX_GRID_COLUMNS."""
        tracks = parse_grid_template("repeat(100000000, 1fr)")
        assert len(tracks) == MAX_GRID_COLUMNS
        assert tracks[0] == GridTrack(1.0, "fr")

    @pytest.mark.unit
    def test_huge_repeat_lays_out(self, make_structure):
        """A grid with an oversized repeat still places every child."""
        structure = make_structure(
            [
                {
                    "id": "grid",
                    "type": "box",
                    "layout": {"display": "grid", "grid_template_columns": "repeat(100000000,1fr)"},
                    "children": [{"id": f"cell-{i}", "type": "box"} for i in range(3)],
                }
            ]
        )
        boxes = calculate_layout(structure, 1200)
        assert {"grid", "cell-0", "cell-1", "cell-2"} <= set(boxes)
        assert boxes["cell-0"].y == boxes["cell-2"].y


class TestResolveTrackWidths:
    """Tests for grid track sizing."""

    @pytest.mark.unit
    def test_equal_fractions(self):
        """Fractions split the width left after gaps, rounded down."""
        tracks = parse_grid_template("repeat(3, 1fr)")
        assert resolve_track_widths(tracks, 1200, 16) == [389, 389, 389]

    @pytest.mark.unit
    def test_mixed_tracks(self):
        """Fixed tracks are subtracted before fractions are shared."""
        tracks = parse_grid_template("200px 1fr 3fr")
        assert resolve_track_widths(tracks, 1000, 0) == [200, 200, 600]

    @pytest.mark.unit
    @pytest.mark.parametrize("template", ["repeat(3, 1fr)", "100px 1fr 2fr", "1fr 1fr 1fr 1fr 1fr 1fr 1fr"])
    @pytest.mark.parametrize("width,gap", [(1200, 16), (375, 8), (999, 24)])
    def test_track_conservation(self, template, width, gap):
        """Tracks plus gaps never exceed the content width."""
        widths = resolve_track_widths(parse_grid_template(template), width, gap)
        assert sum(widths) + gap * (len(widths) - 1) <= width + 1


class TestTextMetrics:
    """Tests for text size helpers."""

    @pytest.mark.unit
    def test_text_height(self):
        """Height grows by one line height per newline."""
        assert text_height("") == 38
        assert text_height("one") == 38
        assert text_height("one\ntwo\nthree") == 70

    @pytest.mark.unit
    def test_estimate_text_width(self):
        """Width is the glyph advance times the longest line."""
        assert estimate_text_width("Hello\nHi", "sm") == 30
        assert estimate_text_width("Dashboard", "4xl") == 198
        assert estimate_text_width("abc") == 21

    @pytest.mark.unit
    def test_parse_min_height(self):
        """Pixel strings parse; other units are ignored."""
        assert parse_min_height("400px") == 400
        assert parse_min_height("250") == 250
        assert parse_min_height("50vh") == 0
        assert parse_min_height("") == 0


class TestRootPlacement:
    """Tests for top-level stacking."""

    @pytest.mark.unit
    def test_minimum_viable_box(self, minimal_structure):
        """A lone empty box fills the viewport width and is 100px tall."""
        boxes = calculate_layout(minimal_structure, 1200)
        assert boxes == {"x": LayoutBox(0, 0, 1200, 100)}

    @pytest.mark.unit
    def test_root_spacing(self, make_structure):
        """Root components advance by height plus layout spacing."""
        structure = make_structure(
            [{"id": "a", "type": "box"}, {"id": "b", "type": "image"}, {"id": "c", "type": "button"}],
            layout={"spacing": 24},
        )
        boxes = calculate_layout(structure, 1200)
        assert boxes["b"] == LayoutBox(0, 124, 1200, 150)
        assert boxes["c"] == LayoutBox(0, 298, 120, 44)

    @pytest.mark.unit
    def test_intrinsic_sizes(self, make_structure):
        """Leaf types use their intrinsic sizes."""
        structure = make_structure(
            [
                {"id": "t", "type": "text", "content": "a\nb"},
                {"id": "i", "type": "input"},
                {"id": "b", "type": "button", "layout": {"width": 200, "height": 48}},
            ]
        )
        boxes = calculate_layout(structure, 800)
        assert boxes["t"] == LayoutBox(0, 0, 800, 54)
        assert boxes["i"] == LayoutBox(0, 54, 800, 40)
        assert boxes["b"] == LayoutBox(0, 94, 200, 48)

    @pytest.mark.unit
    def test_max_width_and_min_height(self, make_structure):
        """max_width clamps width and min_height raises the height floor."""
        structure = make_structure(
            [{"id": "x", "type": "box", "layout": {"max_width": 600, "min_height": "400px"}}]
        )
        assert calculate_layout(structure, 1200)["x"] == LayoutBox(0, 0, 600, 400)


class TestContainerLayout:
    """Tests for child placement inside boxes."""

    @pytest.mark.unit
    def test_padding_and_block_stack(self, make_structure):
        """Children sit inside the padding; block stacks keep a zero gap."""
        structure = make_structure(
            [
                {
                    "id": "p",
                    "type": "box",
                    "layout": {"padding": 24},
                    "children": [
                        {"id": "t1", "type": "text", "content": "a"},
                        {"id": "t2", "type": "text", "content": "b"},
                    ],
                }
            ]
        )
        boxes = calculate_layout(structure, 1200)
        assert boxes["t1"] == LayoutBox(24, 24, 1152, 38)
        assert boxes["t2"] == LayoutBox(24, 62, 1152, 38)
        assert boxes["p"] == LayoutBox(0, 0, 1200, 124)

    @pytest.mark.unit
    def test_vertical_flex_default_gap(self, make_structure):
        """A vertical flex container with no gap uses 8px."""
        structure = make_structure(
            [
                {
                    "id": "col",
                    "type": "box",
                    "layout": {"display": "flex"},
                    "children": [
                        {"id": "t1", "type": "text", "content": "a"},
                        {"id": "t2", "type": "text", "content": "b"},
                    ],
                }
            ]
        )
        boxes = calculate_layout(structure, 1200)
        assert boxes["t2"].y == 46
        assert boxes["col"].height == 84

    @pytest.mark.unit
    def test_horizontal_flex_distribution(self, make_structure):
        """Fixed widths first, then flex shares of the remainder."""
        structure = make_structure(
            [
                {
                    "id": "row",
                    "type": "box",
                    "layout": {"display": "flex", "direction": "horizontal", "gap": 20, "width": 1000},
                    "children": [
                        {"id": "fixed", "type": "box", "layout": {"width": 200}},
                        {"id": "one", "type": "box", "layout": {"flex": 1}},
                        {"id": "three", "type": "box", "layout": {"flex": 3}},
                    ],
                }
            ]
        )
        boxes = calculate_layout(structure, 1200)
        assert boxes["fixed"] == LayoutBox(0, 0, 200, 100)
        assert boxes["one"] == LayoutBox(220, 0, 190, 100)
        assert boxes["three"] == LayoutBox(430, 0, 570, 100)
        assert boxes["row"].height == 100

    @pytest.mark.unit
    @pytest.mark.parametrize("flexes", [(1, 1, 1), (1, 2), (3, 1, 1, 2), (5,)])
    @pytest.mark.parametrize("gap", [0, 8, 13])
    def test_flex_conservation(self, make_structure, flexes, gap):
        """Flex children plus gaps fit the content width."""
        children = [{"id": f"c{i}", "type": "box", "layout": {"flex": f}} for i, f in enumerate(flexes)]
        structure = make_structure(
            [
                {
                    "id": "row",
                    "type": "box",
                    "layout": {"display": "flex", "direction": "horizontal", "gap": gap, "padding": 7},
                    "children": children,
                }
            ]
        )
        boxes = calculate_layout(structure, 1001)
        used = sum(boxes[c["id"]].width for c in children) + gap * (len(children) - 1)
        assert used <= 1001 - 14 + 1

    @pytest.mark.unit
    def test_flex_child_without_width_or_flex(self, make_structure):
        """Children with neither width nor flex size against the content width."""
        structure = make_structure(
            [
                {
                    "id": "row",
                    "type": "box",
                    "layout": {"display": "flex", "direction": "horizontal", "gap": 10},
                    "children": [
                        {"id": "btn", "type": "button"},
                        {"id": "txt", "type": "text", "content": "x"},
                    ],
                }
            ]
        )
        boxes = calculate_layout(structure, 600)
        assert boxes["btn"] == LayoutBox(0, 0, 120, 44)
        assert boxes["txt"] == LayoutBox(130, 0, 600, 38)

    @pytest.mark.unit
    def test_space_between(self, dashboard_structure):
        """Slack between intrinsic widths is shared evenly."""
        boxes = calculate_layout(dashboard_structure, 1200)
        assert boxes["h1-title"] == LayoutBox(16, 16, 198, 38)
        assert boxes["save-button"] == LayoutBox(1064, 16, 120, 44)
        assert boxes["header"] == LayoutBox(0, 0, 1200, 76)

    @pytest.mark.unit
    def test_grid_three_columns(self, make_structure):
        """Three equal columns with a 16px gap; the fourth child wraps."""
        structure = make_structure(
            [
                {
                    "id": "grid",
                    "type": "box",
                    "layout": {"display": "grid", "grid_template_columns": "repeat(3,1fr)", "gap": 16},
                    "children": [{"id": f"cell-{i}", "type": "box"} for i in range(4)],
                }
            ]
        )
        boxes = calculate_layout(structure, 1200)
        assert [boxes[f"cell-{i}"].x for i in range(4)] == [0, 405, 810, 0]
        assert all(boxes[f"cell-{i}"].width == 389 for i in range(4))
        assert boxes["cell-3"].y == 116
        assert boxes["grid"].height == 216

    @pytest.mark.unit
    def test_grid_row_height_is_tallest_child(self, dashboard_structure):
        """Rows are as tall as their tallest cell."""
        boxes = calculate_layout(dashboard_structure, 1200)
        assert boxes["card-1"].height == 100
        assert boxes["card-3"].height == 150
        assert boxes["card-grid"] == LayoutBox(0, 246, 1200, 150)

    @pytest.mark.unit
    def test_grid_without_columns_uses_two(self, make_structure):
        """An empty template falls back to two equal columns."""
        structure = make_structure(
            [
                {
                    "id": "grid",
                    "type": "box",
                    "layout": {"display": "grid", "gap": 20},
                    "children": [{"id": "a", "type": "box"}, {"id": "b", "type": "box"}, {"id": "c", "type": "box"}],
                }
            ]
        )
        boxes = calculate_layout(structure, 1000)
        assert boxes["a"] == LayoutBox(0, 0, 490, 100)
        assert boxes["b"] == LayoutBox(510, 0, 490, 100)
        assert boxes["c"] == LayoutBox(0, 120, 490, 100)


class TestEngineProperties:
    """Tests for whole-tree invariants."""

    @pytest.mark.unit
    def test_every_component_has_a_box(self, dashboard_structure):
        """The layout map covers the tree exactly once per component."""
        boxes = calculate_layout(dashboard_structure, 1200)
        ids = [c.id for c in iter_components(dashboard_structure.components)]
        assert set(boxes) == set(ids)
        assert len(boxes) == count_components(dashboard_structure.components)

    @pytest.mark.unit
    @pytest.mark.parametrize("width", [375, 768, 1200])
    def test_non_negative_geometry(self, dashboard_structure, width):
        """No box has a negative size."""
        for box in calculate_layout(dashboard_structure, width).values():
            assert box.width >= 0 and box.height >= 0

    @pytest.mark.unit
    @pytest.mark.parametrize("scale", [2, 3])
    def test_scale_linearity(self, dashboard_structure, scale):
        """Scaled layouts are exact multiples of the unscaled one."""
        base = LayoutEngine(1).calculate(dashboard_structure, 1200)
        scaled = LayoutEngine(scale).calculate(dashboard_structure, 1200)
        assert scaled == {cid: box.scaled(scale) for cid, box in base.items()}

    @pytest.mark.unit
    def test_deterministic(self, dashboard_structure):
        """Repeated runs produce identical maps."""
        assert calculate_layout(dashboard_structure, 1200) == calculate_layout(dashboard_structure, 1200)

    @pytest.mark.unit
    def test_content_height(self, dashboard_structure):
        """Content height is the lowest bottom edge."""
        assert content_height(calculate_layout(dashboard_structure, 1200)) == 396
        assert content_height({}) == 0

    @pytest.mark.unit
    def test_invalid_scale(self):
        """Scale factors below 1 are rejected."""
        with pytest.raises(LayoutError, match="invalid scale factor: 0"):
            LayoutEngine(0)
