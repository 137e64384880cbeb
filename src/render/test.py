"""Tests for render module.

Unit tests draw in memory; integration tests write PNG files to tmp_path.
"""

import pytest
from PIL import Image, ImageChops, ImageDraw, ImageFont

from src.model import Component

from src.render import (
    BLACK,
    BORDER_GRAY,
    TEXT_GRAY,
    WHITE,
    Renderer,
    RenderError,
    RenderOptions,
    RenderResult,
    compose_side_by_side,
    default_output_name,
    parse_color,
    render_structure,
)
from src.render.lib import ANNOTATION_GRAY


def _has_ink(image: Image.Image, box: tuple[int, int, int, int]) -> bool:
    """True if any pixel in the region is darker than white."""
    return image.crop(box).convert("L").getextrema()[0] < 255


# =============================================================================
# Unit Tests
# =============================================================================


class TestRenderOptions:
    """Tests for RenderOptions dataclass."""

    @pytest.mark.unit
    def test_default_values(self):
        """Default options render a 1200px desktop canvas at scale 1."""
        opts = RenderOptions()
        assert opts.width == 1200
        assert opts.height == 0
        assert opts.scale == 1
        assert opts.viewport == "desktop"
        assert not opts.annotations and not opts.grid

    @pytest.mark.unit
    @pytest.mark.parametrize("scale", [0, 4])
    def test_invalid_scale(self, scale):
        """Options reject scales outside 1 to 3."""
        with pytest.raises(ValueError, match="Scale must be between"):
            RenderOptions(scale=scale)

    @pytest.mark.unit
    def test_invalid_width(self):
        """Options reject a non-positive width."""
        with pytest.raises(ValueError, match="Width must be positive"):
            RenderOptions(width=0)

    @pytest.mark.unit
    def test_invalid_height(self):
        """Options reject a negative height."""
        with pytest.raises(ValueError, match="Height must not be negative"):
            RenderOptions(height=-1)

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "viewport,requested,expected",
        [("mobile", 1200, 375), ("tablet", 1200, 768), ("desktop", 1440, 1440)],
    )
    def test_for_viewport(self, viewport, requested, expected):
        """Viewport presets override the width except on desktop."""
        opts = RenderOptions.for_viewport(viewport, requested, scale=2)
        assert opts.width == expected
        assert opts.viewport == viewport
        assert opts.scale == 2


class TestParseColor:
    """Tests for hex color parsing."""

    @pytest.mark.unit
    def test_palette_color(self):
        """Six-digit hex parses to opaque RGBA."""
        assert parse_color("#E5E5E5") == BORDER_GRAY
        assert parse_color("#737373") == TEXT_GRAY

    @pytest.mark.unit
    @pytest.mark.parametrize("value", ["", "red", "#fff", "#GGGGGG", "E5E5E5F"])
    def test_invalid_is_black(self, value):
        """Anything that is not #RRGGBB falls back to black."""
        assert parse_color(value) == BLACK


class TestDefaultOutputName:
    """Tests for PNG naming."""

    @pytest.mark.unit
    def test_project_base_name(self):
        """The project directory's base name prefixes the file."""
        assert default_output_name("projects/shop", "v3") == "shop-phase1-v3.png"

    @pytest.mark.unit
    @pytest.mark.parametrize("path", [".", "/", "./"])
    def test_mockup_fallback(self, path):
        """Current and root directories fall back to 'mockup'."""
        assert default_output_name(path, "v1") == "mockup-phase1-v1.png"

    @pytest.mark.unit
    def test_custom_kind(self):
        """The kind segment is configurable."""
        assert default_output_name("shop", "v1-v2", kind="compare") == "shop-compare-v1-v2.png"


class TestRenderer:
    """Tests for Renderer.render."""

    @pytest.mark.unit
    def test_minimum_viable_canvas(self, minimal_structure):
        """A lone empty box yields a blank 1200x400 canvas."""
        result = render_structure(minimal_structure)
        assert (result.width, result.height) == (1200, 400)
        assert result.image.size == (1200, 400)
        assert result.image.mode == "RGBA"
        assert result.image.getextrema()[:3] == ((255, 255),) * 3

    @pytest.mark.unit
    def test_auto_height_grows_with_content(self, form_structure):
        """Auto height is the content bottom plus page padding."""
        result = render_structure(form_structure)
        assert result.height == 408
        assert result.boxes["form"].height == 360

    @pytest.mark.unit
    def test_explicit_height(self, minimal_structure):
        """An explicit height overrides the auto height."""
        result = render_structure(minimal_structure, RenderOptions(height=250))
        assert result.height == 250

    @pytest.mark.unit
    @pytest.mark.parametrize("scale", [2, 3])
    def test_scale_linearity(self, form_structure, scale):
        """Scaled canvases are exact multiples of the unscaled one."""
        base = render_structure(form_structure)
        scaled = render_structure(form_structure, RenderOptions(scale=scale))
        assert (scaled.width, scaled.height) == (base.width * scale, base.height * scale)

    @pytest.mark.unit
    def test_box_border_and_background(self, form_structure):
        """Bordered boxes get a light gray outline."""
        image = render_structure(form_structure).image
        assert image.getpixel((0, 0)) == BORDER_GRAY
        assert image.getpixel((1199, 359)) == BORDER_GRAY
        assert image.getpixel((600, 5)) == WHITE

    @pytest.mark.unit
    def test_partial_borders(self, make_structure):
        """border_bottom and border_right draw a single edge each."""
        structure = make_structure(
            [{"id": "b", "type": "box", "layout": {"border_bottom": "1px", "border_right": "1px"}}]
        )
        image = render_structure(structure).image
        assert image.getpixel((10, 99)) == BORDER_GRAY
        assert image.getpixel((1199, 10)) == BORDER_GRAY
        assert image.getpixel((10, 0)) == WHITE
        assert image.getpixel((0, 10)) == WHITE

    @pytest.mark.unit
    def test_button_fill(self, form_structure):
        """Buttons fill black by default and carry their label."""
        result = render_structure(form_structure)
        box = result.boxes["submit-button"]
        assert result.image.getpixel((box.x + 1, box.y + 1)) == BLACK
        assert result.image.getpixel((box.right - 2, box.bottom - 2)) == BLACK

    @pytest.mark.unit
    def test_input_outline_and_placeholder(self, form_structure):
        """Inputs are outlined and show their placeholder."""
        result = render_structure(form_structure)
        box = result.boxes["email-input"]
        assert result.image.getpixel((box.x, box.y)) == BORDER_GRAY
        assert result.image.getpixel((box.right - 1, box.bottom - 1)) == BORDER_GRAY
        assert _has_ink(result.image, (box.x + 8, box.y + 2, box.x + 80, box.bottom - 2))

    @pytest.mark.unit
    def test_image_placeholder(self, form_structure):
        """Images are gray blocks."""
        result = render_structure(form_structure)
        box = result.boxes["hero"]
        assert result.image.getpixel((box.x + 2, box.y + 2)) == BORDER_GRAY

    @pytest.mark.unit
    def test_text_lines(self, form_structure):
        """Text is drawn line by line, skipping empty lines."""
        result = render_structure(form_structure)
        box = result.boxes["title"]
        assert _has_ink(result.image, (box.x, box.y, box.x + 100, box.y + 16))
        assert not _has_ink(result.image, (box.x, box.y + 20, box.x + 100, box.y + 30))
        assert _has_ink(result.image, (box.x, box.y + 34, box.x + 100, box.y + 48))

    @pytest.mark.unit
    def test_fixed_bitmap_face(self):
        """Text uses the built-in bitmap face, not a scalable outline font."""
        font = Renderer(RenderOptions(scale=3))._font
        assert isinstance(font, ImageFont.ImageFont)
        assert not isinstance(font, ImageFont.FreeTypeFont)

    @pytest.mark.unit
    def test_scaled_text_is_pixel_doubled(self, make_structure):
        """At scale 2 the text ink covers exactly twice the scale 1 extent."""
        structure = make_structure([{"id": "greeting", "type": "text", "content": "Hello PRISM"}])

        def ink_bbox(scale: int) -> tuple[int, int, int, int]:
            image = render_structure(structure, RenderOptions(scale=scale)).image
            return ImageChops.invert(image.convert("L")).getbbox()

        single = ink_bbox(1)
        assert single is not None
        assert ink_bbox(2) == tuple(2 * v for v in single)

    @pytest.mark.unit
    def test_grid_overlay(self, minimal_structure):
        """The grid overlay draws lines every 64px."""
        plain = render_structure(minimal_structure).image
        gridded = render_structure(minimal_structure, RenderOptions(grid=True)).image
        assert plain.getpixel((64, 200)) == WHITE
        assert gridded.getpixel((64, 200)) == BORDER_GRAY
        assert gridded.getpixel((10, 128)) == BORDER_GRAY

    @pytest.mark.unit
    def test_annotations(self, minimal_structure):
        """Annotations outline a label at each component's corner."""
        plain = render_structure(minimal_structure).image
        annotated = render_structure(minimal_structure, RenderOptions(annotations=True)).image
        assert plain.getpixel((0, 0)) == WHITE
        assert annotated.getpixel((0, 0)) == ANNOTATION_GRAY

    @pytest.mark.unit
    def test_deterministic(self, form_structure):
        """Rendering twice produces identical bytes."""
        assert render_structure(form_structure).to_png_bytes() == render_structure(form_structure).to_png_bytes()

    @pytest.mark.unit
    def test_unsupported_type(self, make_structure):
        """Unknown component types fail with the component ID."""
        structure = make_structure([{"id": "v", "type": "video"}])
        with pytest.raises(RenderError, match="failed to render component v: unsupported component type: video") as exc_info:
            render_structure(structure)
        assert exc_info.value.component_id == "v"

    @pytest.mark.unit
    def test_missing_layout_box(self):
        """Drawing a component without a box fails."""
        renderer = Renderer()
        draw = ImageDraw.Draw(Image.new("RGBA", (10, 10), WHITE))
        with pytest.raises(RenderError, match="no layout box found for component ghost"):
            renderer._draw_component(draw, Component(id="ghost", type="box"), {})


class TestComposeSideBySide:
    """Tests for comparison compositing."""

    @pytest.mark.unit
    def test_dimensions_and_placement(self):
        """Images sit left and right of a white gap."""
        left = Image.new("RGBA", (100, 50), BLACK)
        right = Image.new("RGBA", (80, 70), BORDER_GRAY)
        combined = compose_side_by_side(left, right, gap=20)
        assert combined.size == (200, 70)
        assert combined.getpixel((50, 25)) == BLACK
        assert combined.getpixel((110, 10)) == WHITE
        assert combined.getpixel((150, 65)) == BORDER_GRAY
        assert combined.getpixel((50, 60)) == WHITE


# =============================================================================
# Integration Tests (file output)
# =============================================================================


class TestRenderResultOutput:
    """Tests for PNG encoding and saving."""

    @pytest.mark.integration
    def test_save_png(self, tmp_path, form_structure):
        """Saved files reopen with the rendered size."""
        path = tmp_path / "form-phase1-t.png"
        result = render_structure(form_structure)
        result.save(path)
        with Image.open(path) as reopened:
            assert reopened.format == "PNG"
            assert reopened.size == (result.width, result.height)

    @pytest.mark.integration
    def test_png_bytes(self, minimal_structure):
        """PNG bytes carry the PNG signature."""
        assert render_structure(minimal_structure).to_png_bytes().startswith(b"\x89PNG")

    @pytest.mark.integration
    def test_save_failure(self, tmp_path):
        """Unwritable paths raise RenderError."""
        result = RenderResult(image=Image.new("RGBA", (4, 4), WHITE), width=4, height=4)
        with pytest.raises(RenderError, match="failed to save PNG"):
            result.save(tmp_path / "missing" / "out.png")
