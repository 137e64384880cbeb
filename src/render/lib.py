"""Pillow raster renderer for Phase 1 structures.

Draws the laid-out component tree onto a white RGBA canvas: box
backgrounds and borders, text with the built-in bitmap face, filled
buttons, outlined inputs and image placeholders. Optional overlays draw an
8pt layout grid and component ID annotations.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from src.config import get_viewport_width
from src.layout import LayoutBox, LayoutEngine, LayoutError, content_height
from src.model import Component, ComponentType, Structure

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

RGBA = tuple[int, int, int, int]

WHITE: RGBA = (255, 255, 255, 255)
BLACK: RGBA = (0, 0, 0, 255)
BORDER_GRAY: RGBA = (229, 229, 229, 255)  # #E5E5E5
TEXT_GRAY: RGBA = (115, 115, 115, 255)  # #737373
ANNOTATION_GRAY: RGBA = (82, 82, 82, 255)  # #525252

MIN_CANVAS_HEIGHT = 400
GRID_STEP = 64
FONT_SIZE = 13
FONT_ASCENT = 11

TEXT_BASELINE = 14
LINE_HEIGHT = 16
BUTTON_TEXT_OFFSET = (10, 25)
INPUT_TEXT_OFFSET = (8, 22)
IMAGE_LABEL = "IMAGE"
IMAGE_LABEL_SHIFT = 20


# =============================================================================
# Types
# =============================================================================


class RenderError(Exception):
    """Error during rendering."""

    def __init__(self, message: str, component_id: str | None = None):
        super().__init__(message)
        self.component_id = component_id


@dataclass
class RenderOptions:
    """Configuration for rasterising a structure.

    Attributes:
        width: Canvas width in unscaled pixels.
        height: Canvas height in unscaled pixels (0 = auto from layout).
        scale: Integer scale factor for high-DPI output (1 to 3).
        viewport: Viewport preset name, recorded for reporting.
        annotations: Draw component IDs over each box.
        grid: Draw an 8pt grid overlay beneath the components.
    """

    width: int = 1200
    height: int = 0
    scale: int = 1
    viewport: str = "desktop"
    annotations: bool = False
    grid: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not 1 <= self.scale <= 3:
            raise ValueError(f"Scale must be between 1 and 3, got {self.scale}")
        if self.width < 1:
            raise ValueError(f"Width must be positive, got {self.width}")
        if self.height < 0:
            raise ValueError(f"Height must not be negative, got {self.height}")

    @classmethod
    def for_viewport(cls, viewport: str, width: int = 1200, **kwargs) -> RenderOptions:
        """Build options for a viewport preset.

        Mobile and tablet replace the width with their preset; desktop keeps
        the requested width.
        """
        return cls(width=get_viewport_width(viewport, width), viewport=viewport, **kwargs)


@dataclass
class RenderResult:
    """Rendered canvas and the layout it was drawn from.

    Attributes:
        image: RGBA canvas.
        width: Canvas width in pixels (scaled).
        height: Canvas height in pixels (scaled).
        boxes: Scaled layout map used for drawing.
    """

    image: Image.Image
    width: int
    height: int
    boxes: dict[str, LayoutBox] = field(default_factory=dict)

    def to_png_bytes(self) -> bytes:
        """Encode the canvas as PNG."""
        buffer = io.BytesIO()
        self.image.save(buffer, format="PNG")
        return buffer.getvalue()

    def save(self, path: str | Path) -> None:
        """Write the canvas as a PNG file.

        Raises:
            RenderError: If the file cannot be written.
        """
        try:
            self.image.save(path, format="PNG")
        except OSError as e:
            raise RenderError(f"failed to save PNG: {e}") from e
        logger.debug("Wrote %dx%d PNG to %s", self.width, self.height, path)


# =============================================================================
# Helpers
# =============================================================================


def parse_color(value: str) -> RGBA:
    """Convert '#RRGGBB' to an opaque RGBA tuple; anything else is black."""
    if len(value) != 7 or not value.startswith("#"):
        return BLACK
    try:
        return (int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16), 255)
    except ValueError:
        return BLACK


def default_output_name(project_path: str | Path, version: str, kind: str = "phase1") -> str:
    """Default PNG file name: '{project}-{kind}-{version}.png'.

    The project base name falls back to 'mockup' for '.' or '/'.
    """
    base = Path(project_path).name or "mockup"
    return f"{base}-{kind}-{version}.png"


def compose_side_by_side(left: Image.Image, right: Image.Image, gap: int = 20) -> Image.Image:
    """Paste two images next to each other on a white canvas."""
    width = left.width + gap + right.width
    height = max(left.height, right.height)
    canvas = Image.new("RGBA", (width, height), WHITE)
    canvas.paste(left, (0, 0))
    canvas.paste(right, (left.width + gap, 0))
    return canvas


# =============================================================================
# Renderer
# =============================================================================


class Renderer:
    """Rasterises structures with a fixed set of options.

    Example:
        >>> renderer = Renderer(RenderOptions.for_viewport("mobile", scale=2))
        >>> result = renderer.render(structure)
        >>> result.save("dashboard-phase1-v3.png")
    """

    def __init__(self, options: RenderOptions | None = None):
        self.options = options or RenderOptions()
        self._font = ImageFont.load_default_imagefont()

    def render(self, structure: Structure) -> RenderResult:
        """Lay out and draw a structure.

        Raises:
            RenderError: If the layout cannot be computed, a component has
                no layout box, or a component type is not drawable.
        """
        opts = self.options
        scale = opts.scale
        try:
            boxes = LayoutEngine(scale).calculate(structure, opts.width)
        except LayoutError as e:
            raise RenderError(f"layout calculation failed: {e}", e.component_id) from e

        width = opts.width * scale
        if opts.height > 0:
            height = opts.height * scale
        else:
            natural = content_height(boxes) + 2 * structure.layout.padding * scale
            height = max(MIN_CANVAS_HEIGHT * scale, natural)

        image = Image.new("RGBA", (width, height), WHITE)
        draw = ImageDraw.Draw(image)

        if opts.grid:
            self._draw_grid(draw, width, height)

        for comp in structure.components:
            try:
                self._draw_component(draw, comp, boxes)
            except RenderError as e:
                raise RenderError(f"failed to render component {comp.id}: {e}", e.component_id) from e

        if opts.annotations:
            self._draw_annotations(draw, structure.components, boxes)

        logger.debug("Rendered %s at %dx%d", structure.version or "structure", width, height)
        return RenderResult(image=image, width=width, height=height, boxes=boxes)

    # -------------------------------------------------------------------------
    # Components
    # -------------------------------------------------------------------------

    def _draw_component(
        self, draw: ImageDraw.ImageDraw, comp: Component, boxes: dict[str, LayoutBox]
    ) -> None:
        box = boxes.get(comp.id)
        if box is None:
            raise RenderError(f"no layout box found for component {comp.id}", comp.id)

        if comp.type == ComponentType.BOX:
            self._draw_box(draw, comp, box)
            for child in comp.children:
                self._draw_component(draw, child, boxes)
        elif comp.type == ComponentType.TEXT:
            self._draw_text(draw, comp, box)
        elif comp.type == ComponentType.BUTTON:
            self._draw_button(draw, comp, box)
        elif comp.type == ComponentType.INPUT:
            self._draw_input(draw, comp, box)
        elif comp.type == ComponentType.IMAGE:
            self._draw_image(draw, box)
        else:
            raise RenderError(f"unsupported component type: {comp.type}", comp.id)

    def _draw_box(self, draw: ImageDraw.ImageDraw, comp: Component, box: LayoutBox) -> None:
        layout = comp.layout
        if layout.background:
            _fill(draw, box, parse_color(layout.background))
        if layout.border:
            _outline(draw, box, BORDER_GRAY)
        if layout.border_bottom and box.width > 0:
            y = box.bottom - 1
            draw.line([(box.x, y), (box.right - 1, y)], fill=BORDER_GRAY)
        if layout.border_right and box.height > 0:
            x = box.right - 1
            draw.line([(x, box.y), (x, box.bottom - 1)], fill=BORDER_GRAY)

    def _draw_text(self, draw: ImageDraw.ImageDraw, comp: Component, box: LayoutBox) -> None:
        if not comp.content:
            return
        color = parse_color(comp.color) if comp.color else BLACK
        scale = self.options.scale
        for i, line in enumerate(comp.content.split("\n")):
            if not line:
                continue
            baseline = box.y + (TEXT_BASELINE + i * LINE_HEIGHT) * scale
            self._text(draw, box.x, baseline, line, color)

    def _draw_button(self, draw: ImageDraw.ImageDraw, comp: Component, box: LayoutBox) -> None:
        background = comp.layout.background
        _fill(draw, box, parse_color(background) if background else BLACK)
        if comp.content:
            color = parse_color(comp.color) if comp.color else WHITE
            dx, dy = BUTTON_TEXT_OFFSET
            scale = self.options.scale
            self._text(draw, box.x + dx * scale, box.y + dy * scale, comp.content, color)

    def _draw_input(self, draw: ImageDraw.ImageDraw, comp: Component, box: LayoutBox) -> None:
        _outline(draw, box, BORDER_GRAY)
        if comp.content:
            dx, dy = INPUT_TEXT_OFFSET
            scale = self.options.scale
            self._text(draw, box.x + dx * scale, box.y + dy * scale, comp.content, TEXT_GRAY)

    def _draw_image(self, draw: ImageDraw.ImageDraw, box: LayoutBox) -> None:
        _fill(draw, box, BORDER_GRAY)
        x = box.x + box.width // 2 - IMAGE_LABEL_SHIFT * self.options.scale
        self._text(draw, x, box.y + box.height // 2, IMAGE_LABEL, TEXT_GRAY)

    def _text(self, draw: ImageDraw.ImageDraw, x: int, baseline: int, text: str, color: RGBA) -> None:
        self._stamp(draw, x, baseline - FONT_ASCENT * self.options.scale, text, color)

    def _stamp(self, draw: ImageDraw.ImageDraw, x: int, top: int, text: str, color: RGBA) -> None:
        """Draw one line of bitmap text, enlarged pixel for pixel by the scale."""
        scale = self.options.scale
        if scale == 1:
            draw.text((x, top), text, fill=color, font=self._font)
            return
        _, _, right, bottom = self._font.getbbox(text)
        if right <= 0 or bottom <= 0:
            return
        mask = Image.new("L", (right, bottom), 0)
        ImageDraw.Draw(mask).text((0, 0), text, fill=255, font=self._font)
        mask = mask.resize((right * scale, bottom * scale), Image.Resampling.NEAREST)
        draw.bitmap((x, top), mask, fill=color)

    # -------------------------------------------------------------------------
    # Overlays
    # -------------------------------------------------------------------------

    def _draw_grid(self, draw: ImageDraw.ImageDraw, width: int, height: int) -> None:
        step = GRID_STEP * self.options.scale
        for x in range(step, width, step):
            draw.line([(x, 0), (x, height - 1)], fill=BORDER_GRAY)
        for y in range(step, height, step):
            draw.line([(0, y), (width - 1, y)], fill=BORDER_GRAY)

    def _draw_annotations(
        self,
        draw: ImageDraw.ImageDraw,
        components: list[Component],
        boxes: dict[str, LayoutBox],
    ) -> None:
        scale = self.options.scale
        pad = 2 * scale
        for comp in components:
            box = boxes.get(comp.id)
            if box is not None:
                label_w = int(draw.textlength(comp.id, font=self._font)) * scale
                label = LayoutBox(box.x, box.y, label_w + 2 * pad, (FONT_SIZE + 2) * scale + 2 * pad)
                _fill(draw, label, WHITE)
                _outline(draw, label, ANNOTATION_GRAY)
                self._stamp(draw, box.x + pad, box.y + pad, comp.id, TEXT_GRAY)
            self._draw_annotations(draw, comp.children, boxes)


def _fill(draw: ImageDraw.ImageDraw, box: LayoutBox, color: RGBA) -> None:
    if box.width > 0 and box.height > 0:
        draw.rectangle([box.x, box.y, box.right - 1, box.bottom - 1], fill=color)


def _outline(draw: ImageDraw.ImageDraw, box: LayoutBox, color: RGBA) -> None:
    if box.width > 0 and box.height > 0:
        draw.rectangle([box.x, box.y, box.right - 1, box.bottom - 1], outline=color)


def render_structure(structure: Structure, options: RenderOptions | None = None) -> RenderResult:
    """Convenience wrapper around Renderer.render."""
    return Renderer(options).render(structure)


__all__ = [
    # Types
    "RenderError",
    "RenderOptions",
    "RenderResult",
    "Renderer",
    # Helpers
    "parse_color",
    "default_output_name",
    "compose_side_by_side",
    "render_structure",
    # Colors
    "WHITE",
    "BLACK",
    "BORDER_GRAY",
    "TEXT_GRAY",
]
