"""Layout engine for Phase 1 structures.

Converts the declarative component tree into absolutely positioned boxes.
Supports vertical stacks, horizontal flex with grow factors and
space-between, and CSS-style grid track lists.

The engine works in unscaled pixels; the scale factor is applied to every
box once the tree is laid out, so a layout at scale k is exactly k times the
layout at scale 1.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from src.model import Component, ComponentType, Direction, Display, Structure

logger = logging.getLogger(__name__)

# === INTRINSIC SIZES ===

BUTTON_WIDTH = 120
BUTTON_HEIGHT = 44
INPUT_HEIGHT = 40
IMAGE_HEIGHT = 150
EMPTY_BOX_HEIGHT = 100

TEXT_TOP_OFFSET = 14
TEXT_LINE_HEIGHT = 16
TEXT_BOTTOM_PADDING = 8

DEFAULT_VERTICAL_GAP = 8
DEFAULT_GRID_COLUMNS = 2
MAX_GRID_COLUMNS = 1000

# Approximate glyph advance per size token, used to size text under
# space-between distribution only.
GLYPH_WIDTHS: dict[str, int] = {
    "xs": 5,
    "sm": 6,
    "base": 7,
    "md": 8,
    "lg": 9,
    "xl": 11,
    "2xl": 14,
    "3xl": 18,
    "4xl": 22,
}
DEFAULT_GLYPH_WIDTH = 7

_REPEAT_RE = re.compile(r"^repeat\(\s*(\d+)\s*,\s*(.+?)\s*\)$")
_TRACK_RE = re.compile(r"^(\d+(?:\.\d+)?)(px|fr)$")
_MIN_HEIGHT_RE = re.compile(r"^\s*(\d+)\s*(?:px)?\s*$")


# === ERRORS ===


class LayoutError(Exception):
    """Raised when the layout engine is given input it cannot lay out."""

    def __init__(self, message: str, component_id: str | None = None):
        super().__init__(message)
        self.component_id = component_id


# === TYPES ===


@dataclass(frozen=True)
class LayoutBox:
    """Axis-aligned rectangle in integer pixels."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def scaled(self, factor: int) -> LayoutBox:
        """Return the box with every coordinate multiplied by factor."""
        return LayoutBox(
            self.x * factor, self.y * factor, self.width * factor, self.height * factor
        )


@dataclass(frozen=True)
class GridTrack:
    """One column of a grid template: a fixed pixel width or a fraction."""

    value: float
    unit: str  # "px" or "fr"

    @property
    def is_fixed(self) -> bool:
        return self.unit == "px"


# === HELPERS ===


def parse_grid_template(template: str) -> list[GridTrack]:
    """Parse a grid-template-columns value into tracks.

    ``repeat(N, X)`` expands to N copies of X, capped at MAX_GRID_COLUMNS;
    otherwise tokens are split on whitespace. Tokens that are neither
    ``<k>px`` nor ``<k>fr`` (``auto``, ``minmax(...)``) count as ``1fr``.

    Returns:
        Tracks in column order; empty for a blank or malformed template.
    """
    template = template.strip()
    if not template:
        return []

    if template.startswith("repeat"):
        match = _REPEAT_RE.match(template)
        if not match:
            return []
        count = min(int(match.group(1)), MAX_GRID_COLUMNS)
        return [_parse_track(match.group(2))] * count

    return [_parse_track(token) for token in template.split()]


def _parse_track(token: str) -> GridTrack:
    match = _TRACK_RE.match(token.strip())
    if not match:
        return GridTrack(1.0, "fr")
    return GridTrack(float(match.group(1)), match.group(2))


def resolve_track_widths(tracks: list[GridTrack], content_width: int, gap: int) -> list[int]:
    """Resolve grid tracks to pixel widths.

    Fixed tracks keep their size; the remaining width after fixed tracks and
    gaps is shared among fraction tracks in proportion, rounded down.
    """
    if not tracks:
        return []
    fixed = sum(int(t.value) for t in tracks if t.is_fixed)
    total_fr = sum(t.value for t in tracks if not t.is_fixed)
    available = max(0, content_width - fixed - gap * (len(tracks) - 1))

    widths = []
    for track in tracks:
        if track.is_fixed:
            widths.append(int(track.value))
        elif total_fr > 0:
            widths.append(int(available * track.value // total_fr))
        else:
            widths.append(0)
    return widths


def text_line_count(content: str) -> int:
    """Number of lines in text content (at least one)."""
    return max(1, content.count("\n") + 1)


def text_height(content: str) -> int:
    """Unscaled height of a text block."""
    return TEXT_TOP_OFFSET + text_line_count(content) * TEXT_LINE_HEIGHT + TEXT_BOTTOM_PADDING


def estimate_text_width(content: str, size: str = "") -> int:
    """Estimate the rendered width of text from its longest line."""
    glyph = GLYPH_WIDTHS.get(size, DEFAULT_GLYPH_WIDTH)
    longest = max((len(line) for line in content.split("\n")), default=0)
    return glyph * longest


def parse_min_height(value: str) -> int:
    """Parse a min_height such as '400px' or '400'; anything else is 0."""
    match = _MIN_HEIGHT_RE.match(value) if value else None
    return int(match.group(1)) if match else 0


def content_height(boxes: dict[str, LayoutBox]) -> int:
    """Lowest bottom edge across a layout map (0 when empty)."""
    return max((box.bottom for box in boxes.values()), default=0)


# === ENGINE ===


class LayoutEngine:
    """Computes a box for every component of a structure.

    Example:
        >>> engine = LayoutEngine(scale=2)
        >>> boxes = engine.calculate(structure, 1200)
        >>> boxes["header"].width
        2400
    """

    def __init__(self, scale: int = 1):
        if scale < 1:
            raise LayoutError(f"invalid scale factor: {scale}")
        self.scale = scale

    def calculate(self, structure: Structure, width: int) -> dict[str, LayoutBox]:
        """Lay out every component for a viewport width.

        Args:
            structure: Document to lay out.
            width: Viewport width in unscaled pixels.

        Returns:
            Map of component ID to scaled LayoutBox.
        """
        boxes: dict[str, LayoutBox] = {}
        cursor = 0
        for comp in structure.components:
            box = self._place(comp, 0, cursor, width, boxes)
            cursor += box.height + structure.layout.spacing

        logger.debug(
            "Laid out %d components at width %d (scale %d)", len(boxes), width, self.scale
        )
        if self.scale == 1:
            return boxes
        return {cid: box.scaled(self.scale) for cid, box in boxes.items()}

    # --- sizing ---

    def _intrinsic_width(self, comp: Component, available: int) -> int:
        if comp.layout.width > 0:
            width = comp.layout.width
        elif comp.type == ComponentType.BUTTON:
            width = BUTTON_WIDTH
        else:
            width = available
        if comp.layout.max_width > 0:
            width = min(width, comp.layout.max_width)
        return max(0, width)

    def _leaf_height(self, comp: Component) -> int:
        if comp.type == ComponentType.TEXT:
            return text_height(comp.content)
        if comp.type == ComponentType.BUTTON:
            return BUTTON_HEIGHT
        if comp.type == ComponentType.INPUT:
            return INPUT_HEIGHT
        if comp.type == ComponentType.IMAGE:
            return IMAGE_HEIGHT
        return EMPTY_BOX_HEIGHT

    def _place(
        self,
        comp: Component,
        x: int,
        y: int,
        available: int,
        boxes: dict[str, LayoutBox],
        width: int | None = None,
    ) -> LayoutBox:
        """Size and position a component, then lay out its subtree."""
        if width is None:
            width = self._intrinsic_width(comp, available)

        if comp.children:
            padding = comp.layout.padding
            content_w = max(0, width - 2 * padding)
            extent = self._layout_children(comp, x + padding, y + padding, content_w, boxes)
            height = extent + 2 * padding
        else:
            height = self._leaf_height(comp)

        if comp.layout.height > 0:
            height = comp.layout.height
        height = max(height, parse_min_height(comp.layout.min_height))

        box = LayoutBox(x, y, width, height)
        boxes[comp.id] = box
        return box

    # --- children ---

    def _layout_children(
        self,
        comp: Component,
        x: int,
        y: int,
        content_w: int,
        boxes: dict[str, LayoutBox],
    ) -> int:
        """Lay out children inside the content area; returns the used height."""
        display = comp.layout.display
        horizontal = comp.layout.direction == Direction.HORIZONTAL

        if display == Display.GRID:
            return self._layout_grid(comp, x, y, content_w, boxes)
        if display == Display.FLEX and horizontal:
            if comp.layout.justify_content == "space-between":
                return self._layout_space_between(comp, x, y, content_w, boxes)
            return self._layout_flex_row(comp, x, y, content_w, boxes)

        gap = comp.layout.gap
        if display == Display.FLEX and gap == 0:
            gap = DEFAULT_VERTICAL_GAP
        return self._layout_stack(comp, x, y, content_w, gap, boxes)

    def _layout_stack(
        self,
        comp: Component,
        x: int,
        y: int,
        content_w: int,
        gap: int,
        boxes: dict[str, LayoutBox],
    ) -> int:
        cursor = y
        for i, child in enumerate(comp.children):
            if i > 0:
                cursor += gap
            box = self._place(child, x, cursor, content_w, boxes)
            cursor = box.bottom
        return cursor - y

    def _layout_flex_row(
        self,
        comp: Component,
        x: int,
        y: int,
        content_w: int,
        boxes: dict[str, LayoutBox],
    ) -> int:
        children = comp.children
        gap = comp.layout.gap
        fixed = sum(c.layout.width for c in children if c.layout.width > 0)
        total_flex = sum(c.layout.flex for c in children if c.layout.width <= 0 and c.layout.flex > 0)
        flex_space = max(0, content_w - fixed - gap * (len(children) - 1))

        cursor = x
        row_height = 0
        for i, child in enumerate(children):
            if i > 0:
                cursor += gap
            width = None
            if child.layout.width <= 0 and child.layout.flex > 0:
                width = flex_space * child.layout.flex // total_flex
            box = self._place(child, cursor, y, content_w, boxes, width=width)
            cursor = box.right
            row_height = max(row_height, box.height)
        return row_height

    def _layout_space_between(
        self,
        comp: Component,
        x: int,
        y: int,
        content_w: int,
        boxes: dict[str, LayoutBox],
    ) -> int:
        children = comp.children
        widths = []
        for child in children:
            if child.type == ComponentType.TEXT and child.layout.width <= 0:
                widths.append(min(content_w, estimate_text_width(child.content, child.size)))
            else:
                widths.append(self._intrinsic_width(child, content_w))

        slack = max(0, content_w - sum(widths))
        spacing = slack // (len(children) - 1) if len(children) > 1 else 0

        cursor = x
        row_height = 0
        for child, width in zip(children, widths):
            box = self._place(child, cursor, y, content_w, boxes, width=width)
            cursor = box.right + spacing
            row_height = max(row_height, box.height)
        return row_height

    def _layout_grid(
        self,
        comp: Component,
        x: int,
        y: int,
        content_w: int,
        boxes: dict[str, LayoutBox],
    ) -> int:
        gap = comp.layout.gap
        tracks = parse_grid_template(comp.layout.grid_template_columns)
        if not tracks:
            tracks = [GridTrack(1.0, "fr")] * DEFAULT_GRID_COLUMNS
        widths = resolve_track_widths(tracks, content_w, gap)
        offsets = []
        offset = x
        for width in widths:
            offsets.append(offset)
            offset += width + gap

        cursor = y
        row_height = 0
        for i, child in enumerate(comp.children):
            col = i % len(widths)
            if col == 0 and i > 0:
                cursor += row_height + gap
                row_height = 0
            box = self._place(child, offsets[col], cursor, widths[col], boxes)
            row_height = max(row_height, box.height)
        return cursor + row_height - y


def calculate_layout(structure: Structure, width: int, scale: int = 1) -> dict[str, LayoutBox]:
    """Convenience wrapper around LayoutEngine.calculate."""
    return LayoutEngine(scale).calculate(structure, width)


__all__ = [
    # Constants
    "BUTTON_WIDTH",
    "BUTTON_HEIGHT",
    "INPUT_HEIGHT",
    "IMAGE_HEIGHT",
    "EMPTY_BOX_HEIGHT",
    "GLYPH_WIDTHS",
    "MAX_GRID_COLUMNS",
    # Errors
    "LayoutError",
    # Types
    "LayoutBox",
    "GridTrack",
    # Helpers
    "parse_grid_template",
    "resolve_track_widths",
    "text_line_count",
    "text_height",
    "estimate_text_width",
    "parse_min_height",
    "content_height",
    # Engine
    "LayoutEngine",
    "calculate_layout",
]
