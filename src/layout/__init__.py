"""Layout module - positions Phase 1 components as pixel boxes.

Example usage:
    >>> from src.layout import LayoutEngine
    >>> boxes = LayoutEngine(scale=1).calculate(structure, 1200)
    >>> boxes["header"]
    LayoutBox(x=0, y=0, width=1200, height=100)
"""

from .lib import (
    BUTTON_HEIGHT,
    BUTTON_WIDTH,
    EMPTY_BOX_HEIGHT,
    GLYPH_WIDTHS,
    IMAGE_HEIGHT,
    INPUT_HEIGHT,
    MAX_GRID_COLUMNS,
    GridTrack,
    LayoutBox,
    LayoutEngine,
    LayoutError,
    calculate_layout,
    content_height,
    estimate_text_width,
    parse_grid_template,
    parse_min_height,
    resolve_track_widths,
    text_height,
    text_line_count,
)

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
