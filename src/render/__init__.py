"""Render module for Phase 1 wireframe rasterisation.

Provides a Pillow-based renderer that turns a laid-out structure into a
black-and-white RGBA mockup, plus helpers for output naming and
side-by-side comparison images.
"""

from .lib import (
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

__all__ = [
    "BLACK",
    "BORDER_GRAY",
    "TEXT_GRAY",
    "WHITE",
    "Renderer",
    "RenderError",
    "RenderOptions",
    "RenderResult",
    "compose_side_by_side",
    "default_output_name",
    "parse_color",
    "render_structure",
]
