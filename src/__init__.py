"""prism: Phase render and inspection for structural mockups."""

from src.model import Structure, load_structure, parse_structure
from src.render import RenderOptions, render_structure
from src.report import run_rules
from src.schema import SchemaValidationError, is_valid_phase1, validate_phase1
from src.suggest import generate_suggestions

__all__ = [
    # Model
    "Structure",
    "parse_structure",
    "load_structure",
    # Schema
    "validate_phase1",
    "is_valid_phase1",
    "SchemaValidationError",
    # Rendering
    "RenderOptions",
    "render_structure",
    # Review
    "run_rules",
    "generate_suggestions",
]
