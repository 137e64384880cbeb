"""Schema module - Phase 1 constraints for structure documents.

This module provides:
- The Phase 1 palette, component and layout enumerations
- First-error validation with component paths
- Parse-and-validate helpers for JSON text and files
- JSON Schema export of the document model

Example usage:
    >>> from src.schema import load_and_validate_structure
    >>> structure = load_and_validate_structure("phase1-structure/v1.json")
"""

from .lib import (
    MAX_NESTING_DEPTH,
    PHASE1_PALETTE,
    VALID_COMPONENT_TYPES,
    VALID_LAYOUT_TYPES,
    VALID_SIZE_TOKENS,
    SchemaValidationError,
    export_json_schema,
    is_valid_phase1,
    load_and_validate_structure,
    parse_and_validate_structure,
    validate_phase1,
)

__all__ = [
    # Constants
    "PHASE1_PALETTE",
    "MAX_NESTING_DEPTH",
    "VALID_LAYOUT_TYPES",
    "VALID_COMPONENT_TYPES",
    "VALID_SIZE_TOKENS",
    # Errors
    "SchemaValidationError",
    # Validation
    "validate_phase1",
    "is_valid_phase1",
    "parse_and_validate_structure",
    "load_and_validate_structure",
    # Export
    "export_json_schema",
]
