"""Phase 1 schema validation.

Enforces the structural constraints of a Phase 1 document on top of the
pydantic model: required envelope fields, enumerated layout and component
types, the black/white/gray palette and the maximum nesting depth. The
validator stops at the first violation and reports it with the path of the
offending component.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from src.model import (
    Component,
    ComponentType,
    LayoutType,
    Phase,
    SizeToken,
    Structure,
    load_structure,
    parse_structure,
)

logger = logging.getLogger(__name__)

# === PHASE 1 CONSTRAINTS ===

PHASE1_PALETTE: tuple[str, ...] = ("#FFFFFF", "#000000", "#E5E5E5", "#737373", "#525252")
MAX_NESTING_DEPTH = 4

VALID_LAYOUT_TYPES: tuple[str, ...] = tuple(t.value for t in LayoutType)
VALID_COMPONENT_TYPES: tuple[str, ...] = tuple(t.value for t in ComponentType)
VALID_SIZE_TOKENS: tuple[str, ...] = tuple(t.value for t in SizeToken)

_PALETTE_TEXT = ", ".join(PHASE1_PALETTE)


# === ERRORS ===


class SchemaValidationError(Exception):
    """First Phase 1 violation found in a document.

    Attributes:
        path: Location of the violation, e.g. "components[0].children[2]".
            Empty for document-level errors.
        component_id: ID of the offending component, if any.
        error_type: Machine-readable classification.
    """

    def __init__(
        self,
        message: str,
        path: str = "",
        component_id: str = "",
        error_type: str = "invalid",
    ):
        super().__init__(message)
        self.path = path
        self.component_id = component_id
        self.error_type = error_type


# === VALIDATION ===


def validate_phase1(structure: Structure) -> None:
    """Validate a decoded document against the Phase 1 constraints.

    Checks, in order: the phase, the required envelope fields (version,
    intent.purpose, layout.type, at least one component), the layout type,
    then every component depth-first.

    Args:
        structure: Decoded document.

    Raises:
        SchemaValidationError: On the first violation.
    """
    if structure.phase != Phase.STRUCTURE.value:
        raise SchemaValidationError(
            f"invalid phase: expected 'structure', got '{structure.phase}'",
            error_type="invalid_phase",
        )

    if not structure.version:
        raise SchemaValidationError("version is required", error_type="missing_field")
    if not structure.intent.purpose:
        raise SchemaValidationError(
            "intent.purpose is required", error_type="missing_field"
        )
    if not structure.layout.type:
        raise SchemaValidationError("layout.type is required", error_type="missing_field")
    if not structure.components:
        raise SchemaValidationError(
            "at least one component is required", error_type="missing_field"
        )

    if structure.layout.type not in VALID_LAYOUT_TYPES:
        raise SchemaValidationError(
            f"invalid layout.type: {structure.layout.type} "
            "(must be stack, grid, or sidebar)",
            error_type="invalid_enum",
        )

    for i, comp in enumerate(structure.components):
        _validate_component(comp, 0, f"component[{i}]: ", f"components[{i}]")

    logger.debug("Phase 1 validation passed for version %s", structure.version)


def _validate_component(comp: Component, depth: int, prefix: str, path: str) -> None:
    """Validate one component, then its children one level deeper."""

    def fail(message: str, error_type: str) -> SchemaValidationError:
        return SchemaValidationError(
            prefix + message, path=path, component_id=comp.id, error_type=error_type
        )

    if depth > MAX_NESTING_DEPTH:
        raise fail(
            f"component '{comp.id}': max nesting depth ({MAX_NESTING_DEPTH}) exceeded",
            "max_depth",
        )

    if not comp.id:
        raise fail("component ID is required", "missing_field")
    if not comp.type:
        raise fail(f"component '{comp.id}': type is required", "missing_field")

    if comp.type not in VALID_COMPONENT_TYPES:
        raise fail(
            f"component '{comp.id}': invalid type '{comp.type}' "
            "(must be box, text, input, button, or image)",
            "invalid_enum",
        )

    if comp.size and comp.size not in VALID_SIZE_TOKENS:
        raise fail(
            f"component '{comp.id}': invalid size '{comp.size}' "
            f"(must be one of {', '.join(VALID_SIZE_TOKENS)})",
            "invalid_enum",
        )

    if comp.color and comp.color not in PHASE1_PALETTE:
        raise fail(
            f"component '{comp.id}': invalid color '{comp.color}' "
            f"(Phase 1 only allows {_PALETTE_TEXT})",
            "invalid_color",
        )

    background = comp.layout.background
    if background and background not in PHASE1_PALETTE:
        raise fail(
            f"component '{comp.id}': invalid background color '{background}' "
            f"(Phase 1 only allows {_PALETTE_TEXT})",
            "invalid_color",
        )

    for j, child in enumerate(comp.children):
        _validate_component(
            child,
            depth + 1,
            f"{prefix}component '{comp.id}'.children[{j}]: ",
            f"{path}.children[{j}]",
        )


def is_valid_phase1(structure: Structure) -> bool:
    """Check whether a document satisfies the Phase 1 constraints."""
    try:
        validate_phase1(structure)
    except SchemaValidationError:
        return False
    return True


def parse_and_validate_structure(data: str | bytes) -> Structure:
    """Decode a JSON document and validate it as Phase 1.

    Raises:
        StructureParseError: If the JSON cannot be decoded.
        SchemaValidationError: If a Phase 1 constraint is violated; the
            message is prefixed with "validation failed: ".
    """
    structure = parse_structure(data)
    _revalidate(structure)
    return structure


def load_and_validate_structure(path: str | Path) -> Structure:
    """Read a structure file and validate it as Phase 1."""
    structure = load_structure(path)
    _revalidate(structure)
    return structure


def _revalidate(structure: Structure) -> None:
    try:
        validate_phase1(structure)
    except SchemaValidationError as e:
        raise SchemaValidationError(
            f"validation failed: {e}",
            path=e.path,
            component_id=e.component_id,
            error_type=e.error_type,
        ) from e


# === SCHEMA EXPORT ===


def export_json_schema() -> dict[str, Any]:
    """Export the JSON Schema of a structure document.

    Returns:
        JSON Schema dict suitable for editor tooling or document generators.
    """
    return Structure.model_json_schema()


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
    # Schema export
    "export_json_schema",
]
