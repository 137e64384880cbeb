"""Phase 1 structure document model.

Example:
    >>> from src.model import parse_structure, walk_components
    >>> structure = parse_structure(open("phase1-structure/v1.json").read())
    >>> for comp, depth, parent in walk_components(structure.components):
    ...     print("  " * depth + comp.id)
"""

from .lib import (
    INTERACTIVE_TYPES,
    Accessibility,
    Breakpoint,
    Component,
    ComponentLayout,
    ComponentState,
    ComponentType,
    Direction,
    Display,
    Intent,
    Layout,
    LayoutType,
    Phase,
    Responsive,
    SizeToken,
    Skeleton,
    SkeletonElement,
    SkeletonType,
    Structure,
    StructureParseError,
    ValidationInfo,
    count_components,
    find_component,
    iter_components,
    load_structure,
    max_depth,
    parse_structure,
    walk_components,
)

__all__ = [
    # Enums
    "Phase",
    "ComponentType",
    "LayoutType",
    "Display",
    "Direction",
    "SizeToken",
    "ComponentState",
    "SkeletonType",
    "INTERACTIVE_TYPES",
    # Errors
    "StructureParseError",
    # Models
    "Intent",
    "Layout",
    "ComponentLayout",
    "SkeletonElement",
    "Skeleton",
    "Component",
    "Breakpoint",
    "Responsive",
    "Accessibility",
    "ValidationInfo",
    "Structure",
    # Parsing
    "parse_structure",
    "load_structure",
    # Traversal
    "walk_components",
    "iter_components",
    "count_components",
    "max_depth",
    "find_component",
]
