"""Phase 1 structure document model.

Pydantic models for the JSON documents produced during the structure phase
of a design review: the root Structure, its intent and layout metadata, and
the component tree. Every field has a default so partially filled documents
still load; Phase 1 constraints are enforced separately by src.schema.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Iterator

from pydantic import BaseModel, Field, ValidationError, field_validator

# =============================================================================
# Enums
# =============================================================================


class Phase(str, Enum):
    """Design process phase a document belongs to."""

    STRUCTURE = "structure"
    DESIGN = "design"


class ComponentType(str, Enum):
    """The five component kinds a Phase 1 wireframe may contain."""

    BOX = "box"
    TEXT = "text"
    INPUT = "input"
    BUTTON = "button"
    IMAGE = "image"


class LayoutType(str, Enum):
    """Top-level page layout strategy."""

    STACK = "stack"
    GRID = "grid"
    SIDEBAR = "sidebar"


class Display(str, Enum):
    """Container display mode for child placement."""

    FLEX = "flex"
    GRID = "grid"
    BLOCK = "block"


class Direction(str, Enum):
    """Main axis of a flex container."""

    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


class SizeToken(str, Enum):
    """Text size tokens, smallest to largest."""

    XS = "xs"
    SM = "sm"
    BASE = "base"
    MD = "md"
    LG = "lg"
    XL = "xl"
    XL2 = "2xl"
    XL3 = "3xl"
    XL4 = "4xl"


class ComponentState(str, Enum):
    """Data state a component can be rendered in."""

    DEFAULT = "default"
    LOADING = "loading"
    ERROR = "error"
    EMPTY = "empty"


class SkeletonType(str, Enum):
    """Placeholder shapes used by skeleton screens."""

    CIRCLE = "circle"
    TEXT = "text"
    RECT = "rect"


INTERACTIVE_TYPES: tuple[str, ...] = (ComponentType.BUTTON.value, ComponentType.INPUT.value)


# =============================================================================
# Errors
# =============================================================================


class StructureParseError(Exception):
    """Raised when a document is not valid JSON or does not fit the model."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


# =============================================================================
# Models
# =============================================================================


class Intent(BaseModel):
    """What the screen is for and who uses it."""

    purpose: str = Field(default="", description="One-line purpose of the screen")
    primary_action: str = Field(
        default="",
        description="ID of the component performing the main user action",
    )
    user_context: str = Field(default="", description="Who uses the screen and when")
    key_interactions: list[str] = Field(
        default_factory=list,
        description="Ordered list of the most important interactions",
    )

    model_config = {"frozen": True}

    @field_validator("key_interactions", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class Layout(BaseModel):
    """Top-level page layout configuration."""

    type: str = Field(default="", description="stack, grid or sidebar")
    direction: str = Field(default="", description="vertical or horizontal")
    spacing: int = Field(default=0, description="Spacing between root components (px)")
    max_width: int = Field(default=0, description="Maximum page width, 0 = unbounded (px)")
    padding: int = Field(default=0, description="Page padding (px)")

    model_config = {"frozen": True}


class ComponentLayout(BaseModel):
    """Per-component layout properties, a small CSS-like subset."""

    display: str = Field(default="", description="flex, grid or block")
    direction: str = Field(default="", description="vertical or horizontal")
    padding: int = Field(default=0, description="Padding on all sides (px)")
    background: str = Field(default="", description="Background hex color")
    border: str = Field(default="", description="Border on all four sides")
    border_bottom: str = Field(default="", description="Bottom border")
    border_right: str = Field(default="", description="Right border")
    gap: int = Field(default=0, description="Gap between children (px)")
    grid_template_columns: str = Field(
        default="",
        description="Column track list, e.g. 'repeat(4, 1fr)' or '300px 1fr'",
    )
    width: int = Field(default=0, description="Explicit width (px)")
    height: int = Field(default=0, description="Explicit height (px)")
    min_height: str = Field(default="", description="Minimum height, e.g. '400px'")
    max_width: int = Field(default=0, description="Maximum width (px)")
    flex: int = Field(default=0, description="Flex grow factor")
    justify_content: str = Field(
        default="", description="flex-start, center or space-between"
    )
    align_items: str = Field(default="", description="Cross-axis alignment")
    margin_bottom: int = Field(default=0, description="Bottom margin (px)")

    model_config = {"frozen": True}


class SkeletonElement(BaseModel):
    """One placeholder shape of a skeleton screen."""

    type: str = Field(default="", description="circle, text or rect")
    width: str = Field(default="", description="Width such as '60%' or '120px'")
    height: str = Field(default="", description="Height such as '16px'")
    size: int = Field(default=0, description="Diameter for circles (px)")

    model_config = {"frozen": True}


class Skeleton(BaseModel):
    """Skeleton placeholder configuration for loading states."""

    elements: list[SkeletonElement] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("elements", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v


class Component(BaseModel):
    """A node of the component tree.

    Attributes:
        id: Identifier, unique within the document.
        type: One of box, text, input, button, image.
        role: Free-form semantic role (header, navigation, card, modal, ...).
        state: Data state (loading, error, empty, default or empty string).
        layout: Layout properties.
        content: Text content, button label or input placeholder.
        size: Text size token.
        weight: normal or bold.
        color: Foreground hex color.
        children: Child components (boxes only).
        skeleton: Skeleton configuration for the loading state.
    """

    id: str = ""
    type: str = ""
    role: str = ""
    state: str = ""
    layout: ComponentLayout = Field(default_factory=ComponentLayout)
    content: str = ""
    size: str = ""
    weight: str = ""
    color: str = ""
    children: list[Component] = Field(default_factory=list)
    skeleton: Skeleton | None = None

    model_config = {"frozen": True}

    @field_validator("children", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("layout", mode="before")
    @classmethod
    def _null_as_default(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def is_interactive(self) -> bool:
        """Buttons and inputs are interactive."""
        return self.type in INTERACTIVE_TYPES


class Breakpoint(BaseModel):
    """A responsive breakpoint and the changes applied below it."""

    breakpoint: int = 0
    changes: dict[str, Any] = Field(default_factory=dict)

    model_config = {"frozen": True}


class Responsive(BaseModel):
    """Responsive behaviour of the document."""

    mobile: Breakpoint = Field(default_factory=Breakpoint)
    tablet: Breakpoint = Field(default_factory=Breakpoint)

    model_config = {"frozen": True}


class Accessibility(BaseModel):
    """Document-level accessibility declarations."""

    touch_targets_min: int = 0
    focus_indicators: str = ""
    labels: str = ""
    semantic_structure: bool = False

    model_config = {"frozen": True}


class ValidationInfo(BaseModel):
    """Self-reported scores from a previous review round."""

    visual_hierarchy: str = ""
    touch_targets: str = ""
    max_nesting_depth: int = 0
    responsive_tested: bool = False
    notes: str = ""
    aspect_improved: str = ""
    checks_passed: list[str] = Field(default_factory=list)

    model_config = {"frozen": True}


class Structure(BaseModel):
    """Root of a Phase 1 structure document."""

    version: str = Field(default="", description="Version label, e.g. 'v3'")
    phase: str = Field(default="", description="structure or design")
    created_at: datetime | None = None
    locked: bool = False
    parent_version: str = ""
    change_summary: str = ""
    rationale: str = ""
    locked_at: datetime | None = None
    approved_by: str = ""
    checksum: str = ""
    note: str = ""
    intent: Intent = Field(default_factory=Intent)
    layout: Layout = Field(default_factory=Layout)
    components: list[Component] = Field(default_factory=list)
    responsive: Responsive = Field(default_factory=Responsive)
    accessibility: Accessibility = Field(default_factory=Accessibility)
    validation: ValidationInfo = Field(default_factory=ValidationInfo)

    model_config = {"frozen": True}

    @field_validator("components", mode="before")
    @classmethod
    def _null_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    def to_json(self, indent: int | None = 2) -> str:
        """Encode the document back to JSON."""
        return self.model_dump_json(indent=indent)


# =============================================================================
# Parsing
# =============================================================================


def parse_structure(data: str | bytes) -> Structure:
    """Decode a JSON document into a Structure.

    Args:
        data: UTF-8 JSON text.

    Returns:
        The decoded Structure. No Phase 1 constraints are checked.

    Raises:
        StructureParseError: If the JSON is malformed or a field has the
            wrong type.
    """
    try:
        return Structure.model_validate_json(data)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {"loc": (), "msg": str(e)}
        loc = ".".join(str(x) for x in first["loc"])
        detail = f"{loc}: {first['msg']}" if loc else first["msg"]
        raise StructureParseError(f"failed to parse JSON: {detail}") from e


def load_structure(path: str | Path) -> Structure:
    """Read and decode a structure file.

    Raises:
        StructureParseError: If the file content cannot be decoded.
        OSError: If the file cannot be read.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    try:
        return parse_structure(text)
    except StructureParseError as e:
        raise StructureParseError(str(e), source=str(path)) from e


# =============================================================================
# Tree Traversal
# =============================================================================


def walk_components(
    components: list[Component],
    depth: int = 0,
    parent: Component | None = None,
) -> Iterator[tuple[Component, int, Component | None]]:
    """Walk a component forest depth-first in document order.

    Root components are reported at ``depth`` (0 by default) and each level
    of children one deeper. This is the single depth convention shared by
    the schema validator and the accessibility rule.

    Yields:
        (component, depth, parent) tuples; parent is None for roots.
    """
    for comp in components:
        yield comp, depth, parent
        yield from walk_components(comp.children, depth + 1, comp)


def iter_components(components: list[Component]) -> Iterator[Component]:
    """Yield every component of the forest in document order."""
    for comp, _, _ in walk_components(components):
        yield comp


def count_components(components: list[Component]) -> int:
    """Count all components in a forest, children included."""
    return sum(1 for _ in walk_components(components))


def max_depth(components: list[Component]) -> int:
    """Deepest nesting level of the forest (roots are level 0, empty is -1)."""
    return max((depth for _, depth, _ in walk_components(components)), default=-1)


def find_component(components: list[Component], component_id: str) -> Component | None:
    """Find a component by ID anywhere in the forest."""
    for comp in iter_components(components):
        if comp.id == component_id:
            return comp
    return None


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
