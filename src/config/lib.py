"""Environment-variable configuration for prism.

Every setting the CLI reads from the environment is declared once on
`EnvVar` and resolved through `get_environment()` (override, then the
process environment, then the declared default).

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> # Get values with automatic type conversion
    >>> scale = get_environment(EnvVar.PRISM_RENDER_SCALE)  # Returns int
    >>> output_dir = get_environment(EnvVar.PRISM_OUTPUT_DIR)  # Returns Path | None
    >>>
    >>> # Override at runtime
    >>> scale = get_environment(EnvVar.PRISM_RENDER_SCALE, override=2)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, overload

# =============================================================================
# Environment Variable Configuration
# =============================================================================


@dataclass(frozen=True)
class EnvConfig:
    """Metadata for an environment variable.

    Attributes:
        name: Environment variable name (e.g., "PRISM_VIEWPORT").
        default: Default value if not set in environment.
        var_type: Python type for value conversion (str, int, bool, Path).
        description: Human-readable description.
        category: Grouping category for documentation.
    """

    name: str
    default: Any
    var_type: type
    description: str = ""
    category: str = "general"


class EnvVar(Enum):
    """All environment variables used by prism.

    Each member contains an EnvConfig with name, default, type, and description.
    Use with `get_environment()` for type-safe access.

    Categories:
        - project: Where versioned structure documents live
        - render: Raster output defaults
        - logging: Log verbosity
    """

    # -------------------------------------------------------------------------
    # Project Discovery
    # -------------------------------------------------------------------------
    PRISM_PROJECT_DIR = EnvConfig(
        name="PRISM_PROJECT_DIR",
        default=Path("."),
        var_type=Path,
        description="Project directory containing phase1-structure/",
        category="project",
    )
    PRISM_STRUCTURE_DIR = EnvConfig(
        name="PRISM_STRUCTURE_DIR",
        default="phase1-structure",
        var_type=str,
        description="Name of the directory holding v{n}.json and approved.json",
        category="project",
    )

    # -------------------------------------------------------------------------
    # Render Defaults
    # -------------------------------------------------------------------------
    PRISM_VIEWPORT = EnvConfig(
        name="PRISM_VIEWPORT",
        default="desktop",
        var_type=str,
        description="Default viewport preset (mobile, tablet, desktop)",
        category="render",
    )
    PRISM_RENDER_WIDTH = EnvConfig(
        name="PRISM_RENDER_WIDTH",
        default=1200,
        var_type=int,
        description="Default canvas width in pixels",
        category="render",
    )
    PRISM_RENDER_SCALE = EnvConfig(
        name="PRISM_RENDER_SCALE",
        default=1,
        var_type=int,
        description="Default scale factor for high-DPI output (1, 2 or 3)",
        category="render",
    )
    PRISM_ANNOTATIONS = EnvConfig(
        name="PRISM_ANNOTATIONS",
        default=False,
        var_type=bool,
        description="Draw component IDs on rendered mockups by default",
        category="render",
    )
    PRISM_OUTPUT_DIR = EnvConfig(
        name="PRISM_OUTPUT_DIR",
        default=None,
        var_type=Path,
        description="Directory for generated PNG files (None = current directory)",
        category="render",
    )

    # -------------------------------------------------------------------------
    # Logging
    # -------------------------------------------------------------------------
    PRISM_LOG_LEVEL = EnvConfig(
        name="PRISM_LOG_LEVEL",
        default="INFO",
        var_type=str,
        description="Log level name (DEBUG, INFO, WARNING, ERROR)",
        category="logging",
    )


# =============================================================================
# Viewport Presets
# =============================================================================

# Render widths; desktop keeps whatever width was requested (1200 default)
VIEWPORT_WIDTHS: dict[str, int] = {
    "mobile": 375,
    "tablet": 768,
    "desktop": 1200,
}


# =============================================================================
# Type Conversion
# =============================================================================


_TRUTHY = frozenset({"true", "1", "yes", "on"})
_FALSY = frozenset({"false", "0", "no", "off"})


def _parse_bool(value: str) -> bool | None:
    """true/1/yes/on and false/0/no/off, any case; None otherwise."""
    flag = value.strip().lower()
    if flag in _TRUTHY:
        return True
    if flag in _FALSY:
        return False
    return None


def _convert_value(value: str | None, var_type: type, default: Any) -> Any:
    """Convert a raw environment string to var_type.

    Unset or blank values, unparsable ints and unrecognised booleans all
    resolve to the default.
    """
    if value is None or not value.strip():
        return default
    if var_type is str:
        return value.strip()

    if var_type is int:
        try:
            return int(value)
        except ValueError:
            return default

    if var_type is bool:
        result = _parse_bool(value)
        return result if result is not None else default

    if var_type is Path:
        return Path(value)

    return value


# =============================================================================
# Main Interface
# =============================================================================


@overload
def get_environment(env_var: EnvVar, override: int) -> int: ...
@overload
def get_environment(env_var: EnvVar, override: str) -> str: ...
@overload
def get_environment(env_var: EnvVar, override: bool) -> bool: ...
@overload
def get_environment(env_var: EnvVar, override: Path) -> Path: ...
@overload
def get_environment(env_var: EnvVar, override: None = None) -> Any: ...


def get_environment(env_var: EnvVar, override: Any = None) -> Any:
    """Resolve a setting: explicit override, then environment, then default.

    Args:
        env_var: Setting to read.
        override: Value that wins over the environment when not None
            (typically a CLI flag).

    Returns:
        The value converted to the setting's declared type.

    Example:
        >>> get_environment(EnvVar.PRISM_RENDER_WIDTH)
        1200
        >>> get_environment(EnvVar.PRISM_RENDER_WIDTH, override=768)
        768
    """
    if override is not None:
        return override
    config: EnvConfig = env_var.value
    return _convert_value(os.environ.get(config.name), config.var_type, config.default)


def get_environment_info(env_var: EnvVar) -> EnvConfig:
    """Declared name, default, type and description of a setting."""
    return env_var.value


# =============================================================================
# Convenience Functions
# =============================================================================


def get_project_dir(override: Path | str | None = None) -> Path:
    """Get the project directory.

    Resolution: override > PRISM_PROJECT_DIR > current directory.
    """
    if override is not None:
        return Path(override)
    return get_environment(EnvVar.PRISM_PROJECT_DIR)


def get_structure_dir_name() -> str:
    """Get the name of the versioned structure directory."""
    return get_environment(EnvVar.PRISM_STRUCTURE_DIR)


def get_viewport_width(viewport: str | None = None, default_width: int | None = None) -> int:
    """Resolve the canvas width for a viewport preset.

    Mobile and tablet presets override the requested width; desktop (and
    unknown names) keep it.

    Args:
        viewport: Preset name. Defaults to PRISM_VIEWPORT.
        default_width: Requested width. Defaults to PRISM_RENDER_WIDTH.

    Returns:
        Width in pixels.
    """
    viewport = viewport or get_environment(EnvVar.PRISM_VIEWPORT)
    width = default_width or get_environment(EnvVar.PRISM_RENDER_WIDTH)
    if viewport in ("mobile", "tablet"):
        return VIEWPORT_WIDTHS[viewport]
    return width


def get_log_level(override: str | None = None) -> int:
    """Get the configured log level as a logging module constant.

    Unknown level names fall back to INFO.
    """
    name = get_environment(EnvVar.PRISM_LOG_LEVEL, override=override)
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def list_environment_variables(category: str | None = None) -> list[EnvVar]:
    """List all environment variables, optionally filtered by category.

    Args:
        category: Filter by category (project, render, logging).
                 None returns all variables.

    Returns:
        List of EnvVar enum members.
    """
    if category is None:
        return list(EnvVar)
    return [var for var in EnvVar if var.value.category == category]


__all__ = [
    # Core types
    "EnvConfig",
    "EnvVar",
    "VIEWPORT_WIDTHS",
    # Main interface
    "get_environment",
    "get_environment_info",
    # Convenience functions
    "get_project_dir",
    "get_structure_dir_name",
    "get_viewport_width",
    "get_log_level",
    # Introspection
    "list_environment_variables",
]
