"""Centralized configuration management for prism.

Provides unified access to all configuration via the `get_environment()` function.

Example:
    >>> from src.config import EnvVar, get_environment
    >>>
    >>> # Get any environment variable with automatic type conversion
    >>> width = get_environment(EnvVar.PRISM_RENDER_WIDTH)  # Returns int: 1200
    >>> annotate = get_environment(EnvVar.PRISM_ANNOTATIONS)  # Returns bool
    >>>
    >>> # Override at runtime
    >>> width = get_environment(EnvVar.PRISM_RENDER_WIDTH, override=768)
    >>>
    >>> # List available variables by category
    >>> for var in list_environment_variables("render"):
    ...     info = get_environment_info(var)
    ...     print(f"{info.name}: {info.description}")

Environment Variable Categories:
    project: Project directory and structure folder name
    render: Canvas width, scale, viewport and output location
    logging: Log verbosity
"""

from .lib import (
    VIEWPORT_WIDTHS,
    # Core types
    EnvConfig,
    EnvVar,
    get_environment,
    get_environment_info,
    get_log_level,
    # Convenience functions
    get_project_dir,
    get_structure_dir_name,
    get_viewport_width,
    # Introspection
    list_environment_variables,
)

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
