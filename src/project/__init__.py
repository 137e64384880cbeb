"""Project module - Discovery of versioned structure documents.

This module provides:
- Resolution of 'latest', 'approved' and 'v{n}' to file paths
- The default document for audits (approved, else latest)
- Version listings for the list command

Example usage:
    >>> from src.project import find_default_structure, list_versions
    >>> path = find_default_structure("./my-dashboard")
    >>> for info in list_versions("./my-dashboard"):
    ...     print(info.version, info.purpose)
"""

from .lib import (
    APPROVED,
    LATEST,
    ProjectError,
    VersionInfo,
    find_default_structure,
    find_latest_version,
    list_structure_files,
    list_versions,
    resolve_version,
    structure_dir,
    version_number,
)

__all__ = [
    # Constants
    "APPROVED",
    "LATEST",
    # Errors
    "ProjectError",
    # Types
    "VersionInfo",
    # Discovery
    "structure_dir",
    "version_number",
    "find_latest_version",
    "resolve_version",
    "find_default_structure",
    "list_structure_files",
    "list_versions",
]
