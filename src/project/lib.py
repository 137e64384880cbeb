"""Versioned structure discovery.

A project keeps its documents under ``<project>/phase1-structure/`` as
``v{n}.json`` files plus an optional ``approved.json``. "latest" is the
highest numbered version; approved.json never counts as latest.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any

from src.config import get_structure_dir_name
from src.model import StructureParseError, load_structure

logger = logging.getLogger(__name__)

APPROVED = "approved"
LATEST = "latest"

_VERSION_FILE_RE = re.compile(r"^v(\d+)\.json$")
_VERSION_NUMBER_RE = re.compile(r"^v(\d+)")


class ProjectError(Exception):
    """Raised when a project directory or version cannot be found."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = str(path) if path is not None else None


@dataclass
class VersionInfo:
    """Summary of one structure file, as shown by the list command."""

    version: str
    file: str
    phase: str
    locked: bool
    created_at: datetime | None
    purpose: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "file": self.file,
            "phase": self.phase,
            "locked": self.locked,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "purpose": self.purpose,
        }


def structure_dir(project: Path | str) -> Path:
    """Directory holding the versioned documents of a project."""
    return Path(project) / get_structure_dir_name()


def version_number(name: str) -> int:
    """Numeric part of a 'v{n}' name, 0 when there is none."""
    match = _VERSION_NUMBER_RE.match(name)
    return int(match.group(1)) if match else 0


def _require_dir(project: Path | str) -> Path:
    directory = structure_dir(project)
    if not directory.is_dir():
        raise ProjectError(f"no {directory.name} directory found in {project}", directory)
    return directory


def find_latest_version(project: Path | str) -> Path:
    """Path of the highest numbered v{n}.json.

    Raises:
        ProjectError: If the directory is missing or holds no numbered versions.
    """
    directory = _require_dir(project)
    latest: Path | None = None
    latest_n = 0
    for entry in directory.iterdir():
        match = _VERSION_FILE_RE.match(entry.name)
        if match and entry.is_file() and int(match.group(1)) > latest_n:
            latest_n = int(match.group(1))
            latest = entry
    if latest is None:
        raise ProjectError(f"no versions found in {directory}", directory)
    logger.debug("Latest version in %s is %s", directory, latest.name)
    return latest


def resolve_version(project: Path | str, version: str = LATEST) -> Path:
    """Path of a named version: 'latest', 'approved' or 'v{n}'.

    Raises:
        ProjectError: If the directory or the version does not exist.
    """
    if version == LATEST:
        return find_latest_version(project)
    directory = _require_dir(project)
    name = version if version.endswith(".json") else f"{version}.json"
    path = directory / name
    if not path.is_file():
        raise ProjectError(f"version '{version}' not found at {path}", path)
    return path


def find_default_structure(project: Path | str) -> Path:
    """approved.json when present, otherwise the latest version."""
    approved = _require_dir(project) / f"{APPROVED}.json"
    if approved.is_file():
        return approved
    return find_latest_version(project)


def list_structure_files(project: Path | str) -> list[Path]:
    """All JSON files in the structure directory, sorted by name."""
    directory = _require_dir(project)
    return sorted(p for p in directory.iterdir() if p.is_file() and p.suffix == ".json")


def list_versions(project: Path | str) -> list[VersionInfo]:
    """Describe every readable structure file.

    Files that cannot be read or decoded are skipped. approved comes first,
    then numbered versions in numeric order.
    """
    versions: list[VersionInfo] = []
    for path in list_structure_files(project):
        try:
            structure = load_structure(path)
        except (OSError, StructureParseError) as e:
            logger.debug("Skipping %s: %s", path.name, e)
            continue
        versions.append(
            VersionInfo(
                version=path.stem,
                file=path.name,
                phase=structure.phase,
                locked=structure.locked,
                created_at=structure.created_at,
                purpose=structure.intent.purpose,
            )
        )
    versions.sort(key=lambda v: (v.version != APPROVED, version_number(v.version)))
    return versions


__all__ = [
    "APPROVED",
    "LATEST",
    "ProjectError",
    "VersionInfo",
    "structure_dir",
    "version_number",
    "find_latest_version",
    "resolve_version",
    "find_default_structure",
    "list_structure_files",
    "list_versions",
]
