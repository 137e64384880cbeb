"""Root pytest configuration and fixtures.

This module provides:
- Environment setup (loads .env)
- Marker registration for the unit/integration test tiers
- Document-building fixtures shared by every package
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable

import pytest
from dotenv import load_dotenv

from src.model import Structure

# Load environment variables from .env file
load_dotenv()


# =============================================================================
# Configuration Constants
# =============================================================================

MINIMAL_ENVELOPE: dict[str, Any] = {
    "version": "t",
    "phase": "structure",
    "intent": {"purpose": "t"},
    "layout": {"type": "stack"},
}


# =============================================================================
# Pytest Hooks
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register test tier markers."""
    config.addinivalue_line("markers", "unit: fast tests with no I/O")
    config.addinivalue_line(
        "markers", "integration: tests touching the file system or PNG encoding"
    )


# =============================================================================
# Document Builders
# =============================================================================


def build_structure(components: list[Any], **fields: Any) -> Structure:
    """Build a Structure around the minimal Phase 1 envelope.

    Args:
        components: Component dicts (or Component models).
        **fields: Top-level overrides; dict values are merged one level
            deep into the envelope (e.g. layout={"spacing": 20}).

    Returns:
        Validated Structure.
    """
    doc: dict[str, Any] = {k: (dict(v) if isinstance(v, dict) else v) for k, v in MINIMAL_ENVELOPE.items()}
    for key, value in fields.items():
        if isinstance(value, dict) and isinstance(doc.get(key), dict):
            doc[key].update(value)
        else:
            doc[key] = value
    doc["components"] = components
    return Structure.model_validate(doc)


@pytest.fixture
def make_structure() -> Callable[..., Structure]:
    """Factory fixture wrapping build_structure."""
    return build_structure


@pytest.fixture
def minimal_structure() -> Structure:
    """Smallest valid document: one flex box."""
    return build_structure([{"id": "x", "type": "box", "layout": {"display": "flex"}}])


@pytest.fixture
def dashboard_structure() -> Structure:
    """A realistic dashboard with header, sidebar form and card grid.

    Returns:
        Structure exercising every component type.
    """
    return build_structure(
        [
            {
                "id": "header",
                "type": "box",
                "role": "header",
                "layout": {
                    "display": "flex",
                    "direction": "horizontal",
                    "padding": 16,
                    "gap": 16,
                    "justify_content": "space-between",
                    "border_bottom": "1px solid #E5E5E5",
                },
                "children": [
                    {"id": "h1-title", "type": "text", "content": "Dashboard", "size": "4xl", "weight": "bold"},
                    {"id": "save-button", "type": "button", "content": "Save", "layout": {"width": 120, "height": 44}},
                ],
            },
            {
                "id": "filters-form",
                "type": "box",
                "role": "form",
                "layout": {"display": "flex", "direction": "vertical", "padding": 16, "gap": 8},
                "children": [
                    {"id": "email-label", "type": "text", "content": "Email", "size": "sm"},
                    {"id": "email-input", "type": "input", "content": "you@example.com", "layout": {"width": 320, "height": 44}},
                ],
            },
            {
                "id": "card-grid",
                "type": "box",
                "layout": {"display": "grid", "grid_template_columns": "repeat(3, 1fr)", "gap": 16},
                "children": [
                    {"id": "card-1", "type": "box", "role": "card", "layout": {"padding": 16, "border": "1px solid #E5E5E5"}},
                    {"id": "card-2", "type": "box", "role": "card", "layout": {"padding": 16, "border": "1px solid #E5E5E5"}},
                    {"id": "card-3", "type": "image"},
                ],
            },
        ],
        intent={"purpose": "Overview of account activity", "primary_action": "save-button"},
        layout={"spacing": 24, "padding": 24, "max_width": 1200},
        accessibility={"focus_indicators": "visible", "labels": "all_interactive_elements"},
    )


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project directory with two numbered versions and approved.json.

    Returns:
        Path to the project root.
    """
    structure_dir = tmp_path / "demo-project" / "phase1-structure"
    structure_dir.mkdir(parents=True)
    for version, purpose in (("v1", "first draft"), ("v2", "second draft"), ("v10", "tenth draft")):
        doc = build_structure(
            [{"id": "x", "type": "box", "layout": {"display": "flex"}}],
            version=version,
            intent={"purpose": purpose},
        )
        (structure_dir / f"{version}.json").write_text(doc.to_json(), encoding="utf-8")
    approved = build_structure(
        [{"id": "x", "type": "box"}],
        version="v2",
        locked=True,
        approved_by="reviewer",
        intent={"purpose": "approved draft"},
    )
    (structure_dir / "approved.json").write_text(approved.to_json(), encoding="utf-8")
    (structure_dir / "notes.txt").write_text("not a version", encoding="utf-8")
    return tmp_path / "demo-project"
