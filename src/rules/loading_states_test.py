"""Unit tests for the loading state rule."""

import pytest

from src.rules import Severity, count_components_by_state, validate_loading_states


class TestStates:
    """Tests for state values and messaging."""

    @pytest.mark.unit
    def test_invalid_state(self, make_structure):
        """Unknown states are errors followed by the valid list."""
        structure = make_structure([{"id": "feed", "type": "box", "state": "busy"}])
        result = validate_loading_states(structure)
        assert not result.passed
        assert [i.message for i in result.issues] == [
            "Loading State: 'feed' has invalid state 'busy'",
            "   Valid states: default, loading, error, empty",
        ]

    @pytest.mark.unit
    def test_loading_without_skeleton(self, make_structure):
        """A loading component without a skeleton gets an info."""
        structure = make_structure([{"id": "feed", "type": "box", "state": "loading"}])
        result = validate_loading_states(structure)
        assert result.passed
        assert result.issues[0].severity == Severity.INFO
        assert "missing skeleton configuration" in result.issues[0].message

    @pytest.mark.unit
    def test_silent_empty_and_error_states(self, make_structure):
        """Empty and error states without content or children are flagged."""
        structure = make_structure(
            [
                {"id": "inbox", "type": "box", "state": "empty"},
                {"id": "orders", "type": "box", "state": "error"},
                {"id": "saved", "type": "text", "state": "empty", "content": "Nothing saved yet"},
            ]
        )
        result = validate_loading_states(structure)
        assert [i.message for i in result.issues] == [
            "Loading State: 'inbox' in empty state - consider adding empty state message",
            "Loading State: 'orders' in error state - consider adding error message",
        ]


class TestSkeleton:
    """Tests for skeleton configuration."""

    @pytest.mark.unit
    def test_no_elements(self, make_structure):
        """A skeleton with no elements warns."""
        structure = make_structure(
            [{"id": "feed", "type": "box", "state": "loading", "skeleton": {"elements": []}}]
        )
        result = validate_loading_states(structure)
        assert [i.message for i in result.warnings] == [
            "Loading State: 'feed' has skeleton config but no elements defined"
        ]

    @pytest.mark.unit
    def test_element_checks(self, make_structure):
        """Element types and dimensions are checked in order."""
        elements = [
            {"type": "circle"},
            {"type": "text", "height": "16px"},
            {"type": ""},
            {"type": "blob"},
            {"type": "rect", "width": "100%", "height": "120px"},
        ]
        structure = make_structure(
            [{"id": "feed", "type": "box", "state": "loading", "skeleton": {"elements": elements}}]
        )
        result = validate_loading_states(structure)
        assert not result.passed
        assert [(i.severity, i.message) for i in result.issues] == [
            (Severity.WARNING, "Loading State: 'feed' skeleton circle element 0 should specify size"),
            (Severity.WARNING, "Loading State: 'feed' skeleton text element 1 should specify width"),
            (Severity.ERROR, "Loading State: 'feed' skeleton element 2 missing type"),
            (Severity.ERROR, "Loading State: 'feed' skeleton element 3 has invalid type 'blob'"),
            (Severity.INFO, "   Valid skeleton types: circle, text, rect"),
        ]

    @pytest.mark.unit
    def test_complete_skeleton(self, make_structure):
        """A fully specified skeleton has no issues."""
        structure = make_structure(
            [
                {
                    "id": "feed",
                    "type": "box",
                    "state": "loading",
                    "skeleton": {"elements": [{"type": "circle", "size": 40}, {"type": "text", "width": "60%"}]},
                }
            ]
        )
        assert validate_loading_states(structure).issues == []


class TestCounts:
    """Tests for count_components_by_state."""

    @pytest.mark.unit
    def test_counts(self, make_structure):
        """Unset states count as default."""
        structure = make_structure(
            [
                {"id": "a", "type": "box", "state": "loading", "children": [{"id": "b", "type": "text"}]},
                {"id": "c", "type": "box", "state": "loading"},
                {"id": "d", "type": "box", "state": "error"},
            ]
        )
        assert count_components_by_state(structure) == {"loading": 2, "default": 1, "error": 1}
