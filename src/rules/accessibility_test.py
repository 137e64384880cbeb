"""Unit tests for the accessibility rule."""

import pytest

from src.rules import AccessibilityRule, Severity, validate_accessibility
from src.rules.accessibility import label_base

VISIBLE = {"focus_indicators": "visible"}


def _chain(levels: int) -> dict:
    node = {"id": f"level-{levels - 1}", "type": "box"}
    for i in range(levels - 2, -1, -1):
        node = {"id": f"level-{i}", "type": "box", "children": [node]}
    return node


class TestLabels:
    """Tests for interactive element labels."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "component_id,expected",
        [
            ("email-input", "email"),
            ("email-field", "email"),
            ("submit-button", "submit"),
            ("submit-btn", "submit"),
            ("search", "search"),
        ],
    )
    def test_label_base(self, component_id, expected):
        """Interactive suffixes are stripped."""
        assert label_base(component_id) == expected

    @pytest.mark.unit
    def test_missing_label(self, make_structure):
        """An empty button without a label text is an error."""
        structure = make_structure([{"id": "go-button", "type": "button"}], accessibility=VISIBLE)
        result = validate_accessibility(structure)
        assert not result.passed
        assert [i.message for i in result.errors] == ["A11y: 'go-button' missing label"]

    @pytest.mark.unit
    def test_label_text_anywhere(self, make_structure):
        """A '<base>-label' text elsewhere in the tree labels the element."""
        structure = make_structure(
            [
                {"id": "email-label", "type": "text", "content": "Email"},
                {"id": "box", "type": "box", "children": [{"id": "email-input", "type": "input"}]},
            ],
            accessibility=VISIBLE,
        )
        assert validate_accessibility(structure).passed

    @pytest.mark.unit
    def test_content_is_label(self, make_structure):
        """Buttons with text content are labelled."""
        structure = make_structure([{"id": "go", "type": "button", "content": "Go"}], accessibility=VISIBLE)
        assert not validate_accessibility(structure).errors

    @pytest.mark.unit
    def test_blanket_labels(self, make_structure):
        """The document-level labels policy labels every element."""
        structure = make_structure(
            [{"id": "go", "type": "button"}],
            accessibility={"focus_indicators": "visible", "labels": "all_interactive_elements"},
        )
        assert validate_accessibility(structure).passed

    @pytest.mark.unit
    def test_labels_not_required(self, make_structure):
        """Label checks can be switched off."""
        structure = make_structure([{"id": "go", "type": "button"}], accessibility=VISIBLE)
        result = validate_accessibility(structure, AccessibilityRule(require_labels=False))
        assert result.passed


class TestHeadingsAndDepth:
    """Tests for heading order and nesting depth."""

    @pytest.mark.unit
    def test_heading_jump(self, make_structure):
        """Skipping from h1 to h3 is an error on the h3."""
        structure = make_structure(
            [
                {"id": "h1-page", "type": "text", "content": "Page"},
                {"id": "h3-detail", "type": "text", "content": "Detail"},
            ],
            accessibility=VISIBLE,
        )
        result = validate_accessibility(structure)
        assert [(i.message, i.component) for i in result.errors] == [
            ("A11y: Heading structure jumps from h1 to h3 (missing h2)", "h3-detail")
        ]

    @pytest.mark.unit
    def test_heading_back_up_is_fine(self, make_structure):
        """Returning to a higher level is not a jump."""
        structure = make_structure(
            [
                {"id": "h1-page", "type": "text"},
                {"id": "h2-a", "type": "text"},
                {"id": "h3-a", "type": "text"},
                {"id": "h2-b", "type": "text"},
            ],
            accessibility=VISIBLE,
        )
        assert validate_accessibility(structure).passed

    @pytest.mark.unit
    def test_depth_exceeded(self, make_structure):
        """Components deeper than level 4 are errors."""
        structure = make_structure([_chain(6)], accessibility=VISIBLE)
        result = validate_accessibility(structure)
        assert [i.message for i in result.errors] == [
            "A11y: Component 'level-5' exceeds max nesting depth (4 levels)"
        ]


class TestFocusAndTabOrder:
    """Tests for focus declarations and tab order."""

    @pytest.mark.unit
    def test_focus_not_defined(self, minimal_structure):
        """A missing focus declaration warns."""
        result = validate_accessibility(minimal_structure)
        assert result.passed
        assert result.warnings[0].message == "A11y: Focus indicators not defined in accessibility settings"

    @pytest.mark.unit
    def test_focus_not_visible(self, make_structure):
        """Any value other than 'visible' warns."""
        structure = make_structure([{"id": "x", "type": "box"}], accessibility={"focus_indicators": "subtle"})
        result = validate_accessibility(structure)
        assert result.warnings[0].message == "A11y: Focus indicators set to 'subtle' - recommend 'visible'"

    @pytest.mark.unit
    def test_button_before_its_input(self, make_structure):
        """A button directly before an input with the same prefix warns."""
        structure = make_structure(
            [
                {"id": "search-button", "type": "button", "content": "Search"},
                {"id": "search-input", "type": "input", "content": "Query"},
            ],
            accessibility=VISIBLE,
        )
        result = validate_accessibility(structure)
        assert [i.message for i in result.warnings] == [
            "A11y: Tab order may be confusing - 'search-button' comes before 'search-input' in layout"
        ]

    @pytest.mark.unit
    def test_semantic_structure_without_roles(self, make_structure):
        """Semantic structure without any role produces an info."""
        structure = make_structure(
            [{"id": "x", "type": "box"}],
            accessibility={"focus_indicators": "visible", "semantic_structure": True},
        )
        result = validate_accessibility(structure)
        assert result.infos[0].message.startswith("A11y: Semantic structure enabled but no roles defined")


class TestSuccess:
    """Tests for the success messages."""

    @pytest.mark.unit
    def test_dashboard(self, dashboard_structure):
        """The dashboard fixture reports every success info."""
        result = validate_accessibility(dashboard_structure)
        assert result.passed
        assert [i.severity for i in result.issues] == [Severity.INFO] * 4
        assert [i.message for i in result.issues] == [
            "✓ All interactive elements have labels",
            "✓ Heading hierarchy is correct",
            "✓ Focus indicators are properly defined",
            "✓ Nesting depth (1) within acceptable limits (4)",
        ]
