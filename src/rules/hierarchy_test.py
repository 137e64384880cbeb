"""Unit tests for the visual hierarchy rule."""

import pytest

from src.rules import HierarchyRule, Severity, validate_hierarchy


class TestButtonHierarchy:
    """Tests for primary/secondary button sizing."""

    @pytest.mark.unit
    def test_primary_narrower_than_secondary(self, button_pair_structure):
        """A narrow primary warns and a wider secondary is an error."""
        result = validate_hierarchy(button_pair_structure)
        assert not result.passed
        assert [i.message for i in result.warnings] == [
            "Primary button 'save' is 100px wide (recommend minimum 120px)"
        ]
        assert [i.message for i in result.errors] == [
            "Secondary button 'cancel' (150px) larger than primary button 'save' (100px)"
        ]
        assert result.errors[0].component == "save"

    @pytest.mark.unit
    def test_primary_by_role(self, make_structure):
        """Buttons whose role mentions primary count as primary."""
        structure = make_structure(
            [{"id": "go", "type": "button", "role": "primary", "layout": {"width": 200}}]
        )
        result = validate_hierarchy(structure)
        assert result.passed
        assert "✓ Primary CTA buttons meet minimum size requirements" in [i.message for i in result.infos]

    @pytest.mark.unit
    def test_default_button_width(self, make_structure):
        """A primary button without a width is treated as 100px."""
        structure = make_structure([{"id": "primary-cta", "type": "button"}])
        result = validate_hierarchy(structure)
        assert result.warnings[0].message == "Primary button 'primary-cta' is 100px wide (recommend minimum 120px)"

    @pytest.mark.unit
    def test_custom_minimum(self, button_pair_structure):
        """The minimum primary width is configurable."""
        result = validate_hierarchy(button_pair_structure, HierarchyRule(min_primary_cta_size=90))
        assert not result.warnings
        assert len(result.errors) == 1


class TestHeadingHierarchy:
    """Tests for heading size ordering."""

    @pytest.mark.unit
    def test_higher_heading_not_larger(self, make_structure):
        """An h1 no larger than an h2 is a warning with a recommended size."""
        structure = make_structure(
            [
                {"id": "h1-page", "type": "text", "content": "Page", "size": "base"},
                {"id": "h2-section", "type": "text", "content": "Section", "size": "2xl"},
            ]
        )
        result = validate_hierarchy(structure)
        assert result.passed
        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.component == "h1-page"
        assert warning.message == (
            "h1 ('h1-page': 16px) not sufficiently larger than h2 ('h2-section': 24px) "
            "- recommend 30px (1.25x scale)"
        )

    @pytest.mark.unit
    def test_descending_sizes_pass(self, make_structure):
        """Headings that shrink with level produce only success infos."""
        structure = make_structure(
            [
                {"id": "h1-page", "type": "text", "size": "4xl"},
                {"id": "h2-section", "type": "text", "size": "3xl"},
                {"id": "card-title", "type": "text", "size": "2xl"},
            ]
        )
        result = validate_hierarchy(structure)
        assert [i.message for i in result.issues] == [
            "✓ Spacing hierarchy is consistent",
            "✓ Heading sizes follow consistent scale",
        ]


class TestSpacingHierarchy:
    """Tests for nested padding ratios."""

    @pytest.mark.unit
    def test_padding_much_smaller_than_parent(self, make_structure):
        """Padding well below parent spacing / 1.5 produces an info."""
        structure = make_structure(
            [{"id": "inner", "type": "box", "layout": {"padding": 8}}],
            layout={"spacing": 48},
        )
        result = validate_hierarchy(structure)
        assert len(result.issues) == 1
        issue = result.issues[0]
        assert issue.severity == Severity.INFO
        assert issue.message == (
            "Spacing hierarchy: 'inner' has padding 8px (parent has 48px) - "
            "consider using 32px for consistent hierarchy"
        )

    @pytest.mark.unit
    def test_children_inherit_parent_padding(self, make_structure):
        """A child is compared with its nearest padded ancestor."""
        structure = make_structure(
            [
                {
                    "id": "outer",
                    "type": "box",
                    "layout": {"padding": 32},
                    "children": [
                        {"id": "middle", "type": "box", "children": [{"id": "leaf", "type": "box", "layout": {"padding": 4}}]}
                    ],
                }
            ]
        )
        result = validate_hierarchy(structure)
        assert [i.component for i in result.issues] == ["leaf"]

    @pytest.mark.unit
    def test_dashboard_is_consistent(self, dashboard_structure):
        """The dashboard fixture produces only success infos."""
        result = validate_hierarchy(dashboard_structure)
        assert result.passed
        assert [i.message for i in result.issues] == [
            "✓ Spacing hierarchy is consistent",
            "✓ Heading sizes follow consistent scale",
            "✓ Primary CTA buttons meet minimum size requirements",
        ]
