"""Unit tests for the color contrast rule."""

import pytest

from src.rules import ContrastRule, suggest_compliant_color, validate_contrast


def _text_on(make_structure, color, background, **text):
    return make_structure(
        [
            {
                "id": "panel",
                "type": "box",
                "layout": {"background": background},
                "children": [{"id": "hint", "type": "text", "content": "hi", "color": color, **text}],
            }
        ]
    )


class TestTextContrast:
    """Tests for text against inherited backgrounds."""

    @pytest.mark.unit
    def test_failing_gray_on_white(self, make_structure):
        """Text just under 4.5:1 is an error with a suggestion."""
        result = validate_contrast(_text_on(make_structure, "#777777", "#FFFFFF", size="base"))
        assert not result.passed
        error = result.errors[0]
        assert error.category == "contrast_fail"
        assert error.component == "hint"
        assert error.message.startswith("Contrast: 'hint' (#777777) on #FFFFFF fails WCAG AA")
        assert error.message.endswith("requires 4.5:1)")
        assert [(i.category, i.message) for i in result.infos] == [
            ("contrast_suggestion", "   Suggestion: Use #6B6B6B or similar for compliance")
        ]

    @pytest.mark.unit
    def test_palette_gray_on_white_passes(self, make_structure):
        """Mid gray on white clears AA at about 4.74:1."""
        result = validate_contrast(_text_on(make_structure, "#737373", "#FFFFFF", size="base"))
        assert result.passed
        assert result.issues == []

    @pytest.mark.unit
    def test_palette_gray_on_light_gray(self, make_structure):
        """Mid gray on light gray fails and suggests a darker gray."""
        result = validate_contrast(_text_on(make_structure, "#737373", "#E5E5E5"))
        assert result.errors[0].message == (
            "Contrast: 'hint' (#737373) on #E5E5E5 fails WCAG AA (3.8:1, requires 4.5:1)"
        )
        assert result.infos[0].message == "   Suggestion: Use #5C5C5C or similar for compliance"

    @pytest.mark.unit
    def test_large_text_threshold(self, make_structure):
        """Large text only needs 3:1."""
        result = validate_contrast(_text_on(make_structure, "#737373", "#E5E5E5", size="xl"))
        assert result.passed

    @pytest.mark.unit
    def test_inherited_background(self, make_structure):
        """Backgrounds are inherited through unstyled boxes."""
        structure = make_structure(
            [
                {
                    "id": "dark",
                    "type": "box",
                    "layout": {"background": "#525252"},
                    "children": [
                        {
                            "id": "inner",
                            "type": "box",
                            "children": [{"id": "label", "type": "text", "color": "#737373"}],
                        }
                    ],
                }
            ]
        )
        result = validate_contrast(structure)
        assert "on #525252" in result.errors[0].message

    @pytest.mark.unit
    def test_text_without_color_is_skipped(self, make_structure):
        """Only text with an explicit color is checked."""
        structure = make_structure([{"id": "t", "type": "text", "content": "x"}])
        assert validate_contrast(structure).issues == []

    @pytest.mark.unit
    def test_aaa_warning(self, make_structure):
        """With AAA enabled, AA-only text warns."""
        structure = _text_on(make_structure, "#737373", "#FFFFFF")
        result = validate_contrast(structure, ContrastRule(check_aaa=True))
        assert result.passed
        assert [(i.category, i.message) for i in result.warnings] == [
            ("contrast_aaa", "Contrast: 'hint' passes AA but fails AAA (4.7:1, requires 7.0:1 for AAA)")
        ]


class TestButtonContrast:
    """Tests for button labels."""

    @pytest.mark.unit
    def test_default_button_passes(self, make_structure):
        """White on the default black fill passes."""
        structure = make_structure([{"id": "go", "type": "button", "content": "Go"}])
        assert validate_contrast(structure).issues == []

    @pytest.mark.unit
    def test_light_button_fails(self, make_structure):
        """White text on a light gray button fails."""
        structure = make_structure(
            [{"id": "go", "type": "button", "content": "Go", "layout": {"background": "#E5E5E5"}}]
        )
        result = validate_contrast(structure)
        assert result.errors[0].message == (
            "Contrast: Button 'go' text (#FFFFFF) on #E5E5E5 fails WCAG AA (1.3:1, requires 4.5:1)"
        )

    @pytest.mark.unit
    def test_dark_label_on_light_button(self, make_structure):
        """An explicit label color replaces the white default."""
        structure = make_structure(
            [
                {
                    "id": "go",
                    "type": "button",
                    "content": "Go",
                    "color": "#000000",
                    "layout": {"background": "#E5E5E5"},
                }
            ]
        )
        assert validate_contrast(structure).passed


class TestSuggestion:
    """Tests for compliant color suggestions."""

    @pytest.mark.unit
    def test_darkens_first(self):
        """The first 10% darkening step that passes is returned."""
        assert suggest_compliant_color("#737373", "#E5E5E5", 4.5) == "#5C5C5C"

    @pytest.mark.unit
    def test_lightens_on_dark_background(self):
        """On dark backgrounds lightening is tried after darkening fails."""
        suggestion = suggest_compliant_color("#737373", "#525252", 4.5)
        assert suggestion
        assert int(suggestion[1:3], 16) > 0x73

    @pytest.mark.unit
    def test_no_suggestion(self):
        """Impossible ratios give an empty suggestion."""
        assert suggest_compliant_color("#777777", "#FFFFFF", 30.0) == ""
