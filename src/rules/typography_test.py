"""Unit tests for the typography rule."""

import pytest

from src.rules import validate_typography
from src.rules.typography import get_scale_name, is_on_typography_scale


class TestScale:
    """Tests for the numeric scale helpers."""

    @pytest.mark.unit
    @pytest.mark.parametrize("size,expected", [(16, True), (20, True), (25, True), (22, True), (21, False)])
    def test_is_on_scale(self, size, expected):
        """Whole and half steps of a Major Third from 16px are on the scale."""
        assert is_on_typography_scale(size) is expected

    @pytest.mark.unit
    def test_scale_names(self):
        """Known ratios are named; others are custom."""
        assert get_scale_name(1.25) == "major-third"
        assert get_scale_name(1.618) == "golden-ratio"
        assert get_scale_name(1.3) == "custom"


class TestValidateTypography:
    """Tests for validate_typography."""

    @pytest.mark.unit
    def test_unknown_token(self, make_structure):
        """An unknown token warns and lists the valid ones."""
        structure = make_structure([{"id": "banner", "type": "text", "size": "huge"}])
        result = validate_typography(structure)
        assert result.passed
        assert [i.message for i in result.issues] == [
            "Typography: 'banner' uses unknown size token 'huge'",
            "   Valid size tokens: xs, sm, base, md, lg, xl, 2xl, 3xl, 4xl",
        ]

    @pytest.mark.unit
    def test_only_text_is_checked(self, make_structure):
        """Sizes on non-text components and unset sizes are ignored."""
        structure = make_structure(
            [{"id": "b", "type": "button", "size": "huge"}, {"id": "t", "type": "text"}]
        )
        assert validate_typography(structure).issues == []

    @pytest.mark.unit
    def test_dashboard(self, dashboard_structure):
        """Valid tokens produce no issues."""
        assert validate_typography(dashboard_structure).issues == []
