"""Unit tests for the Gestalt proximity and similarity rule."""

import pytest

from src.model import Component

from src.rules import GestaltRule, Severity, validate_gestalt
from src.rules.gestalt import are_related, sibling_pairs, styling_inconsistencies


class TestRelatedness:
    """Tests for sibling relatedness."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ({"id": "email-label", "type": "text"}, {"id": "email-input", "type": "input"}, True),
            ({"id": "card-1", "type": "box", "role": "card"}, {"id": "tile", "type": "box", "role": "card"}, True),
            ({"id": "caption", "type": "text"}, {"id": "name-label", "type": "input"}, True),
            ({"id": "caption", "type": "text"}, {"id": "name", "type": "input"}, False),
            ({"id": "header", "type": "box"}, {"id": "header", "type": "box"}, False),
            ({"id": "a", "type": "box", "role": "card"}, {"id": "b", "type": "text", "role": "card"}, False),
        ],
    )
    def test_are_related(self, a, b, expected):
        """Shared ID prefix, shared role, or a label pairing relate siblings."""
        assert are_related(Component(**a), Component(**b)) is expected


class TestProximity:
    """Tests for spacing between siblings."""

    @pytest.mark.unit
    def test_related_far_apart(self, make_structure):
        """Related siblings more than 16px apart warn."""
        structure = make_structure(
            [
                {
                    "id": "field",
                    "type": "box",
                    "layout": {"gap": 24},
                    "children": [
                        {"id": "email-label", "type": "text", "content": "Email"},
                        {"id": "email-input", "type": "input"},
                    ],
                }
            ]
        )
        result = validate_gestalt(structure)
        assert result.passed
        assert [i.message for i in result.issues] == [
            "Proximity: Related components 'email-label' and 'email-input' have large "
            "spacing (24px) - consider reducing to 8px for better grouping"
        ]
        assert result.issues[0].component == "email-label"

    @pytest.mark.unit
    def test_unrelated_too_close(self, make_structure):
        """Unrelated siblings closer than 24px get an info."""
        structure = make_structure(
            [{"id": "header", "type": "box"}, {"id": "footer", "type": "box"}],
            layout={"spacing": 8},
        )
        result = validate_gestalt(structure)
        assert len(result.issues) == 1
        assert result.issues[0].severity == Severity.INFO
        assert result.issues[0].message == (
            "Suggestion: Increase spacing to 24px between unrelated components "
            "'header' and 'footer' (currently 8px)"
        )

    @pytest.mark.unit
    def test_pairs_are_not_duplicated(self, make_structure):
        """Sibling pairs under a root container are enumerated once."""
        structure = make_structure(
            [
                {
                    "id": "group",
                    "type": "box",
                    "layout": {"gap": 24},
                    "children": [{"id": "a-x", "type": "box"}, {"id": "a-y", "type": "box"}],
                }
            ]
        )
        pairs = sibling_pairs(structure)
        assert [(p.first.id, p.second.id, p.spacing) for p in pairs] == [("a-x", "a-y", 24)]
        assert len(validate_gestalt(structure).warnings) == 1

    @pytest.mark.unit
    def test_well_formed_group(self, make_structure):
        """Tightly spaced containers are reported as groups by role."""
        structure = make_structure(
            [
                {
                    "id": "links",
                    "type": "box",
                    "role": "toolbar",
                    "layout": {"gap": 8},
                    "children": [
                        {"id": "nav-home", "type": "text", "content": "Home"},
                        {"id": "nav-about", "type": "text", "content": "About"},
                    ],
                }
            ]
        )
        result = validate_gestalt(structure)
        assert [i.message for i in result.issues] == [
            "✓ Detected well-formed group 'toolbar' with 2 components using consistent spacing"
        ]


class TestSimilarity:
    """Tests for consistent styling of similar components."""

    @pytest.mark.unit
    def test_inconsistent_text_sizes(self, make_structure):
        """Texts of mixed sizes in one group warn."""
        structure = make_structure(
            [
                {"id": "a", "type": "text", "size": "sm"},
                {"id": "b", "type": "text", "size": "lg"},
            ],
            layout={"spacing": 24},
        )
        result = validate_gestalt(structure)
        assert [(i.message, i.component) for i in result.warnings] == [
            ("Similarity: inconsistent text sizes in group 'text' - consider using consistent styling", "text")
        ]

    @pytest.mark.unit
    def test_similarity_check_disabled(self, make_structure):
        """Similarity can be switched off."""
        structure = make_structure(
            [
                {"id": "a", "type": "text", "size": "sm"},
                {"id": "b", "type": "text", "size": "lg"},
            ],
            layout={"spacing": 24},
        )
        result = validate_gestalt(structure, GestaltRule(similarity_check=False))
        assert [i.message for i in result.issues] == [
            "✓ Component grouping follows Gestalt proximity principles"
        ]

    @pytest.mark.unit
    def test_padding_tolerance(self):
        """Two padding values are tolerated, three are not."""
        two = [Component(id=f"c{p}", type="box", layout={"padding": p}) for p in (8, 16, 16)]
        three = [Component(id=f"c{p}", type="box", layout={"padding": p}) for p in (8, 16, 24)]
        assert styling_inconsistencies(two) == []
        assert styling_inconsistencies(three) == ["inconsistent padding"]

    @pytest.mark.unit
    def test_colors(self):
        """Mixed colors are inconsistent; unset colors are ignored."""
        comps = [
            Component(id="a", type="text", color="#000000"),
            Component(id="b", type="text", color="#737373"),
            Component(id="c", type="text"),
        ]
        assert styling_inconsistencies(comps) == ["inconsistent colors"]


class TestSuccess:
    """Tests for the success messages."""

    @pytest.mark.unit
    def test_minimal_structure(self, minimal_structure):
        """A lone box passes with both success infos."""
        result = validate_gestalt(minimal_structure)
        assert result.passed
        assert [i.message for i in result.issues] == [
            "✓ Component grouping follows Gestalt proximity principles",
            "✓ Similar components use consistent styling",
        ]
