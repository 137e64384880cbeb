"""Gestalt proximity and similarity rule.

Related siblings should sit close together and unrelated siblings further
apart; components of the same kind should look alike.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.model import Component, ComponentType, Structure, iter_components

from .lib import Issue, RuleResult, Severity, first_token

logger = logging.getLogger(__name__)


@dataclass
class GestaltRule:
    """Thresholds for the Gestalt rule."""

    intra_group_spacing: int = 8
    inter_group_spacing: int = 24
    min_group_size: int = 2
    similarity_check: bool = True


@dataclass
class SiblingPair:
    """Two siblings and the spacing their parent puts between them."""

    first: Component
    second: Component
    spacing: int
    related: bool


def are_related(a: Component, b: Component) -> bool:
    """Siblings are related by a shared ID prefix, a shared role, or a label pairing."""
    if "-" in a.id and "-" in b.id and first_token(a.id) == first_token(b.id):
        return True
    if a.type == b.type and a.role and a.role == b.role:
        return True
    text_input = {a.type, b.type} == {ComponentType.TEXT.value, ComponentType.INPUT.value}
    return text_input and ("label" in a.id.lower() or "label" in b.id.lower())


def sibling_pairs(structure: Structure) -> list[SiblingPair]:
    """Every sibling pair (i < j) in traversal order."""
    pairs: list[SiblingPair] = []

    def visit(siblings: list[Component], spacing: int) -> None:
        for i, comp in enumerate(siblings):
            for other in siblings[i + 1 :]:
                pairs.append(SiblingPair(comp, other, spacing, are_related(comp, other)))
            if comp.children:
                visit(comp.children, comp.layout.gap)

    visit(structure.components, structure.layout.spacing)
    return pairs


def similarity_groups(structure: Structure) -> dict[str, list[Component]]:
    """Group every component by type, or type-role when a role is set."""
    groups: dict[str, list[Component]] = {}
    for comp in iter_components(structure.components):
        key = f"{comp.type}-{comp.role}" if comp.role else comp.type
        groups.setdefault(key, []).append(comp)
    return groups


def styling_inconsistencies(components: list[Component]) -> list[str]:
    """Describe how a group of similar components differs in styling."""
    found: list[str] = []
    if len(components) < 2:
        return found
    if len({c.size for c in components if c.size}) > 1:
        found.append("inconsistent text sizes")
    if len({c.color for c in components if c.color}) > 1:
        found.append("inconsistent colors")
    # Two padding values are tolerated
    if len({c.layout.padding for c in components if c.layout.padding > 0}) > 2:
        found.append("inconsistent padding")
    return found


def proximity_groups(structure: Structure, rule: GestaltRule) -> dict[str, list[Component]]:
    """Containers whose gap is tight enough to read as one group.

    Groups are keyed by the container's role, or its ID when it has none;
    a later container with the same key replaces an earlier one.
    """
    groups: dict[str, list[Component]] = {}
    for comp in iter_components(structure.components):
        if comp.children and comp.layout.gap <= rule.intra_group_spacing * 2:
            groups[comp.role or comp.id] = list(comp.children)
    return groups


def validate_gestalt(structure: Structure, rule: GestaltRule | None = None) -> RuleResult:
    """Check sibling spacing against relatedness and styling of similar components."""
    rule = rule or GestaltRule()
    issues: list[Issue] = []
    pairs = sibling_pairs(structure)

    for pair in pairs:
        if pair.related and pair.spacing > rule.intra_group_spacing * 2:
            issues.append(
                Issue(
                    Severity.WARNING,
                    f"Proximity: Related components '{pair.first.id}' and '{pair.second.id}' "
                    f"have large spacing ({pair.spacing}px) - consider reducing to "
                    f"{rule.intra_group_spacing}px for better grouping",
                    pair.first.id,
                )
            )
    for pair in pairs:
        if not pair.related and pair.spacing < rule.inter_group_spacing:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"Suggestion: Increase spacing to {rule.inter_group_spacing}px between "
                    f"unrelated components '{pair.first.id}' and '{pair.second.id}' "
                    f"(currently {pair.spacing}px)",
                    pair.first.id,
                )
            )

    if rule.similarity_check:
        for name, members in similarity_groups(structure).items():
            if len(members) < rule.min_group_size:
                continue
            for problem in styling_inconsistencies(members):
                issues.append(
                    Issue(
                        Severity.WARNING,
                        f"Similarity: {problem} in group '{name}' - consider using consistent styling",
                        name,
                    )
                )

    for group_id, members in proximity_groups(structure, rule).items():
        if len(members) >= rule.min_group_size:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"✓ Detected well-formed group '{group_id}' with {len(members)} "
                    "components using consistent spacing",
                    group_id,
                )
            )

    if not issues:
        issues.append(Issue(Severity.INFO, "✓ Component grouping follows Gestalt proximity principles"))
        if rule.similarity_check:
            issues.append(Issue(Severity.INFO, "✓ Similar components use consistent styling"))

    logger.debug("Gestalt: %d sibling pairs, %d issues", len(pairs), len(issues))
    return RuleResult.from_issues(issues)


__all__ = [
    "GestaltRule",
    "SiblingPair",
    "are_related",
    "sibling_pairs",
    "similarity_groups",
    "styling_inconsistencies",
    "proximity_groups",
    "validate_gestalt",
]
