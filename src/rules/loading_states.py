"""Loading state rule.

Components may declare a data state; loading components should describe a
skeleton placeholder, and empty or error states should say something.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from src.model import Component, ComponentState, SkeletonType, Structure, iter_components

from .lib import Issue, RuleResult, Severity

logger = logging.getLogger(__name__)

VALID_STATES: tuple[str, ...] = tuple(s.value for s in ComponentState) + ("",)
VALID_SKELETON_TYPES: tuple[str, ...] = tuple(t.value for t in SkeletonType)


@dataclass
class LoadingStateRule:
    """Accepted state and skeleton element values."""

    valid_states: tuple[str, ...] = VALID_STATES
    valid_skeleton_types: tuple[str, ...] = VALID_SKELETON_TYPES


def _skeleton_issues(comp: Component, rule: LoadingStateRule) -> list[Issue]:
    issues: list[Issue] = []
    elements = comp.skeleton.elements if comp.skeleton else []
    if not elements:
        issues.append(
            Issue(
                Severity.WARNING,
                f"Loading State: '{comp.id}' has skeleton config but no elements defined",
                comp.id,
            )
        )
        return issues

    for i, element in enumerate(elements):
        if not element.type:
            issues.append(
                Issue(Severity.ERROR, f"Loading State: '{comp.id}' skeleton element {i} missing type", comp.id)
            )
        elif element.type not in rule.valid_skeleton_types:
            issues.append(
                Issue(
                    Severity.ERROR,
                    f"Loading State: '{comp.id}' skeleton element {i} has invalid type '{element.type}'",
                    comp.id,
                )
            )
            issues.append(
                Issue(
                    Severity.INFO,
                    f"   Valid skeleton types: {', '.join(rule.valid_skeleton_types)}",
                    comp.id,
                )
            )
        if element.type == SkeletonType.CIRCLE.value and element.size == 0:
            issues.append(
                Issue(
                    Severity.WARNING,
                    f"Loading State: '{comp.id}' skeleton circle element {i} should specify size",
                    comp.id,
                )
            )
        if element.type in (SkeletonType.TEXT.value, SkeletonType.RECT.value) and not element.width:
            issues.append(
                Issue(
                    Severity.WARNING,
                    f"Loading State: '{comp.id}' skeleton {element.type} element {i} should specify width",
                    comp.id,
                )
            )
    return issues


def validate_loading_states(structure: Structure, rule: LoadingStateRule | None = None) -> RuleResult:
    """Check state values, skeleton configuration and empty/error messaging."""
    rule = rule or LoadingStateRule()
    issues: list[Issue] = []

    for comp in iter_components(structure.components):
        state = comp.state
        if state not in rule.valid_states:
            issues.append(
                Issue(Severity.ERROR, f"Loading State: '{comp.id}' has invalid state '{state}'", comp.id)
            )
            issues.append(
                Issue(
                    Severity.INFO,
                    f"   Valid states: {', '.join(s for s in rule.valid_states if s)}",
                    comp.id,
                )
            )

        if state == ComponentState.LOADING.value:
            if comp.skeleton is None:
                issues.append(
                    Issue(
                        Severity.INFO,
                        f"Loading State: '{comp.id}' in loading state but missing skeleton configuration",
                        comp.id,
                    )
                )
            else:
                issues.extend(_skeleton_issues(comp, rule))

        silent = not comp.content and not comp.children
        if state == ComponentState.EMPTY.value and silent:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"Loading State: '{comp.id}' in empty state - consider adding empty state message",
                    comp.id,
                )
            )
        if state == ComponentState.ERROR.value and silent:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"Loading State: '{comp.id}' in error state - consider adding error message",
                    comp.id,
                )
            )

    logger.debug("Loading states: %d issues", len(issues))
    return RuleResult.from_issues(issues)


def count_components_by_state(structure: Structure) -> dict[str, int]:
    """Count components per state; an unset state counts as "default"."""
    counts = Counter(comp.state or ComponentState.DEFAULT.value for comp in iter_components(structure.components))
    return dict(counts)


__all__ = [
    "VALID_STATES",
    "VALID_SKELETON_TYPES",
    "LoadingStateRule",
    "validate_loading_states",
    "count_components_by_state",
]
