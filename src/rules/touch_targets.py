"""Touch target rule.

Interactive elements must be at least 44x44 and keep a minimum distance from
one another; destructive actions need twice that distance. Positions come
from a simplified cursor walk over explicit sizes rather than the full
layout engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from src.model import Component, Direction, Structure

from .lib import Issue, RuleResult, Severity, is_dangerous_action, is_interactive

logger = logging.getLogger(__name__)

DEFAULT_TARGET_WIDTH = 100
DEFAULT_TARGET_HEIGHT = 44
REACHABLE_Y = 600


@dataclass
class TouchTargetRule:
    """Thresholds for the touch target rule."""

    min_size: int = 44
    min_spacing: int = 8
    dangerous_spacing: int = 16
    frequent_actions: tuple[str, ...] = ()


@dataclass
class TargetPosition:
    """Estimated placement of an interactive element."""

    id: str
    x: int
    y: int
    width: int
    height: int
    dangerous: bool = False

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


def target_spacing(a: TargetPosition, b: TargetPosition) -> int:
    """Gap between two targets that share a row or a column, else -1.

    Side-by-side targets whose vertical extents overlap report the
    horizontal gap; stacked targets whose horizontal extents overlap
    report the vertical gap.
    """
    rows_overlap = a.bottom > b.y and a.y < b.bottom
    cols_overlap = a.right > b.x and a.x < b.right
    if a.right <= b.x and rows_overlap:
        return b.x - a.right
    if b.right <= a.x and rows_overlap:
        return a.x - b.right
    if a.bottom <= b.y and cols_overlap:
        return b.y - a.bottom
    if b.bottom <= a.y and cols_overlap:
        return a.y - b.bottom
    return -1


def collect_targets(structure: Structure) -> list[TargetPosition]:
    """Estimate positions of every interactive element in document order."""
    targets: list[TargetPosition] = []

    def visit(comp: Component, x: int, y: int) -> None:
        if is_interactive(comp):
            targets.append(
                TargetPosition(
                    comp.id,
                    x,
                    y,
                    comp.layout.width or DEFAULT_TARGET_WIDTH,
                    comp.layout.height or DEFAULT_TARGET_HEIGHT,
                    is_dangerous_action(comp),
                )
            )
        direction = comp.layout.direction
        child_x, child_y = x, y
        for child in comp.children:
            if direction == Direction.VERTICAL.value:
                child_y += comp.layout.gap
            elif direction == Direction.HORIZONTAL.value:
                child_x += comp.layout.gap
            visit(child, child_x, child_y)
            if direction == Direction.VERTICAL.value:
                child_y += child.layout.height
            elif direction == Direction.HORIZONTAL.value:
                child_x += child.layout.width

    cursor = 0
    for comp in structure.components:
        visit(comp, 0, cursor)
        cursor += comp.layout.height + structure.layout.spacing
    return targets


def validate_touch_targets(structure: Structure, rule: TouchTargetRule | None = None) -> RuleResult:
    """Check target sizes and the spacing between neighbouring targets."""
    rule = rule or TouchTargetRule()
    issues: list[Issue] = []
    targets = collect_targets(structure)

    for t in targets:
        if t.width < rule.min_size or t.height < rule.min_size:
            issues.append(
                Issue(
                    Severity.ERROR,
                    f"Touch Target: '{t.id}' is {t.width}x{t.height}px "
                    f"(requires {rule.min_size}x{rule.min_size}px minimum)",
                    t.id,
                )
            )

    for i, a in enumerate(targets):
        for b in targets[i + 1 :]:
            spacing = target_spacing(a, b)
            dangerous = a.dangerous or b.dangerous
            required = rule.dangerous_spacing if dangerous else rule.min_spacing
            if 0 <= spacing < required:
                issues.append(
                    Issue(
                        Severity.ERROR if dangerous else Severity.WARNING,
                        f"Spacing: '{a.id}' only {spacing}px from '{b.id}' (requires "
                        f"{required}px for {'destructive action' if dangerous else 'interactive elements'})",
                        a.id,
                    )
                )

    by_id: dict[str, TargetPosition] = {}
    for t in targets:
        by_id.setdefault(t.id, t)
    for action in rule.frequent_actions:
        target = by_id.get(action)
        if target is not None and target.y > REACHABLE_Y:
            issues.append(
                Issue(
                    Severity.INFO,
                    f"Frequent action '{action}' may be hard to reach (positioned at Y={target.y}px)",
                    action,
                )
            )

    if not issues:
        issues.append(Issue(Severity.INFO, "✓ All interactive elements meet touch target requirements"))
        if len(targets) > 1:
            issues.append(Issue(Severity.INFO, "✓ Spacing between interactive elements is adequate"))

    logger.debug("Touch targets: %d targets, %d issues", len(targets), len(issues))
    return RuleResult.from_issues(issues)


__all__ = [
    "TouchTargetRule",
    "TargetPosition",
    "target_spacing",
    "collect_targets",
    "validate_touch_targets",
]
