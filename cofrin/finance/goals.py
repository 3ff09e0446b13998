"""Goal progress and completion tracking."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from cofrin.exceptions import InvalidArgumentError
from cofrin.finance.parsing import to_decimal
from cofrin.models import ContributionResult, Goal

logger = logging.getLogger(__name__)


def progress_percent(current: Any, target: Any) -> int:
    """Return goal progress as an integer percentage in ``[0, 100]``.

    A missing ``current`` counts as zero and a non-positive ``target``
    yields 0.
    """
    current_value = to_decimal(current) or Decimal("0")
    target_value = to_decimal(target)
    if target_value is None or target_value <= 0:
        return 0
    pct = (100 * current_value / target_value).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return max(0, min(100, int(pct)))


def apply_contribution(
    goal: Goal,
    amount: Decimal | int | float | str,
    now: datetime | None = None,
) -> ContributionResult:
    """Add money to a goal, completing it when the target is reached.

    The input goal is not modified. Completion clamps ``current`` to
    ``target`` and happens once: an already completed goal stays completed
    at its target and ``just_completed`` is False.

    Parameters
    ----------
    goal : Goal
        Goal receiving the contribution.
    amount : Decimal | int | float | str
        Positive amount.
    now : datetime | None
        Completion timestamp (default: current time).

    Returns
    -------
    ContributionResult
        Updated goal and whether this contribution completed it.

    Raises
    ------
    InvalidArgumentError
        If ``amount`` is not positive.
    """
    value = to_decimal(amount)
    if value is None or value <= 0:
        raise InvalidArgumentError(f"Contribution must be positive, got {amount!r}")

    if goal.completed:
        return ContributionResult(goal=replace(goal, current=goal.target), just_completed=False)

    new_current = (to_decimal(goal.current) or Decimal("0")) + value
    if new_current >= goal.target:
        logger.debug("Goal %s reached its target of %s", goal.goal_id, goal.target)
        updated = replace(
            goal,
            current=goal.target,
            completed=True,
            completed_at=now or datetime.now(),
        )
        return ContributionResult(goal=updated, just_completed=True)

    return ContributionResult(goal=replace(goal, current=new_current), just_completed=False)


def partition_goals(goals: Iterable[Goal]) -> tuple[list[Goal], list[Goal]]:
    """Split goals into (active, completed), keeping their order."""
    active: list[Goal] = []
    completed: list[Goal] = []
    for goal in goals:
        (completed if goal.completed else active).append(goal)
    return active, completed
