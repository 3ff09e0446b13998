"""Savings goal model."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from cofrin.models.enums import GoalStatus


@dataclass
class Goal:
    """Savings target with accumulated progress.

    Once ``completed`` is set, ``current`` equals ``target`` and the goal
    never returns to the active state.
    """

    goal_id: str
    owner_id: str
    title: str
    target: Decimal
    current: Decimal
    created_at: datetime
    completed: bool = False
    completed_at: datetime | None = None

    @property
    def status(self) -> GoalStatus:
        return GoalStatus.COMPLETED if self.completed else GoalStatus.ACTIVE
