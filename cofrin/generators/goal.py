"""Goal generator."""

import random
from datetime import datetime, timedelta
from decimal import Decimal

from cofrin.generators.base import BaseGenerator
from cofrin.models import Goal


class GoalGenerator(BaseGenerator):
    """Generate active savings goals."""

    TITLES = [
        "Reserva de emergência",
        "Viagem",
        "Carro novo",
        "Notebook",
        "Entrada do apartamento",
        "Curso",
    ]

    def generate(self, owner_id: str) -> Goal:
        """Generate an active goal with partial progress."""
        target = Decimal(random.choice([500, 1000, 3000, 5000, 10000, 30000]))
        current = (target * Decimal(str(round(random.uniform(0, 0.9), 2)))).quantize(
            Decimal("0.01")
        )
        return Goal(
            goal_id=self.fake.uuid4(),
            owner_id=owner_id,
            title=random.choice(self.TITLES),
            target=target,
            current=current,
            created_at=datetime.now() - timedelta(days=random.randint(0, 365)),
        )

    def generate_contribution(self, goal: Goal) -> Decimal:
        """Pick a contribution between 10% and 60% of the goal's target."""
        return (goal.target * Decimal(str(round(random.uniform(0.1, 0.6), 2)))).quantize(
            Decimal("0.01")
        )
