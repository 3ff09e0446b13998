"""Account and credit card generators."""

import random
from datetime import datetime
from decimal import Decimal

from cofrin.generators.base import BaseGenerator
from cofrin.models import CreditCard


class AccountGenerator(BaseGenerator):
    """Pick account ("bank") names for an owner."""

    BANK_NAMES = [
        "Nubank",
        "Itaú",
        "Bradesco",
        "Banco do Brasil",
        "Santander",
        "Caixa",
        "Inter",
        "C6 Bank",
    ]

    def generate_names(self, max_accounts: int = 2) -> list[str]:
        """Return 0..max_accounts distinct account names."""
        count = random.randint(0, min(max_accounts, len(self.BANK_NAMES)))
        return random.sample(self.BANK_NAMES, count)


class CreditCardGenerator(BaseGenerator):
    """Generate credit cards."""

    CARD_NAMES = ["Nubank Roxinho", "Itaú Click", "Inter Gold", "C6 Carbon", "Santander Free"]

    # Limit tiers (BRL)
    LIMITS = [500, 1000, 2500, 5000, 10000, 20000]

    def generate(self, owner_id: str, name: str | None = None) -> CreditCard:
        """Generate a single card for an owner.

        Parameters
        ----------
        owner_id : str
            Owner of the card.
        name : str | None
            Card name; picked at random when omitted.

        Returns
        -------
        CreditCard
            Generated card.
        """
        return CreditCard(
            card_id=self.fake.uuid4(),
            owner_id=owner_id,
            name=name or random.choice(self.CARD_NAMES),
            due_day=random.randint(1, 28),
            limit=Decimal(random.choice(self.LIMITS)),
            created_at=datetime.now(),
        )
