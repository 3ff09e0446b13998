"""Transaction generator."""

import random
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterator

from cofrin.generators.base import BaseGenerator
from cofrin.models import (
    DEFAULT_ACCOUNT_NAME,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    Transaction,
    TransactionType,
)


class TransactionGenerator(BaseGenerator):
    """Generate income and expense transactions."""

    INCOME_RATIO = 0.25

    # Amount ranges per category (BRL)
    AMOUNT_RANGES = {
        "Alimentação": (15, 400),
        "Transporte": (5, 250),
        "Lazer": (20, 600),
        "Moradia": (300, 3500),
        "Saúde": (30, 900),
        "Outros": (5, 500),
        "Salário": (1500, 15000),
        "Renda Extra": (100, 2000),
        "Freelance": (300, 6000),
        "Investimentos": (10, 1500),
        "Presente": (50, 500),
    }

    def generate(
        self,
        owner_id: str,
        account_name: str = DEFAULT_ACCOUNT_NAME,
        created_at: datetime | None = None,
    ) -> Transaction:
        """Generate a single non-installment transaction.

        Parameters
        ----------
        owner_id : str
            Owner of the transaction.
        account_name : str
            Account the transaction is booked on.
        created_at : datetime | None
            Timestamp (default: a random moment in the last 90 days).

        Returns
        -------
        Transaction
            Generated transaction with a non-negative amount.
        """
        if random.random() < self.INCOME_RATIO:
            transaction_type = TransactionType.INCOME
            category = random.choice(INCOME_CATEGORIES)
        else:
            transaction_type = TransactionType.EXPENSE
            category = random.choice(EXPENSE_CATEGORIES)

        low, high = self.AMOUNT_RANGES[category]
        amount = Decimal(str(round(random.uniform(low, high), 2)))

        if created_at is None:
            created_at = datetime.now() - timedelta(minutes=random.randint(0, 90 * 24 * 60))

        return Transaction(
            transaction_id=self.fake.uuid4(),
            owner_id=owner_id,
            transaction_type=transaction_type,
            amount=amount,
            description=self.fake.sentence(nb_words=3).rstrip("."),
            category=category,
            account_name=account_name,
            created_at=created_at,
        )

    def generate_for_accounts(
        self,
        owner_id: str,
        account_names: list[str],
        count: int,
    ) -> Iterator[Transaction]:
        """Generate ``count`` transactions spread over the given accounts."""
        for _ in range(count):
            yield self.generate(owner_id, random.choice(account_names))

    def generate_purchase(self) -> tuple[str, str, Decimal, int]:
        """Generate a credit-card purchase as (description, category, total, count)."""
        category = random.choice(EXPENSE_CATEGORIES)
        total = Decimal(str(round(random.uniform(150, 5000), 2)))
        count = random.choice([1, 2, 3, 6, 12])
        return self.fake.word().capitalize(), category, total, count
