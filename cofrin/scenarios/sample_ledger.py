"""Sample ledger scenario: seeded users with accounts, purchases and goals."""

import logging
import random
from datetime import date
from typing import Any

from cofrin.config import SampleConfig
from cofrin.finance.goals import progress_percent
from cofrin.finance.parsing import format_currency
from cofrin.generators import (
    AccountGenerator,
    CreditCardGenerator,
    GoalGenerator,
    TransactionGenerator,
    UserGenerator,
)
from cofrin.store import LedgerStore

logger = logging.getLogger(__name__)


class SampleLedgerScenario:
    """Populate a ``LedgerStore`` the way app users would.

    Every user gets:
    - a few named accounts besides the default one
    - plain income/expense transactions spread over those accounts
    - one credit card with installment purchases
    - savings goals, some of them receiving contributions
    """

    def __init__(
        self,
        config: SampleConfig | None = None,
        seed: int | None = None,
        currency_symbol: str = "R$",
    ) -> None:
        self.config = config or SampleConfig()
        self.seed = seed
        self.currency_symbol = currency_symbol

        if seed is not None:
            random.seed(seed)

        locale = self.config.locale
        self.store = LedgerStore()
        self._user_gen = UserGenerator(seed=seed, locale=locale)
        self._account_gen = AccountGenerator(seed=seed, locale=locale)
        self._card_gen = CreditCardGenerator(seed=seed, locale=locale)
        self._transaction_gen = TransactionGenerator(seed=seed, locale=locale)
        self._goal_gen = GoalGenerator(seed=seed, locale=locale)

    def generate(self) -> LedgerStore:
        """Generate all data for the scenario.

        Returns
        -------
        LedgerStore
            Store containing all generated data.
        """
        logger.info("Starting sample ledger scenario: %d users", self.config.num_owners)

        for user in self._user_gen.generate_batch(self.config.num_owners):
            self.store.add_user(user)
            self._generate_profile(user.user_id)

        logger.info("Generated sample ledger: %s", self.store.summary())
        return self.store

    def _generate_profile(self, owner_id: str) -> None:
        for name in self._account_gen.generate_names():
            self.store.add_account(owner_id, name)

        for transaction in self._transaction_gen.generate_for_accounts(
            owner_id,
            self.store.account_names(owner_id),
            self.config.transactions_per_owner,
        ):
            self.store.add_transaction(transaction)

        card = self._card_gen.generate(owner_id)
        self.store.add_credit_card(card)
        for _ in range(self.config.installment_purchases_per_owner):
            description, category, total, count = self._transaction_gen.generate_purchase()
            self.store.record_installment_purchase(
                owner_id, card.name, total, count, description, category, start_date=date.today()
            )

        for _ in range(self.config.goals_per_owner):
            goal = self._goal_gen.generate(owner_id)
            self.store.add_goal(goal)
            if random.random() < 0.5:
                self.store.contribute_to_goal(
                    goal.goal_id,
                    self._goal_gen.generate_contribution(goal),
                    from_balance=random.random() < 0.5,
                )

    def summaries(self) -> list[dict[str, Any]]:
        """Compute per-user dashboard figures from the generated store."""
        result = []
        for owner_id, user in self.store.users.items():
            accounts = []
            for name in self.store.account_names(owner_id) + [
                card.name for card in self.store.get_owner_cards(owner_id)
            ]:
                accounts.append(
                    {
                        "account_name": name,
                        "balance": format_currency(
                            self.store.balance(owner_id, name), self.currency_symbol
                        ),
                        "categories": list(self.store.category_totals(owner_id, name).values()),
                    }
                )

            active, completed = self.store.get_owner_goals(owner_id)
            goals = [
                {
                    "title": goal.title,
                    "status": goal.status,
                    "progress_percent": progress_percent(goal.current, goal.target),
                }
                for goal in active + completed
            ]

            result.append({"user_id": owner_id, "name": user.name, "accounts": accounts, "goals": goals})
        return result

    def export(self, sinks: list[Any]) -> None:
        """Write records and summaries to every sink."""
        for sink in sinks:
            sink.write_batch("users", list(self.store.users.values()))
            sink.write_batch("accounts", list(self.store.accounts.values()))
            sink.write_batch("credit_cards", list(self.store.credit_cards.values()))
            sink.write_batch("transactions", list(self.store.transactions.values()))
            sink.write_batch("goals", list(self.store.goals.values()))
            sink.write_batch("summaries", self.summaries())

        logger.info("Exported sample ledger to %d sinks", len(sinks))
