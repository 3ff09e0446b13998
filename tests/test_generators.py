"""Tests for sample-data generators."""

from decimal import Decimal

from cofrin.finance.cpf import is_valid
from cofrin.generators import (
    AccountGenerator,
    CreditCardGenerator,
    GoalGenerator,
    TransactionGenerator,
    UserGenerator,
)
from cofrin.models import (
    DEFAULT_ACCOUNT_NAME,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    TransactionType,
)


class TestUserGenerator:
    """Tests for UserGenerator."""

    def test_generate_user(self, seed: int) -> None:
        user = UserGenerator(seed=seed).generate()

        assert user.user_id
        assert user.name
        assert "@" in user.email
        assert len(user.cpf) == 11
        assert user.cpf.isdigit()

    def test_generated_cpfs_are_valid(self, seed: int) -> None:
        users = list(UserGenerator(seed=seed).generate_batch(20))

        assert all(is_valid(user.cpf) for user in users)
        assert len({user.user_id for user in users}) == 20

    def test_reproducible(self, seed: int) -> None:
        first = UserGenerator(seed=seed).generate()
        second = UserGenerator(seed=seed).generate()
        assert first.cpf == second.cpf
        assert first.name == second.name


class TestTransactionGenerator:
    """Tests for TransactionGenerator."""

    def test_generate_transaction(self, seed: int, sample_owner_id: str) -> None:
        tx = TransactionGenerator(seed=seed).generate(sample_owner_id)

        assert tx.owner_id == sample_owner_id
        assert tx.account_name == DEFAULT_ACCOUNT_NAME
        assert tx.amount > 0
        assert tx.is_installment is False
        if tx.transaction_type == TransactionType.INCOME:
            assert tx.category in INCOME_CATEGORIES
        else:
            assert tx.category in EXPENSE_CATEGORIES

    def test_generate_for_accounts(self, seed: int, sample_owner_id: str) -> None:
        names = [DEFAULT_ACCOUNT_NAME, "Inter"]
        txs = list(TransactionGenerator(seed=seed).generate_for_accounts(sample_owner_id, names, 30))

        assert len(txs) == 30
        assert {tx.account_name for tx in txs} <= set(names)
        assert all(tx.amount >= 0 for tx in txs)

    def test_generate_purchase(self, seed: int) -> None:
        description, category, total, count = TransactionGenerator(seed=seed).generate_purchase()

        assert description
        assert category in EXPENSE_CATEGORIES
        assert total >= Decimal("150")
        assert count in (1, 2, 3, 6, 12)


class TestAccountAndCardGenerators:
    """Tests for AccountGenerator and CreditCardGenerator."""

    def test_account_names_distinct(self, seed: int) -> None:
        names = AccountGenerator(seed=seed).generate_names(max_accounts=3)

        assert len(names) <= 3
        assert len(set(names)) == len(names)
        assert DEFAULT_ACCOUNT_NAME not in names

    def test_credit_card(self, seed: int, sample_owner_id: str) -> None:
        card = CreditCardGenerator(seed=seed).generate(sample_owner_id)

        assert card.owner_id == sample_owner_id
        assert 1 <= card.due_day <= 31
        assert card.limit >= 0
        assert card.name in CreditCardGenerator.CARD_NAMES

    def test_credit_card_explicit_name(self, seed: int, sample_owner_id: str) -> None:
        card = CreditCardGenerator(seed=seed).generate(sample_owner_id, name="Meu cartão")
        assert card.name == "Meu cartão"


class TestGoalGenerator:
    """Tests for GoalGenerator."""

    def test_generate_goal(self, seed: int, sample_owner_id: str) -> None:
        gen = GoalGenerator(seed=seed)
        goal = gen.generate(sample_owner_id)

        assert goal.completed is False
        assert goal.target > 0
        assert 0 <= goal.current < goal.target
        assert Decimal("0") < gen.generate_contribution(goal) <= goal.target
