"""Pytest configuration and fixtures."""

from datetime import datetime
from decimal import Decimal

import pytest

from cofrin.models import DEFAULT_ACCOUNT_NAME, Goal, Transaction, TransactionType, User
from cofrin.store import LedgerStore


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_owner_id() -> str:
    """Sample owner ID."""
    return "user-test-001"


@pytest.fixture
def valid_cpf() -> str:
    """Valid reference CPF."""
    return "529.982.247-25"


@pytest.fixture
def sample_user(sample_owner_id: str) -> User:
    """Sample user."""
    return User(
        user_id=sample_owner_id,
        name="Maria Souza",
        cpf="52998224725",
        email="maria@example.com",
        created_at=datetime(2024, 1, 1),
    )


@pytest.fixture
def store(sample_user: User) -> LedgerStore:
    """Store with one registered user and sequential ids."""
    counter = iter(range(1, 10_000))
    ledger = LedgerStore(id_factory=lambda: f"id-{next(counter):04d}")
    ledger.add_user(sample_user)
    return ledger


@pytest.fixture
def make_transaction(sample_owner_id: str):
    """Factory for transactions on the default account."""

    def _make(
        transaction_type: TransactionType,
        amount: str,
        category: str = "Outros",
        account_name: str = DEFAULT_ACCOUNT_NAME,
        transaction_id: str = "tx-001",
    ) -> Transaction:
        return Transaction(
            transaction_id=transaction_id,
            owner_id=sample_owner_id,
            transaction_type=transaction_type,
            amount=Decimal(amount),
            description="test",
            category=category,
            account_name=account_name,
            created_at=datetime(2024, 5, 1, 12, 0),
        )

    return _make


@pytest.fixture
def active_goal(sample_owner_id: str) -> Goal:
    """Goal at 90 of 100."""
    return Goal(
        goal_id="goal-001",
        owner_id=sample_owner_id,
        title="Viagem",
        target=Decimal("100"),
        current=Decimal("90"),
        created_at=datetime(2024, 1, 1),
    )


@pytest.fixture
def completed_goal(sample_owner_id: str) -> Goal:
    """Goal already reached at 100 of 100."""
    return Goal(
        goal_id="goal-002",
        owner_id=sample_owner_id,
        title="Carro",
        target=Decimal("100"),
        current=Decimal("100"),
        created_at=datetime(2024, 1, 1),
        completed=True,
        completed_at=datetime(2024, 3, 1),
    )
