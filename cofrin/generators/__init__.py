"""Sample-data generators."""

from cofrin.generators.account import AccountGenerator, CreditCardGenerator
from cofrin.generators.goal import GoalGenerator
from cofrin.generators.transaction import TransactionGenerator
from cofrin.generators.user import UserGenerator

__all__ = [
    "AccountGenerator",
    "CreditCardGenerator",
    "GoalGenerator",
    "TransactionGenerator",
    "UserGenerator",
]
