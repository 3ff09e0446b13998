"""Domain models for cofrin."""

from cofrin.models.account import DEFAULT_ACCOUNT_NAME, Account, CreditCard
from cofrin.models.enums import GoalStatus, TransactionType
from cofrin.models.goal import Goal
from cofrin.models.results import CategoryTotal, ContributionResult, InstallmentCharge
from cofrin.models.transaction import (
    DEFAULT_CATEGORIES,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    Transaction,
    categories_for,
)
from cofrin.models.user import User

__all__ = [
    "DEFAULT_ACCOUNT_NAME",
    "DEFAULT_CATEGORIES",
    "EXPENSE_CATEGORIES",
    "INCOME_CATEGORIES",
    "Account",
    "CategoryTotal",
    "ContributionResult",
    "CreditCard",
    "Goal",
    "GoalStatus",
    "InstallmentCharge",
    "Transaction",
    "TransactionType",
    "User",
    "categories_for",
]
