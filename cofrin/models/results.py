"""Value objects produced by the finance calculations."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from cofrin.models.goal import Goal


@dataclass(frozen=True)
class InstallmentCharge:
    """One scheduled charge of an installment plan (parcela)."""

    index: int  # 1, 2, 3, ...
    count: int
    amount: Decimal  # Rounded to 2 places
    due_date: date
    original_amount: Decimal  # Purchase total, kept for reconciliation


@dataclass(frozen=True)
class CategoryTotal:
    """Expense total of one category and its share of all expenses."""

    category: str
    total: Decimal
    percentage_of_total: Decimal  # Fraction in [0, 1]


@dataclass(frozen=True)
class ContributionResult:
    """Outcome of adding money to a goal."""

    goal: Goal
    just_completed: bool
