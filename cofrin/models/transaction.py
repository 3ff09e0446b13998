"""Transaction model."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal

from cofrin.models.enums import TransactionType

EXPENSE_CATEGORIES = ("Alimentação", "Transporte", "Lazer", "Moradia", "Saúde", "Outros")
INCOME_CATEGORIES = ("Salário", "Renda Extra", "Freelance", "Investimentos", "Presente", "Outros")

DEFAULT_CATEGORIES = {
    TransactionType.INCOME: "Salário",
    TransactionType.EXPENSE: "Outros",
}


def categories_for(transaction_type: TransactionType) -> tuple[str, ...]:
    """Return the category catalogue offered for a transaction type."""
    if transaction_type == TransactionType.INCOME:
        return INCOME_CATEGORIES
    return EXPENSE_CATEGORIES


@dataclass
class Transaction:
    """A single recorded money movement.

    The amount is never negative: direction is carried by
    ``transaction_type``. An installment plan is stored as N sibling
    transactions, each flagged with ``is_installment``.
    """

    transaction_id: str
    owner_id: str
    transaction_type: TransactionType
    amount: Decimal
    description: str
    category: str
    account_name: str
    created_at: datetime

    # Installment fields (credit-card purchases only)
    is_installment: bool = False
    installment_index: int | None = None  # 1..installment_count
    installment_count: int | None = None
    original_amount: Decimal | None = None  # Purchase total before splitting
    installment_due_date: date | None = None
    credit_card_name: str | None = None
