"""Balance and per-category aggregation over transaction lists.

Inputs are ``Transaction`` objects or plain mappings as stored by the app
(``type``/``amount``/``category``/``bank`` keys, or the Python field
names). Entries with a missing or unparseable field contribute zero
instead of failing the whole aggregation.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from decimal import Decimal
from typing import Any

from cofrin.finance.parsing import to_decimal
from cofrin.models import DEFAULT_ACCOUNT_NAME, CategoryTotal, TransactionType

logger = logging.getLogger(__name__)

# Python field name -> stored record key
_RECORD_ALIASES = {
    "transaction_type": "type",
    "account_name": "bank",
}


def _field(entry: Any, name: str) -> Any:
    if isinstance(entry, Mapping):
        if name in entry:
            return entry[name]
        alias = _RECORD_ALIASES.get(name)
        return entry.get(alias) if alias else None
    return getattr(entry, name, None)


def _type_of(entry: Any) -> TransactionType | None:
    raw = _field(entry, "transaction_type")
    if isinstance(raw, TransactionType):
        return raw
    try:
        return TransactionType(str(raw).lower())
    except ValueError:
        return None


def _amount_of(entry: Any) -> Decimal | None:
    amount = to_decimal(_field(entry, "amount"))
    if amount is None:
        logger.debug("Ignoring entry without a numeric amount: %r", entry)
    return amount


def compute_balance(transactions: Iterable[Any]) -> Decimal:
    """Sum incomes minus expenses.

    Parameters
    ----------
    transactions : Iterable[Any]
        Transactions of one account.

    Returns
    -------
    Decimal
        Net balance; ``Decimal("0")`` for an empty list.
    """
    balance = Decimal("0")
    for entry in transactions:
        kind = _type_of(entry)
        if kind is None:
            logger.debug("Ignoring entry without a transaction type: %r", entry)
            continue
        amount = _amount_of(entry)
        if amount is None:
            continue
        balance += amount if kind == TransactionType.INCOME else -amount
    return balance


def compute_category_totals(transactions: Iterable[Any]) -> dict[str, CategoryTotal]:
    """Group expense amounts by category.

    Income entries are left out. Each total carries its share of the sum of
    absolute category totals; when that sum is zero the result is empty.

    Parameters
    ----------
    transactions : Iterable[Any]
        Transactions of one account.

    Returns
    -------
    dict[str, CategoryTotal]
        Category name to total, in first-seen order.
    """
    sums: dict[str, Decimal] = {}
    for entry in transactions:
        if _type_of(entry) != TransactionType.EXPENSE:
            continue
        category = _field(entry, "category")
        if not isinstance(category, str) or not category:
            logger.debug("Ignoring entry without a category name: %r", entry)
            continue
        amount = _amount_of(entry)
        if amount is None:
            continue
        sums[category] = sums.get(category, Decimal("0")) + amount

    denominator = sum((abs(total) for total in sums.values()), Decimal("0"))
    if denominator == 0:
        return {}

    return {
        category: CategoryTotal(
            category=category,
            total=total,
            percentage_of_total=abs(total) / denominator,
        )
        for category, total in sums.items()
    }


def filter_by_account(
    transactions: Iterable[Any],
    account_name: str = DEFAULT_ACCOUNT_NAME,
) -> list[Any]:
    """Keep the transactions booked on ``account_name``."""
    return [entry for entry in transactions if _field(entry, "account_name") == account_name]
