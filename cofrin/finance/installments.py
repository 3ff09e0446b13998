"""Installment planning for credit-card purchases."""

from __future__ import annotations

import calendar
import logging
from collections.abc import Callable
from datetime import date, datetime
from decimal import Decimal
from typing import Any, TypeVar

from cofrin.exceptions import InvalidArgumentError
from cofrin.finance.parsing import quantize_money, to_decimal
from cofrin.models import InstallmentCharge, Transaction, TransactionType

logger = logging.getLogger(__name__)

_D = TypeVar("_D", date, datetime)


def add_months(value: _D, months: int) -> _D:
    """Advance a date by calendar months, clamping to the month's last day.

    ``add_months(date(2024, 1, 31), 1)`` is ``date(2024, 2, 29)``.
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def _validate_plan(total_amount: Any, count: Any) -> Decimal:
    total = to_decimal(total_amount)
    if total is None or total <= 0:
        raise InvalidArgumentError(f"Total amount must be positive, got {total_amount!r}")
    if isinstance(count, bool) or not isinstance(count, int) or count < 1:
        raise InvalidArgumentError(f"Installment count must be an integer >= 1, got {count!r}")
    return total


def split_installments(
    total_amount: Decimal | int | float | str,
    count: int,
    start_date: date | None = None,
) -> list[InstallmentCharge]:
    """Split a purchase into ``count`` equal monthly charges.

    The per-charge amount is ``total_amount / count`` rounded to cents and
    repeated on every charge. The rounding remainder is not moved onto the
    last charge, so the charges may sum to a cent or so less (or more)
    than the purchase; ``original_amount`` keeps the true total.

    Parameters
    ----------
    total_amount : Decimal | int | float | str
        Purchase total, must be positive.
    count : int
        Number of installments, at least 1.
    start_date : date | None
        Due date of the first charge (default: today). Charge ``i`` falls
        ``i`` calendar months later.

    Returns
    -------
    list[InstallmentCharge]
        Exactly ``count`` charges indexed from 1.

    Raises
    ------
    InvalidArgumentError
        If the total is not positive or the count is below 1.
    """
    total = _validate_plan(total_amount, count)
    if start_date is None:
        start_date = date.today()

    amount = quantize_money(total / count)
    plan = [
        InstallmentCharge(
            index=i + 1,
            count=count,
            amount=amount,
            due_date=add_months(start_date, i),
            original_amount=total,
        )
        for i in range(count)
    ]
    logger.debug("Split %s into %d installments of %s", total, count, amount)
    return plan


def installment_amount(total_amount: Any, count: Any) -> Decimal:
    """Preview the per-charge amount shown while filling the purchase form.

    Returns ``Decimal("0.00")`` when the inputs do not form a valid plan.
    """
    try:
        total = _validate_plan(total_amount, count)
    except InvalidArgumentError:
        return Decimal("0.00")
    return quantize_money(total / count)


def installment_description(description: str, index: int, count: int) -> str:
    """Label a sibling transaction, e.g. ``"TV (2/10)"``."""
    return f"{description} ({index}/{count})"


def build_installment_transactions(
    plan: list[InstallmentCharge],
    *,
    owner_id: str,
    description: str,
    category: str,
    credit_card_name: str,
    created_at: datetime,
    id_factory: Callable[[], str],
) -> list[Transaction]:
    """Turn an installment plan into sibling expense transactions.

    Each charge becomes an independent record booked on the card's name.

    Parameters
    ----------
    plan : list[InstallmentCharge]
        Output of :func:`split_installments`.
    id_factory : Callable[[], str]
        Produces a fresh transaction id per charge.
    """
    return [
        Transaction(
            transaction_id=id_factory(),
            owner_id=owner_id,
            transaction_type=TransactionType.EXPENSE,
            amount=charge.amount,
            description=installment_description(description, charge.index, charge.count),
            category=category,
            account_name=credit_card_name,
            created_at=created_at,
            is_installment=True,
            installment_index=charge.index,
            installment_count=charge.count,
            original_amount=charge.original_amount,
            installment_due_date=charge.due_date,
            credit_card_name=credit_card_name,
        )
        for charge in plan
    ]
