"""Tests for installment planning."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from cofrin.exceptions import InvalidArgumentError
from cofrin.finance.installments import (
    add_months,
    build_installment_transactions,
    installment_amount,
    installment_description,
    split_installments,
)
from cofrin.models import TransactionType


class TestAddMonths:
    """Tests for calendar month arithmetic."""

    def test_same_day_next_month(self) -> None:
        assert add_months(date(2024, 3, 15), 1) == date(2024, 4, 15)

    def test_clamps_to_leap_february(self) -> None:
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_clamps_to_common_february(self) -> None:
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_crosses_year(self) -> None:
        assert add_months(date(2024, 11, 30), 3) == date(2025, 2, 28)

    def test_zero_months(self) -> None:
        assert add_months(date(2024, 5, 31), 0) == date(2024, 5, 31)

    def test_keeps_time_of_datetime(self) -> None:
        result = add_months(datetime(2024, 8, 31, 14, 30), 1)
        assert result == datetime(2024, 9, 30, 14, 30)


class TestSplitInstallments:
    """Tests for split_installments."""

    def test_reference_plan(self) -> None:
        """1000 in 3x from Jan 31 clamps February and keeps the cent drift."""
        plan = split_installments(Decimal("1000"), 3, date(2024, 1, 31))

        assert [c.due_date for c in plan] == [
            date(2024, 1, 31),
            date(2024, 2, 29),
            date(2024, 3, 31),
        ]
        assert all(c.amount == Decimal("333.33") for c in plan)
        assert sum(c.amount for c in plan) == Decimal("999.99")
        assert all(c.original_amount == Decimal("1000") for c in plan)

    def test_indices_and_count(self) -> None:
        plan = split_installments(Decimal("120"), 12, date(2024, 1, 10))

        assert len(plan) == 12
        assert [c.index for c in plan] == list(range(1, 13))
        assert all(c.count == 12 for c in plan)
        assert plan[-1].due_date == date(2024, 12, 10)

    @pytest.mark.parametrize(
        ("total", "count"),
        [("1000", 3), ("99.99", 7), ("0.01", 1), ("2500", 12), ("10", 6)],
    )
    def test_sum_within_rounding_tolerance(self, total: str, count: int) -> None:
        plan = split_installments(Decimal(total), count, date(2024, 1, 1))

        assert len(plan) == count
        drift = abs(sum(c.amount for c in plan) - Decimal(total))
        assert drift <= Decimal("0.005") * count

    def test_single_installment(self) -> None:
        plan = split_installments(Decimal("59.90"), 1, date(2024, 6, 5))

        assert len(plan) == 1
        assert plan[0].amount == Decimal("59.90")
        assert plan[0].due_date == date(2024, 6, 5)

    def test_rounds_half_up(self) -> None:
        plan = split_installments(Decimal("0.05"), 2, date(2024, 1, 1))
        assert plan[0].amount == Decimal("0.03")

    def test_accepts_float_and_string_totals(self) -> None:
        assert split_installments(100.5, 2, date(2024, 1, 1))[0].amount == Decimal("50.25")
        assert split_installments("100,50", 2, date(2024, 1, 1))[0].amount == Decimal("50.25")

    def test_defaults_to_today(self) -> None:
        plan = split_installments(Decimal("10"), 1)
        assert plan[0].due_date == date.today()

    def test_deterministic(self) -> None:
        first = split_installments(Decimal("789.10"), 6, date(2024, 3, 31))
        second = split_installments(Decimal("789.10"), 6, date(2024, 3, 31))
        assert first == second

    @pytest.mark.parametrize("total", [Decimal("0"), Decimal("-10"), None, "abc"])
    def test_rejects_non_positive_total(self, total) -> None:
        with pytest.raises(InvalidArgumentError):
            split_installments(total, 3, date(2024, 1, 1))

    @pytest.mark.parametrize("count", [0, -1, 2.5, True, "3"])
    def test_rejects_invalid_count(self, count) -> None:
        with pytest.raises(InvalidArgumentError):
            split_installments(Decimal("100"), count, date(2024, 1, 1))


class TestInstallmentHelpers:
    """Tests for the installment form helpers."""

    def test_installment_amount_preview(self) -> None:
        assert installment_amount("1000", 3) == Decimal("333.33")

    def test_installment_amount_invalid_inputs(self) -> None:
        assert installment_amount("", 3) == Decimal("0.00")
        assert installment_amount("100", 0) == Decimal("0.00")

    def test_description(self) -> None:
        assert installment_description("Geladeira", 2, 10) == "Geladeira (2/10)"

    def test_build_transactions(self) -> None:
        plan = split_installments(Decimal("300"), 3, date(2024, 1, 15))
        ids = iter(["a", "b", "c"])
        created_at = datetime(2024, 1, 15, 9, 0)

        txs = build_installment_transactions(
            plan,
            owner_id="user-1",
            description="TV",
            category="Lazer",
            credit_card_name="Nubank",
            created_at=created_at,
            id_factory=lambda: next(ids),
        )

        assert [tx.transaction_id for tx in txs] == ["a", "b", "c"]
        assert [tx.description for tx in txs] == ["TV (1/3)", "TV (2/3)", "TV (3/3)"]
        assert all(tx.transaction_type == TransactionType.EXPENSE for tx in txs)
        assert all(tx.is_installment for tx in txs)
        assert all(tx.account_name == "Nubank" for tx in txs)
        assert all(tx.amount == Decimal("100.00") for tx in txs)
        assert all(tx.original_amount == Decimal("300") for tx in txs)
        assert txs[2].installment_due_date == date(2024, 3, 15)
        assert txs[2].installment_index == 3
        assert txs[2].installment_count == 3
