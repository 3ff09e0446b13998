"""Pure financial calculations."""

from cofrin.finance.aggregation import compute_balance, compute_category_totals, filter_by_account
from cofrin.finance.cpf import format_as_you_type, is_valid, strip_cpf
from cofrin.finance.goals import apply_contribution, partition_goals, progress_percent
from cofrin.finance.installments import (
    add_months,
    build_installment_transactions,
    installment_amount,
    installment_description,
    split_installments,
)
from cofrin.finance.parsing import format_currency, is_email_identifier, parse_amount

__all__ = [
    "add_months",
    "apply_contribution",
    "build_installment_transactions",
    "compute_balance",
    "compute_category_totals",
    "filter_by_account",
    "format_as_you_type",
    "format_currency",
    "installment_amount",
    "installment_description",
    "is_email_identifier",
    "is_valid",
    "parse_amount",
    "partition_goals",
    "progress_percent",
    "split_installments",
    "strip_cpf",
]
