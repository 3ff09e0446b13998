"""Money parsing and display helpers."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

CENTS = Decimal("0.01")


def to_decimal(value: Any) -> Decimal | None:
    """Coerce a numeric-looking value to ``Decimal``.

    Floats go through ``str`` so ``0.1`` stays ``Decimal("0.1")``.
    Returns ``None`` for values that are not finite numbers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, (int, float)):
        result = Decimal(str(value))
    elif isinstance(value, str):
        return parse_amount(value)
    else:
        return None
    return result if result.is_finite() else None


def parse_amount(text: str | None) -> Decimal | None:
    """Parse a user-typed amount.

    Both ``"12,50"`` and ``"12.50"`` are accepted; the first comma is read
    as the decimal separator.

    Parameters
    ----------
    text : str | None
        Raw form input.

    Returns
    -------
    Decimal | None
        Parsed amount, or None when the input is empty or not a number.
    """
    if text is None:
        return None
    cleaned = str(text).strip().replace(",", ".", 1)
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def quantize_money(amount: Decimal) -> Decimal:
    """Round to cents, half away from zero."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


def format_currency(amount: Any, symbol: str = "R$") -> str:
    """Format an amount for display, e.g. ``R$ 12.34``.

    Unparseable amounts render as zero.
    """
    value = to_decimal(amount) or Decimal("0")
    return f"{symbol} {quantize_money(value)}"


def is_email_identifier(identifier: str | None) -> bool:
    """Tell whether a login identifier is an email (otherwise it is a CPF)."""
    return "@" in (identifier or "")
