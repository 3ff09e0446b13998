"""Validation of registration, credit card and account forms."""

import re
from collections.abc import Iterable
from decimal import Decimal

from cofrin.exceptions import DuplicateEntityError, ValidationError
from cofrin.finance import cpf as cpf_rules
from cofrin.finance.parsing import parse_amount
from cofrin.models import DEFAULT_ACCOUNT_NAME

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


def validate_registration(
    name: str,
    cpf: str,
    email: str,
    password: str,
    confirm_password: str,
) -> str:
    """Check a sign-up form and return the CPF digits used as the user key.

    Raises
    ------
    ValidationError
        On the first failing rule, in form order.
    """
    if not all([name, cpf, email, password, confirm_password]):
        raise ValidationError("All fields are required")
    if not cpf_rules.is_valid(cpf):
        raise ValidationError("Invalid CPF")
    if not EMAIL_PATTERN.match(email):
        raise ValidationError("Invalid email")
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must have at least {MIN_PASSWORD_LENGTH} characters")
    if password != confirm_password:
        raise ValidationError("Passwords do not match")
    return cpf_rules.strip_cpf(cpf)


def validate_credit_card(name: str, due_day: int | str, limit: str | None) -> tuple[str, int, Decimal]:
    """Normalise a credit card form into ``(name, due_day, limit)``.

    An empty or unparseable limit is stored as zero.
    """
    name = (name or "").strip()
    if not name or due_day in (None, ""):
        raise ValidationError("Name and due day are required")
    try:
        day = int(due_day)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"Due day must be a number, got {due_day!r}") from exc
    if not 1 <= day <= 31:
        raise ValidationError("Due day must be between 1 and 31")
    parsed = parse_amount(limit)
    return name, day, parsed if parsed is not None and parsed >= 0 else Decimal("0")


def validate_account_name(name: str, existing: Iterable[str]) -> str:
    """Return the trimmed account name if it is new for this owner."""
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Account name is required")
    if cleaned == DEFAULT_ACCOUNT_NAME or cleaned in set(existing):
        raise DuplicateEntityError(f"Account {cleaned!r} already exists")
    return cleaned
