"""CPF (Brazilian taxpayer id) masking and checksum validation."""

import re

_NON_DIGITS = re.compile(r"\D", re.ASCII)


def strip_cpf(value: str | None) -> str:
    """Keep only the digits of a CPF; ``None`` gives an empty string."""
    return _NON_DIGITS.sub("", value or "")


def format_as_you_type(raw: str | None) -> str:
    """Apply the ``XXX.XXX.XXX-XX`` mask to the digits typed so far.

    Non-digits are dropped and anything past the 11th digit is cut.
    """
    digits = strip_cpf(raw)[:11]
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"{digits[:3]}.{digits[3:]}"
    if len(digits) <= 9:
        return f"{digits[:3]}.{digits[3:6]}.{digits[6:]}"
    return f"{digits[:3]}.{digits[3:6]}.{digits[6:9]}-{digits[9:]}"


def _check_digit(digits: str) -> int:
    weight = len(digits) + 1
    total = sum(int(d) * (weight - i) for i, d in enumerate(digits))
    remainder = (total * 10) % 11
    return 0 if remainder == 10 else remainder


def is_valid(cpf: str) -> bool:
    """Validate a CPF, masked or not.

    Never raises: anything that is not 11 digits with matching check
    digits (and not a repeated digit like ``111.111.111-11``) is False.
    """
    if not isinstance(cpf, str):
        return False
    digits = strip_cpf(cpf)
    if len(digits) != 11 or len(set(digits)) == 1:
        return False
    return _check_digit(digits[:9]) == int(digits[9]) and _check_digit(digits[:10]) == int(
        digits[10]
    )
