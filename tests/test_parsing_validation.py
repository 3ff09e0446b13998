"""Tests for amount parsing, display helpers and form validation."""

from decimal import Decimal

import pytest

from cofrin.exceptions import DuplicateEntityError, ValidationError
from cofrin.finance.parsing import (
    format_currency,
    is_email_identifier,
    parse_amount,
    to_decimal,
)
from cofrin.finance.validation import (
    validate_account_name,
    validate_credit_card,
    validate_registration,
)
from cofrin.models import DEFAULT_ACCOUNT_NAME


class TestParseAmount:
    """Tests for parse_amount."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("12,50", Decimal("12.50")),
            ("12.50", Decimal("12.50")),
            (" 7 ", Decimal("7")),
            ("0", Decimal("0")),
        ],
    )
    def test_valid(self, text: str, expected: Decimal) -> None:
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   ", "abc", "1,2,3", "NaN", "Infinity"])
    def test_invalid(self, text) -> None:
        assert parse_amount(text) is None


class TestToDecimal:
    """Tests for to_decimal."""

    def test_float_goes_through_str(self) -> None:
        assert to_decimal(0.1) == Decimal("0.1")

    def test_int(self) -> None:
        assert to_decimal(5) == Decimal("5")

    def test_bool_rejected(self) -> None:
        assert to_decimal(True) is None

    def test_unsupported_type(self) -> None:
        assert to_decimal([1]) is None


class TestDisplayHelpers:
    """Tests for currency display and login identifier detection."""

    def test_format_currency(self) -> None:
        assert format_currency(Decimal("12.345")) == "R$ 12.35"
        assert format_currency(3) == "R$ 3.00"

    def test_format_currency_custom_symbol(self) -> None:
        assert format_currency("1,5", symbol="US$") == "US$ 1.50"

    def test_format_currency_unparseable(self) -> None:
        assert format_currency(None) == "R$ 0.00"

    def test_email_identifier(self) -> None:
        assert is_email_identifier("maria@example.com") is True
        assert is_email_identifier("529.982.247-25") is False
        assert is_email_identifier(None) is False


class TestValidateRegistration:
    """Tests for validate_registration."""

    def test_valid_form_returns_cpf_digits(self, valid_cpf: str) -> None:
        key = validate_registration("Maria", valid_cpf, "maria@example.com", "segredo", "segredo")
        assert key == "52998224725"

    def test_missing_field(self, valid_cpf: str) -> None:
        with pytest.raises(ValidationError, match="required"):
            validate_registration("", valid_cpf, "maria@example.com", "segredo", "segredo")

    def test_invalid_cpf(self) -> None:
        with pytest.raises(ValidationError, match="CPF"):
            validate_registration("Maria", "111.111.111-11", "m@x.com", "segredo", "segredo")

    def test_invalid_email(self, valid_cpf: str) -> None:
        with pytest.raises(ValidationError, match="email"):
            validate_registration("Maria", valid_cpf, "maria@", "segredo", "segredo")

    def test_short_password(self, valid_cpf: str) -> None:
        with pytest.raises(ValidationError, match="at least 6"):
            validate_registration("Maria", valid_cpf, "m@x.com", "12345", "12345")

    def test_password_mismatch(self, valid_cpf: str) -> None:
        with pytest.raises(ValidationError, match="do not match"):
            validate_registration("Maria", valid_cpf, "m@x.com", "segredo", "segredo2")


class TestValidateCreditCard:
    """Tests for validate_credit_card."""

    def test_valid(self) -> None:
        assert validate_credit_card(" Nubank ", "10", "1500,00") == ("Nubank", 10, Decimal("1500.00"))

    def test_unparseable_limit_is_zero(self) -> None:
        assert validate_credit_card("Inter", 5, "") == ("Inter", 5, Decimal("0"))
        assert validate_credit_card("Inter", 5, "muito") == ("Inter", 5, Decimal("0"))

    @pytest.mark.parametrize("due_day", ["0", "32", -1])
    def test_due_day_out_of_range(self, due_day) -> None:
        with pytest.raises(ValidationError, match="between 1 and 31"):
            validate_credit_card("Inter", due_day, "100")

    def test_due_day_not_a_number(self) -> None:
        with pytest.raises(ValidationError):
            validate_credit_card("Inter", "dez", "100")

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError, match="required"):
            validate_credit_card("  ", "10", "100")


class TestValidateAccountName:
    """Tests for validate_account_name."""

    def test_trims(self) -> None:
        assert validate_account_name("  Inter ", [DEFAULT_ACCOUNT_NAME]) == "Inter"

    def test_empty(self) -> None:
        with pytest.raises(ValidationError):
            validate_account_name("   ", [])

    def test_duplicate(self) -> None:
        with pytest.raises(DuplicateEntityError):
            validate_account_name("Inter", [DEFAULT_ACCOUNT_NAME, "Inter"])

    def test_default_account_always_exists(self) -> None:
        with pytest.raises(DuplicateEntityError):
            validate_account_name(DEFAULT_ACCOUNT_NAME, [])
