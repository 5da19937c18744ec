"""Tests for amount input models."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from amounts.big_int import BigInt
from amounts.errors import NullInputError
from amounts.models import AmountParts, DecimalAmount, InputKind, NumericInput, Sign


class TestAmountParts:
    """Tests for the pre-split {amount, negative, mantissa} record."""

    def test_int_amount_is_coerced(self):
        """An int amount is stored as digits."""
        parts = AmountParts(amount=1234, negative="-", mantissa=".567")
        assert parts.amount == "1234"
        assert str(parts) == "-1234.567"

    def test_fraction_digits(self):
        """fraction_digits drops the leading point."""
        assert AmountParts(amount="1", mantissa=".05").fraction_digits == "05"
        assert AmountParts(amount="1").fraction_digits == ""

    def test_frozen(self):
        """Records cannot be modified."""
        parts = AmountParts(amount="1")
        with pytest.raises(ValidationError):
            parts.amount = "2"  # type: ignore[misc]

    @pytest.mark.parametrize(
        "fields",
        [
            {"amount": "12a"},
            {"amount": -5},
            {"amount": "1", "mantissa": "567"},
            {"amount": "1", "mantissa": ".5x"},
            {"amount": "1", "negative": "+"},
        ],
    )
    def test_invalid_fields_rejected(self, fields):
        """Non-digit amounts, bad mantissas and bad signs are rejected."""
        with pytest.raises(ValidationError):
            AmountParts(**fields)


class TestDecimalAmount:
    """Tests for the canonical parsed amount."""

    def test_str(self):
        """The string form joins sign, digits and fraction."""
        assert str(DecimalAmount(Sign.NEGATIVE, "12", "5")) == "-12.5"
        assert str(DecimalAmount(Sign.POSITIVE, "7")) == "7"

    def test_is_zero(self):
        """Zero is zero whatever its sign."""
        assert DecimalAmount(Sign.NEGATIVE, "0", "000").is_zero
        assert not DecimalAmount(Sign.POSITIVE, "0", "001").is_zero

    def test_to_parts(self):
        """The parts form keeps the point on the mantissa."""
        parts = DecimalAmount(Sign.NEGATIVE, "2", "2").to_parts()
        assert parts == AmountParts(amount="2", negative="-", mantissa=".2")


class TestNumericInput:
    """Tests for input shape classification."""

    def test_string(self):
        """Strings classify as STRING."""
        assert NumericInput.of("1.5").kind is InputKind.STRING

    def test_float(self):
        """Floats classify as FLOAT and keep their value."""
        numeric = NumericInput.of(0.1)
        assert numeric.kind is InputKind.FLOAT
        assert numeric.value == 0.1

    def test_int_and_bigint_share_kind(self):
        """Ints and BigInts share the BIG_INT kind."""
        assert NumericInput.of(5).kind is InputKind.BIG_INT
        assert NumericInput.of(BigInt(5)).kind is InputKind.BIG_INT
        assert NumericInput.of(5).value == BigInt(5)

    def test_decimal_goes_through_positional_text(self):
        """Decimals become their positional string, never an exponent."""
        numeric = NumericInput.of(Decimal("1E-8"))
        assert numeric.kind is InputKind.STRING
        assert numeric.value == "0.00000001"

    def test_mapping_becomes_parts(self):
        """Mappings validate into AmountParts."""
        numeric = NumericInput.of({"amount": 1234, "negative": "-", "mantissa": ".567"})
        assert numeric.kind is InputKind.PARTS
        assert numeric.value == AmountParts(amount="1234", negative="-", mantissa=".567")

    def test_already_classified_is_returned(self):
        """A NumericInput passes through unchanged."""
        numeric = NumericInput.from_str("3")
        assert NumericInput.of(numeric) is numeric

    def test_none_raises(self):
        """None is rejected."""
        with pytest.raises(NullInputError):
            NumericInput.of(None)

    @pytest.mark.parametrize("value", [True, [1], object()])
    def test_unsupported_type_raises(self, value):
        """Bools, lists and other objects are rejected."""
        with pytest.raises(TypeError):
            NumericInput.of(value)
