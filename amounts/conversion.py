"""Base-unit <-> decimal conversion.

Both directions are pure digit repositioning, so they are exact:
- decimal_to_units: "1.5" with 8 decimals -> "150000000"
- units_to_decimal: "150000000" with 8 decimals -> "1.5"

The native coin wrappers fix decimals at 8 (NXT <-> NQT). Asset quantities
(QNT) take decimals from the asset.
"""

from __future__ import annotations

from typing import Any

from amounts.big_int import BigInt, multiply
from amounts.constants import NXT_DECIMALS
from amounts.errors import InvalidInputError
from amounts.models.types import AmountParts, InputKind, NumericInput
from amounts.parsing import check_decimals, split


def decimal_to_units(value: Any, decimals: int) -> str:
    """Convert a decimal amount to its base-unit integer string.

    Args:
        value: Decimal amount (string, float, int/BigInt, or parts)
        decimals: Number of decimal places of the asset

    Returns:
        Signed base-10 digit string, e.g. "-20000000" for "-0.2" at 8 decimals

    Raises:
        NullInputError: If value is None
        InvalidInputError: If the fraction exceeds decimals or uses an exponent
        MalformedNumericStringError: If value is not a decimal number
    """
    amount = split(value, decimals)
    units = BigInt.from_str(amount.integer_digits).scale(decimals)
    if amount.fraction_digits:
        units += BigInt.from_str(amount.fraction_digits.ljust(decimals, "0"))
    if amount.is_negative:
        units = -units
    return str(units)


def units_to_decimal(units: Any, decimals: int) -> str:
    """Convert a base-unit integer to its canonical decimal string.

    Trailing fraction zeros are dropped, and so is the point when nothing
    remains after it.

    >>> units_to_decimal("12345", 8)
    '0.00012345'
    """
    return str(units_to_parts(units, decimals))


def units_to_parts(units: Any, decimals: int) -> AmountParts:
    """Convert a base-unit integer to {amount, negative, mantissa}.

    Raises:
        NullInputError: If units is None
        InvalidInputError: If units has a fractional part
        MalformedNumericStringError: If units is not an integer string
    """
    check_decimals(decimals)
    big = _to_big_int(units)
    whole, fraction = big.split(decimals)

    mantissa = ""
    if decimals and fraction:
        mantissa = "." + str(fraction).rjust(decimals, "0").rstrip("0")

    return AmountParts(
        amount=str(whole),
        negative="-" if big.is_negative else "",
        mantissa=mantissa,
    )


def _to_big_int(units: Any) -> BigInt:
    numeric = NumericInput.of(units)
    if numeric.kind is InputKind.STRING:
        return BigInt.from_str(numeric.value)
    if numeric.kind is InputKind.BIG_INT:
        return numeric.value
    if numeric.kind is InputKind.FLOAT:
        if not numeric.value.is_integer():
            raise InvalidInputError(f"Base units must be a whole number, got {numeric.value!r}")
        return BigInt(int(numeric.value))

    parts = numeric.value
    if parts.fraction_digits.strip("0"):
        raise InvalidInputError(f"Base units must be a whole number, got {parts}")
    big = BigInt.from_str(parts.amount)
    return -big if parts.negative else big


# --- Native coin (8 decimals) ---


def convert_to_nqt(value: Any) -> str:
    """NXT amount -> NQT string."""
    return decimal_to_units(value, NXT_DECIMALS)


def convert_to_nxt(units: Any, as_parts: bool = False) -> str | AmountParts:
    """NQT amount -> NXT string, or AmountParts when as_parts is set."""
    if as_parts:
        return units_to_parts(units, NXT_DECIMALS)
    return units_to_decimal(units, NXT_DECIMALS)


# --- Generic decimals ---


def float_to_int(value: Any, decimals: int) -> str:
    return decimal_to_units(value, decimals)


def int_to_float(units: Any, decimals: int) -> str:
    return units_to_decimal(units, decimals)


def convert_to_qnt(quantity: Any, decimals: int) -> str:
    """Asset quantity -> QNT string."""
    return decimal_to_units(quantity, decimals)


def convert_to_qntf(units: Any, decimals: int, as_parts: bool = False) -> str | AmountParts:
    """QNT -> asset quantity string, or AmountParts when as_parts is set.

    >>> convert_to_qntf(1234567, 3)
    '1234.567'
    """
    if as_parts:
        return units_to_parts(units, decimals)
    return units_to_decimal(units, decimals)


def calculate_order_total(quantity_qnt: Any, price_nqt: Any) -> str:
    """Order total in NQT: quantity (QNT) times price per QNT (NQT)."""
    return multiply(_to_big_int(quantity_qnt), _to_big_int(price_nqt))
