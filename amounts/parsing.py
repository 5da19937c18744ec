"""Decimal parser and splitter.

Turns any accepted input shape into a canonical DecimalAmount and enforces
the fractional-digit bound of the caller's decimals. Parsing never goes
through binary floating point: floats are first rendered to their shortest
round-trip string and parsed as text.
"""

from __future__ import annotations

import math
import re
from typing import Any

import structlog

from amounts.errors import (
    AmountError,
    InvalidInputError,
    MalformedNumericStringError,
    NullInputError,
)
from amounts.models.types import DecimalAmount, InputKind, NumericInput, Sign
from amounts.result import ParseError, ParseResult

logger = structlog.get_logger()

_EXPONENT_RE = re.compile(r"^[-+]?[0-9]*\.?[0-9]*[eE][-+]?[0-9]+$")


def split(value: Any, decimals: int | None) -> DecimalAmount:
    """Split a numeric input into (sign, integer digits, fraction digits).

    Args:
        value: Decimal string, float, int/BigInt, AmountParts, mapping with
            amount/negative/mantissa keys, or a NumericInput
        decimals: Maximum number of fractional digits allowed, or None for
            no bound (display paths)

    Returns:
        Canonical DecimalAmount (integer part without leading zeros)

    Raises:
        NullInputError: If value is None
        InvalidInputError: If the fraction is longer than decimals, or the
            literal uses exponential notation
        MalformedNumericStringError: If a string is not [-]digits[.digits]
    """
    if decimals is not None:
        check_decimals(decimals)
    numeric = NumericInput.of(value)

    if numeric.kind is InputKind.PARTS:
        parts = numeric.value
        amount = DecimalAmount(
            sign=Sign(parts.negative),
            integer_digits=_strip_leading_zeros(parts.amount),
            fraction_digits=parts.fraction_digits,
        )
    elif numeric.kind is InputKind.BIG_INT:
        big = numeric.value
        amount = DecimalAmount(
            sign=Sign.NEGATIVE if big.is_negative else Sign.POSITIVE,
            integer_digits=str(abs(big)),
        )
    elif numeric.kind is InputKind.FLOAT:
        amount = _split_text(_float_to_text(numeric.value, decimals), decimals)
    else:
        amount = _split_text(numeric.value, decimals)

    if decimals is not None and len(amount.fraction_digits) > decimals:
        logger.debug("amount_rejected", value=str(amount), decimals=decimals, reason="fraction_too_long")
        raise InvalidInputError(f"Fraction can only have {decimals} decimals max.")
    return amount


def parse_amount(value: Any, decimals: int) -> ParseResult:
    """Like split(), but returns a ParseResult instead of raising."""
    try:
        return ParseResult.ok(split(value, decimals))
    except NullInputError as err:
        return ParseResult.with_error(ParseError.NULL_INPUT, str(err))
    except MalformedNumericStringError as err:
        return ParseResult.with_error(ParseError.MALFORMED, str(err))
    except AmountError as err:
        return ParseResult.with_error(ParseError.INVALID_INPUT, str(err))
    except TypeError as err:
        return ParseResult.with_error(ParseError.UNSUPPORTED_TYPE, str(err))


def check_decimals(decimals: int) -> None:
    """Validate a decimals argument.

    Raises:
        InvalidInputError: If decimals is not a non-negative int
    """
    if isinstance(decimals, bool) or not isinstance(decimals, int) or decimals < 0:
        raise InvalidInputError(f"Decimals must be a non-negative integer, got {decimals!r}")


def split_locale_text(text: str, group_separator: str, decimal_separator: str) -> str:
    """Undo locale rendering: drop group separators, restore '.' as the point."""
    if group_separator:
        text = text.replace(group_separator, "")
    if decimal_separator != ".":
        text = text.replace(decimal_separator, ".")
    return text


def _float_to_text(value: float, decimals: int | None) -> str:
    if not math.isfinite(value):
        raise InvalidInputError(f"Invalid input: currency {value} decimals {decimals}")
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _split_text(text: str, decimals: int | None) -> DecimalAmount:
    if _EXPONENT_RE.match(text):
        logger.debug("amount_rejected", value=text, decimals=decimals, reason="exponential_notation")
        raise InvalidInputError(f"Invalid input: currency {text} decimals {decimals}")

    sign = Sign.POSITIVE
    body = text
    if body.startswith("-"):
        sign = Sign.NEGATIVE
        body = body[1:]

    pieces = body.split(".")
    if len(pieces) > 2 or body in ("", "."):
        raise MalformedNumericStringError(f"Not a decimal number: {text!r}")

    integer_digits = pieces[0] or "0"
    fraction_digits = pieces[1] if len(pieces) == 2 else ""
    for digits in (integer_digits, fraction_digits):
        if digits and not (digits.isascii() and digits.isdigit()):
            raise MalformedNumericStringError(f"Not a decimal number: {text!r}")

    return DecimalAmount(
        sign=sign,
        integer_digits=_strip_leading_zeros(integer_digits),
        fraction_digits=fraction_digits,
    )


def _strip_leading_zeros(digits: str) -> str:
    return digits.lstrip("0") or "0"
