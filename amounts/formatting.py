"""Display formatting for amounts, quantities, percentages and sizes.

Every formatter works on decimal digit strings; values are never pushed
through binary floating point for rounding. Where rounding is needed it is
done with Decimal in a high-precision context.
"""

from __future__ import annotations

import decimal
import math
from decimal import ROUND_DOWN, ROUND_HALF_EVEN, ROUND_HALF_UP, ROUND_UP, Decimal
from typing import Any

import structlog

from amounts.big_int import BigInt, DivisionByZero
from amounts.constants import (
    MAX_DISPLAY_DECIMALS,
    NXT_DECIMALS,
    PERCENTAGE_DECIMALS,
    ROUND_DECIMALS,
    VOLUME_BASE,
    VOLUME_SEPARATOR,
    VOLUME_UNITS,
    WEIGHT_SEPARATOR,
)
from amounts.conversion import units_to_parts
from amounts.errors import InvalidInputError, MalformedNumericStringError, NullInputError
from amounts.locale_config import DEFAULT_LOCALE, LocaleRenderer
from amounts.models.types import DecimalAmount, Sign
from amounts.parsing import check_decimals, split, split_locale_text

logger = structlog.get_logger()

# 78 digits of precision, enough for any base-unit amount we display
DECIMAL_HIGH_PREC_CONTEXT = decimal.Context(prec=78)

# Rounding mode codes accepted by calculate_percentage
PERCENTAGE_ROUNDING = {
    0: ROUND_DOWN,
    1: ROUND_HALF_UP,
    2: ROUND_HALF_EVEN,
    3: ROUND_UP,
}
DEFAULT_PERCENTAGE_ROUNDING = 2


def format_number(
    value: Any,
    escaped: bool = False,
    zero_pad: int | None = None,
    locale: LocaleRenderer | None = None,
) -> str:
    """Render a decimal value with locale grouping.

    Args:
        value: Decimal string, number, BigInt, or AmountParts
        escaped: True if value is a string already rendered for the locale
            (group separators present, locale decimal separator); it is
            normalized back before parsing so both forms render the same
        zero_pad: Minimum number of fractional digits to show; never truncates
        locale: Separators to use (default: DEFAULT_LOCALE)

    Returns:
        Display string, e.g. "-12,345.67"
    """
    locale = locale or DEFAULT_LOCALE
    if escaped and isinstance(value, str):
        value = split_locale_text(value, locale.group_separator, locale.decimal_separator)
    return _render(split(_plain(value), None), zero_pad, locale)


def format_amount(
    value: Any,
    round_to_cents: bool = False,
    use_grouping: bool = True,
    zero_pad: int | None = None,
    locale: LocaleRenderer | None = None,
) -> str:
    """Render a native coin amount.

    Strings and BigInt values are NQT (base units) and are shown exactly.
    Native Python numbers and Decimals are NXT amounts; with round_to_cents
    they are rounded half-up to two fractional digits.
    """
    if value is None:
        return "0"
    if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        number = _to_decimal(value)
        if round_to_cents:
            with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
                number = number.quantize(Decimal(1).scaleb(-ROUND_DECIMALS), rounding=ROUND_HALF_UP)
        amount = split(_decimal_text(number), None)
        amount = DecimalAmount(amount.sign, amount.integer_digits, amount.fraction_digits.rstrip("0"))
    else:
        amount = split(units_to_parts(value, NXT_DECIMALS), None)
    return _render(amount, zero_pad, locale or DEFAULT_LOCALE, use_grouping)


def format_quantity(
    units: Any,
    decimals: int,
    use_grouping: bool = True,
    zero_pad: int | None = None,
    locale: LocaleRenderer | None = None,
) -> str:
    """Render an asset quantity given in QNT.

    At most MAX_DISPLAY_DECIMALS fractional digits are shown; longer
    fractions are truncated, and zero_pad is capped at the same limit.
    """
    parts = units_to_parts(units, decimals)
    fraction = parts.fraction_digits
    if len(fraction) > MAX_DISPLAY_DECIMALS:
        logger.debug(
            "quantity_display_truncated",
            quantity=str(parts),
            decimals=decimals,
            shown=MAX_DISPLAY_DECIMALS,
        )
        fraction = fraction[:MAX_DISPLAY_DECIMALS].rstrip("0")
    if zero_pad is not None:
        zero_pad = min(zero_pad, MAX_DISPLAY_DECIMALS)

    amount = DecimalAmount(Sign(parts.negative), parts.amount, fraction)
    return _render(amount, zero_pad, locale or DEFAULT_LOCALE, use_grouping)


def format_volume(size: int | float) -> str:
    """Render a byte count with a binary unit suffix.

    >>> format_volume(1000000)
    '977 KB'
    """
    if size is None:
        raise NullInputError("Volume is required, got None")
    number = _to_decimal(size)
    if number < 0:
        raise InvalidInputError(f"Volume cannot be negative: {size}")

    index = 0
    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        while number >= VOLUME_BASE and index < len(VOLUME_UNITS) - 1:
            number /= VOLUME_BASE
            index += 1
        rounded = number.quantize(Decimal(1), rounding=ROUND_HALF_UP)

    return f"{_group(str(int(rounded)), VOLUME_SEPARATOR)} {VOLUME_UNITS[index]}"


def format_weight(value: int | BigInt | str) -> str:
    """Render an integer grouped with an HTML-safe apostrophe entity.

    >>> format_weight(12345)
    '12&#39;345'
    """
    if value is None:
        raise NullInputError("Weight is required, got None")
    big = BigInt.from_str(value) if isinstance(value, str) else BigInt(value)
    sign = "-" if big.is_negative else ""
    return sign + _group(str(abs(big)), WEIGHT_SEPARATOR)


def calculate_percentage(numerator: Any, denominator: Any, rounding: int = DEFAULT_PERCENTAGE_ROUNDING) -> str:
    """Return numerator / denominator * 100 with exactly two fractional digits.

    Args:
        numerator: Part value (number, decimal string, or BigInt)
        denominator: Whole value, must be non-zero
        rounding: Rounding mode code for the last digit: 0 down (truncate),
            1 half-up, 2 half-even, 3 up. Unknown codes fall back to 2.

    Raises:
        DivisionByZero: If denominator is zero
    """
    mode = PERCENTAGE_ROUNDING.get(rounding, PERCENTAGE_ROUNDING[DEFAULT_PERCENTAGE_ROUNDING])
    a = _to_decimal(numerator)
    b = _to_decimal(denominator)
    if b == 0:
        raise DivisionByZero(f"Percentage of zero: {numerator} / {denominator}")

    with decimal.localcontext(DECIMAL_HIGH_PREC_CONTEXT):
        result = (a / b * 100).quantize(Decimal(1).scaleb(-PERCENTAGE_DECIMALS), rounding=mode)
    return _decimal_text(result)


def amount_to_precision(value: Any, precision: int) -> str:
    """Cut a number to at most `precision` fractional digits.

    Trailing zeros are dropped before cutting, so digits that survive the
    cut are kept as-is: 12.3006 at precision 2 gives "12.30". A value cut
    down to zero loses its sign.
    """
    check_decimals(precision)
    amount = split(_plain(value), None)
    fraction = amount.fraction_digits.rstrip("0")[:precision]
    cut = DecimalAmount(amount.sign, amount.integer_digits, fraction)
    if cut.is_zero:
        cut = DecimalAmount(Sign.POSITIVE, cut.integer_digits, fraction)
    return str(cut)


def _render(
    amount: DecimalAmount,
    zero_pad: int | None,
    locale: LocaleRenderer,
    use_grouping: bool = True,
) -> str:
    integer = amount.integer_digits
    if use_grouping:
        integer = _group(integer, locale.group_separator)

    fraction = amount.fraction_digits
    if zero_pad:
        fraction = fraction.ljust(zero_pad, "0")

    text = integer + (locale.decimal_separator + fraction if fraction else "")
    if amount.is_negative and not amount.is_zero:
        return "-" + text
    return text


def _group(digits: str, separator: str) -> str:
    return format(int(digits), ",").replace(",", separator)


def _plain(value: Any) -> Any:
    # Floats are rendered positionally so display paths accept 1e-05
    if isinstance(value, float):
        return _decimal_text(_to_decimal(value))
    return value


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        raise NullInputError("Number is required, got None")
    if isinstance(value, BigInt):
        return Decimal(value.value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise InvalidInputError(f"Not a finite number: {value}")
        return Decimal(repr(value))
    if isinstance(value, (int, str, Decimal)) and not isinstance(value, bool):
        try:
            number = Decimal(value)
        except decimal.InvalidOperation as err:
            raise MalformedNumericStringError(f"Not a number: {value!r}") from err
        if not number.is_finite():
            raise InvalidInputError(f"Not a finite number: {value}")
        return number
    raise TypeError(f"Unsupported number type: {type(value).__name__}")


def _decimal_text(number: Decimal) -> str:
    return format(number, "f")
