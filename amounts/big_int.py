"""Arbitrary-precision integer wrapper for base-unit amounts.

Base-unit amounts routinely exceed the 64-bit range, so they are carried as
Python ints behind a small wrapper that only exposes what the codec needs:
- Construction from ints or strict decimal digit strings
- Addition, multiplication and decimal shifts (scale / split by 10^decimals)
- Base-10 string rendering

Usage pattern:
    from amounts.big_int import BigInt

    units = BigInt.from_str("123456789").scale(8)
    whole, fraction = units.split(8)
"""

from __future__ import annotations

import re

from amounts.errors import MalformedNumericStringError

_INTEGER_RE = re.compile(r"^-?[0-9]+$")


class BigIntError(ArithmeticError):
    """Base class for BigInt arithmetic errors."""

    pass


class DivisionByZero(BigIntError):
    """Division by a zero denominator (percentages of an empty total)."""

    pass


class BigInt:
    """Immutable integer of unbounded magnitude.

    Attributes:
        value: The underlying integer value (read-only)
    """

    __slots__ = ("_value",)
    _value: int

    def __init__(self, value: int | BigInt) -> None:
        """Create a BigInt from an integer or another BigInt.

        Raises:
            TypeError: If value is not an int or BigInt
        """
        if isinstance(value, BigInt):
            self._value = value._value
        elif isinstance(value, int) and not isinstance(value, bool):
            self._value = value
        else:
            raise TypeError(f"BigInt requires int, got {type(value).__name__}")

    @property
    def value(self) -> int:
        """The underlying integer value."""
        return self._value

    @property
    def is_negative(self) -> bool:
        return self._value < 0

    def __repr__(self) -> str:
        return f"BigInt({self._value})"

    def __str__(self) -> str:
        return str(self._value)

    def __hash__(self) -> int:
        return hash(self._value)

    # --- Arithmetic operations ---

    def __add__(self, other: BigInt | int) -> BigInt:
        return BigInt(self._value + _extract_value(other))

    def __radd__(self, other: int) -> BigInt:
        return BigInt(other + self._value)

    def __mul__(self, other: BigInt | int) -> BigInt:
        return BigInt(self._value * _extract_value(other))

    def __rmul__(self, other: int) -> BigInt:
        return BigInt(other * self._value)

    def __neg__(self) -> BigInt:
        return BigInt(-self._value)

    def __abs__(self) -> BigInt:
        return BigInt(abs(self._value))

    # --- Comparison operations ---

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BigInt):
            return self._value == other._value
        if isinstance(other, int):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: BigInt | int) -> bool:
        return self._value < _extract_value(other)

    def __le__(self, other: BigInt | int) -> bool:
        return self._value <= _extract_value(other)

    def __gt__(self, other: BigInt | int) -> bool:
        return self._value > _extract_value(other)

    def __ge__(self, other: BigInt | int) -> bool:
        return self._value >= _extract_value(other)

    # --- Conversion ---

    def __int__(self) -> int:
        return self._value

    def __bool__(self) -> bool:
        return self._value != 0

    def __index__(self) -> int:
        return self._value

    # --- Named operations ---

    def scale(self, decimals: int) -> BigInt:
        """Shift the decimal point right by `decimals` places (x * 10^decimals)."""
        if decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {decimals}")
        return BigInt(self._value * 10**decimals)

    def split(self, decimals: int) -> tuple[BigInt, BigInt]:
        """Split the magnitude into whole and fractional units.

        Returns (whole, fraction) where |self| == whole * 10^decimals + fraction.
        The sign is not carried; check is_negative on the original.
        """
        if decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {decimals}")
        whole, fraction = divmod(abs(self._value), 10**decimals)
        return BigInt(whole), BigInt(fraction)

    @classmethod
    def from_str(cls, s: str) -> BigInt:
        """Parse BigInt from a decimal digit string with optional leading '-'.

        Unlike int(), whitespace, '+' and '_' separators are rejected.

        Raises:
            MalformedNumericStringError: If string is not a valid integer
        """
        if not isinstance(s, str) or not _INTEGER_RE.match(s):
            raise MalformedNumericStringError(f"Not an integer string: {s!r}")
        return cls(int(s))


def _extract_value(x: BigInt | int) -> int:
    if isinstance(x, BigInt):
        return x._value
    return x


def multiply(a: BigInt | int | str, b: BigInt | int | str) -> str:
    """Exact product of two integer values as a base-10 string.

    >>> multiply(12, 34)
    '408'
    """
    return str(_coerce(a) * _coerce(b))


def _coerce(x: BigInt | int | str) -> BigInt:
    if isinstance(x, str):
        return BigInt.from_str(x)
    return BigInt(x)

