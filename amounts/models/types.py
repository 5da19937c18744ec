"""Shared type definitions for amount inputs and parsed amounts.

NumericInput is the tagged union every entry point normalizes its argument
into; the parser dispatches on its kind rather than on the raw Python type.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from amounts.big_int import BigInt
from amounts.errors import NullInputError


def validate_digits(value: Any) -> str:
    """Validate a non-negative whole number given as digits or an int.

    Raises:
        ValueError: If value is negative, not an integer, or contains non-digits
    """
    if isinstance(value, BigInt):
        value = value.value
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise ValueError(f"Amount digits cannot be negative: {value}")
        return str(value)
    if not isinstance(value, str):
        raise ValueError(f"Amount must be string or int, got {type(value).__name__}")
    if not value.isascii() or not value.isdigit():
        raise ValueError(f"Amount must contain only digits: '{value}'")
    return value


# Whole-number part of a pre-split amount, without sign
Digits = Annotated[
    str,
    BeforeValidator(validate_digits),
    Field(description="Whole number as ASCII decimal digits"),
]

# Fractional part including its leading '.', or empty
Mantissa = Annotated[str, Field(pattern=r"^(\.[0-9]*)?$")]


class AmountParts(BaseModel):
    """A pre-split amount: {amount, negative, mantissa}.

    This is the object form returned by convert_to_nxt / convert_to_qntf
    with as_parts=True, and accepted by the formatter for callers that style
    the fraction separately.
    """

    model_config = ConfigDict(frozen=True)

    amount: Digits = "0"
    negative: Literal["", "-"] = ""
    mantissa: Mantissa = ""

    @property
    def fraction_digits(self) -> str:
        return self.mantissa[1:]

    def __str__(self) -> str:
        return f"{self.negative}{self.amount}{self.mantissa}"


class Sign(str, Enum):
    """Sign of a parsed amount, rendered as its prefix."""

    POSITIVE = ""
    NEGATIVE = "-"


@dataclass(frozen=True)
class DecimalAmount:
    """Canonical (sign, integer digits, fraction digits) triple.

    Attributes:
        sign: Sign of the amount
        integer_digits: Whole part, at least one digit
        fraction_digits: Fractional part, possibly empty
    """

    sign: Sign
    integer_digits: str
    fraction_digits: str = ""

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def is_zero(self) -> bool:
        return not self.integer_digits.strip("0") and not self.fraction_digits.strip("0")

    def to_parts(self) -> AmountParts:
        return AmountParts(
            amount=self.integer_digits,
            negative=self.sign.value,
            mantissa=f".{self.fraction_digits}" if self.fraction_digits else "",
        )

    def __str__(self) -> str:
        text = self.integer_digits
        if self.fraction_digits:
            text += "." + self.fraction_digits
        return self.sign.value + text


class InputKind(str, Enum):
    """Shape of a numeric input."""

    STRING = "string"
    FLOAT = "float"
    BIG_INT = "big_int"
    PARTS = "parts"


@dataclass(frozen=True)
class NumericInput:
    """Tagged union over the accepted input shapes.

    Build with one of the from_* constructors, or classify a raw Python
    value with NumericInput.of().
    """

    kind: InputKind
    value: str | float | BigInt | AmountParts

    @classmethod
    def from_str(cls, value: str) -> NumericInput:
        return cls(InputKind.STRING, value)

    @classmethod
    def from_float(cls, value: float) -> NumericInput:
        return cls(InputKind.FLOAT, float(value))

    @classmethod
    def from_big_int(cls, value: BigInt | int) -> NumericInput:
        return cls(InputKind.BIG_INT, BigInt(value))

    @classmethod
    def from_parts(cls, value: AmountParts | Mapping[str, Any]) -> NumericInput:
        if not isinstance(value, AmountParts):
            value = AmountParts.model_validate(dict(value))
        return cls(InputKind.PARTS, value)

    @classmethod
    def of(cls, value: Any) -> NumericInput:
        """Classify a raw Python value.

        Python ints are arbitrary precision, so they share the BigInt kind.
        Decimals are exact, so they are rendered positionally and parsed as
        text: Decimal("1E-8") reads as "0.00000001".

        Raises:
            NullInputError: If value is None
            TypeError: If value has an unsupported type
        """
        if value is None:
            raise NullInputError("Amount is required, got None")
        if isinstance(value, NumericInput):
            return value
        if isinstance(value, bool):
            raise TypeError("Amount cannot be a bool")
        if isinstance(value, str):
            return cls.from_str(value)
        if isinstance(value, (BigInt, int)):
            return cls.from_big_int(value)
        if isinstance(value, float):
            return cls.from_float(value)
        if isinstance(value, Decimal):
            return cls.from_str(format(value, "f"))
        if isinstance(value, (AmountParts, Mapping)):
            return cls.from_parts(value)
        raise TypeError(f"Unsupported amount type: {type(value).__name__}")
