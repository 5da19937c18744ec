"""Amount data models."""

from amounts.models.types import (
    AmountParts,
    DecimalAmount,
    InputKind,
    NumericInput,
    Sign,
)

__all__ = [
    "AmountParts",
    "DecimalAmount",
    "InputKind",
    "NumericInput",
    "Sign",
]
