"""Parse result types."""

from dataclasses import dataclass
from enum import Enum

from amounts.models.types import DecimalAmount


class ParseError(Enum):
    """Types of amount parsing errors."""

    NULL_INPUT = "null_input"
    INVALID_INPUT = "invalid_input"
    MALFORMED = "malformed"
    UNSUPPORTED_TYPE = "unsupported_type"


@dataclass(frozen=True)
class ParseResult:
    """Result of parsing an amount without raising.

    Attributes:
        amount: The parsed amount, or None if parsing failed.
        error: If parsing failed, the type of error that occurred.
        error_detail: Optional human-readable detail about the error.

    Examples:
        result = parse_amount("1.5", 8)
        assert result.is_valid
        assert str(result.amount) == "1.5"

        result = parse_amount("1.123", 2)
        assert result.error is ParseError.INVALID_INPUT
    """

    amount: DecimalAmount | None
    error: ParseError | None = None
    error_detail: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def ok(cls, amount: DecimalAmount) -> "ParseResult":
        return cls(amount=amount)

    @classmethod
    def with_error(cls, error: ParseError, detail: str | None = None) -> "ParseResult":
        return cls(amount=None, error=error, error_detail=detail)
