"""Amount codec error classes.

All parse and conversion failures derive from AmountError, which is a
ValueError so callers that already guard numeric parsing keep working.
"""


class AmountError(ValueError):
    """Base error for amount parsing and conversion."""

    pass


class NullInputError(AmountError):
    """A value was required but None was supplied."""

    pass


class InvalidInputError(AmountError):
    """Input is well-formed but cannot be converted exactly.

    Raised when the fraction has more digits than the configured decimals,
    or when the literal uses exponential notation.
    """

    pass


class MalformedNumericStringError(AmountError):
    """Input string is not sign + digits [+ '.' + digits]."""

    pass
