"""Locale number rendering settings.

The codec does not ship locale data. The active locale is supplied by the
caller as any object with group_separator and decimal_separator attributes;
LocaleConfig is the default implementation.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Protocol


class LocaleRenderer(Protocol):
    """Separators of the active locale."""

    @property
    def group_separator(self) -> str:
        """Thousands separator, e.g. ',' for en-US or '.' for de-DE."""
        ...

    @property
    def decimal_separator(self) -> str:
        """Decimal point, e.g. '.' for en-US or ',' for de-DE."""
        ...


@dataclass(frozen=True)
class LocaleConfig:
    """Static locale separators.

    Attributes:
        group_separator: Inserted every three integer digits (default: ",")
        decimal_separator: Placed between integer and fraction (default: ".")
    """

    group_separator: str = ","
    decimal_separator: str = "."

    def __post_init__(self) -> None:
        if not self.decimal_separator:
            raise ValueError("decimal_separator cannot be empty")
        if self.group_separator == self.decimal_separator:
            raise ValueError(
                f"group and decimal separators must differ, both are {self.decimal_separator!r}"
            )

    @classmethod
    def from_env(cls) -> LocaleConfig:
        """Build from AMOUNTS_GROUP_SEPARATOR / AMOUNTS_DECIMAL_SEPARATOR."""
        return cls(
            group_separator=os.environ.get("AMOUNTS_GROUP_SEPARATOR", ","),
            decimal_separator=os.environ.get("AMOUNTS_DECIMAL_SEPARATOR", "."),
        )


# Default locale instance (en-US style separators)
DEFAULT_LOCALE = LocaleConfig()
