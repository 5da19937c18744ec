"""Decimal-place inference for tables of amounts."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from typing import Any


def infer_decimals(
    records: Iterable[Mapping[str, Any]],
    field: str,
    transform: Callable[[Mapping[str, Any]], Any] | None = None,
) -> int:
    """Return the largest number of fractional digits found in a column.

    Args:
        records: Rows to scan
        field: Key read from each row when no transform is given
        transform: Optional callback turning a row into a decimal string,
            e.g. lambda row: format_amount(row["price"])

    Returns:
        Maximum fraction length, 0 if no value has a fractional part

    Rows without the field (or where the transform yields None) are skipped.
    """
    decimals = 0
    for record in records:
        value = transform(record) if transform is not None else record.get(field)
        if value is None:
            continue
        _, point, fraction = str(value).partition(".")
        if point:
            decimals = max(decimals, len(fraction))
    return decimals
