"""Fixed-point amount codec for the wallet client."""

from amounts.big_int import BigInt, multiply
from amounts.conversion import (
    calculate_order_total,
    convert_to_nqt,
    convert_to_nxt,
    convert_to_qnt,
    convert_to_qntf,
    decimal_to_units,
    float_to_int,
    int_to_float,
    units_to_decimal,
    units_to_parts,
)
from amounts.errors import (
    AmountError,
    InvalidInputError,
    MalformedNumericStringError,
    NullInputError,
)
from amounts.formatting import (
    amount_to_precision,
    calculate_percentage,
    format_amount,
    format_number,
    format_quantity,
    format_volume,
    format_weight,
)
from amounts.links import EMPTY_CONTEXT, DisplayContext, account_link, account_title
from amounts.locale_config import DEFAULT_LOCALE, LocaleConfig
from amounts.models import AmountParts, DecimalAmount, NumericInput
from amounts.parsing import parse_amount, split
from amounts.precision import infer_decimals

__version__ = "0.1.0"
__all__ = [
    "AmountError",
    "AmountParts",
    "BigInt",
    "DEFAULT_LOCALE",
    "DecimalAmount",
    "DisplayContext",
    "EMPTY_CONTEXT",
    "InvalidInputError",
    "LocaleConfig",
    "MalformedNumericStringError",
    "NullInputError",
    "NumericInput",
    "__version__",
    "account_link",
    "account_title",
    "amount_to_precision",
    "calculate_order_total",
    "calculate_percentage",
    "convert_to_nqt",
    "convert_to_nxt",
    "convert_to_qnt",
    "convert_to_qntf",
    "decimal_to_units",
    "float_to_int",
    "format_amount",
    "format_number",
    "format_quantity",
    "format_volume",
    "format_weight",
    "infer_decimals",
    "int_to_float",
    "multiply",
    "parse_amount",
    "split",
    "units_to_decimal",
    "units_to_parts",
]
