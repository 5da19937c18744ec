"""Command-line front end for the amount codec.

Usage:
    amounts to-units 1.5 --decimals 8
    amounts to-decimal 150000000 --decimals 8
    amounts format-amount 123456780000000 --round
    amounts format-quantity 1234567 --decimals 2 --zero-pad 4
    amounts percentage 10 15 --rounding 0
    amounts volume 1000000
"""

from __future__ import annotations

import argparse
import logging
import sys
from decimal import Decimal

import structlog

from amounts.big_int import BigIntError
from amounts.conversion import convert_to_nxt, decimal_to_units, units_to_decimal
from amounts.errors import AmountError
from amounts.formatting import calculate_percentage, format_amount, format_quantity, format_volume
from amounts.locale_config import LocaleConfig

logger = structlog.get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amounts",
        description="Convert and format fixed-point wallet amounts",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    to_units = commands.add_parser("to-units", help="Decimal amount to base units")
    to_units.add_argument("value")
    to_units.add_argument("--decimals", type=int, required=True)

    to_decimal = commands.add_parser("to-decimal", help="Base units to decimal amount")
    to_decimal.add_argument("units")
    to_decimal.add_argument("--decimals", type=int, required=True)

    amount = commands.add_parser("format-amount", help="Format an NQT amount as NXT")
    amount.add_argument("units")
    amount.add_argument("--round", action="store_true", help="Round to two decimals")
    amount.add_argument("--no-grouping", action="store_true", help="Omit thousands separators")

    quantity = commands.add_parser("format-quantity", help="Format an asset quantity")
    quantity.add_argument("units")
    quantity.add_argument("--decimals", type=int, required=True)
    quantity.add_argument("--zero-pad", type=int, default=None)
    quantity.add_argument("--no-grouping", action="store_true", help="Omit thousands separators")

    percentage = commands.add_parser("percentage", help="numerator / denominator * 100")
    percentage.add_argument("numerator")
    percentage.add_argument("denominator")
    percentage.add_argument(
        "--rounding",
        type=int,
        default=2,
        help="0 down, 1 half-up, 2 half-even, 3 up (default: 2)",
    )

    volume = commands.add_parser("volume", help="Format a byte count")
    volume.add_argument("bytes", type=int)

    return parser


def run(args: argparse.Namespace) -> str:
    locale = LocaleConfig.from_env()
    if args.command == "to-units":
        return decimal_to_units(args.value, args.decimals)
    if args.command == "to-decimal":
        return units_to_decimal(args.units, args.decimals)
    if args.command == "format-amount":
        value = Decimal(convert_to_nxt(args.units)) if args.round else args.units
        return format_amount(value, args.round, not args.no_grouping, locale=locale)
    if args.command == "format-quantity":
        return format_quantity(
            args.units,
            args.decimals,
            not args.no_grouping,
            args.zero_pad,
            locale=locale,
        )
    if args.command == "percentage":
        return calculate_percentage(args.numerator, args.denominator, args.rounding)
    return format_volume(args.bytes)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    try:
        print(run(args))
    except (AmountError, BigIntError) as err:
        logger.error("command_failed", command=args.command, error=str(err))
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
