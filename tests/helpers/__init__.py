"""Test helpers module for shared test utilities.

- constants: Common amounts, locales and accounts
"""

from tests.helpers.constants import (
    ACCOUNT_ID,
    ACCOUNT_RS,
    BEYOND_INT64_NQT,
    CH_DE,
    DE_DE,
    EN_US,
    FR_FR,
    MAX_NXT_SUPPLY_NQT,
    ONE_NXT_NQT,
)

__all__ = [
    # Amounts
    "ONE_NXT_NQT",
    "MAX_NXT_SUPPLY_NQT",
    "BEYOND_INT64_NQT",
    # Locales
    "EN_US",
    "DE_DE",
    "FR_FR",
    "CH_DE",
    # Accounts
    "ACCOUNT_RS",
    "ACCOUNT_ID",
]
