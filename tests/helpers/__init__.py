"""Test helpers module for shared test utilities.

- constants: Token addresses and test chain id
- factories: Catalog record factory functions
"""

from tests.helpers.constants import (
    A_DAI,
    A_USDC,
    A_USDT,
    A_WETH,
    BAL,
    BB_A_DAI,
    BB_A_USD,
    BB_A_USDC,
    BB_A_USDT,
    BB_A_WETH,
    DAI,
    TEST_CHAIN_ID,
    TOKEN_DECIMALS,
    USDC,
    USDT,
    WBTC,
    WETH,
)
from tests.helpers.factories import (
    address_for,
    make_element_record,
    make_linear_record,
    make_stable_record,
    make_token,
    make_weighted_record,
)

__all__ = [
    # Constants
    "WETH",
    "USDC",
    "DAI",
    "USDT",
    "WBTC",
    "BAL",
    "A_USDC",
    "A_DAI",
    "A_USDT",
    "BB_A_USDC",
    "BB_A_DAI",
    "BB_A_USDT",
    "BB_A_USD",
    "A_WETH",
    "BB_A_WETH",
    "TEST_CHAIN_ID",
    "TOKEN_DECIMALS",
    # Factories
    "address_for",
    "make_token",
    "make_weighted_record",
    "make_stable_record",
    "make_element_record",
    "make_linear_record",
]
