"""Pytest configuration and fixtures."""

import pytest

from sor.config import LinearRoutingConfig, TopLevelPool
from sor.models.catalog import PoolRecord
from tests.helpers import (
    A_DAI,
    A_USDC,
    A_USDT,
    BB_A_DAI,
    BB_A_USD,
    BB_A_USDC,
    BB_A_USDT,
    DAI,
    TEST_CHAIN_ID,
    USDC,
    USDT,
    make_linear_record,
    make_stable_record,
    make_weighted_record,
)

# Tokens of the basic hop scenario: X -> Y -> Z
TOKEN_X = "0x" + "0a" * 20
TOKEN_Y = "0x" + "0b" * 20
TOKEN_Z = "0x" + "0c" * 20

TOP_LEVEL_POOL_ID = "bb-a-usd"


@pytest.fixture
def hop_catalog() -> list[PoolRecord]:
    """Pool A holds {X, Y}, pool B holds {Y, Z}."""
    return [
        make_weighted_record("pool-a", [TOKEN_X, TOKEN_Y]),
        make_weighted_record("pool-b", [TOKEN_Y, TOKEN_Z]),
    ]


@pytest.fixture
def hop_and_direct_catalog(hop_catalog: list[PoolRecord]) -> list[PoolRecord]:
    """hop_catalog plus pool C holding {X, Z}."""
    return [*hop_catalog, make_weighted_record("pool-c", [TOKEN_X, TOKEN_Z])]


@pytest.fixture
def linear_config() -> LinearRoutingConfig:
    """Linear routing config for the test chain only."""
    return LinearRoutingConfig(
        top_level_pools={TEST_CHAIN_ID: TopLevelPool(id=TOP_LEVEL_POOL_ID, address=BB_A_USD)}
    )


@pytest.fixture
def linear_records() -> list[PoolRecord]:
    """Linear pools for USDC, DAI and USDT plus the top-level pool of their BPTs."""
    return [
        make_linear_record("linear-usdc", USDC, A_USDC, BB_A_USDC),
        make_linear_record("linear-dai", DAI, A_DAI, BB_A_DAI),
        make_linear_record("linear-usdt", USDT, A_USDT, BB_A_USDT),
        make_stable_record(
            TOP_LEVEL_POOL_ID,
            [BB_A_USDC, BB_A_DAI, BB_A_USDT],
            balances=["2000", "2000", "2000"],
            amp="1472",
            address=BB_A_USD,
        ),
    ]
