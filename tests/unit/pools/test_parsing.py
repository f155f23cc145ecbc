"""Tests for the pool factory (parse_new_pool)."""

import pytest

from sor.pools import (
    ElementPool,
    LinearPool,
    MetaStablePool,
    StablePool,
    WeightedPool,
    parse_new_pool,
    pool_class_for,
)
from tests.helpers import (
    A_USDC,
    BAL,
    BB_A_USDC,
    DAI,
    USDC,
    WETH,
    make_element_record,
    make_linear_record,
    make_stable_record,
    make_weighted_record,
)


class TestPoolClassFor:
    """Tests for declared pool type dispatch."""

    @pytest.mark.parametrize(
        ("pool_type", "expected"),
        [
            ("Weighted", WeightedPool),
            ("Investment", WeightedPool),
            ("LiquidityBootstrapping", WeightedPool),
            ("Stable", StablePool),
            ("MetaStable", MetaStablePool),
            ("Element", ElementPool),
            ("AaveLinear", LinearPool),
            ("ERC4626Linear", LinearPool),
        ],
    )
    def test_supported_types(self, pool_type: str, expected: type) -> None:
        assert pool_class_for(pool_type) is expected

    @pytest.mark.parametrize("pool_type", ["Gyro2", "StablePhantom", "", "weighted"])
    def test_unsupported_types(self, pool_type: str) -> None:
        assert pool_class_for(pool_type) is None


class TestParseNewPool:
    """Tests for parse_new_pool."""

    def test_weighted(self) -> None:
        pool = parse_new_pool(make_weighted_record("w", [BAL, WETH]))
        assert isinstance(pool, WeightedPool)
        assert pool.id == "w"
        assert pool.tokens_list == (BAL, WETH)

    def test_investment_is_weighted(self) -> None:
        pool = parse_new_pool(make_weighted_record("i", [BAL, WETH], pool_type="Investment"))
        assert isinstance(pool, WeightedPool)

    def test_stable(self) -> None:
        pool = parse_new_pool(make_stable_record("s", [DAI, USDC]))
        assert type(pool) is StablePool

    def test_meta_stable(self) -> None:
        pool = parse_new_pool(make_stable_record("ms", [DAI, USDC], pool_type="MetaStable"))
        assert type(pool) is MetaStablePool

    def test_element_gets_block_timestamp(self) -> None:
        pool = parse_new_pool(make_element_record("e", USDC, DAI), current_block_timestamp=1_234)
        assert isinstance(pool, ElementPool)
        assert pool.current_block_timestamp == 1_234

    def test_linear(self) -> None:
        pool = parse_new_pool(make_linear_record("l", USDC, A_USDC, BB_A_USDC))
        assert isinstance(pool, LinearPool)
        assert pool.main_token == USDC

    def test_unknown_type_returns_none(self) -> None:
        record = make_weighted_record("g", [BAL, WETH], pool_type="Gyro2")
        assert parse_new_pool(record) is None

    def test_invalid_record_returns_none(self) -> None:
        assert parse_new_pool(make_stable_record("s", [DAI, USDC], amp=None)) is None
        assert parse_new_pool(make_element_record("e", USDC, DAI, unit_seconds=None)) is None
