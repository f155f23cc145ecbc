"""Tests for linear routing configuration."""

from types import MappingProxyType

import pytest

from sor.config import DEFAULT_LINEAR_ROUTING_CONFIG, LinearRoutingConfig, TopLevelPool
from sor.constants import BB_A_USD_MAINNET, BB_A_USD_MAINNET_ID, KOVAN, MAINNET


class TestLinearRoutingConfig:
    def test_default_config(self) -> None:
        assert DEFAULT_LINEAR_ROUTING_CONFIG.top_level_pool_id(MAINNET) == BB_A_USD_MAINNET_ID
        assert DEFAULT_LINEAR_ROUTING_CONFIG.top_level_pool_id(KOVAN) is not None
        assert DEFAULT_LINEAR_ROUTING_CONFIG.top_level_pool_id(100) is None

    def test_pool_id_starts_with_address(self) -> None:
        assert BB_A_USD_MAINNET_ID.startswith(BB_A_USD_MAINNET)
        assert len(BB_A_USD_MAINNET_ID) == 66

    def test_empty_config(self) -> None:
        assert LinearRoutingConfig().top_level_pool_id(MAINNET) is None

    def test_config_is_read_only(self) -> None:
        pools = {7: TopLevelPool(id="top", address="0x" + "bb" * 20)}
        config = LinearRoutingConfig(top_level_pools=pools)

        # Later changes to the source dict do not leak in
        pools[8] = TopLevelPool(id="other", address="0x" + "cc" * 20)

        assert isinstance(config.top_level_pools, MappingProxyType)
        assert config.top_level_pool_id(7) == "top"
        assert config.top_level_pool_id(8) is None
        with pytest.raises(TypeError):
            config.top_level_pools[9] = pools[7]  # type: ignore[index]
