"""Per-chain configuration for linear pool routing."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from sor.constants import (
    BB_A_USD_KOVAN,
    BB_A_USD_KOVAN_ID,
    BB_A_USD_MAINNET,
    BB_A_USD_MAINNET_ID,
    KOVAN,
    MAINNET,
)


@dataclass(frozen=True)
class TopLevelPool:
    """Shared stable pool whose tokens are the BPTs of linear pools."""

    id: str
    address: str


@dataclass(frozen=True)
class LinearRoutingConfig:
    """Configuration for routing through linear pools.

    Attributes:
        top_level_pools: Chain id -> top-level stable pool. Chains without an
            entry do not get linear routes.
    """

    top_level_pools: Mapping[int, TopLevelPool] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        # Freeze caller-supplied dicts so the config stays read-only
        if not isinstance(self.top_level_pools, MappingProxyType):
            object.__setattr__(
                self, "top_level_pools", MappingProxyType(dict(self.top_level_pools))
            )

    def top_level_pool_id(self, chain_id: int) -> str | None:
        """Return the top-level stable pool id for a chain, if configured."""
        pool = self.top_level_pools.get(chain_id)
        return pool.id if pool is not None else None


# Default configuration instance
DEFAULT_LINEAR_ROUTING_CONFIG = LinearRoutingConfig(
    top_level_pools={
        MAINNET: TopLevelPool(id=BB_A_USD_MAINNET_ID, address=BB_A_USD_MAINNET),
        KOVAN: TopLevelPool(id=BB_A_USD_KOVAN_ID, address=BB_A_USD_KOVAN),
    }
)
