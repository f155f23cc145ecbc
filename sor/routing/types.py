"""Type definitions for routing module."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TypeAlias

from sor.pools import AnyPool, LinearPool, PoolPairData


class SwapPairType(Enum):
    """Role of a pool relative to the requested token pair."""

    DIRECT = "direct"  # holds token_in and token_out
    HOP_IN = "hopIn"  # holds token_in only
    HOP_OUT = "hopOut"  # holds token_out only


@dataclass
class PoolOfInterest:
    """A pool together with the role it plays in one routing request.

    The role is request-scoped, so it is kept here rather than on the pool.
    Direct pools carry their (token_in, token_out) pair data, computed once
    during classification.
    """

    pool: AnyPool
    swap_pair_type: SwapPairType
    pair_data: PoolPairData | None = None

    @property
    def id(self) -> str:
        return self.pool.id


@dataclass(frozen=True)
class Swap:
    """One leg of a path."""

    pool: str
    token_in: str
    token_out: str
    token_in_decimals: int
    token_out_decimals: int


@dataclass
class SwapPath:
    """Ordered, chainable sequence of swaps from one token to another.

    Attributes:
        id: Concatenation of the pool ids, in swap order
        swaps: Swap legs
        pool_pair_data: Pair data for each leg
        pools: Pool of each leg
        limit_amount: Max amount routable along the path, filled in by the optimizer
    """

    id: str
    swaps: list[Swap]
    pool_pair_data: list[PoolPairData]
    pools: list[AnyPool]
    limit_amount: Decimal = field(default_factory=lambda: Decimal(0))

    @property
    def token_in(self) -> str:
        return self.swaps[0].token_in

    @property
    def token_out(self) -> str:
        return self.swaps[-1].token_out

    @property
    def is_multihop(self) -> bool:
        return len(self.swaps) > 1

    @property
    def is_chainable(self) -> bool:
        """Whether every leg starts with the previous leg's output token."""
        return all(
            prev.token_out == nxt.token_in for prev, nxt in zip(self.swaps, self.swaps[1:])
        )


# Request-scoped indexes (insertion ordered)
PoolDictionary: TypeAlias = dict[str, AnyPool]
PoolsOfInterest: TypeAlias = dict[str, PoolOfInterest]
PoolDictionaryByMain: TypeAlias = dict[str, LinearPool]


__all__ = [
    "PoolDictionary",
    "PoolDictionaryByMain",
    "PoolOfInterest",
    "PoolsOfInterest",
    "Swap",
    "SwapPairType",
    "SwapPath",
]
