"""Stable and MetaStable pools (StableSwap / Curve-style)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from .base import BasePool, PoolPairData, PoolTypes, require_decimal, tokens_from_record
from .errors import InvalidPoolDataError

if TYPE_CHECKING:
    from sor.models.catalog import PoolRecord


@dataclass(frozen=True)
class StablePoolPairData(PoolPairData):
    """Pair data for stable pools.

    Attributes:
        amp: Amplification parameter as listed in the catalog (unscaled)
        all_balances: Balances of every pool token, in token order
        token_index_in: Index of token_in in all_balances
        token_index_out: Index of token_out in all_balances
    """

    amp: Decimal
    all_balances: tuple[Decimal, ...]
    token_index_in: int
    token_index_out: int


@dataclass(frozen=True)
class MetaStablePoolPairData(StablePoolPairData):
    """Pair data for MetaStable pools.

    Balances in the base fields are already scaled by the token price rates.
    """

    price_rate_in: Decimal
    price_rate_out: Decimal


@dataclass(frozen=True)
class StablePool(BasePool):
    """Balancer stable pool.

    Attributes:
        amp: Amplification parameter (e.g., 200)
    """

    amp: Decimal

    pool_type = PoolTypes.STABLE

    @classmethod
    def from_record(
        cls,
        record: PoolRecord,
        current_block_timestamp: int = 0,  # noqa: ARG003 - shared factory signature
    ) -> StablePool:
        """Build a stable pool from a catalog record.

        Raises:
            InvalidPoolDataError: If amp is missing or not positive
        """
        amp = require_decimal(record, "amp")
        if amp <= 0:
            raise InvalidPoolDataError(f"Stable pool {record.id} has non-positive amp {amp}")

        return cls(
            id=record.id,
            address=record.address,
            swap_fee=Decimal(record.swap_fee),
            tokens=tokens_from_record(record),
            tokens_list=tuple(record.tokens_list),
            amp=amp,
        )

    def parse_pool_pair_data(self, token_in: str, token_out: str) -> StablePoolPairData:
        index_in = self._token_index(token_in)
        index_out = self._token_index(token_out)
        state_in = self.tokens[index_in]
        state_out = self.tokens[index_out]

        return StablePoolPairData(
            id=self.id,
            address=self.address,
            pool_type=self.pool_type,
            token_in=token_in,
            token_out=token_out,
            decimals_in=state_in.decimals,
            decimals_out=state_out.decimals,
            balance_in=state_in.balance,
            balance_out=state_out.balance,
            swap_fee=self.swap_fee,
            amp=self.amp,
            all_balances=tuple(t.balance for t in self.tokens),
            token_index_in=index_in,
            token_index_out=index_out,
        )

    def get_normalized_liquidity(self, pair_data: PoolPairData) -> Decimal:
        """balance_out * amp.

        A higher amp keeps the price flat for longer, so it counts as depth.
        """
        if not isinstance(pair_data, StablePoolPairData):
            raise TypeError(f"Expected StablePoolPairData, got {type(pair_data).__name__}")
        return pair_data.balance_out * pair_data.amp


@dataclass(frozen=True)
class MetaStablePool(StablePool):
    """Stable pool whose tokens trade at a rate (e.g. wstETH/WETH)."""

    pool_type = PoolTypes.META_STABLE

    def parse_pool_pair_data(self, token_in: str, token_out: str) -> MetaStablePoolPairData:
        index_in = self._token_index(token_in)
        index_out = self._token_index(token_out)
        state_in = self.tokens[index_in]
        state_out = self.tokens[index_out]

        return MetaStablePoolPairData(
            id=self.id,
            address=self.address,
            pool_type=self.pool_type,
            token_in=token_in,
            token_out=token_out,
            decimals_in=state_in.decimals,
            decimals_out=state_out.decimals,
            balance_in=state_in.balance * state_in.price_rate,
            balance_out=state_out.balance * state_out.price_rate,
            swap_fee=self.swap_fee,
            amp=self.amp,
            all_balances=tuple(t.balance * t.price_rate for t in self.tokens),
            token_index_in=index_in,
            token_index_out=index_out,
            price_rate_in=state_in.price_rate,
            price_rate_out=state_out.price_rate,
        )
