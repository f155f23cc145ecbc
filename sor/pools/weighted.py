"""Weighted pools (Weighted, Investment and LiquidityBootstrapping)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from .base import BasePool, PoolPairData, PoolTokenState, PoolTypes, tokens_from_record
from .errors import InvalidPoolDataError

if TYPE_CHECKING:
    from sor.models.catalog import PoolRecord


@dataclass(frozen=True)
class WeightedPoolPairData(PoolPairData):
    """Pair data for weighted pools.

    Attributes:
        weight_in: Normalized weight of token_in (weights sum to 1)
        weight_out: Normalized weight of token_out
    """

    weight_in: Decimal
    weight_out: Decimal


def _weight(state: PoolTokenState) -> Decimal:
    # Weights are checked in WeightedPool.from_record
    return state.weight if state.weight is not None else Decimal(0)


@dataclass(frozen=True)
class WeightedPool(BasePool):
    """Balancer weighted product pool.

    Attributes:
        total_weight: Sum of denormalized token weights
    """

    total_weight: Decimal

    pool_type = PoolTypes.WEIGHTED

    @classmethod
    def from_record(
        cls,
        record: PoolRecord,
        current_block_timestamp: int = 0,  # noqa: ARG003 - shared factory signature
    ) -> WeightedPool:
        """Build a weighted pool from a catalog record.

        Raises:
            InvalidPoolDataError: If a token has no positive weight
        """
        tokens = tokens_from_record(record)
        for token in tokens:
            if token.weight is None or token.weight <= 0:
                raise InvalidPoolDataError(
                    f"Weighted pool {record.id} has invalid weight for {token.address}"
                )

        if record.total_weight is not None:
            total_weight = Decimal(record.total_weight)
        else:
            total_weight = sum((t.weight for t in tokens if t.weight is not None), Decimal(0))
        if total_weight <= 0:
            raise InvalidPoolDataError(f"Weighted pool {record.id} has non-positive total weight")

        return cls(
            id=record.id,
            address=record.address,
            swap_fee=Decimal(record.swap_fee),
            tokens=tokens,
            tokens_list=tuple(record.tokens_list),
            total_weight=total_weight,
        )

    def parse_pool_pair_data(self, token_in: str, token_out: str) -> WeightedPoolPairData:
        state_in = self.tokens[self._token_index(token_in)]
        state_out = self.tokens[self._token_index(token_out)]

        return WeightedPoolPairData(
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
            weight_in=_weight(state_in) / self.total_weight,
            weight_out=_weight(state_out) / self.total_weight,
        )

    def get_normalized_liquidity(self, pair_data: PoolPairData) -> Decimal:
        """Liquidity weighted by the share of token_in in the pair.

        balance_out * weight_in / (weight_in + weight_out)
        """
        if not isinstance(pair_data, WeightedPoolPairData):
            raise TypeError(f"Expected WeightedPoolPairData, got {type(pair_data).__name__}")
        return (
            pair_data.balance_out
            * pair_data.weight_in
            / (pair_data.weight_in + pair_data.weight_out)
        )
