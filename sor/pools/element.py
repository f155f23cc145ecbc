"""Element pools (principal token / base token, with a fixed expiry)."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from .base import BasePool, PoolPairData, PoolTypes, tokens_from_record
from .errors import InvalidPoolDataError

if TYPE_CHECKING:
    from sor.models.catalog import PoolRecord


@dataclass(frozen=True)
class ElementPoolPairData(PoolPairData):
    """Pair data for Element pools.

    Attributes:
        time_remaining: Time to expiry in units of unit_seconds (0 once expired)
        total_shares: Total BPT supply
        principal_token: Principal token address
        base_token: Base token address
    """

    time_remaining: Decimal
    total_shares: Decimal
    principal_token: str
    base_token: str


def get_time_to_expiry(expiry_time: int, current_block_timestamp: int, unit_seconds: int) -> Decimal:
    """Time left until expiry, expressed in unit_seconds and clamped at zero."""
    time_left = max(expiry_time - current_block_timestamp, 0)
    return Decimal(time_left) / Decimal(unit_seconds)


@dataclass(frozen=True)
class ElementPool(BasePool):
    """Element Finance convergent curve pool."""

    total_shares: Decimal
    expiry_time: int
    unit_seconds: int
    principal_token: str
    base_token: str
    current_block_timestamp: int

    pool_type = PoolTypes.ELEMENT

    @classmethod
    def from_record(cls, record: PoolRecord, current_block_timestamp: int = 0) -> ElementPool:
        """Build an Element pool from a catalog record.

        The block timestamp is fixed at construction; pair data computes the
        time to expiry against it.

        Raises:
            InvalidPoolDataError: If expiry fields or principal/base tokens are missing
        """
        if record.expiry_time is None or record.unit_seconds is None:
            raise InvalidPoolDataError(f"Element pool {record.id} missing expiry data")
        if record.unit_seconds <= 0:
            raise InvalidPoolDataError(
                f"Element pool {record.id} has non-positive unitSeconds {record.unit_seconds}"
            )
        if record.principal_token is None or record.base_token is None:
            raise InvalidPoolDataError(f"Element pool {record.id} missing principal/base token")

        return cls(
            id=record.id,
            address=record.address,
            swap_fee=Decimal(record.swap_fee),
            tokens=tokens_from_record(record),
            tokens_list=tuple(record.tokens_list),
            total_shares=Decimal(record.total_shares),
            expiry_time=record.expiry_time,
            unit_seconds=record.unit_seconds,
            principal_token=record.principal_token,
            base_token=record.base_token,
            current_block_timestamp=current_block_timestamp,
        )

    def parse_pool_pair_data(self, token_in: str, token_out: str) -> ElementPoolPairData:
        state_in = self.tokens[self._token_index(token_in)]
        state_out = self.tokens[self._token_index(token_out)]

        return ElementPoolPairData(
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
            time_remaining=get_time_to_expiry(
                self.expiry_time, self.current_block_timestamp, self.unit_seconds
            ),
            total_shares=self.total_shares,
            principal_token=self.principal_token,
            base_token=self.base_token,
        )

    def get_normalized_liquidity(self, pair_data: PoolPairData) -> Decimal:
        # Slippage barely matters for ranking hop pools; the output balance is enough
        return pair_data.balance_out
