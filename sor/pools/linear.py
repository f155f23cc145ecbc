"""Linear pools.

A linear pool holds one main (underlying) token and its wrapped,
yield-bearing version, and issues its own BPT. Swaps main <-> BPT are close
to 1:1, which makes the BPT a good building block for routing through a
top-level stable pool of BPTs.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from sor.constants import BPT_DECIMALS
from sor.models.types import normalize_address

from .base import BasePool, PoolPairData, PoolTokenState, PoolTypes, tokens_from_record
from .errors import InvalidPoolDataError, InvalidTokenPairError, TokenNotInPoolError

if TYPE_CHECKING:
    from sor.models.catalog import PoolRecord


class LinearPairType(Enum):
    """Direction of a swap through a linear pool."""

    MAIN_TO_BPT = "mainToBpt"
    WRAPPED_TO_BPT = "wrappedToBpt"
    BPT_TO_MAIN = "bptToMain"
    BPT_TO_WRAPPED = "bptToWrapped"
    MAIN_TO_WRAPPED = "mainToWrapped"
    WRAPPED_TO_MAIN = "wrappedToMain"


_PAIR_TYPES = {
    ("main", "bpt"): LinearPairType.MAIN_TO_BPT,
    ("wrapped", "bpt"): LinearPairType.WRAPPED_TO_BPT,
    ("bpt", "main"): LinearPairType.BPT_TO_MAIN,
    ("bpt", "wrapped"): LinearPairType.BPT_TO_WRAPPED,
    ("main", "wrapped"): LinearPairType.MAIN_TO_WRAPPED,
    ("wrapped", "main"): LinearPairType.WRAPPED_TO_MAIN,
}


@dataclass(frozen=True)
class LinearPoolPairData(PoolPairData):
    """Pair data for linear pools.

    Attributes:
        pair_type: Which of main/wrapped/BPT is swapped for which
        wrapped_rate: Price rate of the wrapped token
        lower_target: Lower bound of the main token target range
        upper_target: Upper bound of the main token target range
        virtual_bpt_supply: BPT supply used as the BPT balance
    """

    pair_type: LinearPairType
    wrapped_rate: Decimal
    lower_target: Decimal
    upper_target: Decimal
    virtual_bpt_supply: Decimal


@dataclass(frozen=True)
class LinearPool(BasePool):
    """Linear pool (AaveLinear, ERC4626Linear, ...).

    Attributes:
        main_index: Index of the main token in `tokens`
        wrapped_index: Index of the wrapped token in `tokens`
        total_shares: BPT supply
        lower_target: Lower target for the main token balance
        upper_target: Upper target for the main token balance
    """

    main_index: int
    wrapped_index: int
    total_shares: Decimal
    lower_target: Decimal
    upper_target: Decimal

    pool_type = PoolTypes.LINEAR

    @classmethod
    def from_record(
        cls,
        record: PoolRecord,
        current_block_timestamp: int = 0,  # noqa: ARG003 - shared factory signature
    ) -> LinearPool:
        """Build a linear pool from a catalog record.

        Raises:
            InvalidPoolDataError: If main/wrapped indexes are missing or out of range
        """
        tokens = tokens_from_record(record)
        if record.main_index is None or record.wrapped_index is None:
            raise InvalidPoolDataError(f"Linear pool {record.id} missing main/wrapped index")
        for index in (record.main_index, record.wrapped_index):
            if not 0 <= index < len(tokens):
                raise InvalidPoolDataError(
                    f"Linear pool {record.id} token index {index} out of range"
                )
        if record.main_index == record.wrapped_index:
            raise InvalidPoolDataError(f"Linear pool {record.id} main and wrapped index are equal")

        return cls(
            id=record.id,
            address=record.address,
            swap_fee=Decimal(record.swap_fee),
            tokens=tokens,
            tokens_list=tuple(record.tokens_list),
            main_index=record.main_index,
            wrapped_index=record.wrapped_index,
            total_shares=Decimal(record.total_shares),
            lower_target=Decimal(record.lower_target or "0"),
            upper_target=Decimal(record.upper_target or "0"),
        )

    @property
    def main_token(self) -> str:
        """Address of the underlying token."""
        return self.tokens[self.main_index].address

    @property
    def wrapped_token(self) -> str:
        """Address of the wrapped token."""
        return self.tokens[self.wrapped_index].address

    def _resolve(self, token: str) -> tuple[str, PoolTokenState]:
        """Classify a token as main, wrapped or bpt and return its state."""
        token_lower = normalize_address(token)
        if token_lower == normalize_address(self.address):
            return "bpt", PoolTokenState(
                address=self.address, balance=self.total_shares, decimals=BPT_DECIMALS
            )
        if token_lower == normalize_address(self.main_token):
            return "main", self.tokens[self.main_index]
        if token_lower == normalize_address(self.wrapped_token):
            return "wrapped", self.tokens[self.wrapped_index]
        raise TokenNotInPoolError(f"Token {token} not in linear pool {self.id}")

    def parse_pool_pair_data(self, token_in: str, token_out: str) -> LinearPoolPairData:
        kind_in, state_in = self._resolve(token_in)
        kind_out, state_out = self._resolve(token_out)
        pair_type = _PAIR_TYPES.get((kind_in, kind_out))
        if pair_type is None:
            raise InvalidTokenPairError(
                f"Cannot swap {kind_in} for {kind_out} in linear pool {self.id}"
            )

        return LinearPoolPairData(
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
            pair_type=pair_type,
            wrapped_rate=self.tokens[self.wrapped_index].price_rate,
            lower_target=self.lower_target,
            upper_target=self.upper_target,
            virtual_bpt_supply=self.total_shares,
        )

    def get_normalized_liquidity(self, pair_data: PoolPairData) -> Decimal:
        return pair_data.balance_out
