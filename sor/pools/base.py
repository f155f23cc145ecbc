"""Base pool and pair data dataclasses.

Every pool variant is a frozen dataclass built once per routing request from
a catalog record. Pools never carry per-request routing state, so a pool
object can be shared between concurrent requests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from sor.models.types import normalize_address

from .errors import InvalidPoolDataError, TokenNotInPoolError

if TYPE_CHECKING:
    from sor.models.catalog import PoolRecord


class PoolTypes(str, Enum):
    """Pool variants supported by the router."""

    WEIGHTED = "Weighted"
    STABLE = "Stable"
    META_STABLE = "MetaStable"
    ELEMENT = "Element"
    LINEAR = "Linear"


@dataclass(frozen=True)
class PoolTokenState:
    """Token state inside a pool.

    Attributes:
        address: Token address as listed in the catalog
        balance: Human-readable balance (already divided by 10^decimals)
        decimals: Token decimals
        weight: Denormalized weight (weighted pools only)
        price_rate: Rate used to scale the balance (MetaStable, Linear)
    """

    address: str
    balance: Decimal
    decimals: int
    weight: Decimal | None = None
    price_rate: Decimal = Decimal(1)


@dataclass(frozen=True)
class PoolPairData:
    """Data needed to evaluate a swap of token_in for token_out in one pool."""

    id: str
    address: str
    pool_type: PoolTypes
    token_in: str
    token_out: str
    decimals_in: int
    decimals_out: int
    balance_in: Decimal
    balance_out: Decimal
    swap_fee: Decimal


@dataclass(frozen=True)
class BasePool(ABC):
    """Common fields and token lookup for all pool variants.

    Attributes:
        id: Pool id (unique per catalog)
        address: Pool contract address, which is also its BPT address
        swap_fee: Swap fee as decimal (e.g., 0.003 for 0.3%)
        tokens: Token state in catalog order
        tokens_list: Token addresses in catalog order
    """

    id: str
    address: str
    swap_fee: Decimal
    tokens: tuple[PoolTokenState, ...]
    tokens_list: tuple[str, ...]

    pool_type: ClassVar[PoolTypes]

    def get_token(self, token: str) -> PoolTokenState | None:
        """Get token state for a specific token (case-insensitive)."""
        token_lower = normalize_address(token)
        for state in self.tokens:
            if normalize_address(state.address) == token_lower:
                return state
        return None

    def _token_index(self, token: str) -> int:
        """Index of a token in `tokens` (case-insensitive).

        Raises:
            TokenNotInPoolError: If the token is not in the pool
        """
        token_lower = normalize_address(token)
        for index, state in enumerate(self.tokens):
            if normalize_address(state.address) == token_lower:
                return index
        raise TokenNotInPoolError(f"Token {token} not in pool {self.id}")

    @abstractmethod
    def parse_pool_pair_data(self, token_in: str, token_out: str) -> PoolPairData:
        """Derive pair data for swapping token_in for token_out.

        Raises:
            TokenNotInPoolError: If either token is not in the pool
        """
        ...

    @abstractmethod
    def get_normalized_liquidity(self, pair_data: PoolPairData) -> Decimal:
        """Estimate tradable depth for a pair. Higher is better."""
        ...


def tokens_from_record(record: PoolRecord) -> tuple[PoolTokenState, ...]:
    """Convert catalog token entries to PoolTokenState tuples."""
    return tuple(
        PoolTokenState(
            address=token.address,
            balance=Decimal(token.balance),
            decimals=token.decimals,
            weight=Decimal(token.weight) if token.weight is not None else None,
            price_rate=Decimal(token.price_rate),
        )
        for token in record.tokens
    )


def require_decimal(record: PoolRecord, field_name: str) -> Decimal:
    """Read a required decimal field of a record.

    Raises:
        InvalidPoolDataError: If the field is missing
    """
    raw = getattr(record, field_name)
    if raw is None:
        raise InvalidPoolDataError(f"Pool {record.id} ({record.pool_type}) missing {field_name}")
    return Decimal(raw)
