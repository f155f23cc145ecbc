"""Factory functions for creating catalog records in tests.

Usage:
    from tests.helpers import make_weighted_record
    # or
    from tests.helpers.factories import make_weighted_record, make_linear_record

    record = make_weighted_record("pool-a", [WETH, USDC])
"""

import hashlib

from sor.models.catalog import PoolRecord, PoolTokenRecord
from tests.helpers.constants import TOKEN_DECIMALS


def address_for(pool_id: str) -> str:
    """Deterministic pool address derived from a pool id."""
    return "0x" + hashlib.sha1(pool_id.encode()).hexdigest()


def make_token(
    address: str,
    balance: str = "1000",
    decimals: int | None = None,
    weight: str | None = None,
    price_rate: str = "1",
) -> PoolTokenRecord:
    """Create a catalog token entry (decimals default to TOKEN_DECIMALS, else 18)."""
    if decimals is None:
        decimals = TOKEN_DECIMALS.get(address, 18)
    return PoolTokenRecord(
        address=address,
        balance=balance,
        decimals=decimals,
        weight=weight,
        price_rate=price_rate,
    )


def _balances(tokens: list[str], balances: list[str] | None) -> list[str]:
    return balances if balances is not None else ["1000"] * len(tokens)


def make_weighted_record(
    pool_id: str,
    tokens: list[str],
    balances: list[str] | None = None,
    weights: list[str] | None = None,
    pool_type: str = "Weighted",
    address: str | None = None,
) -> PoolRecord:
    """Create a weighted pool record (equal weights by default)."""
    balances = _balances(tokens, balances)
    if weights is None:
        weights = ["1"] * len(tokens)
    return PoolRecord(
        id=pool_id,
        address=address or address_for(pool_id),
        pool_type=pool_type,
        swap_fee="0.003",
        total_shares="100",
        tokens=[make_token(t, b, weight=w) for t, b, w in zip(tokens, balances, weights)],
        tokens_list=list(tokens),
    )


def make_stable_record(
    pool_id: str,
    tokens: list[str],
    balances: list[str] | None = None,
    amp: str | None = "200",
    pool_type: str = "Stable",
    price_rates: list[str] | None = None,
    address: str | None = None,
) -> PoolRecord:
    """Create a Stable (or MetaStable, via pool_type) pool record."""
    balances = _balances(tokens, balances)
    rates = price_rates if price_rates is not None else ["1"] * len(tokens)
    return PoolRecord(
        id=pool_id,
        address=address or address_for(pool_id),
        pool_type=pool_type,
        swap_fee="0.0004",
        total_shares="3000",
        tokens=[make_token(t, b, price_rate=r) for t, b, r in zip(tokens, balances, rates)],
        tokens_list=list(tokens),
        amp=amp,
    )


def make_element_record(
    pool_id: str,
    base_token: str,
    principal_token: str,
    balances: tuple[str, str] = ("1000", "1000"),
    expiry_time: int | None = 2_000,
    unit_seconds: int | None = 100,
) -> PoolRecord:
    """Create an Element pool record (base token listed first)."""
    return PoolRecord(
        id=pool_id,
        address=address_for(pool_id),
        pool_type="Element",
        swap_fee="0.1",
        total_shares="500",
        tokens=[make_token(base_token, balances[0]), make_token(principal_token, balances[1])],
        tokens_list=[base_token, principal_token],
        expiry_time=expiry_time,
        unit_seconds=unit_seconds,
        principal_token=principal_token,
        base_token=base_token,
    )


def make_linear_record(
    pool_id: str,
    main_token: str,
    wrapped_token: str,
    bpt: str,
    main_balance: str = "1000",
    wrapped_balance: str = "1000",
    total_shares: str = "2000",
    pool_type: str = "AaveLinear",
) -> PoolRecord:
    """Create a linear pool record whose address (BPT) is `bpt`."""
    return PoolRecord(
        id=pool_id,
        address=bpt,
        pool_type=pool_type,
        swap_fee="0.0002",
        total_shares=total_shares,
        tokens=[
            make_token(main_token, main_balance),
            make_token(wrapped_token, wrapped_balance, price_rate="1.05"),
        ],
        tokens_list=[main_token, wrapped_token],
        main_index=0,
        wrapped_index=1,
        lower_target="500",
        upper_target="1500",
    )


__all__ = [
    "address_for",
    "make_token",
    "make_weighted_record",
    "make_stable_record",
    "make_element_record",
    "make_linear_record",
]
