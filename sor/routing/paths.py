"""Path construction helpers.

Builds SwapPath objects from pools. None of these functions check that the
tokens chain; callers only pass pools and tokens that do.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

from sor.routing.types import Swap, SwapPairType, SwapPath

if TYPE_CHECKING:
    from collections.abc import Iterable

    from sor.pools import AnyPool, PoolPairData
    from sor.routing.types import PoolsOfInterest


def create_direct_path(
    pool: AnyPool,
    token_in: str,
    token_out: str,
    pair_data: PoolPairData | None = None,
) -> SwapPath:
    """Create a single-swap path through one pool.

    Args:
        pool: Pool to swap through
        token_in: Input token
        token_out: Output token
        pair_data: Pair data for (token_in, token_out) if already computed

    Returns:
        SwapPath whose id is the pool id
    """
    if pair_data is None:
        pair_data = pool.parse_pool_pair_data(token_in, token_out)

    swap = Swap(
        pool=pool.id,
        token_in=token_in,
        token_out=token_out,
        token_in_decimals=pair_data.decimals_in,
        token_out_decimals=pair_data.decimals_out,
    )

    return SwapPath(
        id=pool.id,
        swaps=[swap],
        pool_pair_data=[pair_data],
        pools=[pool],
    )


def create_multihop_path(
    first_pool: AnyPool,
    second_pool: AnyPool,
    token_in: str,
    hop_token: str,
    token_out: str,
) -> SwapPath:
    """Create a two-swap path token_in -> hop_token -> token_out.

    The path id is first_pool.id followed by second_pool.id.
    """
    pair_data_first = first_pool.parse_pool_pair_data(token_in, hop_token)
    pair_data_second = second_pool.parse_pool_pair_data(hop_token, token_out)

    first_swap = Swap(
        pool=first_pool.id,
        token_in=token_in,
        token_out=hop_token,
        token_in_decimals=pair_data_first.decimals_in,
        # Hop token decimals as listed in the first pool
        token_out_decimals=pair_data_first.decimals_out,
    )
    second_swap = Swap(
        pool=second_pool.id,
        token_in=hop_token,
        token_out=token_out,
        token_in_decimals=pair_data_second.decimals_in,
        token_out_decimals=pair_data_second.decimals_out,
    )

    return SwapPath(
        id=first_pool.id + second_pool.id,
        swaps=[first_swap, second_swap],
        pool_pair_data=[pair_data_first, pair_data_second],
        pools=[first_pool, second_pool],
    )


def compose_paths(paths: Iterable[SwapPath]) -> SwapPath:
    """Concatenate paths whose tokens already chain into a single path."""
    path_id = ""
    swaps: list[Swap] = []
    pool_pair_data: list[PoolPairData] = []
    pools: list[AnyPool] = []
    for path in paths:
        path_id += path.id
        swaps.extend(path.swaps)
        pool_pair_data.extend(path.pool_pair_data)
        pools.extend(path.pools)

    return SwapPath(id=path_id, swaps=swaps, pool_pair_data=pool_pair_data, pools=pools)


def make_linear_pathway(
    token_in: str,
    token_out: str,
    linear_pool_in: AnyPool,
    linear_pool_out: AnyPool,
    top_level_pool: AnyPool,
) -> SwapPath:
    """Path token_in -> BPT_in -> BPT_out -> token_out.

    The first and last swaps go through linear pools, wrapping token_in into
    the BPT of linear_pool_in and unwrapping the BPT of linear_pool_out into
    token_out. The middle swap trades the two BPTs in the top-level pool.
    """
    bpt_in = linear_pool_in.address
    bpt_out = linear_pool_out.address
    return compose_paths(
        [
            create_direct_path(linear_pool_in, token_in, bpt_in),
            create_direct_path(top_level_pool, bpt_in, bpt_out),
            create_direct_path(linear_pool_out, bpt_out, token_out),
        ]
    )


def get_highest_liquidity_pool(
    token_in: str,
    token_out: str,
    swap_pair_type: SwapPairType,
    pools_of_interest: PoolsOfInterest,
) -> str:
    """Find the pool of a given role with the most liquidity for a pair.

    Ties go to the pool seen last.

    Returns:
        Pool id, or "" if no pool of that role holds both tokens
    """
    highest_liquidity = Decimal(0)
    highest_liquidity_pool_id = ""
    for pool_id, entry in pools_of_interest.items():
        if entry.swap_pair_type != swap_pair_type:
            continue

        token_set = set(entry.pool.tokens_list)
        if token_in not in token_set or token_out not in token_set:
            continue

        pair_data = entry.pool.parse_pool_pair_data(token_in, token_out)
        normalized_liquidity = entry.pool.get_normalized_liquidity(pair_data)
        # >= so that a pool with zero liquidity is still picked
        if normalized_liquidity >= highest_liquidity:
            highest_liquidity = normalized_liquidity
            highest_liquidity_pool_id = pool_id

    return highest_liquidity_pool_id
