"""Pool filtering and candidate path discovery.

Given a token pair and the pool catalog, this module:
- keeps the pools that hold token_in and/or token_out (pools of interest)
- finds hop tokens, i.e. tokens that connect a token_in pool to a token_out pool
- picks the most liquid pool on each side of every hop token
- builds paths through linear pools and the top-level stable pool of BPTs

Iteration order of every dict is insertion order, which decides tie-breaks.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import structlog

from sor.config import DEFAULT_LINEAR_ROUTING_CONFIG
from sor.models.catalog import PoolFilter
from sor.models.types import normalize_address
from sor.pools import LinearPool, parse_new_pool
from sor.routing.paths import (
    compose_paths,
    create_direct_path,
    create_multihop_path,
    get_highest_liquidity_pool,
    make_linear_pathway,
)
from sor.routing.types import PoolOfInterest, SwapPairType

if TYPE_CHECKING:
    from sor.config import LinearRoutingConfig
    from sor.models.catalog import PoolRecord
    from sor.routing.types import (
        PoolDictionary,
        PoolDictionaryByMain,
        PoolsOfInterest,
        SwapPath,
    )

logger = structlog.get_logger()


def filter_pools_by_type(
    pools: list[PoolRecord], pool_type_filter: PoolFilter | str
) -> list[PoolRecord]:
    """Keep only the records of the declared pool type (all for PoolFilter.ALL)."""
    pool_type = (
        pool_type_filter.value if isinstance(pool_type_filter, PoolFilter) else pool_type_filter
    )
    if pool_type == PoolFilter.ALL.value:
        return pools
    return [pool for pool in pools if pool.pool_type == pool_type]


def _is_zero_balance(balance: str) -> bool:
    return Decimal(balance) == 0


def filter_pools_of_interest(
    all_pools: list[PoolRecord],
    token_in: str,
    token_out: str,
    max_pools: int,
    current_block_timestamp: int = 0,
) -> tuple[PoolsOfInterest, list[str], PoolDictionary]:
    """Classify pools by their role for the token pair and find hop tokens.

    A pool holding both tokens is DIRECT. With max_pools > 1, a pool holding
    only token_in is HOP_IN and a pool holding only token_out is HOP_OUT.
    Hop tokens are the tokens found both in some HOP_IN pool and in some
    HOP_OUT pool.

    Args:
        all_pools: Catalog records
        token_in: Token to sell
        token_out: Token to buy
        max_pools: Maximum pools per swap; 1 disables hops
        current_block_timestamp: Passed to time-dependent pools

    Returns:
        Tuple of (pools of interest by id, hop tokens, every parsed pool by id)
    """
    pools_all: PoolDictionary = {}
    pools_of_interest: PoolsOfInterest = {}

    # Ordered sets (dict keys) of tokens sharing a pool with token_in / token_out
    token_in_paired_tokens: dict[str, None] = {}
    token_out_paired_tokens: dict[str, None] = {}

    for record in all_pools:
        if not record.tokens_list or not record.tokens:
            logger.debug("pool_skipped_no_tokens", pool_id=record.id)
            continue
        if _is_zero_balance(record.tokens[0].balance):
            logger.debug("pool_skipped_zero_balance", pool_id=record.id)
            continue

        pool = parse_new_pool(record, current_block_timestamp)
        if pool is None:
            continue

        pools_all[record.id] = pool

        token_set = set(pool.tokens_list)

        if (token_in in token_set and token_out in token_set) or (
            token_in.lower() in token_set and token_out.lower() in token_set
        ):
            # Direct pools are always used, so compute their pair data now
            pools_of_interest[record.id] = PoolOfInterest(
                pool=pool,
                swap_pair_type=SwapPairType.DIRECT,
                pair_data=pool.parse_pool_pair_data(token_in, token_out),
            )
            continue

        if max_pools > 1:
            contains_token_in = token_in in token_set
            contains_token_out = token_out in token_set

            if contains_token_in and not contains_token_out:
                token_in_paired_tokens.update(dict.fromkeys(pool.tokens_list))
                pools_of_interest[record.id] = PoolOfInterest(
                    pool=pool, swap_pair_type=SwapPairType.HOP_IN
                )
            elif not contains_token_in and contains_token_out:
                token_out_paired_tokens.update(dict.fromkeys(pool.tokens_list))
                pools_of_interest[record.id] = PoolOfInterest(
                    pool=pool, swap_pair_type=SwapPairType.HOP_OUT
                )

    hop_tokens = [token for token in token_in_paired_tokens if token in token_out_paired_tokens]

    logger.debug(
        "pools_of_interest_filtered",
        token_in=token_in,
        token_out=token_out,
        pools_total=len(all_pools),
        pools_parsed=len(pools_all),
        pools_of_interest=len(pools_of_interest),
        hop_tokens=len(hop_tokens),
    )
    return pools_of_interest, hop_tokens, pools_all


def filter_hop_pools(
    token_in: str,
    token_out: str,
    hop_tokens: list[str],
    pools_of_interest: PoolsOfInterest,
) -> tuple[PoolsOfInterest, list[SwapPath]]:
    """Pick the most liquid pool on each side of every hop token.

    Emits one direct path per DIRECT pool and at most one two-swap path per
    hop token, built from the most liquid HOP_IN pool for (token_in, hop) and
    the most liquid HOP_OUT pool for (hop, token_out). Ties go to the pool
    seen last.

    Returns:
        Tuple of (pools used by the emitted paths, paths)
    """
    used_pools: PoolsOfInterest = {}
    paths: list[SwapPath] = []

    # No hop tokens, but direct pools still need their paths
    if not hop_tokens:
        for pool_id, entry in pools_of_interest.items():
            if entry.swap_pair_type != SwapPairType.DIRECT:
                continue
            paths.append(create_direct_path(entry.pool, token_in, token_out, entry.pair_data))
            used_pools[pool_id] = entry

    first_pool_loop = True
    for hop_token in hop_tokens:
        highest_liquidity_first = Decimal(0)
        highest_liquidity_first_pool_id: str | None = None
        highest_liquidity_second = Decimal(0)
        highest_liquidity_second_pool_id: str | None = None

        for pool_id, entry in pools_of_interest.items():
            pool = entry.pool

            if entry.swap_pair_type == SwapPairType.DIRECT:
                # Direct pools are not hop candidates; emit their paths once
                if first_pool_loop:
                    paths.append(create_direct_path(pool, token_in, token_out, entry.pair_data))
                    used_pools[pool_id] = entry
                continue

            if hop_token not in pool.tokens_list:
                continue

            # >= so that a pool is still picked when its hop token balance is 0
            if entry.swap_pair_type == SwapPairType.HOP_IN:
                pair_data = pool.parse_pool_pair_data(token_in, hop_token)
                normalized_liquidity = pool.get_normalized_liquidity(pair_data)
                if normalized_liquidity >= highest_liquidity_first:
                    highest_liquidity_first = normalized_liquidity
                    highest_liquidity_first_pool_id = pool_id
            elif entry.swap_pair_type == SwapPairType.HOP_OUT:
                pair_data = pool.parse_pool_pair_data(hop_token, token_out)
                normalized_liquidity = pool.get_normalized_liquidity(pair_data)
                if normalized_liquidity >= highest_liquidity_second:
                    highest_liquidity_second = normalized_liquidity
                    highest_liquidity_second_pool_id = pool_id

        first_pool_loop = False

        if highest_liquidity_first_pool_id is None or highest_liquidity_second_pool_id is None:
            logger.debug("hop_token_without_pools", hop_token=hop_token)
            continue

        first_entry = pools_of_interest[highest_liquidity_first_pool_id]
        second_entry = pools_of_interest[highest_liquidity_second_pool_id]
        used_pools[highest_liquidity_first_pool_id] = first_entry
        used_pools[highest_liquidity_second_pool_id] = second_entry

        paths.append(
            create_multihop_path(first_entry.pool, second_entry.pool, token_in, hop_token, token_out)
        )

    return used_pools, paths


def get_paths_using_linear_pools(
    token_in: str,
    token_out: str,
    pools_all: PoolDictionary,
    pools_of_interest: PoolsOfInterest,
    chain_id: int,
    config: LinearRoutingConfig = DEFAULT_LINEAR_ROUTING_CONFIG,
) -> list[SwapPath]:
    """Build paths through linear pools and the chain's top-level stable pool.

    - both tokens have a linear pool: one path
      linear_in -> top-level pool -> linear_out
    - only token_in has one: for every other linear main token, the linear
      pathway to it followed by the most liquid HOP_OUT pool to token_out
    - only token_out has one: the most liquid HOP_IN pool from token_in to a
      linear main token, followed by the linear pathway to token_out

    A linear pool counts only if its BPT is a token of the top-level pool.

    Returns:
        Paths, or an empty list if linear routing does not apply
    """
    top_level_pool_id = config.top_level_pool_id(chain_id)
    if top_level_pool_id is None:
        logger.debug("linear_routing_unavailable", chain_id=chain_id, reason="no_config")
        return []

    top_level_pool = pools_all.get(top_level_pool_id)
    if top_level_pool is None:
        logger.debug("linear_routing_unavailable", chain_id=chain_id, reason="pool_missing")
        return []

    # Only linear pools whose BPT trades in the top-level pool can be routed
    top_level_tokens = {normalize_address(token) for token in top_level_pool.tokens_list}
    linear_pools_by_main: PoolDictionaryByMain = {}
    for pool in pools_all.values():
        if not isinstance(pool, LinearPool):
            continue
        if normalize_address(pool.address) not in top_level_tokens:
            logger.debug(
                "linear_pool_not_in_top_level_pool",
                pool_id=pool.id,
                top_level_pool_id=top_level_pool_id,
            )
            continue
        linear_pools_by_main[pool.main_token] = pool

    linear_pool_in = linear_pools_by_main.get(token_in)
    linear_pool_out = linear_pools_by_main.get(token_out)

    if linear_pool_in is None and linear_pool_out is None:
        return []

    if linear_pool_in is not None and linear_pool_out is not None:
        return [
            make_linear_pathway(
                token_in, token_out, linear_pool_in, linear_pool_out, top_level_pool
            )
        ]

    paths: list[SwapPath] = []
    if linear_pool_in is not None:
        for stable_hop_token, linear_pool in linear_pools_by_main.items():
            if stable_hop_token == token_in:
                continue
            last_pool_id = get_highest_liquidity_pool(
                stable_hop_token, token_out, SwapPairType.HOP_OUT, pools_of_interest
            )
            if last_pool_id == "":
                continue

            linear_pathway = make_linear_pathway(
                token_in, stable_hop_token, linear_pool_in, linear_pool, top_level_pool
            )
            path_end = create_direct_path(
                pools_of_interest[last_pool_id].pool, stable_hop_token, token_out
            )
            paths.append(compose_paths([linear_pathway, path_end]))
    elif linear_pool_out is not None:
        for stable_hop_token, linear_pool in linear_pools_by_main.items():
            if stable_hop_token == token_out:
                continue
            first_pool_id = get_highest_liquidity_pool(
                token_in, stable_hop_token, SwapPairType.HOP_IN, pools_of_interest
            )
            if first_pool_id == "":
                continue

            path_start = create_direct_path(
                pools_of_interest[first_pool_id].pool, token_in, stable_hop_token
            )
            linear_pathway = make_linear_pathway(
                stable_hop_token, token_out, linear_pool, linear_pool_out, top_level_pool
            )
            paths.append(compose_paths([path_start, linear_pathway]))

    return paths
