"""Route proposal facade.

Runs the filtering steps for one request and merges their paths into the
candidate set handed to the amount optimizer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import structlog

from sor.config import DEFAULT_LINEAR_ROUTING_CONFIG, LinearRoutingConfig
from sor.constants import DEFAULT_MAX_POOLS, MAINNET
from sor.models.catalog import PoolFilter
from sor.routing.filtering import (
    filter_hop_pools,
    filter_pools_by_type,
    filter_pools_of_interest,
    get_paths_using_linear_pools,
)

if TYPE_CHECKING:
    from sor.models.catalog import PoolRecord
    from sor.routing.types import PoolDictionary, SwapPath

logger = structlog.get_logger()


@dataclass(frozen=True)
class SwapOptions:
    """Per-request routing options.

    Attributes:
        max_pools: Maximum pools per swap (1 = direct swaps only)
        pool_type_filter: Restrict the catalog to one declared pool type
        timestamp: Current block timestamp
    """

    max_pools: int = DEFAULT_MAX_POOLS
    pool_type_filter: PoolFilter = PoolFilter.ALL
    timestamp: int = 0


DEFAULT_SWAP_OPTIONS = SwapOptions()


class RouteProposer:
    """Proposes candidate paths between two tokens.

    Holds only read-only configuration; all per-request state is local to
    get_candidate_paths.

    Usage:
        proposer = RouteProposer()
        paths = proposer.get_candidate_paths(token_in, token_out, pools)
    """

    def __init__(self, config: LinearRoutingConfig = DEFAULT_LINEAR_ROUTING_CONFIG) -> None:
        self.config = config

    def get_candidate_paths_with_pools(
        self,
        token_in: str,
        token_out: str,
        pools: list[PoolRecord],
        options: SwapOptions = DEFAULT_SWAP_OPTIONS,
        chain_id: int = MAINNET,
    ) -> tuple[list[SwapPath], PoolDictionary]:
        """Find candidate paths and return them with the index of parsed pools.

        Direct and hop paths come first, followed by linear pool paths.
        A linear path whose id was already emitted is dropped.
        """
        filtered_pools = filter_pools_by_type(pools, options.pool_type_filter)

        pools_of_interest, hop_tokens, pools_all = filter_pools_of_interest(
            filtered_pools,
            token_in,
            token_out,
            options.max_pools,
            options.timestamp,
        )

        _, paths = filter_hop_pools(token_in, token_out, hop_tokens, pools_of_interest)

        linear_paths = get_paths_using_linear_pools(
            token_in,
            token_out,
            pools_all,
            pools_of_interest,
            chain_id,
            self.config,
        )

        seen_ids = {path.id for path in paths}
        for path in linear_paths:
            if path.id in seen_ids:
                continue
            seen_ids.add(path.id)
            paths.append(path)

        logger.debug(
            "candidate_paths_proposed",
            token_in=token_in,
            token_out=token_out,
            chain_id=chain_id,
            paths=len(paths),
            linear_paths=len(linear_paths),
        )
        return paths, pools_all

    def get_candidate_paths(
        self,
        token_in: str,
        token_out: str,
        pools: list[PoolRecord],
        options: SwapOptions = DEFAULT_SWAP_OPTIONS,
        chain_id: int = MAINNET,
    ) -> list[SwapPath]:
        """Find candidate paths from token_in to token_out.

        Returns:
            Candidate paths; empty if no route exists
        """
        paths, _ = self.get_candidate_paths_with_pools(
            token_in, token_out, pools, options, chain_id
        )
        return paths
