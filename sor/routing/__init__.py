"""Candidate route discovery.

Module structure:
- types.py: SwapPairType, PoolOfInterest, Swap and SwapPath
- paths.py: Path construction helpers
- filtering.py: Pool classification, hop pool selection and linear pool paths
- proposal.py: RouteProposer facade merging the above
"""

from sor.routing.filtering import (
    filter_hop_pools,
    filter_pools_by_type,
    filter_pools_of_interest,
    get_paths_using_linear_pools,
)
from sor.routing.paths import (
    compose_paths,
    create_direct_path,
    create_multihop_path,
    get_highest_liquidity_pool,
    make_linear_pathway,
)
from sor.routing.proposal import RouteProposer, SwapOptions
from sor.routing.types import PoolOfInterest, Swap, SwapPairType, SwapPath

__all__ = [
    "PoolOfInterest",
    "RouteProposer",
    "Swap",
    "SwapOptions",
    "SwapPairType",
    "SwapPath",
    "compose_paths",
    "create_direct_path",
    "create_multihop_path",
    "filter_hop_pools",
    "filter_pools_by_type",
    "filter_pools_of_interest",
    "get_highest_liquidity_pool",
    "get_paths_using_linear_pools",
    "make_linear_pathway",
]
