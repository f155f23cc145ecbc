"""Script to propose candidate routes from a pool catalog snapshot.

Loads a JSON catalog ({"pools": [...]}, subgraph field names), runs the
route proposer and prints the candidate paths as JSON.

Usage:
    python -m scripts.propose_routes catalog.json --token-in 0x... --token-out 0x...

Configuration via environment variables:
- SOR_CHAIN_ID: Chain id used for linear pool routing (default: 1)
- SOR_MAX_POOLS: Maximum pools per swap (default: 4)
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

import structlog
from pydantic import ValidationError

from sor.constants import DEFAULT_MAX_POOLS, MAINNET
from sor.models.catalog import PoolCatalog, PoolFilter
from sor.routing import RouteProposer, SwapOptions, SwapPath

logger = structlog.get_logger()

CHAIN_ID = int(os.environ.get("SOR_CHAIN_ID", str(MAINNET)))
MAX_POOLS = int(os.environ.get("SOR_MAX_POOLS", str(DEFAULT_MAX_POOLS)))


def load_catalog(path: Path) -> PoolCatalog:
    """Load and validate a catalog snapshot."""
    with open(path) as f:
        data = json.load(f)
    return PoolCatalog.model_validate(data)


def path_summary(path: SwapPath) -> dict[str, object]:
    """JSON-friendly view of a path."""
    return {
        "id": path.id,
        "tokens": [path.token_in] + [swap.token_out for swap in path.swaps],
        "pools": [swap.pool for swap in path.swaps],
    }


def main() -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Propose candidate swap routes")
    parser.add_argument("catalog", type=Path, help="Path to a JSON pool catalog")
    parser.add_argument("--token-in", required=True, help="Token to sell")
    parser.add_argument("--token-out", required=True, help="Token to buy")
    parser.add_argument(
        "--max-pools",
        type=int,
        default=MAX_POOLS,
        help="Maximum pools per swap (1 = direct only)",
    )
    parser.add_argument(
        "--pool-type",
        choices=[f.value for f in PoolFilter],
        default=PoolFilter.ALL.value,
        help="Only use pools of this declared type",
    )
    parser.add_argument("--chain-id", type=int, default=CHAIN_ID, help="Chain id")
    parser.add_argument("--timestamp", type=int, default=0, help="Current block timestamp")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug events")

    args = parser.parse_args()

    # Logs go to stderr so stdout stays valid JSON
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if args.verbose else logging.INFO
        ),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )

    try:
        catalog = load_catalog(args.catalog)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logger.error("catalog_load_failed", path=str(args.catalog), error=str(e))
        return 1

    options = SwapOptions(
        max_pools=args.max_pools,
        pool_type_filter=PoolFilter(args.pool_type),
        timestamp=args.timestamp,
    )
    paths = RouteProposer().get_candidate_paths(
        args.token_in,
        args.token_out,
        catalog.pools,
        options,
        args.chain_id,
    )

    if not paths:
        print(f"No route found from {args.token_in} to {args.token_out}", file=sys.stderr)

    print(json.dumps([path_summary(p) for p in paths], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
