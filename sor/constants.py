"""Protocol constants for route proposal.

Centralizes chain ids, well-known pool addresses and routing defaults.
"""

from sor.models.types import is_valid_address

# Chain ids
MAINNET = 1
KOVAN = 42

# Maximum number of pools a swap may go through (>1 enables multi-hop)
DEFAULT_MAX_POOLS = 4

# BPT tokens always carry 18 decimals
BPT_DECIMALS = 18


def _validate_pool_address(name: str, address: str) -> str:
    """Validate and return a pool address.

    Raises:
        ValueError: If the address is invalid
    """
    if not is_valid_address(address):
        raise ValueError(f"Invalid {name} address: {address} (must be 0x + 40 hex chars)")
    return address


# Top-level stable pools trading between the BPTs of linear pools
# (e.g. bb-a-USD = bb-a-USDC / bb-a-DAI / bb-a-USDT).
# Pool id is the address followed by the pool specialization and nonce.
BB_A_USD_MAINNET = _validate_pool_address(
    "bb-a-USD", "0x7b50775383d3d6f0215a8f290f2c9e2eebbeceb2"
)
BB_A_USD_MAINNET_ID = BB_A_USD_MAINNET + "0000000000000000000000fe"

BB_A_USD_KOVAN = _validate_pool_address(
    "bb-a-USD (kovan)", "0x6b15a01b5d46a5321b627bd7deef1af57bc62907"
)
BB_A_USD_KOVAN_ID = BB_A_USD_KOVAN + "0000000000000000000000d4"
