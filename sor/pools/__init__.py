"""Typed pool variants and the catalog record factory.

Pool types supported:
- Weighted (also Investment and LiquidityBootstrapping)
- Stable and MetaStable
- Element
- Linear (AaveLinear, ERC4626Linear, ...)
"""

from .base import BasePool, PoolPairData, PoolTokenState, PoolTypes
from .element import ElementPool, ElementPoolPairData
from .errors import InvalidPoolDataError, InvalidTokenPairError, PoolError, TokenNotInPoolError
from .linear import LinearPairType, LinearPool, LinearPoolPairData
from .parsing import parse_new_pool, pool_class_for
from .stable import MetaStablePool, MetaStablePoolPairData, StablePool, StablePoolPairData
from .types import AnyPool
from .weighted import WeightedPool, WeightedPoolPairData

__all__ = [
    # Base
    "AnyPool",
    "BasePool",
    "PoolPairData",
    "PoolTokenState",
    "PoolTypes",
    # Variants
    "WeightedPool",
    "WeightedPoolPairData",
    "StablePool",
    "StablePoolPairData",
    "MetaStablePool",
    "MetaStablePoolPairData",
    "ElementPool",
    "ElementPoolPairData",
    "LinearPool",
    "LinearPoolPairData",
    "LinearPairType",
    # Factory
    "parse_new_pool",
    "pool_class_for",
    # Errors
    "PoolError",
    "InvalidPoolDataError",
    "TokenNotInPoolError",
    "InvalidTokenPairError",
]
