"""Pool type definitions.

Provides the AnyPool union type for use throughout the codebase.
"""

from typing import TypeAlias

from .element import ElementPool
from .linear import LinearPool
from .stable import MetaStablePool, StablePool
from .weighted import WeightedPool

# Union type for all pool types
AnyPool: TypeAlias = WeightedPool | StablePool | MetaStablePool | ElementPool | LinearPool

__all__ = [
    "AnyPool",
    "WeightedPool",
    "StablePool",
    "MetaStablePool",
    "ElementPool",
    "LinearPool",
]
