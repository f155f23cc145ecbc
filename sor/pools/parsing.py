"""Pool factory.

Maps the declared pool type of a catalog record to a pool constructor.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from .element import ElementPool
from .errors import PoolError
from .linear import LinearPool
from .stable import MetaStablePool, StablePool
from .weighted import WeightedPool

if TYPE_CHECKING:
    from sor.models.catalog import PoolRecord

    from .types import AnyPool

logger = structlog.get_logger()

_POOL_CLASSES: dict[str, type[AnyPool]] = {
    "Weighted": WeightedPool,
    "Investment": WeightedPool,
    "LiquidityBootstrapping": WeightedPool,
    "Stable": StablePool,
    "MetaStable": MetaStablePool,
    "Element": ElementPool,
}


def pool_class_for(pool_type: str) -> type[AnyPool] | None:
    """Return the pool class for a declared pool type, or None if unsupported.

    Any type containing "Linear" (AaveLinear, ERC4626Linear, ...) is a linear pool.
    """
    pool_class = _POOL_CLASSES.get(pool_type)
    if pool_class is None and "Linear" in pool_type:
        return LinearPool
    return pool_class


def parse_new_pool(record: PoolRecord, current_block_timestamp: int = 0) -> AnyPool | None:
    """Build a typed pool from a catalog record.

    Args:
        record: Pool record from the catalog
        current_block_timestamp: Block timestamp, used by time-dependent pools

    Returns:
        The typed pool, or None if the pool type is unsupported or the record
        is missing fields its type needs
    """
    pool_class = pool_class_for(record.pool_type)
    if pool_class is None:
        logger.debug("unknown_pool_type", pool_id=record.id, pool_type=record.pool_type)
        return None

    try:
        return pool_class.from_record(record, current_block_timestamp)
    except PoolError as err:
        logger.warning(
            "invalid_pool_record",
            pool_id=record.id,
            pool_type=record.pool_type,
            error=str(err),
        )
        return None
