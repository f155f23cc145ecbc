"""Pydantic models for the pool catalog."""

from sor.models.catalog import PoolCatalog, PoolFilter, PoolRecord, PoolTokenRecord
from sor.models.types import Address, DecimalString

__all__ = [
    # Types
    "Address",
    "DecimalString",
    # Catalog models
    "PoolCatalog",
    "PoolFilter",
    "PoolRecord",
    "PoolTokenRecord",
]
