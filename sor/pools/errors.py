"""Pool error classes.

Raised while building typed pools from catalog records and while deriving
pair data. The pool factory turns them into skipped pools.
"""


class PoolError(Exception):
    """Base error for pool operations."""

    pass


class InvalidPoolDataError(PoolError):
    """Catalog record is missing or has invalid type-specific fields."""

    pass


class TokenNotInPoolError(PoolError):
    """Requested token is not one of the pool's tokens."""

    pass


class InvalidTokenPairError(PoolError):
    """Both tokens are in the pool but cannot be swapped against each other."""

    pass
