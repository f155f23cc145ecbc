"""Pydantic models for the raw pool catalog.

Field names follow the Balancer subgraph schema (camelCase aliases), so a
subgraph or cached JSON response can be validated directly.
"""

from enum import Enum

from pydantic import BaseModel, Field

from sor.models.types import Address, DecimalString


class PoolFilter(str, Enum):
    """Declared pool types a catalog can be restricted to."""

    ALL = "All"
    WEIGHTED = "Weighted"
    STABLE = "Stable"
    META_STABLE = "MetaStable"
    LBP = "LiquidityBootstrapping"
    INVESTMENT = "Investment"
    ELEMENT = "Element"
    AAVE_LINEAR = "AaveLinear"
    ERC4626_LINEAR = "ERC4626Linear"


class PoolTokenRecord(BaseModel):
    """Token entry of a catalog pool."""

    address: Address
    balance: DecimalString
    decimals: int = Field(ge=0, le=77)
    # Weighted pools only
    weight: DecimalString | None = None
    # MetaStable and Linear pools scale balances by this rate
    price_rate: DecimalString = Field(default="1", alias="priceRate")

    model_config = {"populate_by_name": True}


class PoolRecord(BaseModel):
    """A pool as listed in the catalog.

    Only the common fields are required. Type-specific fields are optional
    here and checked by the pool constructors in `sor.pools`.
    """

    id: str
    address: Address
    pool_type: str = Field(alias="poolType")
    swap_fee: DecimalString = Field(alias="swapFee")
    total_shares: DecimalString = Field(default="0", alias="totalShares")
    tokens: list[PoolTokenRecord] = Field(default_factory=list)
    tokens_list: list[str] = Field(default_factory=list, alias="tokensList")

    # Weighted
    total_weight: DecimalString | None = Field(default=None, alias="totalWeight")

    # Stable / MetaStable
    amp: DecimalString | None = None

    # Element
    expiry_time: int | None = Field(default=None, alias="expiryTime")
    unit_seconds: int | None = Field(default=None, alias="unitSeconds")
    principal_token: Address | None = Field(default=None, alias="principalToken")
    base_token: Address | None = Field(default=None, alias="baseToken")

    # Linear
    main_index: int | None = Field(default=None, alias="mainIndex")
    wrapped_index: int | None = Field(default=None, alias="wrappedIndex")
    lower_target: DecimalString | None = Field(default=None, alias="lowerTarget")
    upper_target: DecimalString | None = Field(default=None, alias="upperTarget")

    model_config = {"extra": "allow", "populate_by_name": True}


class PoolCatalog(BaseModel):
    """A catalog snapshot, e.g. a cached subgraph response."""

    pools: list[PoolRecord]
