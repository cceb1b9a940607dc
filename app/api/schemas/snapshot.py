from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Union

from pydantic import BaseModel, Field

# Snapshot numbers may arrive as strings with digit-group separators.
RawNumber = Union[int, float, str, None]


class PoolRecordRequest(BaseModel):
    symbol_0: str = Field(..., description="Token id of side 0.")
    symbol_1: str = Field(..., description="Token id of side 1.")
    balance_0: RawNumber = Field(None, description="Raw reserve of token 0.")
    balance_1: RawNumber = Field(None, description="Raw reserve of token 1.")
    lp_fee_0: RawNumber = None
    lp_fee_1: RawNumber = None
    lp_token_supply: RawNumber = None
    rolling_24h_volume: RawNumber = Field(None, description="Raw 24h volume in token 1 units.")
    rolling_24h_apy: RawNumber = Field(None, description="24h APY in percent.")
    rolling_24h_lp_fee: RawNumber = None
    tvl: RawNumber = Field(None, description="Raw TVL in token 1 units.")


class TokenRecordRequest(BaseModel):
    id: str = Field(..., description="Symbol or canister id.")
    decimals: RawNumber = Field(None, description="Integer 0..36; anything else falls back to the default.")
    is_usd_anchor: bool = False


class SnapshotRequest(BaseModel):
    pools: list[PoolRecordRequest] = Field(default_factory=list)
    tokens: list[TokenRecordRequest] = Field(default_factory=list)
    primary_anchor: str | None = Field(None, description="Token pegged at exactly 1 USD.")


class TokenGroupResponse(BaseModel):
    token: str
    pool_symbols: list[str]
    total_tvl: Decimal
    total_24h_volume: Decimal
    weighted_apy: Decimal
    representative_price: Decimal | None


class PoolTotalsResponse(BaseModel):
    total_tvl: Decimal
    total_24h_volume: Decimal
    total_24h_fees: Decimal


class SnapshotResponse(BaseModel):
    ticket: int
    created_at: datetime
    prices: dict[str, Decimal]
    unpriced_tokens: list[str]
    groups: list[TokenGroupResponse]
    totals: PoolTotalsResponse


class RefreshSnapshotResponse(BaseModel):
    applied: bool
    snapshot: SnapshotResponse
