from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from app.api.schemas.snapshot import SnapshotRequest


class TokenStatsRequest(SnapshotRequest):
    order_by: str = Field("tvl", description="price, tvl, volume or apy.")
    order_dir: str = Field("desc", description="asc or desc.")


class TokenStatsItemResponse(BaseModel):
    token: str
    pool_count: int
    pool_symbols: list[str]
    price: Decimal | None
    total_tvl: Decimal
    total_24h_volume: Decimal
    weighted_apy: Decimal
    price_display: str
    tvl_display: str
    volume_display: str
    apy_display: str


class TokenStatsTotalsResponse(BaseModel):
    total_tvl: Decimal
    total_24h_volume: Decimal
    total_24h_fees: Decimal
    total_tvl_display: str
    total_24h_volume_display: str
    total_24h_fees_display: str


class TokenStatsResponse(BaseModel):
    data: list[TokenStatsItemResponse]
    totals: TokenStatsTotalsResponse
