from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from app.api.schemas.snapshot import RawNumber, SnapshotRequest


class PoolShareRequest(SnapshotRequest):
    token_0: str = Field(..., description="One side of the pool; either orientation is accepted.")
    token_1: str = Field(..., description="Other side of the pool. The response follows the pool orientation.")
    lp_balance: RawNumber = Field(None, description="Holder LP token balance (raw).")
    amount_0: RawNumber = Field(None, description="Holder amount of `token_0` as requested (raw).")
    amount_1: RawNumber = Field(None, description="Holder amount of `token_1` as requested (raw).")


class PoolShareDisplayResponse(BaseModel):
    percentage: str
    fee_share_0: str
    fee_share_1: str
    fees_usd: str
    total_usd: str


class PoolShareResponse(BaseModel):
    token_0: str
    token_1: str
    percentage: Decimal
    fee_share_0: Decimal
    fee_share_1: Decimal
    fees_usd: Decimal
    usd_amount_0: Decimal
    usd_amount_1: Decimal
    total_usd: Decimal
    price_0: Decimal | None
    price_1: Decimal | None
    display: PoolShareDisplayResponse
