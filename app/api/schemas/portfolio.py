from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field

from app.api.schemas.snapshot import RawNumber, SnapshotRequest


class PortfolioRequest(SnapshotRequest):
    balances: dict[str, RawNumber] = Field(
        default_factory=dict,
        description="Raw wallet balance per token id.",
    )


class PortfolioItemResponse(BaseModel):
    token: str
    balance: Decimal
    price: Decimal | None
    usd_value: Decimal | None
    balance_display: str
    price_display: str
    usd_value_display: str


class PortfolioResponse(BaseModel):
    total_usd: Decimal
    data: list[PortfolioItemResponse]
