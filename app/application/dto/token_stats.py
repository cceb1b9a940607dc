from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities.pool import Pool
from app.domain.entities.token import Token


@dataclass(frozen=True)
class GetTokenStatsInput:
    pools: list[Pool]
    tokens: list[Token]
    primary_anchor: str | None
    order_by: str = "tvl"
    order_dir: str = "desc"


@dataclass(frozen=True)
class TokenStatsOutputItem:
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


@dataclass(frozen=True)
class PoolTotalsOutput:
    total_tvl: Decimal
    total_24h_volume: Decimal
    total_24h_fees: Decimal
    total_tvl_display: str
    total_24h_volume_display: str
    total_24h_fees_display: str


@dataclass(frozen=True)
class GetTokenStatsOutput:
    data: list[TokenStatsOutputItem]
    totals: PoolTotalsOutput
