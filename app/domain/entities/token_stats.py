from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities.pool import Pool


@dataclass(frozen=True)
class TokenGroup:
    token: str
    pools: tuple[Pool, ...]
    total_tvl: Decimal
    total_24h_volume: Decimal
    weighted_apy: Decimal
    representative_price: Decimal | None


@dataclass(frozen=True)
class PoolTotals:
    total_tvl: Decimal
    total_24h_volume: Decimal
    total_24h_fees: Decimal
