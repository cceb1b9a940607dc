from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from app.domain.entities.token_stats import PoolTotals, TokenGroup


@dataclass(frozen=True)
class PricingSnapshot:
    ticket: int
    created_at: datetime
    prices: dict[str, Decimal]
    unpriced_tokens: tuple[str, ...]
    groups: tuple[TokenGroup, ...]
    totals: PoolTotals
