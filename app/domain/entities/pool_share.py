from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PoolShare:
    percentage: Decimal
    fee_share_0: Decimal
    fee_share_1: Decimal
    fees_usd: Decimal


@dataclass(frozen=True)
class PositionValue:
    usd_amount_0: Decimal
    usd_amount_1: Decimal
    total_usd: Decimal
