from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities.pool import Pool
from app.domain.entities.token import Token


@dataclass(frozen=True)
class GetPoolShareInput:
    pools: list[Pool]
    tokens: list[Token]
    primary_anchor: str | None
    token_0: str
    token_1: str
    lp_balance: Decimal
    amount_0: Decimal
    amount_1: Decimal


@dataclass(frozen=True)
class GetPoolShareOutput:
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
    percentage_display: str
    fee_share_0_display: str
    fee_share_1_display: str
    fees_usd_display: str
    total_usd_display: str
