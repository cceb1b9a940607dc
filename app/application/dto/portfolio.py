from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities.pool import Pool
from app.domain.entities.token import Token


@dataclass(frozen=True)
class ValuePortfolioInput:
    pools: list[Pool]
    tokens: list[Token]
    primary_anchor: str | None
    balances: dict[str, Decimal]


@dataclass(frozen=True)
class PortfolioOutputItem:
    token: str
    balance: Decimal
    price: Decimal | None
    usd_value: Decimal | None
    balance_display: str
    price_display: str
    usd_value_display: str


@dataclass(frozen=True)
class ValuePortfolioOutput:
    total_usd: Decimal
    data: list[PortfolioOutputItem]
