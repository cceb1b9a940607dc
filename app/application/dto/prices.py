from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from app.domain.entities.pool import Pool
from app.domain.entities.token import Token, TokenDecimalsTable


@dataclass(frozen=True)
class ResolvePricesInput:
    pools: list[Pool]
    tokens: list[Token]
    primary_anchor: str | None


@dataclass(frozen=True)
class ResolvePricesOutput:
    prices: dict[str, Decimal]
    anchors: dict[str, Decimal]
    unpriced_tokens: list[str]
    decimals: TokenDecimalsTable
