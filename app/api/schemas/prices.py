from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel


class PricesResponse(BaseModel):
    prices: dict[str, Decimal]
    anchors: dict[str, Decimal]
    unpriced_tokens: list[str]
