from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class TokenBalanceValue:
    token: str
    balance: Decimal
    price: Decimal | None
    usd_value: Decimal | None
