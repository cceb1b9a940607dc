from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Pool:
    token_0: str
    token_1: str
    reserve_0: Decimal
    reserve_1: Decimal
    lp_fee_0: Decimal
    lp_fee_1: Decimal
    lp_token_supply: Decimal
    rolling_24h_volume: Decimal
    rolling_24h_apy: Decimal
    tvl: Decimal
    rolling_24h_lp_fee: Decimal = Decimal("0")

    @property
    def is_tradable(self) -> bool:
        return self.reserve_0 > 0 and self.reserve_1 > 0

    @property
    def symbol(self) -> str:
        return f"{self.token_0}_{self.token_1}"


@dataclass(frozen=True)
class HolderPosition:
    pool: Pool
    lp_balance: Decimal
    amount_0: Decimal
    amount_1: Decimal
