from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from app.domain.entities.portfolio import TokenBalanceValue
from app.domain.entities.token import TokenDecimalsTable
from app.domain.services.numeric import decimal_or_zero, scale_down


def value_balances(
    balances: Mapping[str, Decimal],
    prices: Mapping[str, Decimal],
    decimals: TokenDecimalsTable,
) -> list[TokenBalanceValue]:
    """Wallet balances valued in USD, largest first; unpriced tokens rank as zero."""
    rows: list[TokenBalanceValue] = []
    for token, raw_balance in balances.items():
        balance = scale_down(raw_balance, decimals.get(token))
        price = prices.get(token)
        rows.append(
            TokenBalanceValue(
                token=token,
                balance=balance,
                price=price,
                usd_value=balance * price if price is not None else None,
            )
        )
    return sorted(rows, key=lambda row: decimal_or_zero(row.usd_value), reverse=True)
