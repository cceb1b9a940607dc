from __future__ import annotations

from decimal import Decimal

from app.application.dto.portfolio import (
    PortfolioOutputItem,
    ValuePortfolioInput,
    ValuePortfolioOutput,
)
from app.application.dto.prices import ResolvePricesInput
from app.application.use_cases.resolve_prices import ResolvePricesUseCase
from app.domain.services.decimal_format import format_display, format_price, price_rounded_amount
from app.domain.services.portfolio import value_balances


class ValuePortfolioUseCase:
    def __init__(self, *, resolve_prices_use_case: ResolvePricesUseCase):
        self._resolve_prices_use_case = resolve_prices_use_case

    def execute(self, command: ValuePortfolioInput) -> ValuePortfolioOutput:
        resolved = self._resolve_prices_use_case.execute(
            ResolvePricesInput(
                pools=command.pools,
                tokens=command.tokens,
                primary_anchor=command.primary_anchor,
            )
        )
        rows = value_balances(command.balances, resolved.prices, resolved.decimals)
        total_usd = sum((row.usd_value for row in rows if row.usd_value is not None), Decimal("0"))

        return ValuePortfolioOutput(
            total_usd=total_usd,
            data=[
                PortfolioOutputItem(
                    token=row.token,
                    balance=row.balance,
                    price=row.price,
                    usd_value=row.usd_value,
                    balance_display=(
                        str(price_rounded_amount(row.price, row.balance)) if row.balance != 0 else "0"
                    ),
                    price_display=format_price(row.price),
                    usd_value_display=format_display(row.usd_value, 2),
                )
                for row in rows
            ],
        )
