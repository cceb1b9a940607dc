from __future__ import annotations

from decimal import Decimal

from app.application.dto.pool_share import GetPoolShareInput, GetPoolShareOutput
from app.application.dto.prices import ResolvePricesInput
from app.application.use_cases.resolve_prices import ResolvePricesUseCase
from app.domain.entities.pool import HolderPosition, Pool
from app.domain.exceptions import PoolNotFoundError
from app.domain.services.decimal_format import format_display, price_rounded_amount
from app.domain.services.numeric import scale_down
from app.domain.services.pool_share import position_value_usd, share_of


def _find_pool(pools: list[Pool], *, token_0: str, token_1: str) -> tuple[Pool, bool]:
    """Pool for the pair in either orientation; the flag is set when it is reversed."""
    for pool in pools:
        if pool.token_0 == token_0 and pool.token_1 == token_1:
            return pool, False
    for pool in pools:
        if pool.token_0 == token_1 and pool.token_1 == token_0:
            return pool, True
    raise PoolNotFoundError(f"Pool {token_0}_{token_1} not found.")


def _amount_display(amount: Decimal, price: Decimal | None) -> str:
    if amount == 0:
        return "0"
    return str(price_rounded_amount(price, amount))


class GetPoolShareUseCase:
    def __init__(self, *, resolve_prices_use_case: ResolvePricesUseCase):
        self._resolve_prices_use_case = resolve_prices_use_case

    def execute(self, command: GetPoolShareInput) -> GetPoolShareOutput:
        pool, reversed_pair = _find_pool(command.pools, token_0=command.token_0, token_1=command.token_1)
        amount_0, amount_1 = command.amount_0, command.amount_1
        if reversed_pair:
            amount_0, amount_1 = amount_1, amount_0
        resolved = self._resolve_prices_use_case.execute(
            ResolvePricesInput(
                pools=command.pools,
                tokens=command.tokens,
                primary_anchor=command.primary_anchor,
            )
        )
        position = HolderPosition(
            pool=pool,
            lp_balance=command.lp_balance,
            amount_0=amount_0,
            amount_1=amount_1,
        )
        share = share_of(position, resolved.prices, resolved.decimals)
        value = position_value_usd(position, resolved.prices, resolved.decimals)

        price_0 = resolved.prices.get(pool.token_0)
        price_1 = resolved.prices.get(pool.token_1)
        fee_0_units = scale_down(share.fee_share_0, resolved.decimals.get(pool.token_0))
        fee_1_units = scale_down(share.fee_share_1, resolved.decimals.get(pool.token_1))

        return GetPoolShareOutput(
            token_0=pool.token_0,
            token_1=pool.token_1,
            percentage=share.percentage,
            fee_share_0=share.fee_share_0,
            fee_share_1=share.fee_share_1,
            fees_usd=share.fees_usd,
            usd_amount_0=value.usd_amount_0,
            usd_amount_1=value.usd_amount_1,
            total_usd=value.total_usd,
            price_0=price_0,
            price_1=price_1,
            percentage_display=format_display(share.percentage, 2),
            fee_share_0_display=_amount_display(fee_0_units, price_0),
            fee_share_1_display=_amount_display(fee_1_units, price_1),
            fees_usd_display=format_display(share.fees_usd, 2),
            total_usd_display=format_display(value.total_usd, 2),
        )
