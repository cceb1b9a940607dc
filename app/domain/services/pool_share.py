from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from app.domain.entities.pool import HolderPosition
from app.domain.entities.pool_share import PoolShare, PositionValue
from app.domain.entities.token import TokenDecimalsTable
from app.domain.services.numeric import clamp, scale_down


HUNDRED = Decimal("100")


def _percent(part: Decimal, whole: Decimal) -> Decimal:
    return clamp((part / whole) * HUNDRED, lower=Decimal("0"), upper=HUNDRED)


def lp_token_percentage(*, lp_balance: Decimal, lp_token_supply: Decimal) -> Decimal:
    if lp_token_supply <= 0:
        return Decimal("0")
    return _percent(lp_balance, lp_token_supply)


def reserve_percentage(
    *,
    amount_0: Decimal,
    amount_1: Decimal,
    reserve_0: Decimal,
    reserve_1: Decimal,
) -> Decimal:
    """Share estimated from the holder's token amounts.

    Held amounts exclude unclaimed fees, so this under-counts compared with
    the LP-token path. Sides with an empty reserve are left out of the average.
    """
    sides: list[Decimal] = []
    if reserve_0 > 0:
        sides.append(_percent(amount_0, reserve_0))
    if reserve_1 > 0:
        sides.append(_percent(amount_1, reserve_1))
    if not sides:
        return Decimal("0")
    return sum(sides, Decimal("0")) / Decimal(len(sides))


def holder_percentage(position: HolderPosition) -> Decimal:
    pool = position.pool
    if pool.lp_token_supply > 0:
        return lp_token_percentage(
            lp_balance=position.lp_balance,
            lp_token_supply=pool.lp_token_supply,
        )
    return reserve_percentage(
        amount_0=position.amount_0,
        amount_1=position.amount_1,
        reserve_0=pool.reserve_0,
        reserve_1=pool.reserve_1,
    )


def _usd(
    raw: Decimal,
    *,
    token: str,
    prices: Mapping[str, Decimal],
    decimals: TokenDecimalsTable,
) -> Decimal:
    price = prices.get(token)
    if price is None:
        return Decimal("0")
    return scale_down(raw, decimals.get(token)) * price


def share_of(
    position: HolderPosition,
    prices: Mapping[str, Decimal],
    decimals: TokenDecimalsTable,
) -> PoolShare:
    pool = position.pool
    percentage = holder_percentage(position)
    fee_share_0 = pool.lp_fee_0 * percentage / HUNDRED
    fee_share_1 = pool.lp_fee_1 * percentage / HUNDRED
    fees_usd = _usd(fee_share_0, token=pool.token_0, prices=prices, decimals=decimals) + _usd(
        fee_share_1, token=pool.token_1, prices=prices, decimals=decimals
    )
    return PoolShare(
        percentage=percentage,
        fee_share_0=fee_share_0,
        fee_share_1=fee_share_1,
        fees_usd=fees_usd,
    )


def position_value_usd(
    position: HolderPosition,
    prices: Mapping[str, Decimal],
    decimals: TokenDecimalsTable,
) -> PositionValue:
    pool = position.pool
    usd_amount_0 = _usd(position.amount_0, token=pool.token_0, prices=prices, decimals=decimals)
    usd_amount_1 = _usd(position.amount_1, token=pool.token_1, prices=prices, decimals=decimals)
    return PositionValue(
        usd_amount_0=usd_amount_0,
        usd_amount_1=usd_amount_1,
        total_usd=usd_amount_0 + usd_amount_1,
    )
