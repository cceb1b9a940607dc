from __future__ import annotations

from collections.abc import Mapping, Sequence
from decimal import Decimal

from app.domain.entities.pool import Pool
from app.domain.entities.token import TokenDecimalsTable
from app.domain.entities.token_stats import PoolTotals, TokenGroup
from app.domain.exceptions import TokenStatsInputError
from app.domain.services.numeric import decimal_or_zero, scale_down


def _quoted_usd(
    raw: Decimal,
    *,
    pool: Pool,
    prices: Mapping[str, Decimal],
    decimals: TokenDecimalsTable,
) -> Decimal:
    # volume, tvl and 24h fees are quoted in token_1 units
    price = prices.get(pool.token_1)
    if price is None:
        return Decimal("0")
    return scale_down(raw, decimals.get(pool.token_1)) * price


def pool_volume_usd(pool: Pool, prices: Mapping[str, Decimal], decimals: TokenDecimalsTable) -> Decimal:
    return _quoted_usd(pool.rolling_24h_volume, pool=pool, prices=prices, decimals=decimals)


def pool_tvl_usd(pool: Pool, prices: Mapping[str, Decimal], decimals: TokenDecimalsTable) -> Decimal:
    return _quoted_usd(pool.tvl, pool=pool, prices=prices, decimals=decimals)


def pool_fees_usd(pool: Pool, prices: Mapping[str, Decimal], decimals: TokenDecimalsTable) -> Decimal:
    return _quoted_usd(pool.rolling_24h_lp_fee, pool=pool, prices=prices, decimals=decimals)


def weighted_apy(weights_and_apys: Sequence[tuple[Decimal, Decimal]]) -> Decimal:
    total_weight = sum((weight for weight, _ in weights_and_apys), Decimal("0"))
    if total_weight == 0:
        return Decimal("0")
    weighted = sum((weight * apy for weight, apy in weights_and_apys), Decimal("0"))
    return weighted / total_weight


def group_by_token(
    pools: Sequence[Pool],
    prices: Mapping[str, Decimal],
    decimals: TokenDecimalsTable,
) -> dict[str, TokenGroup]:
    members: dict[str, list[Pool]] = {}
    for pool in pools:
        for token in dict.fromkeys((pool.token_0, pool.token_1)):
            members.setdefault(token, []).append(pool)

    groups: dict[str, TokenGroup] = {}
    for token, token_pools in members.items():
        tvls = [pool_tvl_usd(pool, prices, decimals) for pool in token_pools]
        volumes = [pool_volume_usd(pool, prices, decimals) for pool in token_pools]
        groups[token] = TokenGroup(
            token=token,
            pools=tuple(token_pools),
            total_tvl=sum(tvls, Decimal("0")),
            total_24h_volume=sum(volumes, Decimal("0")),
            weighted_apy=weighted_apy(
                [(tvl, pool.rolling_24h_apy) for tvl, pool in zip(tvls, token_pools)]
            ),
            representative_price=prices.get(token),
        )
    return groups


ORDER_FIELDS = {
    "price": "representative_price",
    "tvl": "total_tvl",
    "volume": "total_24h_volume",
    "apy": "weighted_apy",
}


def sort_token_groups(
    groups: Sequence[TokenGroup],
    *,
    order_by: str,
    descending: bool = True,
) -> list[TokenGroup]:
    """Stable sort on one numeric key; equal keys keep their input order."""
    if order_by not in ORDER_FIELDS:
        raise TokenStatsInputError("order_by is not supported.")
    attribute = ORDER_FIELDS[order_by]

    def order_value(group: TokenGroup) -> Decimal:
        return decimal_or_zero(getattr(group, attribute))

    return sorted(groups, key=order_value, reverse=descending)


def pool_totals(
    pools: Sequence[Pool],
    prices: Mapping[str, Decimal],
    decimals: TokenDecimalsTable,
) -> PoolTotals:
    return PoolTotals(
        total_tvl=sum((pool_tvl_usd(pool, prices, decimals) for pool in pools), Decimal("0")),
        total_24h_volume=sum(
            (pool_volume_usd(pool, prices, decimals) for pool in pools),
            Decimal("0"),
        ),
        total_24h_fees=sum(
            (pool_fees_usd(pool, prices, decimals) for pool in pools),
            Decimal("0"),
        ),
    )
