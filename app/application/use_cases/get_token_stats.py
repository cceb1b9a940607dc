from __future__ import annotations

from app.application.dto.prices import ResolvePricesInput
from app.application.dto.token_stats import (
    GetTokenStatsInput,
    GetTokenStatsOutput,
    PoolTotalsOutput,
    TokenStatsOutputItem,
)
from app.application.use_cases.resolve_prices import ResolvePricesUseCase
from app.domain.exceptions import TokenStatsInputError
from app.domain.services.decimal_format import format_display, format_price
from app.domain.services.token_stats import group_by_token, pool_totals, sort_token_groups


class GetTokenStatsUseCase:
    def __init__(self, *, resolve_prices_use_case: ResolvePricesUseCase):
        self._resolve_prices_use_case = resolve_prices_use_case

    def execute(self, command: GetTokenStatsInput) -> GetTokenStatsOutput:
        if command.order_dir not in {"asc", "desc"}:
            raise TokenStatsInputError("order_dir must be asc or desc.")

        resolved = self._resolve_prices_use_case.execute(
            ResolvePricesInput(
                pools=command.pools,
                tokens=command.tokens,
                primary_anchor=command.primary_anchor,
            )
        )
        groups = group_by_token(command.pools, resolved.prices, resolved.decimals)
        ordered = sort_token_groups(
            list(groups.values()),
            order_by=command.order_by,
            descending=command.order_dir == "desc",
        )
        totals = pool_totals(command.pools, resolved.prices, resolved.decimals)

        return GetTokenStatsOutput(
            data=[
                TokenStatsOutputItem(
                    token=group.token,
                    pool_count=len(group.pools),
                    pool_symbols=[pool.symbol for pool in group.pools],
                    price=group.representative_price,
                    total_tvl=group.total_tvl,
                    total_24h_volume=group.total_24h_volume,
                    weighted_apy=group.weighted_apy,
                    price_display=format_price(group.representative_price),
                    tvl_display=format_display(group.total_tvl, 0),
                    volume_display=format_display(group.total_24h_volume, 0),
                    apy_display=format_display(group.weighted_apy, 2),
                )
                for group in ordered
            ],
            totals=PoolTotalsOutput(
                total_tvl=totals.total_tvl,
                total_24h_volume=totals.total_24h_volume,
                total_24h_fees=totals.total_24h_fees,
                total_tvl_display=format_display(totals.total_tvl, 0),
                total_24h_volume_display=format_display(totals.total_24h_volume, 0),
                total_24h_fees_display=format_display(totals.total_24h_fees, 0),
            ),
        )
