from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_token_stats_use_case
from app.api.schemas.token_stats import (
    TokenStatsItemResponse,
    TokenStatsRequest,
    TokenStatsResponse,
    TokenStatsTotalsResponse,
)
from app.api.snapshot_payload import pools_from_request, tokens_from_request
from app.application.dto.token_stats import GetTokenStatsInput
from app.application.use_cases.get_token_stats import GetTokenStatsUseCase
from app.domain.exceptions import SnapshotInputError, TokenStatsInputError

router = APIRouter()


@router.post("/v1/tokens/stats", response_model=TokenStatsResponse)
def get_token_stats(
    req: TokenStatsRequest,
    use_case: GetTokenStatsUseCase = Depends(get_token_stats_use_case),
):
    try:
        result = use_case.execute(
            GetTokenStatsInput(
                pools=pools_from_request(req),
                tokens=tokens_from_request(req),
                primary_anchor=req.primary_anchor,
                order_by=req.order_by,
                order_dir=req.order_dir,
            )
        )
    except (SnapshotInputError, TokenStatsInputError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return TokenStatsResponse(
        data=[
            TokenStatsItemResponse(
                token=row.token,
                pool_count=row.pool_count,
                pool_symbols=row.pool_symbols,
                price=row.price,
                total_tvl=row.total_tvl,
                total_24h_volume=row.total_24h_volume,
                weighted_apy=row.weighted_apy,
                price_display=row.price_display,
                tvl_display=row.tvl_display,
                volume_display=row.volume_display,
                apy_display=row.apy_display,
            )
            for row in result.data
        ],
        totals=TokenStatsTotalsResponse(
            total_tvl=result.totals.total_tvl,
            total_24h_volume=result.totals.total_24h_volume,
            total_24h_fees=result.totals.total_24h_fees,
            total_tvl_display=result.totals.total_tvl_display,
            total_24h_volume_display=result.totals.total_24h_volume_display,
            total_24h_fees_display=result.totals.total_24h_fees_display,
        ),
    )
