from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_pool_share_use_case
from app.api.schemas.pool_share import (
    PoolShareDisplayResponse,
    PoolShareRequest,
    PoolShareResponse,
)
from app.api.snapshot_payload import pools_from_request, tokens_from_request
from app.application.dto.pool_share import GetPoolShareInput
from app.application.use_cases.get_pool_share import GetPoolShareUseCase
from app.domain.exceptions import PoolNotFoundError, SnapshotInputError
from app.domain.services.numeric import parse_decimal

router = APIRouter()


@router.post("/v1/pool-share", response_model=PoolShareResponse)
def get_pool_share(
    req: PoolShareRequest,
    use_case: GetPoolShareUseCase = Depends(get_pool_share_use_case),
):
    try:
        result = use_case.execute(
            GetPoolShareInput(
                pools=pools_from_request(req),
                tokens=tokens_from_request(req),
                primary_anchor=req.primary_anchor,
                token_0=req.token_0,
                token_1=req.token_1,
                lp_balance=parse_decimal(req.lp_balance),
                amount_0=parse_decimal(req.amount_0),
                amount_1=parse_decimal(req.amount_1),
            )
        )
    except PoolNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except SnapshotInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return PoolShareResponse(
        token_0=result.token_0,
        token_1=result.token_1,
        percentage=result.percentage,
        fee_share_0=result.fee_share_0,
        fee_share_1=result.fee_share_1,
        fees_usd=result.fees_usd,
        usd_amount_0=result.usd_amount_0,
        usd_amount_1=result.usd_amount_1,
        total_usd=result.total_usd,
        price_0=result.price_0,
        price_1=result.price_1,
        display=PoolShareDisplayResponse(
            percentage=result.percentage_display,
            fee_share_0=result.fee_share_0_display,
            fee_share_1=result.fee_share_1_display,
            fees_usd=result.fees_usd_display,
            total_usd=result.total_usd_display,
        ),
    )
