from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_value_portfolio_use_case
from app.api.schemas.portfolio import PortfolioItemResponse, PortfolioRequest, PortfolioResponse
from app.api.snapshot_payload import pools_from_request, tokens_from_request
from app.application.dto.portfolio import ValuePortfolioInput
from app.application.use_cases.value_portfolio import ValuePortfolioUseCase
from app.domain.exceptions import SnapshotInputError
from app.domain.services.numeric import parse_decimal

router = APIRouter()


@router.post("/v1/portfolio", response_model=PortfolioResponse)
def value_portfolio(
    req: PortfolioRequest,
    use_case: ValuePortfolioUseCase = Depends(get_value_portfolio_use_case),
):
    try:
        result = use_case.execute(
            ValuePortfolioInput(
                pools=pools_from_request(req),
                tokens=tokens_from_request(req),
                primary_anchor=req.primary_anchor,
                balances={token: parse_decimal(value) for token, value in req.balances.items()},
            )
        )
    except SnapshotInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return PortfolioResponse(
        total_usd=result.total_usd,
        data=[
            PortfolioItemResponse(
                token=row.token,
                balance=row.balance,
                price=row.price,
                usd_value=row.usd_value,
                balance_display=row.balance_display,
                price_display=row.price_display,
                usd_value_display=row.usd_value_display,
            )
            for row in result.data
        ],
    )
