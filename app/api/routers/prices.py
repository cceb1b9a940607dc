from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_resolve_prices_use_case
from app.api.schemas.prices import PricesResponse
from app.api.schemas.snapshot import SnapshotRequest
from app.api.snapshot_payload import pools_from_request, tokens_from_request
from app.application.dto.prices import ResolvePricesInput
from app.application.use_cases.resolve_prices import ResolvePricesUseCase
from app.domain.exceptions import SnapshotInputError

router = APIRouter()


@router.post("/v1/prices/resolve", response_model=PricesResponse)
def resolve_prices(
    req: SnapshotRequest,
    use_case: ResolvePricesUseCase = Depends(get_resolve_prices_use_case),
):
    try:
        result = use_case.execute(
            ResolvePricesInput(
                pools=pools_from_request(req),
                tokens=tokens_from_request(req),
                primary_anchor=req.primary_anchor,
            )
        )
    except SnapshotInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return PricesResponse(
        prices=result.prices,
        anchors=result.anchors,
        unpriced_tokens=result.unpriced_tokens,
    )
