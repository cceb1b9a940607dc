from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_latest_snapshot_use_case, get_refresh_snapshot_use_case
from app.api.schemas.snapshot import (
    PoolTotalsResponse,
    RefreshSnapshotResponse,
    SnapshotRequest,
    SnapshotResponse,
    TokenGroupResponse,
)
from app.api.snapshot_payload import pools_from_request, tokens_from_request
from app.application.dto.snapshots import RefreshSnapshotInput
from app.application.use_cases.get_latest_snapshot import GetLatestSnapshotUseCase
from app.application.use_cases.refresh_snapshot import RefreshSnapshotUseCase
from app.domain.entities.snapshot import PricingSnapshot
from app.domain.exceptions import SnapshotInputError, SnapshotNotFoundError

router = APIRouter()


def _snapshot_response(snapshot: PricingSnapshot) -> SnapshotResponse:
    return SnapshotResponse(
        ticket=snapshot.ticket,
        created_at=snapshot.created_at,
        prices=snapshot.prices,
        unpriced_tokens=list(snapshot.unpriced_tokens),
        groups=[
            TokenGroupResponse(
                token=group.token,
                pool_symbols=[pool.symbol for pool in group.pools],
                total_tvl=group.total_tvl,
                total_24h_volume=group.total_24h_volume,
                weighted_apy=group.weighted_apy,
                representative_price=group.representative_price,
            )
            for group in snapshot.groups
        ],
        totals=PoolTotalsResponse(
            total_tvl=snapshot.totals.total_tvl,
            total_24h_volume=snapshot.totals.total_24h_volume,
            total_24h_fees=snapshot.totals.total_24h_fees,
        ),
    )


@router.post("/v1/snapshots", response_model=RefreshSnapshotResponse)
def refresh_snapshot(
    req: SnapshotRequest,
    use_case: RefreshSnapshotUseCase = Depends(get_refresh_snapshot_use_case),
):
    try:
        result = use_case.execute(
            RefreshSnapshotInput(
                pools=pools_from_request(req),
                tokens=tokens_from_request(req),
                primary_anchor=req.primary_anchor,
            )
        )
    except SnapshotInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return RefreshSnapshotResponse(
        applied=result.applied,
        snapshot=_snapshot_response(result.snapshot),
    )


@router.get("/v1/snapshots/latest", response_model=SnapshotResponse)
def get_latest_snapshot(
    use_case: GetLatestSnapshotUseCase = Depends(get_latest_snapshot_use_case),
):
    try:
        snapshot = use_case.execute()
    except SnapshotNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    return _snapshot_response(snapshot)
