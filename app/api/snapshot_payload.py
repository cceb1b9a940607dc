from __future__ import annotations

from app.api.schemas.snapshot import SnapshotRequest
from app.domain.entities.pool import Pool
from app.domain.entities.token import Token
from app.infrastructure.mappers.snapshot_mapper import map_record_to_pool, map_record_to_token


def pools_from_request(req: SnapshotRequest) -> list[Pool]:
    return [map_record_to_pool(row.model_dump()) for row in req.pools]


def tokens_from_request(req: SnapshotRequest) -> list[Token]:
    return [map_record_to_token(row.model_dump()) for row in req.tokens]
