from __future__ import annotations

from dataclasses import dataclass

from app.domain.entities.pool import Pool
from app.domain.entities.snapshot import PricingSnapshot
from app.domain.entities.token import Token


@dataclass(frozen=True)
class RefreshSnapshotInput:
    pools: list[Pool]
    tokens: list[Token]
    primary_anchor: str | None


@dataclass(frozen=True)
class RefreshSnapshotOutput:
    applied: bool
    snapshot: PricingSnapshot
