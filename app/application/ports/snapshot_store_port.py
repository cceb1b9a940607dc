from __future__ import annotations

from typing import Protocol

from app.domain.entities.snapshot import PricingSnapshot


class SnapshotStorePort(Protocol):
    def begin(self) -> int:
        ...

    def publish(self, *, ticket: int, snapshot: PricingSnapshot) -> bool:
        ...

    def latest(self) -> PricingSnapshot | None:
        ...
