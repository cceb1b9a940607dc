from __future__ import annotations

from app.application.ports.snapshot_store_port import SnapshotStorePort
from app.domain.entities.snapshot import PricingSnapshot
from app.domain.exceptions import SnapshotNotFoundError


class GetLatestSnapshotUseCase:
    def __init__(self, *, snapshot_store_port: SnapshotStorePort):
        self._snapshot_store_port = snapshot_store_port

    def execute(self) -> PricingSnapshot:
        snapshot = self._snapshot_store_port.latest()
        if snapshot is None:
            raise SnapshotNotFoundError("No snapshot has been published yet.")
        return snapshot
