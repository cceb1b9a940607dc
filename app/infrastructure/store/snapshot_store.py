from __future__ import annotations

import logging
from threading import Lock

from app.domain.entities.snapshot import PricingSnapshot


logger = logging.getLogger(__name__)


class InMemorySnapshotStore:
    """Holds the most recent pricing snapshot; the newest request always wins.

    `begin` hands out increasing tickets. A result is only stored when its
    ticket is still the newest one handed out, so a slow computation that
    finishes after a newer request started is dropped instead of overwriting
    fresher data. A stored snapshot replaces the previous one entirely.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._last_ticket = 0
        self._snapshot: PricingSnapshot | None = None

    def begin(self) -> int:
        with self._lock:
            self._last_ticket += 1
            return self._last_ticket

    def publish(self, *, ticket: int, snapshot: PricingSnapshot) -> bool:
        with self._lock:
            if ticket != self._last_ticket:
                logger.info(
                    "snapshot_store: discard_stale ticket=%s latest_ticket=%s",
                    ticket,
                    self._last_ticket,
                )
                return False
            self._snapshot = snapshot
        logger.debug("snapshot_store: published ticket=%s tokens=%s", ticket, len(snapshot.prices))
        return True

    def latest(self) -> PricingSnapshot | None:
        with self._lock:
            return self._snapshot
