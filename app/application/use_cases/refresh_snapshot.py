from __future__ import annotations

from datetime import datetime, timezone

from app.application.dto.prices import ResolvePricesInput
from app.application.dto.snapshots import RefreshSnapshotInput, RefreshSnapshotOutput
from app.application.ports.snapshot_store_port import SnapshotStorePort
from app.application.use_cases.resolve_prices import ResolvePricesUseCase
from app.domain.entities.snapshot import PricingSnapshot
from app.domain.services.token_stats import group_by_token, pool_totals


class RefreshSnapshotUseCase:
    def __init__(
        self,
        *,
        snapshot_store_port: SnapshotStorePort,
        resolve_prices_use_case: ResolvePricesUseCase,
    ):
        self._snapshot_store_port = snapshot_store_port
        self._resolve_prices_use_case = resolve_prices_use_case

    def execute(self, command: RefreshSnapshotInput) -> RefreshSnapshotOutput:
        ticket = self._snapshot_store_port.begin()
        resolved = self._resolve_prices_use_case.execute(
            ResolvePricesInput(
                pools=command.pools,
                tokens=command.tokens,
                primary_anchor=command.primary_anchor,
            )
        )
        groups = group_by_token(command.pools, resolved.prices, resolved.decimals)
        snapshot = PricingSnapshot(
            ticket=ticket,
            created_at=datetime.now(timezone.utc),
            prices=resolved.prices,
            unpriced_tokens=tuple(resolved.unpriced_tokens),
            groups=tuple(groups.values()),
            totals=pool_totals(command.pools, resolved.prices, resolved.decimals),
        )
        applied = self._snapshot_store_port.publish(ticket=ticket, snapshot=snapshot)
        return RefreshSnapshotOutput(applied=applied, snapshot=snapshot)
