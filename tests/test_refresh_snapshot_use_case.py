from __future__ import annotations

from decimal import Decimal

from app.application.dto.snapshots import RefreshSnapshotInput
from app.application.use_cases.refresh_snapshot import RefreshSnapshotUseCase
from app.application.use_cases.resolve_prices import ResolvePricesUseCase
from app.domain.entities.pool import Pool
from app.domain.entities.token import Token
from app.infrastructure.store.snapshot_store import InMemorySnapshotStore


def _command() -> RefreshSnapshotInput:
    pool = Pool(
        token_0="ICP",
        token_1="ckUSDT",
        reserve_0=Decimal(1_000 * 10**8),
        reserve_1=Decimal(10_000 * 10**6),
        lp_fee_0=Decimal("0"),
        lp_fee_1=Decimal("0"),
        lp_token_supply=Decimal("0"),
        rolling_24h_volume=Decimal(500 * 10**6),
        rolling_24h_apy=Decimal("12"),
        tvl=Decimal(20_000 * 10**6),
        rolling_24h_lp_fee=Decimal(3 * 10**6),
    )
    return RefreshSnapshotInput(
        pools=[pool],
        tokens=[Token(id="ICP", decimals=8), Token(id="ckUSDT", decimals=6)],
        primary_anchor="ckUSDT",
    )


class RacingResolvePricesUseCase:
    """Starts a newer refresh while this one is still computing."""

    def __init__(self, store: InMemorySnapshotStore):
        self._store = store
        self._inner = ResolvePricesUseCase()

    def execute(self, command):
        self._store.begin()
        return self._inner.execute(command)


def test_refresh_publishes_snapshot():
    store = InMemorySnapshotStore()
    use_case = RefreshSnapshotUseCase(
        snapshot_store_port=store,
        resolve_prices_use_case=ResolvePricesUseCase(),
    )

    output = use_case.execute(_command())

    assert output.applied is True
    latest = store.latest()
    assert latest is output.snapshot
    assert latest.ticket == 1
    assert latest.prices == {"ckUSDT": Decimal("1"), "ICP": Decimal("10")}
    assert [group.token for group in latest.groups] == ["ICP", "ckUSDT"]
    assert latest.totals.total_tvl == Decimal("20000")
    assert latest.totals.total_24h_volume == Decimal("500")
    assert latest.totals.total_24h_fees == Decimal("3")


def test_refresh_overtaken_by_newer_request_is_not_published():
    store = InMemorySnapshotStore()
    use_case = RefreshSnapshotUseCase(
        snapshot_store_port=store,
        resolve_prices_use_case=RacingResolvePricesUseCase(store),
    )

    output = use_case.execute(_command())

    assert output.applied is False
    assert output.snapshot.ticket == 1
    assert store.latest() is None
