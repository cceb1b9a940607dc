from __future__ import annotations

from functools import lru_cache

from app.application.use_cases.get_latest_snapshot import GetLatestSnapshotUseCase
from app.application.use_cases.get_pool_share import GetPoolShareUseCase
from app.application.use_cases.get_token_stats import GetTokenStatsUseCase
from app.application.use_cases.refresh_snapshot import RefreshSnapshotUseCase
from app.application.use_cases.resolve_prices import ResolvePricesUseCase
from app.application.use_cases.value_portfolio import ValuePortfolioUseCase
from app.infrastructure.store.snapshot_store import InMemorySnapshotStore
from app.shared.config import get_settings


@lru_cache(maxsize=1)
def _get_snapshot_store() -> InMemorySnapshotStore:
    return InMemorySnapshotStore()


def get_resolve_prices_use_case() -> ResolvePricesUseCase:
    settings = get_settings()
    return ResolvePricesUseCase(
        default_primary_anchor=settings.primary_usd_anchor,
        usd_anchor_tokens=settings.usd_anchor_tokens,
        default_decimals=settings.default_token_decimals,
    )


def get_pool_share_use_case() -> GetPoolShareUseCase:
    return GetPoolShareUseCase(resolve_prices_use_case=get_resolve_prices_use_case())


def get_token_stats_use_case() -> GetTokenStatsUseCase:
    return GetTokenStatsUseCase(resolve_prices_use_case=get_resolve_prices_use_case())


def get_value_portfolio_use_case() -> ValuePortfolioUseCase:
    return ValuePortfolioUseCase(resolve_prices_use_case=get_resolve_prices_use_case())


def get_refresh_snapshot_use_case() -> RefreshSnapshotUseCase:
    return RefreshSnapshotUseCase(
        snapshot_store_port=_get_snapshot_store(),
        resolve_prices_use_case=get_resolve_prices_use_case(),
    )


def get_latest_snapshot_use_case() -> GetLatestSnapshotUseCase:
    return GetLatestSnapshotUseCase(snapshot_store_port=_get_snapshot_store())
