from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from app.domain.entities.pool import Pool
from app.domain.entities.token import Token, TokenDecimalsTable
from app.domain.services.numeric import scale_down


logger = logging.getLogger(__name__)


def adjusted_reserves(pool: Pool, decimals: TokenDecimalsTable) -> tuple[Decimal, Decimal]:
    return (
        scale_down(pool.reserve_0, decimals.get(pool.token_0)),
        scale_down(pool.reserve_1, decimals.get(pool.token_1)),
    )


def value_ratios(pool: Pool, decimals: TokenDecimalsTable) -> tuple[Decimal, Decimal] | None:
    """Multipliers implied by equal value on both sides of the pool.

    Returns `(m0, m1)` with `price_1 = price_0 * m0` and `price_0 = price_1 * m1`,
    or `None` when the pool is not tradable.
    """
    if not pool.is_tradable:
        return None
    reserve_0, reserve_1 = adjusted_reserves(pool, decimals)
    return reserve_0 / reserve_1, reserve_1 / reserve_0


def _build_adjacency(
    pools: Sequence[Pool],
    decimals: TokenDecimalsTable,
) -> dict[str, list[tuple[str, Decimal]]]:
    adjacency: dict[str, list[tuple[str, Decimal]]] = {}
    for pool in pools:
        if pool.token_0 == pool.token_1:
            continue
        ratios = value_ratios(pool, decimals)
        if ratios is None:
            continue
        to_token_1, to_token_0 = ratios
        adjacency.setdefault(pool.token_0, []).append((pool.token_1, to_token_1))
        adjacency.setdefault(pool.token_1, []).append((pool.token_0, to_token_0))
    return adjacency


def resolve_prices(
    pools: Sequence[Pool],
    anchors: Mapping[str, Decimal],
    decimals: TokenDecimalsTable,
) -> dict[str, Decimal]:
    """Infer a USD price for every token reachable from the anchors.

    Breadth-first walk over the pool graph: anchors are expanded first, in
    mapping order, and each token's pools are followed in input order. A token
    is priced once, by the first pool that reaches it; anchors are never
    repriced. Tokens with no path to an anchor stay out of the result.
    """
    prices: dict[str, Decimal] = {token: Decimal(price) for token, price in anchors.items()}
    adjacency = _build_adjacency(pools, decimals)

    queue = deque(prices)
    while queue:
        token = queue.popleft()
        known = prices[token]
        for neighbour, multiplier in adjacency.get(token, ()):
            if neighbour in prices:
                continue
            prices[neighbour] = known * multiplier
            queue.append(neighbour)

    logger.debug(
        "price_resolver: resolved tokens=%s anchors=%s graph_nodes=%s",
        len(prices),
        len(anchors),
        len(adjacency),
    )
    return prices


def seed_anchor_prices(
    *,
    tokens: Iterable[Token],
    pools: Sequence[Pool],
    decimals: TokenDecimalsTable,
    primary_anchor: str | None,
) -> dict[str, Decimal]:
    """USD anchors for `resolve_prices`.

    The primary anchor is worth exactly 1. Every other USD-pegged token is
    priced through its first direct pool with the primary anchor when one is
    tradable, and falls back to 1 otherwise.
    """
    token_list = list(tokens)
    token_ids = {token.id for token in token_list}
    anchor_ids: list[str] = []
    for token in token_list:
        if token.is_usd_anchor or token.id == primary_anchor:
            if token.id not in anchor_ids:
                anchor_ids.append(token.id)

    if primary_anchor is None or primary_anchor not in token_ids:
        return {token_id: Decimal("1") for token_id in anchor_ids}

    anchors: dict[str, Decimal] = {primary_anchor: Decimal("1")}
    for token_id in anchor_ids:
        if token_id == primary_anchor:
            continue
        anchors[token_id] = _direct_price(
            token_id=token_id,
            primary_anchor=primary_anchor,
            pools=pools,
            decimals=decimals,
        )
    return anchors


def _direct_price(
    *,
    token_id: str,
    primary_anchor: str,
    pools: Sequence[Pool],
    decimals: TokenDecimalsTable,
) -> Decimal:
    for pool in pools:
        ratios = value_ratios(pool, decimals)
        if ratios is None:
            continue
        if pool.token_0 == primary_anchor and pool.token_1 == token_id:
            return ratios[0]
        if pool.token_1 == primary_anchor and pool.token_0 == token_id:
            return ratios[1]
    return Decimal("1")


def unpriced_tokens(pools: Iterable[Pool], prices: Mapping[str, Decimal]) -> list[str]:
    missing: list[str] = []
    for pool in pools:
        for token in (pool.token_0, pool.token_1):
            if token not in prices and token not in missing:
                missing.append(token)
    return missing
