from __future__ import annotations

from collections.abc import Iterable
from dataclasses import replace

from app.application.dto.prices import ResolvePricesInput, ResolvePricesOutput
from app.domain.entities.pool import Pool
from app.domain.entities.token import (
    DEFAULT_TOKEN_DECIMALS,
    Token,
    TokenDecimalsTable,
    strip_chain_prefix,
)
from app.domain.services.price_resolver import resolve_prices, seed_anchor_prices, unpriced_tokens


def _anchor_id(anchor: str | None, pools: list[Pool], tokens: Iterable[Token]) -> str | None:
    """Id under which `anchor` actually appears, pools first (`ckUSDT` may trade as `IC.ckUSDT`)."""
    if anchor is None:
        return None
    plain = strip_chain_prefix(anchor)
    pool_ids = dict.fromkeys(token_id for pool in pools for token_id in (pool.token_0, pool.token_1))
    for candidates in (pool_ids, [token.id for token in tokens]):
        if anchor in candidates:
            return anchor
        for token_id in candidates:
            if strip_chain_prefix(token_id) == plain:
                return token_id
    return anchor


class ResolvePricesUseCase:
    def __init__(
        self,
        *,
        default_primary_anchor: str | None = None,
        usd_anchor_tokens: list[str] | None = None,
        default_decimals: int = DEFAULT_TOKEN_DECIMALS,
    ):
        self._default_primary_anchor = default_primary_anchor
        self._usd_anchor_tokens = {strip_chain_prefix(token_id) for token_id in usd_anchor_tokens or []}
        self._default_decimals = default_decimals

    def _snapshot_tokens(self, command: ResolvePricesInput) -> list[Token]:
        tokens = list(command.tokens)
        listed = {token.id for token in tokens}
        # pool tokens without metadata still take part; their decimals come from the table
        for pool in command.pools:
            for token_id in (pool.token_0, pool.token_1):
                if token_id not in listed:
                    listed.add(token_id)
                    tokens.append(Token(id=token_id, decimals=None))
        return [
            replace(token, is_usd_anchor=True)
            if strip_chain_prefix(token.id) in self._usd_anchor_tokens and not token.is_usd_anchor
            else token
            for token in tokens
        ]

    def execute(self, command: ResolvePricesInput) -> ResolvePricesOutput:
        tokens = self._snapshot_tokens(command)
        primary_anchor = _anchor_id(
            command.primary_anchor or self._default_primary_anchor,
            command.pools,
            tokens,
        )
        decimals = TokenDecimalsTable.from_tokens(tokens, default=self._default_decimals)
        anchors = seed_anchor_prices(
            tokens=tokens,
            pools=command.pools,
            decimals=decimals,
            primary_anchor=primary_anchor,
        )
        prices = resolve_prices(command.pools, anchors, decimals)
        return ResolvePricesOutput(
            prices=prices,
            anchors=anchors,
            unpriced_tokens=unpriced_tokens(command.pools, prices),
            decimals=decimals,
        )
