from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


DEFAULT_TOKEN_DECIMALS = 8


@dataclass(frozen=True)
class Token:
    id: str
    decimals: int | None
    is_usd_anchor: bool = False


def strip_chain_prefix(token_id: str) -> str:
    """`IC.ckUSDT` -> `ckUSDT`; ids without a chain prefix are returned as is."""
    if "." in token_id:
        return token_id.split(".", 1)[1]
    return token_id


@dataclass(frozen=True)
class TokenDecimalsTable:
    """Read-only token id -> decimals lookup passed into every calculation."""

    entries: Mapping[str, int] = field(default_factory=dict)
    default: int = DEFAULT_TOKEN_DECIMALS

    def __post_init__(self) -> None:
        normalized: dict[str, int] = {}
        for token_id, decimals in self.entries.items():
            normalized[token_id] = int(decimals)
            normalized.setdefault(strip_chain_prefix(token_id), int(decimals))
        object.__setattr__(self, "entries", MappingProxyType(normalized))

    @classmethod
    def from_tokens(
        cls,
        tokens: Iterable[Token],
        *,
        default: int = DEFAULT_TOKEN_DECIMALS,
    ) -> TokenDecimalsTable:
        # tokens without known decimals resolve through the prefix fallback or the default
        return cls(
            entries={token.id: token.decimals for token in tokens if token.decimals is not None},
            default=default,
        )

    def get(self, token_id: str) -> int:
        if token_id in self.entries:
            return self.entries[token_id]
        return self.entries.get(strip_chain_prefix(token_id), self.default)

    def __contains__(self, token_id: object) -> bool:
        if not isinstance(token_id, str):
            return False
        return token_id in self.entries or strip_chain_prefix(token_id) in self.entries
