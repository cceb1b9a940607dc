from __future__ import annotations

import json
import os
from dataclasses import dataclass

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _json_list(name: str, default: list[str]) -> list[str]:
    value = _env(name)
    if not value:
        return list(default)
    parsed = json.loads(value)
    if not isinstance(parsed, list):
        raise ValueError(f"{name} must be a JSON list.")
    return [str(item) for item in parsed]


@dataclass(frozen=True)
class Settings:
    primary_usd_anchor: str
    usd_anchor_tokens: list[str]
    default_token_decimals: int
    cors_allow_origins: list[str]
    log_level: str


def get_settings() -> Settings:
    return Settings(
        primary_usd_anchor=_env("PRIMARY_USD_ANCHOR", "ckUSDT"),
        usd_anchor_tokens=_json_list("USD_ANCHOR_TOKENS", ["ckUSDT", "ckUSDC"]),
        default_token_decimals=int(_env("DEFAULT_TOKEN_DECIMALS", "8")),
        cors_allow_origins=_json_list("CORS_ALLOW_ORIGINS", ["*"]),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
    )
