from __future__ import annotations

import pytest

from app.shared.config import get_settings

ENV_KEYS = (
    "PRIMARY_USD_ANCHOR",
    "USD_ANCHOR_TOKENS",
    "DEFAULT_TOKEN_DECIMALS",
    "CORS_ALLOW_ORIGINS",
    "LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()

    assert settings.primary_usd_anchor == "ckUSDT"
    assert settings.usd_anchor_tokens == ["ckUSDT", "ckUSDC"]
    assert settings.default_token_decimals == 8
    assert settings.cors_allow_origins == ["*"]
    assert settings.log_level == "INFO"


def test_reads_environment(clean_env):
    clean_env.setenv("PRIMARY_USD_ANCHOR", "USDC")
    clean_env.setenv("USD_ANCHOR_TOKENS", '["USDC", "USDT"]')
    clean_env.setenv("DEFAULT_TOKEN_DECIMALS", "6")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.primary_usd_anchor == "USDC"
    assert settings.usd_anchor_tokens == ["USDC", "USDT"]
    assert settings.default_token_decimals == 6
    assert settings.log_level == "DEBUG"


def test_list_settings_must_be_json_lists(clean_env):
    clean_env.setenv("CORS_ALLOW_ORIGINS", '{"origin": "*"}')

    with pytest.raises(ValueError):
        get_settings()
