from __future__ import annotations

from decimal import Decimal

from app.domain.entities.pool import Pool
from app.domain.entities.token import Token, TokenDecimalsTable
from app.domain.services.price_resolver import (
    resolve_prices,
    seed_anchor_prices,
    unpriced_tokens,
    value_ratios,
)


def _pool(token_0: str, token_1: str, reserve_0, reserve_1) -> Pool:
    return Pool(
        token_0=token_0,
        token_1=token_1,
        reserve_0=Decimal(reserve_0),
        reserve_1=Decimal(reserve_1),
        lp_fee_0=Decimal("0"),
        lp_fee_1=Decimal("0"),
        lp_token_supply=Decimal("0"),
        rolling_24h_volume=Decimal("0"),
        rolling_24h_apy=Decimal("0"),
        tvl=Decimal("0"),
    )


DECIMALS = TokenDecimalsTable(entries={"USDC": 6, "USDT": 6, "TOKX": 6, "ZED": 6, "ICP": 8})


def _scenario_pools() -> list[Pool]:
    return [
        _pool("USDC", "USDT", 1_000_000 * 10**6, 999_500 * 10**6),
        _pool("TOKX", "USDT", 500 * 10**6, 10_000 * 10**6),
    ]


class TestResolvePrices:
    def test_two_hop_scenario(self):
        prices = resolve_prices(_scenario_pools(), {"USDC": Decimal("1")}, DECIMALS)

        assert prices["USDC"] == Decimal("1")
        assert prices["USDT"].quantize(Decimal("0.0001")) == Decimal("1.0005")
        assert prices["TOKX"].quantize(Decimal("0.01")) == Decimal("20.01")
        assert prices["TOKX"] == prices["USDT"] * Decimal("20")

    def test_reserves_are_adjusted_for_decimals(self):
        pools = [_pool("ICP", "USDC", 200 * 10**8, 2_000 * 10**6)]

        prices = resolve_prices(pools, {"USDC": Decimal("1")}, DECIMALS)

        assert prices["ICP"] == Decimal("10")

    def test_anchor_price_is_kept_regardless_of_pool_order(self):
        anchors = {"USDC": Decimal("1")}
        pools = _scenario_pools() + [_pool("USDT", "USDC", 1, 5)]

        forward = resolve_prices(pools, anchors, DECIMALS)
        backward = resolve_prices(list(reversed(pools)), anchors, DECIMALS)

        assert forward["USDC"] == Decimal("1")
        assert backward["USDC"] == Decimal("1")

    def test_deterministic_and_idempotent(self):
        pools = _scenario_pools()
        anchors = {"USDC": Decimal("1")}

        first = resolve_prices(pools, anchors, DECIMALS)
        second = resolve_prices(pools, anchors, DECIMALS)

        assert first == second
        assert anchors == {"USDC": Decimal("1")}

    def test_first_pool_in_scan_order_wins(self):
        pools = [
            _pool("USDC", "ZED", 2, 1),
            _pool("USDC", "ZED", 3, 1),
        ]

        prices = resolve_prices(pools, {"USDC": Decimal("1")}, DECIMALS)

        assert prices["ZED"] == Decimal("2")

    def test_zero_reserve_pool_is_not_an_edge(self):
        pools = [_pool("USDC", "ABC", 0, 100)]

        prices = resolve_prices(pools, {"USDC": Decimal("1")}, DECIMALS)

        assert "ABC" not in prices

    def test_isolated_tokens_and_empty_anchors_stay_unpriced(self):
        pools = [_pool("FOO", "BAR", 10, 20)]

        assert resolve_prices(pools, {}, DECIMALS) == {}
        prices = resolve_prices(pools, {"USDC": Decimal("1")}, DECIMALS)
        assert prices == {"USDC": Decimal("1")}
        assert unpriced_tokens(pools, prices) == ["FOO", "BAR"]

    def test_value_ratios_none_for_untradable_pool(self):
        assert value_ratios(_pool("A", "B", 1, 0), DECIMALS) is None


class TestSeedAnchorPrices:
    def test_secondary_anchor_priced_from_direct_pool(self):
        tokens = [
            Token(id="USDT", decimals=6, is_usd_anchor=True),
            Token(id="USDC", decimals=6, is_usd_anchor=True),
        ]
        pools = [_pool("USDT", "USDC", 1_000_000, 999_500)]

        anchors = seed_anchor_prices(
            tokens=tokens,
            pools=pools,
            decimals=DECIMALS,
            primary_anchor="USDT",
        )

        assert anchors["USDT"] == Decimal("1")
        assert anchors["USDC"].quantize(Decimal("0.0001")) == Decimal("1.0005")
        assert list(anchors) == ["USDT", "USDC"]

    def test_secondary_anchor_without_pool_is_one(self):
        tokens = [
            Token(id="USDT", decimals=6, is_usd_anchor=True),
            Token(id="USDC", decimals=6, is_usd_anchor=True),
        ]

        anchors = seed_anchor_prices(tokens=tokens, pools=[], decimals=DECIMALS, primary_anchor="USDT")

        assert anchors == {"USDT": Decimal("1"), "USDC": Decimal("1")}

    def test_unknown_primary_prices_every_anchor_at_one(self):
        tokens = [Token(id="USDC", decimals=6, is_usd_anchor=True), Token(id="ICP", decimals=8)]

        anchors = seed_anchor_prices(
            tokens=tokens,
            pools=[_pool("USDC", "ICP", 1, 1)],
            decimals=DECIMALS,
            primary_anchor="USDT",
        )

        assert anchors == {"USDC": Decimal("1")}
