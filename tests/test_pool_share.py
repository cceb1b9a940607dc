from __future__ import annotations

from decimal import Decimal

from app.domain.entities.pool import HolderPosition, Pool
from app.domain.entities.token import TokenDecimalsTable
from app.domain.services.pool_share import (
    holder_percentage,
    position_value_usd,
    reserve_percentage,
    share_of,
)

DECIMALS = TokenDecimalsTable(entries={"ICP": 8, "ckUSDT": 6})
PRICES = {"ICP": Decimal("10"), "ckUSDT": Decimal("1")}


def _pool(**overrides) -> Pool:
    values = {
        "token_0": "ICP",
        "token_1": "ckUSDT",
        "reserve_0": Decimal("1000"),
        "reserve_1": Decimal("2000"),
        "lp_fee_0": Decimal("200"),
        "lp_fee_1": Decimal("0"),
        "lp_token_supply": Decimal("1000"),
        "rolling_24h_volume": Decimal("0"),
        "rolling_24h_apy": Decimal("0"),
        "tvl": Decimal("0"),
    }
    values.update(overrides)
    return Pool(**values)


def _position(pool: Pool, *, lp_balance="0", amount_0="0", amount_1="0") -> HolderPosition:
    return HolderPosition(
        pool=pool,
        lp_balance=Decimal(lp_balance),
        amount_0=Decimal(amount_0),
        amount_1=Decimal(amount_1),
    )


class TestShareOf:
    def test_lp_token_path(self):
        share = share_of(_position(_pool(), lp_balance="50"), PRICES, DECIMALS)

        assert share.percentage == Decimal("5")
        assert share.fee_share_0 == Decimal("10")
        assert share.fee_share_1 == Decimal("0")

    def test_lp_token_path_is_clamped(self):
        assert holder_percentage(_position(_pool(), lp_balance="1500")) == Decimal("100")
        assert holder_percentage(_position(_pool(), lp_balance="-3")) == Decimal("0")

    def test_lp_path_preferred_over_amounts(self):
        position = _position(_pool(), lp_balance="100", amount_0="1000", amount_1="2000")

        assert holder_percentage(position) == Decimal("10")

    def test_fallback_averages_reserve_ratios(self):
        pool = _pool(lp_token_supply=Decimal("0"))
        position = _position(pool, amount_0="100", amount_1="400")

        # 10% of reserve_0 and 20% of reserve_1
        assert holder_percentage(position) == Decimal("15")

    def test_fallback_clamps_each_side(self):
        assert reserve_percentage(
            amount_0=Decimal("5000"),
            amount_1=Decimal("0"),
            reserve_0=Decimal("1000"),
            reserve_1=Decimal("2000"),
        ) == Decimal("50")

    def test_fallback_skips_empty_reserves(self):
        assert reserve_percentage(
            amount_0=Decimal("10"),
            amount_1=Decimal("200"),
            reserve_0=Decimal("0"),
            reserve_1=Decimal("2000"),
        ) == Decimal("10")
        assert reserve_percentage(
            amount_0=Decimal("10"),
            amount_1=Decimal("10"),
            reserve_0=Decimal("0"),
            reserve_1=Decimal("0"),
        ) == Decimal("0")

    def test_fees_usd_scales_by_decimals_and_price(self):
        pool = _pool(lp_fee_0=Decimal(20 * 10**8), lp_fee_1=Decimal(50 * 10**6))

        share = share_of(_position(pool, lp_balance="50"), PRICES, DECIMALS)

        assert share.fee_share_0 == Decimal(10**8)
        assert share.fee_share_1 == Decimal(2_500_000)
        assert share.fees_usd == Decimal("12.5")

    def test_unpriced_token_contributes_no_fees(self):
        pool = _pool(lp_fee_0=Decimal(20 * 10**8), lp_fee_1=Decimal(50 * 10**6))

        share = share_of(_position(pool, lp_balance="50"), {"ckUSDT": Decimal("1")}, DECIMALS)

        assert share.fees_usd == Decimal("2.5")

    def test_percentage_always_within_bounds(self):
        pools = [
            _pool(),
            _pool(lp_token_supply=Decimal("0")),
            _pool(lp_token_supply=Decimal("0"), reserve_0=Decimal("0"), reserve_1=Decimal("0")),
        ]
        balances = ["0", "1", "999", "1000", "1001", "-5"]
        for pool in pools:
            for balance in balances:
                share = share_of(
                    _position(pool, lp_balance=balance, amount_0=balance, amount_1=balance),
                    PRICES,
                    DECIMALS,
                )
                assert Decimal("0") <= share.percentage <= Decimal("100")


class TestPositionValue:
    def test_values_each_side(self):
        position = _position(_pool(), amount_0=str(3 * 10**8), amount_1=str(7 * 10**6))

        value = position_value_usd(position, PRICES, DECIMALS)

        assert value.usd_amount_0 == Decimal("30")
        assert value.usd_amount_1 == Decimal("7")
        assert value.total_usd == Decimal("37")

    def test_unpriced_side_is_zero(self):
        position = _position(_pool(), amount_0=str(3 * 10**8), amount_1=str(7 * 10**6))

        value = position_value_usd(position, {}, DECIMALS)

        assert value.total_usd == Decimal("0")
