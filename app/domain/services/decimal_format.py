from __future__ import annotations

from decimal import ROUND_DOWN, Decimal, localcontext

from app.domain.services.numeric import is_numeric, parse_decimal


NOT_AVAILABLE = "N/A"

# (price upper bound, decimals), checked lowest first.
AMOUNT_DECIMAL_STEPS: tuple[tuple[Decimal, int], ...] = (
    (Decimal("0.000001"), 0),
    (Decimal("0.0001"), 1),
    (Decimal("0.01"), 2),
    (Decimal("100"), 3),
    (Decimal("1000"), 4),
    (Decimal("10000"), 5),
    (Decimal("100000"), 6),
)
AMOUNT_DECIMALS_ABOVE = 8

POOL_DECIMAL_STEPS: tuple[tuple[Decimal, int], ...] = (
    (Decimal("0.000001"), 8),
    (Decimal("0.0001"), 6),
    (Decimal("0.01"), 4),
    (Decimal("10000"), 2),
)
POOL_DECIMALS_ABOVE = 0


def _reference_magnitude(reference_price: object) -> Decimal:
    if not is_numeric(reference_price):
        return Decimal("1")
    return abs(parse_decimal(reference_price))


def _pick(steps: tuple[tuple[Decimal, int], ...], above: int, price: Decimal) -> int:
    for upper, decimals in steps:
        if price < upper:
            return decimals
    return above


def choose_decimals(reference_price: object) -> int:
    """Decimals used to display a token amount, given the token's USD price.

    Cheap tokens get fewer decimals (a fraction of a unit is worth nothing),
    expensive ones get more. A missing or non-numeric price counts as 1.
    """
    return _pick(AMOUNT_DECIMAL_STEPS, AMOUNT_DECIMALS_ABOVE, _reference_magnitude(reference_price))


def pool_decimals(reference_price: object) -> int:
    """Decimals used to display a pool price; tiny prices need more digits."""
    return _pick(POOL_DECIMAL_STEPS, POOL_DECIMALS_ABOVE, _reference_magnitude(reference_price))


def truncate_decimal(value: Decimal, decimals: int) -> Decimal:
    if decimals < 0:
        raise ValueError("decimals must be non-negative.")
    exponent = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + decimals + 2)
        truncated = value.quantize(exponent, rounding=ROUND_DOWN)
    if truncated == 0:
        return abs(truncated)
    return truncated


def format_decimal(value: object, decimals: int) -> object:
    """Truncate `value` to `decimals` places and render it with `,` separators.

    `None`, `""` and zero come back untouched so callers can keep their own
    placeholder; anything non-numeric renders as `"0"`.
    """
    if value is None or value == "":
        return value
    if not is_numeric(value):
        return "0"
    parsed = parse_decimal(value)
    if parsed == 0:
        return value
    truncated = truncate_decimal(parsed, decimals)
    return f"{truncated:,.{decimals}f}"


def price_rounded_amount(reference_price: object, amount: object) -> object:
    return format_decimal(amount, choose_decimals(reference_price))


def price_rounded_pool(reference_price: object, amount: object) -> object:
    return format_decimal(amount, pool_decimals(reference_price))


def format_price(price: Decimal | None, decimals: int | None = None) -> str:
    if price is None:
        return NOT_AVAILABLE
    places = pool_decimals(price) if decimals is None else decimals
    return format_display(price, places)


def format_display(value: Decimal | None, decimals: int) -> str:
    """String form for API payloads: `N/A` for missing values, `0` for zero."""
    if value is None:
        return NOT_AVAILABLE
    if value == 0:
        return "0"
    return str(format_decimal(value, decimals))
