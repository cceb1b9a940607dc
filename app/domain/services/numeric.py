from __future__ import annotations

from decimal import Decimal, InvalidOperation


def decimal_or_zero(value: Decimal | None) -> Decimal:
    return value if value is not None else Decimal("0")


def parse_decimal(value: object) -> Decimal:
    """Parse a snapshot number, recovering anything malformed to zero.

    Accepts Decimal, int, float and strings carrying `,` digit-group
    separators (`"1,234.5"`).
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        parsed = value
    elif isinstance(value, int):
        return Decimal(value)
    elif isinstance(value, float):
        parsed = Decimal(str(value))
    elif isinstance(value, str):
        cleaned = value.strip().replace(",", "").replace("_", "")
        if not cleaned:
            return Decimal("0")
        try:
            parsed = Decimal(cleaned)
        except InvalidOperation:
            return Decimal("0")
    else:
        return Decimal("0")

    if not parsed.is_finite():
        return Decimal("0")
    return parsed


def is_numeric(value: object) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, (int, float, Decimal)):
        return Decimal(value).is_finite()
    if isinstance(value, str):
        cleaned = value.strip().replace(",", "").replace("_", "")
        if not cleaned:
            return False
        try:
            return Decimal(cleaned).is_finite()
        except InvalidOperation:
            return False
    return False


def scale_down(raw: Decimal, decimals: int) -> Decimal:
    """Raw fixed-point integer -> token units."""
    return raw / (Decimal("10") ** decimals)


def clamp(value: Decimal, *, lower: Decimal, upper: Decimal) -> Decimal:
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value
