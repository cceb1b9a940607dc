from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from app.domain.entities.pool import Pool
from app.domain.entities.token import Token
from app.domain.exceptions import SnapshotInputError
from app.domain.services.numeric import is_numeric, parse_decimal


logger = logging.getLogger(__name__)

MAX_TOKEN_DECIMALS = 36


def _number(row: Mapping[str, Any], field: str) -> Decimal:
    value = row.get(field)
    if value is not None and value != "" and not is_numeric(value):
        logger.warning("snapshot_mapper: malformed_number field=%s value=%r", field, value)
    return parse_decimal(value)


def _identifier(row: Mapping[str, Any], field: str) -> str:
    value = row.get(field)
    if value is None or not str(value).strip():
        raise SnapshotInputError(f"{field} is required.")
    return str(value).strip()


def map_record_to_pool(row: Mapping[str, Any]) -> Pool:
    return Pool(
        token_0=_identifier(row, "symbol_0"),
        token_1=_identifier(row, "symbol_1"),
        reserve_0=_number(row, "balance_0"),
        reserve_1=_number(row, "balance_1"),
        lp_fee_0=_number(row, "lp_fee_0"),
        lp_fee_1=_number(row, "lp_fee_1"),
        lp_token_supply=_number(row, "lp_token_supply"),
        rolling_24h_volume=_number(row, "rolling_24h_volume"),
        rolling_24h_apy=_number(row, "rolling_24h_apy"),
        tvl=_number(row, "tvl"),
        rolling_24h_lp_fee=_number(row, "rolling_24h_lp_fee"),
    )


def _token_decimals(row: Mapping[str, Any]) -> int | None:
    value = row.get("decimals")
    if value is None or value == "":
        logger.warning("snapshot_mapper: missing_decimals token=%s", row.get("id"))
        return None
    parsed = parse_decimal(value) if is_numeric(value) else None
    # range check first: huge exponents must not be expanded into ints
    if (
        parsed is None
        or not 0 <= parsed <= MAX_TOKEN_DECIMALS
        or parsed != parsed.to_integral_value()
    ):
        logger.warning("snapshot_mapper: invalid_decimals token=%s value=%r", row.get("id"), value)
        return None
    return int(parsed)


def map_record_to_token(row: Mapping[str, Any]) -> Token:
    """Token metadata record; unknown or unusable decimals are left as `None`."""
    return Token(
        id=_identifier(row, "id"),
        decimals=_token_decimals(row),
        is_usd_anchor=bool(row.get("is_usd_anchor", False)),
    )
