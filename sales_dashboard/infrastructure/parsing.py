"""Parsing of raw transaction records into domain entities.

Shared by the record store (bundled JSON) and the dashboard client
(API responses) so both sides agree on how a sale month is derived.
"""

import math
from datetime import datetime, tzinfo
from numbers import Real
from typing import Any, Dict
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sales_dashboard.domain.entities import Transaction
from sales_dashboard.domain.exceptions import InvalidTransactionRecordException


def resolve_timezone(name: str) -> tzinfo:
    """
    Look up an IANA zone by name.

    Raises:
        InvalidTransactionRecordException: If the zone is unknown
    """
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTransactionRecordException(
            f"Unknown record timezone: {name!r}"
        ) from e


def parse_date_of_sale(value: Any, zone: tzinfo) -> datetime:
    """
    Parse a dateOfSale value and normalize it into ``zone``.

    - Offset-aware timestamps (including a trailing ``Z``) are converted.
    - Naive timestamps and date-only strings are taken as local to ``zone``.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidTransactionRecordException(
                f"Invalid dateOfSale: {value!r}"
            ) from e
    else:
        raise InvalidTransactionRecordException(f"Invalid dateOfSale: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=zone)
    return parsed.astimezone(zone)


def parse_transaction(item: Dict[str, Any], zone: tzinfo) -> Transaction:
    """
    Build a Transaction from a decoded JSON object.

    Raises:
        InvalidTransactionRecordException: On a missing field or bad value
    """
    if not isinstance(item, dict):
        raise InvalidTransactionRecordException(
            f"Expected a JSON object, got {type(item).__name__}"
        )

    missing = [key for key in ("id", "price", "sold", "dateOfSale") if key not in item]
    if missing:
        raise InvalidTransactionRecordException(
            f"Record is missing fields: {', '.join(missing)}"
        )

    record_id = item["id"]
    if isinstance(record_id, bool) or not isinstance(record_id, int):
        raise InvalidTransactionRecordException(f"Invalid id: {record_id!r}")

    # bool is a Real subclass
    price = item["price"]
    if isinstance(price, bool) or not isinstance(price, Real):
        raise InvalidTransactionRecordException(
            f"Invalid price for record {record_id}: {price!r}"
        )
    if not math.isfinite(price):
        raise InvalidTransactionRecordException(
            f"Non-finite price for record {record_id}: {price!r}"
        )
    if price < 0:
        raise InvalidTransactionRecordException(
            f"Negative price for record {record_id}: {price!r}"
        )

    sold = item["sold"]
    if not isinstance(sold, bool):
        raise InvalidTransactionRecordException(
            f"Invalid sold flag for record {record_id}: {sold!r}"
        )

    title = item.get("title")
    if title is None:
        title = ""
    elif not isinstance(title, str):
        raise InvalidTransactionRecordException(
            f"Invalid title for record {record_id}: {title!r}"
        )

    return Transaction(
        id=record_id,
        title=title,
        price=float(price),
        sold=sold,
        date_of_sale=parse_date_of_sale(item["dateOfSale"], zone),
    )
