"""
Parsers converting external date representations to aware UTC datetimes.

Accepted inputs mirror what the web layer hands over: datetime and date
objects, epoch milliseconds, and ISO-8601 strings.
"""

import math
from datetime import date, datetime, timezone
from typing import Any, Union

from ..errors import TemporalDataError

DateInput = Union[datetime, date, int, float, str]


def parse_datetime(value: DateInput) -> datetime:
    """
    Parse a date input into a timezone-aware UTC datetime.

    Naive datetimes are taken to be UTC. Numbers are epoch milliseconds.

    Args:
        value: datetime, date, epoch milliseconds or ISO-8601 string

    Returns:
        Aware datetime in UTC

    Raises:
        TemporalDataError: If the value cannot be interpreted as a date
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)

    if isinstance(value, bool):
        raise TemporalDataError(f"Cannot parse date from {value!r}", raw_value=value)

    if isinstance(value, (int, float)):
        return _parse_epoch_ms(value)

    if isinstance(value, str):
        return _parse_iso(value)

    raise TemporalDataError(
        f"Unsupported date type {type(value).__name__}",
        raw_value=value,
    )


def _parse_epoch_ms(value: Union[int, float]) -> datetime:
    if isinstance(value, float) and not math.isfinite(value):
        raise TemporalDataError(f"Timestamp must be finite, got {value}", raw_value=value)

    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise TemporalDataError(f"Timestamp out of range: {value}", raw_value=value) from e


def _parse_iso(text: str) -> datetime:
    cleaned = text.strip()
    if not cleaned:
        raise TemporalDataError("Empty date string", raw_value=text)

    # fromisoformat only accepts the Z suffix from 3.11 on
    if cleaned.endswith(("Z", "z")):
        cleaned = cleaned[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(cleaned)
    except ValueError as e:
        raise TemporalDataError(f"Cannot parse date from {text!r}", raw_value=text) from e

    return parse_datetime(parsed)
