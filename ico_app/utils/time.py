"""
Clock resolution and date display helpers.

The calculation core takes explicit timestamps. This module is where the
boundary layers turn "as of now" into a concrete timestamp, and where
dates are rendered for dashboards with placeholder fallbacks.
"""

import math
from datetime import datetime, timezone
from typing import Optional

import structlog

from ..config.defaults import DisplayParams
from ..data.parsers import DateInput, parse_datetime
from ..errors import TemporalDataError

logger = structlog.get_logger(__name__)

_DISPLAY = DisplayParams()


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Return the given time, or the wall-clock time in UTC."""
    if now is not None:
        return parse_datetime(now)
    return datetime.now(timezone.utc)


def resolve_evaluation_timestamp(evaluation_timestamp: Optional[float] = None) -> float:
    """
    Resolve an evaluation timestamp in seconds since epoch.

    Args:
        evaluation_timestamp: Explicit timestamp, used as is when given

    Returns:
        The explicit timestamp, or the current time floored to whole seconds
    """
    if evaluation_timestamp is not None:
        return evaluation_timestamp
    return math.floor(datetime.now(timezone.utc).timestamp())


def to_unix_timestamp(value: DateInput) -> int:
    """
    Convert a date input to whole seconds since epoch.

    Raises:
        TemporalDataError: If the value cannot be parsed
    """
    return math.floor(parse_datetime(value).timestamp())


def days_until(value: DateInput, now: Optional[datetime] = None) -> int:
    """Whole days until a date, 0 if it has passed or cannot be parsed."""
    try:
        target = parse_datetime(value)
    except TemporalDataError as e:
        logger.warning("Error calculating days until", value=repr(value), error=str(e))
        return 0

    current = resolve_now(now)
    if target < current:
        return 0
    return (target - current).days


def days_since(value: DateInput, now: Optional[datetime] = None) -> int:
    """Whole days since a date, 0 if it is in the future or cannot be parsed."""
    try:
        origin = parse_datetime(value)
    except TemporalDataError as e:
        logger.warning("Error calculating days since", value=repr(value), error=str(e))
        return 0

    current = resolve_now(now)
    if origin > current:
        return 0
    return (current - origin).days


def is_future_date(value: DateInput, now: Optional[datetime] = None) -> bool:
    try:
        return parse_datetime(value) > resolve_now(now)
    except TemporalDataError:
        return False


def is_past_date(value: DateInput, now: Optional[datetime] = None) -> bool:
    try:
        return parse_datetime(value) < resolve_now(now)
    except TemporalDataError:
        return False


def format_date(value: Optional[DateInput], fmt: Optional[str] = None,
                params: Optional[DisplayParams] = None) -> str:
    """
    Format a date for display.

    Args:
        value: Date input; empty values render as the empty placeholder
        fmt: strftime format, params.date_format when omitted
        params: Display settings, the built-in defaults when omitted

    Returns:
        Formatted date, or "Invalid date" when the value cannot be parsed
    """
    params = params or _DISPLAY
    if value is None or value == "" or value == 0:
        return params.empty_placeholder

    try:
        return parse_datetime(value).strftime(fmt or params.date_format)
    except TemporalDataError as e:
        logger.warning("Error formatting date", value=repr(value), error=str(e))
        return params.invalid_placeholder


def format_datetime(value: Optional[DateInput], params: Optional[DisplayParams] = None) -> str:
    """Format a date with time of day for display."""
    params = params or _DISPLAY
    return format_date(value, params.datetime_format, params)


_RELATIVE_UNITS = (
    ("year", 365 * 86400),
    ("month", 30 * 86400),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


def format_relative_time(value: Optional[DateInput], add_suffix: bool = True,
                         now: Optional[datetime] = None,
                         params: Optional[DisplayParams] = None) -> str:
    """
    Describe the distance between a date and now, e.g. "3 days ago".

    Uses the largest whole unit; distances under a minute read
    "less than a minute".
    """
    if value is None or value == "" or value == 0:
        return (params or _DISPLAY).empty_placeholder

    try:
        target = parse_datetime(value)
    except TemporalDataError as e:
        logger.warning("Error formatting relative time", value=repr(value), error=str(e))
        return "Unknown time"

    delta = (target - resolve_now(now)).total_seconds()
    distance = abs(delta)

    text = "less than a minute"
    for unit, seconds in _RELATIVE_UNITS:
        count = int(distance // seconds)
        if count >= 1:
            text = f"{count} {unit}" + ("s" if count > 1 else "")
            break

    if not add_suffix:
        return text
    return f"in {text}" if delta > 0 else f"{text} ago"


def format_countdown(value: DateInput, now: Optional[datetime] = None,
                     params: Optional[DisplayParams] = None) -> str:
    """
    Render the time left until a date as "1d 2h 3m", "2h 3m" or "3m".

    Returns "Ended" once the date has passed and "N/A" for unparseable input.
    """
    try:
        target = parse_datetime(value)
    except TemporalDataError as e:
        logger.warning("Error formatting countdown", value=repr(value), error=str(e))
        return (params or _DISPLAY).empty_placeholder

    total_seconds = math.floor((target - resolve_now(now)).total_seconds())
    if total_seconds <= 0:
        return "Ended"

    days = total_seconds // 86400
    hours = (total_seconds % 86400) // 3600
    minutes = (total_seconds % 3600) // 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
