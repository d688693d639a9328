"""
Calendar dates of vesting milestones.

Unlike the vested-amount calculation, which uses fixed 30-day months,
the dates here use calendar month arithmetic: adding a month keeps the
day of month and clamps it to the last day of shorter months.
"""

from datetime import datetime
from typing import Optional

import structlog
from dateutil.relativedelta import relativedelta

from ..config.defaults import VestingParams
from ..data.parsers import DateInput, parse_datetime
from ..errors import TemporalDataError

logger = structlog.get_logger(__name__)


def add_months(value: DateInput, months: float) -> datetime:
    """
    Add calendar months to a date.

    Fractional month counts are truncated toward zero.

    Raises:
        TemporalDataError: If the date cannot be parsed or leaves the supported range
    """
    start = parse_datetime(value)
    try:
        return start + relativedelta(months=int(months))
    except (OverflowError, ValueError) as e:
        raise TemporalDataError(
            f"Cannot add {months} months to {start.isoformat()}",
            raw_value=value,
        ) from e


def cliff_date(start_date: DateInput, cliff_months: float) -> datetime:
    """Date the cliff ends."""
    return add_months(start_date, cliff_months)


def vesting_end_date(start_date: DateInput, duration_months: float) -> datetime:
    """Date a vesting period measured from its start ends."""
    return add_months(start_date, duration_months)


def vesting_date_list(
    start_date: DateInput,
    cliff_months: float,
    vesting_duration_months: float,
    period_count: int = VestingParams.default_period_count,
) -> list[datetime]:
    """
    Generate the milestone dates of a vesting schedule.

    The list holds the start date, the cliff end when there is a cliff, and
    period_count dates spread evenly from the cliff end to the end of the
    vesting duration (measured from the start):

        cliff_end + trunc(i * (duration - cliff) / period_count) months, i = 1..period_count

    A duration shorter than the cliff is not rejected; the generated dates
    then step backwards from the cliff end.

    Args:
        start_date: Vesting start
        cliff_months: Cliff length in months
        vesting_duration_months: Total vesting length in months
        period_count: Number of dates after the cliff

    Returns:
        Fresh list of 1 + (cliff_months > 0) + period_count dates

    Raises:
        TemporalDataError: If the start date is unparseable
    """
    start = parse_datetime(start_date)
    cliff_end = add_months(start, cliff_months)

    remaining_months = vesting_duration_months - cliff_months
    months_per_period = remaining_months / period_count if period_count > 0 else 0

    dates = [start]
    if cliff_months > 0:
        dates.append(cliff_end)

    for i in range(1, period_count + 1):
        dates.append(add_months(cliff_end, i * months_per_period))

    return dates


def safe_vesting_date_list(
    start_date: Optional[DateInput],
    cliff_months: float,
    vesting_duration_months: float,
    period_count: int = VestingParams.default_period_count,
) -> list[datetime]:
    """
    Display variant of vesting_date_list that never raises.

    Unparseable input is logged and yields an empty list, so a dashboard
    can render an empty timeline instead of failing.
    """
    if start_date is None:
        return []

    try:
        return vesting_date_list(start_date, cliff_months, vesting_duration_months, period_count)
    except TemporalDataError as e:
        logger.warning(
            "Error generating vesting dates",
            start_date=repr(start_date),
            error=str(e),
        )
        return []
