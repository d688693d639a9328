"""Vested amounts and monthly release schedules"""

from typing import Optional

from ..config.defaults import MONTH_MS, VestingParams
from ..data.models import ScheduleEntry, VestingParameters


def vested_amount(
    total_amount: float,
    start_timestamp: float,
    cliff_months: float,
    vesting_duration_months: float,
    evaluation_timestamp: float,
    month_ms: int = MONTH_MS,
) -> float:
    """
    Calculate the amount vested at an evaluation time

    Months are fixed 30-day spans. Nothing vests strictly before the cliff
    end; everything is vested at or after cliff end + duration; in between
    the amount grows linearly from the cliff end.

    Args:
        total_amount: Total granted amount
        start_timestamp: Vesting start (seconds since epoch)
        cliff_months: Cliff length in months
        vesting_duration_months: Linear vesting length after the cliff
        evaluation_timestamp: Time to evaluate at (seconds since epoch)
        month_ms: Month length in milliseconds

    Returns:
        Vested amount, within [0, total_amount] for non-negative inputs
    """
    start_time = start_timestamp * 1000
    current_time = evaluation_timestamp * 1000

    cliff_end_time = start_time + cliff_months * month_ms
    if current_time < cliff_end_time:
        return 0.0

    # Checked before interpolating so a zero duration never divides
    vesting_end_time = start_time + (cliff_months + vesting_duration_months) * month_ms
    if current_time >= vesting_end_time:
        return total_amount

    vested_fraction = (current_time - cliff_end_time) / (vesting_end_time - cliff_end_time)
    return total_amount * vested_fraction


def monthly_vesting_schedule(total_amount: float, vesting_months: int, cliff_months: int = 0) -> list[ScheduleEntry]:
    """
    Expand a grant into equal monthly tranches

    The cliff contributes zero entries for months 0..cliff-1, then each of
    the vesting months releases total / vesting_months. A grant without
    vesting months yields only the cliff entries.

    Args:
        total_amount: Total granted amount
        vesting_months: Number of release months
        cliff_months: Leading months with no release

    Returns:
        Schedule entries ordered by month
    """
    schedule = [ScheduleEntry(month=month, amount=0.0, cumulative=0.0) for month in range(cliff_months)]

    if vesting_months <= 0:
        return schedule

    monthly_amount = total_amount / vesting_months
    cumulative = 0.0
    for i in range(vesting_months):
        cumulative += monthly_amount
        schedule.append(ScheduleEntry(
            month=cliff_months + i,
            amount=monthly_amount,
            cumulative=cumulative,
        ))

    return schedule


class VestingCalculator:
    """Vesting calculator bound to configured month length"""

    def __init__(self, params: Optional[VestingParams] = None):
        self.params = params or VestingParams()

    def vested(self, grant: VestingParameters, evaluation_timestamp: float) -> float:
        """Vested amount of a grant at the evaluation timestamp (seconds)."""
        return vested_amount(
            grant.total_amount,
            grant.start_timestamp,
            grant.cliff_months,
            grant.vesting_duration_months,
            evaluation_timestamp,
            month_ms=self.params.month_ms,
        )

    def locked(self, grant: VestingParameters, evaluation_timestamp: float) -> float:
        """Amount of a grant still locked at the evaluation timestamp."""
        return grant.total_amount - self.vested(grant, evaluation_timestamp)

    def schedule(self, grant: VestingParameters) -> list[ScheduleEntry]:
        """Monthly schedule of a grant."""
        return monthly_vesting_schedule(
            grant.total_amount,
            grant.vesting_duration_months,
            grant.cliff_months,
        )
