"""Cliff + linear vesting calculations and schedules"""

from .calculator import VestingCalculator, monthly_vesting_schedule, vested_amount
from .dates import add_months, cliff_date, safe_vesting_date_list, vesting_date_list, vesting_end_date

__all__ = [
    "VestingCalculator",
    "vested_amount",
    "monthly_vesting_schedule",
    "vesting_date_list",
    "safe_vesting_date_list",
    "add_months",
    "cliff_date",
    "vesting_end_date",
]
