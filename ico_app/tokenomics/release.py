"""
TGE-aware release schedule across a whole allocation table.

Each allocation unlocks a share at the token generation event (month 0)
and releases the rest in equal monthly amounts from the month after its
cliff until cliff + vesting months.
"""

from dataclasses import dataclass
from typing import Iterable

from ..data.models import Amount

DEFAULT_TGE_TERMS = (
    # category, percentage, vesting_months, cliff, tge
    ("Public Sale", 25, 6, 0, 20),
    ("Private Sale", 15, 12, 1, 10),
    ("Team", 20, 24, 6, 0),
    ("Advisors", 5, 18, 3, 0),
    ("Marketing", 10, 18, 0, 10),
    ("Ecosystem", 15, 36, 3, 5),
    ("Liquidity", 5, 0, 0, 100),
    ("Treasury", 5, 36, 6, 0),
)


@dataclass(frozen=True)
class TgeAllocation:
    """Allocation with a TGE unlock share and month-based vesting terms."""
    category: str
    percentage: float
    amount: float
    vesting_months: int
    cliff: int          # months
    tge: float          # percent of amount released at TGE


@dataclass(frozen=True)
class ReleaseEntry:
    """Tokens released across all allocations in one month."""
    month: int
    released: float
    cumulative: float


def generate_default_allocations(total_supply) -> list[TgeAllocation]:
    """Default ICO distribution of a total supply."""
    supply = Amount.parse(total_supply).value

    return [
        TgeAllocation(
            category=category,
            percentage=percentage,
            amount=supply * percentage / 100,
            vesting_months=vesting_months,
            cliff=cliff,
            tge=tge,
        )
        for category, percentage, vesting_months, cliff, tge in DEFAULT_TGE_TERMS
    ]


def calculate_initial_circulating(allocations: Iterable[TgeAllocation]) -> float:
    """Tokens unlocked at TGE."""
    return sum(allocation.amount * allocation.tge / 100 for allocation in allocations)


def _monthly_release(allocation: TgeAllocation, month: int) -> float:
    if allocation.vesting_months <= 0:
        return 0.0
    if month <= allocation.cliff or month > allocation.cliff + allocation.vesting_months:
        return 0.0

    total_to_vest = allocation.amount * (1 - allocation.tge / 100)
    return total_to_vest / allocation.vesting_months


def calculate_release_schedule(allocations: Iterable[TgeAllocation], months: int = 36) -> list[ReleaseEntry]:
    """
    Aggregate monthly releases of an allocation table.

    Args:
        allocations: Allocations with TGE and vesting terms
        months: Last month to include; month 0 is the TGE

    Returns:
        months + 1 entries, month 0 through months
    """
    allocations = list(allocations)
    schedule = []
    cumulative = 0.0

    for month in range(months + 1):
        if month == 0:
            released = calculate_initial_circulating(allocations)
        else:
            released = sum(_monthly_release(allocation, month) for allocation in allocations)

        cumulative += released
        schedule.append(ReleaseEntry(month=month, released=released, cumulative=cumulative))

    return schedule
