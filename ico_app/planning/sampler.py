"""Random allocation tables for exercising the planner and validator"""

import math
import random
from typing import Optional

from ..config.defaults import SamplerParams
from ..data.models import AllocationDefinition

CATEGORY_NAMES = (
    "Public Sale",
    "Private Sale",
    "Team",
    "Advisors",
    "Development",
    "Marketing",
    "Ecosystem",
    "Liquidity",
    "Rewards",
    "Treasury",
    "Partnerships",
    "Staking",
)

CATEGORY_COLORS = (
    "#3b82f6",  # blue
    "#8b5cf6",  # purple
    "#10b981",  # green
    "#f97316",  # orange
    "#06b6d4",  # cyan
    "#f43f5e",  # rose
    "#eab308",  # yellow
    "#6366f1",  # indigo
    "#ec4899",  # pink
    "#14b8a6",  # teal
)

MAX_CATEGORIES = min(len(CATEGORY_NAMES), len(CATEGORY_COLORS))


def random_allocation_set(
    category_count: int = 5,
    rng: Optional[random.Random] = None,
    params: Optional[SamplerParams] = None,
) -> list[AllocationDefinition]:
    """
    Generate a random allocation table whose percentages sum to exactly 100.

    Each bucket but the last draws floor(random * floor(remaining * max_share))
    with a floor of min_percentage; the last bucket takes whatever is left.
    Once the budget is exhausted the floor keeps applying, so the final
    bucket can come out below the floor or negative.

    Args:
        category_count: Requested buckets, capped at the template count
        rng: Random source, a fresh random.Random when omitted
        params: Sampling bounds

    Returns:
        Allocation definitions with shuffled names and colors
    """
    rng = rng or random.Random()
    params = params or SamplerParams()

    count = min(category_count, MAX_CATEGORIES)
    if count <= 0:
        return []

    percentages = []
    remaining = 100
    for _ in range(count - 1):
        max_for_bucket = math.floor(remaining * params.max_share)
        percentage = max(params.min_percentage, math.floor(rng.random() * max_for_bucket))
        percentages.append(percentage)
        remaining -= percentage
    percentages.append(remaining)

    names = rng.sample(CATEGORY_NAMES, count)
    colors = rng.sample(CATEGORY_COLORS, count)

    allocations = []
    for name, color, percentage in zip(names, colors, percentages):
        if rng.random() > params.lockup_probability:
            lockup_months = math.floor(rng.random() * params.max_lockup_months)
        else:
            lockup_months = 0
        vesting_months = math.floor(rng.random() * params.vesting_span) + params.min_vesting_months

        allocations.append(AllocationDefinition(
            name=name,
            percentage=percentage,
            color=color,
            lockup_months=lockup_months,
            vesting_months=vesting_months,
        ))

    return allocations
