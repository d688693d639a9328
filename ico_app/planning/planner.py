"""Split a total token supply into named allocation buckets"""

from typing import Any, Iterable

import structlog

from ..data.models import AllocationDefinition, AllocationResult, Amount

logger = structlog.get_logger(__name__)


def plan_allocations(total_supply: Any, allocations: Iterable[AllocationDefinition]) -> list[AllocationResult]:
    """
    Compute the absolute token amount of every allocation bucket.

    amount = total_supply * percentage / 100

    Percentages are not validated and amounts are not rounded; callers
    needing integral token units round downstream.

    Args:
        total_supply: Supply as int, float, Decimal, numeric string or big-number
        allocations: Allocation definitions, in display order

    Returns:
        One AllocationResult per definition, input order preserved
    """
    supply = Amount.parse(total_supply).value

    return [
        AllocationResult.from_definition(allocation, supply * allocation.percentage / 100)
        for allocation in allocations
    ]


class AllocationPlanner:
    """Planner for allocation tables arriving as definitions or raw rows"""

    def __init__(self):
        self.logger = logger

    def plan(self, total_supply: Any, allocations: Iterable[AllocationDefinition]) -> list[AllocationResult]:
        """Plan allocation definitions and log the outcome."""
        results = plan_allocations(total_supply, allocations)

        self.logger.debug(
            "Allocations planned",
            bucket_count=len(results),
            total_allocated=sum(result.amount for result in results),
        )
        return results

    def plan_definitions(self, total_supply: Any, rows: Iterable[dict[str, Any]]) -> list[AllocationResult]:
        """
        Plan allocation rows shaped like preset entries

        Args:
            total_supply: Supply in any accepted representation
            rows: Mappings with name, percentage and optional color/lockup/vesting

        Returns:
            Planned allocation results
        """
        definitions = [AllocationDefinition.from_dict(row) for row in rows]
        return self.plan(total_supply, definitions)
