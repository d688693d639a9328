"""Consistency checks for allocation percentage tables"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..config.defaults import ALLOCATION_TOLERANCE, AllocationParams
from ..data.models import AllocationDefinition
from ..logging.config import get_validation_logger, log_validation_decision


def allocations_sum_to_hundred(percentages: Iterable[float]) -> bool:
    """
    Check that allocation percentages add up to 100

    Args:
        percentages: Allocation percentages

    Returns:
        True if |sum - 100| < 0.001
    """
    return abs(sum(percentages) - 100) < ALLOCATION_TOLERANCE


@dataclass(frozen=True)
class AllocationIssue:
    """A single problem found in an allocation table."""
    field: str
    message: str
    value: Any


class AllocationValidator:
    """Validates allocation tables before they are accepted."""

    def __init__(self, params: Optional[AllocationParams] = None):
        self.params = params or AllocationParams()
        self.validation_logger = get_validation_logger(__name__)

    def sums_to_hundred(self, percentages: Iterable[float]) -> bool:
        """Sum check using the configured tolerance."""
        return abs(sum(percentages) - 100) < self.params.tolerance

    def validate(self, definitions: list[AllocationDefinition], subject: str = "allocations") -> list[AllocationIssue]:
        """
        Validate a full allocation table.

        Args:
            definitions: Allocation definitions to check
            subject: Name used in the audit log record

        Returns:
            List of issues, empty when the table is consistent
        """
        issues = []

        total = sum(definition.percentage for definition in definitions)
        if not self.sums_to_hundred(definition.percentage for definition in definitions):
            issues.append(AllocationIssue(
                field="percentage",
                message="Allocation percentages must sum to 100",
                value=total,
            ))

        duplicates = sorted(name for name, count in Counter(d.name for d in definitions).items() if count > 1)
        if duplicates:
            issues.append(AllocationIssue(
                field="name",
                message="Allocation names must be unique",
                value=duplicates,
            ))

        for definition in definitions:
            if not self.params.min_percentage <= definition.percentage <= self.params.max_percentage:
                issues.append(AllocationIssue(
                    field=f"{definition.name}.percentage",
                    message=(f"Must be between {self.params.min_percentage} "
                             f"and {self.params.max_percentage}"),
                    value=definition.percentage,
                ))

            for field_name in ("lockup_months", "vesting_months"):
                value = getattr(definition, field_name)
                if value is not None and (not isinstance(value, int) or isinstance(value, bool) or value < 0):
                    issues.append(AllocationIssue(
                        field=f"{definition.name}.{field_name}",
                        message="Must be a non-negative integer",
                        value=value,
                    ))

        log_validation_decision(
            self.validation_logger,
            check_name="allocation_table",
            passed=not issues,
            subject=subject,
            reason="consistent" if not issues else f"{len(issues)} issue(s)",
            context={"bucket_count": len(definitions), "percentage_total": total},
        )
        return issues
