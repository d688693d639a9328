"""Allocation planning, validation and fixture generation"""

from .planner import AllocationPlanner, plan_allocations
from .sampler import random_allocation_set
from .validator import AllocationIssue, AllocationValidator, allocations_sum_to_hundred

__all__ = [
    "AllocationPlanner",
    "plan_allocations",
    "AllocationValidator",
    "AllocationIssue",
    "allocations_sum_to_hundred",
    "random_allocation_set",
]
