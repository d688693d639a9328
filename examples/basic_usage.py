#!/usr/bin/env python3
"""
Basic Usage Example - ICO Allocation and Vesting Engine

This script demonstrates the basic usage of the allocation engine. It shows how to:
- Initialize the engine and evaluate a preset
- Plan a custom allocation table
- Build a monthly schedule and milestone dates for one bucket
- Draw a random sample table

Run: python examples/basic_usage.py
"""

import random
from datetime import datetime, timezone

from ico_app.data.models import AllocationDefinition
from ico_app.engine import TokenomicsEngine
from ico_app.logging import configure_logging
from ico_app.planning.sampler import random_allocation_set
from ico_app.utils.time import format_date, to_unix_timestamp


def print_evaluation(title, evaluation) -> None:
    print(f"\n=== {title} ===")
    for status in evaluation.statuses:
        print(f"{status.name:<14} {status.amount:>16,.0f} vested {status.vested_pct:5.1f}%")
    if not evaluation.valid:
        for issue in evaluation.issues:
            print(f"  issue: {issue.field}: {issue.message}")


def main() -> None:
    configure_logging(level="WARNING")
    engine = TokenomicsEngine()

    as_of = to_unix_timestamp(datetime(2025, 1, 1, tzinfo=timezone.utc))
    print_evaluation("Standard preset on Jan 01, 2025", engine.evaluate_preset("standard", as_of))

    definitions = [
        AllocationDefinition("Community", 50, "#3b82f6", vesting_months=12),
        AllocationDefinition("Founders", 30, "#8b5cf6", lockup_months=6, vesting_months=18),
        AllocationDefinition("Treasury", 20, "#10b981"),
    ]
    start = to_unix_timestamp("2024-06-01T00:00:00Z")
    evaluation = engine.evaluate_plan(10_000_000, definitions, start, as_of, subject="custom")
    print_evaluation("Custom table", evaluation)

    founders = evaluation.results[1]
    print("\n=== Founders schedule ===")
    for entry in engine.bucket_schedule(founders):
        print(f"month {entry.month:>2}: {entry.amount:>12,.2f} (cumulative {entry.cumulative:,.2f})")

    print("\n=== Founders milestones ===")
    for milestone in engine.bucket_dates(founders, "2024-06-01", period_count=6):
        print(format_date(milestone, params=engine.config.display))

    print("\n=== Random sample ===")
    for allocation in random_allocation_set(4, rng=random.Random(3)):
        print(f"{allocation.name:<14} {allocation.percentage:>3}%")


if __name__ == "__main__":
    main()
