"""
Command-line entry point.

    ico-app report --preset standard [--at 2025-01-01T00:00:00Z] [--json]
    ico-app schedule --amount 1200 --vesting-months 12 [--cliff-months 3]
    ico-app dates --start 2024-01-01 --cliff-months 6 --duration-months 24
    ico-app sample --count 5 [--seed 7]

Exit codes: 0 success, 1 allocation table failed validation, 2 bad
configuration or input.
"""

import argparse
import json
import random
import sys
from dataclasses import asdict
from typing import Optional

from .data.parsers import parse_datetime
from .engine import PlanEvaluation, TokenomicsEngine
from .errors import ConfigurationError, DataQualityError
from .logging.config import configure_logging, get_logger
from .planning.sampler import random_allocation_set
from .planning.validator import allocations_sum_to_hundred
from .utils.time import format_date, to_unix_timestamp
from .vesting.calculator import monthly_vesting_schedule
from .vesting.dates import vesting_date_list

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID_PLAN = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ico-app", description="Token allocation and vesting calculator")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    parser.add_argument("--config-dir", default=None, help="Directory holding settings.yaml and allocations.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    report = subparsers.add_parser("report", help="Vesting status of an allocation preset")
    report.add_argument("--preset", default="standard", help="Preset name in allocations.yaml")
    report.add_argument("--at", default=None, help="Evaluation date (ISO-8601), defaults to now")
    report.add_argument("--json", action="store_true", help="Emit JSON instead of a table")

    schedule = subparsers.add_parser("schedule", help="Monthly vesting schedule of a grant")
    schedule.add_argument("--amount", type=float, required=True)
    schedule.add_argument("--vesting-months", type=int, required=True)
    schedule.add_argument("--cliff-months", type=int, default=0)

    dates = subparsers.add_parser("dates", help="Vesting milestone dates")
    dates.add_argument("--start", required=True, help="Vesting start (ISO-8601)")
    dates.add_argument("--cliff-months", type=int, default=0)
    dates.add_argument("--duration-months", type=int, required=True)
    dates.add_argument("--periods", type=int, default=None,
                       help="Dates after the cliff (default: vesting.default_period_count)")

    sample = subparsers.add_parser("sample", help="Random allocation table")
    sample.add_argument("--count", type=int, default=5)
    sample.add_argument("--seed", type=int, default=None)

    return parser


def _print_report(evaluation: PlanEvaluation, as_json: bool) -> None:
    if as_json:
        payload = {
            "evaluation_timestamp": evaluation.evaluation_timestamp,
            "start_timestamp": evaluation.start_timestamp,
            "valid": evaluation.valid,
            "issues": [asdict(issue) for issue in evaluation.issues],
            "buckets": [
                {**asdict(status), "vested_pct": status.vested_pct}
                for status in evaluation.statuses
            ],
        }
        print(json.dumps(payload, indent=2))
        return

    print(f"{'Bucket':<16}{'Amount':>18}{'Vested':>18}{'Locked':>18}{'Vested %':>10}")
    for status in evaluation.statuses:
        print(f"{status.name:<16}{status.amount:>18,.2f}{status.vested:>18,.2f}"
              f"{status.locked:>18,.2f}{status.vested_pct:>9.1f}%")
    print(f"{'Total':<16}{evaluation.total_amount:>18,.2f}{evaluation.total_vested:>18,.2f}")
    for issue in evaluation.issues:
        print(f"! {issue.field}: {issue.message} (got: {issue.value})")


def _run_report(args: argparse.Namespace) -> int:
    engine = TokenomicsEngine(config_dir=args.config_dir)
    evaluation_timestamp = to_unix_timestamp(args.at) if args.at else None
    evaluation = engine.evaluate_preset(args.preset, evaluation_timestamp)

    _print_report(evaluation, args.json)
    return EXIT_OK if evaluation.valid else EXIT_INVALID_PLAN


def _run_schedule(args: argparse.Namespace) -> int:
    for entry in monthly_vesting_schedule(args.amount, args.vesting_months, args.cliff_months):
        print(f"{entry.month:>4}  {entry.amount:>18,.2f}  {entry.cumulative:>18,.2f}")
    return EXIT_OK


def _run_dates(args: argparse.Namespace) -> int:
    config = TokenomicsEngine(config_dir=args.config_dir).config
    periods = args.periods if args.periods is not None else config.vesting.default_period_count

    start = parse_datetime(args.start)
    for milestone in vesting_date_list(start, args.cliff_months, args.duration_months, periods):
        print(format_date(milestone, params=config.display))
    return EXIT_OK


def _run_sample(args: argparse.Namespace) -> int:
    config = TokenomicsEngine(config_dir=args.config_dir).config
    rng = random.Random(args.seed)
    allocations = random_allocation_set(args.count, rng=rng, params=config.sampler)
    for allocation in allocations:
        print(f"{allocation.name:<16}{allocation.percentage:>6}%  {allocation.color}  "
              f"lockup={allocation.lockup_months}  vesting={allocation.vesting_months}")
    print(f"sums to 100: {allocations_sum_to_hundred(a.percentage for a in allocations)}")
    return EXIT_OK


COMMANDS = {
    "report": _run_report,
    "schedule": _run_schedule,
    "dates": _run_dates,
    "sample": _run_sample,
}


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return its exit code."""
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        return COMMANDS[args.command](args)
    except ConfigurationError as e:
        logger.error("Configuration error", error=str(e), details=e.errors)
        print(f"error: {e}", file=sys.stderr)
        for detail in e.errors:
            print(f"  {detail}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except DataQualityError as e:
        logger.error("Invalid input", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
