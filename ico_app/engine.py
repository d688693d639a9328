"""
Main calculation engine coordinator.

Wires the allocation pipeline end to end:
Preset / definitions → Validation → Planning → Vesting status and schedules
"""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import (
    AllocationDefinition,
    AllocationResult,
    BucketStatus,
    ScheduleEntry,
    VestingParameters,
)
from .errors import ConfigurationError
from .logging.config import get_validation_logger, log_validation_decision
from .planning.planner import AllocationPlanner
from .planning.validator import AllocationIssue, AllocationValidator
from .utils.time import resolve_evaluation_timestamp, to_unix_timestamp
from .vesting.calculator import VestingCalculator
from .vesting.dates import safe_vesting_date_list

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class PlanEvaluation:
    """Planned allocation table with its vesting status at one instant."""
    evaluation_timestamp: float
    start_timestamp: float
    results: list[AllocationResult]
    statuses: list[BucketStatus]
    issues: list[AllocationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def total_amount(self) -> float:
        return sum(result.amount for result in self.results)

    @property
    def total_vested(self) -> float:
        return sum(status.vested for status in self.statuses)


class TokenomicsEngine:
    """
    Coordinator for allocation planning and vesting evaluation.

    The engine is the boundary where "now" is resolved: every evaluation
    method accepts an explicit timestamp and only falls back to the wall
    clock when none is given.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """Initialize the engine from defaults, settings.yaml and overrides."""
        self.logger = logger
        self.validation_logger = get_validation_logger(__name__)

        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)

        merged = self.config_loader.merge_config(overrides)
        config_errors = ConfigValidator.validate_config(merged)
        if config_errors:
            raise ConfigurationError(
                "Invalid engine configuration",
                errors=[f"{err.field}: {err.message} (got: {err.value})" for err in config_errors],
            )
        self.config = self.config_loader.build_config(overrides)

        self.planner = AllocationPlanner()
        self.validator = AllocationValidator(self.config.allocation)
        self.calculator = VestingCalculator(self.config.vesting)

        self.logger.info("Tokenomics engine initialized", config_dir=str(self.config_loader.config_dir))

    def evaluate_plan(
        self,
        total_supply: Any,
        definitions: list[AllocationDefinition],
        start_timestamp: float,
        evaluation_timestamp: Optional[float] = None,
        subject: str = "plan",
    ) -> PlanEvaluation:
        """
        Validate, plan and evaluate an allocation table.

        Validation issues are reported on the result, planning still runs.

        Args:
            total_supply: Supply in any accepted representation
            definitions: Allocation definitions
            start_timestamp: Vesting start (seconds since epoch)
            evaluation_timestamp: Evaluation time in seconds, now when omitted
            subject: Name used in log records

        Returns:
            PlanEvaluation with planned amounts and per-bucket status
        """
        evaluation_timestamp = resolve_evaluation_timestamp(evaluation_timestamp)

        issues = self.validator.validate(definitions, subject=subject)
        results = self.planner.plan(total_supply, definitions)
        statuses = [self.bucket_status(result, start_timestamp, evaluation_timestamp) for result in results]

        self.logger.info(
            "Plan evaluated",
            subject=subject,
            bucket_count=len(results),
            valid=not issues,
            evaluation_timestamp=evaluation_timestamp,
        )

        return PlanEvaluation(
            evaluation_timestamp=evaluation_timestamp,
            start_timestamp=start_timestamp,
            results=results,
            statuses=statuses,
            issues=issues,
        )

    def evaluate_preset(self, name: str, evaluation_timestamp: Optional[float] = None) -> PlanEvaluation:
        """
        Evaluate a named preset from allocations.yaml.

        A preset without a start date starts vesting at the evaluation time.

        Raises:
            ConfigurationError: If the preset is missing or malformed
        """
        preset = self.config_loader.load_preset(name)

        preset_errors = ConfigValidator.validate_preset(preset)
        log_validation_decision(
            self.validation_logger,
            check_name="preset_structure",
            passed=not preset_errors,
            subject=name,
            reason="well formed" if not preset_errors else f"{len(preset_errors)} error(s)",
        )
        if preset_errors:
            raise ConfigurationError(
                f"Allocation preset '{name}' is malformed",
                errors=[f"{err.field}: {err.message} (got: {err.value})" for err in preset_errors],
            )

        evaluation_timestamp = resolve_evaluation_timestamp(evaluation_timestamp)
        if preset.get("start") is not None:
            start_timestamp = to_unix_timestamp(preset["start"])
        else:
            start_timestamp = evaluation_timestamp

        definitions = [AllocationDefinition.from_dict(row) for row in preset["allocations"]]
        return self.evaluate_plan(
            preset["total_supply"],
            definitions,
            start_timestamp,
            evaluation_timestamp,
            subject=name,
        )

    def bucket_status(self, result: AllocationResult, start_timestamp: float,
                      evaluation_timestamp: float) -> BucketStatus:
        """Vested and locked amounts of one planned bucket."""
        grant = VestingParameters.from_allocation(result, start_timestamp)
        vested = self.calculator.vested(grant, evaluation_timestamp)

        return BucketStatus(
            name=result.name,
            amount=result.amount,
            vested=vested,
            locked=result.amount - vested,
        )

    def bucket_schedule(self, result: AllocationResult) -> list[ScheduleEntry]:
        """Monthly release schedule of one planned bucket."""
        return self.calculator.schedule(VestingParameters.from_allocation(result, 0))

    def bucket_dates(self, result: AllocationResult, start_date: Any,
                     period_count: Optional[int] = None) -> list[datetime]:
        """
        Milestone dates of one planned bucket for display.

        The lockup is the cliff and the vesting months run after it, so the
        duration measured from the start is lockup + vesting.
        """
        cliff = result.lockup_months or 0
        duration = cliff + (result.vesting_months or 0)
        if period_count is None:
            period_count = self.config.vesting.default_period_count

        return safe_vesting_date_list(start_date, cliff, duration, period_count)
