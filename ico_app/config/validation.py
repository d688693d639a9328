"""Configuration and preset validation utilities."""

from dataclasses import dataclass
from typing import Any

from ..data.models import Amount
from ..data.parsers import parse_datetime
from ..errors import DataQualityError


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters and allocation presets."""

    @staticmethod
    def validate_vesting_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate vesting parameters."""
        errors = []

        if "month_ms" in params:
            value = params["month_ms"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="month_ms",
                    message="Must be a positive integer",
                    value=value
                ))

        if "default_period_count" in params:
            value = params["default_period_count"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="default_period_count",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_allocation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate allocation table parameters."""
        errors = []

        if "tolerance" in params:
            value = params["tolerance"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="tolerance",
                    message="Must be a positive number",
                    value=value
                ))

        for field_name in ("min_percentage", "max_percentage"):
            if field_name in params:
                value = params[field_name]
                if not _is_number(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a number between 0 and 100",
                        value=value
                    ))

        low, high = params.get("min_percentage"), params.get("max_percentage")
        if _is_number(low) and _is_number(high) and low > high:
            errors.append(ValidationError(
                field="min_percentage",
                message="Must not exceed max_percentage",
                value=low
            ))

        return errors

    @staticmethod
    def validate_sampler_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate random allocation sampler parameters."""
        errors = []

        for field_name in ("min_percentage", "min_vesting_months"):
            if field_name in params:
                value = params[field_name]
                if not _is_int(value) or value < 0:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        for field_name in ("max_lockup_months", "vesting_span"):
            if field_name in params:
                value = params[field_name]
                if not _is_int(value) or value <= 0:
                    errors.append(ValidationError(
                        field=field_name,
                        message="Must be a positive integer",
                        value=value
                    ))

        if "max_share" in params:
            value = params["max_share"]
            if not _is_number(value) or value <= 0 or value > 1:
                errors.append(ValidationError(
                    field="max_share",
                    message="Must be a positive number between 0 and 1",
                    value=value
                ))

        if "lockup_probability" in params:
            value = params["lockup_probability"]
            if not _is_number(value) or value < 0 or value > 1:
                errors.append(ValidationError(
                    field="lockup_probability",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_preset(preset: Any) -> list[ValidationError]:
        """Validate the structure of an allocation preset."""
        if not isinstance(preset, dict):
            return [ValidationError(field="preset", message="Must be a mapping", value=preset)]

        errors = []

        try:
            Amount.parse(preset.get("total_supply"))
        except DataQualityError as e:
            errors.append(ValidationError(
                field="total_supply",
                message=str(e),
                value=preset.get("total_supply")
            ))

        if preset.get("start") is not None:
            try:
                parse_datetime(preset["start"])
            except DataQualityError as e:
                errors.append(ValidationError(
                    field="start",
                    message=str(e),
                    value=preset["start"]
                ))

        allocations = preset.get("allocations")
        if not isinstance(allocations, list):
            errors.append(ValidationError(
                field="allocations",
                message="Must be a list of allocation rows",
                value=allocations
            ))
            return errors

        for i, row in enumerate(allocations):
            if not isinstance(row, dict):
                errors.append(ValidationError(field=f"allocations[{i}]", message="Must be a mapping", value=row))
                continue

            if not row.get("name"):
                errors.append(ValidationError(
                    field=f"allocations[{i}].name",
                    message="Must be a non-empty string",
                    value=row.get("name")
                ))

            if not _is_number(row.get("percentage")):
                errors.append(ValidationError(
                    field=f"allocations[{i}].percentage",
                    message="Must be a number",
                    value=row.get("percentage")
                ))

            for field_name in ("lockup_months", "vesting_months"):
                value = row.get(field_name)
                if value is not None and (not _is_int(value) or value < 0):
                    errors.append(ValidationError(
                        field=f"allocations[{i}].{field_name}",
                        message="Must be a non-negative integer",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "vesting" in config:
            errors.extend(ConfigValidator.validate_vesting_params(config["vesting"]))

        if "allocation" in config:
            errors.extend(ConfigValidator.validate_allocation_params(config["allocation"]))

        if "sampler" in config:
            errors.extend(ConfigValidator.validate_sampler_params(config["sampler"]))

        return errors
