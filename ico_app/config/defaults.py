"""Default configuration parameters for the vesting and allocation engine."""

from dataclasses import dataclass

# 30-day month, fixed; not a calendar month
MONTH_MS = 30 * 24 * 60 * 60 * 1000

# Accepted drift of an allocation table from exactly 100%
ALLOCATION_TOLERANCE = 0.001


@dataclass(frozen=True)
class VestingParams:
    """Vesting calculation parameters."""
    month_ms: int = MONTH_MS                  # Length of a vesting month
    default_period_count: int = 12            # Dates generated after the cliff


@dataclass(frozen=True)
class AllocationParams:
    """Allocation table validation parameters."""
    tolerance: float = ALLOCATION_TOLERANCE   # Allowed |sum - 100|
    min_percentage: float = 0.0               # Per-bucket lower bound
    max_percentage: float = 100.0             # Per-bucket upper bound


@dataclass(frozen=True)
class SamplerParams:
    """Random allocation fixture parameters."""
    min_percentage: int = 5                   # Floor for every non-final bucket
    max_share: float = 0.8                    # Cap as share of the remaining budget
    lockup_probability: float = 0.5           # Chance a bucket gets a lockup
    max_lockup_months: int = 12               # Lockup drawn from [0, max)
    min_vesting_months: int = 6               # Vesting drawn from [min, min + span)
    vesting_span: int = 24


@dataclass(frozen=True)
class DisplayParams:
    """Presentation helper parameters."""
    date_format: str = "%b %d, %Y"
    datetime_format: str = "%b %d, %Y %H:%M"
    empty_placeholder: str = "N/A"
    invalid_placeholder: str = "Invalid date"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    vesting: VestingParams
    allocation: AllocationParams
    sampler: SamplerParams
    display: DisplayParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        vesting=VestingParams(),
        allocation=AllocationParams(),
        sampler=SamplerParams(),
        display=DisplayParams(),
    )
