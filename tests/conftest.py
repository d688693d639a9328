"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from pathlib import Path

import yaml

from ico_app.data.models import AllocationDefinition

MONTH_SECONDS = 30 * 24 * 60 * 60


@pytest.fixture
def month_seconds() -> int:
    """Length of a fixed vesting month in seconds."""
    return MONTH_SECONDS


@pytest.fixture
def start_timestamp() -> int:
    """Vesting start: 2024-01-01T00:00:00Z in seconds."""
    return int(datetime(2024, 1, 1, tzinfo=timezone.utc).timestamp())


@pytest.fixture
def standard_definitions() -> list[AllocationDefinition]:
    """Standard seven-bucket distribution summing to 100%."""
    return [
        AllocationDefinition("Public Sale", 40, "#3b82f6", vesting_months=6),
        AllocationDefinition("Team", 15, "#8b5cf6", lockup_months=12, vesting_months=24),
        AllocationDefinition("Development", 15, "#10b981", vesting_months=24),
        AllocationDefinition("Marketing", 10, "#f97316", vesting_months=12),
        AllocationDefinition("Ecosystem", 10, "#06b6d4", vesting_months=18),
        AllocationDefinition("Liquidity", 5, "#f43f5e"),
        AllocationDefinition("Rewards", 5, "#eab308", vesting_months=18),
    ]


@pytest.fixture
def preset_rows() -> list[dict]:
    """Allocation rows as they appear in allocations.yaml."""
    return [
        {"name": "Public Sale", "percentage": 60, "color": "#3b82f6", "vesting_months": 6},
        {"name": "Team", "percentage": 30, "color": "#8b5cf6", "lockup_months": 12, "vesting_months": 24},
        {"name": "Liquidity", "percentage": 10, "color": "#f43f5e"},
    ]


@pytest.fixture
def config_dir(tmp_path: Path, preset_rows: list[dict]) -> Path:
    """Temporary config directory with a valid, an unbalanced and a broken preset."""
    presets = {
        "presets": {
            "small": {
                "total_supply": "1000000",
                "start": "2024-01-01T00:00:00Z",
                "allocations": preset_rows,
            },
            "unbalanced": {
                "total_supply": 1000,
                "start": "2024-01-01T00:00:00Z",
                "allocations": preset_rows[:2],
            },
            "broken": {
                "total_supply": "lots",
                "allocations": [{"name": "", "percentage": "ten"}],
            },
            "no_start": {
                "total_supply": 500,
                "allocations": [{"name": "Liquidity", "percentage": 100}],
            },
        }
    }
    (tmp_path / "allocations.yaml").write_text(yaml.safe_dump(presets))
    return tmp_path
