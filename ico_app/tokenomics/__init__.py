"""Token sale economics: ICO stages, pricing and TGE-aware release schedules"""

from .ico import (
    Fundraising,
    IcoStage,
    TokenPricing,
    calculate_fundraising,
    calculate_ico_stages,
    calculate_token_pricing,
    convert_token_value,
)
from .release import (
    ReleaseEntry,
    TgeAllocation,
    calculate_initial_circulating,
    calculate_release_schedule,
    generate_default_allocations,
)

__all__ = [
    "IcoStage",
    "TokenPricing",
    "Fundraising",
    "calculate_ico_stages",
    "calculate_token_pricing",
    "calculate_fundraising",
    "convert_token_value",
    "TgeAllocation",
    "ReleaseEntry",
    "generate_default_allocations",
    "calculate_initial_circulating",
    "calculate_release_schedule",
]
