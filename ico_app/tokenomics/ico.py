"""ICO stage, pricing and fundraising arithmetic"""

from dataclasses import dataclass
from typing import Sequence

from ..errors import MalformedDataError

STAGE_NAMES = ("Seed", "Private", "Public")


@dataclass(frozen=True)
class IcoStage:
    """One sale stage with its price and supply share."""
    name: str
    price: float                # USD per token
    supply_percentage: float
    token_amount: float
    hard_cap: float             # USD


@dataclass(frozen=True)
class TokenPricing:
    """Launch valuation metrics."""
    initial_market_cap: float
    fully_diluted_valuation: float
    initial_supply: float
    total_supply: float
    initial_price: float
    target_price: float


@dataclass(frozen=True)
class Fundraising:
    """Hard and soft caps in USD and ETH."""
    hard_cap_usd: float
    soft_cap_usd: float
    hard_cap_eth: float
    soft_cap_eth: float


def calculate_ico_stages(
    total_supply: float,
    initial_price: float,
    stage_multipliers: Sequence[float] = (0.5, 0.75, 1),
    stage_percentages: Sequence[float] = (5, 10, 25),
) -> list[IcoStage]:
    """
    Calculate sale stages from the public price.

    Stage i sells stage_percentages[i]% of supply at
    initial_price * stage_multipliers[i]. Stages past the named
    Seed/Private/Public ones are called "Stage N".

    Raises:
        MalformedDataError: If the sequences differ in length or the
            percentages exceed 100 in total
    """
    if len(stage_multipliers) != len(stage_percentages):
        raise MalformedDataError(
            "Stage multipliers and percentages must have the same length",
            context={"multipliers": len(stage_multipliers), "percentages": len(stage_percentages)},
        )

    if sum(stage_percentages) > 100:
        raise MalformedDataError(
            "Total stage percentage exceeds 100%",
            context={"total": sum(stage_percentages)},
        )

    stages = []
    for i, (multiplier, supply_percentage) in enumerate(zip(stage_multipliers, stage_percentages)):
        name = STAGE_NAMES[i] if i < len(STAGE_NAMES) else f"Stage {i + 1}"
        price = initial_price * multiplier
        token_amount = total_supply * supply_percentage / 100

        stages.append(IcoStage(
            name=name,
            price=price,
            supply_percentage=supply_percentage,
            token_amount=token_amount,
            hard_cap=token_amount * price,
        ))

    return stages


def calculate_token_pricing(
    total_supply: float,
    initial_price: float,
    circulating_percentage: float = 25,
    target_price_multiplier: float = 5,
) -> TokenPricing:
    """Market cap, FDV and target price at launch."""
    initial_supply = total_supply * circulating_percentage / 100

    return TokenPricing(
        initial_market_cap=initial_supply * initial_price,
        fully_diluted_valuation=total_supply * initial_price,
        initial_supply=initial_supply,
        total_supply=total_supply,
        initial_price=initial_price,
        target_price=initial_price * target_price_multiplier,
    )


def calculate_fundraising(
    hard_cap: float,
    soft_cap_percentage: float = 60,
    eth_price: float = 2000,
) -> Fundraising:
    """
    Express a USD hard cap and its soft cap in USD and ETH.

    Raises:
        MalformedDataError: If the ETH price is not positive
    """
    if eth_price <= 0:
        raise MalformedDataError(f"ETH price must be positive, got {eth_price}")

    soft_cap_usd = hard_cap * soft_cap_percentage / 100

    return Fundraising(
        hard_cap_usd=hard_cap,
        soft_cap_usd=soft_cap_usd,
        hard_cap_eth=hard_cap / eth_price,
        soft_cap_eth=soft_cap_usd / eth_price,
    )


def convert_token_value(amount: float, price: float, from_usd: bool = False) -> float:
    """
    Convert between a token amount and its USD value.

    Converting USD to tokens at a zero price yields 0.
    """
    if from_usd:
        if price == 0:
            return 0.0
        return amount / price
    return amount * price
