"""
Canonical value types for allocation planning and vesting.

Every record here is immutable and carries no identity beyond its field
values. Relationships between them are expressed by passing values from
one calculation to the next.
"""

import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from ..errors import MalformedDataError


@dataclass(frozen=True)
class Amount:
    """
    A token quantity normalized to a finite float.

    Conversion rules from external representations:
    - int (including wei-scale integers beyond 2**53) -> float(value)
    - float, Decimal and other real numbers -> float(value)
    - str -> parsed as a decimal literal after stripping whitespace
    - big-number wrappers exposing ``to_string()`` -> parsed from that text

    Precision beyond IEEE double is dropped. Magnitude is not: a value that
    has no finite double form (nan, infinities, or anything beyond
    ~1.8e308 such as ``10**400``, ``Decimal("1e400")`` or ``"1e400"``) is
    rejected the same way for every representation.
    """
    value: float

    @classmethod
    def parse(cls, raw: Any) -> "Amount":
        """
        Normalize a raw supply or amount value.

        Raises:
            MalformedDataError: If the value is not a number or numeric text,
                or has no finite float form
        """
        if isinstance(raw, Amount):
            return raw

        if raw is None or isinstance(raw, bool):
            raise MalformedDataError(
                f"Amount must be numeric, got {raw!r}",
                raw_data=repr(raw),
                expected_format="number",
            )

        if isinstance(raw, (int, Decimal, numbers.Real)):
            return cls(cls._to_finite(raw, repr(raw)))

        if isinstance(raw, str):
            return cls(cls._parse_text(raw))

        to_string = getattr(raw, "to_string", None)
        if callable(to_string):
            return cls(cls._parse_text(str(to_string())))

        raise MalformedDataError(
            f"Unsupported amount type {type(raw).__name__}",
            raw_data=repr(raw),
            expected_format="int, float, Decimal, numeric string or big-number",
        )

    @staticmethod
    def _to_finite(raw: Any, source: str) -> float:
        try:
            value = float(raw)
        except (OverflowError, ValueError):
            value = math.inf

        if not math.isfinite(value):
            raise MalformedDataError(
                f"Amount must be finite, got {source}",
                raw_data=source,
                expected_format="finite number",
            )
        return value

    @classmethod
    def _parse_text(cls, text: str) -> float:
        cleaned = text.strip()
        try:
            value = float(cleaned)
        except ValueError:
            raise MalformedDataError(
                f"Cannot parse amount from {text!r}",
                raw_data=text,
                expected_format="decimal string",
            ) from None

        return cls._to_finite(value, repr(text))

    def __float__(self) -> float:
        return self.value


@dataclass(frozen=True)
class AllocationDefinition:
    """A named share of total supply with optional lockup/vesting terms."""
    name: str
    percentage: float
    color: str = ""
    lockup_months: Optional[int] = None
    vesting_months: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AllocationDefinition":
        """
        Build a definition from a preset or request row.

        Raises:
            MalformedDataError: If name or percentage is missing, or the
                percentage is not numeric
        """
        try:
            name = data["name"]
            raw_percentage = data["percentage"]
        except (KeyError, TypeError) as e:
            raise MalformedDataError(
                f"Allocation row is missing field {e}",
                raw_data=repr(data),
                expected_format="mapping with name and percentage",
            ) from e

        try:
            if isinstance(raw_percentage, bool):
                raise TypeError("bool is not a percentage")
            percentage = float(raw_percentage)
        except (TypeError, ValueError):
            raise MalformedDataError(
                f"Allocation percentage must be numeric, got {raw_percentage!r}",
                raw_data=repr(data),
                expected_format="number",
            ) from None

        return cls(
            name=str(name),
            percentage=percentage,
            color=str(data.get("color", "")),
            lockup_months=data.get("lockup_months"),
            vesting_months=data.get("vesting_months"),
        )


@dataclass(frozen=True)
class AllocationResult:
    """An allocation definition with its computed token amount."""
    name: str
    percentage: float
    color: str
    lockup_months: Optional[int]
    vesting_months: Optional[int]
    amount: float

    @classmethod
    def from_definition(cls, definition: AllocationDefinition, amount: float) -> "AllocationResult":
        return cls(
            name=definition.name,
            percentage=definition.percentage,
            color=definition.color,
            lockup_months=definition.lockup_months,
            vesting_months=definition.vesting_months,
            amount=amount,
        )


@dataclass(frozen=True)
class VestingParameters:
    """Inputs of a single cliff + linear vesting grant."""
    total_amount: float
    start_timestamp: int        # seconds since epoch
    cliff_months: int = 0
    vesting_duration_months: int = 0

    @classmethod
    def from_allocation(cls, result: AllocationResult, start_timestamp: int) -> "VestingParameters":
        """Lockup acts as the cliff; missing terms mean immediate release."""
        return cls(
            total_amount=result.amount,
            start_timestamp=start_timestamp,
            cliff_months=result.lockup_months or 0,
            vesting_duration_months=result.vesting_months or 0,
        )


@dataclass(frozen=True)
class ScheduleEntry:
    """One month of a vesting schedule."""
    month: int
    amount: float       # released in this month
    cumulative: float   # released through this month


@dataclass(frozen=True)
class BucketStatus:
    """Point-in-time vesting status of one planned allocation."""
    name: str
    amount: float
    vested: float
    locked: float

    @property
    def vested_pct(self) -> float:
        """Vested share of the bucket in percent, 0 for empty buckets."""
        if self.amount == 0:
            return 0.0
        return 100.0 * self.vested / self.amount
