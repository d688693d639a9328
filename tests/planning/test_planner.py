"""Tests for allocation planning"""

import pytest
from decimal import Decimal

from ico_app.data.models import AllocationDefinition, AllocationResult
from ico_app.errors import MalformedDataError
from ico_app.planning.planner import AllocationPlanner, plan_allocations


class BigNumberLike:
    """Stand-in for a contract-read big integer wrapper."""

    def __init__(self, text: str):
        self.text = text

    def to_string(self) -> str:
        return self.text


class TestPlanAllocations:
    """Test plan_allocations function"""

    def test_amounts_from_percentages(self, standard_definitions):
        """Test each bucket gets supply * percentage / 100"""
        results = plan_allocations(1_000_000, standard_definitions)

        assert [r.amount for r in results] == [400_000, 150_000, 150_000, 100_000, 100_000, 50_000, 50_000]

    def test_sum_equals_supply(self, standard_definitions):
        """Test amounts of a 100% table add up to the supply"""
        for supply in (0, 1, 12345.678, 100_000_000, 2_500_000_000):
            results = plan_allocations(supply, standard_definitions)
            assert sum(r.amount for r in results) == pytest.approx(supply)

    def test_preserves_order_and_fields(self, standard_definitions):
        """Test results keep input order and definition fields"""
        results = plan_allocations(100, standard_definitions)

        assert [r.name for r in results] == [d.name for d in standard_definitions]
        team = results[1]
        assert isinstance(team, AllocationResult)
        assert team.color == "#8b5cf6"
        assert team.lockup_months == 12
        assert team.vesting_months == 24

    def test_empty_allocations(self):
        """Test an empty table plans to an empty list"""
        assert plan_allocations(1000, []) == []

    def test_zero_supply(self, standard_definitions):
        """Test zero supply yields zero amounts"""
        assert all(r.amount == 0 for r in plan_allocations(0, standard_definitions))

    def test_does_not_validate_percentages(self):
        """Test tables not summing to 100 are planned as given"""
        definitions = [AllocationDefinition("A", 70), AllocationDefinition("B", 70)]
        results = plan_allocations(100, definitions)

        assert [r.amount for r in results] == [70, 70]

    def test_no_rounding(self):
        """Test amounts are not rounded"""
        results = plan_allocations(10, [AllocationDefinition("A", 33.3)])
        assert results[0].amount == pytest.approx(3.33)

    def test_string_supply(self, standard_definitions):
        """Test decimal strings are accepted"""
        results = plan_allocations(" 100000000 ", standard_definitions)
        assert results[0].amount == 40_000_000

    def test_big_integer_supply(self):
        """Test integers beyond double precision are accepted"""
        supply = 10**27 + 1
        results = plan_allocations(supply, [AllocationDefinition("A", 50)])
        assert results[0].amount == pytest.approx(5e26)

    def test_decimal_and_big_number_supply(self):
        """Test Decimal and big-number wrappers are accepted"""
        definitions = [AllocationDefinition("A", 25)]
        assert plan_allocations(Decimal("4000"), definitions)[0].amount == 1000
        assert plan_allocations(BigNumberLike("4000"), definitions)[0].amount == 1000

    def test_malformed_supply_raises(self):
        """Test non-numeric supplies raise MalformedDataError"""
        with pytest.raises(MalformedDataError):
            plan_allocations("a lot", [AllocationDefinition("A", 25)])

    def test_idempotent(self, standard_definitions):
        """Test repeated calls give equal results"""
        assert plan_allocations(5000, standard_definitions) == plan_allocations(5000, standard_definitions)


class TestAllocationPlanner:
    """Test AllocationPlanner class"""

    def test_plan_matches_function(self, standard_definitions):
        """Test the planner wraps plan_allocations"""
        planner = AllocationPlanner()
        assert planner.plan(1000, standard_definitions) == plan_allocations(1000, standard_definitions)

    def test_plan_definitions_from_rows(self, preset_rows):
        """Test preset-shaped rows are planned"""
        results = AllocationPlanner().plan_definitions("1000", preset_rows)

        assert [r.name for r in results] == ["Public Sale", "Team", "Liquidity"]
        assert [r.amount for r in results] == [600, 300, 100]
        assert results[2].vesting_months is None

    def test_plan_definitions_malformed_row(self):
        """Test a malformed row raises a classified error"""
        with pytest.raises(MalformedDataError):
            AllocationPlanner().plan_definitions(1000, [{"name": "Team", "percentage": "ten"}])

    def test_plan_supply_beyond_float_range(self):
        """Test an integer supply too large for a float raises a classified error"""
        with pytest.raises(MalformedDataError):
            plan_allocations(10**400, [AllocationDefinition("A", 100)])
