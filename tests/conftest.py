from datetime import date

import pytest

from lottery_planner.calculators.projection import calculate_initial_data
from lottery_planner.models import UserInputParameters

START = date(2024, 1, 1)

BASE_INPUTS = dict(
    total_winnings=100_000_000.0,
    lump_sum_tax=37.0,
    annuity_tax=25.0,
    savings_apr=5.0,
    age=35,
    death_age=85,
    years=30,
    ml=5_000_000.0,
    investment_tax_rate=20.0,
    inflation_rate=3.5,
)


@pytest.fixture
def make_inputs():
    """Factory for the $100M example inputs with optional overrides."""
    def _make(**overrides) -> UserInputParameters:
        values = dict(BASE_INPUTS)
        values.update(overrides)
        return UserInputParameters(**values)
    return _make


@pytest.fixture
def start():
    return START


@pytest.fixture
def jackpot(make_inputs):
    """The $100M example, starting 2024-01-01."""
    return calculate_initial_data(make_inputs(), START)


@pytest.fixture
def flat_two_year(make_inputs):
    """$1M, no taxes, no growth, no inflation, two annuity payments."""
    inputs = make_inputs(
        total_winnings=1_000_000.0,
        lump_sum_tax=0.0,
        annuity_tax=0.0,
        savings_apr=0.0,
        years=2,
        ml=0.0,
        investment_tax_rate=0.0,
        inflation_rate=0.0,
    )
    return calculate_initial_data(inputs, START)
