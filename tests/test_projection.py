"""Tests for the initial lump-sum / annuity projection."""

import math
from datetime import date

import pytest

from lottery_planner.calculators.projection import calculate_initial_data
from lottery_planner.errors import InvalidInput


def test_lump_sum_is_net_of_tax(jackpot):
    assert jackpot.state.lump_balance == 63_000_000
    assert jackpot.initial_parameters.lump_sum_net == 63_000_000


def test_growing_payments_sum_to_pool(jackpot):
    params = jackpot.initial_parameters
    pool = 100_000_000 * 0.75
    total = sum(params.base_annuity_payment * 1.05 ** i for i in range(30))
    assert math.isclose(total, pool, rel_tol=1e-9)
    # 0.05 / (1.05**30 - 1) ~= 0.01505
    assert params.base_annuity_payment == pytest.approx(pool * 0.0150514, rel=1e-5)


def test_even_split_when_payments_do_not_grow(make_inputs, start):
    data = calculate_initial_data(make_inputs(), start, growth_rate=1.0)
    params = data.initial_parameters
    assert params.base_annuity_payment * 30 == 75_000_000
    assert params.annuity_growth_rate == 1.0


def test_opening_state(jackpot):
    params = jackpot.initial_parameters
    state = jackpot.state
    assert state.last_update_date == "2024-01-01"
    assert state.annual_balance == params.base_annuity_payment
    assert state.years_passed == 0.0
    assert params.start_year == 2024
    assert params.initial_date == "2024-01-01"
    assert params.predicted_death_date == "2074-01-01"
    assert params.investment_tax_rate == 20.0
    assert params.inflation_rate == 3.5


def test_leap_day_start_clamps_death_date(make_inputs):
    data = calculate_initial_data(make_inputs(age=40, death_age=41), date(2024, 2, 29))
    assert data.initial_parameters.predicted_death_date == "2025-02-28"


@pytest.mark.parametrize(
    "overrides",
    [
        {"age": 0},
        {"death_age": 30},
        {"death_age": 35},
        {"years": 0},
        {"total_winnings": -1.0},
        {"lump_sum_tax": 120.0},
        {"inflation_rate": float("nan")},
        {"savings_apr": float("inf")},
    ],
)
def test_invalid_inputs_rejected(make_inputs, start, overrides):
    with pytest.raises(InvalidInput):
        calculate_initial_data(make_inputs(**overrides), start)


def test_non_positive_growth_rate_rejected(make_inputs, start):
    with pytest.raises(InvalidInput):
        calculate_initial_data(make_inputs(), start, growth_rate=0.0)
