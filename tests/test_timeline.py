"""Tests for the year-by-year projection used by the balance chart."""

from datetime import date

import pytest

from lottery_planner.calculators.timeline import COLUMNS, project_timeline
from lottery_planner.calculators.update import calculate_update


def test_rows_run_from_last_update_to_death(flat_two_year):
    df = project_timeline(flat_two_year)
    assert list(df.columns) == COLUMNS
    assert len(df) == 51
    assert df["date"].iloc[0] == "2024-01-01"
    assert df["date"].iloc[-1] == "2074-01-01"
    assert df["age"].iloc[0] == 35
    assert df["age"].iloc[-1] == pytest.approx(85, abs=0.01)
    assert df["lump_balance"].iloc[0] == flat_two_year.state.lump_balance


def test_sustainable_spending_exhausts_flat_balances(flat_two_year):
    df = project_timeline(flat_two_year)
    assert df["lump_balance"].iloc[-1] == pytest.approx(0.0, abs=1e-3)
    assert df["annual_balance"].iloc[-1] == pytest.approx(0.0, abs=1e-3)
    assert df["annuity_payment"].sum() == pytest.approx(
        flat_two_year.initial_parameters.base_annuity_payment * 1.05
    )


def test_fixed_spending_applies_to_both(flat_two_year):
    df = project_timeline(flat_two_year, spending_per_day=10.0)
    # one year of spending (366 days in 2024) with no growth
    assert df["lump_balance"].iloc[1] == pytest.approx(1_000_000 - 3_660)
    base = flat_two_year.initial_parameters.base_annuity_payment
    assert df["annual_balance"].iloc[1] == pytest.approx(base + base * 1.05 - 3_660)


def test_past_death_returns_only_current_row(flat_two_year):
    late = calculate_update(flat_two_year, 0.0, date(2080, 1, 1))
    df = project_timeline(late)
    assert len(df) == 1
    assert df["lump_balance"].iloc[0] == late.state.lump_balance


def test_growth_scenario_ends_near_legacy_goal(jackpot):
    df = project_timeline(jackpot)
    assert (df["lump_balance"] >= 0).all()
    assert df["lump_balance"].iloc[-1] > 0
