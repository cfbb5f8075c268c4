"""Tests for the growing-annuity schedule."""

from datetime import date

import pytest

from lottery_planner.calculators import annuity


def test_base_payment_geometric_and_even_split():
    assert annuity.base_payment(1_000_000, 2, 1.05) == pytest.approx(487_804.878, rel=1e-8)
    assert annuity.base_payment(900_000, 3, 1.0) == 300_000.0


def test_schedule_dates_and_amounts(jackpot):
    schedule = annuity.payment_schedule(jackpot.initial_parameters)
    base = jackpot.initial_parameters.base_annuity_payment
    assert len(schedule) == 30
    assert schedule[0] == (0, date(2024, 1, 1), base)
    assert schedule[29].date == date(2053, 1, 1)
    assert schedule[29].amount == pytest.approx(base * 1.05 ** 29)
    assert sum(p.amount for p in schedule) == pytest.approx(75_000_000)


def test_payments_between_is_half_open(jackpot):
    params = jackpot.initial_parameters
    due = annuity.payments_between(params, date(2024, 1, 1), date(2026, 1, 1))
    assert [p.index for p in due] == [1, 2]
    assert annuity.payments_between(params, date(2025, 1, 1), date(2025, 12, 31)) == []
    # payment 0 is never re-credited
    assert annuity.payments_between(params, date(2023, 6, 1), date(2024, 6, 1)) == []
    # nothing after the last scheduled year
    assert annuity.payments_between(params, date(2053, 1, 2), date(2070, 1, 1)) == []


def test_present_value_discounts_future_payments(flat_two_year):
    params = flat_two_year.initial_parameters
    second = params.base_annuity_payment * 1.05
    assert annuity.present_value_of_future_payments(params, date(2024, 1, 1), 0.0) == pytest.approx(second)
    r = 0.0001
    pv = annuity.present_value_of_future_payments(params, date(2024, 1, 1), r)
    assert pv == pytest.approx(second / (1 + r) ** 366)
    assert annuity.present_value_of_future_payments(params, date(2025, 1, 1), r) == 0.0
