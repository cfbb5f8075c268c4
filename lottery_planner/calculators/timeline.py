"""Year-by-year projection of both scenarios until the predicted date of death.

The projection simply replays :func:`calculate_update` once per year starting
from the state's last update date.  By default each scenario spends its own
sustainable daily amount (so the two balances glide towards the legacy
target); pass ``spending_per_day`` to compare both options under the same
lifestyle instead.
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import pandas as pd

from ..config import DAYS_PER_JULIAN_YEAR
from ..models import LotteryData
from . import annuity
from .dates import add_years, days_between, parse_date
from .update import calculate_update
from .withdrawal import calculate_withdrawal_limits

COLUMNS = ["year", "date", "age", "lump_balance", "annual_balance", "annuity_payment"]


def _step_dates(start, end):
    dates = [start]
    k = 1
    while True:
        nxt = add_years(start, k)
        if nxt >= end:
            dates.append(end)
            return dates
        dates.append(nxt)
        k += 1


def project_timeline(data: LotteryData, spending_per_day: Optional[float] = None) -> pd.DataFrame:
    """Balances of both scenarios on each anniversary of the last update.

    Returns a frame with columns ``year, date, age, lump_balance,
    annual_balance, annuity_payment``.  The first row is the current state;
    past the predicted date of death only that row is returned.
    """
    params = data.initial_parameters
    start = parse_date(data.state.last_update_date)
    end = parse_date(params.predicted_death_date)
    initial = parse_date(params.initial_date)
    age0 = params.user_inputs.age

    if start >= end:
        dates = [start]
    else:
        dates = _step_dates(start, end)

    if spending_per_day is None:
        limits = calculate_withdrawal_limits(data, start)
        lump_daily = limits.lump["daily"]["nominal"] if limits else 0.0
        annual_daily = limits.annual["daily"]["nominal"] if limits else 0.0
    else:
        lump_daily = annual_daily = float(spending_per_day)

    n = len(dates)
    lump = np.zeros(n)
    annual = np.zeros(n)
    payments = np.zeros(n)
    lump[0] = data.state.lump_balance
    annual[0] = data.state.annual_balance

    lump_data = annual_data = data
    for i in range(1, n):
        days = days_between(dates[i - 1], dates[i])
        lump_data = calculate_update(lump_data, lump_daily * days, dates[i])
        annual_data = calculate_update(annual_data, annual_daily * days, dates[i])
        lump[i] = lump_data.state.lump_balance
        annual[i] = annual_data.state.annual_balance
        payments[i] = sum(p.amount for p in annuity.payments_between(params, dates[i - 1], dates[i]))

    ages = np.array([age0 + days_between(initial, d) / DAYS_PER_JULIAN_YEAR for d in dates])
    return pd.DataFrame(
        {
            "year": [d.year for d in dates],
            "date": [d.isoformat() for d in dates],
            "age": ages.round(2),
            "lump_balance": lump,
            "annual_balance": annual,
            "annuity_payment": payments,
        },
        columns=COLUMNS,
    )


__all__ = ["project_timeline"]
