"""Sustainable withdrawal solver.

For each scenario this finds the constant daily withdrawal ``W`` that, after
``n`` days of after-tax growth with ``W`` taken out every day, leaves exactly
the inflation-adjusted legacy target ``T`` on the predicted date of death:

    r_net = r * (1 - t)
    R     = (1 + r_net) ** n
    W     = (P * R - T) * r_net / (R - 1)

When ``R`` is indistinguishable from 1 (no growth) the balance only shrinks
linearly and ``W = (P - T) / n``.  A negative ``W`` means the target cannot be
met even without spending, so it is reported as 0.

The annuity scenario's principal is its cash balance plus the present value of
the instalments still to come.  "Real" amounts express the withdrawal stream in
today's dollars using the present-value annuity factor of the inflation rate
over the horizon, i.e. the average discount across the whole stream rather
than the discount of a single payment at the end.

Example
-------

>>> # $1M, no target, 0% growth, 1000 days -> $1000 per day
>>> sustainable_withdrawal(1_000_000, 0, 0.0, 1000, 0.0)
1000.0
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..config import DAYS_PER_JULIAN_YEAR, INFLATION_TOLERANCE, PERIOD_DAYS, RATE_TOLERANCE
from ..errors import InvalidDateOrder
from ..models import LotteryData, WithdrawalLimits
from . import annuity
from .dates import DateLike, days_between, parse_date
from .rates import daily_inflation_rate, effective_daily_rate

logger = logging.getLogger(__name__)


def sustainable_withdrawal(
    principal: float,
    target: float,
    rate: float,
    periods: int,
    tax_rate: float,
) -> float:
    """Constant per-period withdrawal leaving ``target`` after ``periods``.

    Parameters
    ----------
    principal : float
        Money available today.
    target : float
        Balance that must remain at the end, in future dollars.
    rate : float
        Growth per period (e.g. the effective daily rate).
    periods : int
        Number of periods until the end.
    tax_rate : float
        Fraction of each period's growth lost to tax (0.2 for 20%).
    """
    if periods <= 0:
        return 0.0
    r_net = rate * (1.0 - tax_rate)
    growth = (1.0 + r_net) ** periods
    if abs(growth - 1.0) < RATE_TOLERANCE:
        withdrawal = (principal - target) / periods
    else:
        withdrawal = (principal * growth - target) * r_net / (growth - 1.0)
    return withdrawal if withdrawal > 0 else 0.0


def real_value_factor(daily_inflation: float, days: int) -> float:
    """Average today's-dollar value of $1 withdrawn every day for ``days`` days."""
    if days <= 0 or abs(daily_inflation) < INFLATION_TOLERANCE:
        return 1.0
    annuity_factor = (1.0 - (1.0 + daily_inflation) ** -days) / daily_inflation
    return annuity_factor / days


def _frequency_table(daily_nominal: float, real_factor: float) -> Dict[str, Dict[str, float]]:
    daily_real = daily_nominal * real_factor
    return {
        name: {"nominal": daily_nominal * days, "real": daily_real * days}
        for name, days in PERIOD_DAYS.items()
    }


def calculate_withdrawal_limits(data: LotteryData, current_date: DateLike) -> Optional[WithdrawalLimits]:
    """Sustainable withdrawals for both scenarios as of ``current_date``.

    Returns ``None`` when ``current_date`` is on or after the predicted date
    of death, since no withdrawal plan applies any more.  Raises
    :class:`InvalidDateOrder` when ``current_date`` is before the state's
    last update, whose balances would not exist yet.
    """
    params = data.initial_parameters
    state = data.state
    today = parse_date(current_date)
    if today < parse_date(state.last_update_date):
        logger.warning("Withdrawal limits for %s rejected; last update was %s", today, state.last_update_date)
        raise InvalidDateOrder(state.last_update_date, today.isoformat())

    days_remaining = days_between(today, params.predicted_death_date)
    if days_remaining <= 0:
        logger.info("No withdrawal plan: %s is past predicted death date %s", today, params.predicted_death_date)
        return None

    daily_rate = effective_daily_rate(params.user_inputs.savings_apr)
    tax_rate = params.investment_tax_rate / 100.0
    daily_inflation = daily_inflation_rate(params.inflation_rate)

    target = params.user_inputs.ml * (1.0 + daily_inflation) ** days_remaining

    daily_lump = sustainable_withdrawal(state.lump_balance, target, daily_rate, days_remaining, tax_rate)

    pv_future = annuity.present_value_of_future_payments(params, today, daily_rate)
    daily_annual = sustainable_withdrawal(
        state.annual_balance + pv_future, target, daily_rate, days_remaining, tax_rate
    )
    logger.debug(
        "Solved %d days: lump %.2f/day, annuity %.2f/day (future payments PV %.2f, target %.2f)",
        days_remaining, daily_lump, daily_annual, pv_future, target,
    )

    real_factor = real_value_factor(daily_inflation, days_remaining)
    return WithdrawalLimits(
        lump=_frequency_table(daily_lump, real_factor),
        annual=_frequency_table(daily_annual, real_factor),
        years_remaining=days_remaining / DAYS_PER_JULIAN_YEAR,
        days_remaining=days_remaining,
        inflation_adjusted_target=target,
        annuity_future_value_pv=pv_future,
    )


__all__ = ["sustainable_withdrawal", "real_value_factor", "calculate_withdrawal_limits"]
