"""Growing-annuity payment schedule.

The annuity option pays ``years`` instalments, one per anniversary of the
initial date, with every payment ``growth_rate`` times the previous one.  The
first payment (index 0) is received on the initial date itself.

Example
-------

>>> # $1M pool paid over 2 years, growing 5%: 487,804.88 then 512,195.12
>>> round(base_payment(1_000_000, 2, 1.05), 2)
487804.88
"""

from __future__ import annotations

from datetime import date
from typing import List, NamedTuple

from .dates import DateLike, add_years, days_between, parse_date


class AnnuityPayment(NamedTuple):
    index: int
    date: date
    amount: float


def base_payment(pool: float, years: int, growth_rate: float) -> float:
    """First payment of a geometric series of ``years`` payments summing to ``pool``.

    With ``growth_rate == 1`` the pool is split evenly.
    """
    if growth_rate == 1.0:
        return pool / years
    return pool * (growth_rate - 1.0) / (growth_rate ** years - 1.0)


def payment_amount(base: float, growth_rate: float, index: int) -> float:
    return base * growth_rate ** index


def payment_schedule(params) -> List[AnnuityPayment]:
    """Every scheduled payment for an :class:`InitialParameters` record."""
    start = parse_date(params.initial_date)
    years = int(params.user_inputs.years)
    return [
        AnnuityPayment(
            i,
            add_years(start, i),
            payment_amount(params.base_annuity_payment, params.annuity_growth_rate, i),
        )
        for i in range(years)
    ]


def payments_between(params, after: DateLike, through: DateLike) -> List[AnnuityPayment]:
    """Payments falling due strictly after ``after`` and on or before ``through``.

    Payment 0 is never returned; it is part of the opening annuity balance.
    """
    after_d = parse_date(after)
    through_d = parse_date(through)
    start = parse_date(params.initial_date)
    years = int(params.user_inputs.years)

    due = []
    for year in range(after_d.year, through_d.year + 1):
        years_since_start = year - start.year
        if not 0 < years_since_start < years:
            continue
        anniversary = add_years(start, years_since_start)
        if after_d < anniversary <= through_d:
            amount = payment_amount(params.base_annuity_payment, params.annuity_growth_rate, years_since_start)
            due.append(AnnuityPayment(years_since_start, anniversary, amount))
    return due


def present_value_of_future_payments(params, current_date: DateLike, daily_rate: float) -> float:
    """Value today of every payment dated after ``current_date``."""
    today = parse_date(current_date)
    pv = 0.0
    for payment in payment_schedule(params):
        if payment.date > today:
            days_to_payment = days_between(today, payment.date)
            pv += payment.amount / (1.0 + daily_rate) ** days_to_payment
    return pv


__all__ = [
    "AnnuityPayment",
    "base_payment",
    "payment_amount",
    "payment_schedule",
    "payments_between",
    "present_value_of_future_payments",
]
