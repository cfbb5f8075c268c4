"""Time-Advance: roll both scenarios forward to a later date.

Each call represents one real-world check-in.  Between the last update and
``current_date`` both balances grow at the monthly-compounded savings rate,
gains are taxed at the investment tax rate, annuity instalments that fell due
are credited, and the spending reported for the period is taken out of each
scenario independently.  Calling it twice with the same spending deducts the
spending twice.
"""

from __future__ import annotations

import logging
import math
from dataclasses import replace

from ..config import DAYS_PER_JULIAN_YEAR
from ..errors import InvalidDateOrder, InvalidInput
from ..models import LotteryData, State
from . import annuity
from .dates import DateLike, days_between, format_date, parse_date
from .rates import effective_daily_rate, grow_after_tax

logger = logging.getLogger(__name__)


def calculate_update(data: LotteryData, spending: float, current_date: DateLike) -> LotteryData:
    """Return a new :class:`LotteryData` advanced to ``current_date``.

    Raises :class:`InvalidDateOrder` when ``current_date`` is before the last
    update; ``data`` is never modified.  Negative ``spending`` is treated as a
    deposit.
    """
    params = data.initial_parameters
    state = data.state
    last_update = parse_date(state.last_update_date)
    target = parse_date(current_date)

    if target < last_update:
        logger.warning("Update to %s rejected; last update was %s", target, last_update)
        raise InvalidDateOrder(state.last_update_date, format_date(target))
    try:
        spending = float(spending)
    except (TypeError, ValueError):
        raise InvalidInput(f"Spending must be a number, got {spending!r}") from None
    if not math.isfinite(spending):
        raise InvalidInput(f"Spending must be finite, got {spending!r}")

    days_passed = days_between(last_update, target)
    daily_rate = effective_daily_rate(params.user_inputs.savings_apr)
    tax_rate = params.investment_tax_rate

    new_lump_balance = grow_after_tax(state.lump_balance, daily_rate, days_passed, tax_rate)
    new_annual_balance = grow_after_tax(state.annual_balance, daily_rate, days_passed, tax_rate)

    for payment in annuity.payments_between(params, last_update, target):
        logger.debug("Crediting annuity payment %d (%s): %.2f", payment.index, payment.date, payment.amount)
        new_annual_balance += payment.amount

    new_lump_balance = max(0.0, new_lump_balance - spending)
    new_annual_balance = max(0.0, new_annual_balance - spending)

    logger.debug(
        "Advanced %d days to %s: lump %.2f, annuity %.2f",
        days_passed, target, new_lump_balance, new_annual_balance,
    )
    new_state = State(
        last_update_date=format_date(target),
        lump_balance=new_lump_balance,
        annual_balance=new_annual_balance,
        years_passed=state.years_passed + days_passed / DAYS_PER_JULIAN_YEAR,
    )
    return replace(data, state=new_state)


__all__ = ["calculate_update"]
