"""Initial projection: turn the setup form into a starting :class:`LotteryData`.

Lump sum
    The winnings less the lump-sum withholding, invested immediately.

Annuity
    The winnings less the annuity withholding form a pool paid out over
    ``years`` growing instalments.  The first instalment is treated as already
    received, so it opens the annuity balance.

Example
-------

>>> inputs = UserInputParameters(100_000_000, 37, 25, 5, 35, 85, 30, 5_000_000, 20, 3.5)
>>> data = calculate_initial_data(inputs, date(2024, 1, 1))
>>> data.state.lump_balance
63000000.0
>>> data.initial_parameters.predicted_death_date
'2074-01-01'
"""

from __future__ import annotations

import logging
from datetime import date

from ..config import ANNUITY_GROWTH_RATE
from ..errors import InvalidInput
from ..models import InitialParameters, LotteryData, State, UserInputParameters
from . import annuity
from .dates import DateLike, add_years, format_date, parse_date

logger = logging.getLogger(__name__)


def predicted_death_date(start: DateLike, age: float, death_age: float) -> date:
    """Start date shifted by the whole number of years left to live."""
    return add_years(start, int(death_age - age))


def calculate_initial_data(
    inputs: UserInputParameters,
    current_date: DateLike,
    growth_rate: float = ANNUITY_GROWTH_RATE,
) -> LotteryData:
    """Build the starting record for both payout scenarios.

    Parameters
    ----------
    inputs : UserInputParameters
        Values from the setup form.  They are validated here and
        :class:`InvalidInput` is raised on the first bad value.
    current_date : date or str
        The day the projection starts.
    growth_rate : float, optional
        Annual growth factor of the annuity payments (default 1.05).

    Returns
    -------
    LotteryData
        Derived parameters plus the opening state.
    """
    try:
        inputs.validate()
        if not growth_rate > 0:
            raise InvalidInput(f"Annuity growth rate must be positive, got {growth_rate!r}")
    except InvalidInput as exc:
        logger.warning("Rejected setup inputs: %s", exc)
        raise

    start = parse_date(current_date)

    lump_sum_net = inputs.total_winnings * (1 - inputs.lump_sum_tax / 100.0)

    pool = inputs.total_winnings * (1 - inputs.annuity_tax / 100.0)
    base = annuity.base_payment(pool, int(inputs.years), growth_rate)
    logger.debug(
        "Annuity pool %.2f over %d years at growth %.4f -> first payment %.2f",
        pool, inputs.years, growth_rate, base,
    )

    params = InitialParameters(
        user_inputs=inputs,
        start_year=start.year,
        initial_date=format_date(start),
        predicted_death_date=format_date(predicted_death_date(start, inputs.age, inputs.death_age)),
        lump_sum_net=lump_sum_net,
        base_annuity_payment=base,
        annuity_growth_rate=growth_rate,
        investment_tax_rate=inputs.investment_tax_rate,
        inflation_rate=inputs.inflation_rate,
    )
    state = State(
        last_update_date=format_date(start),
        lump_balance=lump_sum_net,
        annual_balance=base,
        years_passed=0.0,
    )
    return LotteryData(initial_parameters=params, state=state)


__all__ = ["calculate_initial_data", "predicted_death_date"]
