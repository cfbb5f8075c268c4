"""Helper package that exposes the lottery payout calculators.

The `calculators` package contains small, focused modules that each implement
one piece of the projection logic:

* ``dates`` – day counts, ISO date parsing and anniversary arithmetic.
* ``money`` – compact currency formatting for display.
* ``rates`` – monthly-compounded daily growth and daily inflation rates.
* ``annuity`` – growing-annuity base payment, schedule and present value.
* ``projection`` – initial lump-sum and annuity state from the setup inputs.
* ``update`` – rolling both balances forward to a later date.
* ``withdrawal`` – sustainable daily/weekly/monthly withdrawals per scenario.
* ``timeline`` – year-by-year projection used by the charts.

Each module exposes a few public functions with clear parameters and returns.  See
individual docstrings for details.
"""

from . import dates, money, rates, annuity, projection, update, withdrawal, timeline  # noqa: F401
from .money import format_money
from .projection import calculate_initial_data
from .update import calculate_update
from .withdrawal import calculate_withdrawal_limits

__all__ = [
    "dates",
    "money",
    "rates",
    "annuity",
    "projection",
    "update",
    "withdrawal",
    "timeline",
    "format_money",
    "calculate_initial_data",
    "calculate_update",
    "calculate_withdrawal_limits",
]
