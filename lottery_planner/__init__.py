"""Lottery payout planner.

Projects what a lottery winner can afford to spend under the two payout
options: a one-time lump sum or a multi-year annuity whose payments grow at a
fixed rate.  The calculators are pure functions over the records in
:mod:`lottery_planner.models`; the Streamlit front end in ``app.py`` is only
one of their callers.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
