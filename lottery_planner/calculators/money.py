"""Compact currency formatting for balances and withdrawal amounts.

Example
-------

>>> format_money(63_000_000)
'$63.00M'
>>> format_money(1234.5)
'$1.23K'
>>> format_money(float("nan"))
'$0.00'
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any

_UNITS = (
    (1.0, ""),
    (1e3, "K"),
    (1e6, "M"),
    (1e9, "B"),
)


def format_money(value: Any) -> str:
    """Format ``value`` as dollars, abbreviating thousands, millions and billions.

    Anything that is not a finite real number is shown as ``$0.00`` so the
    display never reads "NaN" or "Infinity".
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return "$0.00"
    amount = float(value)
    if not math.isfinite(amount):
        return "$0.00"

    sign = "-" if amount < 0 else ""
    amount = abs(amount)
    idx = 0
    while idx + 1 < len(_UNITS) and amount >= _UNITS[idx + 1][0]:
        idx += 1
    scaled = round(amount / _UNITS[idx][0], 2)
    # Rounding can carry into the next unit: 999.999 is $1.00K, not $1000.00
    while scaled >= 1000 and idx + 1 < len(_UNITS):
        idx += 1
        scaled = round(amount / _UNITS[idx][0], 2)
    if scaled == 0:
        sign = ""
    return f"{sign}${scaled:.2f}{_UNITS[idx][1]}"


__all__ = ["format_money"]
