"""Rate conversions shared by Time-Advance and the withdrawal solver.

The savings APR is treated as compounding monthly and then converted to the
equivalent daily rate.  Both the update and the solver must use this same
convention; changing it shifts every projection.
"""

from __future__ import annotations

from ..config import DAYS_PER_YEAR, MONTHS_PER_YEAR


def effective_daily_rate(apr_pct: float) -> float:
    """Daily growth rate equivalent to ``apr_pct`` compounded monthly."""
    monthly_rate = apr_pct / 100.0 / MONTHS_PER_YEAR
    return (1.0 + monthly_rate) ** (MONTHS_PER_YEAR / DAYS_PER_YEAR) - 1.0


def daily_inflation_rate(inflation_pct: float) -> float:
    """Daily rate equivalent to an annual inflation rate in percent."""
    return (1.0 + inflation_pct / 100.0) ** (1.0 / DAYS_PER_YEAR) - 1.0


def grow_after_tax(balance: float, daily_rate: float, days: int, tax_rate_pct: float) -> float:
    """Compound ``balance`` for ``days`` and remove tax on any positive gain."""
    gross = balance * (1.0 + daily_rate) ** days
    gain = gross - balance
    tax_on_gain = gain * tax_rate_pct / 100.0 if gain > 0 else 0.0
    return gross - tax_on_gain


__all__ = ["effective_daily_rate", "daily_inflation_rate", "grow_after_tax"]
