"""Expose component submodules for convenience."""

from .forms import setup_form, update_form
from .charts import balance_chart, annuity_payments_chart, withdrawal_chart

__all__ = [
    "setup_form",
    "update_form",
    "balance_chart",
    "annuity_payments_chart",
    "withdrawal_chart",
]
