from datetime import date

import streamlit as st

from ..config import FORM_DEFAULTS
from ..models import UserInputParameters

# Stable widget keys so we can programmatically set values on load
WIDGET_KEYS = {
    "total_winnings": "in_total_winnings",
    "lump_sum_tax": "in_lump_sum_tax",
    "annuity_tax": "in_annuity_tax",
    "savings_apr": "in_savings_apr",
    "age": "in_age",
    "death_age": "in_death_age",
    "years": "in_years",
    "ml": "in_ml",
    "investment_tax_rate": "in_investment_tax_rate",
    "inflation_rate": "in_inflation_rate",

    "spending": "in_spending",
    "update_date": "in_update_date",
}

def _d(key, fallback=None):
    return st.session_state.get("form_defaults", {}).get(key, FORM_DEFAULTS.get(key, fallback))

def setup_form():
    """Render the setup form; returns UserInputParameters once submitted, else None."""
    with st.form("setup_form"):
        st.subheader("Winnings")
        total_winnings = st.number_input(
            "Total winnings ($)", min_value=0.0, step=1_000_000.0,
            value=float(_d("total_winnings")), key=WIDGET_KEYS["total_winnings"],
            help="Advertised jackpot before any withholding."
        )
        c1, c2 = st.columns(2)
        lump_sum_tax = c1.number_input(
            "Lump sum tax (%)", min_value=0.0, max_value=100.0,
            value=float(_d("lump_sum_tax")), key=WIDGET_KEYS["lump_sum_tax"],
        )
        annuity_tax = c2.number_input(
            "Annuity tax (%)", min_value=0.0, max_value=100.0,
            value=float(_d("annuity_tax")), key=WIDGET_KEYS["annuity_tax"],
        )
        years = st.number_input(
            "Annuity payout years", min_value=1, max_value=100, step=1,
            value=int(_d("years")), key=WIDGET_KEYS["years"],
            help="Number of yearly payments; each grows 5% over the last."
        )

        st.subheader("You")
        c1, c2 = st.columns(2)
        age = c1.number_input(
            "Current age", min_value=0, max_value=120, step=1,
            value=int(_d("age")), key=WIDGET_KEYS["age"],
        )
        death_age = c2.number_input(
            "Expected age at death", min_value=0, max_value=130, step=1,
            value=int(_d("death_age")), key=WIDGET_KEYS["death_age"],
            help="End of the planning horizon."
        )
        ml = st.number_input(
            "Money to leave behind ($, today's dollars)", min_value=0.0, step=100_000.0,
            value=float(_d("ml")), key=WIDGET_KEYS["ml"],
        )

        st.subheader("Assumptions")
        c1, c2, c3 = st.columns(3)
        savings_apr = c1.number_input(
            "Savings APR (%)", min_value=0.0, max_value=100.0, step=0.25,
            value=float(_d("savings_apr")), key=WIDGET_KEYS["savings_apr"],
            help="Compounded monthly."
        )
        investment_tax_rate = c2.number_input(
            "Investment tax (%)", min_value=0.0, max_value=100.0,
            value=float(_d("investment_tax_rate")), key=WIDGET_KEYS["investment_tax_rate"],
            help="Share of investment gains lost to tax."
        )
        inflation_rate = c3.number_input(
            "Inflation (%)", min_value=0.0, max_value=100.0, step=0.1,
            value=float(_d("inflation_rate")), key=WIDGET_KEYS["inflation_rate"],
        )

        submitted = st.form_submit_button("Calculate", type="primary")

    if not submitted:
        return None
    return UserInputParameters(
        total_winnings=float(total_winnings),
        lump_sum_tax=float(lump_sum_tax),
        annuity_tax=float(annuity_tax),
        savings_apr=float(savings_apr),
        age=int(age),
        death_age=int(death_age),
        years=int(years),
        ml=float(ml),
        investment_tax_rate=float(investment_tax_rate),
        inflation_rate=float(inflation_rate),
    )

def update_form(last_update_date: date):
    """Spending + date form; returns (spending, date) once submitted, else None."""
    with st.form("update_form"):
        c1, c2 = st.columns(2)
        spending = c1.number_input(
            "Spent since last update ($)", step=100.0, value=0.0,
            key=WIDGET_KEYS["spending"],
            help="Taken out of both scenarios. Enter a negative amount for a deposit."
        )
        update_date = c2.date_input(
            "As of", value=max(date.today(), last_update_date),
            min_value=last_update_date, key=WIDGET_KEYS["update_date"],
        )
        submitted = st.form_submit_button("Update & Recalculate", type="primary")
    if not submitted:
        return None
    return float(spending), update_date
