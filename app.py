# app.py
import logging
import os
from datetime import date
from pathlib import Path

import pandas as pd
import streamlit as st

from lottery_planner.calculators import (
    calculate_initial_data,
    calculate_update,
    calculate_withdrawal_limits,
    format_money,
)
from lottery_planner.calculators.annuity import payment_schedule
from lottery_planner.calculators.dates import parse_date
from lottery_planner.calculators.timeline import project_timeline
from lottery_planner.components.charts import annuity_payments_chart, balance_chart, withdrawal_chart
from lottery_planner.components.forms import setup_form, update_form
from lottery_planner.errors import LotteryPlannerError
from lottery_planner.export import (
    PAST_DEATH_MESSAGE,
    export_csv,
    export_json,
    export_pdf,
    export_text,
    withdrawal_table,
)
from lottery_planner.storage import DEFAULT_FILENAME, clear_data, load_data, save_data

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("lottery_planner.app")


# ---------- Page config ----------
st.set_page_config(
    page_title="Lottery Payout Planner",
    page_icon="💰",
    layout="wide",
    initial_sidebar_state="auto",
)

# Hide Streamlit's default menu and footer
HIDE_STREAMLIT_STYLE = """
    <style>
        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}
        div[data-testid="stMetric"] {
            background: #FFFFFF;
            border-radius: 12px;
            padding: 1rem;
            border: 1px solid rgba(232, 93, 4, 0.3);
        }
    </style>
"""
st.markdown(HIDE_STREAMLIT_STYLE, unsafe_allow_html=True)


# ====== SIMPLE LOCAL STORAGE (JSON file) ======
DATA_DIR = Path(os.environ.get("LOTTERY_PLANNER_DATA_DIR", Path(__file__).resolve().parent / "data"))
DATA_PATH = DATA_DIR / DEFAULT_FILENAME


def _load_saved():
    try:
        return load_data(DATA_PATH)
    except LotteryPlannerError as exc:
        st.warning(f"Saved data could not be read and was ignored: {exc}")
        return None


# ---------- Session boot ----------
if "data" not in st.session_state:
    st.session_state["data"] = _load_saved()


def _store(data):
    st.session_state["data"] = data
    save_data(DATA_PATH, data)


st.title("Lottery Payout Planner")
st.caption("Compare the lump sum and the annuity: how much can you spend and still leave your legacy goal?")


# ====== SETUP VIEW ======
data = st.session_state["data"]
if data is None:
    inputs = setup_form()
    if inputs is not None:
        try:
            _store(calculate_initial_data(inputs, date.today()))
            st.rerun()
        except LotteryPlannerError as exc:
            st.error(str(exc))
    st.stop()


# ====== UPDATE VIEW ======
params = data.initial_parameters
state = data.state
today = max(date.today(), parse_date(state.last_update_date))

st.subheader("Summary")
c1, c2, c3, c4 = st.columns(4)
c1.metric("Lump sum balance", format_money(state.lump_balance))
c2.metric("Annuity balance", format_money(state.annual_balance))
c3.metric("Years passed", f"{state.years_passed:.2f}")
c4.metric("Goal at death", f"{format_money(params.user_inputs.ml)}")
st.caption(
    f"Last updated {state.last_update_date}. Predicted date of death {params.predicted_death_date}. "
    "Goal is in today's dollars."
)

st.divider()
st.subheader("Sustainable Withdrawals")
limits = calculate_withdrawal_limits(data, today)
if limits is None:
    st.warning(PAST_DEATH_MESSAGE)
else:
    st.caption(
        f"{limits.years_remaining:.1f} years remaining. "
        f"Leaving {format_money(limits.inflation_adjusted_target)} in future dollars. "
        "\"Now\" columns show today's purchasing power."
    )
    df = withdrawal_table(limits)
    st.dataframe(
        df.style.format({c: format_money for c in df.columns if c != "Frequency"}),
        use_container_width=True,
        hide_index=True,
    )
    freq = st.radio("Compare at", ["daily", "weekly", "biweekly", "monthly"], index=3, horizontal=True)
    st.plotly_chart(withdrawal_chart(limits, freq), use_container_width=True)

st.divider()
st.subheader("Record Spending")
submitted = update_form(parse_date(state.last_update_date))
if submitted is not None:
    spending, update_date = submitted
    try:
        _store(calculate_update(data, spending, update_date))
        logger.info("Recorded %.2f spent as of %s", spending, update_date)
        st.rerun()
    except LotteryPlannerError as exc:
        st.error(str(exc))

st.divider()
c1, c2 = st.columns(2)
with c1:
    timeline = project_timeline(data)
    target = limits.inflation_adjusted_target if limits else 0.0
    st.plotly_chart(balance_chart(timeline, target), use_container_width=True)
    st.caption("Each scenario spends its own sustainable amount every day.")
with c2:
    schedule = pd.DataFrame(payment_schedule(params))
    st.plotly_chart(
        annuity_payments_chart([d.year for d in schedule["date"]], schedule["amount"]),
        use_container_width=True,
    )

# --- Export ---
st.sidebar.header("Export")
st.sidebar.download_button(
    "⬇️ CSV", data=export_csv(data), file_name="lottery-data.csv", mime="text/csv"
)
st.sidebar.download_button(
    "⬇️ JSON", data=export_json(data), file_name="lottery-data.json", mime="application/json"
)
st.sidebar.download_button(
    "⬇️ Text summary", data=export_text(data, limits), file_name="lottery-summary.txt", mime="text/plain"
)
st.sidebar.download_button(
    "⬇️ PDF", data=export_pdf(data, limits), file_name="lottery-report.pdf", mime="application/pdf"
)

st.sidebar.divider()
if st.sidebar.button("Start over"):
    clear_data(DATA_PATH)
    st.session_state["data"] = None
    st.rerun()
