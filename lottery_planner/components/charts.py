# components/charts.py
# Plotly chart helpers used by the app.
# All functions return a Plotly Figure that Streamlit can display with st.plotly_chart(...).

from typing import Sequence

import pandas as pd
import plotly.graph_objects as go

import plotly.io as pio
pio.templates.default = "plotly_white"

from ..models import WithdrawalLimits

LUMP_COLOR = "#E85D04"
ANNUITY_COLOR = "#1D4ED8"


# ---------- Balances over time ----------
def balance_chart(timeline: pd.DataFrame,
                  legacy_target: float = 0.0,
                  title: str = "Projected Balances") -> go.Figure:
    """Lump-sum and annuity balances per year with the legacy goal as a line."""
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=timeline["age"], y=timeline["lump_balance"], mode="lines+markers",
        name="Lump sum", line=dict(color=LUMP_COLOR),
        hovertemplate="Age %{x:.1f}<br>$%{y:,.0f}<extra></extra>"
    ))
    fig.add_trace(go.Scatter(
        x=timeline["age"], y=timeline["annual_balance"], mode="lines+markers",
        name="Annuity", line=dict(color=ANNUITY_COLOR),
        hovertemplate="Age %{x:.1f}<br>$%{y:,.0f}<extra></extra>"
    ))
    if legacy_target > 0:
        fig.add_hline(y=legacy_target, line_dash="dot", line_color="grey",
                      annotation_text="Legacy goal (future $)")

    fig.update_layout(
        title=title,
        template="plotly_white",
        height=380,
        margin=dict(l=10, r=10, t=40, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        xaxis_title="Age",
        yaxis_title="Dollars (nominal)"
    )
    return fig


# ---------- Annuity instalments ----------
def annuity_payments_chart(years: Sequence[int],
                           payments: Sequence[float],
                           title: str = "Annuity Payments") -> go.Figure:
    fig = go.Figure(go.Bar(x=list(years), y=list(payments), name="Payment",
                           marker_color=ANNUITY_COLOR,
                           hovertemplate="%{x}<br>$%{y:,.0f}<extra></extra>"))
    fig.update_layout(
        title=title, template="plotly_white", height=260,
        margin=dict(l=10, r=10, t=40, b=10),
        xaxis_title="Year", yaxis_title="Dollars (after tax)"
    )
    return fig


# ---------- Withdrawal comparison (grouped bars) ----------
def withdrawal_chart(limits: WithdrawalLimits,
                     frequency: str = "monthly",
                     title: str = "Sustainable Withdrawal") -> go.Figure:
    """Nominal and today's-dollar withdrawal for both scenarios at one frequency."""
    labels = ["Lump sum", "Annuity"]
    nominal = [limits.lump[frequency]["nominal"], limits.annual[frequency]["nominal"]]
    real = [limits.lump[frequency]["real"], limits.annual[frequency]["real"]]

    fig = go.Figure()
    fig.add_bar(x=labels, y=nominal, name="Nominal")
    fig.add_bar(x=labels, y=real, name="Today's dollars")
    fig.update_layout(
        barmode="group",
        title=f"{title} ({frequency})",
        template="plotly_white",
        height=320,
        margin=dict(l=10, r=10, t=40, b=10),
        yaxis_title="Dollars",
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1)
    )
    return fig
