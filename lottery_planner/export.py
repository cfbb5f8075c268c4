# export.py
"""Downloadable summaries of a lottery record.

CSV, JSON and plain text are built from the record alone (plus the current
withdrawal limits for text and PDF); nothing here feeds back into the
calculators.
"""

from __future__ import annotations

import io
from typing import List, Optional

import pandas as pd
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from .calculators.money import format_money
from .models import LotteryData, WithdrawalLimits
from .storage import to_json

PAST_DEATH_MESSAGE = "Past predicted death. No withdrawal limits can be calculated."


def _parameter_rows(data: LotteryData) -> List[List[str]]:
    inputs = data.initial_parameters.user_inputs
    state = data.state
    return [
        ["Total Winnings", format_money(inputs.total_winnings)],
        ["Lump Sum Tax Rate", f"{inputs.lump_sum_tax}%"],
        ["Annuity Tax Rate", f"{inputs.annuity_tax}%"],
        ["Savings APR", f"{inputs.savings_apr}%"],
        ["Age", str(inputs.age)],
        ["Expected Death Age", str(inputs.death_age)],
        ["Annuity Years", str(inputs.years)],
        ["Money to Leave", format_money(inputs.ml)],
        ["Investment Tax Rate", f"{inputs.investment_tax_rate}%"],
        ["Inflation Rate", f"{inputs.inflation_rate}%"],
        ["", ""],
        ["Current Lump Balance", format_money(state.lump_balance)],
        ["Current Annual Balance", format_money(state.annual_balance)],
        ["Years Passed", f"{state.years_passed:.2f}"],
        ["Last Update Date", state.last_update_date],
    ]


def withdrawal_table(limits: WithdrawalLimits) -> pd.DataFrame:
    """One row per frequency with nominal and today's-dollar amounts per scenario."""
    rows = []
    for freq in limits.lump:
        rows.append({
            "Frequency": freq.title(),
            "Lump Sum": limits.lump[freq]["nominal"],
            "Lump Sum (now)": limits.lump[freq]["real"],
            "Annuity": limits.annual[freq]["nominal"],
            "Annuity (now)": limits.annual[freq]["real"],
        })
    return pd.DataFrame(rows)


def export_csv(data: LotteryData) -> str:
    df = pd.DataFrame(_parameter_rows(data), columns=["Parameter", "Value"])
    return df.to_csv(index=False, lineterminator="\n")


def export_json(data: LotteryData) -> str:
    return to_json(data, indent=2)


def export_text(data: LotteryData, limits: Optional[WithdrawalLimits]) -> str:
    lines = ["Lottery Payout Summary", "=" * 22, ""]
    width = max(len(label) for label, _ in _parameter_rows(data))
    for label, value in _parameter_rows(data):
        lines.append(f"{label.ljust(width)}  {value}" if label else "")

    lines += ["", "Sustainable Withdrawals", "-" * 23]
    if limits is None:
        lines.append(PAST_DEATH_MESSAGE)
    else:
        lines.append(f"Years remaining: {limits.years_remaining:.1f}")
        lines.append(f"Goal at death (future dollars): {format_money(limits.inflation_adjusted_target)}")
        for _, row in withdrawal_table(limits).iterrows():
            lines.append(
                f"{row['Frequency']:<9} lump {format_money(row['Lump Sum'])} (now {format_money(row['Lump Sum (now)'])})"
                f" | annuity {format_money(row['Annuity'])} (now {format_money(row['Annuity (now)'])})"
            )
    return "\n".join(lines) + "\n"


def export_pdf(data: LotteryData, limits: Optional[WithdrawalLimits]) -> bytes:
    """Create a PDF report with the inputs and the withdrawal table."""
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=letter, leftMargin=36, rightMargin=36)
    styles = getSampleStyleSheet()
    table_style = TableStyle(
        [
            ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#FDE8D7")),
            ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
        ]
    )
    story = [Paragraph("Lottery Payout Report", styles["Title"]), Spacer(1, 12)]

    story.append(Paragraph("Inputs and Balances", styles["Heading2"]))
    rows = [["Parameter", "Value"]] + [r for r in _parameter_rows(data) if r[0]]
    table = Table(rows, hAlign="LEFT")
    table.setStyle(table_style)
    story.extend([table, Spacer(1, 12)])

    story.append(Paragraph("Sustainable Withdrawals", styles["Heading2"]))
    if limits is None:
        story.append(Paragraph(PAST_DEATH_MESSAGE, styles["Normal"]))
    else:
        df = withdrawal_table(limits)
        rows = [list(df.columns)]
        for _, row in df.iterrows():
            rows.append([row["Frequency"]] + [format_money(v) for v in row.iloc[1:]])
        table = Table(rows, hAlign="LEFT")
        table.setStyle(table_style)
        story.append(table)
        story.append(Spacer(1, 6))
        story.append(Paragraph(
            f"{limits.years_remaining:.1f} years remaining; legacy goal of "
            f"{format_money(limits.inflation_adjusted_target)} in future dollars.",
            styles["Normal"],
        ))

    doc.build(story)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes


__all__ = [
    "PAST_DEATH_MESSAGE",
    "withdrawal_table",
    "export_csv",
    "export_json",
    "export_text",
    "export_pdf",
]
