"""Tests for CSV / JSON / text / PDF exports."""

from datetime import date

from lottery_planner import export, storage
from lottery_planner.calculators.withdrawal import calculate_withdrawal_limits


def test_csv_lists_inputs_and_balances(jackpot):
    lines = export.export_csv(jackpot).splitlines()
    assert lines[0] == "Parameter,Value"
    assert "Total Winnings,$100.00M" in lines
    assert "Lump Sum Tax Rate,37.0%" in lines
    assert "Current Lump Balance,$63.00M" in lines
    assert "Years Passed,0.00" in lines
    assert "Last Update Date,2024-01-01" in lines
    assert len(lines) == 16


def test_json_export_loads_back(jackpot):
    assert storage.from_json(export.export_json(jackpot)) == jackpot


def test_withdrawal_table_has_one_row_per_frequency(jackpot):
    limits = calculate_withdrawal_limits(jackpot, date(2024, 1, 1))
    df = export.withdrawal_table(limits)
    assert list(df["Frequency"]) == ["Daily", "Weekly", "Biweekly", "Monthly"]
    assert df.loc[3, "Lump Sum"] == limits.lump["monthly"]["nominal"]
    assert df.loc[0, "Annuity (now)"] == limits.annual["daily"]["real"]


def test_text_summary(jackpot):
    limits = calculate_withdrawal_limits(jackpot, date(2024, 1, 1))
    text = export.export_text(jackpot, limits)
    assert "Total Winnings" in text
    assert "Monthly" in text
    assert "Years remaining: 50.0" in text

    text = export.export_text(jackpot, None)
    assert export.PAST_DEATH_MESSAGE in text


def test_pdf_report_is_a_pdf(jackpot):
    limits = calculate_withdrawal_limits(jackpot, date(2024, 1, 1))
    assert export.export_pdf(jackpot, limits).startswith(b"%PDF")
    assert export.export_pdf(jackpot, None).startswith(b"%PDF")
