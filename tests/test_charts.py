from datetime import date

from lottery_planner.calculators.timeline import project_timeline
from lottery_planner.calculators.withdrawal import calculate_withdrawal_limits
from lottery_planner.components import charts


def test_balance_chart_has_both_scenarios(jackpot):
    df = project_timeline(jackpot)
    fig = charts.balance_chart(df, legacy_target=1_000_000)
    assert len(fig.data) == 2
    for trace in fig.data:
        assert len(trace.x) == len(df)


def test_withdrawal_chart_groups_nominal_and_real(jackpot):
    limits = calculate_withdrawal_limits(jackpot, date(2024, 1, 1))
    fig = charts.withdrawal_chart(limits, "weekly")
    assert [t.name for t in fig.data] == ["Nominal", "Today's dollars"]
    assert fig.data[0].y[0] == limits.lump["weekly"]["nominal"]


def test_annuity_payments_chart():
    fig = charts.annuity_payments_chart([2024, 2025], [100.0, 105.0])
    assert len(fig.data) == 1
    assert list(fig.data[0].y) == [100.0, 105.0]
