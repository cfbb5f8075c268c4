import pytest

from lottery_planner.calculators.money import format_money


@pytest.mark.parametrize(
    "value, expected",
    [
        (63_000_000, "$63.00M"),
        (1_500_000_000, "$1.50B"),
        (1_000_000, "$1.00M"),
        (1_250, "$1.25K"),
        (999.5, "$999.50"),
        (12, "$12.00"),
        (0, "$0.00"),
        (-1_500, "-$1.50K"),
    ],
)
def test_format_money_abbreviates(value, expected):
    assert format_money(value) == expected


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), None, "abc", "12", True])
def test_format_money_fails_safe(value):
    assert format_money(value) == "$0.00"


@pytest.mark.parametrize(
    "value, expected",
    [
        (999.999, "$1.00K"),
        (999_999.996, "$1.00M"),
        (999_999_000, "$1.00B"),
        (995_000, "$995.00K"),
        (999.994, "$999.99"),
        (-0.001, "$0.00"),
    ],
)
def test_format_money_picks_unit_after_rounding(value, expected):
    assert format_money(value) == expected
