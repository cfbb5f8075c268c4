"""Fixed model assumptions shared by the calculators and the front end."""

# Annual growth of the annuity payments (payments grow 5% per year).
ANNUITY_GROWTH_RATE = 1.05

DAYS_PER_YEAR = 365
DAYS_PER_JULIAN_YEAR = 365.25
MONTHS_PER_YEAR = 12

# Length of each withdrawal period in days.
PERIOD_DAYS = {
    "daily": 1,
    "weekly": 7,
    "biweekly": 14,
    "monthly": 30.44,
}

# Below this |(1+r)^n - 1| the withdrawal solver treats the rate as zero.
RATE_TOLERANCE = 1e-9

# Below this daily inflation rate real values equal nominal values.
INFLATION_TOLERANCE = 1e-12

# Defaults pre-filled on the setup form.
FORM_DEFAULTS = {
    "total_winnings": 0.0,
    "lump_sum_tax": 37.0,
    "annuity_tax": 25.0,
    "savings_apr": 5.0,
    "age": 0,
    "death_age": 0,
    "years": 30,
    "ml": 0.0,
    "investment_tax_rate": 20.0,
    "inflation_rate": 3.5,
}
