# models.py
"""Plain records passed between the calculators and their callers.

Every record converts to and from a JSON-friendly ``dict`` so callers can
persist it however they like.  Floats are kept as Python floats and dates as
ISO ``YYYY-MM-DD`` strings, which makes the round trip exact.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from datetime import date
from typing import Any, Dict, Optional

from .errors import InvalidInput

RATE_FIELDS = ("lump_sum_tax", "annuity_tax", "savings_apr", "investment_tax_rate", "inflation_rate")


def _require(record: Dict[str, Any], name: str, cls_name: str) -> Any:
    try:
        return record[name]
    except (KeyError, TypeError):
        raise InvalidInput(f"{cls_name} is missing field '{name}'") from None


def _as_float(value: Any, name: str) -> float:
    if isinstance(value, bool):
        raise InvalidInput(f"'{name}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInput(f"'{name}' must be a number, got {value!r}") from None
    if not math.isfinite(number):
        raise InvalidInput(f"'{name}' must be finite, got {value!r}")
    return number


def _as_iso_date(value: Any, name: str) -> str:
    try:
        return date.fromisoformat(str(value)).isoformat()
    except ValueError:
        raise InvalidInput(f"'{name}' must be an ISO date (YYYY-MM-DD), got {value!r}") from None


@dataclass(frozen=True)
class UserInputParameters:
    """Parameters entered once on the setup form."""

    total_winnings: float
    lump_sum_tax: float          # percent withheld from the lump sum
    annuity_tax: float           # percent withheld from the annuity
    savings_apr: float           # one APR for all invested money
    age: float
    death_age: float
    years: int                   # number of annuity payments
    ml: float                    # money to leave behind, today's dollars
    investment_tax_rate: float   # percent of investment gains paid in tax
    inflation_rate: float        # percent per year

    def validate(self) -> "UserInputParameters":
        """Raise :class:`InvalidInput` on the first out-of-domain value."""
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidInput(f"'{f.name}' must be a number, got {value!r}")
            if not math.isfinite(value):
                raise InvalidInput(f"'{f.name}' must be finite, got {value!r}")
        if self.total_winnings < 0:
            raise InvalidInput("Total winnings cannot be negative.")
        if self.ml < 0:
            raise InvalidInput("Money to leave cannot be negative.")
        if self.age <= 0 or self.death_age <= 0:
            raise InvalidInput("Please enter a valid age and life expectancy.")
        if self.death_age <= self.age:
            raise InvalidInput("Life expectancy must be greater than current age.")
        if self.years <= 0 or int(self.years) != self.years:
            raise InvalidInput(f"Annuity years must be a positive whole number, got {self.years!r}")
        for name in RATE_FIELDS:
            rate = getattr(self, name)
            if not 0.0 <= rate <= 100.0:
                raise InvalidInput(f"'{name}' must be between 0 and 100 percent, got {rate!r}")
        return self

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "UserInputParameters":
        values = {}
        for f in fields(cls):
            raw = _require(record, f.name, cls.__name__)
            if isinstance(raw, int) and not isinstance(raw, bool):
                values[f.name] = raw
            else:
                values[f.name] = _as_float(raw, f.name)
        years = values["years"]
        if isinstance(years, float) and years.is_integer():
            values["years"] = int(years)
        return cls(**values)


@dataclass(frozen=True)
class InitialParameters:
    """Values derived once from the user inputs and never changed afterwards."""

    user_inputs: UserInputParameters
    start_year: int
    initial_date: str
    predicted_death_date: str
    lump_sum_net: float
    base_annuity_payment: float
    annuity_growth_rate: float
    investment_tax_rate: float
    inflation_rate: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "InitialParameters":
        name = cls.__name__
        user_inputs = _require(record, "user_inputs", name)
        if not isinstance(user_inputs, dict):
            raise InvalidInput(f"{name}.user_inputs must be an object")
        return cls(
            user_inputs=UserInputParameters.from_dict(user_inputs).validate(),
            start_year=int(_as_float(_require(record, "start_year", name), "start_year")),
            initial_date=_as_iso_date(_require(record, "initial_date", name), "initial_date"),
            predicted_death_date=_as_iso_date(
                _require(record, "predicted_death_date", name), "predicted_death_date"
            ),
            lump_sum_net=_as_float(_require(record, "lump_sum_net", name), "lump_sum_net"),
            base_annuity_payment=_as_float(
                _require(record, "base_annuity_payment", name), "base_annuity_payment"
            ),
            annuity_growth_rate=_as_float(
                _require(record, "annuity_growth_rate", name), "annuity_growth_rate"
            ),
            investment_tax_rate=_as_float(
                _require(record, "investment_tax_rate", name), "investment_tax_rate"
            ),
            inflation_rate=_as_float(_require(record, "inflation_rate", name), "inflation_rate"),
        )


@dataclass(frozen=True)
class State:
    """Balances of both scenarios as of ``last_update_date``."""

    last_update_date: str
    lump_balance: float
    annual_balance: float
    years_passed: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "State":
        name = cls.__name__
        state = cls(
            last_update_date=_as_iso_date(
                _require(record, "last_update_date", name), "last_update_date"
            ),
            lump_balance=_as_float(_require(record, "lump_balance", name), "lump_balance"),
            annual_balance=_as_float(_require(record, "annual_balance", name), "annual_balance"),
            years_passed=_as_float(record.get("years_passed", 0.0), "years_passed"),
        )
        if state.lump_balance < 0 or state.annual_balance < 0:
            raise InvalidInput("Stored balances cannot be negative")
        return state


@dataclass(frozen=True)
class LotteryData:
    """The complete persisted record: derived parameters plus current state."""

    initial_parameters: InitialParameters
    state: State

    def to_dict(self) -> Dict[str, Any]:
        return {
            "initial_parameters": self.initial_parameters.to_dict(),
            "state": self.state.to_dict(),
        }

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "LotteryData":
        if not isinstance(record, dict):
            raise InvalidInput("Lottery data must be a JSON object")
        params = _require(record, "initial_parameters", cls.__name__)
        state = _require(record, "state", cls.__name__)
        if not isinstance(params, dict) or not isinstance(state, dict):
            raise InvalidInput("Lottery data sections must be JSON objects")
        return cls(
            initial_parameters=InitialParameters.from_dict(params),
            state=State.from_dict(state),
        )


@dataclass
class WithdrawalLimits:
    """Sustainable withdrawals for both scenarios; recomputed on every view.

    ``lump`` and ``annual`` map a frequency name (daily, weekly, biweekly,
    monthly) to ``{"nominal": ..., "real": ...}``.
    """

    lump: Dict[str, Dict[str, float]]
    annual: Dict[str, Dict[str, float]]
    years_remaining: float
    days_remaining: int
    inflation_adjusted_target: float
    annuity_future_value_pv: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def scenario(self, name: str) -> Optional[Dict[str, Dict[str, float]]]:
        return {"lump": self.lump, "annual": self.annual}.get(name)


__all__ = [
    "UserInputParameters",
    "InitialParameters",
    "State",
    "LotteryData",
    "WithdrawalLimits",
]
