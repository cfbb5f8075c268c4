"""Exceptions raised by the lottery planner calculators."""


class LotteryPlannerError(Exception):
    """Base class for every error raised by the planner."""


class InvalidDateOrder(LotteryPlannerError, ValueError):
    """An update was requested for a date before the last recorded update."""

    def __init__(self, last_update_date, requested_date):
        self.last_update_date = last_update_date
        self.requested_date = requested_date
        super().__init__(
            f"Current date {requested_date} cannot be before last update date {last_update_date}"
        )


class InvalidInput(LotteryPlannerError, ValueError):
    """A parameter or persisted record is out of domain or malformed."""


__all__ = ["LotteryPlannerError", "InvalidDateOrder", "InvalidInput"]
