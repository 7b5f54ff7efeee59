"""Errors raised when a position cannot be sized."""

from __future__ import annotations


class SizingError(ValueError):
    """Base class for recoverable sizing failures; the message is user-facing."""


class InvalidInputError(SizingError):
    def __init__(self, field: str, reason: str = "must be a positive number"):
        self.field = field
        self.reason = reason
        super().__init__(f"{field} {reason}")


class EqualPricesError(SizingError):
    def __init__(self, message: str = "Stop loss and entry price cannot be equal"):
        super().__init__(message)


class ZeroQuantityError(SizingError):
    """Risk budget is smaller than the risk of a single unit."""

    def __init__(self, risk_budget: float, risk_per_unit: float):
        self.risk_budget = risk_budget
        self.risk_per_unit = risk_per_unit
        super().__init__("Calculated quantity to buy is 0")
