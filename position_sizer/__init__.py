"""Risk-based position sizing calculator."""

from position_sizer.api import size_position
from position_sizer.session import CalculationOutcome, CalculatorSession, FormValues
from position_sizer.sizing import (
    Direction,
    EqualPricesError,
    InvalidInputError,
    SizingError,
    TradeInput,
    TradeResult,
    ZeroQuantityError,
    compute_position,
)

__all__ = [
    "size_position",
    "compute_position",
    "CalculatorSession",
    "CalculationOutcome",
    "FormValues",
    "Direction",
    "TradeInput",
    "TradeResult",
    "SizingError",
    "InvalidInputError",
    "EqualPricesError",
    "ZeroQuantityError",
]
