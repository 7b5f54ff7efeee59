"""Pure sizing core: trade inputs in, sized position (or a SizingError) out."""

from position_sizer.sizing.calculator import compute_position, trade_direction, validate_trade
from position_sizer.sizing.errors import EqualPricesError, InvalidInputError, SizingError, ZeroQuantityError
from position_sizer.sizing.types import Direction, TradeInput, TradeResult

__all__ = [
    "compute_position",
    "trade_direction",
    "validate_trade",
    "Direction",
    "TradeInput",
    "TradeResult",
    "SizingError",
    "InvalidInputError",
    "EqualPricesError",
    "ZeroQuantityError",
]
