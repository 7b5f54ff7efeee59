"""Risk-based position sizing for a single trade."""

from __future__ import annotations

import logging
import math

from position_sizer.sizing.errors import EqualPricesError, InvalidInputError, ZeroQuantityError
from position_sizer.sizing.types import Direction, TradeInput, TradeResult

logger = logging.getLogger(__name__)

_POSITIVE_FIELDS = (
    "entry_price",
    "stop_loss",
    "account_balance",
    "risk_percentage",
    "reward_to_risk_ratio",
)


def trade_direction(entry_price: float, stop_loss: float) -> Direction:
    """Long when the stop sits below the entry, otherwise Short."""
    return Direction.LONG if stop_loss < entry_price else Direction.SHORT


def validate_trade(trade: TradeInput) -> None:
    """Raise InvalidInputError for missing, non-finite or non-positive inputs."""
    for field in _POSITIVE_FIELDS:
        value = getattr(trade, field)
        if value is None or isinstance(value, bool):
            raise InvalidInputError(field, "is required")
        try:
            number = float(value)
        except (TypeError, ValueError):
            raise InvalidInputError(field, "must be a number") from None
        if not math.isfinite(number):
            raise InvalidInputError(field, "must be finite")
        if number <= 0:
            raise InvalidInputError(field)


def compute_position(trade: TradeInput) -> TradeResult:
    """Size a position so that hitting the stop loses at most the risk budget.

    Raises:
        InvalidInputError: an input is missing, non-finite or not positive.
        EqualPricesError: stop loss equals the entry price.
        ZeroQuantityError: the budget cannot cover the risk of one unit.
    """
    validate_trade(trade)
    entry = float(trade.entry_price)
    stop = float(trade.stop_loss)
    ratio = float(trade.reward_to_risk_ratio)

    if stop == entry:
        raise EqualPricesError()

    direction = trade_direction(entry, stop)
    risk_per_unit = abs(entry - stop)
    risk_budget = float(trade.risk_percentage) / 100 * float(trade.account_balance)
    quantity = math.floor(risk_budget / risk_per_unit)
    if quantity == 0:
        raise ZeroQuantityError(risk_budget, risk_per_unit)

    total_risk = quantity * risk_per_unit
    expected_profit = ratio * total_risk
    if direction is Direction.LONG:
        take_profit = entry + risk_per_unit * ratio
    else:
        take_profit = entry - risk_per_unit * ratio

    result = TradeResult(
        trade=trade,
        direction=direction,
        risk_per_unit=risk_per_unit,
        risk_budget=risk_budget,
        quantity=quantity,
        total_risk=total_risk,
        take_profit_price=take_profit,
        expected_profit=expected_profit,
    )
    logger.debug(
        "Sized %s: qty=%d risk=%.2f tp=%.4f profit=%.2f",
        direction.value,
        quantity,
        total_risk,
        take_profit,
        expected_profit,
    )
    return result
