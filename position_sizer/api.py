"""Public Python API for sizing a trade."""

from __future__ import annotations

from typing import Any, Dict, Optional

from position_sizer.display import format_amount, format_ratio, preview_heights, take_profit_hint
from position_sizer.session import CalculatorSession, FormValues
from position_sizer.settings import KeyValueStore, MemoryStore


def size_position(
    entry_price: float,
    stop_loss: float,
    account_balance: Optional[float] = None,
    risk_percentage: Optional[float] = None,
    reward_to_risk_ratio: Optional[float] = None,
    store: Optional[KeyValueStore] = None,
) -> Dict[str, Any]:
    """Size one trade, falling back to saved settings for omitted values.

    Raises a SizingError subclass when the trade cannot be sized.

    Returns:
        {
            "result": TradeResult,
            "summary": pd.DataFrame,
            "display": {"take_profit": str, "total_risk": str, "total_profit": str,
                        "ratio": str, "preview": (tp_pct, sl_pct), "hint": str},
        }
    """
    session = CalculatorSession(store if store is not None else MemoryStore())
    outcome = session.calculate(
        FormValues(
            entry_price=entry_price,
            stop_loss=stop_loss,
            account_balance=account_balance,
            risk_percentage=risk_percentage,
            reward_to_risk_ratio=reward_to_risk_ratio,
        )
    )
    if not outcome.ok:
        raise outcome.error

    result = outcome.result
    return {
        "result": result,
        "summary": result.to_frame(),
        "display": {
            "take_profit": format_amount(result.take_profit_price),
            "total_risk": format_amount(result.total_risk),
            "total_profit": format_amount(result.expected_profit),
            "ratio": format_ratio(result.trade.reward_to_risk_ratio),
            "preview": preview_heights(result.trade.reward_to_risk_ratio),
            "hint": take_profit_hint(result.direction),
        },
    }
