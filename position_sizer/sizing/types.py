"""Dataclasses used by the position sizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

import pandas as pd


class Direction(str, Enum):
    LONG = "Long"
    SHORT = "Short"


@dataclass(frozen=True)
class TradeInput:
    entry_price: float
    stop_loss: float
    account_balance: float
    risk_percentage: float  # percentage points, 1 == 1%
    reward_to_risk_ratio: float


@dataclass(frozen=True)
class TradeResult:
    trade: TradeInput
    direction: Direction
    risk_per_unit: float
    risk_budget: float
    quantity: int
    total_risk: float
    take_profit_price: float
    expected_profit: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "direction": self.direction.value,
            "entry_price": self.trade.entry_price,
            "stop_loss": self.trade.stop_loss,
            "take_profit_price": self.take_profit_price,
            "quantity": self.quantity,
            "risk_per_unit": self.risk_per_unit,
            "risk_budget": self.risk_budget,
            "total_risk": self.total_risk,
            "expected_profit": self.expected_profit,
            "reward_to_risk_ratio": self.trade.reward_to_risk_ratio,
            "risk_percentage": self.trade.risk_percentage,
            "account_balance": self.trade.account_balance,
        }

    def to_frame(self) -> pd.DataFrame:
        """One-column summary table, indexed by field name."""
        return pd.Series(self.to_dict(), name="value", dtype=object).to_frame()
