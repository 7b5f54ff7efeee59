"""Application state for one calculator screen."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Optional

from position_sizer.settings import KeyValueStore, SavedSettings, load_settings, save_settings
from position_sizer.sizing import (
    Direction,
    InvalidInputError,
    SizingError,
    TradeInput,
    TradeResult,
    compute_position,
    trade_direction,
)

logger = logging.getLogger(__name__)


@dataclass
class FormValues:
    """Raw form fields; None means the field was left empty."""

    entry_price: Optional[float] = None
    stop_loss: Optional[float] = None
    account_balance: Optional[float] = None
    risk_percentage: Optional[float] = None
    reward_to_risk_ratio: Optional[float] = None


@dataclass(frozen=True)
class CalculationOutcome:
    result: Optional[TradeResult] = None
    error: Optional[SizingError] = None
    direction: Optional[Direction] = None

    @property
    def ok(self) -> bool:
        return self.result is not None

    @property
    def message(self) -> str:
        return str(self.error) if self.error is not None else ""


def _pick(value: Optional[float], fallback: Optional[float]) -> Optional[float]:
    return fallback if value is None else value


@dataclass
class CalculatorSession:
    store: KeyValueStore
    form: FormValues = field(default_factory=FormValues)
    saved: SavedSettings = field(init=False)
    settings_open: bool = field(init=False)
    last_result: Optional[TradeResult] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.saved = load_settings(self.store)
        self.settings_open = not self.saved.is_complete

    def resolve_trade(self, form: FormValues) -> TradeInput:
        """Merge the form with saved settings; only empty fields fall back."""
        trade = TradeInput(
            entry_price=form.entry_price,
            stop_loss=form.stop_loss,
            account_balance=_pick(form.account_balance, self.saved.account_balance),
            risk_percentage=_pick(form.risk_percentage, self.saved.risk_percentage),
            reward_to_risk_ratio=_pick(form.reward_to_risk_ratio, self.saved.reward_to_risk_ratio),
        )
        for name in ("entry_price", "stop_loss", "account_balance", "risk_percentage", "reward_to_risk_ratio"):
            if getattr(trade, name) is None:
                raise InvalidInputError(name, "is required")
        return trade

    def calculate(self, form: Optional[FormValues] = None) -> CalculationOutcome:
        if form is not None:
            self.form = replace(form)
        current = self.form

        direction = None
        if current.entry_price is not None and current.stop_loss is not None:
            direction = trade_direction(current.entry_price, current.stop_loss)

        try:
            trade = self.resolve_trade(current)
            result = compute_position(trade)
        except SizingError as exc:
            logger.info("Calculation rejected: %s", exc)
            if isinstance(exc, InvalidInputError):
                self.settings_open = True
            return CalculationOutcome(error=exc, direction=direction)

        self.saved = save_settings(self.store, trade)
        self.last_result = result
        self.settings_open = False
        return CalculationOutcome(result=result, direction=result.direction)

    def clear(self) -> None:
        self.form = FormValues()
