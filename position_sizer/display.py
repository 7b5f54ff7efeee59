"""Display strings, copy values and the risk/reward preview split."""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

from position_sizer.settings import format_stored_number
from position_sizer.sizing.types import Direction, TradeResult


def format_amount(value: Optional[float]) -> str:
    """Dollar amount rounded to cents, halves up; empty for None or zero."""
    if not value:
        return ""
    cents = math.floor(float(value) * 100 + 0.5)
    return f"${format_stored_number(cents / 100)}"


def format_ratio(ratio: float) -> str:
    return f"{format_stored_number(ratio)} : 1"


def preview_heights(ratio: float) -> Tuple[float, float]:
    """Percent heights of the take-profit and stop-loss parts of the preview bar."""
    take_profit_pct = ratio * 100 / (ratio + 1)
    stop_loss_pct = 100 / (ratio + 1)
    return take_profit_pct, stop_loss_pct


def take_profit_hint(direction: Direction) -> str:
    level, side = ("resistance", "above") if direction is Direction.LONG else ("support", "below")
    return (
        f"Note that the take-profit price may sit {side} a significant {level} level, "
        "so check whether this price point suits the trade. If not, adjust the reward/risk ratio."
    )


def result_rows(result: TradeResult) -> List[Tuple[str, str, str]]:
    """(label, display text, clipboard text) rows for the result panel."""
    trade = result.trade
    ratio_text = format_ratio(trade.reward_to_risk_ratio)
    return [
        ("Trade type", result.direction.value, result.direction.value),
        ("Entry price", format_amount(trade.entry_price), format_stored_number(trade.entry_price)),
        ("Quantity", str(result.quantity), str(result.quantity)),
        ("Stop loss", format_amount(trade.stop_loss), format_stored_number(trade.stop_loss)),
        ("Take profit", format_amount(result.take_profit_price), format_stored_number(result.take_profit_price)),
        ("Total risk", format_amount(result.total_risk), format_stored_number(result.total_risk)),
        ("Total profit", format_amount(result.expected_profit), format_stored_number(result.expected_profit)),
        ("Reward/risk", ratio_text, ratio_text),
    ]


def render_text_panel(result: TradeResult, width: int = 20) -> str:
    """Plain-text result panel with a vertical preview bar, for terminals."""
    lines = [f"{label + ':':<14}{display}" for label, display, _ in result_rows(result)]
    tp_pct, sl_pct = preview_heights(result.trade.reward_to_risk_ratio)
    tp_rows = max(1, round(width * tp_pct / 100))
    sl_rows = max(1, width - tp_rows)
    reward = [f"  |{'+' * 8}|  {format_amount(result.take_profit_price)} take profit"] + [f"  |{'+' * 8}|"] * (
        tp_rows - 1
    )
    risk = [f"  |{'-' * 8}|"] * (sl_rows - 1) + [f"  |{'-' * 8}|  {format_amount(result.trade.stop_loss)} stop loss"]
    entry = [f"  |{'=' * 8}|  {format_amount(result.trade.entry_price)} entry"]
    # Short trades have the target below the entry
    bar = reward + entry + risk if result.direction is Direction.LONG else risk[::-1] + entry + reward[::-1]
    lines.append("")
    lines.append(f"Preview ({tp_pct:.0f}% reward / {sl_pct:.0f}% risk):")
    lines.extend(bar)
    return "\n".join(lines)
