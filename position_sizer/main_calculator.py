"""CLI entrypoint for sizing a single trade from entry and stop prices."""

from __future__ import annotations

import argparse
from typing import List, Optional

from position_sizer.config import SETTINGS_KEYS, settings_path
from position_sizer.display import render_text_panel, take_profit_hint
from position_sizer.logging_config import setup_logging
from position_sizer.session import CalculatorSession, FormValues
from position_sizer.settings import (
    JsonFileStore,
    KeyValueStore,
    MemoryStore,
    SettingsError,
    format_stored_number,
    load_settings,
)
from position_sizer.sizing import TradeResult


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Size a position from entry, stop and account risk.")
    parser.add_argument("--entry", type=float, required=True, help="Entry price.")
    parser.add_argument("--stop", type=float, required=True, help="Stop-loss price.")
    parser.add_argument("--balance", type=float, default=None, help="Account balance (default: saved setting).")
    parser.add_argument(
        "--risk-pct", type=float, default=None, help="Percent of the balance to risk, 1 == 1%% (default: saved)."
    )
    parser.add_argument("--ratio", type=float, default=None, help="Reward-to-risk ratio (default: saved setting).")
    parser.add_argument("--settings-file", default=None, help="Settings JSON path (default: ~/.position_sizer).")
    parser.add_argument("--no-save", action="store_true", help="Do not write settings back after sizing.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...).")
    return parser.parse_args(argv)


def _build_store(settings_file: Optional[str], no_save: bool) -> KeyValueStore:
    file_store = JsonFileStore(settings_file or settings_path())
    if not no_save:
        return file_store
    # Read-only run: seed an in-memory copy so saved defaults still apply
    saved = load_settings(file_store)
    store = MemoryStore()
    values = (saved.reward_to_risk_ratio, saved.risk_percentage, saved.account_balance)
    for key, value in zip(SETTINGS_KEYS, values):
        if value is not None:
            store.set(key, format_stored_number(value))
    return store


def run(form: FormValues, store: KeyValueStore) -> TradeResult:
    session = CalculatorSession(store)
    outcome = session.calculate(form)
    if not outcome.ok:
        raise SystemExit(f"Cannot size trade: {outcome.message}")

    result = outcome.result
    print(render_text_panel(result))
    print(f"\n{take_profit_hint(result.direction)}")
    return result


def main(argv: Optional[List[str]] = None):
    args = parse_args(argv)
    setup_logging(args.log_level)
    try:
        store = _build_store(args.settings_file, args.no_save)
    except SettingsError as exc:
        raise SystemExit(str(exc)) from exc
    form = FormValues(
        entry_price=args.entry,
        stop_loss=args.stop,
        account_balance=args.balance,
        risk_percentage=args.risk_pct,
        reward_to_risk_ratio=args.ratio,
    )
    try:
        run(form, store)
    except SettingsError as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
