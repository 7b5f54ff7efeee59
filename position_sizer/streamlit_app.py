"""Streamlit UI for sizing a trade and keeping the reusable settings between sessions."""

from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

# Ensure project root is on sys.path when launched via `streamlit run`
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from position_sizer.config import InputLimits, settings_path
from position_sizer.display import preview_heights, result_rows, take_profit_hint
from position_sizer.logging_config import setup_logging
from position_sizer.session import CalculatorSession, FormValues
from position_sizer.settings import JsonFileStore
from position_sizer.sizing import Direction, TradeResult

LIMITS = InputLimits()


@st.cache_resource(show_spinner=False)
def _configure_logging():
    setup_logging("INFO")


def get_session() -> CalculatorSession:
    if "calculator" not in st.session_state:
        st.session_state["calculator"] = CalculatorSession(JsonFileStore(settings_path()))
    return st.session_state["calculator"]


def clear_form():
    for key in ("entry_price", "stop_loss"):
        st.session_state[key] = None
    get_session().clear()


def render_preview(result: TradeResult):
    tp_pct, sl_pct = preview_heights(result.trade.reward_to_risk_ratio)
    reward = f'<div style="height:{tp_pct:.1f}%;background:#d9f7be;padding:4px">Take profit / total profit</div>'
    risk = f'<div style="height:{sl_pct:.1f}%;background:#ffccc7;padding:4px">Stop loss / total risk</div>'
    entry = '<div style="border-top:2px dashed #595959"></div>'
    # Short trades draw the stop above the entry
    parts = [reward, entry, risk] if result.direction is Direction.LONG else [risk, entry, reward]
    st.markdown(
        f'<div style="height:240px;width:220px;border:1px solid #ddd">{"".join(parts)}</div>',
        unsafe_allow_html=True,
    )


def render_result(result: TradeResult):
    st.subheader("Trade details")
    color = "blue" if result.direction is Direction.LONG else "red"
    st.markdown(f"Trade type: :{color}[**{result.direction.value}**]")

    left, right = st.columns(2)
    rows = result_rows(result)
    for idx, (label, display, copy_value) in enumerate(rows[1:]):
        col = left if idx < 4 else right
        col.caption(f"{label}: **{display}**")
        # st.code renders a copy-to-clipboard button
        col.code(copy_value, language=None)
        if label == "Take profit":
            col.caption(take_profit_hint(result.direction))

    render_preview(result)

    csv = result.to_frame().to_csv().encode("utf-8")
    st.download_button("Download trade CSV", data=csv, file_name="position.csv", mime="text/csv")


def main():
    _configure_logging()
    session = get_session()
    saved = session.saved

    st.title("Risk management - trade calculator")

    c1, c2 = st.columns(2)
    entry = c1.number_input(
        "Entry price", min_value=LIMITS.entry_min, max_value=LIMITS.entry_max, value=None, key="entry_price"
    )
    stop = c2.number_input("Stop loss", min_value=0.0, value=None, key="stop_loss")

    with st.expander("Saved settings", expanded=session.settings_open):
        ratio = st.number_input(
            "Reward/risk ratio (x : 1)",
            min_value=LIMITS.ratio_min,
            max_value=LIMITS.ratio_max,
            step=LIMITS.ratio_step,
            value=LIMITS.prefill(saved.reward_to_risk_ratio, LIMITS.ratio_min, LIMITS.ratio_max),
            key="reward_to_risk_ratio",
        )
        risk_pct = st.number_input(
            "Portfolio risk (%)",
            min_value=LIMITS.risk_pct_min,
            max_value=LIMITS.risk_pct_max,
            step=LIMITS.risk_pct_step,
            value=LIMITS.prefill(saved.risk_percentage, LIMITS.risk_pct_min, LIMITS.risk_pct_max),
            key="risk_percentage",
        )
        balance = st.number_input(
            "Portfolio balance ($)",
            min_value=LIMITS.balance_min,
            max_value=LIMITS.balance_max,
            value=LIMITS.prefill(saved.account_balance, LIMITS.balance_min, LIMITS.balance_max),
            key="account_balance",
        )

    b1, b2 = st.columns([1, 4])
    calculate = b1.button("Calculate", type="primary")
    b2.button("Clear", on_click=clear_form)

    if calculate:
        outcome = session.calculate(
            FormValues(
                entry_price=entry,
                stop_loss=stop,
                account_balance=balance,
                risk_percentage=risk_pct,
                reward_to_risk_ratio=ratio,
            )
        )
        if not outcome.ok:
            st.toast(outcome.message, icon="⚠️")
            st.warning(outcome.message)

    if session.last_result is not None:
        render_result(session.last_result)


if __name__ == "__main__":
    main()
