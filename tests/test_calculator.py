import math

import pytest

from position_sizer.sizing import (
    Direction,
    EqualPricesError,
    InvalidInputError,
    TradeInput,
    ZeroQuantityError,
    compute_position,
    trade_direction,
)


def make_trade(entry=100.0, stop=95.0, balance=10000.0, risk_pct=1.0, ratio=2.0) -> TradeInput:
    return TradeInput(
        entry_price=entry,
        stop_loss=stop,
        account_balance=balance,
        risk_percentage=risk_pct,
        reward_to_risk_ratio=ratio,
    )


def test_long_trade_example():
    result = compute_position(make_trade())
    assert result.direction is Direction.LONG
    assert result.risk_per_unit == 5
    assert result.risk_budget == pytest.approx(100)
    assert result.quantity == 20
    assert result.total_risk == pytest.approx(100)
    assert result.take_profit_price == pytest.approx(110)
    assert result.expected_profit == pytest.approx(200)


def test_short_trade_example():
    result = compute_position(make_trade(entry=50, stop=55, risk_pct=2, ratio=3))
    assert result.direction is Direction.SHORT
    assert result.risk_per_unit == 5
    assert result.risk_budget == pytest.approx(200)
    assert result.quantity == 40
    assert result.total_risk == pytest.approx(200)
    assert result.take_profit_price == pytest.approx(35)
    assert result.expected_profit == pytest.approx(600)


def test_equal_prices_rejected():
    with pytest.raises(EqualPricesError):
        compute_position(make_trade(entry=100, stop=100))


def test_budget_below_one_unit_rejected():
    with pytest.raises(ZeroQuantityError) as excinfo:
        compute_position(make_trade(entry=100, stop=99, balance=10, risk_pct=1))
    assert excinfo.value.risk_budget == pytest.approx(0.1)
    assert excinfo.value.risk_per_unit == pytest.approx(1)


@pytest.mark.parametrize(
    "field, value",
    [
        ("entry_price", 0.0),
        ("stop_loss", -1.0),
        ("account_balance", float("nan")),
        ("risk_percentage", float("inf")),
        ("reward_to_risk_ratio", None),
    ],
)
def test_invalid_inputs_name_the_field(field, value):
    kwargs = {
        "entry_price": 100.0,
        "stop_loss": 95.0,
        "account_balance": 10000.0,
        "risk_percentage": 1.0,
        "reward_to_risk_ratio": 2.0,
    }
    kwargs[field] = value
    with pytest.raises(InvalidInputError) as excinfo:
        compute_position(TradeInput(**kwargs))
    assert excinfo.value.field == field


def test_quantity_is_floored_and_never_overshoots_budget():
    result = compute_position(make_trade(entry=33.3, stop=31.7, balance=12345.0, risk_pct=1.5, ratio=2.5))
    assert isinstance(result.quantity, int)
    assert result.quantity == math.floor(185.175 / 1.6)
    assert result.total_risk <= result.risk_budget
    assert result.expected_profit / result.total_risk == pytest.approx(2.5)


@pytest.mark.parametrize(
    "entry, stop",
    [(100.0, 90.0), (100.0, 110.0), (0.5, 0.45), (0.5, 0.55), (2500.0, 2499.0)],
)
def test_take_profit_sits_on_the_reward_side(entry, stop):
    result = compute_position(make_trade(entry=entry, stop=stop, balance=1_000_000, ratio=1.5))
    assert (result.direction is Direction.LONG) == (stop < entry)
    if result.direction is Direction.LONG:
        assert result.take_profit_price > entry
    else:
        assert result.take_profit_price < entry


def test_compute_is_pure():
    trade = make_trade(entry=42.0, stop=40.5, ratio=3)
    assert compute_position(trade) == compute_position(trade)


def test_trade_direction_labels():
    assert trade_direction(100, 95) is Direction.LONG
    assert trade_direction(100, 105) is Direction.SHORT
    assert trade_direction(100, 100) is Direction.SHORT
    assert Direction.LONG.value == "Long"


def test_result_summary_frame():
    result = compute_position(make_trade())
    frame = result.to_frame()
    assert list(frame.columns) == ["value"]
    assert frame.loc["quantity", "value"] == 20
    assert frame.loc["direction", "value"] == "Long"
    assert set(result.to_dict()) == set(frame.index)
