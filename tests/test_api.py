import json

import pytest

from position_sizer import EqualPricesError, size_position
from position_sizer.main_calculator import main
from position_sizer.settings import MemoryStore


@pytest.fixture(autouse=True)
def quiet_logging(monkeypatch):
    monkeypatch.setattr("position_sizer.main_calculator.setup_logging", lambda *args, **kwargs: None)


def test_size_position_returns_result_and_display():
    output = size_position(100, 95, account_balance=10000, risk_percentage=1, reward_to_risk_ratio=2)
    result = output["result"]
    assert result.quantity == 20
    assert output["summary"].loc["total_risk", "value"] == pytest.approx(100)
    assert output["display"]["take_profit"] == "$110"
    assert output["display"]["ratio"] == "2 : 1"
    assert output["display"]["preview"][0] == pytest.approx(200 / 3)


def test_size_position_reads_and_writes_store():
    store = MemoryStore({"risk-ratio": "3", "risk-percentage": "2", "balance": "10000"})
    output = size_position(50, 55, store=store)
    assert output["result"].quantity == 40
    assert store.get("risk-ratio") == "3"


def test_size_position_raises_sizing_error():
    with pytest.raises(EqualPricesError):
        size_position(10, 10, account_balance=1000, risk_percentage=1, reward_to_risk_ratio=2)


def test_cli_saves_settings(tmp_path, capsys):
    path = tmp_path / "settings.json"
    args = ["--entry", "100", "--stop", "95", "--balance", "10000", "--risk-pct", "1", "--ratio", "2"]
    main(args + ["--settings-file", str(path)])

    assert "Quantity:     20" in capsys.readouterr().out
    assert json.loads(path.read_text(encoding="utf-8"))["balance"] == "10000"

    # second run relies on saved settings
    main(["--entry", "50", "--stop", "55", "--settings-file", str(path)])
    out = capsys.readouterr().out
    assert "Quantity:     20" in out
    assert "Short" in out


def test_cli_no_save_leaves_file_untouched(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"risk-ratio": "2", "risk-percentage": "1", "balance": "10000"}), encoding="utf-8")
    before = path.read_text(encoding="utf-8")

    main(["--entry", "100", "--stop", "95", "--balance", "5000", "--settings-file", str(path), "--no-save"])
    assert "Quantity:     10" in capsys.readouterr().out
    assert path.read_text(encoding="utf-8") == before


def test_cli_exits_on_sizing_error(tmp_path):
    path = tmp_path / "settings.json"
    with pytest.raises(SystemExit) as excinfo:
        main(["--entry", "100", "--stop", "100", "--balance", "1000", "--risk-pct", "1", "--ratio", "2",
              "--settings-file", str(path)])
    assert "equal" in str(excinfo.value)
    assert not path.exists()
