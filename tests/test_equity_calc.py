import importlib.util
from pathlib import Path

import pytest

from holdem_equity.engine import rank_table

_SPEC = importlib.util.spec_from_file_location(
    "equity_calc", Path(__file__).resolve().parents[1] / "scripts" / "equity_calc.py"
)
equity_calc = importlib.util.module_from_spec(_SPEC)
_SPEC.loader.exec_module(equity_calc)


def test_prob_command(capsys):
    assert equity_calc.main(["prob", "AA"]) == 0
    assert capsys.readouterr().out.strip() == "P(AA) 0.004525"


def test_bad_token_reports_error(capsys):
    assert equity_calc.main(["prob", "AAs"]) == 1
    assert capsys.readouterr().out.startswith("error:")


def test_equity_command(monkeypatch, capsys, identity_table):
    monkeypatch.setattr(rank_table, "_TABLE", identity_table)
    assert equity_calc.main(["equity", "Th 9d", "--board", "2c 5d 8h Js Kc"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("equity ")
    assert 0.0 <= float(out.split()[1]) <= 1.0


def test_missing_table(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr(rank_table, "_TABLE", None)
    assert equity_calc.main(["--table", str(tmp_path / "x.dat"), "rank", "Ah Kh Qh Jh Th"]) == 1
    assert "not found" in capsys.readouterr().out


def test_requires_command():
    with pytest.raises(SystemExit):
        equity_calc.main([])


def test_unknown_log_level_is_a_usage_error():
    with pytest.raises(SystemExit) as exc:
        equity_calc.main(["--log-level", "BOGUS", "prob", "AA"])
    assert exc.value.code == 2


def test_log_level_is_case_insensitive():
    assert equity_calc.main(["--log-level", "debug", "prob", "AA"]) == 0
