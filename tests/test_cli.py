import io
from pathlib import Path

import pandas as pd

from stockdesk.cli import main, run_interactive
from stockdesk.core.data import ReferenceTable
from stockdesk.core.formatting import INVALID_INPUT_MESSAGE, WELCOME_MESSAGE
from stockdesk.core.types import ProfitAlgorithm, StockQuote


def test_one_shot_part1(capsys):
    assert main(["-part1", "FB:1"]) == 0
    out = capsys.readouterr().out.strip()
    assert out.startswith("The queried portfolio is worth $")


def test_one_shot_bonus(capsys):
    assert main(["-bonus", "7,1,5,3,6,4"]) == 0
    assert capsys.readouterr().out.strip() == "Buy on day 2 and sell on day 5 for a profit of $5.00."


def test_one_shot_invalid_mode(capsys):
    assert main(["-foo", "x"]) == 0
    assert capsys.readouterr().out.strip() == INVALID_INPUT_MESSAGE


def test_no_command_prints_usage(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert WELCOME_MESSAGE in out
    assert "-part1" in out


def test_custom_data_and_algorithm(tmp_path: Path, capsys):
    json_path = tmp_path / "stocks.json"
    pd.DataFrame({"ticker": ["ZZZ"], "close": [2.5]}).to_json(json_path, orient="records")

    assert main(["--data", str(json_path), "-part1", "ZZZ:4"]) == 0
    assert capsys.readouterr().out.strip() == "The queried portfolio is worth $10.00."

    assert main(["--algorithm", "linear-scan", "-part2", "2,9,1,3"]) == 0
    assert "profit of $7.00" in capsys.readouterr().out


def test_env_algorithm(monkeypatch, capsys):
    monkeypatch.setenv("STOCKDESK_PROFIT_ALGORITHM", "linear-scan")
    assert main(["-part2", "2,9,1,3"]) == 0
    assert "profit of $7.00" in capsys.readouterr().out


def test_missing_data_file_exits_1(tmp_path: Path, capsys):
    assert main(["--data", str(tmp_path / "missing.json"), "-part1", "FB:1"]) == 1
    assert "Error" in capsys.readouterr().err


def test_list_tickers(capsys):
    assert main(["--list-tickers"]) == 0
    out = capsys.readouterr().out
    assert "PLTR" in out
    assert "$" in out
    assert "2022-12-30" in out


def test_check_data(capsys):
    assert main(["--check-data"]) == 0
    out = capsys.readouterr().out
    assert "Rows: 21" in out
    assert "As of: 2022-12-30" in out
    assert "FB, " in out


def test_check_data_reports_bad_file(tmp_path: Path, capsys):
    json_path = tmp_path / "bad.json"
    pd.DataFrame({"ticker": ["A"], "price": [1.0]}).to_json(json_path, orient="records")
    assert main(["--data", str(json_path), "--check-data"]) == 1
    assert "Missing required columns" in capsys.readouterr().err


def test_interactive_session():
    table = ReferenceTable([StockQuote("FB", 10.0)])
    lines = iter(["-part1 FB:2", "", "reset", "-nope", "quit", "-part1 FB:3"])
    out = io.StringIO()

    run_interactive(table, ProfitAlgorithm.GLOBAL_MIN, read_line=lambda _prompt: next(lines), out=out)

    assert out.getvalue().splitlines() == [
        WELCOME_MESSAGE,
        "The queried portfolio is worth $20.00.",
        WELCOME_MESSAGE,
        INVALID_INPUT_MESSAGE,
    ]


def test_interactive_stops_on_eof():
    table = ReferenceTable([StockQuote("FB", 10.0)])

    def read_line(_prompt):
        raise EOFError

    out = io.StringIO()
    run_interactive(table, ProfitAlgorithm.GLOBAL_MIN, read_line=read_line, out=out)
    assert out.getvalue().strip() == WELCOME_MESSAGE


def test_interactive_defaults_to_current_stdout(capsys):
    table = ReferenceTable([StockQuote("FB", 10.0)])
    lines = iter(["-part1 FB:1", "exit"])
    run_interactive(table, ProfitAlgorithm.GLOBAL_MIN, read_line=lambda _prompt: next(lines))
    assert capsys.readouterr().out.splitlines() == [WELCOME_MESSAGE, "The queried portfolio is worth $10.00."]
