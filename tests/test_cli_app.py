import pytest

from trade_size.cli.app import USAGE, main, parse_arguments
from trade_size.exception.exception import ArgumentCountError, ArgumentParseError


def test_main_prints_both_tables_and_exits_zero(capsys):
    exit_code = main(["10000", "50", "45"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.err == ""
    assert "Inputs:" in captured.out
    assert "Outputs:" in captured.out
    assert "$10,000.00" in captured.out
    for pct in ("1.00", "1.25", "1.50", "1.75", "2.00"):
        assert pct in captured.out


@pytest.mark.parametrize("argv", [[], ["10000"], ["10000", "50"], ["10000", "50", "45", "1"]])
def test_wrong_argument_count_prints_usage_and_exits_one(capsys, argv):
    exit_code = main(argv)
    captured = capsys.readouterr()

    assert exit_code == 1
    assert captured.out == ""
    assert USAGE in captured.err


def test_non_numeric_price_names_the_argument(capsys):
    exit_code = main(["10000", "abc", "45"])
    captured = capsys.readouterr()

    assert exit_code != 0
    assert captured.out == ""
    assert "Error parsing 'price'" in captured.err


def test_parse_stops_at_first_bad_argument():
    with pytest.raises(ArgumentParseError) as excinfo:
        parse_arguments(["ten", "abc", "45"])
    assert excinfo.value.argument == "account_equity"


@pytest.mark.parametrize("raw", ["NaN", "inf", "-Infinity", ""])
def test_non_finite_values_are_parse_errors(raw):
    with pytest.raises(ArgumentParseError) as excinfo:
        parse_arguments(["10000", "50", raw])
    assert excinfo.value.argument == "stop_loss"


def test_argument_count_error_carries_usage():
    with pytest.raises(ArgumentCountError) as excinfo:
        parse_arguments(["1", "2"])
    assert str(excinfo.value) == USAGE


def test_zero_per_unit_risk_is_reported_without_tables(capsys):
    exit_code = main(["5000", "20", "20"])
    captured = capsys.readouterr()

    assert exit_code == 3
    assert captured.out == ""
    assert "Per-unit risk is zero" in captured.err


def test_huge_equity_reports_every_digit(capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "80")

    exit_code = main(["1e30", "50", "45"])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert captured.err == ""
    assert "$1,000,000,000,000,000,000,000,000,000,000.00" in captured.out
    assert "$10,000,000,000,000,000,000,000,000,000.00" in captured.out
    assert str(2 * 10**27) in captured.out
    assert "…" not in captured.out


def test_outputs_always_sweep_one_to_two_percent(capsys, isolated_settings, monkeypatch):
    isolated_settings.write_text('{"sizing": {"max_risk_pct": "3"}}', encoding="utf-8")
    monkeypatch.setenv("TRADE_SIZE_MAX_RISK_PCT", "3")
    monkeypatch.setenv("TRADE_SIZE_RISK_STEP_PCT", "0")

    exit_code = main(["10000", "50", "45"])
    captured = capsys.readouterr()

    assert exit_code == 0
    for pct in ("1.00", "1.25", "1.50", "1.75", "2.00"):
        assert pct in captured.out
    assert "3.00" not in captured.out
    assert "$300.00" not in captured.out
