"""Calculator and echo demo tests."""

import pytest

from aliasargs.demos import echo
from aliasargs.demos.calculator.main import main as calculator_main
from aliasargs.demos.calculator.divide import truncated_division


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["calculator", "add", "-f", "1", "-second", "34"], "35"),
        (["calculator", "add", "-f=1", "--second=34"], "35"),
        (["calculator", "subtract", "--first", "1", "-s", "34"], "-33"),
        (["calculator", "multiply", "-f=3", "--second=4"], "12"),
        (["calculator", "divide", "-f", "1", "-second", "34"], "0"),
        (["calculator", "divide", "-f=4", "--second=2"], "2"),
        (["calculator", "divide", "-f=-7", "--second=2"], "-3"),
    ],
)
def test_calculator(argv, expected, capsys):
    assert calculator_main(argv) == 0
    assert capsys.readouterr().out == f"{expected}\n"


def test_calculator_help_lists_operations(capsys):
    assert calculator_main(["calculator"]) == 0
    out = capsys.readouterr().out
    for name in ("add", "subtract", "multiply", "divide"):
        assert name in out


def test_calculator_missing_argument(capsys):
    assert calculator_main(["calculator", "add", "-f", "1"]) == 1
    assert "second integer argument" in capsys.readouterr().out


def test_divide_by_zero(caplog):
    assert calculator_main(["calculator", "divide", "-f", "1", "-s", "0"]) == 1
    assert "cannot divide by zero" in caplog.text


@pytest.mark.parametrize("a,b,expected", [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (0, 5, 0)])
def test_truncated_division(a, b, expected):
    assert truncated_division(a, b) == expected


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["simpleecho", "echo", "-s=example_string"], "example_string"),
        (["simpleecho", "echo", "--s", "example string"], "example string"),
        (["simpleecho", "echo", "--text", "hello"], "hello"),
        (["simpleecho", "echo"], "No string found!"),
    ],
)
def test_echo(argv, expected, capsys):
    assert echo.main(argv) == 0
    assert capsys.readouterr().out == f"{expected}\n"
