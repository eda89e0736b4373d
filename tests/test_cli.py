import pytest

from rpncalc.cli import main
from rpncalc.rpn import evaluate


def test_prints_result(capsys):
    expression = "8 9 * 9 - 9 - 9 - 4 - 1 +"
    assert main([expression]) == 0
    captured = capsys.readouterr()
    assert captured.out == f"{evaluate(expression)}\n"
    assert captured.err == ""


@pytest.mark.parametrize("argv", [[], ["1", "2"]])
def test_usage_on_wrong_argument_count(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Usage: ")
    assert captured.err.endswith('"RPN expression"\n')


def test_invalid_expression_reports_error(capsys):
    assert main(["(1 + 1)"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error: Invalid RPN expression\n"
    assert captured.out == ""


def test_division_by_zero_reports_error(capsys):
    assert main(["1 0 /"]) == 1
    assert capsys.readouterr().err == "Error: Division by zero\n"