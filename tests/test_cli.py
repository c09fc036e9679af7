"""Tests for the interactive calculator."""

import io

import pytest

from primefield.calculator import cli
from primefield.gf.dynamic import DynamicField


def _run(text, field=None):
    stdout = io.StringIO()
    code = cli.run(field or DynamicField(), io.StringIO(text), stdout)
    return code, stdout.getvalue()


def test_modulus_prompt_retries():
    code, out = _run("abc\n0\n4\n7\nquit\n")
    assert code == 0
    assert out.count(cli.MODULUS_PROMPT) == 4
    assert out.count("Invalid input: Expected a positive integer.") == 2
    assert "Invalid modulus: 4 is not a prime number" in out
    assert "Working in GF(7)" in out


def test_modulus_applied_to_field():
    field = DynamicField()
    _run("13\n", field)
    assert field.modulus == 13


def test_eof_before_modulus():
    code, out = _run("")
    assert code == 1


def test_expressions():
    code, out = _run("7\n3 + 5\n3 - 5\n3 * 5\n3 / 5\n2 ^ 10\ninv 3\nneg 3\n")
    assert code == 0
    results = [line.strip() for line in out.split(cli.EXPR_PROMPT)[1:-1]]
    assert results == ["1", "5", "1", "2", "2", "5", "4"]


def test_division_by_zero_reported():
    code, out = _run("7\n3 / 0\n1 + 1\nexit\n")
    assert code == 0
    assert "Error: Division by zero!" in out
    assert "> 2\n" in out


def test_bad_expression_reported():
    code, out = _run("7\nfoo\n3 % 5\n\ninv\n")
    assert out.count("Invalid input: Cannot parse expression") == 3


def test_negative_exponent_reported():
    _, out = _run("7\n3 ^ -1\n")
    assert "Invalid input: Exponent must be non-negative" in out


@pytest.mark.parametrize(
    "line,parsed",
    [
        ("3 + 5", ("add", 3, 5)),
        ("  10 ^ 2 ", ("pow", 10, 2)),
        ("inv 4", ("inv", 4, None)),
        ("-1 * 2", ("mul", -1, 2)),
    ],
)
def test_parse_expression(line, parsed):
    assert cli.parse_expression(line) == parsed


def test_parse_expression_rejects_garbage():
    with pytest.raises(ValueError):
        cli.parse_expression("3 +")
