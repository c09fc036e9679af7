"""The scripted demo, driven against an in-process service."""

from fastapi.testclient import TestClient

from primefield.calculator.app import create_app
from primefield.demo import run_demo
from primefield.gf.dynamic import DynamicField


def test_demo_runs_clean(capsys):
    field = DynamicField(2**31 - 1)
    client = TestClient(create_app(field))
    assert run_demo.main(client) == 0
    out = capsys.readouterr().out
    assert "DEMO COMPLETE" in out
    assert "✗" not in out
    assert field.modulus == run_demo.LARGE_PRIME
