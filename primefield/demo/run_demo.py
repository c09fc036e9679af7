#!/usr/bin/env python3
"""primefield calculator demo.

Usage (after ``uvicorn primefield.calculator.app:app``):
    python -m primefield.demo.run_demo

The script:
1. Reads the service's active modulus.
2. Tries a non-prime modulus and shows it being rejected.
3. Switches the service to GF(7).
4. Runs the basic operations and checks them against a local static field.
5. Divides by zero to show the error path.
6. Switches to a 64-bit prime near 2**63 and multiplies large operands.
"""

from __future__ import annotations

import sys

import httpx

from primefield.config import SERVICE_URL
from primefield.gf.static import gf

LARGE_PRIME = 2**63 - 25  # largest prime below 2**63

GF7_CASES = [
    ("add", 3, 5),
    ("sub", 3, 5),
    ("mul", 3, 5),
    ("div", 3, 5),
    ("pow", 2, 10),
    ("inv", 3, None),
    ("neg", 3, None),
]


def banner(msg: str) -> None:
    print(f"\n{'='*60}")
    print(f"  {msg}")
    print(f"{'='*60}")


def _expected(field_cls, op: str, a: int, b: int | None) -> int:
    x = field_cls(a)
    if op == "inv":
        return x.inverse().value
    if op == "neg":
        return (-x).value
    if op == "pow":
        return x.pow(b).value
    y = field_cls(b)
    return {"add": x + y, "sub": x - y, "mul": x * y, "div": x / y}[op].value


def main(client: httpx.Client | None = None) -> int:
    owns_client = client is None
    if client is None:
        client = httpx.Client(base_url=SERVICE_URL, timeout=15.0)
    failures = 0

    # ---- 1. Current modulus ----
    banner("1) Active field")
    resp = client.get("/modulus")
    resp.raise_for_status()
    print(f"   {resp.json()}")

    # ---- 2. Rejected modulus ----
    banner("2) Configure a non-prime modulus")
    resp = client.put("/modulus", json={"modulus": 4})
    print(f"   PUT /modulus 4 → HTTP {resp.status_code}: {resp.json().get('detail')}")

    # ---- 3. GF(7) ----
    banner("3) Configure GF(7)")
    resp = client.put("/modulus", json={"modulus": 7})
    resp.raise_for_status()
    print(f"   {resp.json()}")

    # ---- 4. Operations ----
    banner("4) Evaluate in GF(7)")
    F7 = gf(7)
    for op, a, b in GF7_CASES:
        resp = client.post("/eval", json={"op": op, "a": a, "b": b})
        resp.raise_for_status()
        result = resp.json()["result"]
        expected = _expected(F7, op, a, b)
        match = "✓" if result == expected else "✗"
        failures += result != expected
        print(f"   {op}({a}, {b}) = {result}  (expected {expected}) {match}")

    # ---- 5. Division by zero ----
    banner("5) Divide by zero")
    resp = client.post("/eval", json={"op": "div", "a": 3, "b": 0})
    print(f"   div(3, 0) → HTTP {resp.status_code}: {resp.json().get('detail')}")

    # ---- 6. 64-bit field ----
    banner(f"6) Configure GF({LARGE_PRIME})")
    resp = client.put("/modulus", json={"modulus": LARGE_PRIME})
    resp.raise_for_status()
    a = b = LARGE_PRIME - 1
    resp = client.post("/eval", json={"op": "mul", "a": a, "b": b})
    resp.raise_for_status()
    result = resp.json()["result"]
    expected = (a * b) % LARGE_PRIME
    match = "✓" if result == expected else "✗"
    failures += result != expected
    print(f"   (p-1)*(p-1) = {result}  (expected {expected}) {match}")

    banner("DEMO COMPLETE" if not failures else f"DEMO FINISHED WITH {failures} MISMATCH(ES)")
    if owns_client:
        client.close()
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
