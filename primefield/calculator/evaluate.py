"""Operation dispatch shared by the calculator front ends.

Binary ops:  add sub mul div pow
Unary ops:   inv neg
"""

from __future__ import annotations

from typing import Optional

from primefield.gf.dynamic import DynamicField, DynamicFieldElement

BINARY_OPS = ("add", "sub", "mul", "div", "pow")
UNARY_OPS = ("inv", "neg")

# infix symbols accepted by the interactive calculator
SYMBOLS = {"+": "add", "-": "sub", "*": "mul", "/": "div", "^": "pow"}


def evaluate(field: DynamicField, op: str, a: int, b: Optional[int] = None) -> DynamicFieldElement:
    """Apply *op* to the operands in *field*.

    ``pow`` takes *b* as a plain exponent rather than a field element.
    Field errors (division by zero) propagate to the caller.
    """
    x = field(a)
    if op in UNARY_OPS:
        if op == "inv":
            return x.inverse()
        return -x
    if op not in BINARY_OPS:
        raise ValueError(f"Unknown operation '{op}'")
    if b is None:
        raise ValueError(f"Operation '{op}' needs two operands")
    if op == "pow":
        return x.pow(b)
    y = field(b)
    if op == "add":
        return x + y
    if op == "sub":
        return x - y
    if op == "mul":
        return x * y
    return x / y
