#!/usr/bin/env python3
"""Interactive GF(p) calculator.

Usage:
    python -m primefield.calculator.cli

Asks for a prime modulus until one is accepted, then evaluates one
expression per line:

    3 + 5        (also - * / ^)
    inv 3
    neg 3
    quit
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Tuple

from primefield.calculator.evaluate import SYMBOLS, UNARY_OPS, evaluate
from primefield.config import LOG_FORMAT, LOG_LEVEL
from primefield.gf.dynamic import DynamicField
from primefield.gf.errors import FieldError

logger = logging.getLogger(__name__)

MODULUS_PROMPT = "Enter prime modulus p: "
EXPR_PROMPT = "> "
QUIT_WORDS = ("quit", "exit")


def read_modulus(field: DynamicField, stdin: TextIO, stdout: TextIO) -> Optional[int]:
    """Prompt until *field* accepts a modulus.  Returns None on EOF."""
    while True:
        stdout.write(MODULUS_PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return None
        text = line.strip()
        try:
            candidate = int(text)
            if candidate < 1:
                raise ValueError(text)
        except ValueError:
            stdout.write(" Invalid input: Expected a positive integer.\n\n")
            continue
        try:
            field.set_modulus(candidate)
        except FieldError as exc:
            stdout.write(f" Invalid modulus: {exc}\n\n")
            continue
        return candidate


def parse_expression(line: str) -> Tuple[str, int, Optional[int]]:
    """Split ``"a op b"`` or ``"op a"`` into ``(op, a, b)``."""
    tokens = line.split()
    if len(tokens) == 2 and tokens[0] in UNARY_OPS:
        return tokens[0], int(tokens[1]), None
    if len(tokens) == 3 and tokens[1] in SYMBOLS:
        return SYMBOLS[tokens[1]], int(tokens[0]), int(tokens[2])
    raise ValueError(f"Cannot parse expression: {line.strip()!r}")


def run(field: Optional[DynamicField] = None, stdin: TextIO = sys.stdin, stdout: TextIO = sys.stdout) -> int:
    if field is None:
        field = DynamicField()
    modulus = read_modulus(field, stdin, stdout)
    if modulus is None:
        return 1
    stdout.write(f"Working in GF({modulus})\n")
    while True:
        stdout.write(EXPR_PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line or line.strip() in QUIT_WORDS:
            return 0
        if not line.strip():
            continue
        try:
            op, a, b = parse_expression(line)
            result = evaluate(field, op, a, b)
        except FieldError as exc:
            stdout.write(f"Error: {exc}\n")
            continue
        except ValueError as exc:
            stdout.write(f"Invalid input: {exc}\n")
            continue
        logger.debug({"action": "evaluate", "op": op, "a": a, "b": b, "result": result.value})
        stdout.write(f"{result}\n")


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, stream=sys.stderr)
    sys.exit(run())


if __name__ == "__main__":
    main()
