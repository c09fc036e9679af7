"""Word-sized modular arithmetic kernel for GF(p).

API
---
word_mask(width)                    -> 2**width - 1
narrow(x, width)                    -> x truncated to width bits
mul_mod(a, b, modulus, width)       -> a * b mod modulus
mod_pow(base, exp, modulus, width)  -> base**exp mod modulus
is_prime(n)                         -> bool
check_modulus(p, width)             -> p, or raises InvalidModulusError

Every product of two field values goes through ``mul_mod``: the operands
each fit in one ``width``-bit word, the product is formed in a
``2 * width``-bit intermediate and only then reduced and narrowed.
"""

from __future__ import annotations

import functools

from primefield.config import (
    DEFAULT_WIDTH,
    MILLER_RABIN_BASES,
    TRIAL_DIVISION_LIMIT,
    WORD_WIDTHS,
)
from primefield.gf.errors import InvalidModulusError


def word_mask(width: int) -> int:
    """All-ones mask for a *width*-bit word."""
    if width not in WORD_WIDTHS:
        raise ValueError(f"Unsupported word width: {width} (expected one of {WORD_WIDTHS})")
    return (1 << width) - 1


def narrow(x: int, width: int) -> int:
    """Truncate *x* to its low *width* bits."""
    return x & word_mask(width)


def mul_mod(a: int, b: int, modulus: int, width: int = DEFAULT_WIDTH) -> int:
    """Multiply two word-sized values modulo *modulus*."""
    wide = a * b  # 2*width-bit intermediate
    if wide >> (2 * width):
        raise OverflowError(f"operands {a}, {b} do not fit in a {width}-bit word")
    return narrow(wide % modulus, width)


def mod_pow(base: int, exp: int, modulus: int, width: int = DEFAULT_WIDTH) -> int:
    """Binary (square-and-multiply) exponentiation.

    ``exp == 0`` yields 1 for every base, including 0.
    """
    if exp < 0:
        raise ValueError(f"Exponent must be non-negative, got {exp}")
    result = 1 % modulus
    base_power = base % modulus
    while exp > 0:
        if exp & 1:
            result = mul_mod(result, base_power, modulus, width)
        base_power = mul_mod(base_power, base_power, modulus, width)
        exp >>= 1
    return result


# ---------------------------------------------------------------------------
# Primality
# ---------------------------------------------------------------------------


def _trial_division(n: int) -> bool:
    if n < 2:
        return False
    if n % 2 == 0:
        return n == 2
    i = 3
    while i * i <= n:
        if n % i == 0:
            return False
        i += 2
    return True


def _miller_rabin(n: int) -> bool:
    # Deterministic for every n < 3.3 * 10**24 with the first twelve primes
    # as witnesses.
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for a in MILLER_RABIN_BASES:
        if a % n == 0:
            continue
        x = mod_pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = mul_mod(x, x, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def is_prime(n: int) -> bool:
    """Return True iff *n* is prime.  Defined for n < 2**64."""
    if n < TRIAL_DIVISION_LIMIT:
        return _trial_division(n)
    if n > word_mask(64):
        raise ValueError(f"{n} is beyond 64-bit words")
    if n % 2 == 0:
        return False
    return _miller_rabin(n)


# Field types are checked once per (modulus) when they are defined.
is_prime_cached = functools.lru_cache(maxsize=None)(is_prime)


def check_modulus(p: object, width: int = DEFAULT_WIDTH, *, cached: bool = False) -> int:
    """Validate *p* as the modulus of a *width*-bit prime field."""
    if isinstance(p, bool) or not isinstance(p, int):
        raise InvalidModulusError(p, "is not an integer")
    if p > word_mask(width):
        raise InvalidModulusError(p, f"does not fit in a {width}-bit word")
    prime = is_prime_cached(p) if cached else is_prime(p)
    if not prime:
        raise InvalidModulusError(p, "is not a prime number")
    return p
