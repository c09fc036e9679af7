"""Tests for the modular arithmetic kernel and primality check."""

import random

import pytest

from primefield.gf import kernel
from primefield.gf.errors import InvalidModulusError


def test_mod_pow_basic():
    assert kernel.mod_pow(2, 10, 1000) == 24
    assert kernel.mod_pow(3, 4, 7) == 4  # 81 = 11*7 + 4


def test_mod_pow_zero_exponent():
    assert kernel.mod_pow(5, 0, 7) == 1
    assert kernel.mod_pow(0, 0, 7) == 1


def test_mod_pow_zero_base():
    assert kernel.mod_pow(0, 5, 7) == 0


def test_mod_pow_base_above_modulus():
    assert kernel.mod_pow(9, 2, 7) == 4


def test_mod_pow_negative_exponent():
    with pytest.raises(ValueError):
        kernel.mod_pow(2, -1, 7)


def test_mod_pow_matches_builtin():
    rng = random.Random(0)
    p = 2**61 - 1
    for _ in range(32):
        b = rng.randrange(0, p)
        e = rng.randrange(0, 2**64)
        assert kernel.mod_pow(b, e, p) == pow(b, e, p)


def test_mul_mod_near_word_limit():
    p = 2**63 - 25
    a = p - 1
    b = p - 2
    assert kernel.mul_mod(a, b, p, 64) == (a * b) % p
    assert kernel.mul_mod(a, a, p, 64) == 1


def test_mul_mod_32_bit():
    p = 2**32 - 5
    assert kernel.mul_mod(p - 1, p - 1, p, 32) == 1


def test_mul_mod_rejects_oversized_operands():
    with pytest.raises(OverflowError):
        kernel.mul_mod(2**32, 2**32, 7, 32)


def test_narrow():
    assert kernel.narrow(2**64 + 5, 64) == 5
    assert kernel.narrow(2**32 + 9, 32) == 9


def test_word_mask_unsupported_width():
    with pytest.raises(ValueError):
        kernel.word_mask(16)


@pytest.mark.parametrize("n", [2, 3, 5, 7, 97, 7919, 2**31 - 1, 2**32 - 5])
def test_is_prime_small_primes(n):
    assert kernel.is_prime(n)


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 91, 561, 7917, 2**31])
def test_is_prime_small_composites(n):
    assert not kernel.is_prime(n)


@pytest.mark.parametrize("n", [2**61 - 1, 2**63 - 25, 2**64 - 59])
def test_is_prime_large_primes(n):
    assert kernel.is_prime(n)


@pytest.mark.parametrize(
    "n",
    [
        2**32 + 1,  # 641 * 6700417
        2**62,
        2**64 - 1,
        3825123056546413051,  # strong pseudoprime to bases 2..23
    ],
)
def test_is_prime_large_composites(n):
    assert not kernel.is_prime(n)


def test_is_prime_agrees_with_trial_division():
    for n in range(200):
        expected = n >= 2 and all(n % d for d in range(2, n))
        assert kernel.is_prime(n) == expected


def test_check_modulus_accepts_prime():
    assert kernel.check_modulus(7, 32) == 7
    assert kernel.check_modulus(2**63 - 25, 64, cached=True) == 2**63 - 25


@pytest.mark.parametrize("p", [0, 1, 4, 100])
def test_check_modulus_rejects_composite(p):
    with pytest.raises(InvalidModulusError) as info:
        kernel.check_modulus(p)
    assert info.value.modulus == p


def test_check_modulus_rejects_too_wide():
    with pytest.raises(InvalidModulusError, match="32-bit"):
        kernel.check_modulus(2**32 + 15, 32)


@pytest.mark.parametrize("p", ["7", 7.0, True, None])
def test_check_modulus_rejects_non_int(p):
    with pytest.raises(InvalidModulusError):
        kernel.check_modulus(p)


def test_invalid_modulus_is_value_error():
    with pytest.raises(ValueError):
        kernel.check_modulus(4)
