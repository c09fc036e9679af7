"""Error types raised by field construction and field arithmetic."""

from __future__ import annotations


class FieldError(Exception):
    """Base class for every error raised by a prime field."""


class InvalidModulusError(FieldError, ValueError):
    """The candidate modulus is not a prime that fits in the field's word."""

    def __init__(self, modulus: object, reason: str) -> None:
        self.modulus = modulus
        self.reason = reason
        super().__init__(f"{modulus!r} {reason}")


class FieldZeroDivisionError(FieldError, ZeroDivisionError):
    """Zero has no multiplicative inverse."""

    def __init__(self, message: str = "Division by zero!") -> None:
        super().__init__(message)
