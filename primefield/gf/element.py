"""Arithmetic shared by every GF(p) element type.

``FieldElementBase`` implements the operator surface once; a concrete
element type only says where its modulus and word width come from, how
to build a new element of the same field, and which other elements
belong to that field.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from primefield.gf.errors import FieldZeroDivisionError
from primefield.gf.kernel import mod_pow, mul_mod


@runtime_checkable
class FieldElementType(Protocol):
    """Operation set a consumer generic over "any field element" relies on."""

    value: int

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __truediv__(self, other): ...
    def __iadd__(self, other): ...
    def __isub__(self, other): ...
    def __imul__(self, other): ...
    def __itruediv__(self, other): ...
    def inverse(self): ...
    def pow(self, exp: int): ...
    def __eq__(self, other) -> bool: ...


class FieldElementBase:
    """An integer ``value`` kept in ``[0, modulus)``."""

    __slots__ = ("value",)

    value: int

    # ---- hooks for concrete element types ----

    @property
    def modulus(self) -> int:
        raise NotImplementedError

    @property
    def width(self) -> int:
        raise NotImplementedError

    def _new(self, value: int):
        """Wrap an already-reduced *value* in an element of this field."""
        raise NotImplementedError

    def _same_field(self, other: "FieldElementBase") -> bool:
        raise NotImplementedError

    # ---- helpers ----

    def _c(self, other) -> Optional[int]:
        """Coerce *other* to a reduced value of this field (None if unsupported)."""
        if isinstance(other, FieldElementBase):
            if not self._same_field(other):
                raise TypeError(
                    f"cannot combine {type(self).__name__} (mod {self.modulus}) with "
                    f"{type(other).__name__} (mod {other.modulus}): different fields"
                )
            return other.value
        if isinstance(other, int):
            return other % self.modulus
        return None

    def _inverse_of(self, v: int) -> int:
        # Fermat: v^(p-2) == v^-1 (mod p) for prime p.
        if v == 0:
            raise FieldZeroDivisionError()
        return mod_pow(v, self.modulus - 2, self.modulus, self.width)

    def _add(self, a: int, b: int) -> int:
        return (a + b) % self.modulus

    def _sub(self, a: int, b: int) -> int:
        # the added modulus keeps the intermediate non-negative
        return (self.modulus + a - b) % self.modulus

    def _mul(self, a: int, b: int) -> int:
        return mul_mod(a, b, self.modulus, self.width)

    # ---- arithmetic ----

    def __add__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        return self._new(self._add(self.value, v))

    __radd__ = __add__

    def __sub__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        return self._new(self._sub(self.value, v))

    def __rsub__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        return self._new(self._sub(v, self.value))

    def __mul__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        return self._new(self._mul(self.value, v))

    __rmul__ = __mul__

    def __truediv__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        return self._new(self._mul(self.value, self._inverse_of(v)))

    def __rtruediv__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        return self._new(self._mul(v, self._inverse_of(self.value)))

    def __neg__(self):
        return self._new(self._sub(0, self.value))

    def __pos__(self):
        return self._new(self.value)

    def inverse(self):
        """Multiplicative inverse; raises ``FieldZeroDivisionError`` for zero."""
        return self._new(self._inverse_of(self.value))

    def pow(self, exp: int):
        """``self ** exp`` for a non-negative integer exponent."""
        if isinstance(exp, bool) or not isinstance(exp, int):
            raise TypeError(f"exponent must be an int, got {type(exp).__name__}")
        return self._new(mod_pow(self.value, exp, self.modulus, self.width))

    def __pow__(self, exp, mod=None):
        if mod is not None or not isinstance(exp, int):
            return NotImplemented
        return self.pow(exp)

    # ---- in-place forms: mutate self, return self ----

    def __iadd__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        self.value = self._add(self.value, v)
        return self

    def __isub__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        self.value = self._sub(self.value, v)
        return self

    def __imul__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        self.value = self._mul(self.value, v)
        return self

    def __itruediv__(self, other):
        v = self._c(other)
        if v is None:
            return NotImplemented
        self.value = self._mul(self.value, self._inverse_of(v))
        return self

    # ---- comparison / conversion ----

    def __eq__(self, other) -> bool:
        if isinstance(other, FieldElementBase):
            return self._same_field(other) and self.value == other.value
        if isinstance(other, int):
            return self.value == other % self.modulus
        return NotImplemented

    # mutable through the in-place operators
    __hash__ = None

    def __bool__(self) -> bool:
        return self.value != 0

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    def copy(self):
        """An independent element with the same value in the same field."""
        return self._new(self.value)
