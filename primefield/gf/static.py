"""GF(p) elements whose modulus is fixed when the field type is defined.

A field is a subclass of ``StaticFieldElement`` with class attributes
``MODULUS`` and ``WIDTH``.  The modulus is validated while the class
statement runs, so an invalid field never becomes a usable type:

    class F7(StaticFieldElement):
        MODULUS = 7
        WIDTH = 32

    F7(3) + F7(5) == F7(1)

``gf(p, width)`` builds (and caches) such a class on the fly.
"""

from __future__ import annotations

import functools
import logging
from typing import ClassVar, Type

from primefield.config import DEFAULT_WIDTH
from primefield.gf.element import FieldElementBase
from primefield.gf.kernel import check_modulus

logger = logging.getLogger(__name__)

_FROZEN = ("MODULUS", "WIDTH")


class _FieldType(type):
    """Metaclass freezing MODULUS and WIDTH once a field class is defined."""

    def __setattr__(cls, name, value):
        if name in _FROZEN:
            raise AttributeError(f"{cls.__name__}.{name} is fixed when the field is defined")
        super().__setattr__(name, value)

    def __delattr__(cls, name):
        if name in _FROZEN:
            raise AttributeError(f"{cls.__name__}.{name} is fixed when the field is defined")
        super().__delattr__(name)


class StaticFieldElement(FieldElementBase, metaclass=_FieldType):
    MODULUS: ClassVar[int]
    WIDTH: ClassVar[int] = DEFAULT_WIDTH

    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if "MODULUS" not in cls.__dict__ and "WIDTH" not in cls.__dict__:
            return
        if not hasattr(cls, "MODULUS"):
            return
        check_modulus(cls.MODULUS, cls.WIDTH, cached=True)
        logger.debug({"action": "define_field", "field": cls.__name__, "modulus": cls.MODULUS, "width": cls.WIDTH})

    def __init__(self, value: int = 0) -> None:
        cls = type(self)
        if not hasattr(cls, "MODULUS"):
            raise TypeError(f"{cls.__name__} has no MODULUS; subclass it or use gf()")
        if isinstance(value, StaticFieldElement):
            value = self._c(value)
        elif not isinstance(value, int):
            raise TypeError(f"expected int or {cls.__name__}, got {type(value).__name__}")
        self.value = value % cls.MODULUS

    @classmethod
    def zero(cls):
        return cls(0)

    @classmethod
    def one(cls):
        return cls(1)

    @property
    def modulus(self) -> int:
        return type(self).MODULUS

    @property
    def width(self) -> int:
        return type(self).WIDTH

    def _new(self, value: int):
        cls = type(self)
        obj = cls.__new__(cls)
        obj.value = value
        return obj

    def _same_field(self, other: FieldElementBase) -> bool:
        return type(other) is type(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value})"


def gf(prime: int, width: int = DEFAULT_WIDTH) -> Type[StaticFieldElement]:
    """Return the element type of GF(*prime*) on *width*-bit words.

    Raises ``InvalidModulusError`` if *prime* is not a prime that fits in
    the word.  Repeated calls with the same arguments return the same class.
    """
    check_modulus(prime, width, cached=True)
    return _gf(prime, width)


@functools.lru_cache(maxsize=None)
def _gf(prime: int, width: int) -> Type[StaticFieldElement]:
    name = f"GF{width}_{prime}"
    return _FieldType(name, (StaticFieldElement,), {"MODULUS": prime, "WIDTH": width, "__slots__": ()})


def gf32(prime: int) -> Type[StaticFieldElement]:
    """GF(*prime*) on 32-bit words."""
    return gf(prime, 32)


def gf64(prime: int) -> Type[StaticFieldElement]:
    """GF(*prime*) on 64-bit words."""
    return gf(prime, 64)
