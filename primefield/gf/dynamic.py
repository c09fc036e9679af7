"""GF(p) elements whose modulus is chosen at run time.

A ``DynamicField`` is the field context: it holds the active modulus
(as an immutable ``FieldSpec``) and hands out elements bound to it.

    F = DynamicField()
    F.set_modulus(7)
    F(3) * F(5) == F(1)

Every element captures the ``FieldSpec`` active when it was built.  A
later ``set_modulus`` does not reinterpret existing elements; they stay
in their own field, and combining elements from two different specs is a
``TypeError``.

For the single-field workflow there is a process-wide default context:
``set_modulus(p)`` configures it and ``FieldElement(x)`` builds elements
of it.  Its modulus is ``DEFAULT_MODULUS`` (2) until configured.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from primefield.config import DEFAULT_MODULUS, DEFAULT_WIDTH
from primefield.gf.element import FieldElementBase
from primefield.gf.errors import InvalidModulusError
from primefield.gf.kernel import check_modulus

logger = logging.getLogger(__name__)


class FieldSpec(BaseModel):
    """Validated description of one prime field.

    Building a spec checks the modulus; a non-prime or over-wide modulus
    raises ``InvalidModulusError``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    modulus: int
    width: int = DEFAULT_WIDTH

    def __init__(self, **data) -> None:
        try:
            super().__init__(**data)
        except ValidationError as exc:
            # pydantic wraps validator errors; surface the field error itself
            for err in exc.errors():
                cause = err.get("ctx", {}).get("error")
                if isinstance(cause, InvalidModulusError):
                    raise cause from None
            raise

    @model_validator(mode="after")
    def _check_modulus(self) -> "FieldSpec":
        check_modulus(self.modulus, self.width, cached=True)
        return self

    @classmethod
    def of(cls, modulus: int, width: int = DEFAULT_WIDTH) -> "FieldSpec":
        """Validate *modulus* and build the spec (raises ``InvalidModulusError``)."""
        check_modulus(modulus, width, cached=True)
        return cls(modulus=modulus, width=width)


class DynamicFieldElement(FieldElementBase):
    """Element of the field described by ``field``."""

    __slots__ = ("field",)

    field: FieldSpec

    def __init__(self, value: int = 0, field: Optional[FieldSpec] = None) -> None:
        if field is None:
            field = _default.spec
        elif not isinstance(field, FieldSpec):
            raise TypeError(f"field must be a FieldSpec, got {type(field).__name__}")
        if not isinstance(value, int):
            raise TypeError(f"expected int, got {type(value).__name__}")
        self.field = field
        self.value = value % field.modulus

    @property
    def modulus(self) -> int:
        return self.field.modulus

    @property
    def width(self) -> int:
        return self.field.width

    def _new(self, value: int) -> "DynamicFieldElement":
        obj = DynamicFieldElement.__new__(DynamicFieldElement)
        obj.field = self.field
        obj.value = value
        return obj

    def _same_field(self, other: FieldElementBase) -> bool:
        return isinstance(other, DynamicFieldElement) and other.field == self.field

    def __repr__(self) -> str:
        return f"DynamicFieldElement({self.value}, modulus={self.field.modulus})"


class DynamicField:
    """A field context whose modulus can be (re)configured."""

    def __init__(self, modulus: int = DEFAULT_MODULUS, width: int = DEFAULT_WIDTH) -> None:
        self._lock = threading.Lock()
        self._spec = FieldSpec.of(modulus, width)

    @property
    def spec(self) -> FieldSpec:
        with self._lock:
            return self._spec

    @property
    def modulus(self) -> int:
        return self.spec.modulus

    @property
    def width(self) -> int:
        return self.spec.width

    def set_modulus(self, modulus: int) -> FieldSpec:
        """Switch to GF(*modulus*).

        Raises ``InvalidModulusError`` if *modulus* is not prime (or does
        not fit in the word); the active modulus is then left unchanged.
        """
        width = self.width
        try:
            spec = FieldSpec.of(modulus, width)
        except InvalidModulusError as exc:
            logger.warning({"action": "set_modulus", "status": "rejected", "modulus": modulus, "reason": exc.reason})
            raise
        with self._lock:
            previous = self._spec
            self._spec = spec
        logger.info({"action": "set_modulus", "status": "success", "previous": previous.modulus, "modulus": modulus})
        return spec

    def element(self, value: int = 0) -> DynamicFieldElement:
        """Reduce *value* into the currently active field."""
        return DynamicFieldElement(value, self.spec)

    __call__ = element

    def zero(self) -> DynamicFieldElement:
        return self.element(0)

    def one(self) -> DynamicFieldElement:
        return self.element(1)

    def __repr__(self) -> str:
        spec = self.spec
        return f"DynamicField(modulus={spec.modulus}, width={spec.width})"


# ---------------------------------------------------------------------------
# Process-wide default context
# ---------------------------------------------------------------------------

_default = DynamicField()

FieldElement = DynamicFieldElement


def default_field() -> DynamicField:
    return _default


def set_modulus(modulus: int) -> FieldSpec:
    """Configure the default field (see ``DynamicField.set_modulus``)."""
    return _default.set_modulus(modulus)


def get_modulus() -> int:
    return _default.modulus


def reset() -> None:
    """Return the default field to ``DEFAULT_MODULUS``."""
    _default.set_modulus(DEFAULT_MODULUS)
