"""Quantities whose dimensions are part of their type.

Each dimension vector gets exactly one :class:`StaticQuantity` subclass,
created on demand by :func:`quantity_type` and cached, so two static
quantities share a type if and only if their dimension vectors are equal.
Multiplying or dividing static quantities produces an instance of the type of
the combined dimensions; the value itself carries no dimensional bookkeeping.

Operations that are not defined for the operand types (adding a length to a
time, building a length from a bare number) raise :class:`TypeError`, the way
Python reports any unsupported operand combination. Converting a
:class:`~dimquant.core.quantity.DynamicQuantity` is the one runtime check and
raises :class:`~dimquant.core.dimensions.DimensionError` on mismatch.
"""

from __future__ import annotations

import threading
from typing import Any, ClassVar, Dict, Optional, Type

from .dimensions import UNRANKED, DimensionError, DimensionVector
from .quantity import BaseQuantity, DynamicQuantity, is_scalar

_TYPE_CACHE: Dict[DimensionVector, Type["StaticQuantity"]] = {}
_TYPE_LOCK = threading.Lock()


def quantity_type(dimensions: DimensionVector, name: Optional[str] = None) -> Type["StaticQuantity"]:
    """Return the static quantity type for ``dimensions``.

    ``name`` is only used when the type does not exist yet.
    """

    with _TYPE_LOCK:
        cached = _TYPE_CACHE.get(dimensions)
        if cached is None:
            cls_name = name or f"Quantity{dimensions}"
            cached = type(cls_name, (StaticQuantity,), {"__slots__": (), "dimensions": dimensions})
            _TYPE_CACHE[dimensions] = cached
        return cached


def _mismatch(op: str, left: DimensionVector, right: DimensionVector) -> TypeError:
    return TypeError(f"Dimension error: unsupported operand dimensions for {op}: {left} and {right}")


class StaticQuantity(BaseQuantity):
    """Base class of the per-dimension quantity types. Use :func:`quantity_type`."""

    __slots__ = ("_value",)

    dimensions: ClassVar[DimensionVector] = DimensionVector()

    def __init__(self, value: Any) -> None:
        if type(self) is StaticQuantity:
            raise TypeError("StaticQuantity is abstract; use quantity_type() to get a concrete type")
        if isinstance(value, StaticQuantity):
            if type(value) is not type(self):
                raise TypeError(
                    f"Dimension error: {value.dimensions} is not consistent with {self.dimensions}"
                )
            self._value = value._value
        elif isinstance(value, DynamicQuantity):
            if value.dimensions != self.dimensions:
                raise DimensionError("Incompatible dimensions", self.dimensions, value.dimensions)
            self._value = value.raw_value
        elif is_scalar(value):
            if not self.dimensions.is_dimensionless:
                raise TypeError(
                    f"Dimension error: cannot build {type(self).__name__} from a bare number"
                )
            self._value = value
        else:
            raise TypeError(f"Cannot build {type(self).__name__} from {type(value).__name__}")

    @classmethod
    def _make(cls, raw: Any) -> StaticQuantity:
        instance = cls.__new__(cls)
        instance._value = raw
        return instance

    @classmethod
    def from_dynamic(cls, quantity: DynamicQuantity) -> StaticQuantity:
        return cls(quantity)

    def to_dynamic(self) -> DynamicQuantity:
        return DynamicQuantity(self._value, self.dimensions)

    # -- Accessors ----------------------------------------------------------
    @property
    def raw_value(self) -> Any:
        return self._value

    @property
    def is_dimensionless(self) -> bool:
        return self.dimensions.is_dimensionless

    def is_consistent_with(self, other: BaseQuantity) -> bool:
        return self.dimensions == other.dimensions

    def value(self, target: BaseQuantity) -> Any:
        """Express this quantity as a multiple of ``target``."""

        if isinstance(target, StaticQuantity):
            self._require_same("value()", target)
        elif target.dimensions != self.dimensions:
            raise DimensionError("Incompatible dimensions", self.dimensions, target.dimensions)
        return self._value / target.raw_value

    def _require_same(self, op: str, other: StaticQuantity) -> None:
        if type(other) is not type(self):
            raise _mismatch(op, self.dimensions, other.dimensions)

    def _require_dimensionless(self, op: str) -> None:
        if not self.dimensions.is_dimensionless:
            raise _mismatch(op, self.dimensions, DimensionVector())

    def _same_type_operand(self, op: str, other: object) -> Any:
        if isinstance(other, StaticQuantity):
            self._require_same(op, other)
            return other._value
        if is_scalar(other):
            self._require_dimensionless(op)
            return other
        return NotImplemented

    def __float__(self) -> float:
        self._require_dimensionless("float()")
        return float(self._value)

    def __int__(self) -> int:
        self._require_dimensionless("int()")
        return int(self._value)

    # -- Unary operators ----------------------------------------------------
    def __pos__(self) -> StaticQuantity:
        return self._make(+self._value)

    def __neg__(self) -> StaticQuantity:
        return self._make(-self._value)

    def __abs__(self) -> StaticQuantity:
        return self._make(abs(self._value))

    # -- Addition and subtraction -------------------------------------------
    def __add__(self, other: object) -> StaticQuantity:
        raw = self._same_type_operand("+", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._make(self._value + raw)

    def __radd__(self, other: object) -> StaticQuantity:
        raw = self._same_type_operand("+", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._make(raw + self._value)

    def __sub__(self, other: object) -> StaticQuantity:
        raw = self._same_type_operand("-", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._make(self._value - raw)

    def __rsub__(self, other: object) -> StaticQuantity:
        raw = self._same_type_operand("-", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._make(raw - self._value)

    # -- Multiplication and division ----------------------------------------
    def __mul__(self, other: object) -> StaticQuantity:
        if isinstance(other, StaticQuantity):
            result_type = quantity_type(self.dimensions * other.dimensions)
            return result_type._make(self._value * other._value)
        if is_scalar(other):
            return self._make(self._value * other)
        return NotImplemented

    def __rmul__(self, other: object) -> StaticQuantity:
        if is_scalar(other):
            return self._make(other * self._value)
        return NotImplemented

    def __truediv__(self, other: object) -> StaticQuantity:
        if isinstance(other, StaticQuantity):
            result_type = quantity_type(self.dimensions / other.dimensions)
            return result_type._make(self._value / other._value)
        if is_scalar(other):
            return self._make(self._value / other)
        return NotImplemented

    def __rtruediv__(self, other: object) -> StaticQuantity:
        if is_scalar(other):
            return quantity_type(self.dimensions.invert())._make(other / self._value)
        return NotImplemented

    # -- Modulo -------------------------------------------------------------
    def __mod__(self, other: object) -> StaticQuantity:
        if isinstance(other, StaticQuantity):
            self._require_same("%", other)
            return self._make(self._value % other._value)
        if is_scalar(other):
            return self._make(self._value % other)
        return NotImplemented

    def __rmod__(self, other: object) -> StaticQuantity:
        if is_scalar(other):
            self._require_dimensionless("%")
            return self._make(other % self._value)
        return NotImplemented

    # -- Comparisons --------------------------------------------------------
    def __eq__(self, other: object) -> Any:
        raw = self._same_type_operand("==", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value == raw

    def __ne__(self, other: object) -> Any:
        raw = self._same_type_operand("!=", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value != raw

    def __lt__(self, other: object) -> Any:
        raw = self._same_type_operand("<", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value < raw

    def __le__(self, other: object) -> Any:
        raw = self._same_type_operand("<=", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value <= raw

    def __gt__(self, other: object) -> Any:
        raw = self._same_type_operand(">", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value > raw

    def __ge__(self, other: object) -> Any:
        raw = self._same_type_operand(">=", other)
        if raw is NotImplemented:
            return NotImplemented
        return self._value >= raw

    def __hash__(self) -> int:
        return hash((self._value, self.dimensions))

    # -- Formatting ---------------------------------------------------------
    def __format__(self, spec: str) -> str:
        return f"{format(self._value, spec)} {self.dimensions}"

    def __str__(self) -> str:
        return f"{self._value} {self.dimensions}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"


def static_unit(symbol: str, rank: int = UNRANKED, value_type: type = float) -> StaticQuantity:
    """Create a static base unit with the single dimension ``symbol``."""

    return quantity_type(DimensionVector.mono(symbol, rank))._make(value_type(1))


Dimensionless = quantity_type(DimensionVector(), "Dimensionless")


__all__ = ["Dimensionless", "StaticQuantity", "quantity_type", "static_unit"]
