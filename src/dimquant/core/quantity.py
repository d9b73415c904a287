"""Dimensionally variant quantities checked at run time."""

from __future__ import annotations

import numbers
from fractions import Fraction
from typing import Any, Tuple

import numpy as np

from .dimensions import UNRANKED, DimensionError, DimensionVector
from .rational import RationalLike, to_rational


class BaseQuantity:
    """Common base of the dynamic and static quantity variants.

    Subclasses expose ``raw_value`` and ``dimensions``.
    """

    __slots__ = ()
    __array_ufunc__ = None

    raw_value: Any
    dimensions: DimensionVector


def is_scalar(value: object) -> bool:
    """Return ``True`` for plain numbers and numpy values usable as magnitudes."""

    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Number, np.ndarray, np.generic))


def _power_value(value: Any, exponent: Fraction) -> Any:
    if exponent.denominator == 1:
        return value ** exponent.numerator
    return value ** (exponent.numerator / exponent.denominator)


class DynamicQuantity(BaseQuantity):
    """A value paired with a dimension vector carried as data.

    Every operation that needs consistent dimensions checks them when it is
    called and raises :class:`DimensionError` on mismatch. Instances are
    immutable; compound assignments rebind a new quantity.
    """

    __slots__ = ("_value", "_dimensions")

    def __init__(self, value: Any = 1, dimensions: DimensionVector | None = None) -> None:
        if isinstance(value, BaseQuantity):
            if dimensions is not None:
                raise TypeError("Dimensions cannot be given when copying a quantity")
            self._value = value.raw_value
            self._dimensions = value.dimensions
            return
        if dimensions is None:
            dimensions = DimensionVector()
        if not isinstance(dimensions, DimensionVector):
            raise TypeError("Dimensions must be a DimensionVector instance")
        self._value = value
        self._dimensions = dimensions

    @classmethod
    def from_static(cls, quantity: BaseQuantity) -> DynamicQuantity:
        return cls(quantity.raw_value, quantity.dimensions)

    # -- Accessors ----------------------------------------------------------
    @property
    def raw_value(self) -> Any:
        return self._value

    @property
    def dimensions(self) -> DimensionVector:
        return self._dimensions

    @property
    def is_dimensionless(self) -> bool:
        return self._dimensions.is_dimensionless

    def is_consistent_with(self, other: BaseQuantity) -> bool:
        """Whether ``other`` has the same dimensions. Never raises."""

        return self._dimensions == other.dimensions

    def get(self) -> Any:
        """Return the bare value of a dimensionless quantity."""

        self._check_dimensionless()
        return self._value

    def value(self, target: BaseQuantity) -> Any:
        """Express this quantity as a multiple of ``target``."""

        self._check_dim(target.dimensions)
        return self._value / target.raw_value

    # -- Checks -------------------------------------------------------------
    def _check_dim(self, dims: DimensionVector) -> None:
        if self._dimensions != dims:
            raise DimensionError("Incompatible dimensions", self._dimensions, dims)

    def _check_dimensionless(self) -> None:
        if not self._dimensions.is_dimensionless:
            raise DimensionError("Not dimensionless", self._dimensions, DimensionVector())

    def _same_dim_operand(self, other: object) -> Any:
        """Raw value of ``other`` once dimensional equality is established."""

        if isinstance(other, BaseQuantity):
            self._check_dim(other.dimensions)
            return other.raw_value
        if is_scalar(other):
            self._check_dimensionless()
            return other
        return NotImplemented

    # -- Conversions --------------------------------------------------------
    def __float__(self) -> float:
        return float(self.get())

    def __int__(self) -> int:
        return int(self.get())

    # -- Unary operators ----------------------------------------------------
    def __pos__(self) -> DynamicQuantity:
        return DynamicQuantity(+self._value, self._dimensions)

    def __neg__(self) -> DynamicQuantity:
        return DynamicQuantity(-self._value, self._dimensions)

    def __abs__(self) -> DynamicQuantity:
        return DynamicQuantity(abs(self._value), self._dimensions)

    # -- Addition and subtraction -------------------------------------------
    def __add__(self, other: object) -> DynamicQuantity:
        raw = self._same_dim_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return DynamicQuantity(self._value + raw, self._dimensions)

    def __radd__(self, other: object) -> DynamicQuantity:
        raw = self._same_dim_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return DynamicQuantity(raw + self._value, self._dimensions)

    def __sub__(self, other: object) -> DynamicQuantity:
        raw = self._same_dim_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return DynamicQuantity(self._value - raw, self._dimensions)

    def __rsub__(self, other: object) -> DynamicQuantity:
        raw = self._same_dim_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return DynamicQuantity(raw - self._value, self._dimensions)

    # -- Multiplication and division ----------------------------------------
    def __mul__(self, other: object) -> DynamicQuantity:
        if isinstance(other, BaseQuantity):
            return DynamicQuantity(self._value * other.raw_value, self._dimensions * other.dimensions)
        if is_scalar(other):
            return DynamicQuantity(self._value * other, self._dimensions)
        return NotImplemented

    def __rmul__(self, other: object) -> DynamicQuantity:
        if isinstance(other, BaseQuantity):
            return DynamicQuantity(other.raw_value * self._value, other.dimensions * self._dimensions)
        if is_scalar(other):
            return DynamicQuantity(other * self._value, self._dimensions)
        return NotImplemented

    def __truediv__(self, other: object) -> DynamicQuantity:
        if isinstance(other, BaseQuantity):
            return DynamicQuantity(self._value / other.raw_value, self._dimensions / other.dimensions)
        if is_scalar(other):
            return DynamicQuantity(self._value / other, self._dimensions)
        return NotImplemented

    def __rtruediv__(self, other: object) -> DynamicQuantity:
        if isinstance(other, BaseQuantity):
            return DynamicQuantity(other.raw_value / self._value, other.dimensions / self._dimensions)
        if is_scalar(other):
            return DynamicQuantity(other / self._value, self._dimensions.invert())
        return NotImplemented

    # -- Modulo -------------------------------------------------------------
    def __mod__(self, other: object) -> DynamicQuantity:
        if isinstance(other, BaseQuantity):
            self._check_dim(other.dimensions)
            return DynamicQuantity(self._value % other.raw_value, self._dimensions)
        if is_scalar(other):
            return DynamicQuantity(self._value % other, self._dimensions)
        return NotImplemented

    def __rmod__(self, other: object) -> DynamicQuantity:
        raw = self._same_dim_operand(other)
        if raw is NotImplemented:
            return NotImplemented
        return DynamicQuantity(raw % self._value, self._dimensions)

    # -- Powers -------------------------------------------------------------
    def __pow__(self, exponent: RationalLike) -> DynamicQuantity:
        if isinstance(exponent, numbers.Integral) and not isinstance(exponent, bool):
            exponent = int(exponent)
        if not isinstance(exponent, (int, float, Fraction)):
            return NotImplemented
        power = to_rational(exponent)
        return DynamicQuantity(_power_value(self._value, power), self._dimensions.pow(power))

    def __rpow__(self, base: object) -> Any:
        if not is_scalar(base):
            return NotImplemented
        return base ** self.get()

    # -- Comparisons --------------------------------------------------------
    def _operands(self, other: object) -> Tuple[Any, Any] | None:
        raw = self._same_dim_operand(other)
        if raw is NotImplemented:
            return None
        return self._value, raw

    def __eq__(self, other: object) -> Any:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __ne__(self, other: object) -> Any:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return pair[0] != pair[1]

    def __lt__(self, other: object) -> Any:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: object) -> Any:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: object) -> Any:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: object) -> Any:
        pair = self._operands(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __hash__(self) -> int:
        return hash((self._value, self._dimensions))

    # -- Formatting ---------------------------------------------------------
    def __format__(self, spec: str) -> str:
        return f"{format(self._value, spec)} {self._dimensions}"

    def __str__(self) -> str:
        return f"{self._value} {self._dimensions}"

    def __repr__(self) -> str:
        return f"DynamicQuantity({self._value!r}, {str(self._dimensions)!r})"


def unit(symbol: str, rank: int = UNRANKED, value_type: type = float) -> DynamicQuantity:
    """Create a base unit: the value one with the single dimension ``symbol``."""

    return DynamicQuantity(value_type(1), DimensionVector.mono(symbol, rank))


def qvariant(value: Any) -> DynamicQuantity:
    """Turn a number or a static quantity into a :class:`DynamicQuantity`."""

    if isinstance(value, DynamicQuantity):
        return value
    if isinstance(value, BaseQuantity):
        return DynamicQuantity.from_static(value)
    if is_scalar(value):
        return DynamicQuantity(value)
    raise TypeError(f"Cannot build a quantity from {type(value).__name__}")


__all__ = ["BaseQuantity", "DynamicQuantity", "is_scalar", "qvariant", "unit"]
