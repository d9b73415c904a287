"""Basic math functions for static and dynamic quantities.

Each function computes the dimensions of its result (``D.pow(n)`` or
``D.powinverse(n)``) and applies the matching numpy operation to the value, so
scalars and numpy arrays are handled alike. A static argument gives a result of
the static type of the new dimensions.
"""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from .dimensions import DimensionVector
from .quantity import BaseQuantity, DynamicQuantity
from .static import StaticQuantity, quantity_type


def _apply(
    quantity: BaseQuantity,
    func: Callable[[Any], Any],
    dims: Callable[[DimensionVector], DimensionVector],
) -> BaseQuantity:
    if isinstance(quantity, StaticQuantity):
        return quantity_type(dims(quantity.dimensions))._make(func(quantity.raw_value))
    if isinstance(quantity, DynamicQuantity):
        return DynamicQuantity(func(quantity.raw_value), dims(quantity.dimensions))
    raise TypeError(f"Expected a quantity, got {type(quantity).__name__}")


def square(quantity: BaseQuantity) -> BaseQuantity:
    return _apply(quantity, np.square, lambda d: d.pow(2))


def cubic(quantity: BaseQuantity) -> BaseQuantity:
    return _apply(quantity, lambda v: np.power(v, 3), lambda d: d.pow(3))


def power(quantity: BaseQuantity, n: int) -> BaseQuantity:
    """Raise ``quantity`` to the integer power ``n``."""

    return _apply(quantity, lambda v: np.power(v, float(n)), lambda d: d.pow(n))


def sqrt(quantity: BaseQuantity) -> BaseQuantity:
    return _apply(quantity, np.sqrt, lambda d: d.powinverse(2))


def cbrt(quantity: BaseQuantity) -> BaseQuantity:
    return _apply(quantity, np.cbrt, lambda d: d.powinverse(3))


def nth_root(quantity: BaseQuantity, n: int) -> BaseQuantity:
    """The ``n``-th root; the dimension powers are divided by ``n``."""

    if n == 0:
        raise ZeroDivisionError("The 0-th root is undefined")

    def root(v: Any) -> Any:
        # odd roots keep the sign of negative values
        if n % 2:
            return np.sign(v) * np.power(np.abs(v), 1.0 / n)
        return np.power(v, 1.0 / n)

    return _apply(quantity, root, lambda d: d.powinverse(n))


def absolute(quantity: BaseQuantity) -> BaseQuantity:
    return _apply(quantity, np.abs, lambda d: d)


__all__ = ["absolute", "cbrt", "cubic", "nth_root", "power", "sqrt", "square"]
