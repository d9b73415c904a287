"""Core primitives: rationals, dimension vectors and quantities."""

from .dimensions import UNRANKED, Dim, DimensionError, DimensionVector
from .quantity import BaseQuantity, DynamicQuantity, is_scalar, qvariant, unit
from .rational import Rational, format_rational, rational, rational_from_float, to_rational
from .static import Dimensionless, StaticQuantity, quantity_type, static_unit
from . import qmath

__all__ = [
    "BaseQuantity",
    "Dim",
    "DimensionError",
    "DimensionVector",
    "Dimensionless",
    "DynamicQuantity",
    "Rational",
    "StaticQuantity",
    "UNRANKED",
    "format_rational",
    "is_scalar",
    "qmath",
    "quantity_type",
    "qvariant",
    "rational",
    "rational_from_float",
    "static_unit",
    "to_rational",
    "unit",
]
