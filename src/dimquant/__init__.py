"""Dimensional quantities and a parser for unit expressions."""

from .core import (
    BaseQuantity,
    DimensionError,
    DimensionVector,
    Dimensionless,
    DynamicQuantity,
    StaticQuantity,
    qmath,
    quantity_type,
    qvariant,
    static_unit,
    unit,
)
from .units import ParsingError, SymbolTable, format_quantity, parse, parse_si, si_format

__version__ = "0.1.0"

__all__ = [
    "BaseQuantity",
    "DimensionError",
    "DimensionVector",
    "Dimensionless",
    "DynamicQuantity",
    "ParsingError",
    "StaticQuantity",
    "SymbolTable",
    "format_quantity",
    "parse",
    "parse_si",
    "qmath",
    "quantity_type",
    "qvariant",
    "si_format",
    "static_unit",
    "unit",
]
