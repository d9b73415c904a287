"""Parsers for human-entered definition text."""

from .units_text import UnitsTextResult, parse_units_text

__all__ = ["UnitsTextResult", "parse_units_text"]
