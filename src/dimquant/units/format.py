"""Formatting helpers producing text the parser reads back."""

from __future__ import annotations

import string
from fractions import Fraction
from typing import Any, Dict, List

from dimquant.core.quantity import BaseQuantity
from dimquant.units.parser import QuantityParser
from dimquant.units.symbols import SymbolTable


def _default_symbols() -> SymbolTable:
    from dimquant.units.si import SI_SYMBOLS

    return SI_SYMBOLS


def _format_value(value: Any) -> str:
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return str(value)


def _format_power(power: Fraction) -> str:
    if power.denominator == 1:
        return str(power.numerator)
    return f"{power.numerator}/{power.denominator}"


def _base_unit_symbols(symbols: SymbolTable) -> Dict[str, str]:
    """Map each single dimension to the first unit of value one carrying it."""

    mapping: Dict[str, str] = {}
    for symbol, quantity in symbols.units.items():
        dims = quantity.dimensions.dims
        if len(dims) != 1 or dims[0].power != 1 or quantity.raw_value != 1:
            continue
        mapping.setdefault(dims[0].symbol, symbol)
    return mapping


def _named_unit(quantity: BaseQuantity, symbols: SymbolTable) -> str | None:
    for symbol, unit in symbols.units.items():
        if unit.raw_value == 1 and unit.dimensions == quantity.dimensions:
            return symbol
    return None


def format_unit(quantity: BaseQuantity, symbols: SymbolTable | None = None) -> str:
    """Return the unit part of ``quantity`` as ``"m s^-2"`` style text.

    Dimensions without a unit of value one in ``symbols`` are written with
    their dimension symbol.
    """

    if symbols is None:
        symbols = _default_symbols()
    base = _base_unit_symbols(symbols)
    parts: List[str] = []
    for dim in quantity.dimensions:
        name = base.get(dim.symbol, dim.symbol)
        parts.append(name if dim.power == 1 else f"{name}^{_format_power(dim.power)}")
    return " ".join(parts)


def format_quantity(
    quantity: BaseQuantity,
    symbols: SymbolTable | None = None,
    prefer_named: bool = True,
) -> str:
    """Return a canonical, parseable string for ``quantity``.

    With ``prefer_named`` a unit of the table with exactly the dimensions of
    ``quantity`` is used (``"3 N"``); otherwise the dimensions are spelled out
    with base units (``"9.81 m s^-2"``).
    """

    if symbols is None:
        symbols = _default_symbols()
    value = _format_value(quantity.raw_value)
    if quantity.dimensions.is_dimensionless:
        return value

    if prefer_named:
        named = _named_unit(quantity, symbols)
        if named is not None:
            return f"{value} {named}"
    return f"{value} {format_unit(quantity, symbols)}"


def si_format(fmt: str, quantity: BaseQuantity, symbols: SymbolTable | None = None) -> str:
    """Format ``quantity`` expressed in the unit written after the first field.

    ``si_format("{:.2f} m/s", 12.5 * kilo(meter) / hour)`` gives
    ``"3.47 m/s"``. The literal text between the first replacement field and
    the next one is parsed as the target unit.
    """

    items = list(string.Formatter().parse(fmt))
    field_index = next((i for i, item in enumerate(items) if item[1] is not None), None)
    if field_index is None:
        raise ValueError(f"Format string {fmt!r} has no replacement field")

    field_name = items[field_index][1]
    unit_text = items[field_index + 1][0] if field_index + 1 < len(items) else ""
    if symbols is None:
        symbols = _default_symbols()
    target = QuantityParser(symbols).parse_unit(unit_text.strip())
    value = quantity.value(target)

    if field_name and not field_name.isdigit():
        return fmt.format(**{field_name: value})
    return fmt.format(value)


__all__ = ["format_quantity", "format_unit", "si_format"]
