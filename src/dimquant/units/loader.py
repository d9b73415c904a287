"""Load user definitions into a symbol table."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dimquant.parser.units_text import parse_units_text
from dimquant.units.diagnostics import UnitDiagnostic
from dimquant.units.errors import ParsingError
from dimquant.units.parser import QuantityParser
from dimquant.units.si import si_symbols
from dimquant.units.symbols import SymbolTable

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LoadReport:
    """Symbols added by :func:`load_definitions` and the lines it rejected."""

    units: List[str] = field(default_factory=list)
    prefixes: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    diagnostics: List[UnitDiagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.warnings and not self.diagnostics


def load_definitions(text: str | None, symbols: SymbolTable) -> LoadReport:
    """Add the definitions in ``text`` to ``symbols``.

    Prefixes are registered first, then units in the order they appear, so a
    unit may be defined in terms of units from earlier lines. ``symbols``
    must not be frozen.
    """

    parsed = parse_units_text(text)
    report = LoadReport(warnings=list(parsed.warnings))
    for warning in parsed.warnings:
        logger.warning("Ignoring definition line: %s", warning)

    for symbol, factor in parsed.prefixes.items():
        symbols.add_prefix(symbol, factor)
        report.prefixes.append(symbol)

    parser = QuantityParser(symbols)
    for symbol, expression in parsed.units.items():
        try:
            quantity = parser.parse(expression)
        except ParsingError as exc:
            logger.warning("Cannot define unit %r from %r: %s", symbol, expression, exc.message)
            report.diagnostics.append(
                UnitDiagnostic(
                    name=symbol,
                    code="parse-error",
                    message=exc.message,
                    hint="Units may only refer to symbols defined before them.",
                )
            )
            continue
        symbols.add_unit(symbol, quantity)
        report.units.append(symbol)

    logger.debug("Loaded %d units and %d prefixes", len(report.units), len(report.prefixes))
    return report


def load_definitions_file(path: str | Path, symbols: SymbolTable) -> LoadReport:
    return load_definitions(Path(path).read_text(encoding="utf-8"), symbols)


def build_symbol_table(units_file: str | Path | None = None) -> SymbolTable:
    """Return a frozen table of the SI symbols plus the definitions in ``units_file``."""

    if units_file is None:
        from dimquant.units.si import SI_SYMBOLS

        return SI_SYMBOLS
    table = si_symbols()
    load_definitions_file(units_file, table)
    return table.freeze()


__all__ = ["LoadReport", "build_symbol_table", "load_definitions", "load_definitions_file"]
