"""Batch validation of named unit expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from dimquant.core.quantity import DynamicQuantity
from dimquant.units.errors import ParsingError
from dimquant.units.format import format_quantity
from dimquant.units.parser import QuantityParser
from dimquant.units.symbols import SymbolTable


@dataclass(slots=True)
class UnitDiagnostic:
    """Structured diagnostic returned when an expression cannot be used."""

    name: str
    code: str
    message: str
    hint: str | None = None


def analyze_expressions(
    expressions: Mapping[str, str | None],
    symbols: SymbolTable | None = None,
) -> Tuple[Dict[str, DynamicQuantity], Dict[str, str], List[UnitDiagnostic]]:
    """Parse ``expressions`` into quantities, returning diagnostics if needed.

    Returns the parsed quantities, their canonical text and the diagnostics
    for entries that were skipped. Entries are processed in name order.
    """

    if symbols is None:
        from dimquant.units.si import SI_SYMBOLS

        symbols = SI_SYMBOLS
    parser = QuantityParser(symbols)

    quantities: Dict[str, DynamicQuantity] = {}
    canonical: Dict[str, str] = {}
    diagnostics: List[UnitDiagnostic] = []

    for name, text in sorted(expressions.items()):
        text = (text or "").strip()
        if not text:
            diagnostics.append(
                UnitDiagnostic(
                    name=name,
                    code="missing",
                    message="Expression is missing",
                    hint="Provide a unit expression for this name or remove it from the list.",
                )
            )
            continue
        try:
            quantity = parser.parse(text)
        except ParsingError as exc:
            diagnostics.append(
                UnitDiagnostic(
                    name=name,
                    code="parse-error",
                    message=exc.message,
                    hint="Check for unknown symbols or mismatched parentheses in the expression.",
                )
            )
            continue

        quantities[name] = quantity
        canonical[name] = format_quantity(quantity, symbols)

    return quantities, canonical, diagnostics


__all__ = ["UnitDiagnostic", "analyze_expressions"]
