"""FastAPI router exposing unit parsing and conversion helpers."""

from __future__ import annotations

from typing import Dict, List

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from dimquant.config import load_settings
from dimquant.core.dimensions import DimensionError, DimensionVector
from dimquant.observability import log_event
from dimquant.parser.units_text import parse_units_text
from dimquant.units.diagnostics import UnitDiagnostic, analyze_expressions
from dimquant.units.errors import ParsingError
from dimquant.units.format import format_quantity, si_format
from dimquant.units.loader import build_symbol_table, load_definitions
from dimquant.units.parser import QuantityParser
from dimquant.units.symbols import SymbolTable


router = APIRouter(prefix="/v1/units", tags=["units"])


def get_symbols(request: Request) -> SymbolTable:
    symbols = getattr(request.app.state, "symbols", None)
    if symbols is None:
        symbols = build_symbol_table(load_settings().units_file)
        request.app.state.symbols = symbols
    return symbols


def _parsing_error(exc: ParsingError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={"message": exc.message, "text": exc.text, "position": exc.position},
    )


def _dimension_error(exc: DimensionError) -> HTTPException:
    return HTTPException(
        status_code=422,
        detail={
            "message": exc.message,
            "this_dim": str(exc.this_dim),
            "other_dim": str(exc.other_dim),
        },
    )


def _powers(dimensions: DimensionVector) -> Dict[str, str]:
    return {dim.symbol: str(dim.power) for dim in dimensions}


class QuantityReq(BaseModel):
    text: str = Field(description="Quantity expression such as '25 mmol/L'")


class QuantityResp(BaseModel):
    value: float
    dimensions: Dict[str, str]
    dimensions_text: str
    canonical: str


@router.post("/parse", response_model=QuantityResp)
def parse_quantity(req: QuantityReq, symbols: SymbolTable = Depends(get_symbols)) -> QuantityResp:
    try:
        quantity = QuantityParser(symbols).parse(req.text)
    except ParsingError as exc:
        raise _parsing_error(exc)

    log_event("units.parse", text=req.text)
    return QuantityResp(
        value=float(quantity.raw_value),
        dimensions=_powers(quantity.dimensions),
        dimensions_text=str(quantity.dimensions),
        canonical=format_quantity(quantity, symbols),
    )


class UnitsValidateReq(BaseModel):
    expressions: Dict[str, str]


class UnitDiagnosticModel(BaseModel):
    name: str
    code: str
    message: str
    hint: str | None = None


def _diagnostic_models(diagnostics: List[UnitDiagnostic]) -> List[UnitDiagnosticModel]:
    return [
        UnitDiagnosticModel(name=d.name, code=d.code, message=d.message, hint=d.hint)
        for d in diagnostics
    ]


class UnitsValidateResp(BaseModel):
    ok: bool
    canonical: Dict[str, str]
    diagnostics: List[UnitDiagnosticModel]


@router.post("/validate", response_model=UnitsValidateResp)
def validate_expressions(
    req: UnitsValidateReq, symbols: SymbolTable = Depends(get_symbols)
) -> UnitsValidateResp:
    _, canonical, diagnostics = analyze_expressions(req.expressions, symbols)
    return UnitsValidateResp(
        ok=not diagnostics,
        canonical=canonical,
        diagnostics=_diagnostic_models(diagnostics),
    )


class ConvertReq(BaseModel):
    text: str
    target: str = Field(description="Unit expression to express the quantity in, e.g. 'km/h'")
    format: str | None = Field(default=None, description="Format spec for the value, e.g. '.2f'")


class ConvertResp(BaseModel):
    value: float
    target: str
    formatted: str


@router.post("/convert", response_model=ConvertResp)
def convert_quantity(req: ConvertReq, symbols: SymbolTable = Depends(get_symbols)) -> ConvertResp:
    parser = QuantityParser(symbols)
    try:
        quantity = parser.parse(req.text)
        target = parser.parse_unit(req.target)
        value = quantity.value(target)
        formatted = si_format(f"{{:{req.format or ''}}} {req.target}", quantity, symbols)
    except ParsingError as exc:
        raise _parsing_error(exc)
    except DimensionError as exc:
        raise _dimension_error(exc)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail={"message": str(exc)})

    log_event("units.convert", text=req.text, target=req.target)
    return ConvertResp(value=float(value), target=req.target, formatted=formatted)


class DefinitionsReq(BaseModel):
    text: str = Field(default="", description="Multiline 'symbol: expression' definitions")


class DefinitionsResp(BaseModel):
    ok: bool
    units: Dict[str, str]
    prefixes: Dict[str, float]
    warnings: List[str]
    diagnostics: List[UnitDiagnosticModel]


@router.post("/definitions", response_model=DefinitionsResp)
def check_definitions(
    req: DefinitionsReq, symbols: SymbolTable = Depends(get_symbols)
) -> DefinitionsResp:
    parsed = parse_units_text(req.text)
    scratch = symbols.copy()
    report = load_definitions(req.text, scratch)
    units = {
        symbol: format_quantity(scratch.units[symbol], scratch, prefer_named=False)
        for symbol in report.units
    }
    return DefinitionsResp(
        ok=report.ok,
        units=units,
        prefixes=parsed.prefixes,
        warnings=report.warnings,
        diagnostics=_diagnostic_models(report.diagnostics),
    )


__all__ = ["get_symbols", "router"]
