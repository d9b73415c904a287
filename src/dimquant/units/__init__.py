"""Unit symbol tables and the unit-expression parser."""

from .errors import ParsingError
from .format import format_quantity, format_unit, si_format
from .lexer import Token, TokenKind, lex
from .parser import NumberParser, QuantityParser, parse, parse_float, parse_int, parse_static
from .si import SI_SYMBOLS, parse_si, parse_si_static, si_symbols
from .symbols import SymbolTable, SymbolTableFrozenError

__all__ = [
    "NumberParser",
    "ParsingError",
    "QuantityParser",
    "SI_SYMBOLS",
    "SymbolTable",
    "SymbolTableFrozenError",
    "Token",
    "TokenKind",
    "format_quantity",
    "format_unit",
    "lex",
    "parse",
    "parse_float",
    "parse_int",
    "parse_si",
    "parse_si_static",
    "parse_static",
    "si_format",
    "si_symbols",
]
