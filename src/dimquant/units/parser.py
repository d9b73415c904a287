"""Recursive-descent parser turning text such as ``"25 mmol/L"`` into quantities.

Grammar (whitespace only separates tokens)::

    Quantity     := Number? CompoundUnit
    CompoundUnit := ExponentUnit (('*' | '/')? ExponentUnit)*
    ExponentUnit := Unit ('^' Exponent | SupExponent)?
    Exponent     := Integer ('/' Integer)?
    Unit         := '(' CompoundUnit ')' | Symbol | Prefix Symbol

Juxtaposed units multiply (``"N m"``), ``*`` ``.`` ``⋅`` ``×`` multiply,
``/`` and ``÷`` divide, all left to right. Prefixes must be joined to their
unit (``"mm"`` is a millimeter, ``"m m"`` a square meter) and a standalone
unit wins over a prefixed reading (``"cd"`` is a candela).
"""

from __future__ import annotations

import logging
import re
from fractions import Fraction
from typing import Any, Callable, List, Optional, Tuple

from dimquant.core.dimensions import DimensionVector
from dimquant.core.quantity import DynamicQuantity
from dimquant.core.static import StaticQuantity
from dimquant.units.errors import ParsingError
from dimquant.units.lexer import Token, TokenKind, lex
from dimquant.units.symbols import SymbolTable

logger = logging.getLogger(__name__)

NumberParser = Callable[[str], Optional[Tuple[Any, str]]]

_FLOAT_RE = re.compile(
    r"""
    \s*
    [+-]?
    (?:\d+(?:_\d+)*(?:\.(?:\d+(?:_\d+)*)?)?|\.\d+(?:_\d+)*)
    (?:[eE][+-]?\d+)?
    """,
    re.VERBOSE,
)


def parse_float(text: str) -> Optional[Tuple[float, str]]:
    """Read a leading decimal number from ``text``.

    Returns the number and the unread remainder, or ``None`` when ``text``
    does not start with a number.
    """

    match = _FLOAT_RE.match(text)
    if not match:
        return None
    return float(match.group(0).replace("_", "")), text[match.end():]


def parse_int(text: str) -> Optional[Tuple[int, str]]:
    """Integer counterpart of :func:`parse_float` for integer-valued tables."""

    match = re.match(r"\s*[+-]?\d+(?:_\d+)*", text)
    if not match:
        return None
    return int(match.group(0).replace("_", "")), text[match.end():]


class _TokenStream:
    def __init__(self, tokens: List[Token], original: str) -> None:
        self.tokens = tokens
        self.original = original
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self.tokens)

    def peek(self, offset: int = 0) -> Token | None:
        pos = self.index + offset
        if pos >= len(self.tokens):
            return None
        return self.tokens[pos]

    def current(self, *expected: TokenKind) -> Token:
        """Return the current token, checking its kind if ``expected`` is given."""

        token = self.peek()
        if token is None:
            raise ParsingError("Unexpected end of input", self.original, len(self.original))
        if expected and token.kind not in expected:
            wanted = " or ".join(kind.value for kind in expected)
            raise ParsingError(
                f"Found '{token.text}' while expecting {wanted}", self.original, token.position
            )
        return token

    def advance(self, *expected: TokenKind) -> None:
        """Move past the current token; then check the new one against ``expected``."""

        self.current()
        self.index += 1
        if expected:
            self.current(*expected)


class _UnitExpressionParser:
    def __init__(self, stream: _TokenStream, symbols: SymbolTable) -> None:
        self.stream = stream
        self.symbols = symbols

    def _ends_group(self, in_parens: bool) -> bool:
        token = self.stream.peek()
        return token is None or (in_parens and token.kind is TokenKind.RPAREN)

    def parse_compound_unit(self, in_parens: bool = False) -> DynamicQuantity:
        result = self.parse_exponent_unit()
        while not self._ends_group(in_parens):
            token = self.stream.current()
            multiply = token.kind is not TokenKind.DIV
            if token.kind in (TokenKind.MUL, TokenKind.DIV):
                self.stream.advance()
                self.stream.current()

            rhs = self.parse_exponent_unit()
            result = result * rhs if multiply else result / rhs
        return result

    def parse_exponent_unit(self) -> DynamicQuantity:
        result = self.parse_unit()

        token = self.stream.peek()
        if token is None or token.kind not in (TokenKind.EXP, TokenKind.SUPINTEGER):
            return result

        if token.kind is TokenKind.EXP:
            self.stream.advance(TokenKind.INTEGER)
        return result ** self.parse_rational_or_integer()

    def parse_rational_or_integer(self) -> Fraction:
        num = self.parse_integer()
        den = 1
        slash = self.stream.peek()
        after = self.stream.peek(1)
        if (
            slash is not None
            and slash.kind is TokenKind.DIV
            and after is not None
            and after.kind is TokenKind.INTEGER
        ):
            self.stream.advance()
            den = self.parse_integer()
            if den == 0:
                raise ParsingError("Zero denominator in exponent", self.stream.original, after.position)
        return Fraction(num, den)

    def parse_integer(self) -> int:
        token = self.stream.current(TokenKind.INTEGER, TokenKind.SUPINTEGER)
        self.stream.advance()
        if token.integer is None:
            raise ParsingError(f"Expecting an integer, found '{token.text}'", self.stream.original, token.position)
        return token.integer

    def parse_unit(self) -> DynamicQuantity:
        if self.stream.at_end():
            return DynamicQuantity(1, DimensionVector())

        if self.stream.current().kind is TokenKind.LPAREN:
            self.stream.advance()
            result = self.parse_compound_unit(in_parens=True)
            self.stream.current(TokenKind.RPAREN)
            self.stream.advance()
            return result
        return self.parse_prefix_unit()

    def parse_prefix_unit(self) -> DynamicQuantity:
        token = self.stream.current(TokenKind.SYMBOL)
        self.stream.advance()
        try:
            return self.symbols.lookup(token.text)
        except ParsingError as exc:
            raise ParsingError(exc.message, self.stream.original, token.position) from None


class QuantityParser:
    """Parser bound to a symbol table and a number parser.

    ``number_parser`` reads the leading number of the input and returns it
    with the remaining text, or ``None`` when there is no number; the scalar
    then defaults to one, so ``"m/s"`` parses as ``1 m/s``.
    """

    def __init__(self, symbols: SymbolTable, number_parser: NumberParser | None = None) -> None:
        self.symbols = symbols
        self.number_parser = number_parser or parse_float

    def parse(self, text: str) -> DynamicQuantity:
        parsed = self.number_parser(text)
        if parsed is None:
            value: Any = 1
            rest = text
        else:
            value, rest = parsed

        if not rest:
            return DynamicQuantity(value, DimensionVector())

        tokens = lex(rest)
        logger.debug("Parsing %r into %d tokens", text, len(tokens))
        stream = _TokenStream(tokens, rest)
        units = _UnitExpressionParser(stream, self.symbols).parse_compound_unit()
        return value * units

    def parse_unit(self, text: str) -> DynamicQuantity:
        """Parse ``text`` as a unit expression only, with no leading number."""

        tokens = lex(text)
        stream = _TokenStream(tokens, text)
        return _UnitExpressionParser(stream, self.symbols).parse_compound_unit()


def _default_symbols() -> SymbolTable:
    from dimquant.units.si import SI_SYMBOLS

    return SI_SYMBOLS


def parse(
    text: str,
    symbols: SymbolTable | None = None,
    number_parser: NumberParser | None = None,
) -> DynamicQuantity:
    """Parse ``text`` into a :class:`DynamicQuantity`.

    ``symbols`` defaults to the SI symbol table.
    """

    if symbols is None:
        symbols = _default_symbols()
    return QuantityParser(symbols, number_parser).parse(text)


def parse_static(
    text: str,
    quantity_type: type[StaticQuantity],
    symbols: SymbolTable | None = None,
    number_parser: NumberParser | None = None,
) -> StaticQuantity:
    """Parse ``text`` and convert it to ``quantity_type``.

    Raises :class:`~dimquant.core.dimensions.DimensionError` when the parsed
    dimensions differ from those of ``quantity_type``.
    """

    return quantity_type(parse(text, symbols, number_parser))


__all__ = [
    "NumberParser",
    "QuantityParser",
    "parse",
    "parse_float",
    "parse_int",
    "parse_static",
]
