"""Tokenizer for unit expressions such as ``"kg/(m.s²)"``."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from dimquant.units.errors import ParsingError


class TokenKind(str, Enum):
    SYMBOL = "symbol"
    MUL = "mul"
    DIV = "div"
    EXP = "exp"
    INTEGER = "integer"
    SUPINTEGER = "supinteger"
    LPAREN = "lparen"
    RPAREN = "rparen"


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    position: int
    integer: Optional[int] = None


_SUPERSCRIPT_TRANS = str.maketrans({
    "⁰": "0",
    "¹": "1",
    "²": "2",
    "³": "3",
    "⁴": "4",
    "⁵": "5",
    "⁶": "6",
    "⁷": "7",
    "⁸": "8",
    "⁹": "9",
    "⁺": "+",
    "⁻": "-",
})

_SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "*": TokenKind.MUL,
    ".": TokenKind.MUL,
    "⋅": TokenKind.MUL,
    "×": TokenKind.MUL,
    "/": TokenKind.DIV,
    "÷": TokenKind.DIV,
    "^": TokenKind.EXP,
}

_INTEGER_CHARS = frozenset("0123456789+-")
_SUPERSCRIPT_CHARS = frozenset(map(chr, _SUPERSCRIPT_TRANS))


def _classify(char: str) -> Optional[TokenKind]:
    if char in _INTEGER_CHARS:
        return TokenKind.INTEGER
    if char in _SUPERSCRIPT_CHARS:
        return TokenKind.SUPINTEGER
    if char.isspace() or char in _SINGLE_CHAR_TOKENS:
        return None
    return TokenKind.SYMBOL


def _make_run(kind: TokenKind, text: str, start: int, source: str) -> Token:
    if kind is TokenKind.SYMBOL:
        return Token(kind, text, start)

    digits = text.translate(_SUPERSCRIPT_TRANS) if kind is TokenKind.SUPINTEGER else text
    try:
        value = int(digits)
    except ValueError:
        raise ParsingError(f"Unexpected integer format: {text}", source, start) from None
    return Token(kind, text, start, value)


def lex(text: str) -> List[Token]:
    """Split ``text`` into tokens.

    Runs of integer characters, superscript characters and symbol characters
    are accumulated until a character of another class, whitespace or an
    operator ends them. Whitespace produces no token; it only separates runs.
    """

    tokens: List[Token] = []
    run_kind: Optional[TokenKind] = None
    run_start = 0

    def flush(end: int) -> None:
        nonlocal run_kind
        if run_kind is not None:
            tokens.append(_make_run(run_kind, text[run_start:end], run_start, text))
        run_kind = None

    for pos, char in enumerate(text):
        kind = _classify(char)
        if kind is None:
            flush(pos)
            single = _SINGLE_CHAR_TOKENS.get(char)
            if single is not None:
                tokens.append(Token(single, char, pos))
            continue
        if kind is not run_kind:
            flush(pos)
            run_kind = kind
            run_start = pos

    flush(len(text))
    return tokens


__all__ = ["Token", "TokenKind", "lex"]
