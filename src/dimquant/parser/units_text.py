"""Utilities for parsing human-entered unit and prefix definitions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple
import re


_LINE_RE = re.compile(r"[^\r\n]+")
_TRAILING_PUNCT = re.compile(r"[\s,;]+$")


@dataclass(slots=True)
class UnitsTextResult:
    """Result of :func:`parse_units_text`.

    Attributes
    ----------
    units:
        Mapping from unit symbol to its defining expression (trimmed), in
        the order the lines appear.
    prefixes:
        Mapping from prefix symbol to its scale factor.
    warnings:
        Human-readable warnings for lines that could not be parsed.
    """

    units: Dict[str, str]
    prefixes: Dict[str, float]
    warnings: List[str]


def _strip_inline_comment(text: str) -> str:
    """Remove an inline ``#`` comment from ``text`` if present."""

    if "#" not in text:
        return text
    return text.split("#", 1)[0]


def _split_first_colon(text: str) -> Tuple[str, str] | None:
    """Split ``text`` on the first colon, returning ``(name, definition)``.

    Returns ``None`` when no colon is present.
    """

    idx = text.find(":")
    if idx == -1:
        return None
    return text[:idx], text[idx + 1 :]


def parse_units_text(units_text: str | None) -> UnitsTextResult:
    """Parse multiline definition text.

    Parameters
    ----------
    units_text:
        Raw text entered by the user. ``symbol: expression`` defines a unit
        (``"kph: km/h"``) and ``symbol-: number`` a prefix (``"Ki-: 1024"``).
        Comments starting with ``#`` are ignored. Trailing punctuation such as
        commas and semicolons is stripped.

    Returns
    -------
    UnitsTextResult
        The parsed definitions and a list of warnings for lines that could
        not be parsed. The parser never raises on malformed lines; it simply
        records a warning explaining the issue. Expressions are not evaluated
        here; see :func:`dimquant.units.loader.load_definitions`.
    """

    units: Dict[str, str] = {}
    prefixes: Dict[str, float] = {}
    warnings: List[str] = []

    if not units_text:
        return UnitsTextResult(units, prefixes, warnings)

    for line_no, match in enumerate(_LINE_RE.finditer(units_text), start=1):
        raw_line = match.group(0)
        stripped = raw_line.strip()

        if not stripped or stripped.startswith("#"):
            continue

        pair = _split_first_colon(stripped)
        if pair is None:
            warnings.append(f"Line {line_no}: missing ':', ignored: {stripped!r}")
            continue

        name, definition = pair
        name = name.strip()
        definition = _strip_inline_comment(definition).strip()
        definition = _TRAILING_PUNCT.sub("", definition)

        is_prefix = name.endswith("-")
        if is_prefix:
            name = name[:-1].rstrip()

        if not name:
            warnings.append(f"Line {line_no}: empty symbol.")
            continue
        if any(ch.isspace() for ch in name):
            warnings.append(f"Line {line_no}: symbol {name!r} contains whitespace.")
            continue

        if not definition:
            warnings.append(f"Line {line_no}: empty definition for {name!r}.")
            continue

        if is_prefix:
            try:
                prefixes[name] = float(definition)
            except ValueError:
                warnings.append(f"Line {line_no}: prefix {name!r} needs a number, got {definition!r}.")
            continue

        units[name] = definition

    return UnitsTextResult(units, prefixes, warnings)
