"""Symbol tables mapping unit and prefix symbols to their definitions."""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Any, Dict, Mapping

from dimquant.core.quantity import BaseQuantity, DynamicQuantity, is_scalar
from dimquant.units.errors import ParsingError

logger = logging.getLogger(__name__)


class SymbolTableFrozenError(RuntimeError):
    """Raised when a frozen symbol table is modified."""


class SymbolTable:
    """Registry of unit symbols and prefixes consulted by the parser.

    Build the table completely, then :meth:`freeze` it before sharing it
    between threads; lookups on a frozen table need no locking.
    """

    def __init__(self) -> None:
        self._units: Dict[str, DynamicQuantity] = {}
        self._prefixes: Dict[str, Any] = {}
        self._max_prefix_length = 0
        self._frozen = False
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    def add_unit(self, symbol: str, quantity: BaseQuantity) -> SymbolTable:
        """Add or replace the unit ``symbol``."""

        if not symbol:
            raise ValueError("Unit symbol must be a non-empty string")
        if not isinstance(quantity, BaseQuantity):
            raise TypeError(f"Unit {symbol!r} must be a quantity, got {type(quantity).__name__}")
        with self._lock:
            self._ensure_mutable()
            self._units[symbol] = DynamicQuantity(quantity)
        return self

    def add_prefix(self, symbol: str, factor: Any) -> SymbolTable:
        """Add or replace the prefix ``symbol`` with the scale ``factor``."""

        if not symbol:
            raise ValueError("Prefix symbol must be a non-empty string")
        if not is_scalar(factor):
            raise TypeError(f"Prefix {symbol!r} factor must be a number")
        with self._lock:
            self._ensure_mutable()
            self._prefixes[symbol] = factor
            self._max_prefix_length = max(self._max_prefix_length, len(symbol))
        return self

    def freeze(self) -> SymbolTable:
        with self._lock:
            self._frozen = True
        logger.debug("Symbol table frozen with %d units and %d prefixes", len(self._units), len(self._prefixes))
        return self

    def copy(self) -> SymbolTable:
        """Return an unfrozen copy that can be extended."""

        clone = SymbolTable()
        with self._lock:
            clone._units = dict(self._units)
            clone._prefixes = dict(self._prefixes)
            clone._max_prefix_length = self._max_prefix_length
        return clone

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise SymbolTableFrozenError("Symbol table is frozen; use copy() to extend it")

    # ------------------------------------------------------------------
    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def units(self) -> Mapping[str, DynamicQuantity]:
        return MappingProxyType(self._units)

    @property
    def prefixes(self) -> Mapping[str, Any]:
        return MappingProxyType(self._prefixes)

    @property
    def max_prefix_length(self) -> int:
        return self._max_prefix_length

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._units

    def __len__(self) -> int:
        return len(self._units)

    def lookup(self, symbol: str) -> DynamicQuantity:
        """Resolve ``symbol`` to a quantity.

        A standalone unit wins over any prefix decomposition (``cd`` is the
        candela, not a centiday). Otherwise prefixes are tried from the
        longest to the shortest and the first ``prefix + unit`` split whose
        unit is known is returned.
        """

        found = self._units.get(symbol)
        if found is not None:
            return found

        for length in range(min(self._max_prefix_length, len(symbol)), 0, -1):
            prefix = symbol[:length]
            factor = self._prefixes.get(prefix)
            if factor is None:
                continue
            rest = symbol[length:]
            if not rest:
                raise ParsingError(f"Expecting a unit after the prefix {prefix}", symbol, length)
            base = self._units.get(rest)
            if base is not None:
                return factor * base

        raise ParsingError(f"Unknown unit symbol: '{symbol}'", symbol, 0)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "mutable"
        return f"<SymbolTable {len(self._units)} units, {len(self._prefixes)} prefixes, {state}>"


__all__ = ["SymbolTable", "SymbolTableFrozenError"]
