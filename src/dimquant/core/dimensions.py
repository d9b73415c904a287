"""Dimension vectors for dimensional analysis.

A :class:`DimensionVector` is an ordered list of ``(symbol, power)`` entries,
for example ``[L M T^-2]`` for a force. Powers are exact rationals, entries are
kept sorted by ``(rank, symbol)`` and entries whose power cancels to zero are
dropped on construction. The empty vector is therefore the only dimensionless
representation and equality is a structural comparison of the entry lists,
whatever order the factors were multiplied in.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from fractions import Fraction
from typing import Iterable, Iterator, List, Tuple

from .rational import RationalLike, format_rational, to_rational

UNRANKED = sys.maxsize


class DimensionError(Exception):
    """Raised when an operation needs consistent dimensions and they differ.

    ``this_dim`` holds the dimensions of the quantity operated on and
    ``other_dim`` those of the other operand. ``other_dim`` is empty when the
    operation required a dimensionless quantity.
    """

    def __init__(
        self,
        message: str,
        this_dim: "DimensionVector | None" = None,
        other_dim: "DimensionVector | None" = None,
    ) -> None:
        self.this_dim = this_dim if this_dim is not None else DimensionVector()
        self.other_dim = other_dim if other_dim is not None else DimensionVector()
        super().__init__(f"{message}: {self.this_dim} vs {self.other_dim}")
        self.message = message


@dataclass(frozen=True)
class Dim:
    """One entry of a dimension vector."""

    symbol: str
    power: Fraction
    rank: int = field(default=UNRANKED, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "power", to_rational(self.power))

    @property
    def sort_key(self) -> Tuple[int, str]:
        return (self.rank, self.symbol)

    def __str__(self) -> str:
        if self.power == 0:
            return ""
        if self.power == 1:
            return self.symbol
        return f"{self.symbol}^{format_rational(self.power)}"


def _insert(entries: List[Dim], symbol: str, power: Fraction, rank: int) -> None:
    """Merge one entry into the sorted ``entries`` list in place."""

    for pos, dim in enumerate(entries):
        if dim.symbol == symbol:
            merged = dim.power + power
            if merged == 0:
                del entries[pos]
            else:
                entries[pos] = Dim(symbol, merged, dim.rank)
            return

    if power == 0:
        return

    new = Dim(symbol, power, rank)
    for pos, dim in enumerate(entries):
        if dim.sort_key > new.sort_key:
            entries.insert(pos, new)
            return
    entries.append(new)


class DimensionVector:
    """Immutable, sorted vector of dimension powers."""

    __slots__ = ("_dims",)

    def __init__(self, entries: Iterable[Dim] = ()) -> None:
        merged: List[Dim] = []
        for dim in entries:
            _insert(merged, dim.symbol, dim.power, dim.rank)
        self._dims: Tuple[Dim, ...] = tuple(merged)

    # -- Construction -------------------------------------------------------
    @classmethod
    def mono(cls, symbol: str, rank: int = UNRANKED) -> DimensionVector:
        """Vector with the single entry ``symbol^1`` (dimensionless if empty)."""

        if not symbol:
            return cls()
        return cls((Dim(symbol, Fraction(1), rank),))

    @classmethod
    def empty(cls) -> DimensionVector:
        return cls()

    @classmethod
    def _from_sorted(cls, dims: Iterable[Dim]) -> DimensionVector:
        vector = cls.__new__(cls)
        vector._dims = tuple(dim for dim in dims if dim.power != 0)
        return vector

    # -- Core algebra -------------------------------------------------------
    def multiply(self, other: DimensionVector) -> DimensionVector:
        entries = list(self._dims)
        for dim in other._dims:
            _insert(entries, dim.symbol, dim.power, dim.rank)
        return self._from_sorted(entries)

    def divide(self, other: DimensionVector) -> DimensionVector:
        return self.multiply(other.invert())

    def invert(self) -> DimensionVector:
        return self._from_sorted(Dim(d.symbol, -d.power, d.rank) for d in self._dims)

    def pow(self, n: RationalLike) -> DimensionVector:
        """Multiply every power by ``n``; ``pow(0)`` is dimensionless."""

        exponent = to_rational(n)
        if exponent == 0:
            return DimensionVector()
        return self._from_sorted(Dim(d.symbol, d.power * exponent, d.rank) for d in self._dims)

    def powinverse(self, n: RationalLike) -> DimensionVector:
        """Divide every power by ``n`` (the dimensions of an ``n``-th root)."""

        exponent = to_rational(n)
        if exponent == 0:
            raise ZeroDivisionError("Cannot take the 0-th root of dimensions")
        return self._from_sorted(Dim(d.symbol, d.power / exponent, d.rank) for d in self._dims)

    def __mul__(self, other: DimensionVector) -> DimensionVector:
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: DimensionVector) -> DimensionVector:
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return self.divide(other)

    def __invert__(self) -> DimensionVector:
        return self.invert()

    def __pow__(self, n: RationalLike) -> DimensionVector:
        return self.pow(n)

    # -- Queries ------------------------------------------------------------
    @property
    def dims(self) -> Tuple[Dim, ...]:
        return self._dims

    @property
    def is_dimensionless(self) -> bool:
        return not self._dims

    def symbols(self) -> Tuple[str, ...]:
        return tuple(dim.symbol for dim in self._dims)

    def power_of(self, symbol: str) -> Fraction:
        for dim in self._dims:
            if dim.symbol == symbol:
                return dim.power
        return Fraction(0)

    def __len__(self) -> int:
        return len(self._dims)

    def __iter__(self) -> Iterator[Dim]:
        return iter(self._dims)

    def __bool__(self) -> bool:
        return bool(self._dims)

    def _key(self) -> Tuple[Tuple[str, Fraction], ...]:
        return tuple((dim.symbol, dim.power) for dim in self._dims)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DimensionVector):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        return "[" + " ".join(str(dim) for dim in self._dims) + "]"

    def __repr__(self) -> str:
        return f"DimensionVector({str(self)!r})"


__all__ = ["Dim", "DimensionError", "DimensionVector", "UNRANKED"]
