"""Shared fixtures: a small symbol table with a prefix/unit collision on ``m``."""

import pytest

from dimquant.core.quantity import unit
from dimquant.units.symbols import SymbolTable


@pytest.fixture()
def toy_symbols() -> SymbolTable:
    table = SymbolTable()
    table.add_unit("m", unit("L", 0))
    table.add_unit("kg", unit("M", 1))
    table.add_unit("s", unit("T", 2))
    table.add_prefix("c", 0.01)
    table.add_prefix("m", 0.001)
    return table.freeze()
