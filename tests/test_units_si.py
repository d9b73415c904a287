import math

import pytest

from dimquant.core.static import quantity_type
from dimquant.units import si
from dimquant.units.si import (
    SI_SYMBOLS,
    Energy,
    Force,
    Speed,
    hour,
    joule,
    kelvin,
    celsius,
    kilo,
    meter,
    newton,
    parse_si,
    parse_si_static,
    second,
    si_symbols,
)


def test_base_dimensions_are_ranked_in_declaration_order():
    assert (si.candela * si.kilogram * meter * second).dimensions.symbols() == ("L", "M", "T", "J")


def test_named_types_match_unit_arithmetic():
    assert type(newton) is Force
    assert type(joule) is Energy
    assert type(kilo(meter) / hour) is Speed
    assert quantity_type(Force.dimensions).__name__ == "Force"


def test_celsius_shares_kelvin():
    assert celsius is kelvin


def test_compatible_units():
    assert si.hour.raw_value == 3600
    assert si.liter.raw_value == pytest.approx(1e-3)
    assert si.degree_of_angle.raw_value == pytest.approx(math.pi / 180)
    assert si.electron_volt.value(joule) == pytest.approx(1.60217653e-19)
    assert si.dalton.value(si.kilogram) == pytest.approx(1.66053886e-27)


def test_prefix_helpers():
    assert kilo(meter).raw_value == 1000
    assert si.micro(meter).raw_value == pytest.approx(1e-6)
    assert si.prefix(1024)(si.gram).value(si.gram) == pytest.approx(1024)


def test_shared_table_is_frozen_and_fresh_tables_are_not():
    assert SI_SYMBOLS.frozen
    table = si_symbols()
    assert not table.frozen
    assert len(table) == len(SI_SYMBOLS)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 km", 1000.0),
        ("1 µm", 1e-6),
        ("1 μm", 1e-6),
        ("1 um", 1e-6),
        ("1 dam", 10.0),
        ("1 cd", 1.0),
        ("1 min", 60.0),
        ("2 h", 7200.0),
        ("1 hPa", 100.0),
        ("1 mol", 1.0),
        ("1 mmol", 1e-3),
        ("1 kW h", 3.6e6),
        ("1 g", 1e-3),
        ("1 t", 1e3),
        ("20 °C", 20.0),
    ],
)
def test_si_symbols_resolve(text, expected):
    assert parse_si(text).raw_value == pytest.approx(expected)


def test_parse_si_static():
    speed = parse_si_static("36 km/h", Speed)
    assert speed.value(meter / second) == pytest.approx(10)
