import pytest

from dimquant.core import qmath
from dimquant.core.dimensions import DimensionError
from dimquant.units.format import format_quantity, format_unit, si_format
from dimquant.units.parser import parse
from dimquant.units.si import hour, kilo, meter


def test_format_quantity_spells_out_base_units():
    assert format_quantity(parse("9.81 m/s^2")) == "9.81 m s^-2"
    assert format_quantity(parse("1 km")) == "1000 m"
    assert format_quantity(parse("0.5")) == "0.5"


def test_format_quantity_prefers_named_units():
    assert format_quantity(parse("3 kg m/s^2")) == "3 N"
    assert format_quantity(parse("3 kg m/s^2"), prefer_named=False) == "3 m kg s^-2"


def test_format_unit_with_rational_powers():
    assert format_unit(qmath.sqrt(parse("4 m"))) == "m^1/2"


@pytest.mark.parametrize("text", ["9.81 m/s^2", "25 mmol/L", "100 kΩ", "2 m^1/2", "0.25", "3 N/m"])
def test_formatted_text_parses_back(text):
    quantity = parse(text)
    again = parse(format_quantity(quantity))
    assert again.dimensions == quantity.dimensions
    assert again.raw_value == pytest.approx(quantity.raw_value)


def test_format_quantity_with_custom_table(toy_symbols):
    assert format_quantity(parse("2 m/s", toy_symbols), toy_symbols) == "2 m s^-1"


def test_si_format_expresses_value_in_trailing_unit():
    speed = 12.5 * kilo(meter) / hour
    assert si_format("{:.2f} m/s", speed) == "3.47 m/s"
    assert si_format("{speed:.1f} km/h", parse("10 m/s")) == "36.0 km/h"


def test_si_format_errors():
    with pytest.raises(DimensionError):
        si_format("{:.2f} s", parse("1 m"))
    with pytest.raises(ValueError):
        si_format("no field here", parse("1 m"))
