from fractions import Fraction

import pytest

from dimquant.core.dimensions import DimensionError, DimensionVector
from dimquant.core.quantity import DynamicQuantity, unit
from dimquant.units.errors import ParsingError
from dimquant.units.parser import QuantityParser, parse, parse_int, parse_static
from dimquant.units.si import Length, Pressure
from dimquant.units.symbols import SymbolTable

L = DimensionVector.mono("L", 0)
M = DimensionVector.mono("M", 1)
T = DimensionVector.mono("T", 2)


def check(symbols, text, value, dims):
    quantity = parse(text, symbols)
    assert quantity.raw_value == pytest.approx(value)
    assert quantity.dimensions == dims


@pytest.mark.parametrize(
    "text, value, dims",
    [
        ("1    m    ", 1, L),
        ("1m", 1, L),
        ("1 mm", 0.001, L),
        ("1 m^-1", 1, ~L),
        ("1 m^2/2", 1, L),
        ("1 m^-2/2", 1, ~L),
        ("1 m²", 1, L ** 2),
        ("1 m⁺²", 1, L ** 2),
        ("1 m⁻¹", 1, ~L),
        ("1 (m)", 1, L),
        ("1 (m^-1)", 1, ~L),
        ("1 (m^-1)^-1", 1, L),
        ("1 ((m)^-1)^-1", 1, L),
        ("1 (s/(s/m))", 1, L),
        ("1 m*m", 1, L ** 2),
        ("1 m m", 1, L ** 2),
        ("1 m.m", 1, L ** 2),
        ("1 m⋅m", 1, L ** 2),
        ("1 m×m", 1, L ** 2),
        ("1 m/m", 1, DimensionVector()),
        ("1 m÷m", 1, DimensionVector()),
        ("1 m.s", 1, L * T),
        ("1 m s", 1, L * T),
        ("1 m²s", 1, L ** 2 * T),
        ("1 m*m/m", 1, L),
        ("1 kg/(m s^2)", 1, M / L / T ** 2),
        ("0.8 m⁰", 0.8, DimensionVector()),
        ("0.8", 0.8, DimensionVector()),
        ("0.8 ", 0.8, DimensionVector()),
        ("-2.5e3 cm", -25.0, L),
    ],
)
def test_valid_expressions(toy_symbols, text, value, dims):
    check(toy_symbols, text, value, dims)


@pytest.mark.parametrize(
    "text",
    [
        "1 c m",
        "1 c",
        "1 Qm",
        "1 m + m",
        "1 m/",
        "1 m^",
        "1 m^m",
        "1 m ) m",
        "1 m * m) m",
        "1 (m",
        "1 m^²",
        "1-⁺⁵",
        "1 m^2/0",
    ],
)
def test_invalid_expressions(toy_symbols, text):
    with pytest.raises(ParsingError):
        parse(text, toy_symbols)


def test_rational_exponent_only_takes_an_integer_denominator(toy_symbols):
    check(toy_symbols, "1 m^1/2", 1, L ** Fraction(1, 2))
    check(toy_symbols, "1 m^2/s", 1, L ** 2 / T)


def test_missing_number_defaults_to_one(toy_symbols):
    check(toy_symbols, "m/s", 1, L / T)
    check(toy_symbols, "", 1, DimensionVector())
    check(toy_symbols, "   ", 1, DimensionVector())


def test_error_points_at_offending_token(toy_symbols):
    with pytest.raises(ParsingError) as excinfo:
        parse("3 kg/Qm", toy_symbols)
    assert excinfo.value.message == "Unknown unit symbol: 'Qm'"
    assert excinfo.value.position == 4
    assert "^" in str(excinfo.value)


def test_injected_number_parser(toy_symbols):
    integers = SymbolTable().add_unit("m", unit("L", 0, int))
    quantity = parse("12 m", integers, number_parser=parse_int)
    assert quantity.raw_value == 12
    assert isinstance(quantity.raw_value, int)

    def no_number(text):
        return None

    assert parse("m", toy_symbols, number_parser=no_number).raw_value == 1


def test_parse_unit_skips_the_number(toy_symbols):
    centimeter = QuantityParser(toy_symbols).parse_unit("cm")
    assert centimeter.raw_value == pytest.approx(0.01)


def test_default_table_is_si():
    assert parse("1 mm").raw_value == pytest.approx(0.001)
    assert parse("100 kΩ").raw_value == pytest.approx(1e5)
    assert parse("1 cd").dimensions.symbols() == ("J",)
    assert parse("25 mmol/L").raw_value == pytest.approx(25.0)


def test_parse_static():
    pressure = parse_static("3 kPa", Pressure)
    assert type(pressure) is Pressure
    assert pressure.raw_value == pytest.approx(3000)
    assert parse_static("1 km", Length) == 1000 * Length(parse("1 m"))
    with pytest.raises(DimensionError):
        parse_static("1 s", Length)


def test_result_is_dynamic(toy_symbols):
    assert isinstance(parse("1 m", toy_symbols), DynamicQuantity)


def test_integer_token_without_value_is_a_parsing_error(toy_symbols):
    from dimquant.units.lexer import Token, TokenKind
    from dimquant.units.parser import _TokenStream, _UnitExpressionParser

    stream = _TokenStream([Token(TokenKind.INTEGER, "2", 0)], "2")
    with pytest.raises(ParsingError, match="Expecting an integer"):
        _UnitExpressionParser(stream, toy_symbols).parse_integer()
