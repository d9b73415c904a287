"""SI units, prefixes and the default symbol table.

Units are defined as static quantities so that their types (``Length``,
``Speed`` ...) can be used to check conversions; the symbol table stores
their dynamic counterparts.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Tuple

from dimquant.core.dimensions import DimensionVector
from dimquant.core.qmath import cubic, square
from dimquant.core.quantity import BaseQuantity, DynamicQuantity
from dimquant.core.static import StaticQuantity, quantity_type
from dimquant.units.symbols import SymbolTable

BASE_ORDER: Tuple[str, ...] = ("L", "M", "T", "I", "Θ", "N", "J")


def _base(symbol: str) -> DimensionVector:
    return DimensionVector.mono(symbol, BASE_ORDER.index(symbol))


Length = quantity_type(_base("L"), "Length")
Mass = quantity_type(_base("M"), "Mass")
Time = quantity_type(_base("T"), "Time")
ElectricCurrent = quantity_type(_base("I"), "ElectricCurrent")
Temperature = quantity_type(_base("Θ"), "Temperature")
AmountOfSubstance = quantity_type(_base("N"), "AmountOfSubstance")
LuminousIntensity = quantity_type(_base("J"), "LuminousIntensity")

# Named derived types; registered before any unit arithmetic creates them
_L, _M, _T = Length.dimensions, Mass.dimensions, Time.dimensions
_I, _N = ElectricCurrent.dimensions, AmountOfSubstance.dimensions

Area = quantity_type(_L ** 2, "Area")
Volume = quantity_type(_L ** 3, "Volume")
Frequency = quantity_type(~_T, "Frequency")
Speed = quantity_type(_L / _T, "Speed")
Acceleration = quantity_type(_L / _T ** 2, "Acceleration")
Force = quantity_type(_M * _L / _T ** 2, "Force")
Pressure = quantity_type(Force.dimensions / _L ** 2, "Pressure")
Energy = quantity_type(Force.dimensions * _L, "Energy")
Power = quantity_type(Energy.dimensions / _T, "Power")
Charge = quantity_type(_T * _I, "Charge")
Voltage = quantity_type(Power.dimensions / _I, "Voltage")
Capacitance = quantity_type(Charge.dimensions / Voltage.dimensions, "Capacitance")
Resistance = quantity_type(Voltage.dimensions / _I, "Resistance")
Conductance = quantity_type(_I / Voltage.dimensions, "Conductance")
MagneticFlux = quantity_type(Voltage.dimensions * _T, "MagneticFlux")
MagneticFluxDensity = quantity_type(MagneticFlux.dimensions / _L ** 2, "MagneticFluxDensity")
Inductance = quantity_type(MagneticFlux.dimensions / _I, "Inductance")
Density = quantity_type(_M / _L ** 3, "Density")
Concentration = quantity_type(_N / _L ** 3, "Concentration")
MolarMass = quantity_type(_M / _N, "MolarMass")

# Base units
meter = Length._make(1.0)
metre = meter
kilogram = Mass._make(1.0)
second = Time._make(1.0)
ampere = ElectricCurrent._make(1.0)
kelvin = Temperature._make(1.0)
mole = AmountOfSubstance._make(1.0)
candela = LuminousIntensity._make(1.0)

# Derived SI units
radian = meter / meter
steradian = square(meter) / square(meter)
hertz = 1 / second
newton = kilogram * meter / square(second)
pascal = newton / square(meter)
joule = newton * meter
watt = joule / second
coulomb = second * ampere
volt = watt / ampere
farad = coulomb / volt
ohm = volt / ampere
siemens = ampere / volt
weber = volt * second
tesla = weber / square(meter)
henry = weber / ampere
celsius = kelvin
lumen = candela / steradian
lux = lumen / square(meter)
becquerel = 1 / second
gray = joule / kilogram
sievert = joule / kilogram
katal = mole / second

# Units accepted for use with the SI
gram = 1e-3 * kilogram
minute = 60 * second
hour = 60 * minute
day = 24 * hour
degree_of_angle = math.pi / 180 * radian
minute_of_angle = degree_of_angle / 60
second_of_angle = minute_of_angle / 60
hectare = 1e4 * square(meter)
liter = 1e-3 * cubic(meter)
litre = liter
ton = 1e3 * kilogram
electron_volt = 1.60217653e-19 * joule
dalton = 1.66053886e-27 * kilogram


def prefix(factor: Any) -> Callable[[BaseQuantity], BaseQuantity]:
    """Return a function scaling a unit by ``factor``: ``kilo(meter)``."""

    def apply(base: BaseQuantity) -> BaseQuantity:
        return base * factor

    return apply


PREFIXES: Tuple[Tuple[str, str, float], ...] = (
    ("yotta", "Y", 1e24),
    ("zetta", "Z", 1e21),
    ("exa", "E", 1e18),
    ("peta", "P", 1e15),
    ("tera", "T", 1e12),
    ("giga", "G", 1e9),
    ("mega", "M", 1e6),
    ("kilo", "k", 1e3),
    ("hecto", "h", 1e2),
    ("deca", "da", 1e1),
    ("deci", "d", 1e-1),
    ("centi", "c", 1e-2),
    ("milli", "m", 1e-3),
    ("micro", "µ", 1e-6),
    ("nano", "n", 1e-9),
    ("pico", "p", 1e-12),
    ("femto", "f", 1e-15),
    ("atto", "a", 1e-18),
    ("zepto", "z", 1e-21),
    ("yocto", "y", 1e-24),
)

yotta = prefix(1e24)
zetta = prefix(1e21)
exa = prefix(1e18)
peta = prefix(1e15)
tera = prefix(1e12)
giga = prefix(1e9)
mega = prefix(1e6)
kilo = prefix(1e3)
hecto = prefix(1e2)
deca = prefix(1e1)
deci = prefix(1e-1)
centi = prefix(1e-2)
milli = prefix(1e-3)
micro = prefix(1e-6)
nano = prefix(1e-9)
pico = prefix(1e-12)
femto = prefix(1e-15)
atto = prefix(1e-18)
zepto = prefix(1e-21)
yocto = prefix(1e-24)

UNIT_SYMBOLS: Tuple[Tuple[str, StaticQuantity], ...] = (
    ("m", meter),
    ("kg", kilogram),
    ("s", second),
    ("A", ampere),
    ("K", kelvin),
    ("°C", celsius),
    ("mol", mole),
    ("cd", candela),
    ("rad", radian),
    ("sr", steradian),
    ("Hz", hertz),
    ("N", newton),
    ("Pa", pascal),
    ("J", joule),
    ("W", watt),
    ("C", coulomb),
    ("V", volt),
    ("F", farad),
    ("Ω", ohm),
    ("S", siemens),
    ("Wb", weber),
    ("T", tesla),
    ("H", henry),
    ("lm", lumen),
    ("lx", lux),
    ("Bq", becquerel),
    ("Gy", gray),
    ("Sv", sievert),
    ("kat", katal),
    ("g", gram),
    ("min", minute),
    ("h", hour),
    ("d", day),
    ("l", liter),
    ("L", liter),
    ("t", ton),
    ("eV", electron_volt),
    ("Da", dalton),
)


def si_symbols() -> SymbolTable:
    """Build a new, mutable symbol table holding the SI units and prefixes."""

    table = SymbolTable()
    for symbol, quantity in UNIT_SYMBOLS:
        table.add_unit(symbol, quantity)
    for _, symbol, factor in PREFIXES:
        table.add_prefix(symbol, factor)
    # Micro sign and Greek mu are distinct code points; accept both plus ASCII u.
    table.add_prefix("μ", 1e-6).add_prefix("u", 1e-6)
    return table


SI_SYMBOLS = si_symbols().freeze()


def parse_si(text: str) -> DynamicQuantity:
    """Parse ``text`` with the SI symbol table."""

    from dimquant.units.parser import parse

    return parse(text, SI_SYMBOLS)


def parse_si_static(text: str, qtype: type[StaticQuantity]) -> StaticQuantity:
    """Parse ``text`` with the SI symbol table into the static type ``qtype``."""

    from dimquant.units.parser import parse_static

    return parse_static(text, qtype, SI_SYMBOLS)


__all__ = [
    "BASE_ORDER",
    "PREFIXES",
    "SI_SYMBOLS",
    "UNIT_SYMBOLS",
    "parse_si",
    "parse_si_static",
    "prefix",
    "si_symbols",
]
