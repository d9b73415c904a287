"""Affine temperature scales.

Celsius shares the kelvin's dimension and scale in the symbol table, so the
parser reads ``"20 °C"`` style input as a temperature difference. Absolute
readings on the Celsius and Fahrenheit scales go through these helpers.
"""

from __future__ import annotations

from dimquant.core.quantity import BaseQuantity
from dimquant.units.si import Temperature, kelvin

ZERO_CELSIUS = 273.15


def from_celsius(degrees: float) -> Temperature:
    return (degrees + ZERO_CELSIUS) * kelvin


def to_celsius(quantity: BaseQuantity) -> float:
    return quantity.value(kelvin) - ZERO_CELSIUS


def from_fahrenheit(degrees: float) -> Temperature:
    return from_celsius((degrees - 32.0) * 5.0 / 9.0)


def to_fahrenheit(quantity: BaseQuantity) -> float:
    return to_celsius(quantity) * 9.0 / 5.0 + 32.0


__all__ = ["ZERO_CELSIUS", "from_celsius", "from_fahrenheit", "to_celsius", "to_fahrenheit"]
