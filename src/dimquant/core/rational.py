"""Exact rational numbers used as dimension exponents.

Exponents are kept as :class:`fractions.Fraction` instances so that roots of
units (``m^1/2``) stay exact. Fractions are always stored in lowest terms with a
positive denominator, which makes equality a plain numerator/denominator
comparison.
"""

from __future__ import annotations

from fractions import Fraction
from functools import lru_cache
from typing import Optional, Union

from ..config import load_settings

Rational = Fraction
RationalLike = Union[int, float, str, Fraction]

DEFAULT_PRECISION = 6


@lru_cache(maxsize=1)
def configured_precision() -> int:
    """Decimal digits used for float exponents, read once from the settings."""

    return load_settings().float_precision


def rational(num: int, den: int = 1) -> Fraction:
    """Build a reduced rational ``num/den``.

    A zero denominator is a programming error and raises
    :class:`ZeroDivisionError` immediately.
    """

    if den == 0:
        raise ZeroDivisionError(f"Denominator is zero in rational({num}, {den})")
    return Fraction(num, den)


def rational_from_float(value: float, precision: int = DEFAULT_PRECISION) -> Fraction:
    """Approximate ``value`` with a rational whose denominator is ``10**precision``.

    The conversion is lossy: ``0.1250001`` becomes ``1/8`` at the default
    precision.
    """

    coef = 10**precision
    return Fraction(round(value * coef), coef)


def to_rational(value: RationalLike, precision: Optional[int] = None) -> Fraction:
    """Convert an exponent to a rational.

    Floats are approximated with ``precision`` decimal digits, by default the
    configured ``DIMQUANT_FLOAT_PRECISION``.
    """

    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise TypeError("Booleans are not valid exponents")
    if isinstance(value, int):
        return Fraction(value, 1)
    if isinstance(value, float):
        if precision is None:
            precision = configured_precision()
        return rational_from_float(value, precision)
    if isinstance(value, str):
        try:
            return Fraction(value.strip())
        except (ValueError, ZeroDivisionError) as exc:
            raise ValueError(f"Invalid rational literal {value!r}") from exc
    raise TypeError(f"Cannot convert {type(value).__name__} to a rational")


def format_rational(value: Fraction) -> str:
    """Return ``"num"`` for integers and ``"num/den"`` otherwise."""

    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


__all__ = [
    "DEFAULT_PRECISION",
    "Rational",
    "RationalLike",
    "configured_precision",
    "format_rational",
    "rational",
    "rational_from_float",
    "to_rational",
]
