"""Conversions between :class:`datetime.timedelta` and time quantities."""

from __future__ import annotations

from datetime import timedelta

from dimquant.core.quantity import BaseQuantity
from dimquant.units.si import Time, second


def from_timedelta(delta: timedelta) -> Time:
    return delta.total_seconds() * second


def to_timedelta(quantity: BaseQuantity) -> timedelta:
    """Convert a time quantity, static or dynamic, to a ``timedelta``.

    A quantity without the time dimension raises ``TypeError`` (static) or
    :class:`~dimquant.core.dimensions.DimensionError` (dynamic).
    """

    return timedelta(seconds=float(quantity.value(second)))


__all__ = ["from_timedelta", "to_timedelta"]
