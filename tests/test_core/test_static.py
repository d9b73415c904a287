"""Tests for quantities whose dimensions are part of their type."""

import pytest

from dimquant.core.dimensions import DimensionError, DimensionVector
from dimquant.core.quantity import DynamicQuantity
from dimquant.core.static import Dimensionless, StaticQuantity, quantity_type, static_unit
from dimquant.units.si import Area, Length, Speed, Time, meter, second


def test_quantity_type_is_cached_per_dimension_vector():
    assert quantity_type(Length.dimensions) is Length
    assert type(meter * meter) is Area
    assert type(meter / second) is Speed
    assert quantity_type(DimensionVector()) is Dimensionless


def test_addition_of_mismatched_types_is_a_type_error():
    with pytest.raises(TypeError):
        _ = meter + second
    with pytest.raises(TypeError):
        _ = meter < second


def test_construction_from_bare_number_only_when_dimensionless():
    assert Dimensionless(3).raw_value == 3
    with pytest.raises(TypeError):
        Length(3.0)
    with pytest.raises(TypeError):
        StaticQuantity(1.0)


def test_construction_from_other_static_type_requires_same_type():
    assert Length(2 * meter) == 2 * meter
    with pytest.raises(TypeError):
        Length(second)


def test_round_trip_through_dynamic():
    distance = 42 * meter
    dynamic = distance.to_dynamic()
    assert isinstance(dynamic, DynamicQuantity)
    assert Length(dynamic) == distance
    assert Length.from_dynamic(DynamicQuantity(distance)) == distance


def test_dynamic_with_other_dimensions_raises_dimension_error():
    with pytest.raises(DimensionError) as excinfo:
        Length(DynamicQuantity(second))
    assert excinfo.value.this_dim == Length.dimensions
    assert excinfo.value.other_dim == Time.dimensions


def test_mixing_static_and_dynamic_uses_run_time_checks():
    dynamic_length = DynamicQuantity(meter)
    total = meter + dynamic_length
    assert isinstance(total, DynamicQuantity)
    assert total.raw_value == 2
    with pytest.raises(DimensionError):
        _ = second + dynamic_length


def test_value_and_scalar_division():
    assert (1500 * meter).value(1000 * meter) == 1.5
    frequency = 2 / second
    assert frequency.dimensions == ~Time.dimensions
    assert type(meter / meter) is Dimensionless
    assert float(meter / meter) == 1.0


def test_float_of_dimensioned_static_is_a_type_error():
    with pytest.raises(TypeError):
        float(meter)


def test_hash_and_repr():
    assert hash(2 * meter) == hash(Length(2 * meter))
    assert repr(2 * meter) == "Length(2.0)"


def test_equal_static_and_dynamic_quantities_hash_alike():
    static = 2 * meter
    dynamic = DynamicQuantity(static)
    assert static == dynamic
    assert hash(static) == hash(dynamic)
    assert len({static, dynamic}) == 1
    assert {dynamic: "x"}[static] == "x"


def test_static_unit_builds_a_one_dimension_base_unit():
    bit = static_unit("B", value_type=int)
    assert type(bit) is quantity_type(DimensionVector.mono("B"))
    assert bit.raw_value == 1
    assert isinstance(bit.raw_value, int)
    assert (8 * bit).value(bit) == 8
