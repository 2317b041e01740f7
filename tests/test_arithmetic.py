"""
Tests for the dimension-checked arithmetic layer.
"""

from fractions import Fraction

import numpy as np
import pytest

from phyunits import ops
from phyunits.core.amount import Amount
from phyunits.core.dimensions import Dimensions
from phyunits.core.errors import (
    DimensionMismatchError,
    InvalidUnitCompositionError,
    UnsupportedExponentError,
)
from phyunits.core.unit import DIMENSIONLESS, Unit


LENGTH = Dimensions(length=1)

meter = Unit('m', LENGTH)
kilometer = Unit('km', LENGTH, 1000)
second = Unit('s', Dimensions(time=1))
kilogram = Unit('kg', Dimensions(mass=1))
celsius = Unit('degC', Dimensions(temperature=1), 1, 273.15)
percent = Unit('%', Dimensions(), Fraction(1, 100))
zee = Unit('zee', Dimensions.axis('redshift'))


class TestTransparency:
    """With plain numbers only, ops must behave exactly like the operators."""

    def test_plain_results(self):
        assert ops.mul(2, 3) == 6
        assert type(ops.mul(2, 3)) is int
        assert ops.add(0.1, 0.2) == 0.1 + 0.2
        assert ops.sub(10, 4, 3) == 3
        assert ops.div(1, 3) == 1 / 3
        assert ops.expt(2, 10) == 1024
        assert ops.expt(2.0, 0.5) == 2.0 ** 0.5

    def test_unary_forms(self):
        assert ops.sub(5) == -5
        assert ops.div(4) == 0.25
        assert ops.add() == 0
        assert ops.mul() == 1
        assert ops.neg(3) == -3
        assert ops.absolute(-3) == 3

    def test_plain_comparisons(self):
        assert ops.lt(1, 2, 3) is True
        assert ops.lt(1, 3, 2) is False
        assert ops.eq(2, 2.0) is True
        assert ops.ge(3, 3, 1) is True

    def test_arrays(self):
        values = np.array([1.0, 2.0])
        np.testing.assert_array_equal(ops.mul(values, 2), values * 2)
        np.testing.assert_array_equal(ops.lt(0, values, 3), [True, True])

    def test_division_by_zero_propagates(self):
        with pytest.raises(ZeroDivisionError):
            ops.div(1, 0)
        with pytest.raises(ZeroDivisionError):
            ops.div(meter(1), 0)


class TestAddition:
    def test_result_in_left_unit(self):
        total = ops.add(kilometer(1), meter(500))
        assert total.unit is kilometer
        assert total.value == pytest.approx(1.5)

        total = meter(500) + kilometer(1)
        assert total.unit is meter
        assert total.value == pytest.approx(1500)

    def test_variadic(self):
        total = ops.add(meter(1), meter(2), kilometer(0.001))
        assert total.value == pytest.approx(4)

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            ops.add(meter(1), second(1))
        with pytest.raises(DimensionMismatchError):
            meter(1) - second(1)

    def test_plain_numbers_are_dimensionless(self):
        total = ops.add(1, percent(50))
        assert total.unit is DIMENSIONLESS
        assert total.value == pytest.approx(1.5)

        total = ops.add(percent(50), 1)
        assert total.unit is percent
        assert total.value == pytest.approx(150)

        with pytest.raises(DimensionMismatchError):
            ops.add(meter(1), 1)
        with pytest.raises(DimensionMismatchError):
            ops.add(1, zee(0.5))

    def test_subtraction(self):
        difference = ops.sub(kilometer(2), meter(500))
        assert difference.unit is kilometer
        assert difference.value == pytest.approx(1.5)
        assert ops.sub(meter(2)).value == -2

    def test_affine_addition_stays_in_left_unit(self):
        total = ops.add(celsius(20), celsius(5))
        assert total.unit is celsius
        assert total.value == pytest.approx(25)


class TestMultiplication:
    def test_units_compose(self):
        product = meter(2) * second(3)
        assert product.value == 6
        assert product.unit.dimensions == Dimensions(length=1, time=1)
        assert product.unit.name == 'm*s'

    def test_scalar_keeps_unit(self):
        assert (2 * kilometer(3)).unit is kilometer
        assert (kilometer(3) * 2).value == 6
        assert (kilometer(3) / 2).unit is kilometer

    def test_division_composes(self):
        speed = kilometer(3) / second(2)
        assert speed.value == 1.5
        assert speed.unit == kilometer / second
        assert speed == Amount(1500, meter / second)

    def test_plain_divided_by_amount(self):
        frequency = ops.div(2, second(4))
        assert frequency.value == 0.5
        assert frequency.unit.dimensions == Dimensions(time=-1)

    def test_same_dimension_quotient_is_dimensionless(self):
        ratio = kilometer(1) / meter(1)
        assert ratio.dimensions.is_dimensionless()
        assert float(ratio) == pytest.approx(1000)

    def test_affine_operands_rejected(self):
        with pytest.raises(InvalidUnitCompositionError):
            2 * celsius(20)
        with pytest.raises(InvalidUnitCompositionError):
            celsius(20) * meter(1)
        with pytest.raises(InvalidUnitCompositionError):
            1 / celsius(20)

    def test_variadic(self):
        energy = ops.mul(0.5, kilogram(2), meter(10) / second(1), meter(10) / second(1))
        assert energy.value == pytest.approx(100)
        assert energy.dimensions == Dimensions(mass=1, length=2, time=-2)


class TestPowers:
    def test_integer_power(self):
        area = meter(3) ** 2
        assert area.value == 9
        assert area.unit == meter ** 2

    def test_rational_root(self):
        side = ops.root(Amount(9, meter ** 2), 2)
        assert side.value == pytest.approx(3)
        assert side.unit == meter
        assert ops.expt(Amount(8, meter ** 3), Fraction(1, 3)).value == pytest.approx(2)

    def test_float_exponent_rejected_for_amounts(self):
        with pytest.raises(UnsupportedExponentError):
            ops.expt(meter(4), 0.5)
        assert ops.expt(meter(4), 2.0).value == 16

    def test_exponent_must_be_dimensionless(self):
        with pytest.raises(DimensionMismatchError):
            ops.expt(meter(2), meter(1))
        assert ops.expt(meter(2), percent(200)).unit == meter ** 2

    def test_reflected_power(self):
        assert 2 ** percent(200) == pytest.approx(4)
        with pytest.raises(DimensionMismatchError):
            2 ** meter(1)

    def test_affine_power(self):
        assert (celsius(20) ** 1).unit is celsius
        with pytest.raises(InvalidUnitCompositionError):
            celsius(20) ** 2


class TestComparisons:
    def test_chained(self):
        assert ops.lt(meter(1), kilometer(0.5), meter(600))
        assert not ops.lt(meter(1), kilometer(0.5), meter(400))
        assert ops.le(meter(1000), kilometer(1))
        assert ops.gt(kilometer(1), meter(10), 0 * meter(1))

    def test_equality(self):
        assert ops.eq(kilometer(1), meter(1000))
        assert ops.ne(kilometer(1), meter(1))
        with pytest.raises(DimensionMismatchError):
            ops.eq(meter(1), second(1))

    def test_mismatch_detected_past_first_pair(self):
        with pytest.raises(DimensionMismatchError):
            ops.lt(meter(2), meter(1), second(3))

    def test_isclose(self):
        assert ops.isclose(kilometer(1), meter(1000.0000001))
        assert not ops.isclose(kilometer(1), meter(1001))
        assert ops.isclose(kilometer(1), meter(1001), abs_tol=meter(2))
        with pytest.raises(DimensionMismatchError):
            ops.isclose(meter(1), second(1))

    def test_isclose_affine_tolerance_is_a_difference(self):
        assert not ops.isclose(celsius(20), celsius(25), abs_tol=celsius(1))
        assert ops.isclose(celsius(20), celsius(20.5), abs_tol=celsius(1))

    def test_bad_operand_type(self):
        with pytest.raises(TypeError):
            ops.add(meter(1), 'm')
