"""
Tests for amounts: construction, extraction, conversion and comparison.
"""

from fractions import Fraction

import numpy as np
import pytest

from phyunits.core.amount import Amount, construct, convert, extract
from phyunits.core.dimensions import Dimensions
from phyunits.core.errors import DimensionMismatchError
from phyunits.core.unit import DIMENSIONLESS, Unit


LENGTH = Dimensions(length=1)
TEMPERATURE = Dimensions(temperature=1)

meter = Unit('m', LENGTH)
kilometer = Unit('km', LENGTH, 1000)
inch = Unit('in', LENGTH, 0.0254)
second = Unit('s', Dimensions(time=1))
kelvin = Unit('K', TEMPERATURE)
celsius = Unit('degC', TEMPERATURE, 1, 273.15)
fahrenheit = Unit('degF', TEMPERATURE, Fraction(5, 9), 255.37222222222223)
percent = Unit('%', Dimensions(), Fraction(1, 100))
radian = Unit('rad', Dimensions.axis('angle'))


class TestAmountCreation:
    def test_construct_performs_no_conversion(self):
        distance = construct(kilometer, 2)
        assert distance.value == 2
        assert distance.unit is kilometer
        assert distance.magnitude == 2

    def test_array_amount(self):
        positions = Amount(np.array([1.0, 2.0, 3.0]), meter)
        assert positions.value.shape == (3,)
        assert Amount([1.0, 2.0], meter).value.shape == (2,)

    def test_invalid_values(self):
        with pytest.raises(TypeError):
            Amount(meter(1), meter)
        with pytest.raises(TypeError):
            Amount('1', meter)
        with pytest.raises(TypeError):
            Amount(1, 'm')

    def test_amounts_are_not_hashable(self):
        with pytest.raises(TypeError):
            hash(meter(1))

    def test_negation_acts_on_the_reading(self):
        assert (-kilometer(2)).value == -2
        assert (-kilometer(2)).unit is kilometer
        flipped = -celsius(20)
        assert flipped.unit is celsius
        assert flipped.value == -20
        assert abs(celsius(-5)).value == 5

    def test_base_value(self):
        assert kilometer(2).base_value == 2000
        assert celsius(0).base_value == pytest.approx(273.15)
        assert kilometer(2).dimensions == LENGTH
        assert kilometer(2).check_dimensions(LENGTH)


class TestExtraction:
    def test_kilometers_to_meters(self):
        assert extract(construct(kilometer, 2), meter) == 2000

    def test_same_unit_returns_value_unchanged(self):
        value = 0.1 + 0.2
        assert extract(meter(value), meter) is value

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError) as excinfo:
            extract(meter(1), second)
        message = str(excinfo.value)
        assert '[length]' in message
        assert '[time]' in message

    def test_affine_extraction(self):
        assert extract(celsius(100), fahrenheit) == pytest.approx(212)
        assert extract(fahrenheit(32), celsius) == pytest.approx(0, abs=1e-9)

    def test_pseudo_dimensions_do_not_convert(self):
        with pytest.raises(DimensionMismatchError):
            extract(radian(1), DIMENSIONLESS)

    def test_array_conversion(self):
        distances = Amount(np.array([1.0, 2.5]), kilometer).to(meter)
        np.testing.assert_allclose(distances.value, [1000.0, 2500.0])


class TestConversion:
    @pytest.mark.parametrize('amount, unit', [
        (meter(3.7), inch),
        (kilometer(0.125), inch),
        (celsius(36.6), fahrenheit),
        (fahrenheit(-40), kelvin),
        (percent(12.5), DIMENSIONLESS),
    ])
    def test_round_trip(self, amount, unit):
        back = convert(convert(amount, unit), amount.unit)
        assert back.unit == amount.unit
        assert back.value == pytest.approx(amount.value)

    def test_value_in(self):
        assert kilometer(2).value_in(meter) == pytest.approx(2000)
        assert celsius(100).value_in(kelvin) == pytest.approx(373.15)
        with pytest.raises(DimensionMismatchError):
            kilometer(2).value_in(second)

    def test_to(self):
        converted = meter(2500).to(kilometer)
        assert converted.unit is kilometer
        assert converted.value == pytest.approx(2.5)

    def test_float_of_dimensionless_amount(self):
        assert float(percent(50)) == pytest.approx(0.5)
        with pytest.raises(DimensionMismatchError):
            float(meter(1))


class TestComparison:
    def test_equality_up_to_conversion(self):
        assert kilometer(1) == meter(1000)
        assert meter(1000) == kilometer(1)
        assert kilometer(1) != meter(999)

    def test_mismatched_dimensions_raise(self):
        with pytest.raises(DimensionMismatchError):
            meter(1) == second(1)
        with pytest.raises(DimensionMismatchError):
            meter(1) < second(1)

    def test_ordering(self):
        assert meter(999) < kilometer(1)
        assert kilometer(1) <= meter(1000)
        assert celsius(0) > kelvin(273)
        assert fahrenheit(213) >= celsius(100)

    def test_non_numeric_comparison(self):
        assert (meter(1) == 'one meter') is False


class TestNumpyInterop:
    def test_numpy_scalar_times_amount(self):
        product = np.float64(2.0) * meter(3)
        assert isinstance(product, Amount)
        assert product.value == 6.0

    def test_array_times_amount(self):
        product = np.array([1.0, 2.0]) * kilometer(3)
        assert isinstance(product, Amount)
        assert product.unit is kilometer
        np.testing.assert_allclose(product.value, [3.0, 6.0])
