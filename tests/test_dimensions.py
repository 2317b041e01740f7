"""
Tests for the rational dimension algebra.
"""

from fractions import Fraction

import pytest

from phyunits.core.dimensions import AXES, DIMENSIONLESS_DIMENSIONS, Dimensions
from phyunits.core.errors import UnsupportedExponentError


class TestDimensions:
    def test_dimensions_equality(self):
        dim1 = Dimensions(length=1, mass=1, time=-2)
        dim2 = Dimensions(length=1, mass=1, time=-2)
        dim3 = Dimensions(length=2, mass=1, time=-2)

        assert dim1 == dim2
        assert dim1 != dim3
        assert hash(dim1) == hash(dim2)

    def test_exponents_are_exact_rationals(self):
        dim = Dimensions(length=Fraction(1, 3))
        assert isinstance(dim.length, Fraction)
        assert isinstance(Dimensions(time=2).time, Fraction)
        assert Dimensions(length=2.0) == Dimensions(length=2)

    def test_float_exponents_rejected(self):
        with pytest.raises(UnsupportedExponentError):
            Dimensions(length=0.5)
        with pytest.raises(UnsupportedExponentError):
            Dimensions(length=1) ** 0.5

    def test_dimensions_multiplication(self):
        dim1 = Dimensions(length=1, time=-1)
        dim2 = Dimensions(length=1, time=-1)

        assert dim1 * dim2 == Dimensions(length=2, time=-2)

    def test_dimensions_division(self):
        dim1 = Dimensions(length=2, time=-2)
        dim2 = Dimensions(length=1, time=-1)

        assert dim1 / dim2 == Dimensions(length=1, time=-1)

    def test_dimensions_power(self):
        dim = Dimensions(length=1, time=-1)

        assert dim ** 2 == Dimensions(length=2, time=-2)
        assert Dimensions(length=2) ** Fraction(1, 2) == Dimensions(length=1)
        assert dim ** 0 == DIMENSIONLESS_DIMENSIONS

    def test_inverse(self):
        dim = Dimensions(mass=1, charge=Fraction(-1, 2))
        assert dim.inverse() == Dimensions(mass=-1, charge=Fraction(1, 2))
        assert (dim * dim.inverse()).is_dimensionless()

    def test_dimensionless(self):
        dim1 = Dimensions()
        dim2 = Dimensions(length=1, time=-1)
        dim3 = dim2 / dim2

        assert dim1.is_dimensionless()
        assert not dim2.is_dimensionless()
        assert dim3.is_dimensionless()

    def test_pseudo_axes_are_distinct(self):
        angle = Dimensions.axis('angle')
        redshift = Dimensions.axis('redshift')
        probability = Dimensions.axis('probability')

        assert angle != redshift
        assert redshift != probability
        assert angle != DIMENSIONLESS_DIMENSIONS
        assert angle.is_pseudo()
        assert not Dimensions(length=1, angle=1).is_pseudo()
        assert not DIMENSIONLESS_DIMENSIONS.is_pseudo()

    def test_primitive_axis(self):
        assert Dimensions(temperature=1).primitive_axis() == 'temperature'
        assert Dimensions.axis('redshift').primitive_axis() == 'redshift'
        assert Dimensions(length=2).primitive_axis() is None
        assert Dimensions(length=1, time=-1).primitive_axis() is None
        assert DIMENSIONLESS_DIMENSIONS.primitive_axis() is None

    def test_unknown_axis(self):
        with pytest.raises(ValueError):
            Dimensions.axis('flavour')

    def test_items_and_exponents(self):
        dim = Dimensions(length=1, time=-2)
        assert dict(dim.items()) == {'length': 1, 'time': -2}
        assert len(dim.exponents()) == len(AXES)

    def test_string_forms(self):
        assert str(Dimensions(length=1, time=-1)) == '[length][time]^-1'
        assert str(DIMENSIONLESS_DIMENSIONS) == '[dimensionless]'
        assert repr(Dimensions(mass=2)) == 'Dimensions(mass=2)'
