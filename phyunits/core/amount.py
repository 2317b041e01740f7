"""
Amounts: numbers tagged with the unit they are expressed in.
"""

from numbers import Number
from typing import Union

import numpy as np

from .dimensions import DIMENSIONLESS_DIMENSIONS, Dimensions
from .errors import DimensionMismatchError
from .unit import DIMENSIONLESS, Unit


Numeric = Union[Number, np.ndarray]


def is_plain(value) -> bool:
    """True for unit-naive numeric values (Python/numpy numbers and arrays)."""
    return isinstance(value, (Number, np.ndarray, np.generic)) and not isinstance(value, Amount)


class Amount:
    """A physical quantity: an immutable ``(value, unit)`` pair.

    Two amounts compare by their base-normalized values, so ``km(1) == m(1000)``.
    Comparing amounts of different dimensions raises ``DimensionMismatchError``.

    Negation and ``abs`` act on the reading, also for affine units:
    ``-celsius(20)`` is ``celsius(-20)``, not the negated absolute temperature.
    """

    __slots__ = ('_value', '_unit')

    # numpy defers to our reflected operators instead of broadcasting over us
    __array_ufunc__ = None

    def __init__(self, value: Numeric, unit: Unit):
        if not isinstance(unit, Unit):
            raise TypeError(f"Expected a Unit, got {type(unit).__name__}")
        if isinstance(value, Amount):
            raise TypeError("Amount values must be plain numbers; use amount.to(unit) to convert")
        if not is_plain(value):
            if isinstance(value, (list, tuple)):
                value = np.asarray(value)
            else:
                raise TypeError(f"Cannot build an Amount from {type(value).__name__}")
        self._value = value
        self._unit = unit

    @property
    def value(self) -> Numeric:
        return self._value

    @property
    def magnitude(self) -> Numeric:
        """Return the numerical value without units."""
        return self._value

    @property
    def unit(self) -> Unit:
        return self._unit

    @property
    def dimensions(self) -> Dimensions:
        return self._unit.dimensions

    @property
    def base_value(self) -> Numeric:
        """Value expressed in the base unit of this amount's dimension."""
        return self._unit.to_base(self._value)

    def value_in(self, unit: Unit) -> Numeric:
        return extract(self, unit)

    def to(self, unit: Unit) -> 'Amount':
        """Convert amount to a different unit."""
        return convert(self, unit)

    def check_dimensions(self, expected: Dimensions) -> bool:
        return self._unit.dimensions == expected

    def __float__(self) -> float:
        return float(extract(self, DIMENSIONLESS))

    def __repr__(self) -> str:
        return f"Amount({self._value!r}, {self._unit})"

    def __str__(self) -> str:
        return f"{self._value} {self._unit}"

    # Arithmetic is dimension-checked in phyunits.ops

    def __add__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.add(self, other)

    def __radd__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.add(other, self)

    def __sub__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.sub(self, other)

    def __rsub__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.sub(other, self)

    def __mul__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.mul(self, other)

    def __rmul__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.mul(other, self)

    def __truediv__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.div(self, other)

    def __rtruediv__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.div(other, self)

    def __pow__(self, power):
        from ..ops import arithmetic
        return arithmetic.expt(self, power)

    def __rpow__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.expt(other, self)

    def __neg__(self):
        return Amount(-self._value, self._unit)

    def __pos__(self):
        return self

    def __abs__(self):
        return Amount(abs(self._value), self._unit)

    def __eq__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.eq(self, other)

    def __ne__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.ne(self, other)

    def __lt__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.lt(self, other)

    def __le__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.le(self, other)

    def __gt__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.gt(self, other)

    def __ge__(self, other):
        from ..ops import arithmetic
        if not arithmetic.is_operand(other):
            return NotImplemented
        return arithmetic.ge(self, other)

    __hash__ = None


def construct(unit: Unit, value: Numeric) -> Amount:
    """Wrap ``value`` under ``unit``; no conversion is performed."""
    return Amount(value, unit)


def extract(amount: Amount, target: Unit) -> Numeric:
    """Value of ``amount`` expressed in ``target``."""
    if not isinstance(amount, Amount):
        raise TypeError(f"Expected an Amount, got {type(amount).__name__}")
    source = amount.unit
    if source.dimensions != target.dimensions:
        raise DimensionMismatchError(amount, target, operation='convert')
    if source == target:
        return amount.value
    return target.from_base_value(source.to_base(amount.value))


def convert(amount: Amount, target: Unit) -> Amount:
    return Amount(extract(amount, target), target)


def dimensions_of(value) -> Dimensions:
    """Dimensions of an amount; plain numbers are dimensionless."""
    if isinstance(value, Amount):
        return value.dimensions
    return DIMENSIONLESS_DIMENSIONS
