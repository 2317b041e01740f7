"""
Units: named affine maps from a raw number to the base representation of a
dimension, ``base_value = value * scale + offset``.
"""

import math
from dataclasses import dataclass
from fractions import Fraction
from numbers import Integral, Rational
from typing import Mapping, Optional, Union

from .dimensions import DIMENSIONLESS_DIMENSIONS, Dimensions, Exponent, exact_exponent
from .errors import InvalidUnitCompositionError, UnsupportedExponentError


Scalar = Union[int, float, Fraction]


@dataclass(frozen=True)
class UnitDescriptor:
    """Primitive unit as handed over by a base-unit source."""
    name: str
    dimensions: Dimensions
    scale: Scalar = 1
    offset: float = 0.0


def _exact_scale(value) -> Fraction:
    if isinstance(value, bool):
        raise TypeError(f"Unit scale must be a number, got {value!r}")
    if isinstance(value, Integral):
        scale = Fraction(int(value))
    elif isinstance(value, Rational):
        scale = Fraction(value.numerator, value.denominator)
    else:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Unit scale must be finite, got {value}")
        scale = Fraction(value)
    if scale == 0:
        raise ValueError("Unit scale must be non-zero")
    return scale


def _integer_root(n: int, degree: int) -> Optional[int]:
    try:
        guess = round(n ** (1.0 / degree))
    except OverflowError:
        return None
    for candidate in (guess - 1, guess, guess + 1):
        if candidate >= 0 and candidate ** degree == n:
            return candidate
    return None


def _scale_power(scale: Fraction, power: Fraction) -> Fraction:
    if power.denominator == 1:
        return scale ** power.numerator
    if scale < 0 and power.denominator % 2 == 0:
        raise UnsupportedExponentError(
            f"Cannot raise a negative scale {scale} to {power}: result is not real"
        )
    magnitude = abs(scale)
    num = _integer_root(magnitude.numerator, power.denominator)
    den = _integer_root(magnitude.denominator, power.denominator)
    if num is not None and den is not None:
        result = Fraction(num, den) ** power.numerator
    else:
        result = Fraction(float(magnitude) ** float(power))
    if scale < 0 and power.numerator % 2:
        result = -result
    return result


def _group(name: str, operators: str = '*/^') -> str:
    return f"({name})" if any(op in name for op in operators) else name


class Unit:
    """A physical unit with dimensional analysis and an affine conversion.

    Units are immutable.  Combining two units always builds a new one.
    Equality compares dimensions, scale and offset; the name is informational.

    A unit is also a factory and an extractor for amounts: ``unit(3.0)``
    builds an ``Amount`` and ``unit(amount)`` reads an amount's value in this
    unit.
    """

    __slots__ = ('_name', '_dimensions', '_scale', '_offset', '_factor')

    def __init__(self, name: Optional[str], dimensions: Dimensions,
                 scale: Scalar = 1, offset: float = 0.0):
        if not isinstance(dimensions, Dimensions):
            raise TypeError(f"Expected Dimensions, got {type(dimensions).__name__}")
        offset = float(offset)
        if not math.isfinite(offset):
            raise ValueError(f"Unit offset must be finite, got {offset}")
        if offset and dimensions.primitive_axis() is None:
            raise InvalidUnitCompositionError(
                f"Offset units need a single base axis with exponent 1, got {dimensions}"
            )
        self._name = name
        self._dimensions = dimensions
        self._scale = _exact_scale(scale)
        self._offset = offset
        self._factor = float(self._scale)

    @classmethod
    def from_base(cls, descriptor: UnitDescriptor) -> 'Unit':
        """Wrap a primitive unit supplied by a base-unit source."""
        return cls(descriptor.name, descriptor.dimensions,
                   descriptor.scale, descriptor.offset)

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def dimensions(self) -> Dimensions:
        return self._dimensions

    @property
    def scale(self) -> Fraction:
        return self._scale

    @property
    def offset(self) -> float:
        return self._offset

    @property
    def factor(self) -> float:
        """Scale as a float, used for numeric conversions."""
        return self._factor

    @property
    def is_affine(self) -> bool:
        return self._offset != 0.0

    def renamed(self, name: Optional[str]) -> 'Unit':
        if name == self._name:
            return self
        return Unit(name, self._dimensions, self._scale, self._offset)

    # Conversions

    def to_base(self, value):
        """Express ``value`` (given in this unit) in the dimension's base unit."""
        if self._factor == 1.0 and not self._offset:
            return value
        return value * self._factor + self._offset

    def from_base_value(self, base_value):
        """Express a base-unit value in this unit."""
        if self._factor == 1.0 and not self._offset:
            return base_value
        return (base_value - self._offset) / self._factor

    def apply(self, value) -> 'Amount':
        """Build an amount of ``value`` in this unit."""
        from .amount import construct
        return construct(self, value)

    def apply_to(self, amount: 'Amount'):
        """Read ``amount`` as a number in this unit."""
        from .amount import extract
        return extract(amount, self)

    def __call__(self, value):
        from .amount import Amount
        if isinstance(value, Amount):
            return self.apply_to(value)
        return self.apply(value)

    # Algebra

    def _check_linear(self, other: 'Unit', operation: str):
        for unit in (self, other):
            if unit.is_affine:
                raise InvalidUnitCompositionError(
                    f"Cannot {operation} {self!r} and {other!r}: "
                    f"{unit!r} has an offset of {unit.offset}"
                )

    def multiply(self, other: 'Unit') -> 'Unit':
        self._check_linear(other, 'multiply')
        name = None
        if self._name is not None and other.name is not None:
            name = f"{self._name}*{_group(other.name, '/')}"
        return Unit(name, self._dimensions * other.dimensions,
                    self._scale * other.scale)

    def divide(self, other: 'Unit') -> 'Unit':
        self._check_linear(other, 'divide')
        name = None
        if self._name is not None and other.name is not None:
            name = f"{self._name}/{_group(other.name, '*/')}"
        return Unit(name, self._dimensions / other.dimensions,
                    self._scale / other.scale)

    def power(self, exponent: Exponent) -> 'Unit':
        """Raise to an exact rational power (a root when non-integral)."""
        exponent = exact_exponent(exponent)
        if exponent == 1:
            return self
        if self.is_affine:
            raise InvalidUnitCompositionError(
                f"Cannot raise {self!r} to {exponent}: it has an offset of {self._offset}"
            )
        name = None
        if self._name is not None:
            text = str(exponent) if exponent.denominator == 1 else f"({exponent})"
            name = f"{_group(self._name)}^{text}"
        return Unit(name, self._dimensions ** exponent,
                    _scale_power(self._scale, exponent))

    def root(self, degree: int) -> 'Unit':
        if not isinstance(degree, Integral) or degree == 0:
            raise UnsupportedExponentError(f"Root degree must be a non-zero integer, got {degree!r}")
        return self.power(Fraction(1, int(degree)))

    def inverse(self) -> 'Unit':
        if self.is_affine:
            raise InvalidUnitCompositionError(
                f"Cannot invert {self!r}: it has an offset of {self._offset}"
            )
        name = None if self._name is None else f"1/{_group(self._name, '*/')}"
        return Unit(name, self._dimensions.inverse(), 1 / self._scale)

    def rescale(self, factor: Scalar, name: Optional[str] = None) -> 'Unit':
        """Same dimension, ``factor`` times larger; the offset is kept."""
        return Unit(name, self._dimensions, self._scale * _exact_scale(factor),
                    self._offset)

    def offset_from(self, delta: float, name: Optional[str] = None) -> 'Unit':
        """Unit whose values read ``delta`` lower than this unit's.

        ``u.offset_from(d)(v)`` equals ``u(v + d)``.  Only primitive dimensions
        (one axis, exponent 1) can carry an offset.
        """
        if self._dimensions.primitive_axis() is None:
            raise InvalidUnitCompositionError(
                f"Cannot offset {self!r}: {self._dimensions} is not a single base axis"
            )
        return Unit(name, self._dimensions, self._scale,
                    self._offset + float(delta) * self._factor)

    def __mul__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return self.divide(other)

    def __pow__(self, power):
        return self.power(power)

    def __eq__(self, other):
        if not isinstance(other, Unit):
            return NotImplemented
        return (self._dimensions == other.dimensions
                and self._scale == other.scale
                and self._offset == other.offset)

    def __hash__(self):
        return hash((self._dimensions, self._scale, self._offset))

    def __repr__(self) -> str:
        if self._name is not None:
            return f"Unit({self._name})"
        text = f"Unit({self._dimensions}, scale={float(self._scale):g}"
        if self._offset:
            text += f", offset={self._offset:g}"
        return text + ")"

    def __str__(self) -> str:
        return self._name if self._name is not None else repr(self)


DIMENSIONLESS = Unit('dimensionless', DIMENSIONLESS_DIMENSIONS)


def dimensionless() -> Unit:
    """The identity unit for multiplication and division."""
    return DIMENSIONLESS


def from_power_map(powers: Mapping[Unit, Exponent]) -> Unit:
    """Product of ``unit ** exponent`` over ``powers``.

    Scales are exact rationals, so the result does not depend on the
    iteration order of ``powers``.
    """
    result = DIMENSIONLESS
    names = []
    for unit, exponent in powers.items():
        if unit.is_affine:
            raise InvalidUnitCompositionError(
                f"Cannot build a unit product from {unit!r}: it has an offset of {unit.offset}"
            )
        powered = unit.power(exponent)
        result = result.multiply(powered)
        names.append(None if powered.name is None else _group(powered.name, '/'))
    if not names:
        return DIMENSIONLESS
    if None in names:
        return result.renamed(None)
    return result.renamed('*'.join(names))
