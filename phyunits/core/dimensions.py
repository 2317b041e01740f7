"""
Dimension algebra over exact rational exponents.

A ``Dimensions`` value holds one exponent per axis.  Besides the usual
physical axes it carries pseudo axes (angle, solid angle, redshift,
probability) for quantities that are dimensionless in SI but must never be
converted into one another.
"""

from dataclasses import dataclass, fields
from fractions import Fraction
from numbers import Integral, Rational
from typing import Iterator, Optional, Tuple, Union

from .errors import UnsupportedExponentError


Exponent = Union[int, Fraction]

PHYSICAL_AXES = (
    'length', 'mass', 'time', 'charge', 'temperature', 'amount',
    'luminous_intensity',
)
PSEUDO_AXES = ('angle', 'solid_angle', 'redshift', 'probability')
AXES = PHYSICAL_AXES + PSEUDO_AXES


def exact_exponent(value) -> Fraction:
    """Coerce ``value`` to an exact rational exponent.

    Integers and ``Fraction`` pass through, floats are accepted only when
    they hold an integer value.
    """
    if isinstance(value, bool):
        raise UnsupportedExponentError(f"Exponent must be a number, got {value!r}")
    if isinstance(value, Integral):
        return Fraction(int(value))
    if isinstance(value, Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, float) and value.is_integer():
        return Fraction(int(value))
    raise UnsupportedExponentError(
        f"Exponent must be an exact rational (int or Fraction), got {value!r}"
    )


@dataclass(frozen=True)
class Dimensions:
    """Physical dimensions as rational exponents of the base axes."""
    length: Exponent = 0
    mass: Exponent = 0
    time: Exponent = 0
    charge: Exponent = 0
    temperature: Exponent = 0
    amount: Exponent = 0
    luminous_intensity: Exponent = 0
    angle: Exponent = 0
    solid_angle: Exponent = 0
    redshift: Exponent = 0
    probability: Exponent = 0

    def __post_init__(self):
        for f in fields(self):
            object.__setattr__(self, f.name, exact_exponent(getattr(self, f.name)))

    @classmethod
    def axis(cls, name: str, exponent: Exponent = 1) -> 'Dimensions':
        """Dimensions with a single non-zero axis."""
        if name not in AXES:
            raise ValueError(f"Unknown axis: {name}")
        return cls(**{name: exponent})

    def exponents(self) -> Tuple[Fraction, ...]:
        return tuple(getattr(self, name) for name in AXES)

    def items(self) -> Iterator[Tuple[str, Fraction]]:
        """Yield ``(axis, exponent)`` for every non-zero axis."""
        for name in AXES:
            exponent = getattr(self, name)
            if exponent:
                yield name, exponent

    def __mul__(self, other: 'Dimensions') -> 'Dimensions':
        if not isinstance(other, Dimensions):
            return NotImplemented
        return Dimensions(*(a + b for a, b in zip(self.exponents(), other.exponents())))

    def __truediv__(self, other: 'Dimensions') -> 'Dimensions':
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self * other.inverse()

    def __pow__(self, power: Exponent) -> 'Dimensions':
        power = exact_exponent(power)
        return Dimensions(*(a * power for a in self.exponents()))

    def inverse(self) -> 'Dimensions':
        return Dimensions(*(-a for a in self.exponents()))

    def is_dimensionless(self) -> bool:
        return not any(self.exponents())

    def is_pseudo(self) -> bool:
        """True when only pseudo axes are non-zero."""
        return not self.is_dimensionless() and all(
            name in PSEUDO_AXES for name, _ in self.items()
        )

    def primitive_axis(self) -> Optional[str]:
        """Name of the single axis raised to exponent 1, if that is all there is.

        Only such dimensions may carry an affine offset.
        """
        nonzero = list(self.items())
        if len(nonzero) == 1 and nonzero[0][1] == 1:
            return nonzero[0][0]
        return None

    def __str__(self) -> str:
        if self.is_dimensionless():
            return '[dimensionless]'
        parts = []
        for name, exponent in self.items():
            parts.append(f"[{name}]" if exponent == 1 else f"[{name}]^{exponent}")
        return ''.join(parts)

    def __repr__(self) -> str:
        args = ', '.join(f"{name}={exponent}" for name, exponent in self.items())
        return f"Dimensions({args})"


DIMENSIONLESS_DIMENSIONS = Dimensions()
