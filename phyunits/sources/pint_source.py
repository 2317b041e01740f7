"""
Base-unit source backed by pint.

pint knows the conversion of thousands of named units to its root units;
this module turns that knowledge into ``UnitDescriptor`` values on the axes
used by ``Dimensions``, with SI base units (kg rather than pint's gram) as
the canonical base of each dimension.
"""

from collections import defaultdict
from fractions import Fraction
from typing import Optional

import pint

from ..core.dimensions import Dimensions
from ..core.errors import InvalidUnitCompositionError, UnknownUnitError
from ..core.unit import Unit, UnitDescriptor


# pint root unit -> (axis exponents per power, scale of the root in our base)
_ROOT_AXES = {
    'meter': ({'length': 1}, Fraction(1)),
    'second': ({'time': 1}, Fraction(1)),
    'gram': ({'mass': 1}, Fraction(1, 1000)),
    'kilogram': ({'mass': 1}, Fraction(1)),
    'kelvin': ({'temperature': 1}, Fraction(1)),
    'ampere': ({'charge': 1, 'time': -1}, Fraction(1)),
    'mole': ({'amount': 1}, Fraction(1)),
    'candela': ({'luminous_intensity': 1}, Fraction(1)),
    'radian': ({'angle': 1}, Fraction(1)),
}


def _exponent(value) -> Fraction:
    return Fraction(value).limit_denominator(1000)


class PintUnitSource:
    """Describe named units through a ``pint.UnitRegistry``."""

    def __init__(self, ureg: Optional[pint.UnitRegistry] = None):
        self.ureg = ureg if ureg is not None else pint.UnitRegistry()

    def describe(self, name: str) -> UnitDescriptor:
        """Dimension, scale and offset of ``name`` relative to our base units."""
        try:
            unit = self.ureg.Unit(name)
        except pint.UndefinedUnitError as exc:
            raise UnknownUnitError(name, "not defined by pint") from exc

        factor, root = self.ureg.get_root_units(unit)
        try:
            offset = float(self.ureg.Quantity(0.0, unit).to(root).magnitude)
        except pint.OffsetUnitCalculusError as exc:
            raise InvalidUnitCompositionError(
                f"{name!r} combines an offset unit with other units"
            ) from exc

        exponents = defaultdict(Fraction)
        scale = Fraction(factor)
        for root_name, power in root._units.items():
            if root_name not in _ROOT_AXES:
                raise UnknownUnitError(name, f"pint root unit {root_name!r} has no axis")
            axes, root_scale = _ROOT_AXES[root_name]
            power = _exponent(power)
            for axis, per_power in axes.items():
                exponents[axis] += per_power * power
            if power.denominator == 1:
                scale *= root_scale ** power.numerator
            else:
                scale *= Fraction(float(root_scale) ** float(power))

        # pint folds steradian into radian**2; keep solid angles apart
        steradians = _exponent(unit._units.get('steradian', 0))
        if steradians:
            exponents['angle'] -= 2 * steradians
            exponents['solid_angle'] += steradians

        dimensions = Dimensions(**exponents)
        if offset:
            offset *= float(scale / Fraction(factor))
        return UnitDescriptor(name, dimensions, scale, offset)

    def unit(self, name: str) -> Unit:
        return Unit.from_base(self.describe(name))


_default_source: Optional[PintUnitSource] = None


def default_source() -> PintUnitSource:
    """Shared source; building a pint registry is slow so it is created once."""
    global _default_source
    if _default_source is None:
        _default_source = PintUnitSource()
    return _default_source
