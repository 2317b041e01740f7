"""
Astronomical and instrumental units.

Primitive units come from pint through ``PintUnitSource``; everything else
is derived with unit algebra.  Lengths, times, masses, temperatures and
energies get the full family of SI prefixes (``kpc``, ``Myr``, ``GeV``...).

Seconds are registered as ``sec``; the astrophysical second of arc is
``arcsec`` (alias ``as``).

Redshift is a pseudo dimension: ``zee`` (z) and ``onepluszee`` (1 + z) convert
into each other but never into angles, probabilities or plain numbers.
"""

import math
from typing import Optional

from scipy import constants

from ..core.dimensions import Dimensions
from ..core.unit import Unit, from_power_map
from ..registry.prefixes import SI_PREFIXES
from ..registry.registry import UnitRegistry, default_registry
from ..sources.pint_source import PintUnitSource, default_source


SOLAR_MASS_KG = 1.98855e30
SOLAR_LUMINOSITY_W = 3.846e26
JANSKY_W_PER_M2_HZ = 1e-26

# (registered name, pint name, generate SI prefixes)
_PRIMITIVES = (
    # Length
    ('pc', 'parsec', True),
    ('m', 'meter', True),
    ('AU', 'astronomical_unit', False),
    # Time
    ('sec', 'second', True),
    ('yr', 'sidereal_year', True),
    # Mass
    ('g', 'gram', True),
    # Charge
    ('coulomb', 'coulomb', False),
    # Temperature
    ('K', 'kelvin', True),
    # Angles
    ('rad', 'radian', False),
    ('deg', 'degree', False),
    ('arcsec', 'arcsecond', False),
    ('as', 'arcsecond', False),
    ('sr', 'steradian', False),
    # Energy
    ('eV', 'electron_volt', True),
    ('J', 'joule', True),
    ('erg', 'erg', False),
    # Power and frequency, used by the derived units below
    ('W', 'watt', False),
    ('Hz', 'hertz', False),
)


def load(registry: Optional[UnitRegistry] = None,
         source: Optional[PintUnitSource] = None) -> UnitRegistry:
    """Register the astronomy units into ``registry`` (default: process-wide)."""
    registry = registry if registry is not None else default_registry()
    source = source if source is not None else default_source()

    for name, pint_name, prefixed in _PRIMITIVES:
        unit = source.unit(pint_name)
        if prefixed:
            registry.generate_prefixed_family(unit, SI_PREFIXES, base_name=name,
                                              include_base=True)
        else:
            registry.define(name, unit)

    u = registry.lookup
    registry.define('Msol', u('kg').rescale(SOLAR_MASS_KG))
    registry.define('positroncharge', u('coulomb').rescale(constants.e))
    registry.define('sky', u('sr').rescale(4 * math.pi))
    registry.define('lightspeed', (u('m') / u('sec')).rescale(constants.c))
    registry.define('Lsol', u('W').rescale(SOLAR_LUMINOSITY_W))

    # Photon counting units use cm and seconds
    registry.define('Flux', from_power_map({u('cm'): -2, u('sec'): -1}))
    registry.define('Intensity', from_power_map({u('cm'): -2, u('sec'): -1, u('sr'): -1}))
    registry.define('SpectralFlux',
                    from_power_map({u('cm'): -2, u('sec'): -1, u('GeV'): -1}))
    registry.define('SpectralIntensity',
                    from_power_map({u('cm'): -2, u('sec'): -1, u('sr'): -1, u('GeV'): -1}))

    jansky = from_power_map({u('W'): 1, u('m'): -2, u('Hz'): -1}).rescale(JANSKY_W_PER_M2_HZ)
    registry.generate_prefixed_family(jansky, SI_PREFIXES, base_name='Jansky',
                                      include_base=True)

    zee = registry.define('zee', Unit('zee', Dimensions.axis('redshift')))
    registry.define('onepluszee', zee.offset_from(-1))
    registry.define('probability', Unit('probability', Dimensions.axis('probability')))

    # Same value as the seeded identity, so this rebinds without a warning
    registry.define('dimensionless', u('pc') / u('pc'))
    return registry
