"""
phyunits - Physical units as first-class values
===============================================

Numbers carry their units through ordinary arithmetic, conversions and
numerical calculus, with dimensional consistency checked at every step.

Main Features:
- Exact rational dimension algebra with pseudo dimensions (angle, redshift...)
- Affine units (temperature scales, 1 + z) with strict composition rules
- Runtime-extensible, thread-safe unit registry with SI prefix families
- Dimension-checked arithmetic that is transparent for plain numbers
- Unit-propagating numerical differentiation and integration
- pint-backed primitive units and an astronomy unit catalog
"""

__version__ = "0.1.0"
__author__ = "Phyunits Development Team"

from .core import (
    DIMENSIONLESS,
    Amount,
    DimensionalError,
    DimensionMismatchError,
    Dimensions,
    IntegrationWarning,
    InvalidUnitCompositionError,
    Unit,
    UnitDescriptor,
    UnitRedefinitionWarning,
    UnknownUnitError,
    UnsupportedExponentError,
    construct,
    convert,
    dimensionless,
    extract,
    from_power_map,
)
from .registry import (
    SI_PREFIXES,
    SI_PREFIX_NAMES,
    UnitRegistry,
    default_registry,
    define,
    generate_prefixed_family,
    lookup,
    set_default_registry,
)
from . import ops
from .calculus import differentiate, integrate

__all__ = [
    'Dimensions', 'Unit', 'UnitDescriptor', 'Amount', 'DIMENSIONLESS',
    'dimensionless', 'from_power_map', 'construct', 'convert', 'extract',
    'DimensionalError', 'DimensionMismatchError', 'InvalidUnitCompositionError',
    'UnsupportedExponentError', 'UnknownUnitError',
    'UnitRedefinitionWarning', 'IntegrationWarning',
    'UnitRegistry', 'SI_PREFIXES', 'SI_PREFIX_NAMES', 'default_registry',
    'set_default_registry', 'define', 'lookup', 'generate_prefixed_family',
    'ops', 'differentiate', 'integrate',
]
