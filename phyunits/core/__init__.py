from .dimensions import AXES, DIMENSIONLESS_DIMENSIONS, PSEUDO_AXES, Dimensions
from .unit import DIMENSIONLESS, Unit, UnitDescriptor, dimensionless, from_power_map
from .amount import Amount, construct, convert, extract
from .errors import (
    DimensionalError,
    DimensionMismatchError,
    IntegrationWarning,
    InvalidUnitCompositionError,
    UnitRedefinitionWarning,
    UnknownUnitError,
    UnsupportedExponentError,
)

__all__ = [
    'AXES', 'PSEUDO_AXES', 'DIMENSIONLESS_DIMENSIONS', 'Dimensions',
    'DIMENSIONLESS', 'Unit', 'UnitDescriptor', 'dimensionless', 'from_power_map',
    'Amount', 'construct', 'convert', 'extract',
    'DimensionalError', 'DimensionMismatchError', 'InvalidUnitCompositionError',
    'UnsupportedExponentError', 'UnknownUnitError',
    'UnitRedefinitionWarning', 'IntegrationWarning',
]
