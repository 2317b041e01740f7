from .prefixes import SI_PREFIXES, SI_PREFIX_NAMES
from .registry import (
    DIMENSIONLESS_NAME,
    UnitRegistry,
    default_registry,
    define,
    generate_prefixed_family,
    lookup,
    set_default_registry,
)

__all__ = [
    'SI_PREFIXES', 'SI_PREFIX_NAMES', 'DIMENSIONLESS_NAME', 'UnitRegistry',
    'default_registry', 'set_default_registry', 'define', 'lookup',
    'generate_prefixed_family',
]
