"""
Process-wide, runtime-extensible mapping from unit names to units.

Readers work on an immutable snapshot and never take the lock.  Writers
(``define`` and prefix-family generation) hold a single re-entrant lock,
build a new mapping and publish it in one assignment, so a bulk insertion
is seen either completely or not at all.

Name collisions follow a last-write-wins policy: the new unit replaces the
old one and a ``UnitRedefinitionWarning`` is issued if they differ.
"""

import threading
import warnings
from fractions import Fraction
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from ..core.errors import UnitRedefinitionWarning, UnknownUnitError
from ..core.unit import DIMENSIONLESS, Unit
from .prefixes import SI_PREFIXES


DIMENSIONLESS_NAME = 'dimensionless'

PrefixTable = Iterable[Tuple[str, Union[int, float, Fraction]]]


class UnitRegistry:
    """Named units, seeded with the canonical ``dimensionless`` unit."""

    def __init__(self, units: Optional[Mapping[str, Unit]] = None):
        self._lock = threading.RLock()
        self._units = MappingProxyType({DIMENSIONLESS_NAME: DIMENSIONLESS})
        self._prefixed = MappingProxyType({})
        if units:
            for name, unit in units.items():
                self.define(name, unit)

    # Reads (lock-free)

    def lookup(self, name: str) -> Unit:
        """Return the unit registered under ``name``."""
        try:
            return self._units[name]
        except KeyError:
            raise UnknownUnitError(name) from None

    def get(self, name: str, default: Optional[Unit] = None) -> Optional[Unit]:
        return self._units.get(name, default)

    def snapshot(self) -> Mapping[str, Unit]:
        """Read-only view of the registry at this moment."""
        return self._units

    @property
    def dimensionless(self) -> Unit:
        """Whatever is registered under the reserved ``dimensionless`` name."""
        return self.lookup(DIMENSIONLESS_NAME)

    def family(self, base_name: str) -> Dict[str, Tuple[str, Fraction]]:
        """Prefixed names generated from ``base_name``, mapped to (prefix, multiplier)."""
        return {
            name: (prefix, multiplier)
            for (base, multiplier, prefix), name in self._prefixed.items()
            if base == base_name
        }

    def __getitem__(self, name: str) -> Unit:
        return self.lookup(name)

    def __contains__(self, name) -> bool:
        return name in self._units

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._units))

    def __len__(self) -> int:
        return len(self._units)

    def __repr__(self) -> str:
        return f"UnitRegistry({len(self)} units)"

    # Writes (serialized)

    def define(self, name: str, unit: Unit) -> Unit:
        """Register ``unit`` under ``name`` and return the named unit."""
        _check_definition(name, unit)
        with self._lock:
            units = dict(self._units)
            named = _store(units, name, unit)
            self._units = MappingProxyType(units)
        return named

    def generate_prefixed_family(self, base: Union[str, Unit],
                                 prefixes: PrefixTable = SI_PREFIXES,
                                 base_name: Optional[str] = None,
                                 include_base: bool = False) -> Dict[str, Unit]:
        """Register ``prefix + base_name`` for every ``(prefix, multiplier)`` pair.

        Parameters
        ----------
        base : str or Unit
            The unit to prefix, or the name of a registered unit
        prefixes : iterable of (str, number)
            Prefix table, applied in order
        base_name : str, optional
            Name the prefixes are attached to (defaults to the unit's name)
        include_base : bool
            Also register the unprefixed base under ``base_name``

        Returns
        -------
        dict
            The generated units by registered name, in table order
        """
        with self._lock:
            if isinstance(base, str):
                base_name = base_name or base
                base = self.lookup(base)
            if base_name is None:
                base_name = base.name
            if not base_name:
                raise ValueError("Cannot generate prefixed names for an unnamed unit")
            _check_definition(base_name, base)

            units = dict(self._units)
            prefixed = dict(self._prefixed)
            generated = {}
            if include_base:
                _store(units, base_name, base)
            for prefix, multiplier in prefixes:
                name = prefix + base_name
                generated[name] = _store(units, name, base.rescale(multiplier))
                prefixed[(base_name, Fraction(multiplier), prefix)] = name
            self._units = MappingProxyType(units)
            self._prefixed = MappingProxyType(prefixed)
        return generated


def _check_definition(name, unit):
    if not isinstance(name, str) or not name:
        raise ValueError(f"Unit names must be non-empty strings, got {name!r}")
    if not isinstance(unit, Unit):
        raise TypeError(f"Expected a Unit, got {type(unit).__name__}")


def _store(units: Dict[str, Unit], name: str, unit: Unit) -> Unit:
    named = unit.renamed(name)
    existing = units.get(name)
    if existing is not None and existing != named:
        warnings.warn(
            f"Unit {name!r} redefined: {existing!r} replaced by {named!r}",
            UnitRedefinitionWarning,
            stacklevel=3,
        )
    units[name] = named
    return named


# Process-wide default registry

_default_lock = threading.Lock()
_default_registry: Optional[UnitRegistry] = None


def default_registry() -> UnitRegistry:
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = UnitRegistry()
        return _default_registry


def set_default_registry(registry: UnitRegistry) -> Optional[UnitRegistry]:
    """Install ``registry`` as the process-wide default and return the previous one."""
    global _default_registry
    if not isinstance(registry, UnitRegistry):
        raise TypeError(f"Expected a UnitRegistry, got {type(registry).__name__}")
    with _default_lock:
        previous, _default_registry = _default_registry, registry
    return previous


def define(name: str, unit: Unit) -> Unit:
    return default_registry().define(name, unit)


def lookup(name: str) -> Unit:
    return default_registry().lookup(name)


def generate_prefixed_family(base: Union[str, Unit],
                             prefixes: PrefixTable = SI_PREFIXES,
                             base_name: Optional[str] = None,
                             include_base: bool = False) -> Dict[str, Unit]:
    return default_registry().generate_prefixed_family(
        base, prefixes, base_name=base_name, include_base=include_base
    )
