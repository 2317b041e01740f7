"""
Exceptions and warning categories raised by the unit system.
"""


class DimensionalError(Exception):
    """Raised when dimensional analysis fails."""
    pass


class DimensionMismatchError(DimensionalError, TypeError):
    """Raised when an operation needs equal dimensions and gets different ones."""

    def __init__(self, left, right, operation: str = "combine"):
        self.left = left
        self.right = right
        self.operation = operation
        super().__init__(
            f"Cannot {operation} {_describe(left)} and {_describe(right)}: "
            f"incompatible dimensions"
        )


class InvalidUnitCompositionError(DimensionalError, ValueError):
    """Raised when an affine (offset) unit is multiplied, divided or raised to a power."""
    pass


class UnsupportedExponentError(DimensionalError, ValueError):
    """Raised for exponents that are not exact rationals or give non-real scales."""
    pass


class UnknownUnitError(DimensionalError, LookupError):
    """Raised when a unit name is not known to a registry or unit source."""

    def __init__(self, name: str, reason: str = "not registered"):
        self.name = name
        super().__init__(f"Unknown unit {name!r}: {reason}")


class UnitRedefinitionWarning(UserWarning):
    """Issued when a registry name is rebound to a different unit."""
    pass


class IntegrationWarning(RuntimeWarning):
    """Issued when adaptive quadrature stops before reaching its tolerance."""
    pass


def _describe(obj) -> str:
    from .dimensions import Dimensions
    if isinstance(obj, Dimensions):
        return str(obj)
    dimensions = getattr(obj, 'dimensions', None)
    if dimensions is None:
        return f"{obj!r} [dimensionless]"
    return f"{obj!r} {dimensions}"
