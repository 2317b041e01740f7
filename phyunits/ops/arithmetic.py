"""
Dimension-checked arithmetic over plain numbers and amounts.

Every function accepts any mix of plain numbers (Python or numpy scalars,
numpy arrays) and ``Amount`` values.  When no operand carries a unit the
functions reduce to the ordinary Python operators, so unit-naive code gets
exactly the results it would get without this layer.

Policy for products and quotients: the result keeps the composed unit of
its operands (``m * s``, ``m / s``) rather than being canonicalised to base
units.  A plain number multiplying or dividing an amount leaves the
amount's unit untouched.
"""

import operator
from fractions import Fraction
from functools import reduce
from numbers import Integral

import numpy as np

from ..core.amount import Amount, dimensions_of, extract, is_plain
from ..core.dimensions import exact_exponent
from ..core.errors import (
    DimensionMismatchError,
    InvalidUnitCompositionError,
    UnsupportedExponentError,
)
from ..core.unit import DIMENSIONLESS


def is_operand(value) -> bool:
    return isinstance(value, Amount) or is_plain(value)


def _check_operand(value):
    if not is_operand(value):
        raise TypeError(f"Unsupported operand type: {type(value).__name__}")


def _require_same_dimensions(a, b, operation: str):
    if dimensions_of(a) != dimensions_of(b):
        raise DimensionMismatchError(a, b, operation)


def _require_scalable(amount: Amount, operation: str):
    if amount.unit.is_affine:
        raise InvalidUnitCompositionError(
            f"Cannot {operation} {amount!r}: {amount.unit!r} has an offset of "
            f"{amount.unit.offset}"
        )


def _base(value):
    return value.base_value if isinstance(value, Amount) else value


# Addition and subtraction

def _additive(op, operation: str):
    def combine(a, b):
        _check_operand(a)
        _check_operand(b)
        if not isinstance(a, Amount) and not isinstance(b, Amount):
            return op(a, b)
        _require_same_dimensions(a, b, operation)
        unit = a.unit if isinstance(a, Amount) else DIMENSIONLESS
        left = a.value if isinstance(a, Amount) else a
        right = extract(b if isinstance(b, Amount) else Amount(b, DIMENSIONLESS), unit)
        return Amount(op(left, right), unit)
    return combine


_add = _additive(operator.add, 'add')
_sub = _additive(operator.sub, 'subtract')


def add(*operands):
    """Sum of the operands, expressed in the first operand's unit."""
    if not operands:
        return 0
    if len(operands) == 1:
        _check_operand(operands[0])
        return operands[0]
    return reduce(_add, operands)


def sub(first, *rest):
    """``first - rest[0] - rest[1] ...``; a single operand is negated."""
    if not rest:
        return neg(first)
    return reduce(_sub, rest, first)


def neg(value):
    _check_operand(value)
    return -value


def absolute(value):
    _check_operand(value)
    return abs(value)


# Multiplication and division

def _mul(a, b):
    _check_operand(a)
    _check_operand(b)
    a_is_amount = isinstance(a, Amount)
    b_is_amount = isinstance(b, Amount)
    if not a_is_amount and not b_is_amount:
        return a * b
    if not a_is_amount:
        _require_scalable(b, 'scale')
        return Amount(a * b.value, b.unit)
    if not b_is_amount:
        _require_scalable(a, 'scale')
        return Amount(a.value * b, a.unit)
    return Amount(a.value * b.value, a.unit.multiply(b.unit))


def _div(a, b):
    _check_operand(a)
    _check_operand(b)
    a_is_amount = isinstance(a, Amount)
    b_is_amount = isinstance(b, Amount)
    if not a_is_amount and not b_is_amount:
        return a / b
    if not a_is_amount:
        return Amount(a / b.value, b.unit.inverse())
    if not b_is_amount:
        _require_scalable(a, 'scale')
        return Amount(a.value / b, a.unit)
    return Amount(a.value / b.value, a.unit.divide(b.unit))


def mul(*operands):
    """Product of the operands; units compose."""
    if not operands:
        return 1
    if len(operands) == 1:
        _check_operand(operands[0])
        return operands[0]
    return reduce(_mul, operands)


def div(first, *rest):
    """``first / rest[0] / rest[1] ...``; a single operand is inverted."""
    if not rest:
        return _div(1, first)
    return reduce(_div, rest, first)


# Powers

def expt(base, exponent):
    """``base ** exponent`` with a dimensionless exponent.

    Amount bases need an exact rational exponent (int or ``Fraction``);
    non-integral exponents take a root of the unit, which is only allowed
    when the unit's scale has a real root.
    """
    _check_operand(base)
    _check_operand(exponent)
    if isinstance(exponent, Amount):
        exponent = extract(exponent, DIMENSIONLESS)
    if not isinstance(base, Amount):
        return base ** exponent
    if isinstance(exponent, np.ndarray):
        raise UnsupportedExponentError("Cannot raise an Amount to an array of exponents")
    power = exact_exponent(exponent)
    unit = base.unit.power(power)
    if power.denominator == 1:
        return Amount(base.value ** power.numerator, unit)
    return Amount(base.value ** float(power), unit)


def root(value, degree: int):
    """The ``degree``-th root, e.g. ``root(m2(9), 2) == m(3)``."""
    if not isinstance(degree, Integral) or degree == 0:
        raise UnsupportedExponentError(f"Root degree must be a non-zero integer, got {degree!r}")
    return expt(value, Fraction(1, int(degree)))


# Comparisons

def _compare_pair(op, operation: str, a, b):
    _check_operand(a)
    _check_operand(b)
    if not isinstance(a, Amount) and not isinstance(b, Amount):
        return op(a, b)
    _require_same_dimensions(a, b, operation)
    if isinstance(a, Amount) and isinstance(b, Amount) and a.unit == b.unit:
        return op(a.value, b.value)
    return op(_base(a), _base(b))


def _chain(op, operation: str, operands):
    if not operands:
        raise TypeError(f"{operation} needs at least one operand")
    if len(operands) == 1:
        _check_operand(operands[0])
        return True
    results = [_compare_pair(op, operation, a, b) for a, b in zip(operands, operands[1:])]
    outcome = results[0]
    for result in results[1:]:
        if isinstance(outcome, np.ndarray) or isinstance(result, np.ndarray):
            outcome = np.logical_and(outcome, result)
        else:
            outcome = outcome and result
    return outcome


def lt(*operands):
    """True when the operands are strictly increasing."""
    return _chain(operator.lt, 'compare', operands)


def le(*operands):
    return _chain(operator.le, 'compare', operands)


def gt(*operands):
    """True when the operands are strictly decreasing."""
    return _chain(operator.gt, 'compare', operands)


def ge(*operands):
    return _chain(operator.ge, 'compare', operands)


def eq(*operands):
    """True when all operands are equal after conversion to base units."""
    return _chain(operator.eq, 'compare', operands)


def ne(*operands):
    return _chain(operator.ne, 'compare', operands)


def isclose(a, b, rel_tol: float = 1e-9, abs_tol=0.0):
    """Approximate equality of base-normalized values.

    ``abs_tol`` is either a plain number in base units or an amount of the
    same dimension as ``a`` and ``b``.  An amount tolerance is a difference,
    so the offset of an affine unit does not apply to it.
    """
    _require_same_dimensions(a, b, 'compare')
    if isinstance(abs_tol, Amount):
        _require_same_dimensions(a, abs_tol, 'compare')
        abs_tol = abs_tol.value * abs_tol.unit.factor
    result = np.isclose(_base(a), _base(b), rtol=rel_tol, atol=abs_tol)
    if np.ndim(result) == 0:
        return bool(result)
    return result
