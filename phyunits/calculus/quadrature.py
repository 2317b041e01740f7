"""
Numerical quadrature over the dimension-checked arithmetic layer.

Nodes, weights and partial sums all go through ``phyunits.ops`` so the
integral of an amount-valued function over amount-valued bounds comes out
in ``unit(f) * unit(x)`` without any special casing.
"""

import warnings
from typing import Callable, Sequence

from .. import ops
from ..core.amount import Amount
from ..core.errors import IntegrationWarning


def integrate(
    f: Callable,
    bounds: Sequence,
    intervals: int = 64,
    method: str = 'simpson',
    rel_tol: float = 1e-10,
    abs_tol=0.0,
    max_depth: int = 20
):
    """
    Definite integral of ``f`` over ``bounds``.

    Parameters
    ----------
    f : callable
        Integrand of one argument returning a number or an Amount
    bounds : (a, b)
        Integration limits; both must have the same dimensions
    intervals : int
        Number of sub-intervals for 'simpson' (must be even and positive)
    method : str
        'simpson' (composite Simpson rule) or 'adaptive' (adaptive Simpson)
    rel_tol : float
        Relative tolerance for 'adaptive', measured against the integral of |f|
    abs_tol : number or Amount
        Absolute tolerance floor for 'adaptive', in the unit of the result
    max_depth : int
        Maximum bisection depth for 'adaptive'

    Returns
    -------
    number or Amount
        The integral estimate
    """

    a, b = bounds
    width = ops.sub(b, a)

    if method == 'simpson':
        if not isinstance(intervals, int) or intervals < 2 or intervals % 2:
            raise ValueError(f"intervals must be a positive even integer, got {intervals}")
        return _composite_simpson(f, a, b, width, intervals)
    elif method == 'adaptive':
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")
        return _adaptive_simpson(f, a, b, rel_tol, abs_tol, max_depth)
    else:
        raise ValueError(f"Unknown method: {method}")


def _composite_simpson(f, a, b, width, intervals):
    h = ops.div(width, intervals)
    total = ops.add(f(a), f(b))
    for i in range(1, intervals):
        weight = 4 if i % 2 else 2
        total = ops.add(total, ops.mul(weight, f(ops.add(a, ops.mul(i, h)))))
    return ops.mul(total, ops.div(h, 3))


def _simpson_panel(f, a, fa, b, fb):
    width = ops.sub(b, a)
    m = ops.add(a, ops.div(width, 2))
    fm = f(m)
    estimate = ops.mul(ops.add(fa, ops.mul(4, fm), fb), ops.div(width, 6))
    return m, fm, estimate


def _adaptive_simpson(f, a, b, rel_tol, abs_tol, max_depth):
    fa, fb = f(a), f(b)
    m, fm, whole = _simpson_panel(f, a, fa, b, fb)
    # Scale from |f| so integrals that cancel to zero still get a usable tolerance
    magnitude = ops.mul(
        ops.add(ops.absolute(fa), ops.mul(4, ops.absolute(fm)), ops.absolute(fb)),
        ops.absolute(ops.div(ops.sub(b, a), 6)),
    )
    tolerance = ops.mul(rel_tol, magnitude)
    if isinstance(abs_tol, Amount) or abs_tol:
        if ops.gt(abs_tol, tolerance):
            tolerance = abs_tol
    exhausted = []

    def refine(a, fa, b, fb, m, fm, whole, tolerance, depth):
        left_m, left_fm, left = _simpson_panel(f, a, fa, m, fm)
        right_m, right_fm, right = _simpson_panel(f, m, fm, b, fb)
        combined = ops.add(left, right)
        delta = ops.sub(combined, whole)
        if ops.le(ops.absolute(delta), ops.mul(15, tolerance)):
            return ops.add(combined, ops.div(delta, 15))
        if depth >= max_depth:
            exhausted.append(m)
            return ops.add(combined, ops.div(delta, 15))
        half = ops.div(tolerance, 2)
        return ops.add(
            refine(a, fa, m, fm, left_m, left_fm, left, half, depth + 1),
            refine(m, fm, b, fb, right_m, right_fm, right, half, depth + 1),
        )

    result = refine(a, fa, b, fb, m, fm, whole, tolerance, 1)
    if exhausted:
        warnings.warn(
            f"Maximum depth {max_depth} reached on {len(exhausted)} panels; "
            f"result may not meet rel_tol={rel_tol:.1e}",
            IntegrationWarning,
        )
    return result
