"""
Finite-difference derivatives built only from the dimension-checked
arithmetic layer, so they work unchanged on plain numbers and amounts.
"""

from typing import Callable

import numpy as np

from .. import ops
from ..core.amount import Amount


# cbrt(eps) balances truncation and rounding error for central differences
_RELATIVE_STEP = float(np.cbrt(np.finfo(float).eps))


def default_step(x):
    """Step size proportional to ``max(|x|, 1)``, in the unit of ``x``."""
    value = x.value if isinstance(x, Amount) else x
    size = _RELATIVE_STEP * np.maximum(np.abs(value), 1.0)
    if np.ndim(size) == 0:
        size = float(size)
    if isinstance(x, Amount):
        return Amount(size, x.unit)
    return size


def differentiate(
    f: Callable,
    x,
    step=None,
    method: str = 'central'
):
    """
    Numerical derivative of ``f`` at ``x``.

    Parameters
    ----------
    f : callable
        Function of one argument returning a number or an Amount
    x : number or Amount
        Point at which to differentiate
    step : number or Amount, optional
        Finite-difference step. It must have the dimensions of ``x``: a bare
        number next to a dimensioned ``x`` fails the dimension check of
        ``x + step``. Defaults to ``cbrt(eps) * max(|x|, 1)`` in the unit of ``x``
    method : str
        Stencil: 'central' (second order), 'five_point' (fourth order) or
        'forward' (first order)

    Returns
    -------
    number or Amount
        Estimate of df/dx; its unit is the unit of ``f(x)`` divided by the
        unit of ``x``
    """

    h = default_step(x) if step is None else step

    if method == 'central':
        numerator = ops.sub(f(ops.add(x, h)), f(ops.sub(x, h)))
        denominator = ops.mul(2, h)
    elif method == 'five_point':
        two_h = ops.mul(2, h)
        numerator = ops.add(
            ops.neg(f(ops.add(x, two_h))),
            ops.mul(8, f(ops.add(x, h))),
            ops.neg(ops.mul(8, f(ops.sub(x, h)))),
            f(ops.sub(x, two_h)),
        )
        denominator = ops.mul(12, h)
    elif method == 'forward':
        numerator = ops.sub(f(ops.add(x, h)), f(x))
        denominator = h
    else:
        raise ValueError(f"Unknown method: {method}")

    return ops.div(numerator, denominator)
