"""
Example: Astronomy Units and Calculus With Units
================================================

Loads the astronomy catalog (primitive units come from pint), converts
between astronomical scales and integrates and differentiates functions
whose inputs and outputs carry units.
"""

import numpy as np

from phyunits import differentiate, integrate, ops
from phyunits.catalogs import astro

units = astro.load()

# Example 1: Astronomical scales
print("Example 1: Astronomical scales")
print("-" * 40)

pc, AU, lightspeed, yr = units['pc'], units['AU'], units['lightspeed'], units['yr']
light_year = ops.mul(lightspeed(1), yr(1))

print(f"1 pc = {AU(pc(1)):.1f} AU")
print(f"1 pc = {pc(light_year) ** -1:.3f} light years")
print(f"Solar mass: {units['g'](units['Msol'](1)):.4e} g")
print(f"1 + z for z = 0.5: {units['onepluszee'](units['zee'](0.5))}")

# Example 2: Calculus with units
print("\nExample 2: Calculus with units")
print("-" * 40)

m, sec = units['m'], units['sec']
g = ops.div(m(9.81), ops.mul(sec(1), sec(1)))


def height(t):
    """Free fall from 100 m."""
    return ops.sub(m(100), ops.mul(0.5, g, t, t))


velocity = differentiate(height, sec(2), method='five_point')
print(f"Velocity after 2 s: {(m / sec)(velocity):.3f} m/s")

distance = integrate(lambda t: ops.mul(g, t), (sec(0), sec(2)))
print(f"Distance fallen in 2 s: {m(distance):.3f} m")

# Example 3: Adaptive quadrature
print("\nExample 3: Adaptive quadrature")
print("-" * 40)

area = integrate(np.sin, (0, np.pi), method='adaptive')
print(f"Integral of sin over [0, pi]: {area:.12f}")

print("\n" + "=" * 50)
print("Astronomy and Calculus Examples Complete!")
