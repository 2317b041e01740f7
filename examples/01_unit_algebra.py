"""
Example: Unit Algebra and Dimension-Checked Arithmetic
======================================================

This example builds units by hand, registers them, generates prefixed
families and shows how amounts behave under arithmetic and comparison.
"""

from fractions import Fraction

from phyunits import (
    Dimensions,
    DimensionMismatchError,
    InvalidUnitCompositionError,
    Unit,
    UnitRegistry,
    ops,
)

# Example 1: Building units
print("Example 1: Building units")
print("-" * 40)

registry = UnitRegistry()
meter = registry.define('m', Unit('m', Dimensions(length=1)))
second = registry.define('s', Unit('s', Dimensions(time=1)))
registry.generate_prefixed_family('m')

km = registry['km']
speed = km / second
print(f"{km!r} has scale {km.scale}")
print(f"{speed.name}: dimensions {speed.dimensions}, scale {speed.scale}")
print(f"(km^2)^(1/2) == km: {(km ** 2).root(2) == km}")

# Example 2: Amounts
print("\nExample 2: Amounts")
print("-" * 40)

trip = km(42.195)
print(f"A marathon is {meter(trip):.0f} m")
print(f"Pace for 3 hours: {(trip / second(3 * 3600)).to(meter / second)}")
print(f"Chained comparison 1 m < 0.5 km < 600 m: {ops.lt(meter(1), km(0.5), meter(600))}")

try:
    meter(1) + second(1)
except DimensionMismatchError as exc:
    print(f"Adding a length and a time fails: {exc}")

# Example 3: Affine units
print("\nExample 3: Affine units")
print("-" * 40)

kelvin = registry.define('K', Unit('K', Dimensions(temperature=1)))
celsius = registry.define('degC', Unit('degC', Dimensions(temperature=1), 1, 273.15))
fahrenheit = registry.define('degF', Unit('degF', Dimensions(temperature=1),
                                          Fraction(5, 9), 255.37222222222223))

print(f"Body temperature: {fahrenheit(celsius(37)):.1f} degF")
print(f"Warmer by 5 degrees: {celsius(37) + celsius(5)}")

try:
    2 * celsius(20)
except InvalidUnitCompositionError as exc:
    print(f"Scaling a temperature on an offset scale fails: {exc}")

print("\n" + "=" * 50)
print("Unit Algebra Examples Complete!")
