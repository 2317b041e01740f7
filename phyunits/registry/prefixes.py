"""
Metric prefix tables used to generate prefixed unit families.
"""

from fractions import Fraction


SI_PREFIXES = (
    ('q', Fraction(1, 10**30)),
    ('r', Fraction(1, 10**27)),
    ('y', Fraction(1, 10**24)),
    ('z', Fraction(1, 10**21)),
    ('a', Fraction(1, 10**18)),
    ('f', Fraction(1, 10**15)),
    ('p', Fraction(1, 10**12)),
    ('n', Fraction(1, 10**9)),
    ('u', Fraction(1, 10**6)),
    ('m', Fraction(1, 10**3)),
    ('c', Fraction(1, 10**2)),
    ('d', Fraction(1, 10)),
    ('da', Fraction(10)),
    ('h', Fraction(10**2)),
    ('k', Fraction(10**3)),
    ('M', Fraction(10**6)),
    ('G', Fraction(10**9)),
    ('T', Fraction(10**12)),
    ('P', Fraction(10**15)),
    ('E', Fraction(10**18)),
    ('Z', Fraction(10**21)),
    ('Y', Fraction(10**24)),
    ('R', Fraction(10**27)),
    ('Q', Fraction(10**30)),
)

_LONG_NAMES = {
    'q': 'quecto', 'r': 'ronto', 'y': 'yocto', 'z': 'zepto', 'a': 'atto',
    'f': 'femto', 'p': 'pico', 'n': 'nano', 'u': 'micro', 'm': 'milli',
    'c': 'centi', 'd': 'deci', 'da': 'deca', 'h': 'hecto', 'k': 'kilo',
    'M': 'mega', 'G': 'giga', 'T': 'tera', 'P': 'peta', 'E': 'exa',
    'Z': 'zetta', 'Y': 'yotta', 'R': 'ronna', 'Q': 'quetta',
}

SI_PREFIX_NAMES = tuple((_LONG_NAMES[symbol], factor) for symbol, factor in SI_PREFIXES)
