from .arithmetic import (
    absolute,
    add,
    div,
    eq,
    expt,
    ge,
    gt,
    is_operand,
    isclose,
    le,
    lt,
    mul,
    ne,
    neg,
    root,
    sub,
)

__all__ = [
    'add', 'sub', 'mul', 'div', 'expt', 'root', 'neg', 'absolute',
    'lt', 'le', 'eq', 'ne', 'ge', 'gt', 'isclose', 'is_operand',
]
