import logging

from nestedfrac.core.errors import (
    DenominatorOverflow,
    DivisionByZero,
    FractionSyntaxError,
    IntegerOverflow,
    InvalidOperandType,
    NestedFractionError,
    NumeratorOverflow,
)
from nestedfrac.core.fraction import NestedFraction
from nestedfrac.core.parser import parse
from nestedfrac.core.serializer import to_string
from nestedfrac.functional.arithmetic import (
    add,
    compare,
    divide,
    eq,
    ge,
    gt,
    inverse,
    le,
    lt,
    multiply,
    ne,
    power,
    reduce,
    subtract,
    to_float,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
    "NestedFraction",
    "parse",
    "to_string",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "inverse",
    "reduce",
    "to_float",
    "compare",
    "eq",
    "ne",
    "gt",
    "lt",
    "ge",
    "le",
    "NestedFractionError",
    "DivisionByZero",
    "IntegerOverflow",
    "NumeratorOverflow",
    "DenominatorOverflow",
    "InvalidOperandType",
    "FractionSyntaxError",
]
