# ruff: noqa: F811
import logging
import operator
from typing import Callable, Union

import numpy as np
from plum import dispatch, overload

from nestedfrac.core.arith import lcm, ratio
from nestedfrac.core.constants import INT_MAX
from nestedfrac.core.errors import DenominatorOverflow, DivisionByZero, InvalidOperandType, NumeratorOverflow
from nestedfrac.core.fraction import NestedFraction, checked_int, lift_slot
from nestedfrac.core.typing import OperandSource

logger = logging.getLogger(__name__)


## Addition ###########################
@overload
def add(x: NestedFraction, y: NestedFraction) -> NestedFraction:
    l, r = x.reduce(), y.reduce()
    d = lcm(l.denom, r.denom)
    n = d // l.denom * l.num + d // r.denom * r.num
    return NestedFraction._from_slots(
        checked_int(n, is_numerator=True),
        checked_int(d, is_numerator=False),
    ).reduce()


@overload
def add(x: object, y: object) -> NestedFraction:
    return add(NestedFraction(x), NestedFraction(y))


@dispatch
def add(x, y):  # type: ignore
    del x, y
    raise NotImplementedError()


## Subtraction ###########################
@overload
def subtract(x: NestedFraction, y: NestedFraction) -> NestedFraction:
    r = y.reduce()
    negated = NestedFraction._from_slots(checked_int(-r.num, is_numerator=True), r.denom)
    return add(x, negated)


@overload
def subtract(x: object, y: object) -> NestedFraction:
    return subtract(NestedFraction(x), NestedFraction(y))


@dispatch
def subtract(x, y):  # type: ignore
    del x, y
    raise NotImplementedError()


## Multiplication ###########################
def _multiply_slots(
    a: Union[int, NestedFraction],
    b: Union[int, NestedFraction],
    is_numerator: bool,
) -> Union[int, NestedFraction]:
    if isinstance(a, int) and isinstance(b, int):
        return checked_int(a * b, is_numerator=is_numerator)
    logger.debug("Multiplying nested %s slots %s and %s", "numerator" if is_numerator else "denominator", a, b)
    return multiply(lift_slot(a), lift_slot(b))


def _cross_multiply(x: NestedFraction, y: NestedFraction) -> NestedFraction:
    """
    Multiplies two fractions after cancelling common factors crosswise, i.e. between the numerator of one and
    the denominator of the other. Cancelling happens wherever both sides of a pair are integers, nested pairs are
    multiplied recursively with the same policy. This keeps intermediate products small.

    Args:
        x (NestedFraction): left factor, possibly nested
        y (NestedFraction): right factor, possibly nested

    Returns:
        NestedFraction: canonical product
    """
    ln, ld = x.num, x.denom
    rn, rd = y.num, y.denom
    if isinstance(ln, int) and isinstance(rd, int):
        ln, rd = ratio(ln, rd)
    if isinstance(ld, int) and isinstance(rn, int):
        ld, rn = ratio(ld, rn)
    n = _multiply_slots(ln, rn, is_numerator=True)
    d = _multiply_slots(ld, rd, is_numerator=False)
    return NestedFraction._from_slots(n, d).reduce()


@overload
def multiply(x: NestedFraction, y: NestedFraction) -> NestedFraction:
    return _cross_multiply(x, y.reduce())


@overload
def multiply(x: object, y: object) -> NestedFraction:
    return multiply(NestedFraction(x), NestedFraction(y))


@dispatch
def multiply(x, y):  # type: ignore
    del x, y
    raise NotImplementedError()


## Division ###########################
@overload
def divide(x: NestedFraction, y: NestedFraction) -> NestedFraction:
    r = y.reduce()
    if r.num == 0:
        raise DivisionByZero(f"cannot divide {x} by {y}")
    return multiply(x, r.inv())


@overload
def divide(x: object, y: object) -> NestedFraction:
    return divide(NestedFraction(x), NestedFraction(y))


@dispatch
def divide(x, y):  # type: ignore
    del x, y
    raise NotImplementedError()


## Power ###########################
def _checked_power(base: int, exponent: int, is_numerator: bool) -> int:
    # reject early instead of materialising a huge integer
    if abs(base) > 1 and (abs(base).bit_length() - 1) * exponent > INT_MAX.bit_length():
        overflow = NumeratorOverflow if is_numerator else DenominatorOverflow
        raise overflow(f"{base}**{exponent}")
    return checked_int(base**exponent, is_numerator=is_numerator)


@overload
def power(x: NestedFraction, exponent: object) -> NestedFraction:
    """
    Raises a fraction to an integer power. By convention, the zeroth power is (1 / 1) for every base, including
    zero. Negative exponents invert the base first.
    """
    if isinstance(exponent, bool) or not isinstance(exponent, int | np.integer):
        raise InvalidOperandType(f"exponent must be an integer, got {type(exponent).__name__}")
    exponent = int(exponent)
    if exponent == 0:
        return NestedFraction._from_slots(1, 1)
    base = x
    if exponent < 0:
        base = x.inv()
        exponent = -exponent
    r = base.reduce()
    return NestedFraction._from_slots(
        _checked_power(r.num, exponent, is_numerator=True),
        _checked_power(r.denom, exponent, is_numerator=False),
    )


@overload
def power(x: object, exponent: object) -> NestedFraction:
    return power(NestedFraction(x), exponent)


@dispatch
def power(x, exponent):  # type: ignore
    del x, exponent
    raise NotImplementedError()


## Unary ###########################
def reduce(x: OperandSource) -> NestedFraction:
    if not isinstance(x, NestedFraction):
        x = NestedFraction(x)
    return x.reduce()


def inverse(x: OperandSource) -> NestedFraction:
    if not isinstance(x, NestedFraction):
        x = NestedFraction(x)
    return x.inv()


def to_float(x: OperandSource) -> float:
    """Float value of ``x``. Floats are taken as they are, every other source goes through the constructor."""
    if isinstance(x, float | np.floating):
        return float(x)
    if not isinstance(x, NestedFraction):
        x = NestedFraction(x)
    return x.value()


## Comparison ###########################
def compare(
    relation: Callable[[float, float], bool],
    x: OperandSource,
    y: OperandSource,
) -> bool:
    """Applies ``relation`` to the float values of both operands.

    The comparison is only as precise as the float division of the canonical numerator and denominator. Fractions
    whose canonical terms exceed 2**53 may compare equal although they differ.

    Args:
        relation (Callable[[float, float], bool]): e.g. ``operator.lt``
        x (OperandSource): left operand, a float or anything the NestedFraction constructor accepts
        y (OperandSource): right operand, a float or anything the NestedFraction constructor accepts

    Returns:
        bool: result of the relation
    """
    left = to_float(x)
    right = to_float(y)
    return relation(left, right)


def eq(x: OperandSource, y: OperandSource) -> bool:
    return compare(operator.eq, x, y)


def ne(x: OperandSource, y: OperandSource) -> bool:
    return compare(operator.ne, x, y)


def gt(x: OperandSource, y: OperandSource) -> bool:
    return compare(operator.gt, x, y)


def lt(x: OperandSource, y: OperandSource) -> bool:
    return compare(operator.lt, x, y)


def ge(x: OperandSource, y: OperandSource) -> bool:
    return compare(operator.ge, x, y)


def le(x: OperandSource, y: OperandSource) -> bool:
    return compare(operator.le, x, y)
