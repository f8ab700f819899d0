from __future__ import annotations
import logging
import math
import operator
from typing import Any, Callable, Union

import numpy as np

from nestedfrac.core.arith import gcd
from nestedfrac.core.constants import DEFAULT_SPACES, INT_MAX, INT_MIN
from nestedfrac.core.errors import DenominatorOverflow, DivisionByZero, InvalidOperandType, NumeratorOverflow
from nestedfrac.core.serializer import to_string
from nestedfrac.core.typing import OperandSource

logger = logging.getLogger(__name__)

Slot = Union[int, "NestedFraction"]


def checked_int(value: Any, is_numerator: bool) -> int:
    """Converts a plain number into an integer usable as numerator or denominator.

    Floats are truncated toward zero. A zero denominator is rejected before the range check.

    Args:
        value (Any): int, float or numpy scalar
        is_numerator (bool): selects the error raised on overflow and whether zero is allowed

    Raises:
        NumeratorOverflow | DenominatorOverflow: non-finite value or value outside of the int64 range
        DivisionByZero: zero denominator

    Returns:
        int: python integer within [INT_MIN, INT_MAX]
    """
    overflow = NumeratorOverflow if is_numerator else DenominatorOverflow
    if isinstance(value, float | np.floating):
        if not math.isfinite(value):
            raise overflow(value)
        value = math.trunc(value)
    value = int(value)
    if not is_numerator and value == 0:
        raise DivisionByZero()
    if value < INT_MIN or value > INT_MAX:
        raise overflow(value)
    return value


def is_operator_operand(other: Any) -> bool:
    """Whether ``other`` may appear on either side of a python operator together with a NestedFraction"""
    if isinstance(other, bool | np.bool_):
        return False
    return isinstance(other, int | float | np.integer | np.floating | NestedFraction)


def is_float_operand(other: Any) -> bool:
    return isinstance(other, float | np.floating)


def float_result(op: Callable[[float, float], float], left: float, right: float) -> float:
    """Applies a python operator to the float value of a fraction and a float operand"""
    if op is operator.truediv and right == 0:
        raise DivisionByZero()
    return op(left, right)


def _as_slot(source: Any, is_numerator: bool) -> Slot:
    if isinstance(source, bool | np.bool_):
        raise InvalidOperandType(f"{'numerator' if is_numerator else 'denominator'} cannot be a boolean")
    if isinstance(source, int | float | np.integer | np.floating):
        return checked_int(source, is_numerator)
    if isinstance(source, str):
        from nestedfrac.core.parser import parse

        return parse(source)
    if isinstance(source, NestedFraction):
        return source.copy()
    raise InvalidOperandType(
        f"{'numerator' if is_numerator else 'denominator'} must be a finite number, a string or a NestedFraction, "
        f"got {type(source).__name__}"
    )


def _copy_slot(slot: Slot) -> Slot:
    if isinstance(slot, NestedFraction):
        return slot.copy()
    return slot


def lift_slot(slot: Slot) -> NestedFraction:
    """Wraps an integer slot into ``slot / 1``. Fractions are returned as they are."""
    if isinstance(slot, NestedFraction):
        return slot
    return NestedFraction._from_slots(slot, 1)


class NestedFraction:
    """A fraction whose numerator and denominator are integers or nested fractions.

    Instances are immutable, every operation returns a new fraction. Arithmetic results are always canonical:
    integer numerator, positive integer denominator, both coprime.

    Examples:
        >>> half = NestedFraction(1, 2)          # (1 / 2)
        >>> copy = NestedFraction(half)          # (1 / 2), deep copy
        >>> one = NestedFraction(half, half)     # ((1 / 2) / (1 / 2))
        >>> quarter = NestedFraction("(1 / 4)")  # parsed
    """

    __slots__ = ("_num", "_denom")

    def __init__(
        self,
        numerator: OperandSource = 0,
        denominator: OperandSource | None = None,
    ):
        num = _as_slot(numerator, is_numerator=True)
        if denominator is not None:
            denom = _as_slot(denominator, is_numerator=False)
        elif isinstance(num, NestedFraction):
            # a lone fraction (or parsed string) is taken over slot by slot, it is already a fresh copy
            num, denom = num._num, num._denom
        else:
            denom = 1
        object.__setattr__(self, "_num", num)
        object.__setattr__(self, "_denom", denom)

    @classmethod
    def _from_slots(cls, num: Slot, denom: Slot = 1) -> NestedFraction:
        # no validation and no copy, callers guarantee a valid denominator
        frac = cls.__new__(cls)
        object.__setattr__(frac, "_num", num)
        object.__setattr__(frac, "_denom", denom)
        return frac

    @classmethod
    def parse(cls, text: str) -> NestedFraction:
        from nestedfrac.core.parser import parse

        return parse(text)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set {name}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot delete {name}")

    @property
    def num(self) -> Slot:
        return self._num

    @property
    def denom(self) -> Slot:
        return self._denom

    @property
    def is_canonical(self) -> bool:
        n, d = self._num, self._denom
        if not isinstance(n, int) or not isinstance(d, int):
            return False
        return d > 0 and gcd(n, d) == 1

    @property
    def depth(self) -> int:
        """Nesting depth, 0 if both numerator and denominator are integers"""
        children = [s.depth for s in (self._num, self._denom) if isinstance(s, NestedFraction)]
        if not children:
            return 0
        return 1 + max(children)

    def copy(self) -> NestedFraction:
        """Deep structural copy, nested numerators and denominators are copied as well"""
        return NestedFraction._from_slots(_copy_slot(self._num), _copy_slot(self._denom))

    def inv(self) -> NestedFraction:
        """Swaps numerator and denominator. The result is not reduced.

        Raises:
            DivisionByZero: if the numerator is the integer zero
        """
        if isinstance(self._num, int) and self._num == 0:
            raise DivisionByZero(f"cannot invert {self}")
        return NestedFraction._from_slots(_copy_slot(self._denom), _copy_slot(self._num))

    def reduce(self) -> NestedFraction:
        """Returns the canonical form of this fraction, collapsing any nesting.

        Examples:
            >>> NestedFraction(2, -4).reduce()
            (-1 / 2)
            >>> NestedFraction("((1 / 2) / (1 / 2))").reduce()
            (1 / 1)
        """
        n, d = self._num, self._denom
        if isinstance(n, int) and isinstance(d, int):
            s = gcd(n, d)
            sign = 1 if d > 0 else -1
            return NestedFraction._from_slots(
                checked_int(n // s * sign, is_numerator=True),
                checked_int(abs(d // s), is_numerator=False),
            )
        from nestedfrac.functional.arithmetic import divide

        logger.debug("Collapsing nested fraction %s of depth %d", self, self.depth)
        return divide(lift_slot(n), lift_slot(d))

    def value(self) -> float:
        r = self.reduce()
        return r._num / r._denom

    def __float__(self) -> float:
        return self.value()

    def __bool__(self) -> bool:
        return self.reduce()._num != 0

    def __hash__(self) -> int:
        # equality goes through float values, so hashing has to as well
        return hash(self.value())

    def to_string(
        self,
        spaces: int = DEFAULT_SPACES,
        indent: int = 0,
        indent_level: int = 0,
    ) -> str:
        return to_string(self, spaces=spaces, indent=indent, indent_level=indent_level)

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return str(self)

    # Named operations. The operand accepts everything the constructor accepts.
    def add(self, other: OperandSource) -> NestedFraction:
        from nestedfrac.functional.arithmetic import add

        return add(self, other)

    def sub(self, other: OperandSource) -> NestedFraction:
        from nestedfrac.functional.arithmetic import subtract

        return subtract(self, other)

    def mul(self, other: OperandSource) -> NestedFraction:
        from nestedfrac.functional.arithmetic import multiply

        return multiply(self, other)

    def div(self, other: OperandSource) -> NestedFraction:
        from nestedfrac.functional.arithmetic import divide

        return divide(self, other)

    def pow(self, exponent: int) -> NestedFraction:
        from nestedfrac.functional.arithmetic import power

        return power(self, exponent)

    def compare(self, relation: Callable[[float, float], bool], other: OperandSource) -> bool:
        """Applies ``relation`` to the float values of this fraction and ``other``.

        Examples:
            >>> half = NestedFraction(1, 2)
            >>> half.compare(lambda a, b: a == b, half)
            True
            >>> half.compare(lambda a, b: a < b, "(1 / 3)")
            False
        """
        from nestedfrac.functional.arithmetic import compare

        return compare(relation, self, other)

    def eq(self, other: OperandSource) -> bool:
        from nestedfrac.functional.arithmetic import eq

        return eq(self, other)

    def neq(self, other: OperandSource) -> bool:
        from nestedfrac.functional.arithmetic import ne

        return ne(self, other)

    def gt(self, other: OperandSource) -> bool:
        from nestedfrac.functional.arithmetic import gt

        return gt(self, other)

    def lt(self, other: OperandSource) -> bool:
        from nestedfrac.functional.arithmetic import lt

        return lt(self, other)

    def ge(self, other: OperandSource) -> bool:
        from nestedfrac.functional.arithmetic import ge

        return ge(self, other)

    def le(self, other: OperandSource) -> bool:
        from nestedfrac.functional.arithmetic import le

        return le(self, other)

    # Python operators. Strings are only accepted by the named operations above.
    # A float operand turns the operation into a float computation on ``value()``.
    def __add__(self, other: Any) -> Union[NestedFraction, float]:
        if not is_operator_operand(other):
            return NotImplemented
        if is_float_operand(other):
            return float_result(operator.add, self.value(), float(other))
        from nestedfrac.functional.arithmetic import add

        return add(self, other)

    def __radd__(self, other: Any) -> Union[NestedFraction, float]:
        if not is_operator_operand(other):
            return NotImplemented
        if is_float_operand(other):
            return float_result(operator.add, float(other), self.value())
        from nestedfrac.functional.arithmetic import add

        return add(other, self)

    def __sub__(self, other: Any) -> Union[NestedFraction, float]:
        if not is_operator_operand(other):
            return NotImplemented
        if is_float_operand(other):
            return float_result(operator.sub, self.value(), float(other))
        from nestedfrac.functional.arithmetic import subtract

        return subtract(self, other)

    def __rsub__(self, other: Any) -> Union[NestedFraction, float]:
        if not is_operator_operand(other):
            return NotImplemented
        if is_float_operand(other):
            return float_result(operator.sub, float(other), self.value())
        from nestedfrac.functional.arithmetic import subtract

        return subtract(other, self)

    def __mul__(self, other: Any) -> Union[NestedFraction, float]:
        if not is_operator_operand(other):
            return NotImplemented
        if is_float_operand(other):
            return float_result(operator.mul, self.value(), float(other))
        from nestedfrac.functional.arithmetic import multiply

        return multiply(self, other)

    def __rmul__(self, other: Any) -> Union[NestedFraction, float]:
        if not is_operator_operand(other):
            return NotImplemented
        if is_float_operand(other):
            return float_result(operator.mul, float(other), self.value())
        from nestedfrac.functional.arithmetic import multiply

        return multiply(other, self)

    def __truediv__(self, other: Any) -> Union[NestedFraction, float]:
        if not is_operator_operand(other):
            return NotImplemented
        if is_float_operand(other):
            return float_result(operator.truediv, self.value(), float(other))
        from nestedfrac.functional.arithmetic import divide

        return divide(self, other)

    def __rtruediv__(self, other: Any) -> Union[NestedFraction, float]:
        if not is_operator_operand(other):
            return NotImplemented
        if is_float_operand(other):
            return float_result(operator.truediv, float(other), self.value())
        from nestedfrac.functional.arithmetic import divide

        return divide(other, self)

    def __pow__(self, exponent: Any) -> NestedFraction:
        if isinstance(exponent, bool) or not isinstance(exponent, int | np.integer):
            return NotImplemented
        from nestedfrac.functional.arithmetic import power

        return power(self, exponent)

    def __neg__(self) -> NestedFraction:
        r = self.reduce()
        return NestedFraction._from_slots(checked_int(-r._num, is_numerator=True), r._denom)

    def __pos__(self) -> NestedFraction:
        return self.reduce()

    def __abs__(self) -> NestedFraction:
        r = self.reduce()
        return NestedFraction._from_slots(checked_int(abs(r._num), is_numerator=True), r._denom)

    def __eq__(self, other: Any) -> bool:  # type: ignore[override]
        if not is_operator_operand(other):
            return NotImplemented
        from nestedfrac.functional.arithmetic import eq

        return eq(self, other)

    def __ne__(self, other: Any) -> bool:  # type: ignore[override]
        if not is_operator_operand(other):
            return NotImplemented
        from nestedfrac.functional.arithmetic import ne

        return ne(self, other)

    def __lt__(self, other: Any) -> bool:
        if not is_operator_operand(other):
            return NotImplemented
        from nestedfrac.functional.arithmetic import lt

        return lt(self, other)

    def __le__(self, other: Any) -> bool:
        if not is_operator_operand(other):
            return NotImplemented
        from nestedfrac.functional.arithmetic import le

        return le(self, other)

    def __gt__(self, other: Any) -> bool:
        if not is_operator_operand(other):
            return NotImplemented
        from nestedfrac.functional.arithmetic import gt

        return gt(self, other)

    def __ge__(self, other: Any) -> bool:
        if not is_operator_operand(other):
            return NotImplemented
        from nestedfrac.functional.arithmetic import ge

        return ge(self, other)
