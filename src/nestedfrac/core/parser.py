from __future__ import annotations
import logging
from typing import Union

from nestedfrac.core.constants import INT_MAX, MAX_NESTING_DEPTH
from nestedfrac.core.errors import DenominatorOverflow, FractionSyntaxError, InvalidOperandType, NumeratorOverflow
from nestedfrac.core.fraction import NestedFraction, checked_int

logger = logging.getLogger(__name__)

DIGITS = frozenset("0123456789")

"""Longest run of significant digits that can still fit into the integer range"""
MAX_DIGITS = len(str(INT_MAX))


class Parser:
    """Recursive descent parser for fully parenthesized fractions.

    Grammar, whitespace is allowed between all tokens::

        fraction := "(" operand "/" operand ")"
        operand  := integer | fraction
        integer  := "-"? digit+

    The parsed structure is kept as it is, ``(2 / 4)`` is not reduced.
    """

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.depth = -1

    def error(self, reason: str) -> FractionSyntaxError:
        return FractionSyntaxError(reason, self.text, self.pos)

    def peek(self) -> str:
        if self.pos >= len(self.text):
            return ""
        return self.text[self.pos]

    def skip_whitespace(self) -> None:
        while self.pos < len(self.text) and self.text[self.pos].isspace():
            self.pos += 1

    def parse(self) -> NestedFraction:
        """Parses the complete input, trailing characters other than whitespace are an error"""
        self.skip_whitespace()
        frac = self.parse_fraction()
        self.skip_whitespace()
        if self.pos != len(self.text):
            raise self.error("unexpected trailing input")
        return frac

    def parse_fraction(self) -> NestedFraction:
        if self.peek() != "(":
            raise self.error('missing "("')
        if self.depth >= MAX_NESTING_DEPTH:
            raise self.error("nesting too deep")
        self.depth += 1
        self.pos += 1
        self.skip_whitespace()

        num = self.parse_operand("numerator")
        self.skip_whitespace()

        if self.peek() != "/":
            raise self.error('expected "/"')
        self.pos += 1
        self.skip_whitespace()

        denom = self.parse_operand("denominator")
        self.skip_whitespace()

        if self.peek() != ")":
            raise self.error('missing ")"')
        self.pos += 1
        self.depth -= 1
        return NestedFraction._from_slots(num, denom)

    def parse_operand(self, slot: str) -> Union[int, NestedFraction]:
        char = self.peek()
        if char == "(":
            return self.parse_fraction()
        if char == "-" or char in DIGITS:
            return self.parse_integer(is_numerator=slot == "numerator")
        raise self.error(f"expected a number or a fraction in the {slot}")

    def parse_integer(self, is_numerator: bool) -> int:
        start = self.pos
        if self.peek() == "-":
            self.pos += 1
            if self.peek() not in DIGITS:
                raise self.error('expected digits after "-"')
        digits_start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] in DIGITS:
            self.pos += 1
        literal = self.text[start : self.pos]
        # leading zeros do not count, "007" is a valid literal
        significant = self.text[digits_start : self.pos].lstrip("0") or "0"
        if len(significant) > MAX_DIGITS:
            overflow = NumeratorOverflow if is_numerator else DenominatorOverflow
            raise overflow(literal if len(literal) <= 2 * MAX_DIGITS else f"{literal[:MAX_DIGITS]}...")
        # same range and zero checks as constructor arguments
        return checked_int(int(self.text[start:digits_start] + significant), is_numerator=is_numerator)


def parse(text: str) -> NestedFraction:
    """Parses the textual form of a (possibly nested) fraction.

    Examples:
        >>> parse("(1 / (1 / 3))").value()
        3.0

    Raises:
        FractionSyntaxError: malformed input or nesting deeper than MAX_NESTING_DEPTH, carries the failing offset
        DivisionByZero: an integer denominator is zero
        NumeratorOverflow | DenominatorOverflow: an integer does not fit into int64
        InvalidOperandType: ``text`` is not a string
    """
    if not isinstance(text, str):
        raise InvalidOperandType(f"can only parse strings, got {type(text).__name__}")
    frac = Parser(text).parse()
    logger.debug("Parsed %r into a fraction of depth %d", text, frac.depth)
    return frac
