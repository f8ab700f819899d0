from __future__ import annotations


class NestedFractionError(Exception):
    """Base class of every error raised by nestedfrac."""


class DivisionByZero(NestedFractionError, ZeroDivisionError):
    def __init__(self, message: str = "cannot divide by zero"):
        super().__init__(message)


class IntegerOverflow(NestedFractionError, OverflowError):
    slot: str = "integer"

    def __init__(self, value: object = None):
        self.value = value
        if value is None:
            super().__init__(f"{self.slot} overflowed")
        else:
            super().__init__(f"{self.slot} overflowed: {value!r} does not fit into a 64 bit signed integer")


class NumeratorOverflow(IntegerOverflow):
    slot = "numerator"


class DenominatorOverflow(IntegerOverflow):
    slot = "denominator"


class InvalidOperandType(NestedFractionError, TypeError):
    pass


class FractionSyntaxError(NestedFractionError, ValueError):
    """Malformed textual fraction.

    Attributes:
        text (str): the complete input
        offset (int): zero-based position at which parsing failed
        reason (str): human readable description of the failure
    """

    def __init__(self, reason: str, text: str, offset: int):
        self.reason = reason
        self.text = text
        self.offset = offset
        super().__init__(reason)

    def caret(self) -> str:
        return " " * self.offset + "^"

    def __str__(self) -> str:
        return f"{self.reason} (at offset {self.offset})\n{self.text}\n{self.caret()}"
