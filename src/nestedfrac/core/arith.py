from __future__ import annotations
import math


def gcd(a: int, b: int) -> int:
    """Greatest common divisor, always non-negative. ``gcd(0, 0)`` is 0."""
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """Least common multiple, always non-negative. ``lcm(x, 0)`` is 0."""
    if a == 0 or b == 0:
        return 0
    return abs(b // gcd(a, b) * a)


def ratio(a: int, b: int) -> tuple[int, int]:
    """Divides both integers by their common divisor.

    Signs are kept on the side they came from, e.g. ``ratio(-4, 6) == (-2, 3)``.

    Args:
        a (int): first integer
        b (int): second integer

    Returns:
        tuple[int, int]: ``(a / gcd(a, b), b / gcd(a, b))``, or the inputs if both are zero
    """
    s = gcd(a, b)
    if s == 0:
        return a, b
    return a // s, b // s
