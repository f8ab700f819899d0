import numpy as np

"""Range of the native signed integer a numerator or denominator must fit into.
Values outside of this range raise an overflow error instead of being promoted to big integers."""
INT_MIN: int = int(np.iinfo(np.int64).min)
INT_MAX: int = int(np.iinfo(np.int64).max)

"""Number of blanks rendered on each side of the "/" separator"""
DEFAULT_SPACES: int = 1

"""Deepest nesting the parser accepts, ``(1 / 2)`` has depth 0.
Deeper input is rejected with a syntax error so that reducing a parsed value stays within the recursion limit."""
MAX_NESTING_DEPTH: int = 64
