from __future__ import annotations

from typing import TYPE_CHECKING, Union

import numpy as np

if TYPE_CHECKING:
    from nestedfrac.core.fraction import NestedFraction

# Everything the NestedFraction constructor (and thereby every binary operation) can materialise into a fraction
OperandSource = Union[
    int,
    float,
    str,
    np.integer,
    np.floating,
    "NestedFraction",
]
