from __future__ import annotations
from typing import Tuple, Union
import numpy as np

IntTriple = Tuple[int, int, int]
FloatTriple = Tuple[float, float, float]
ColorTuple = Union[IntTriple, FloatTriple]


def is_integer(value) -> bool:
    """True for Python and numpy integers; bools are rejected."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, (bool, np.bool_))


def is_int_triple(values: ColorTuple) -> bool:
    """Check whether every element of the triple is an integer."""
    return all(is_integer(v) for v in values)
