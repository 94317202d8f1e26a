from __future__ import annotations
import math
import numpy as np

from ..config import HUE_MAX
from ..types.channel_depth import ChannelDepth


def get_max(a: float, b: float, c: float) -> float:
    """Maximum of the triple. NaN operands are ignored unless all three are NaN."""
    return float(np.fmax(a, np.fmax(b, c)))


def get_min(a: float, b: float, c: float) -> float:
    """Minimum of the triple. NaN operands are ignored unless all three are NaN."""
    return float(np.fmin(a, np.fmin(b, c)))


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (unlike the builtin ``round``)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def to_channel_repr(value: float, depth: ChannelDepth) -> int:
    """
    Map a fraction to an integer channel value.

    - ``value >= 1.0`` -> ``depth.max_value``
    - ``value <= 0.0`` -> 0
    - NaN -> 0
    - otherwise ``round(value * depth.max_value)``
    """
    if value >= 1.0:
        return depth.max_value
    if value <= 0.0 or math.isnan(value):
        return 0
    return round_half_away(value * depth.max_value)


def as_fraction(channel: int, depth: ChannelDepth) -> float:
    return channel / depth.max_value


def approx_equal_f64(a: float, b: float, epsilon: float) -> bool:
    """
    Check whether ``a`` and ``b`` are approximately equal.

    Epsilon is ignored for non-finite values:
        - NaN == NaN
        - NaN != +-inf
        - inf == inf, -inf == -inf
        - inf != -inf
        - non-finite != finite

    Examples:
        >>> approx_equal_f64(1.01, 1.02, 0.01)
        False
        >>> approx_equal_f64(1.01, 1.02, 0.1)
        True
    """
    a_finite = math.isfinite(a)
    b_finite = math.isfinite(b)
    if a_finite != b_finite:
        return False
    if not a_finite:
        if math.isnan(a) or math.isnan(b):
            return math.isnan(a) and math.isnan(b)
        return math.copysign(1.0, a) == math.copysign(1.0, b)
    return abs(a - b) < epsilon


def convert_to_range(value: float, min_value: float, max_value: float) -> float:
    """Clamp ``value`` into ``[min_value, max_value]``; infinities collapse onto the bounds."""
    if value <= min_value:
        return min_value
    if value >= max_value:
        return max_value
    return value


def wrap_hue(hue: float) -> float:
    """Euclidean modulo of a finite hue into ``[0, 360)``."""
    wrapped = float(np.mod(hue, HUE_MAX))
    # np.mod(-1e-20, 360) rounds up to exactly 360
    return 0.0 if wrapped >= HUE_MAX else wrapped
