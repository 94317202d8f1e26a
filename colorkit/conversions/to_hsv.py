from __future__ import annotations
import math
from typing import TYPE_CHECKING

from ..colors.hsv import HSVColor
from ..config import HUE_MAX, HUE_SECTOR
from ..utils.num_utils import get_max, get_min

if TYPE_CHECKING:
    from ..colors.rgb import RGBColor


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVColor:
    """
    Convert RGB fractions to HSV.

    Hue is 0 for achromatic colors. When two channels share the maximum the
    first one in red, green, blue order decides the hue formula.

    Args:
        r, g, b: Channel fractions in [0, 1]

    Returns:
        HSVColor with h in [0, 360), s and v in [0, 1]
    """
    c_max = get_max(r, g, b)
    c_min = get_min(r, g, b)
    delta = c_max - c_min

    if delta == 0:
        hue = 0.0
    elif r >= g and r >= b:
        hue = HUE_SECTOR * math.fmod((g - b) / delta, 6.0)
    elif g >= r and g >= b:
        hue = HUE_SECTOR * ((b - r) / delta + 2.0)
    else:
        hue = HUE_SECTOR * ((r - g) / delta + 4.0)

    if hue < 0:
        hue += HUE_MAX

    saturation = delta / c_max if c_max > 0 else 0.0
    return HSVColor.from_hsv(hue, saturation, c_max)


def rgb_to_hsv(rgb: RGBColor) -> HSVColor:
    """Convert an RGB color of any channel depth to HSV."""
    return unit_rgb_to_hsv(*rgb.as_fraction_tuple())
