"""
Colorkit Conversions
====================

Conversion between RGB (any channel depth) and HSV, rescaling between RGB
channel depths, and hexadecimal encoding.

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
        RGB fractions to HSVColor
    rgb_to_hsv(rgb)
        RGBColor of any depth to HSVColor

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
        HSV channels to RGB fractions
    hsv_to_rgb(hsv, cls=None)
        HSVColor to an RGB class (RGB24 by default)

Depth:
    upscale / downscale / rescale(rgb, target)
    rgb24_to_rgb48(rgb), rgb48_to_rgb24(rgb)
    scale_factor(narrow, wide)

Hex:
    parse_hex(text, depth), to_hex(channels, depth), to_hex_short(channels, depth)

Examples
--------
>>> from colorkit.colors.rgb import RGB24
>>> from colorkit.conversions import rgb_to_hsv, hsv_to_rgb
>>> hsv = rgb_to_hsv(RGB24.from_rgb(0, 255, 0))
>>> hsv.as_tuple()
(120.0, 1.0, 1.0)
>>> hsv_to_rgb(hsv)
RGB24(r=0, g=255, b=0)
"""

from .to_hsv import unit_rgb_to_hsv, rgb_to_hsv
from .to_rgb import hsv_to_unit_rgb, hsv_to_rgb
from .depth import (
    scale_factor,
    upscale,
    downscale,
    rescale,
    rgb24_to_rgb48,
    rgb48_to_rgb24,
)
from .hex_codec import parse_hex, to_hex, to_hex_short, validate_hex

__all__ = [
    # RGB → HSV
    'unit_rgb_to_hsv',
    'rgb_to_hsv',

    # HSV → RGB
    'hsv_to_unit_rgb',
    'hsv_to_rgb',

    # Depth
    'scale_factor',
    'upscale',
    'downscale',
    'rescale',
    'rgb24_to_rgb48',
    'rgb48_to_rgb24',

    # Hex
    'parse_hex',
    'to_hex',
    'to_hex_short',
    'validate_hex',
]
