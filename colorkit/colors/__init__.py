"""
Colorkit Color Classes
======================

Immutable color values for the RGB and HSV models.

RGB:
    - RGBColor: generic RGB, channel depth taken from the subclass
    - RGB24: 8 bits per channel (0-255)
    - RGB48: 16 bits per channel (0-65535)
    - rgb_class(bits): RGB class for any depth from 1 to 32 bits

HSV:
    - HSVColor: float hue in [0, 360), saturation and value in [0, 1]

Usage
-----
>>> from colorkit.colors import RGB24, HSVColor
>>> color = RGB24.from_hex("f39")
>>> color.as_tuple()
(255, 51, 153)
>>> color.to_hex()
'ff3399'
>>> HSVColor.from_hsv(-30.0, 2.0, 0.5).as_tuple()
(330.0, 1.0, 0.5)

Notes
-----
- Instances are frozen; ``with_*`` methods return a modified copy
- RGB equality is exact, HSV equality uses an epsilon of 1e-7
- Integer RGB channels are clamped to the depth's range, fractions are
  clamped to [0, 1]
"""

from .color_base import Color, ColorBase
from .rgb import RGBColor, RGB24, RGB48, rgb_class, resolve_rgb_class
from .hsv import HSVColor

__all__ = [
    'Color',
    'ColorBase',
    'RGBColor',
    'RGB24',
    'RGB48',
    'rgb_class',
    'resolve_rgb_class',
    'HSVColor',
]
