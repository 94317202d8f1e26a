"""Colorkit: RGB and HSV color values, conversions and hex codecs."""
import logging

from .colors.color_base import Color, ColorBase
from .colors.rgb import RGBColor, RGB24, RGB48, rgb_class
from .colors.hsv import HSVColor
from .conversions import (
    unit_rgb_to_hsv,
    rgb_to_hsv,
    hsv_to_unit_rgb,
    hsv_to_rgb,
    scale_factor,
    upscale,
    downscale,
    rescale,
    rgb24_to_rgb48,
    rgb48_to_rgb24,
)
from .errors import (
    ColorError,
    InvalidFormat,
    InvalidDigit,
    InvalidNumericInput,
    NonFiniteHue,
    UnsupportedDepth,
)
from .types.channel_depth import ChannelDepth, channel_depth, DEPTH_8, DEPTH_16
from .utils.num_utils import approx_equal_f64

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Color classes
    "Color", "ColorBase",
    "RGBColor", "RGB24", "RGB48", "rgb_class",
    "HSVColor",

    # Conversions
    "unit_rgb_to_hsv", "rgb_to_hsv",
    "hsv_to_unit_rgb", "hsv_to_rgb",
    "scale_factor", "upscale", "downscale", "rescale",
    "rgb24_to_rgb48", "rgb48_to_rgb24",

    # Errors
    "ColorError", "InvalidFormat", "InvalidDigit",
    "InvalidNumericInput", "NonFiniteHue", "UnsupportedDepth",

    # Depth and numerics
    "ChannelDepth", "channel_depth", "DEPTH_8", "DEPTH_16",
    "approx_equal_f64",
]
