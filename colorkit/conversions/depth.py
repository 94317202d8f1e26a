"""
Bit-depth rescaling between RGB classes of different channel widths.

Two widths are compatible when the wide maximum is an exact multiple of the
narrow maximum, ``(2**W2 - 1) / (2**W1 - 1)``, which holds whenever W1
divides W2 (8 <-> 16, 8 <-> 32, 16 <-> 32, 4 <-> 8, ...).

- upscale multiplies every channel by the factor and is lossless
- downscale integer-divides by the factor and truncates, so
  ``downscale(upscale(x)) == x`` but not the other way round
"""
from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Union

from ..errors import UnsupportedDepth
from ..types.channel_depth import ChannelDepth

if TYPE_CHECKING:
    from ..colors.rgb import RGBColor

logger = logging.getLogger(__name__)

DepthTarget = Union["type[RGBColor]", ChannelDepth, int]


def expansion_factor(narrow_max: int, depth: ChannelDepth) -> int:
    """Integer factor mapping ``0..narrow_max`` onto ``0..depth.max_value``."""
    if narrow_max <= 0 or depth.max_value % narrow_max:
        raise UnsupportedDepth(
            f"Cannot expand levels 0..{narrow_max} onto {depth.bits}-bit channels: "
            f"{depth.max_value} is not a multiple of {narrow_max}"
        )
    return depth.max_value // narrow_max


def scale_factor(narrow: ChannelDepth, wide: ChannelDepth) -> int:
    """
    Scale factor between two channel depths.

    Raises:
        UnsupportedDepth: If ``narrow`` is wider than ``wide`` or the ratio of
            the two maxima is not an integer
    """
    if narrow.bits > wide.bits:
        raise UnsupportedDepth(f"{narrow.bits}-bit channels are wider than {wide.bits}-bit channels")
    if wide.max_value % narrow.max_value:
        raise UnsupportedDepth(
            f"Unsupported scale factor {wide.max_value}/{narrow.max_value} "
            f"between {narrow.bits}-bit and {wide.bits}-bit channels"
        )
    return wide.max_value // narrow.max_value


def rescale_channel(value: int, source: ChannelDepth, target: ChannelDepth) -> int:
    if source.bits == target.bits:
        return value
    if source.bits < target.bits:
        return value * scale_factor(source, target)
    return value // scale_factor(target, source)


def _resolve(target: DepthTarget) -> "type[RGBColor]":
    from ..colors.rgb import resolve_rgb_class  # local import to avoid cycles
    return resolve_rgb_class(target)


def upscale(rgb: "RGBColor", target: DepthTarget) -> "RGBColor":
    """Losslessly convert ``rgb`` to a wider (or equal) channel depth."""
    cls = _resolve(target)
    factor = scale_factor(rgb.depth, cls.depth)
    return cls.from_rgb(*(c * factor for c in rgb.as_tuple()))


def downscale(rgb: "RGBColor", target: DepthTarget) -> "RGBColor":
    """Convert ``rgb`` to a narrower (or equal) channel depth, truncating the low bits."""
    cls = _resolve(target)
    divider = scale_factor(cls.depth, rgb.depth)
    channels = rgb.as_tuple()
    if any(c % divider for c in channels):
        logger.debug("Lossy downscale of %r to %d bits", rgb, cls.depth.bits)
    return cls.from_rgb(*(c // divider for c in channels))


def rescale(rgb: "RGBColor", target: DepthTarget) -> "RGBColor":
    """Dispatch to ``upscale`` or ``downscale`` depending on the target width."""
    cls = _resolve(target)
    if cls.depth.bits >= rgb.depth.bits:
        return upscale(rgb, cls)
    return downscale(rgb, cls)


def rgb24_to_rgb48(rgb: "RGBColor") -> "RGBColor":
    from ..colors.rgb import RGB24, RGB48
    if rgb.depth != RGB24.depth:
        raise TypeError(f"rgb24_to_rgb48 expects an RGB24 color, got {type(rgb).__name__}")
    return upscale(rgb, RGB48)


def rgb48_to_rgb24(rgb: "RGBColor") -> "RGBColor":
    from ..colors.rgb import RGB24, RGB48
    if rgb.depth != RGB48.depth:
        raise TypeError(f"rgb48_to_rgb24 expects an RGB48 color, got {type(rgb).__name__}")
    return downscale(rgb, RGB24)
