"""
HSV -> RGB following the chroma / sector formulation:
https://en.wikipedia.org/wiki/HSL_and_HSV#HSV_to_RGB
"""
from __future__ import annotations
import logging
import math
from typing import TYPE_CHECKING, Optional

from ..config import HUE_SECTOR
from ..types.color_types import FloatTriple

if TYPE_CHECKING:
    from ..colors.hsv import HSVColor
    from ..colors.rgb import RGBColor

logger = logging.getLogger(__name__)


def _sector_rgb(h_prime: float, chroma: float, x: float) -> FloatTriple:
    """Pre-offset RGB triple for the 60 degree sector containing ``h_prime``."""
    if not math.isfinite(h_prime):
        logger.debug("Non-finite hue sector %r, falling back to black", h_prime)
        return (0.0, 0.0, 0.0)

    # sector 6 (h == 360) folds back onto sector 0
    sector = math.floor(h_prime) % 6
    return (
        (chroma, x, 0.0),
        (x, chroma, 0.0),
        (0.0, chroma, x),
        (0.0, x, chroma),
        (x, 0.0, chroma),
        (chroma, 0.0, x),
    )[sector]


def hsv_to_unit_rgb(h: float, s: float, v: float) -> FloatTriple:
    """
    Convert HSV channels to RGB fractions.

    Args:
        h: Hue in degrees
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        (r, g, b) fractions; NaN or infinite hue yields ``(m, m, m)`` with ``m = v - v*s``
    """
    chroma = v * s
    h_prime = h / HUE_SECTOR
    x = chroma * (1.0 - abs(h_prime % 2.0 - 1.0)) if math.isfinite(h_prime) else 0.0

    r1, g1, b1 = _sector_rgb(h_prime, chroma, x)
    m = v - chroma
    return (r1 + m, g1 + m, b1 + m)


def hsv_to_rgb(hsv: HSVColor, cls: Optional[type[RGBColor]] = None) -> RGBColor:
    """
    Convert an HSV color to RGB.

    Args:
        hsv: Source color
        cls: Target RGB class (``RGB24`` when omitted); any channel depth works

    Returns:
        Instance of ``cls``
    """
    if cls is None:
        from ..colors.rgb import RGB24  # local import to avoid cycles
        cls = RGB24
    return cls.from_rgb_fraction(*hsv_to_unit_rgb(*hsv.as_tuple()))
