from __future__ import annotations
import logging
from functools import lru_cache
from typing import TYPE_CHECKING, ClassVar, Dict, Tuple, Union

from ..conversions.hex_codec import parse_hex, to_hex, to_hex_short, unpack_int
from ..types.channel_depth import ChannelDepth, channel_depth, DEPTH_8, DEPTH_16
from ..types.color_types import ColorTuple, FloatTriple, IntTriple, is_int_triple, is_integer
from ..utils.num_utils import as_fraction, to_channel_repr
from .color_base import ColorBase

if TYPE_CHECKING:
    from .hsv import HSVColor

logger = logging.getLogger(__name__)


class RGBColor(ColorBase):
    """
    RGB color with unsigned integer channels of a fixed bit depth.

    The depth is a class variable, so every concrete subclass (``RGB24``,
    ``RGB48`` or one built by ``rgb_class``) shares the hex and conversion
    logic defined here. Integer channels are clamped into ``[0, depth.max_value]``.

    Presets ``WHITE``, ``BLACK``, ``RED``, ``GREEN`` and ``BLUE`` are attached
    to every concrete subclass when it is defined.
    """
    __slots__ = ('_r', '_g', '_b')

    channel_names: ClassVar[Tuple[str, str, str]] = ('r', 'g', 'b')
    depth: ClassVar[ChannelDepth]

    WHITE: ClassVar[RGBColor]
    BLACK: ClassVar[RGBColor]
    RED: ClassVar[RGBColor]
    GREEN: ClassVar[RGBColor]
    BLUE: ClassVar[RGBColor]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if 'depth' in cls.__dict__:
            top = cls.depth.max_value
            cls.WHITE = cls._from_channels(top, top, top)
            cls.BLACK = cls._from_channels(0, 0, 0)
            cls.RED = cls._from_channels(top, 0, 0)
            cls.GREEN = cls._from_channels(0, top, 0)
            cls.BLUE = cls._from_channels(0, 0, top)

    def __init__(self, r: int = 0, g: int = 0, b: int = 0) -> None:
        depth = getattr(self, 'depth', None)
        if depth is None:
            raise TypeError("RGBColor has no channel depth; use RGB24, RGB48 or rgb_class(bits)")
        self._init_channels(depth.clip(r), depth.clip(g), depth.clip(b))

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def new(cls) -> RGBColor:
        """Black."""
        return cls()

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> RGBColor:
        return cls(r, g, b)

    @classmethod
    def from_rgb_fraction(cls, r: float, g: float, b: float) -> RGBColor:
        """
        Create a color from fractions.

        Values above 1 become the channel maximum, values below 0 and NaN
        become 0.
        """
        depth = cls.depth
        return cls._from_channels(
            to_channel_repr(r, depth),
            to_channel_repr(g, depth),
            to_channel_repr(b, depth),
        )

    @classmethod
    def from_tuple(cls, values: ColorTuple) -> RGBColor:
        """Integer triples go through ``from_rgb``, anything else through ``from_rgb_fraction``."""
        if len(values) != 3:
            raise ValueError(f"{cls.__name__} expects a 3-channel tuple, got {len(values)} values")
        if is_int_triple(values):
            return cls.from_rgb(*values)
        return cls.from_rgb_fraction(*(float(v) for v in values))

    @classmethod
    def from_hex(cls, text: str) -> RGBColor:
        """
        Create a color from a 3 or 6 digit hex string (``"f39"``, ``"ff3399"``).

        Raises:
            InvalidFormat: If the length is not 3 or 6
            InvalidDigit: If a character is not a hex digit
        """
        return cls._from_channels(*parse_hex(text, cls.depth))

    @classmethod
    def from_int(cls, value: int, base: int = 256) -> RGBColor:
        """Create a color from a packed integer with 2, 4 or 8 bits per channel (base 4, 16, 256)."""
        return cls._from_channels(*unpack_int(value, base, cls.depth))

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> int:
        return self._r

    @property
    def green(self) -> int:
        return self._g

    @property
    def blue(self) -> int:
        return self._b

    r = red
    g = green
    b = blue

    def as_tuple(self) -> IntTriple:
        return (self._r, self._g, self._b)

    def as_fraction_tuple(self) -> FloatTriple:
        depth = self.depth
        return (
            as_fraction(self._r, depth),
            as_fraction(self._g, depth),
            as_fraction(self._b, depth),
        )

    # ------------------ CHANNEL REPLACEMENT ------------------
    def with_red(self, r: int) -> RGBColor:
        return self._replace_channel('r', self.depth.clip(r))

    def with_green(self, g: int) -> RGBColor:
        return self._replace_channel('g', self.depth.clip(g))

    def with_blue(self, b: int) -> RGBColor:
        return self._replace_channel('b', self.depth.clip(b))

    # ------------------ SERIALISATION / CONVERSION ------------------
    def to_hex(self) -> str:
        """6 lowercase hex digits, e.g. white -> ``"ffffff"``."""
        return to_hex(self.as_tuple(), self.depth)

    def to_hex_short(self) -> str:
        """
        3 lowercase hex digits, e.g. white -> ``"fff"``.

        This is lossy; each channel is rounded to the nearest of 16 levels.
        """
        return to_hex_short(self.as_tuple(), self.depth)

    def to_hsv(self) -> HSVColor:
        from ..conversions.to_hsv import rgb_to_hsv  # local import to avoid cycles
        return rgb_to_hsv(self)

    def to_depth(self, target: Union[type[RGBColor], ChannelDepth, int]) -> RGBColor:
        from ..conversions.depth import rescale
        return rescale(self, target)

    def is_white(self) -> bool:
        top = self.depth.max_value
        return self.as_tuple() == (top, top, top)

    def is_black(self) -> bool:
        return self.as_tuple() == (0, 0, 0)

    # ------------------ DUNDERS ------------------
    def __eq__(self, other) -> bool:
        if not isinstance(other, RGBColor):
            return NotImplemented
        return self.depth == other.depth and self.as_tuple() == other.as_tuple()

    def __hash__(self) -> int:
        return hash((self.depth.bits, self._r, self._g, self._b))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(r={self._r}, g={self._g}, b={self._b})"

    def __str__(self) -> str:
        return f"(R:{self._r}, G:{self._g}, B:{self._b})"


class RGB24(RGBColor):
    """True color: 8 bits per channel (0-255)."""
    __slots__ = ()
    depth: ClassVar[ChannelDepth] = DEPTH_8


class RGB48(RGBColor):
    """Deep color: 16 bits per channel (0-65535)."""
    __slots__ = ()
    depth: ClassVar[ChannelDepth] = DEPTH_16


def build_registry(*classes: type[RGBColor]) -> Dict[int, type[RGBColor]]:
    return {cls.depth.bits: cls for cls in classes}


depth_to_class = build_registry(RGB24, RGB48)


@lru_cache(maxsize=None)
def rgb_class(bits: int) -> type[RGBColor]:
    """
    Return the RGB class with ``bits`` per channel, creating it on first use.

    Raises:
        UnsupportedDepth: If ``bits`` is outside 1-32
    """
    depth = channel_depth(bits)
    if depth.bits in depth_to_class:
        return depth_to_class[depth.bits]
    logger.debug("Creating RGB class for %d-bit channels", depth.bits)
    return type(
        f"RGB{depth.bits * 3}",
        (RGBColor,),
        {'__slots__': (), 'depth': depth, '__module__': __name__},
    )


def resolve_rgb_class(target: Union[type[RGBColor], ChannelDepth, int]) -> type[RGBColor]:
    """Accept an RGB class, a ``ChannelDepth`` or a number of bits and return the RGB class."""
    if isinstance(target, type) and issubclass(target, RGBColor):
        if not hasattr(target, 'depth'):
            raise TypeError(f"{target.__name__} has no channel depth")
        return target
    if isinstance(target, ChannelDepth):
        return rgb_class(target.bits)
    if is_integer(target):
        return rgb_class(int(target))
    raise TypeError(f"Cannot resolve an RGB class from {target!r}")
