from __future__ import annotations
import math
from typing import TYPE_CHECKING, ClassVar, Optional, Tuple

from ..config import HSV_EPSILON, HUE_MAX
from ..errors import InvalidNumericInput, NonFiniteHue
from ..types.color_types import FloatTriple, IntTriple
from ..utils.num_utils import approx_equal_f64, convert_to_range, wrap_hue
from .color_base import ColorBase

if TYPE_CHECKING:
    from .rgb import RGBColor

U8_MAX = 255


class HSVColor(ColorBase):
    """
    HSV color with float channels.

    - ``h`` in degrees, wrapped into ``[0, 360)``
    - ``s`` and ``v`` as fractions, clamped into ``[0, 1]``

    Equality is approximate: channels are compared with ``approx_equal_f64``
    and ``EPSILON``, so HSV colors are not hashable.
    """
    __slots__ = ('_h', '_s', '_v')

    channel_names: ClassVar[Tuple[str, str, str]] = ('h', 's', 'v')

    EPSILON: ClassVar[float] = HSV_EPSILON
    H_MIN: ClassVar[float] = 0.0
    S_MIN: ClassVar[float] = 0.0
    V_MIN: ClassVar[float] = 0.0
    H_MAX: ClassVar[float] = HUE_MAX
    S_MAX: ClassVar[float] = 1.0
    V_MAX: ClassVar[float] = 1.0

    WHITE: ClassVar[HSVColor]
    BLACK: ClassVar[HSVColor]
    RED: ClassVar[HSVColor]
    GREEN: ClassVar[HSVColor]
    BLUE: ClassVar[HSVColor]

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, h: float = 0.0, s: float = 0.0, v: float = 0.0) -> None:
        """
        Normalise and store the channels.

        Args:
            h: Hue in degrees. Must be finite; wrapped with Euclidean modulo.
            s: Saturation. Clamped into [0, 1]; infinities collapse onto the bounds.
            v: Value. Clamped into [0, 1]; infinities collapse onto the bounds.

        Raises:
            InvalidNumericInput: If any channel is NaN
            NonFiniteHue: If ``h`` is infinite
        """
        h, s, v = float(h), float(s), float(v)
        for name, channel in zip(self.channel_names, (h, s, v)):
            if math.isnan(channel):
                raise InvalidNumericInput(name)
        if math.isinf(h):
            raise NonFiniteHue(h)

        self._init_channels(
            wrap_hue(h),
            convert_to_range(s, self.S_MIN, self.S_MAX),
            convert_to_range(v, self.V_MIN, self.V_MAX),
        )

    @classmethod
    def new(cls) -> HSVColor:
        """Black."""
        return cls()

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> HSVColor:
        return cls(h, s, v)

    @classmethod
    def from_tuple(cls, values: FloatTriple) -> HSVColor:
        if len(values) != 3:
            raise ValueError(f"{cls.__name__} expects a 3-channel tuple, got {len(values)} values")
        return cls(*values)

    @classmethod
    def from_hsv_u8(cls, h: int, s: int, v: int) -> HSVColor:
        """
        Map 8-bit values onto the HSV ranges.

        (0, 0, 0) -> (0.0, 0.0, 0.0), (51, 51, 51) -> (72.0, 0.2, 0.2),
        (255, 255, 255) -> (360.0 wrapped to 0.0, 1.0, 1.0)
        """
        return cls(
            h / U8_MAX * cls.H_MAX,
            s / U8_MAX * cls.S_MAX,
            v / U8_MAX * cls.V_MAX,
        )

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def h(self) -> float:
        return self._h

    @property
    def s(self) -> float:
        return self._s

    @property
    def v(self) -> float:
        return self._v

    hue = h
    saturation = s
    value = v

    def as_tuple(self) -> FloatTriple:
        return (self._h, self._s, self._v)

    def as_tuple_u8(self) -> IntTriple:
        """Truncating inverse of ``from_hsv_u8``: (72.0, 0.2, 0.2) -> (51, 51, 51)."""
        return (
            int(self._h / self.H_MAX * U8_MAX),
            int(self._s / self.S_MAX * U8_MAX),
            int(self._v / self.V_MAX * U8_MAX),
        )

    # Channel replacement does not re-normalise; only the constructor does.
    def with_h(self, h: float) -> HSVColor:
        return self._replace_channel('h', h)

    def with_s(self, s: float) -> HSVColor:
        return self._replace_channel('s', s)

    def with_v(self, v: float) -> HSVColor:
        return self._replace_channel('v', v)

    # ------------------ CONVERSION ------------------
    def to_rgb(self, cls: Optional[type[RGBColor]] = None) -> RGBColor:
        from ..conversions.to_rgb import hsv_to_rgb  # local import to avoid cycles
        return hsv_to_rgb(self, cls)

    def to_rgb24(self) -> RGBColor:
        from .rgb import RGB24
        return self.to_rgb(RGB24)

    def to_rgb48(self) -> RGBColor:
        from .rgb import RGB48
        return self.to_rgb(RGB48)

    # ------------------ COMPARISON ------------------
    def approx_eq(self, other: HSVColor, epsilon: float = HSV_EPSILON) -> bool:
        """Per-channel ``approx_equal_f64`` with a caller-chosen epsilon."""
        return all(
            approx_equal_f64(a, b, epsilon)
            for a, b in zip(self.as_tuple(), other.as_tuple())
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, HSVColor):
            return NotImplemented
        return self.approx_eq(other, self.EPSILON)

    def is_white(self) -> bool:
        return self == HSVColor.WHITE

    def is_black(self) -> bool:
        return self == HSVColor.BLACK

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(h={self._h!r}, s={self._s!r}, v={self._v!r})"

    def __str__(self) -> str:
        return f"(H:{self._h}, S:{self._s}, V:{self._v})"


HSVColor.WHITE = HSVColor._from_channels(0.0, 0.0, 1.0)
HSVColor.BLACK = HSVColor._from_channels(0.0, 0.0, 0.0)
HSVColor.RED = HSVColor._from_channels(0.0, 1.0, 1.0)
HSVColor.GREEN = HSVColor._from_channels(120.0, 1.0, 1.0)
HSVColor.BLUE = HSVColor._from_channels(240.0, 1.0, 1.0)
