import copy
import math
import pickle
import pytest

from colorkit.colors.color_base import Color
from colorkit.colors.hsv import HSVColor
from colorkit.colors.rgb import RGB24, RGB48
from colorkit.errors import InvalidNumericInput, NonFiniteHue

NAN = float("nan")
INF = float("inf")


def test_new_is_black():
    assert HSVColor.new() == HSVColor.from_hsv(0.0, 0.0, 0.0)
    assert HSVColor.new() == HSVColor.BLACK
    assert HSVColor.new().as_tuple() == (0.0, 0.0, 0.0)


def test_accessors():
    color = HSVColor.from_hsv(1.2, 0.3, 0.4)
    assert color.h == 1.2
    assert color.s == 0.3
    assert color.v == 0.4
    assert (color.hue, color.saturation, color.value) == (1.2, 0.3, 0.4)
    h, s, v = color
    assert (h, s, v) == (1.2, 0.3, 0.4)


def test_with_channel():
    color = HSVColor.new()
    assert color.with_h(5.0).as_tuple() == (5.0, 0.0, 0.0)
    assert color.with_s(0.25).as_tuple() == (0.0, 0.25, 0.0)
    assert color.with_v(0.5).as_tuple() == (0.0, 0.0, 0.5)
    assert color.as_tuple() == (0.0, 0.0, 0.0)


def test_immutable():
    color = HSVColor.from_hsv(10, 0.5, 0.5)
    with pytest.raises(AttributeError):
        color._h = 20.0
    with pytest.raises(AttributeError):
        color.h = 20.0


def test_from_hsv_normalises():
    assert HSVColor.from_hsv(-1, -1, -1) == HSVColor.from_hsv(359, 0, 0)
    assert HSVColor.from_hsv(361, 2, 2) == HSVColor.from_hsv(1, 1, 1)
    assert HSVColor.from_hsv(360, 1, 1).h == 0.0
    assert HSVColor.from_hsv(720, 0.5, 0.5).h == 0.0
    assert HSVColor.from_hsv(-360, 0.5, 0.5).h == 0.0


def test_from_hsv_wraps_into_half_open_range():
    for hue in (-1e-20, -0.0, 359.9999999, 719.5, -359.5, 1e6):
        h = HSVColor.from_hsv(hue, 0.5, 0.5).h
        assert 0.0 <= h < 360.0


def test_from_hsv_infinite_saturation_value():
    assert HSVColor.from_hsv(10, INF, INF) == HSVColor.from_hsv(10, 1, 1)
    assert HSVColor.from_hsv(10, -INF, -INF) == HSVColor.from_hsv(10, 0, 0)


def test_from_hsv_nan_rejected():
    with pytest.raises(InvalidNumericInput, match="'h'"):
        HSVColor.from_hsv(NAN, 0.5, 0.5)
    with pytest.raises(InvalidNumericInput, match="'s'"):
        HSVColor.from_hsv(0, NAN, 0.5)
    with pytest.raises(InvalidNumericInput, match="'v'"):
        HSVColor.from_hsv(0, 0.5, NAN)


def test_from_hsv_infinite_hue_rejected():
    with pytest.raises(NonFiniteHue, match="h must be finite"):
        HSVColor.from_hsv(INF, 0.5, 0.5)
    with pytest.raises(NonFiniteHue):
        HSVColor.from_hsv(-INF, 0.5, 0.5)


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        HSVColor.from_hsv(NAN, 0, 0)
    with pytest.raises(ValueError):
        HSVColor.from_hsv(INF, 0, 0)


def test_from_tuple():
    assert HSVColor.from_tuple((120, 0.5, 0.25)) == HSVColor.from_hsv(120, 0.5, 0.25)
    with pytest.raises(ValueError):
        HSVColor.from_tuple((120, 0.5))


def test_from_hsv_u8():
    assert HSVColor.from_hsv_u8(0, 0, 0) == HSVColor.from_hsv(0.0, 0.0, 0.0)
    assert HSVColor.from_hsv_u8(51, 51, 51) == HSVColor.from_hsv(72.0, 0.2, 0.2)
    assert HSVColor.from_hsv_u8(255, 255, 255) == HSVColor.from_hsv(0.0, 1.0, 1.0)


def test_as_tuple_u8():
    assert HSVColor.from_hsv(72.0, 0.2, 0.2).as_tuple_u8() == (51, 51, 51)
    assert HSVColor.from_hsv(180.0, 0.5, 0.2).as_tuple_u8() == (127, 127, 51)
    assert HSVColor.from_hsv(360.0, 1.0, 1.0).as_tuple_u8() == (0, 255, 255)
    assert HSVColor.WHITE.as_tuple_u8() == (0, 0, 255)


def test_approximate_equality():
    a = HSVColor.from_hsv(120.0, 0.5, 0.5)
    assert a == HSVColor.from_hsv(120.0 + 1e-9, 0.5, 0.5 - 1e-9)
    assert a != HSVColor.from_hsv(120.0 + 1e-3, 0.5, 0.5)
    assert a.approx_eq(HSVColor.from_hsv(120.01, 0.5, 0.5), epsilon=0.1)
    assert not a.approx_eq(HSVColor.from_hsv(120.01, 0.5, 0.5), epsilon=1e-3)
    assert a != (120.0, 0.5, 0.5)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(HSVColor.WHITE)


def test_presets():
    assert HSVColor.WHITE.as_tuple() == (0.0, 0.0, 1.0)
    assert HSVColor.BLACK.as_tuple() == (0.0, 0.0, 0.0)
    assert HSVColor.RED.as_tuple() == (0.0, 1.0, 1.0)
    assert HSVColor.GREEN.as_tuple() == (120.0, 1.0, 1.0)
    assert HSVColor.BLUE.as_tuple() == (240.0, 1.0, 1.0)


def test_white_black():
    assert HSVColor.WHITE.is_white()
    assert HSVColor.BLACK.is_black()
    assert not HSVColor.RED.is_white()
    assert not HSVColor.RED.is_black()
    # hue differs, so this is not the canonical white
    assert not HSVColor.from_hsv(30, 0, 1).is_white()


def test_color_protocol():
    assert isinstance(HSVColor.BLUE, Color)


def test_to_rgb():
    assert HSVColor.RED.to_rgb() == RGB24.RED
    assert HSVColor.GREEN.to_rgb24() == RGB24.GREEN
    assert HSVColor.BLUE.to_rgb48() == RGB48.BLUE
    assert HSVColor.WHITE.to_rgb(RGB48) == RGB48.WHITE
    assert HSVColor.BLACK.to_rgb(RGB48) == RGB48.BLACK


def test_str_and_repr():
    assert str(HSVColor.from_hsv(120, 0.5, 0.25)) == "(H:120.0, S:0.5, V:0.25)"
    assert repr(HSVColor.from_hsv(120, 0.5, 0.25)) == "HSVColor(h=120.0, s=0.5, v=0.25)"


def test_copy_and_pickle():
    color = HSVColor.from_hsv(200.5, 0.3, 0.9)
    assert copy.deepcopy(color) == color
    restored = pickle.loads(pickle.dumps(color))
    assert restored == color
    assert isinstance(restored, HSVColor)
    assert math.isclose(restored.h, 200.5)
