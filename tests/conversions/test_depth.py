import logging
import pytest

from colorkit.colors.rgb import RGB24, RGB48, rgb_class
from colorkit.conversions.depth import (
    downscale,
    expansion_factor,
    rescale,
    rescale_channel,
    rgb24_to_rgb48,
    rgb48_to_rgb24,
    scale_factor,
    upscale,
)
from colorkit.errors import UnsupportedDepth
from colorkit.types.channel_depth import channel_depth, DEPTH_8, DEPTH_16


def test_scale_factor():
    assert scale_factor(DEPTH_8, DEPTH_16) == 257
    assert scale_factor(DEPTH_8, DEPTH_8) == 1
    assert scale_factor(channel_depth(4), DEPTH_8) == 17
    assert scale_factor(DEPTH_16, channel_depth(32)) == 65537
    assert scale_factor(DEPTH_8, channel_depth(32)) == 16843009


def test_scale_factor_unsupported():
    with pytest.raises(UnsupportedDepth):
        scale_factor(DEPTH_16, DEPTH_8)
    with pytest.raises(UnsupportedDepth):
        scale_factor(DEPTH_8, channel_depth(12))
    with pytest.raises(UnsupportedDepth):
        scale_factor(channel_depth(3), DEPTH_8)


def test_expansion_factor():
    assert expansion_factor(15, DEPTH_8) == 17
    assert expansion_factor(255, DEPTH_16) == 257
    assert expansion_factor(3, DEPTH_8) == 85
    with pytest.raises(UnsupportedDepth):
        expansion_factor(255, channel_depth(12))


def test_rescale_channel():
    assert rescale_channel(1, DEPTH_8, DEPTH_16) == 257
    assert rescale_channel(257, DEPTH_16, DEPTH_8) == 1
    assert rescale_channel(512, DEPTH_16, DEPTH_8) == 1
    assert rescale_channel(77, DEPTH_8, DEPTH_8) == 77


def test_upscale():
    assert upscale(RGB24.from_rgb(1, 2, 3), RGB48) == RGB48.from_rgb(257, 514, 771)
    assert upscale(RGB24.WHITE, RGB48) == RGB48.WHITE
    assert upscale(RGB24.BLACK, 16) == RGB48.BLACK


def test_downscale_truncates():
    assert downscale(RGB48.from_rgb(300, 0, 65535), RGB24) == RGB24.from_rgb(1, 0, 255)
    assert downscale(RGB48.from_rgb(256, 257, 513), DEPTH_8) == RGB24.from_rgb(0, 1, 1)


def test_downscale_upscale_identity():
    for value in range(0, 256, 5):
        rgb = RGB24.from_rgb(value, 255 - value, value // 2)
        assert downscale(upscale(rgb, RGB48), RGB24) == rgb


def test_lossy_downscale_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="colorkit.conversions.depth"):
        downscale(RGB48.from_rgb(257, 514, 771), RGB24)
    assert "Lossy downscale" not in caplog.text

    with caplog.at_level(logging.DEBUG, logger="colorkit.conversions.depth"):
        downscale(RGB48.from_rgb(300, 0, 0), RGB24)
    assert "Lossy downscale" in caplog.text


def test_rescale():
    assert rescale(RGB24.RED, RGB48) == RGB48.RED
    assert rescale(RGB48.BLUE, RGB24) == RGB24.BLUE
    assert rescale(RGB24.from_rgb(1, 2, 3), RGB24) == RGB24.from_rgb(1, 2, 3)
    red32 = rescale(RGB24.RED, 32)
    assert red32.red == 4294967295
    assert red32.depth.bits == 32


def test_rescale_unsupported():
    RGB36 = rgb_class(12)
    with pytest.raises(UnsupportedDepth):
        rescale(RGB24.WHITE, RGB36)
    with pytest.raises(UnsupportedDepth):
        rescale(RGB36.WHITE, RGB24)


def test_to_depth_method():
    assert RGB24.from_rgb(1, 2, 3).to_depth(RGB48) == RGB48.from_rgb(257, 514, 771)
    assert RGB48.WHITE.to_depth(8) == RGB24.WHITE
    assert rgb_class(4).from_rgb(15, 1, 0).to_depth(DEPTH_8) == RGB24.from_rgb(255, 17, 0)


def test_named_helpers():
    assert rgb24_to_rgb48(RGB24.GREEN) == RGB48.GREEN
    assert rgb48_to_rgb24(RGB48.GREEN) == RGB24.GREEN
    with pytest.raises(TypeError):
        rgb24_to_rgb48(RGB48.GREEN)
    with pytest.raises(TypeError):
        rgb48_to_rgb24(RGB24.GREEN)
