"""
Hexadecimal encoding and decoding of RGB channel triples.

Accepted input is exactly 3 or 6 hex digits, case-insensitive, with no ``#``
prefix and no whitespace. The six digit form stores one 8-bit channel per
pair of digits; the three digit form stores one 4-bit level per digit which
is expanded linearly onto the full channel range (``f`` -> max, ``0`` -> 0).

Output is always lowercase and zero-padded.
"""
from __future__ import annotations
from typing import Tuple

from ..config import (
    HEX_DIGITS,
    HEX_LENGTH_LONG,
    HEX_LENGTH_SHORT,
    SHORT_HEX_LEVELS,
    SUPPORTED_HEX_BASES,
)
from ..errors import InvalidDigit, InvalidFormat
from ..types.channel_depth import ChannelDepth, DEPTH_8
from ..types.color_types import IntTriple
from ..utils.num_utils import round_half_away
from .depth import expansion_factor, rescale_channel


def validate_hex(text: str) -> str:
    """
    Check length and digit set of a hex color string.

    Raises:
        InvalidFormat: If ``text`` is not a string of length 3 or 6
        InvalidDigit: If ``text`` contains a non-hex character
    """
    if not isinstance(text, str):
        raise InvalidFormat(f"HEX must be a string, got {type(text).__name__}")
    if len(text) not in (HEX_LENGTH_SHORT, HEX_LENGTH_LONG):
        raise InvalidFormat(
            f"HEX number has invalid length {len(text)}: {text!r} "
            f"(expected {HEX_LENGTH_SHORT} or {HEX_LENGTH_LONG} digits)",
            text,
        )
    for position, char in enumerate(text):
        if char not in HEX_DIGITS:
            raise InvalidDigit(text, position)
    return text


def unpack_int(value: int, base: int, depth: ChannelDepth) -> IntTriple:
    """
    Split a packed integer into three channels of ``depth``.

    Each channel occupies ``log2(base)`` bits, red highest. The per-channel
    level ``0..base-1`` is expanded by ``depth.max_value / (base - 1)``.

    Args:
        value: Packed value, ``0 <= value < base**3``
        base: One of 4, 16, 256
        depth: Target channel depth

    Returns:
        (r, g, b) channel values at ``depth``
    """
    if base not in SUPPORTED_HEX_BASES:
        raise InvalidFormat(f"base must be one of {list(SUPPORTED_HEX_BASES)} but is instead {base}")
    if not 0 <= value < base ** 3:
        raise InvalidFormat(f"packed value {value} does not fit three channels of base {base}")

    factor = expansion_factor(base - 1, depth)
    bit_move = base.bit_length() - 1

    b = (value % base) * factor
    value >>= bit_move
    g = (value % base) * factor
    value >>= bit_move
    r = (value % base) * factor
    return r, g, b


def parse_hex(text: str, depth: ChannelDepth = DEPTH_8) -> IntTriple:
    """Decode a 3 or 6 digit hex string into channel values at ``depth``."""
    validate_hex(text)
    base = 256 if len(text) == HEX_LENGTH_LONG else SHORT_HEX_LEVELS + 1
    return unpack_int(int(text, 16), base, depth)


def to_hex(channels: Tuple[int, int, int], depth: ChannelDepth = DEPTH_8) -> str:
    """
    Encode channels as 6 lowercase hex digits.

    Channels of other depths are first brought to 8 bits (truncating when
    narrowing), so ``to_hex`` of a 48-bit color drops the low byte.
    """
    r, g, b = (rescale_channel(c, depth, DEPTH_8) for c in channels)
    return f"{(r << 16) | (g << 8) | b:06x}"


def to_hex_short(channels: Tuple[int, int, int], depth: ChannelDepth = DEPTH_8) -> str:
    """
    Encode channels as 3 lowercase hex digits.

    Lossy: every channel is rounded to the nearest of 16 levels using
    ``round(channel / max * 15)``, e.g. ``f0f0f0`` -> ``eee``.
    """
    r, g, b = (
        round_half_away(c / depth.max_value * SHORT_HEX_LEVELS) for c in channels
    )
    return f"{(r << 8) | (g << 4) | b:03x}"
