from __future__ import annotations
from functools import lru_cache
from typing import NamedTuple
import numpy as np

from ..config import MIN_CHANNEL_BITS, MAX_CHANNEL_BITS
from ..errors import UnsupportedDepth


class ChannelDepth(NamedTuple):
    """
    Width of a single unsigned integer color channel.

    Attributes:
        bits: Number of bits per channel (1-32)
        max_value: Largest channel value, ``2**bits - 1``
        dtype: Smallest numpy unsigned dtype able to store ``max_value``
    """
    bits: int
    max_value: int
    dtype: np.dtype

    @property
    def min_value(self) -> int:
        return 0

    def clip(self, value) -> int:
        """Coerce a channel value into ``[0, max_value]`` and return it as a Python int."""
        return max(0, min(int(value), self.max_value))

    def __repr__(self) -> str:
        return f"ChannelDepth(bits={self.bits}, max_value={self.max_value}, dtype={self.dtype.name})"


@lru_cache(maxsize=None)
def _build_depth(bits: int) -> ChannelDepth:
    max_value = (1 << bits) - 1
    dtype = np.min_scalar_type(max_value)
    return ChannelDepth(bits, max_value, dtype)


def channel_depth(bits: int) -> ChannelDepth:
    """
    Return the ``ChannelDepth`` for the given bit width.

    Args:
        bits: Bits per channel, between 1 and 32 inclusive

    Returns:
        The (cached) ChannelDepth instance

    Raises:
        UnsupportedDepth: If ``bits`` is not an integer in the supported range
    """
    if isinstance(bits, bool) or not isinstance(bits, (int, np.integer)):
        raise UnsupportedDepth(f"Channel depth must be an integer number of bits, got {bits!r}")
    if not MIN_CHANNEL_BITS <= bits <= MAX_CHANNEL_BITS:
        raise UnsupportedDepth(
            f"Channel depth must be between {MIN_CHANNEL_BITS} and {MAX_CHANNEL_BITS} bits, got {bits}"
        )
    return _build_depth(int(bits))


DEPTH_8 = channel_depth(8)
DEPTH_16 = channel_depth(16)
