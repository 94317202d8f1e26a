from .channel_depth import ChannelDepth, channel_depth, DEPTH_8, DEPTH_16
from .color_types import IntTriple, FloatTriple, ColorTuple

__all__ = [
    'ChannelDepth',
    'channel_depth',
    'DEPTH_8',
    'DEPTH_16',
    'IntTriple',
    'FloatTriple',
    'ColorTuple',
]
