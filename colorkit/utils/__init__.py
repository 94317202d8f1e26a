from .num_utils import (
    get_max,
    get_min,
    round_half_away,
    to_channel_repr,
    as_fraction,
    approx_equal_f64,
    convert_to_range,
    wrap_hue,
)

__all__ = [
    'get_max',
    'get_min',
    'round_half_away',
    'to_channel_repr',
    'as_fraction',
    'approx_equal_f64',
    'convert_to_range',
    'wrap_hue',
]
