# No dependencies
HUE_MAX = 360.0
HUE_SECTOR = 60.0
HSV_EPSILON = 1e-7
# Cross-model comparisons lose precision in the float -> channel mapping
ROUND_TRIP_EPSILON = 0.02

SHORT_HEX_LEVELS = 15
HEX_LENGTH_LONG = 6
HEX_LENGTH_SHORT = 3
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
SUPPORTED_HEX_BASES = (4, 16, 256)

MIN_CHANNEL_BITS = 1
MAX_CHANNEL_BITS = 32
