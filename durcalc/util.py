"""Utility constants for durcalc.

Time unit constants represent durations in seconds.
A year is a fixed 365 days; there is no calendar awareness.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
YEAR = 31536000

# Whole seconds representable by a signed 64-bit millisecond count
MAX_SECONDS = (2**63 - 1) // 1000
MIN_SECONDS = -MAX_SECONDS
