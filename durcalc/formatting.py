"""Rendering of durations as ``<hours>h <minutes>m <seconds>s`` strings.

Hours are never wrapped into days, so large durations show large hour counts.
A negative duration carries a single leading ``-``; the components themselves
are always shown as positive numbers.
"""

from typing import TYPE_CHECKING

from durcalc.util import HOUR, MINUTE

if TYPE_CHECKING:
    from durcalc.duration import Duration


def format_duration(value: "Duration", compact: bool = False) -> str:
    sign = "-" if value.seconds < 0 else ""
    magnitude = abs(value.seconds)
    hours = magnitude // HOUR
    minutes = (magnitude % HOUR) // MINUTE
    seconds = magnitude % MINUTE

    if compact:
        return f"{sign}{hours}h{minutes:02}m{seconds:02}s"
    return f"{sign}{hours}h {minutes:02}m {seconds:02}s"
