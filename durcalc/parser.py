"""Parsing of duration expressions such as ``3d 20h 10m 15s`` or ``-1y 3h + 40m``.

An expression is a sequence of signed groups. Each group is a ``+`` or ``-``
followed by one or more ``<count><unit>`` terms; the group's terms are summed
and the subtotal is then added to or subtracted from the running result. A
missing leading sign means ``+``. Anything after ``#`` is a comment.

Supported units:
    y    365 days
    d    days
    h    hours
    m    minutes (``min`` is accepted as a deprecated synonym)
    s    seconds
"""

import logging
import re

from durcalc.duration import ZERO, Duration
from durcalc.util import DAY, HOUR, MINUTE, SECOND, YEAR

LOGGER = logging.getLogger(__name__)

# Mapping from unit codes to their length in seconds
_UNIT_SECONDS: dict[str, int] = {
    "y": YEAR,
    "d": DAY,
    "h": HOUR,
    "min": MINUTE,
    "m": MINUTE,
    "s": SECOND,
}

# "min" must come before "m" so the longer code wins
_UNIT = r"(?:y|d|h|min|m|s)"
_TERM = rf"[0-9]+\s*{_UNIT}\s*"

LINE_PATTERN = re.compile(rf"\s*(?:[+-]\s*(?:{_TERM})+)+")
GROUP_PATTERN = re.compile(rf"(?P<sign>[+-])\s*(?P<terms>(?:{_TERM})+)")
TERM_PATTERN = re.compile(rf"(?P<count>[0-9]+)\s*(?P<unit>{_UNIT})")


class InvalidExpression(ValueError):
    """Raised when a string is not a well-formed duration expression."""

    def __init__(self, expression: str):
        self.expression: str = expression
        super().__init__(f"cannot parse {expression!r} as duration")


def term_to_duration(count: int, unit: str) -> Duration | None:
    """Convert a single ``<count><unit>`` term to a duration.

    Returns None for an unknown unit code. Terms too large to represent
    saturate to MAX.
    """
    scale = _UNIT_SECONDS.get(unit)
    if scale is None:
        return None
    return Duration.clamped(count * scale)


def parse_duration(text: str) -> Duration:
    """Parse a duration expression into a signed Duration.

    Empty, blank and comment-only input yields a zero duration.

    Raises:
        InvalidExpression: If the text does not follow the expression grammar
    """
    line = text.split("#", 1)[0]
    if not line.strip():
        return ZERO

    if line.lstrip()[0] not in "+-":
        line = "+" + line

    if not LINE_PATTERN.fullmatch(line):
        raise InvalidExpression(text)

    result = ZERO
    for group in GROUP_PATTERN.finditer(line):
        sign = group["sign"]
        LOGGER.debug("group %s %r", sign, group["terms"])

        subtotal = ZERO
        for term in TERM_PATTERN.finditer(group["terms"]):
            duration = term_to_duration(int(term["count"]), term["unit"])
            LOGGER.debug("term %s%s -> %r", term["count"], term["unit"], duration)
            if duration is None:
                continue
            subtotal = subtotal.saturating_add(duration)

        if sign == "+":
            combined = result.checked_add(subtotal)
        else:
            combined = result.checked_sub(subtotal)
        # An overflowing combination keeps only this group's subtotal
        result = subtotal if combined is None else combined

    return result
