from .duration import MAX, MIN, ZERO, Duration, total
from .formatting import format_duration
from .parser import InvalidExpression, parse_duration, term_to_duration
from .util import DAY, HOUR, MINUTE, SECOND, YEAR

__all__ = [
    "Duration",
    "InvalidExpression",
    "parse_duration",
    "format_duration",
    "term_to_duration",
    "total",
    "ZERO",
    "MAX",
    "MIN",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "YEAR",
]
