from collections.abc import Iterable
from dataclasses import dataclass

from typing_extensions import override

from durcalc.formatting import format_duration
from durcalc.util import MAX_SECONDS, MIN_SECONDS


@dataclass(frozen=True, order=True)
class Duration:
    """A signed span of elapsed time, in whole seconds.

    Arithmetic never raises on overflow: ``+`` and ``-`` clamp to ``MAX`` or
    ``MIN``. Use ``checked_add``/``checked_sub`` to detect overflow instead.
    """

    seconds: int = 0

    def __post_init__(self) -> None:
        if not MIN_SECONDS <= self.seconds <= MAX_SECONDS:
            raise ValueError(
                f"Duration of {self.seconds}s is outside the representable range "
                f"[{MIN_SECONDS}, {MAX_SECONDS}]"
            )

    @classmethod
    def clamped(cls, seconds: int) -> "Duration":
        """Build a duration, saturating out-of-range values to MIN or MAX."""
        return cls(max(MIN_SECONDS, min(MAX_SECONDS, seconds)))

    def is_negative(self) -> bool:
        return self.seconds < 0

    def checked_add(self, other: "Duration") -> "Duration | None":
        result = self.seconds + other.seconds
        if result > MAX_SECONDS or result < MIN_SECONDS:
            return None
        return Duration(result)

    def checked_sub(self, other: "Duration") -> "Duration | None":
        result = self.seconds - other.seconds
        if result > MAX_SECONDS or result < MIN_SECONDS:
            return None
        return Duration(result)

    def saturating_add(self, other: "Duration") -> "Duration":
        """Add, returning MAX whenever the sum is not representable.

        This includes sums below MIN_SECONDS.
        """
        result = self.checked_add(other)
        return MAX if result is None else result

    def saturating_sub(self, other: "Duration") -> "Duration":
        """Subtract, returning MIN whenever the difference is not representable.

        This includes differences above MAX_SECONDS.
        """
        result = self.checked_sub(other)
        return MIN if result is None else result

    def __add__(self, other: "Duration") -> "Duration":
        return self.saturating_add(other)

    def __sub__(self, other: "Duration") -> "Duration":
        return self.saturating_sub(other)

    def __neg__(self) -> "Duration":
        return Duration(-self.seconds)

    def __bool__(self) -> bool:
        return self.seconds != 0

    @override
    def __str__(self) -> str:
        return format_duration(self)

    @override
    def __format__(self, format_spec: str) -> str:
        """Support ``f"{d:c}"`` for the compact layout."""
        if format_spec == "c":
            return format_duration(self, compact=True)
        return format(str(self), format_spec)


ZERO = Duration(0)
MAX = Duration(MAX_SECONDS)
MIN = Duration(MIN_SECONDS)


def total(durations: Iterable[Duration], start: Duration = ZERO) -> Duration:
    """Sum durations left to right with saturating addition."""
    result = start
    for duration in durations:
        result = result.saturating_add(duration)
    return result
