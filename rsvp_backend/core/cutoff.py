"""Submission cutoff check."""
from collections.abc import Callable
from datetime import UTC, datetime


def utc_now() -> datetime:
    return datetime.now(UTC)


def is_open(now: datetime, cutoff: datetime) -> bool:
    """Return True while RSVPs are still accepted (the cutoff instant is inclusive)."""
    return now <= cutoff


class CutoffGate:
    """Binds the configured cutoff instant to a clock.

    The clock is injectable so tests can pin "now" on either side of
    the cutoff.
    """

    def __init__(self, cutoff: datetime, clock: Callable[[], datetime] = utc_now):
        self.cutoff = cutoff
        self.clock = clock

    def is_open(self, now: datetime | None = None) -> bool:
        return is_open(now or self.clock(), self.cutoff)

    def has_passed(self, now: datetime | None = None) -> bool:
        return not self.is_open(now)
