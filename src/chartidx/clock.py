"""UTC clock used to stamp the `created` field of new entries."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

Clock = Callable[[], datetime]
"""Zero-argument callable returning the current instant."""


def format_created(instant: datetime) -> str:
    """Format an instant as `YYYY-MM-DDTHH:MM:SS.mmmZ` in UTC.

    Naive datetimes are taken to already be in UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=UTC)
    instant = instant.astimezone(UTC)
    return instant.strftime("%Y-%m-%dT%H:%M:%S.") + f"{instant.microsecond // 1000:03d}Z"


class MonotonicUTCClock:
    """Wall clock that never goes backwards within one process.

    If the system clock steps back, the last returned instant is repeated.
    """

    def __init__(self, source: Clock | None = None) -> None:
        self._source: Clock = source or (lambda: datetime.now(UTC))
        self._last: datetime | None = None

    def __call__(self) -> datetime:
        now: datetime = self._source()
        if self._last is not None and now < self._last:
            return self._last
        self._last = now
        return now


def fixed_clock(instant: datetime) -> Clock:
    """Return a clock that always reports the same instant."""
    return lambda: instant


default_clock = MonotonicUTCClock()
