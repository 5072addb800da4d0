"""Startup timer used to bound retry loops while a service starts."""

from __future__ import annotations

import time


def _with_fraction(value: int, precision: int) -> str:
    whole, fraction = divmod(value, 10**precision)
    digits = str(fraction).zfill(precision).rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


def format_duration(seconds: float) -> str:
    """Render a duration in seconds as e.g. ``1h2m3.5s`` or ``250ms``."""
    nanos = round(seconds * 1_000_000_000)
    if nanos == 0:
        return "0s"
    sign = "-" if nanos < 0 else ""
    nanos = abs(nanos)

    if nanos < 1_000_000_000:
        if nanos < 1_000:
            return f"{sign}{nanos}ns"
        if nanos < 1_000_000:
            return f"{sign}{_with_fraction(nanos, 3)}µs"
        return f"{sign}{_with_fraction(nanos, 6)}ms"

    whole_seconds, fraction = divmod(nanos, 1_000_000_000)
    minutes, secs = divmod(whole_seconds, 60)
    hours, minutes = divmod(minutes, 60)
    text = _with_fraction(secs * 1_000_000_000 + fraction, 9) + "s"
    if hours or minutes:
        text = f"{minutes}m{text}"
    if hours:
        text = f"{hours}h{text}"
    return sign + text


class Timer:
    """Tracks an overall duration and the pause between retries, both in seconds."""

    def __init__(self, duration: float, interval: float) -> None:
        self._start = time.monotonic()
        self.duration = duration
        self.interval = interval

    def _elapsed(self) -> float:
        return time.monotonic() - self._start

    def since_as_string(self) -> str:
        """Time since the timer was created."""
        return format_duration(self._elapsed())

    def remaining_as_string(self) -> str:
        """Time left before the duration elapses, never negative."""
        return format_duration(max(self.duration - self._elapsed(), 0))

    def has_not_elapsed(self) -> bool:
        """Whether the duration is still running."""
        return self._elapsed() < self.duration

    def sleep_for_interval(self) -> None:
        """Pause for the configured interval."""
        time.sleep(self.interval)