"""Monotonic time points and elapsed-time helpers."""

import time

__all__ = ["time_point_now", "span_ms", "span_us"]

_NS_PER_US = 1_000
_US_PER_MS = 1_000.0


def time_point_now() -> int:
    """Return a monotonic time point in nanoseconds."""
    return time.monotonic_ns()


def span_us(start: int, end: int) -> float:
    """Return the microseconds elapsed between two time points."""
    return (end - start) / _NS_PER_US


def span_ms(start: int, end: int) -> float:
    """Return the milliseconds elapsed between two time points."""
    return span_us(start, end) / _US_PER_MS