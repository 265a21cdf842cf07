"""
Time formatting utilities for human-readable output.
"""

import math


def format_time(ms: float) -> str:
    """
    Format a task time in milliseconds to a human-readable string.

    Self-times can be slightly negative on traces with overlapping windows,
    so the sign is kept and the magnitude decides the unit.

    Args:
        ms: Time in milliseconds

    Returns:
        Formatted time string (e.g., "0.42 ms", "2.34 s", "1m 30.50s")
    """
    if not math.isfinite(ms):
        return "n/a"
    sign = "-" if ms < 0 else ""
    ms = abs(ms)
    if ms < 1000:
        return f"{sign}{ms:.2f} ms"
    elif ms < 60000:
        return f"{sign}{ms/1000:.2f} s"
    else:
        minutes = int(ms / 60000)
        seconds = (ms % 60000) / 1000
        return f"{sign}{minutes}m {seconds:.2f}s"
