"""
Monotonic timestamps for run timing.
"""

import time


def timestamp():
    """Current monotonic timestamp in seconds."""
    return time.perf_counter()


def elapsed(ts):
    """Seconds elapsed since timestamp ts."""
    return time.perf_counter() - ts


def timestamp_diff(ts1, ts2):
    """Signed duration ts1 - ts2 in seconds; negative when ts2 is later."""
    if ts2 > ts1:
        return -(ts2 - ts1)
    return ts1 - ts2
