"""
Timestamp helpers shared by entities and repositories.

Every value handed out by this module is strictly later than the previous one
issued in the same process, so timestamps taken in quick succession never tie
even when the wall clock has a coarse tick.
"""

import threading
from datetime import datetime, timedelta, timezone
from typing import Optional

_TICK = timedelta(microseconds=1)

_lock = threading.Lock()
_last_issued: Optional[datetime] = None


def _clock() -> datetime:
    return datetime.now(timezone.utc)


def _issue(floor: Optional[datetime]) -> datetime:
    global _last_issued
    with _lock:
        now = _clock()
        for previous in (_last_issued, floor):
            if previous is not None and now <= previous:
                now = previous + _TICK
        _last_issued = now
        return now


def utc_now() -> datetime:
    return _issue(None)


def utc_now_after(previous: Optional[datetime]) -> datetime:
    """Current UTC time, bumped past ``previous`` when the clock has not moved."""
    return _issue(previous)
