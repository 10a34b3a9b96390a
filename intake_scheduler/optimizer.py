"""Interval scheduling: pick the largest set of non-overlapping fixed-length slots."""

from collections.abc import Iterable
from datetime import datetime, timedelta


def optimize_slots(starts: Iterable[datetime], duration_minutes: int) -> list[datetime]:
    """
    Select the maximum number of mutually non-overlapping appointments.

    Each start becomes the interval [start, start + duration). Intervals are
    scanned by earliest end and kept whenever they begin at or after the end of
    the last kept one, so back-to-back slots are both kept. For unweighted
    intervals this greedy choice is optimal.

    Returns the selected starts in chronological order. The input is not modified.
    """
    duration = timedelta(minutes=duration_minutes)
    intervals = sorted(((start, start + duration) for start in starts), key=lambda itv: itv[1])

    selected: list[datetime] = []
    last_end: datetime | None = None
    for start, end in intervals:
        if last_end is None or start >= last_end:
            selected.append(start)
            last_end = end
    return selected
