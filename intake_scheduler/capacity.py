"""Daily and weekly capacity accounting for clinicians.

Only appointments whose status consumes capacity are counted: UPCOMING,
OCCURRED and LATE_CANCELLATION. CANCELLED, NO_SHOW and RE_SCHEDULED free
their time.

An appointment belongs to the day and week of its start instant only. Slots
are assumed never to cross midnight.
"""

from collections import Counter
from collections.abc import Iterable
from datetime import datetime

from intake_scheduler.calendar_utils import day_window, start_of_day, start_of_week, week_window
from intake_scheduler.schema import Clinician


def _count_in_window(clinician: Clinician, start: datetime, end: datetime) -> int:
    return sum(
        1
        for appt in clinician.appointments
        if start <= appt.scheduled_for < end and appt.status.consumes_capacity
    )


def count_on_day(clinician: Clinician, date: datetime) -> int:
    """Capacity-consuming appointments on date's calendar day."""
    return _count_in_window(clinician, *day_window(date))


def count_in_week(clinician: Clinician, date: datetime) -> int:
    """Capacity-consuming appointments in date's calendar week (Monday to Sunday)."""
    return _count_in_window(clinician, *week_window(date))


def can_accommodate(clinician: Clinician, proposed: Iterable[datetime]) -> bool:
    """
    Check whether all proposed appointment starts fit within the clinician's
    daily and weekly limits, on top of the appointments already booked.
    Reaching a limit exactly is allowed; exceeding it is not.
    """
    proposed = list(proposed)

    per_day = Counter(start_of_day(t) for t in proposed)
    for day, count in per_day.items():
        if count_on_day(clinician, day) + count > clinician.max_daily_appointments:
            return False

    per_week = Counter(start_of_week(t) for t in proposed)
    for week, count in per_week.items():
        if count_in_week(clinician, week) + count > clinician.max_weekly_appointments:
            return False

    return True
