"""Deterministic slot search: therapy intake slots and assessment session pairs."""

import logging
from collections.abc import Iterable
from datetime import datetime, timedelta

from intake_scheduler.calendar_utils import start_of_day
from intake_scheduler.capacity import can_accommodate, count_on_day
from intake_scheduler.config import get_settings
from intake_scheduler.eligibility import is_eligible, serves_category
from intake_scheduler.optimizer import optimize_slots
from intake_scheduler.schema import (
    AssessmentAvailability,
    Clinician,
    Patient,
    ServiceCategory,
    SlotPair,
    TherapyAvailability,
)

logger = logging.getLogger(__name__)


def _can_serve(clinician: Clinician, patient: Patient, category: ServiceCategory) -> bool:
    if not serves_category(clinician, category):
        logger.debug(
            "Skipping %s: %s does not provide %s",
            clinician.id,
            clinician.clinician_type.value,
            category.value,
        )
        return False
    if not is_eligible(clinician, patient):
        logger.debug(
            "Skipping %s: does not cover state=%s insurance=%s",
            clinician.id,
            patient.state,
            patient.insurance,
        )
        return False
    return True


def _slot_starts(clinician: Clinician, length_minutes: int) -> list[datetime]:
    """Sorted start instants of the clinician's slots with the given length."""
    return sorted(slot.date for slot in clinician.available_slots if slot.length == length_minutes)


def _group_by_day(starts: Iterable[datetime]) -> dict[datetime, list[datetime]]:
    """Group instants by calendar day, keyed by midnight UTC, preserving order."""
    by_day: dict[datetime, list[datetime]] = {}
    for start in starts:
        by_day.setdefault(start_of_day(start), []).append(start)
    return by_day


def _assessment_pairs(
    clinician: Clinician,
    starts: list[datetime],
    max_gap: timedelta,
) -> list[SlotPair]:
    """
    All (session1, session2) combinations on two different days at most
    max_gap apart that the clinician has capacity for.

    Days without room for one more appointment are dropped before pairing;
    each candidate pair is then checked against daily and weekly limits.
    """
    eligible_days = [
        (day, day_starts)
        for day, day_starts in _group_by_day(starts).items()
        if count_on_day(clinician, day) + 1 <= clinician.max_daily_appointments
    ]
    eligible_days.sort(key=lambda item: item[0])
    if len(eligible_days) < 2:
        logger.debug("Skipping %s: fewer than 2 days with capacity", clinician.id)
        return []

    pairs: list[SlotPair] = []
    for i, (first_day, first_starts) in enumerate(eligible_days):
        for second_day, second_starts in eligible_days[i + 1 :]:
            # Days are sorted; every later day is further away.
            if second_day - first_day > max_gap:
                break
            for session1 in first_starts:
                for session2 in second_starts:
                    if can_accommodate(clinician, [session1, session2]):
                        pairs.append(SlotPair(session1=session1, session2=session2))
    return pairs


def find_assessment_slots(
    patient: Patient,
    clinicians: Iterable[Clinician],
) -> list[AssessmentAvailability]:
    """
    Find every valid pair of assessment sessions for the patient.

    An assessment takes two sessions of assessment length with a psychologist
    who covers the patient's state and insurance. The sessions must fall on
    different calendar days no more than max_session_gap_days apart, and
    booking both must keep the clinician within daily and weekly limits.

    Overlapping slots on the same day are all offered; no compaction is
    applied to assessment slots.

    Clinicians without a single valid pair are left out.
    """
    settings = get_settings()
    category = ServiceCategory.ASSESSMENT
    max_gap = timedelta(days=settings.max_session_gap_days)

    results: list[AssessmentAvailability] = []
    for clinician in clinicians:
        if not _can_serve(clinician, patient, category):
            continue

        starts = _slot_starts(clinician, settings.assessment_slot_minutes)
        if len(starts) < category.sessions:
            logger.debug("Skipping %s: %d assessment slot(s)", clinician.id, len(starts))
            continue

        pairs = _assessment_pairs(clinician, starts, max_gap)
        if not pairs:
            continue

        logger.debug("%s: %d assessment pair(s)", clinician.id, len(pairs))
        results.append(AssessmentAvailability(clinician=clinician, available_slot_pairs=pairs))

    logger.info(
        "Assessment search for patient %s: %d clinician(s) with availability",
        patient.id,
        len(results),
    )
    return results


def find_therapy_slots(
    patient: Patient,
    clinicians: Iterable[Clinician],
) -> list[TherapyAvailability]:
    """
    Find bookable therapy intake slots for the patient.

    Per therapist, overlapping slots are compacted day by day into the largest
    non-overlapping set, then each remaining slot is kept if the therapist
    could take that one booking within daily and weekly limits. Slots are
    checked one at a time, as if each were the only one booked.

    Clinicians without any bookable slot are left out.
    """
    settings = get_settings()
    category = ServiceCategory.THERAPY_INTAKE
    slot_minutes = settings.therapy_slot_minutes

    results: list[TherapyAvailability] = []
    for clinician in clinicians:
        if not _can_serve(clinician, patient, category):
            continue

        starts = _slot_starts(clinician, slot_minutes)
        if not starts:
            logger.debug("Skipping %s: no therapy slots", clinician.id)
            continue

        optimized: list[datetime] = []
        for day_starts in _group_by_day(starts).values():
            optimized.extend(optimize_slots(day_starts, slot_minutes))
        optimized.sort()

        available = [start for start in optimized if can_accommodate(clinician, [start])]
        if not available:
            logger.debug("Skipping %s: no therapy slot within capacity", clinician.id)
            continue

        results.append(TherapyAvailability(clinician=clinician, available_slots=available))

    logger.info(
        "Therapy search for patient %s: %d clinician(s) with availability",
        patient.id,
        len(results),
    )
    return results
