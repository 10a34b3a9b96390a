"""Pytest configuration and fixtures."""

from datetime import datetime
from itertools import count

import pytest

from intake_scheduler.schema import (
    Appointment,
    AppointmentStatus,
    AppointmentType,
    AvailableSlot,
    Clinician,
    ClinicianType,
    Patient,
)

_ids = count(1)


def dt(iso: str) -> datetime:
    """Parse an ISO 8601 UTC timestamp like 2024-08-19T12:00:00Z."""
    return datetime.fromisoformat(iso.replace("Z", "+00:00"))


def make_slot(clinician_id: str, iso: str, length: int = 90) -> AvailableSlot:
    return AvailableSlot(id=f"slot-{next(_ids)}", clinician_id=clinician_id, date=iso, length=length)


def make_appointment(
    clinician_id: str,
    iso: str,
    status: AppointmentStatus = AppointmentStatus.UPCOMING,
    appointment_type: AppointmentType = AppointmentType.ASSESSMENT_SESSION_1,
) -> Appointment:
    return Appointment(
        id=f"apt-{next(_ids)}",
        patient_id="other-patient",
        clinician_id=clinician_id,
        scheduled_for=iso,
        appointment_type=appointment_type,
        status=status,
    )


def make_clinician(
    clinician_id: str = "psychologist-1",
    clinician_type: ClinicianType = ClinicianType.PSYCHOLOGIST,
    slots: tuple[str, ...] = (),
    slot_length: int = 90,
    appointments: tuple[tuple[str, AppointmentStatus], ...] = (),
    **overrides,
) -> Clinician:
    """Clinician covering NY/CA and AETNA/CIGNA, with slots and appointments given as ISO strings."""
    fields = {
        "id": clinician_id,
        "first_name": "Jane",
        "last_name": "Doe",
        "clinician_type": clinician_type,
        "states": ["NY", "CA"],
        "insurances": ["AETNA", "CIGNA"],
        "max_daily_appointments": 2,
        "max_weekly_appointments": 8,
        "available_slots": [make_slot(clinician_id, iso, slot_length) for iso in slots],
        "appointments": [make_appointment(clinician_id, iso, status) for iso, status in appointments],
    }
    fields.update(overrides)
    return Clinician(**fields)


@pytest.fixture
def patient() -> Patient:
    """Patient in NY insured by AETNA."""
    return Patient(
        id="patient-1",
        first_name="Byrne",
        last_name="Hollander",
        state="NY",
        insurance="AETNA",
    )


@pytest.fixture
def reference_psychologist() -> Clinician:
    """Psychologist with the six reference 90-minute slots and room to spare."""
    return make_clinician(
        clinician_id="test-clinician-1",
        max_daily_appointments=3,
        max_weekly_appointments=10,
        slots=(
            "2024-08-19T12:00:00Z",
            "2024-08-19T12:15:00Z",
            "2024-08-21T12:00:00Z",
            "2024-08-21T15:00:00Z",
            "2024-08-22T15:00:00Z",
            "2024-08-28T12:15:00Z",
        ),
    )


@pytest.fixture
def therapist() -> Clinician:
    """Therapist in NY accepting AETNA, no slots yet."""
    return make_clinician(
        clinician_id="therapist-1",
        clinician_type=ClinicianType.THERAPIST,
        slot_length=60,
        max_daily_appointments=5,
        max_weekly_appointments=20,
    )
