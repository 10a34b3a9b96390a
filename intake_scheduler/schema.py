"""Pydantic models for patients, clinicians, slots, appointments and search results."""

from datetime import datetime
from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, model_validator

from intake_scheduler.calendar_utils import as_utc

# Naive timestamps are read as UTC; every instant is stored in UTC.
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


# --- Enumerations ---


class ClinicianType(str, Enum):
    """Professional category of a clinician."""

    PSYCHOLOGIST = "PSYCHOLOGIST"
    THERAPIST = "THERAPIST"


class AppointmentStatus(str, Enum):
    """Lifecycle status of a booked appointment."""

    UPCOMING = "UPCOMING"
    OCCURRED = "OCCURRED"
    LATE_CANCELLATION = "LATE_CANCELLATION"
    CANCELLED = "CANCELLED"
    NO_SHOW = "NO_SHOW"
    RE_SCHEDULED = "RE_SCHEDULED"

    @property
    def consumes_capacity(self) -> bool:
        """Whether an appointment in this status counts toward daily/weekly limits."""
        return self in CAPACITY_CONSUMING_STATUSES


# Late cancellations still hold the clinician's time; properly cancelled,
# no-show and rescheduled appointments free it.
CAPACITY_CONSUMING_STATUSES = frozenset(
    {
        AppointmentStatus.UPCOMING,
        AppointmentStatus.OCCURRED,
        AppointmentStatus.LATE_CANCELLATION,
    }
)


class AppointmentType(str, Enum):
    """Service subtype an appointment was booked for."""

    ASSESSMENT_SESSION_1 = "ASSESSMENT_SESSION_1"
    ASSESSMENT_SESSION_2 = "ASSESSMENT_SESSION_2"
    THERAPY_INTAKE = "THERAPY_INTAKE"


class ServiceCategory(str, Enum):
    """Bookable service a patient can search for."""

    ASSESSMENT = "ASSESSMENT"
    THERAPY_INTAKE = "THERAPY_INTAKE"

    @property
    def clinician_type(self) -> ClinicianType:
        """Professional category that provides this service."""
        if self is ServiceCategory.ASSESSMENT:
            return ClinicianType.PSYCHOLOGIST
        if self is ServiceCategory.THERAPY_INTAKE:
            return ClinicianType.THERAPIST
        raise ValueError(f"Unknown service category: {self!r}")

    @property
    def sessions(self) -> int:
        """Number of distinct-day bookings the service requires."""
        if self is ServiceCategory.ASSESSMENT:
            return 2
        if self is ServiceCategory.THERAPY_INTAKE:
            return 1
        raise ValueError(f"Unknown service category: {self!r}")


# --- Input records ---


class Patient(BaseModel):
    """Patient looking for an appointment."""

    id: str = Field(..., description="Patient identifier")
    first_name: str = Field(default="", description="Given name (display only)")
    last_name: str = Field(default="", description="Family name (display only)")
    state: str = Field(..., description="Coverage region code, e.g. NY")
    insurance: str = Field(..., description="Coverage plan code, e.g. AETNA")


class AvailableSlot(BaseModel):
    """Open slot offered by a clinician."""

    id: str = Field(..., description="Slot identifier")
    clinician_id: str = Field(..., description="Owning clinician")
    date: UtcDatetime = Field(..., description="Slot start instant")
    length: int = Field(..., gt=0, description="Slot length in minutes (60 therapy, 90 assessment)")


class Appointment(BaseModel):
    """Appointment already committed on a clinician's calendar."""

    id: str = Field(..., description="Appointment identifier")
    patient_id: str = Field(..., description="Booked patient")
    clinician_id: str = Field(..., description="Booked clinician")
    scheduled_for: UtcDatetime = Field(..., description="Appointment start instant")
    appointment_type: AppointmentType
    status: AppointmentStatus


class Clinician(BaseModel):
    """Clinician record with coverage, capacity limits, slots and appointments."""

    id: str = Field(..., description="Clinician identifier")
    first_name: str = Field(default="")
    last_name: str = Field(default="")
    clinician_type: ClinicianType
    states: list[str] = Field(default_factory=list, description="Coverage regions served")
    insurances: list[str] = Field(default_factory=list, description="Coverage plans accepted")
    max_daily_appointments: int = Field(..., ge=0)
    max_weekly_appointments: int = Field(..., ge=0)
    available_slots: list[AvailableSlot] = Field(default_factory=list)
    appointments: list[Appointment] = Field(default_factory=list)

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.id


class Roster(BaseModel):
    """On-disk document: one patient and the clinicians to search."""

    patient: Patient
    clinicians: list[Clinician] = Field(default_factory=list)


# --- Search results ---


class SlotPair(BaseModel):
    """Two assessment sessions on different days, in chronological order."""

    session1: UtcDatetime
    session2: UtcDatetime

    @model_validator(mode="after")
    def require_chronological_order(self) -> "SlotPair":
        if not self.session1 < self.session2:
            raise ValueError("session1 must be earlier than session2")
        return self


class AssessmentAvailability(BaseModel):
    """Bookable assessment pairs for one clinician."""

    clinician: Clinician
    available_slot_pairs: list[SlotPair] = Field(..., description="Valid two-session combinations")


class TherapyAvailability(BaseModel):
    """Bookable therapy intake slots for one clinician."""

    clinician: Clinician
    available_slots: list[UtcDatetime] = Field(..., description="Non-overlapping slot starts")

