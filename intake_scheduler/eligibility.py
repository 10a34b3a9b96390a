"""Clinician/patient matching predicates."""

from intake_scheduler.schema import Clinician, Patient, ServiceCategory


def is_eligible(clinician: Clinician, patient: Patient) -> bool:
    """Clinician practices in the patient's state and accepts the patient's insurance."""
    return patient.state in clinician.states and patient.insurance in clinician.insurances


def serves_category(clinician: Clinician, category: ServiceCategory) -> bool:
    """Clinician's professional type provides the requested service."""
    return clinician.clinician_type is category.clinician_type
