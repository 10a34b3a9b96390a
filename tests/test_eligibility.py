"""Tests for clinician eligibility predicates."""

from conftest import make_clinician
from intake_scheduler.eligibility import is_eligible, serves_category
from intake_scheduler.schema import ClinicianType, ServiceCategory


def test_eligible_when_state_and_insurance_match(patient):
    assert is_eligible(make_clinician(), patient)


def test_not_eligible_without_patient_state(patient):
    clinician = make_clinician(states=["CA"], insurances=["AETNA"])
    assert not is_eligible(clinician, patient)


def test_not_eligible_without_patient_insurance(patient):
    clinician = make_clinician(states=["NY"], insurances=["CIGNA"])
    assert not is_eligible(clinician, patient)


def test_both_conditions_required(patient):
    """Matching only one of state/insurance is never enough."""
    assert not is_eligible(make_clinician(states=[], insurances=["AETNA"]), patient)
    assert not is_eligible(make_clinician(states=["NY"], insurances=[]), patient)


def test_category_match():
    psychologist = make_clinician(clinician_type=ClinicianType.PSYCHOLOGIST)
    therapist = make_clinician(clinician_type=ClinicianType.THERAPIST)

    assert serves_category(psychologist, ServiceCategory.ASSESSMENT)
    assert not serves_category(psychologist, ServiceCategory.THERAPY_INTAKE)
    assert serves_category(therapist, ServiceCategory.THERAPY_INTAKE)
    assert not serves_category(therapist, ServiceCategory.ASSESSMENT)


def test_service_categories():
    assert ServiceCategory.ASSESSMENT.sessions == 2
    assert ServiceCategory.THERAPY_INTAKE.sessions == 1
    for category in ServiceCategory:
        assert isinstance(category.clinician_type, ClinicianType)
