"""Command-line demo: print therapy and assessment availability for a roster file."""

import argparse
import logging
import sys
from collections.abc import Sequence
from datetime import datetime

from pydantic import ValidationError

from intake_scheduler.config import get_settings
from intake_scheduler.roster import RosterError, load_roster
from intake_scheduler.scheduler import find_assessment_slots, find_therapy_slots
from intake_scheduler.schema import AssessmentAvailability, Patient, TherapyAvailability

logger = logging.getLogger(__name__)

RULE = "=" * 80
THIN_RULE = "-" * 80
SECONDS_PER_DAY = 24 * 60 * 60


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be 0 or greater, got {number}")
    return number


def _iso(value: datetime) -> str:
    return value.isoformat().replace("+00:00", "Z")


def print_patient(patient: Patient) -> None:
    print(RULE)
    print("PATIENT")
    print(THIN_RULE)
    print(f"Name: {patient.first_name} {patient.last_name}".rstrip())
    print(f"State: {patient.state}")
    print(f"Insurance: {patient.insurance}")


def print_therapy_results(results: list[TherapyAvailability]) -> None:
    print(RULE)
    print("THERAPY INTAKE SLOTS")
    print(THIN_RULE)
    if not results:
        print("No available therapy slots found.")
        return
    for result in results:
        print(f"\n{result.clinician.display_name}")
        print(f"   Found {len(result.available_slots)} available therapy intake slots:")
        for index, slot in enumerate(result.available_slots, start=1):
            print(f"   {index}. {_iso(slot)}")


def print_assessment_results(results: list[AssessmentAvailability], max_pairs: int) -> None:
    print(RULE)
    print("ASSESSMENT SLOT PAIRS")
    print(THIN_RULE)
    if not results:
        print("No available assessment slots found.")
        return
    for result in results:
        pairs = result.available_slot_pairs
        print(f"\n{result.clinician.display_name}")
        print(f"   Found {len(pairs)} valid assessment slot pairs:")
        for index, pair in enumerate(pairs[:max_pairs], start=1):
            days_apart = (pair.session2 - pair.session1).total_seconds() / SECONDS_PER_DAY
            print(f"   {index}. {_iso(pair.session1)} -> {_iso(pair.session2)} ({days_apart:.1f} days apart)")
        if len(pairs) > max_pairs:
            print(f"   ... and {len(pairs) - max_pairs} more pairs")


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid settings: {e}", file=sys.stderr)
        return 2

    parser = argparse.ArgumentParser(description="Find therapy intake slots and assessment pairs")
    parser.add_argument(
        "roster",
        nargs="?",
        default=str(settings.roster_path),
        help="Roster JSON file (patient + clinicians)",
    )
    parser.add_argument(
        "--search",
        choices=("therapy", "assessment", "all"),
        default="all",
        help="Which search to run",
    )
    parser.add_argument(
        "--max-pairs",
        type=_non_negative_int,
        default=settings.max_pairs_shown,
        help="Assessment pairs to print per clinician",
    )
    args = parser.parse_args(argv)

    _setup_logging(settings.log_level)

    try:
        roster = load_roster(args.roster)
    except RosterError as e:
        logger.error("%s", e)
        return 1

    print_patient(roster.patient)
    if args.search in ("therapy", "all"):
        print_therapy_results(find_therapy_slots(roster.patient, roster.clinicians))
    if args.search in ("assessment", "all"):
        print_assessment_results(
            find_assessment_slots(roster.patient, roster.clinicians),
            max_pairs=args.max_pairs,
        )
    print(RULE)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
