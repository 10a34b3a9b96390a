"""Load a patient and clinician roster from JSON."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from intake_scheduler.schema import Roster

logger = logging.getLogger(__name__)


class RosterError(ValueError):
    """Roster file could not be read or does not match the schema."""


def parse_roster(data: Any) -> Roster:
    """Validate an already-decoded roster document."""
    try:
        return Roster.model_validate(data)
    except ValidationError as e:
        raise RosterError(f"Invalid roster: {e}") from e


def load_roster(path: str | Path) -> Roster:
    """Read and validate a roster JSON file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise RosterError(f"Cannot read roster file {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise RosterError(f"Roster file {path} is not valid JSON: {e}") from e

    roster = parse_roster(data)
    logger.info("Loaded roster %s: %d clinician(s)", path, len(roster.clinicians))
    return roster
