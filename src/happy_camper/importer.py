"""Roster file import: validate, parse, and build typed rosters."""

import logging
from pathlib import Path
from pydantic import ValidationError
from happy_camper.features.program import AdjustMode, adjust_program_name
from happy_camper.file_io import ParsedCSV, parse_csv
from happy_camper.headers import RosterHeader
from happy_camper.models import ActivityRoster, Camper, CamperRoster, Roster
from happy_camper.validation.file_schemas.activity_csv import ActivityCsvFileSchema
from happy_camper.validation.file_schemas.camper_csv import CamperCsvFileSchema
from happy_camper.validation.files import validate_basic_file, validate_csv_file
from happy_camper.validation.helpers import build_identity_key
from happy_camper.validation.warning_log import (
    RosterWarning,
    WarningLog,
    warnings_from_validation_error,
)


def _standard_header(text: str, source: str) -> str:
    header = RosterHeader.lookup(text, source)
    return header.standard_name if header else text


def _load(path, required_headers: list[str]) -> ParsedCSV:
    path = validate_basic_file(path)
    parsed = parse_csv(path)
    validate_csv_file(path, parsed, required_headers)
    return parsed


def _build_roster(roster: Roster, parsed: ParsedCSV, log: WarningLog | None) -> None:
    headers = [_standard_header(h, roster.source) for h in parsed.headers]
    for header in RosterHeader.sort_headers(headers):
        roster.add_header(header)

    for record in parsed.records():
        data = {_standard_header(k, roster.source): v for k, v in record.items()}
        camper = Camper(build_identity_key(data), data)
        if roster.unique_ids and roster.has_camper(camper.id):
            logging.debug(f"Skipping duplicate camper {camper.id}")
            if log is not None:
                log.log_warning(RosterWarning.duplicate_camper(data))
            continue
        roster.add_camper(camper)


def import_camper_roster(path, log: WarningLog | None = None) -> CamperRoster:
    """Import the enrollment export. Raises RosterError on any file or content failure."""
    parsed = _load(path, CamperRoster.REQUIRED_HEADERS)
    roster = CamperRoster()
    _build_roster(roster, parsed, log)
    logging.info(f"Imported {len(roster)} camper(s) from {Path(path).name}")
    return roster


def import_activity_roster(path, log: WarningLog | None = None) -> ActivityRoster:
    """Import the assignment export. Raises RosterError on any file or content failure."""
    parsed = _load(path, ActivityRoster.REQUIRED_HEADERS)
    roster = ActivityRoster()
    _build_roster(roster, parsed, log)
    logging.info(f"Imported {len(roster)} activity row(s) from {Path(path).name}")
    return roster


def standardize_program_names(roster: CamperRoster) -> None:
    header = RosterHeader.ESP.standard_name
    if not roster.has_header(header):
        return
    for camper in roster:
        camper.set(header, adjust_program_name(camper.get(header), AdjustMode.STANDARDIZE))


def _check_formats(roster: Roster, schema) -> list[RosterWarning]:
    rows = [camper.snapshot() for camper in roster]
    try:
        schema.model_validate(rows)
    except ValidationError as e:
        return warnings_from_validation_error(rows, e)
    return []


def check_camper_formats(roster: CamperRoster) -> list[RosterWarning]:
    return _check_formats(roster, CamperCsvFileSchema)


def check_activity_formats(roster: ActivityRoster) -> list[RosterWarning]:
    return _check_formats(roster, ActivityCsvFileSchema)
