import logging
import re
from collections import Counter
from enum import Enum
from happy_camper.constants import EMPTY_VALUE, is_empty
from happy_camper.features.base import RosterFeature
from happy_camper.headers import RosterHeader
from happy_camper.models import UnifiedRoster
from happy_camper.validation.warning_log import RosterWarning, WarningLog

FEATURE_ID = "program"
SEGMENT_SEPARATOR = " and "
SESSION_PATTERN = re.compile(r"Session\s+(\d+)")
UNKNOWN_SESSION = "unknown"
MIXED_ROUNDS = -1


class AdjustMode(Enum):
    """Program-name rewrites; each value is a tuple of (pattern, replacement) pairs."""

    STANDARDIZE = (
        (r" - All Gender", ""),
        (r"(?i)[-\s]in[-\s]Training", "-In-Training"),
    )
    SHORTEN = (
        (r"All Gender", "AG"),
        (r" Backpacking", ""),
    )


def adjust_program_name(name: str | None, mode: AdjustMode) -> str | None:
    if name is None:
        return None
    for pattern, replacement in mode.value:
        name = re.sub(pattern, replacement, name)
    return name


def _segments(enrollment: str):
    """Yield (session part, program part) for each "Session/Program" segment."""
    for segment in enrollment.split(SEGMENT_SEPARATOR):
        session_part, sep, program_part = segment.partition("/")
        if sep:
            yield session_part.strip(), program_part.strip()


def determine_session(enrollments) -> int | None:
    """Most common session number across all enrollment segments; ties go to the lowest."""
    counts = Counter()
    for enrollment in enrollments:
        if is_empty(enrollment):
            continue
        for session_part, _ in _segments(enrollment):
            match = SESSION_PATTERN.search(session_part)
            if match:
                counts[int(match.group(1))] += 1
    if not counts:
        return None
    return min(counts, key=lambda session: (-counts[session], session))


def extract_program(enrollment: str | None, session: int | None) -> str | None:
    """
    Pick the program for the given session out of an enrollment field.

    Examples:
        ("Session 2/Adventure Camp and Session 3/Explorers", 3) -> "Explorers"
        ("", 3) -> ""
        ("Session 1/Adventure Camp", 2) -> None

    Returns None when no segment belongs to the session. With no session, the
    first segment's program is used.
    """
    if is_empty(enrollment):
        return EMPTY_VALUE
    segments = list(_segments(enrollment))
    if session is None:
        return segments[0][1] if segments else None

    prefix = re.compile(rf"^Session\s+{session}(?!\d)")
    for session_part, program_part in segments:
        if prefix.match(session_part):
            return program_part
    return None


def program_for_camper(roster: UnifiedRoster, camper_id: str) -> str:
    if not roster.has_feature(FEATURE_ID):
        raise ValueError("program feature is not enabled on this roster")
    return roster.get_value(camper_id, RosterHeader.PROGRAM.standard_name) or EMPTY_VALUE


def programs_by_round_count(roster: UnifiedRoster) -> dict[int, list[str]]:
    """Group program names by the round count their campers share (-1 when mixed)."""
    grouped = {MIXED_ROUNDS: [], 3: [], 2: [], 1: [], 0: []}
    program_rounds: dict[str, int] = {}

    for camper in roster:
        program = camper.get(RosterHeader.PROGRAM.standard_name)
        if is_empty(program):
            continue
        try:
            rounds = int(camper.get(RosterHeader.ROUND_COUNT.standard_name))
        except (TypeError, ValueError):
            rounds = 0
        if rounds not in grouped:
            rounds = MIXED_ROUNDS
        if program not in program_rounds:
            program_rounds[program] = rounds
        elif program_rounds[program] != rounds:
            program_rounds[program] = MIXED_ROUNDS

    for program, rounds in program_rounds.items():
        grouped[rounds].append(program)
    for programs in grouped.values():
        programs.sort()
    return grouped


class ProgramFeature(RosterFeature):
    feature_id = FEATURE_ID
    feature_name = "Program Information"
    required_headers = (RosterHeader.ESP.standard_name,)
    added_headers = (RosterHeader.PROGRAM.standard_name,)

    def __init__(self, session: int | None = None):
        self.session = session

    def apply_to_roster(self, roster: UnifiedRoster, log: WarningLog) -> None:
        esp_header = RosterHeader.ESP.standard_name
        session = self.session
        if session is None:
            session = determine_session(camper.get(esp_header) for camper in roster)
            logging.info(f"Detected session: {session if session is not None else UNKNOWN_SESSION}")

        for camper in roster:
            enrollment = camper.get(esp_header)
            program = extract_program(enrollment, session)
            if program is None:
                program = enrollment or EMPTY_VALUE
                session_text = str(session) if session is not None else UNKNOWN_SESSION
                log.log_warning(RosterWarning.program_parsing_failure(camper.data, session_text))
            camper.set(RosterHeader.PROGRAM.standard_name, program)
