"""Non-fatal roster warnings and the per-run warning/error log."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pydantic import ValidationError
from happy_camper.constants import DISPLAY_NO_DATA, UNKNOWN_VALUE
from happy_camper.headers import RosterHeader
from happy_camper.validation.errors import ErrorType, RosterError
from happy_camper.validation.helpers import build_name_string


class WarningType(Enum):
    """Warning categories; each value is (explanation, secondary explanation, display columns)."""

    UNMATCHED_ACTIVITY_SKIPPED = (
        "Some activity data had no match on the camper roster",
        "Those rows were skipped and are not shown as campers.",
        ("Camper", "Grade", "Round Assignments"),
    )
    UNMATCHED_ACTIVITY_ADDED = (
        "Some activity data had no match on the camper roster",
        "Added unmatched data to the roster as new camper(s). Some columns may be missing.",
        ("Camper", "Grade", "Round Assignments"),
    )
    DUPLICATE_ACTIVITY = (
        "Duplicate activity/activities found (and skipped)",
        "This shouldn't happen for a generated roster - double check your data.",
        ("Camper", "Round", "First Assignment", "Conflicting Assignment"),
    )
    DUPLICATE_CAMPER = (
        "The camper roster lists the same camper more than once",
        "Only the first entry for each camper is kept.",
        ("Camper", "Grade"),
    )
    BAD_DATA_FORMAT = (
        "Some data didn't match the expected format for its column",
        "The program can continue, but some data might look weird.",
        ("Camper", "Column", "Value", "Format (RegEx)"),
    )
    PROGRAM_PARSING_FAILURE = (
        "Failed to find program(s) for the selected session",
        "The program can continue, but the program filter will be less helpful.",
        ("Camper", "Value", "Selected Session"),
    )
    MISSING_FEATURE_HEADER = (
        "Input file(s) lacked header(s) required by selected feature(s)",
        "The feature(s) will be skipped this time.",
        ("Required Header", "Required For Feature"),
    )
    CAMPER_MISSING_FIELD = (
        "Camper data was missing a field required by a selected feature",
        "The feature can continue, but must skip this camper.",
        ("Camper", "Missing Field", "Required For Feature"),
    )
    UNKNOWN_SWIM_ACTIVITY_FLAGGED = (
        "Swim level feature found activities not defined in the activity requirements list",
        "Those activities are flagged as problematic, but may be fine.",
        ("Activity",),
    )
    UNKNOWN_SWIM_ACTIVITY_IGNORED = (
        "Swim level feature found activities not defined in the activity requirements list",
        "If a camper's swim level contradicts their assignment to that activity, it won't be caught.",
        ("Activity",),
    )
    UNKNOWN_SWIM_LEVEL = (
        "Swim level(s) not defined in the level list",
        "Check the settings to ensure all valid swim levels are included.",
        ("Camper", "Swim Level", "Accepted Levels"),
    )

    def __init__(self, general_explanation, secondary_explanation, display_headers):
        self.general_explanation = general_explanation
        self.secondary_explanation = secondary_explanation
        self.display_headers = display_headers


@dataclass(frozen=True)
class RosterWarning:
    type: WarningType
    cells: tuple[str, ...]

    def __str__(self) -> str:
        pairs = [f"{h}: {c}" for h, c in zip(self.type.display_headers, self.cells)]
        return f"{self.type.name} ({', '.join(pairs)})"

    @classmethod
    def unmatched_activity(cls, row: dict[str, str], added: bool = False) -> "RosterWarning":
        grade = row.get(RosterHeader.GRADE.standard_name) or UNKNOWN_VALUE
        rounds = row.get(RosterHeader.ROUND_COUNT.standard_name) or UNKNOWN_VALUE
        warning_type = (
            WarningType.UNMATCHED_ACTIVITY_ADDED if added else WarningType.UNMATCHED_ACTIVITY_SKIPPED
        )
        return cls(warning_type, (build_name_string(row), grade, rounds))

    @classmethod
    def duplicate_activity(
        cls, row: dict[str, str], round_header: str, kept: str, conflicting: str
    ) -> "RosterWarning":
        return cls(WarningType.DUPLICATE_ACTIVITY, (build_name_string(row), round_header, kept, conflicting))

    @classmethod
    def duplicate_camper(cls, row: dict[str, str]) -> "RosterWarning":
        grade = row.get(RosterHeader.GRADE.standard_name) or UNKNOWN_VALUE
        return cls(WarningType.DUPLICATE_CAMPER, (build_name_string(row), grade))

    @classmethod
    def bad_data_format(cls, row: dict[str, str], column: str, format_: str) -> "RosterWarning":
        value = row.get(column, DISPLAY_NO_DATA)
        return cls(WarningType.BAD_DATA_FORMAT, (build_name_string(row), column, value, format_))

    @classmethod
    def program_parsing_failure(cls, row: dict[str, str], session: str) -> "RosterWarning":
        value = row.get(RosterHeader.ESP.standard_name, DISPLAY_NO_DATA)
        return cls(WarningType.PROGRAM_PARSING_FAILURE, (build_name_string(row), value, session))

    @classmethod
    def missing_feature_header(cls, header: str, feature_name: str) -> "RosterWarning":
        return cls(WarningType.MISSING_FEATURE_HEADER, (header, feature_name))

    @classmethod
    def camper_missing_field(cls, row: dict[str, str], field: str, feature_name: str) -> "RosterWarning":
        return cls(WarningType.CAMPER_MISSING_FIELD, (build_name_string(row), field, feature_name))

    @classmethod
    def unknown_swim_activity(cls, activity: str, flagged: bool) -> "RosterWarning":
        warning_type = (
            WarningType.UNKNOWN_SWIM_ACTIVITY_FLAGGED if flagged else WarningType.UNKNOWN_SWIM_ACTIVITY_IGNORED
        )
        return cls(warning_type, (activity,))

    @classmethod
    def unknown_swim_level(
        cls, row: dict[str, str], level: str, accepted: Iterable[str]
    ) -> "RosterWarning":
        return cls(WarningType.UNKNOWN_SWIM_LEVEL, (build_name_string(row), level, ", ".join(accepted)))


def warnings_from_validation_error(
    rows: list[dict[str, str]], validation_error: ValidationError
) -> list[RosterWarning]:
    """Turn row-schema validation errors into BAD_DATA_FORMAT warnings.

    Error locations are (row index, column alias). Missing columns are the
    content validator's concern and are skipped here.
    """
    warnings = []
    for error in validation_error.errors():
        loc = error.get("loc", ())
        if error.get("type") == "missing" or len(loc) < 2 or not isinstance(loc[0], int):
            continue
        row = rows[loc[0]]
        column = str(loc[1])
        format_ = (error.get("ctx") or {}).get("pattern") or error.get("msg", "")
        warnings.append(RosterWarning.bad_data_format(row, column, format_))
    return warnings


class WarningLog:
    """Append-only log of warnings and errors for one import run.

    Entries are bucketed by category and never deduplicated: every offending row
    gets its own entry.
    """

    def __init__(self):
        self._warnings: dict[WarningType, list[RosterWarning]] = {}
        self._errors: dict[ErrorType, list[RosterError]] = {}

    def log_warning(self, warning: RosterWarning) -> None:
        self._warnings.setdefault(warning.type, []).append(warning)

    def log_warnings(self, warnings: Iterable[RosterWarning]) -> None:
        for warning in warnings:
            self.log_warning(warning)

    def log_error(self, error: RosterError) -> None:
        self._errors.setdefault(error.error_type, []).append(error)

    def has_warnings(self) -> bool:
        return bool(self._warnings)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def warnings(self, warning_type: WarningType | None = None) -> list[RosterWarning]:
        if warning_type is not None:
            return list(self._warnings.get(warning_type, []))
        return [w for bucket in self._warnings.values() for w in bucket]

    def errors(self, error_type: ErrorType | None = None) -> list[RosterError]:
        if error_type is not None:
            return list(self._errors.get(error_type, []))
        return [e for bucket in self._errors.values() for e in bucket]

    def warning_count(self, warning_type: WarningType | None = None) -> int:
        return len(self.warnings(warning_type))

    def error_count(self, error_type: ErrorType | None = None) -> int:
        return len(self.errors(error_type))

    @property
    def warning_log(self) -> dict[WarningType, list[RosterWarning]]:
        return {k: list(v) for k, v in self._warnings.items()}

    @property
    def error_log(self) -> dict[ErrorType, list[RosterError]]:
        return {k: list(v) for k, v in self._errors.items()}
