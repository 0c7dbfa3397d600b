import logging
from dataclasses import dataclass, field
from happy_camper.constants import EMPTY_VALUE, MAX_ROUNDS, UNKNOWN_VALUE, is_empty
from happy_camper.features.base import RosterFeature
from happy_camper.headers import RosterHeader, round_header, round_headers
from happy_camper.models import ActivityRoster, Camper, UnifiedRoster
from happy_camper.settings import UnmatchedPolicy
from happy_camper.validation.warning_log import RosterWarning, WarningLog

FEATURE_ID = "activity"
ROUND_FORMAT = f"Must be a number between 1 and {MAX_ROUNDS}"

NAME_FIELDS = (
    RosterHeader.FIRST_NAME.standard_name,
    RosterHeader.PREFERRED_NAME.standard_name,
    RosterHeader.LAST_NAME.standard_name,
    RosterHeader.GRADE.standard_name,
)
# columns the merge owns; most others on an added camper get the placeholder
MERGED_FIELDS = (
    *NAME_FIELDS,
    RosterHeader.CABIN.standard_name,
    *round_headers(),
    RosterHeader.ROUND_COUNT.standard_name,
)
# read by later features, so an added camper leaves them blank instead of a placeholder
FEATURE_INPUT_FIELDS = (
    RosterHeader.PREFERENCES.standard_name,
    RosterHeader.SWIMCOLOR.standard_name,
    RosterHeader.MEDICAL_NOTES.standard_name,
)


@dataclass
class _Assignments:
    """Everything the activity roster says about one camper."""

    row: dict[str, str]
    rounds: dict[int, str] = field(default_factory=dict)
    cabin: str = EMPTY_VALUE

    def summary_row(self) -> dict[str, str]:
        row = dict(self.row)
        row[RosterHeader.ROUND_COUNT.standard_name] = str(len(self.rounds))
        return row


def parse_round(value: str | None) -> int | None:
    try:
        round_number = int(value)
    except (TypeError, ValueError):
        return None
    if 1 <= round_number <= MAX_ROUNDS:
        return round_number
    return None


def activity_for_camper(camper: Camper, round_number: int) -> str:
    if not 1 <= round_number <= MAX_ROUNDS:
        raise ValueError(f"round must be between 1 and {MAX_ROUNDS}, got {round_number}")
    return camper.get(round_header(round_number)) or EMPTY_VALUE


def assignments_for_camper(camper: Camper) -> list[str]:
    return [activity_for_camper(camper, n) for n in range(1, MAX_ROUNDS + 1)]


def assignment_count(roster: UnifiedRoster, camper_id: str) -> int:
    if not roster.has_feature(FEATURE_ID):
        raise ValueError("activity feature is not enabled on this roster")
    value = roster.get_value(camper_id, RosterHeader.ROUND_COUNT.standard_name)
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


class ActivityFeature(RosterFeature):
    """Merge the activity roster into the unified roster, one Round column per period."""

    feature_id = FEATURE_ID
    feature_name = "Activity Assignments"
    required_headers = (
        RosterHeader.FIRST_NAME.standard_name,
        RosterHeader.PREFERRED_NAME.standard_name,
        RosterHeader.LAST_NAME.standard_name,
    )
    added_headers = (*round_headers(), RosterHeader.ROUND_COUNT.standard_name)

    def __init__(
        self,
        activity_roster: ActivityRoster,
        unmatched_policy: UnmatchedPolicy = UnmatchedPolicy.SKIP,
        placeholder: str = UNKNOWN_VALUE,
    ):
        self.activity_roster = activity_roster
        self.unmatched_policy = unmatched_policy
        self.placeholder = placeholder

    def apply_to_roster(self, roster: UnifiedRoster, log: WarningLog) -> None:
        if self.activity_roster.has_header(RosterHeader.CABIN):
            roster.add_header(RosterHeader.CABIN)

        grouped = self.group_assignments(log)
        for camper_id, assignments in grouped.items():
            camper = roster.get_camper(camper_id)
            if camper is not None:
                self.write_assignments(roster, camper, assignments)
            elif self.unmatched_policy == UnmatchedPolicy.ADD:
                self.add_unmatched(roster, camper_id, assignments)
                log.log_warning(RosterWarning.unmatched_activity(assignments.summary_row(), added=True))
            else:
                log.log_warning(RosterWarning.unmatched_activity(assignments.summary_row()))

        for camper in roster:
            count = sum(1 for activity in assignments_for_camper(camper) if not is_empty(activity))
            camper.set(RosterHeader.ROUND_COUNT.standard_name, str(count))

        logging.info(f"Merged assignments for {len(grouped)} camper(s)")

    def group_assignments(self, log: WarningLog) -> dict[str, _Assignments]:
        """Fold activity rows into per-camper round slots; the first assignment per round wins."""
        period_header = RosterHeader.ROUND.standard_name
        activity_header = RosterHeader.ACTIVITY.standard_name
        cabin_header = RosterHeader.CABIN.standard_name

        grouped: dict[str, _Assignments] = {}
        for row in self.activity_roster:
            round_number = parse_round(row.get(period_header))
            if round_number is None:
                log.log_warning(RosterWarning.bad_data_format(row.data, period_header, ROUND_FORMAT))
                continue
            activity = row.get(activity_header)
            if is_empty(activity):
                continue

            assignments = grouped.setdefault(row.id, _Assignments(row.snapshot()))
            if round_number in assignments.rounds:
                log.log_warning(
                    RosterWarning.duplicate_activity(
                        row.data,
                        round_header(round_number),
                        assignments.rounds[round_number],
                        activity,
                    )
                )
                continue
            assignments.rounds[round_number] = activity
            if not assignments.cabin and not is_empty(row.get(cabin_header)):
                assignments.cabin = row.get(cabin_header)
        return grouped

    def write_assignments(self, roster: UnifiedRoster, camper: Camper, assignments: _Assignments):
        for round_number, activity in assignments.rounds.items():
            camper.set(round_header(round_number), activity)
        cabin_header = RosterHeader.CABIN.standard_name
        if assignments.cabin and roster.has_header(cabin_header) and is_empty(camper.get(cabin_header)):
            camper.set(cabin_header, assignments.cabin)

    def add_unmatched(self, roster: UnifiedRoster, camper_id: str, assignments: _Assignments):
        data = {h: self.placeholder for h in roster.headers if h not in MERGED_FIELDS}
        for header in FEATURE_INPUT_FIELDS:
            if header in data:
                data[header] = EMPTY_VALUE
        for header in NAME_FIELDS:
            data[header] = assignments.row.get(header, EMPTY_VALUE)
        camper = Camper(camper_id, data)
        roster.add_camper(camper)
        self.write_assignments(roster, camper, assignments)
        logging.debug(f"Added unmatched camper {camper_id}")
