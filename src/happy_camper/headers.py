import re
from enum import Enum
from happy_camper.constants import MAX_ROUNDS

ROUND_BASE = "Round "
ROUND_PATTERN = re.compile(r"^Round (\d+)$")


class RosterHeader(Enum):
    """Canonical roster columns.

    Each member maps one logical field to its standard (output) name, its default
    visibility, and the spelling used by the camper and activity roster exports.
    Member order is the canonical display order.
    """

    FIRST_NAME = ("First Name", False, "First Name", "First Name", False)
    PREFERRED_NAME = ("Preferred Name", True, "Preferred Name", "Preferred Name", False)
    LAST_NAME = ("Last Name", True, "Last Name", "Last Name", False)
    GRADE = ("Grade", False, "Grade", "Grade", False)
    ESP = ("Enrolled Sessions/Programs", False, "Enrolled Sessions/Programs", None, False)
    PROGRAM = ("Program", True, None, None, False)
    ACTIVITY = ("Activity", True, None, "Activity", True)
    ROUND = ("Period", True, None, "Period", True)
    CABIN = ("Cabin", True, None, "Cabin", False)
    ROUND_1 = ("Round 1", True, None, None, False)
    ROUND_2 = ("Round 2", True, None, None, False)
    ROUND_3 = ("Round 3", True, None, None, False)
    ROUND_COUNT = ("Round Count", False, None, None, False)
    PREFERENCES = ("Activity Preferences", False, "Activity Preferences", None, False)
    PREFERENCE_SCORE = ("Preference Score", True, None, None, False)
    PREFERENCE_PERCENTILE = ("Preference Percentile", False, None, None, False)
    UNREQUESTED_ACTIVITIES = ("Unrequested Activities", True, None, None, False)
    SCORE_BY_ROUND = ("Preference by Round", False, None, None, False)
    MEDICAL_NOTES = ("Medical Notes", True, "Medical Notes", "Medical Notes", False)
    SWIMCOLOR = ("SwimColor", True, "SwimColor", None, False)
    SWIMCONFLICTS = ("Swim Conflicts", True, None, None, False)

    def __init__(self, standard_name, default_visibility, camper_name, activity_name, input_only):
        self.standard_name = standard_name
        self.default_visibility = default_visibility
        self.camper_name = camper_name
        self.activity_name = activity_name
        self.input_only = input_only

    @property
    def numeric_sort(self) -> bool:
        return self in (
            RosterHeader.GRADE,
            RosterHeader.PREFERENCE_SCORE,
            RosterHeader.PREFERENCE_PERCENTILE,
        )

    @classmethod
    def lookup(cls, text: str, source: str | None = None) -> "RosterHeader | None":
        """Resolve any known spelling to its header.

        With no source, standard names win over camper spellings, which win over
        activity spellings. With source "camper" or "activity", only that roster's
        spelling is checked.
        """
        if source == "camper":
            attrs = ("camper_name",)
        elif source == "activity":
            attrs = ("activity_name",)
        elif source is None:
            attrs = ("standard_name", "camper_name", "activity_name")
        else:
            raise ValueError(f"unknown roster source: {source}")

        for attr in attrs:
            for header in cls:
                if getattr(header, attr) is not None and getattr(header, attr) == text:
                    return header
        return None

    @classmethod
    def default_visibility_for(cls, text: str) -> bool:
        header = cls.lookup(text)
        return header.default_visibility if header else True

    @classmethod
    def sort_headers(cls, headers: list[str]) -> list[str]:
        """Return headers in canonical order, unknown headers last in their given order."""
        present = set(headers)
        ordered = [h.standard_name for h in cls if h.standard_name in present]
        ordered += [h for h in headers if h not in ordered]
        return ordered


def round_header(round_number: int) -> str:
    return f"{ROUND_BASE}{round_number}"


def round_headers() -> list[str]:
    return [round_header(i) for i in range(1, MAX_ROUNDS + 1)]


def is_round(header: str) -> bool:
    return ROUND_PATTERN.match(header) is not None
