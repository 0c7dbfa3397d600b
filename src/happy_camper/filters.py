"""Row-visibility filters over the unified roster.

Every filter fails open: a camper whose field is absent or cannot be classified
stays visible.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from enum import Enum
from happy_camper.constants import MAX_ROUNDS, is_empty
from happy_camper.features.medical import FEATURE_ID as MEDICAL_ID
from happy_camper.features.preference import FEATURE_ID as PREFERENCE_ID
from happy_camper.features.program import FEATURE_ID as PROGRAM_ID
from happy_camper.features.swim_level import FEATURE_ID as SWIMLEVEL_ID
from happy_camper.headers import RosterHeader
from happy_camper.models import Camper, UnifiedRoster


class FilterOption(Enum):
    """Base for option enums; each value is (label, shown by default)."""

    def __init__(self, label, default):
        self.label = label
        self.default = default


class AssignmentOption(FilterOption):
    NO_ACTIVITIES = ("Campers with 0 activities", True)
    ONE_ACTIVITY = ("Campers with 1 activity", True)
    TWO_ACTIVITIES = ("Campers with 2 activities", True)
    ALL_ACTIVITIES = ("Campers with 3 activities", True)


class CamperRoundsOption(FilterOption):
    MISSING_ACTIVITIES = ("Show campers missing activities", True)
    ALL_ACTIVITIES = ("Show campers with all activities", True)


class PreferenceOption(FilterOption):
    REQUESTS_MET = ("Campers with requests met", True)
    UNREQUESTED = ("Campers with unrequested activities", True)


class SwimLevelOption(FilterOption):
    COMPATIBLE = ("Campers with valid swim level", True)
    INCOMPATIBLE = ("Campers with invalid swim level", True)


class MedicalOption(FilterOption):
    WITH_NOTES = ("Campers with medical notes", True)
    WITHOUT_NOTES = ("Campers without medical notes", True)


def _round_count(value: str) -> int | None:
    try:
        count = int(value)
    except ValueError:
        return None
    if 0 <= count <= MAX_ROUNDS:
        return count
    return None


def classify_assignment(value: str) -> AssignmentOption | None:
    count = _round_count(value)
    if count is None:
        return None
    return list(AssignmentOption)[count]


def classify_camper_rounds(value: str) -> CamperRoundsOption | None:
    count = _round_count(value)
    if count is None:
        return None
    if count == MAX_ROUNDS:
        return CamperRoundsOption.ALL_ACTIVITIES
    return CamperRoundsOption.MISSING_ACTIVITIES


def classify_preference(value: str) -> PreferenceOption:
    return PreferenceOption.REQUESTS_MET if is_empty(value) else PreferenceOption.UNREQUESTED


def classify_swim_level(value: str) -> SwimLevelOption:
    return SwimLevelOption.COMPATIBLE if is_empty(value) else SwimLevelOption.INCOMPATIBLE


def classify_medical(value: str) -> MedicalOption:
    return MedicalOption.WITHOUT_NOTES if is_empty(value) else MedicalOption.WITH_NOTES


class FilterKind(Enum):
    """Closed set of option filters: (filter id, display name, header, option enum, classifier)."""

    ASSIGNMENT = (
        "assignment",
        "Assignment Filter",
        RosterHeader.ROUND_COUNT.standard_name,
        AssignmentOption,
        classify_assignment,
    )
    CAMPER_ROUNDS = (
        "camper-rounds",
        "Camper Filter",
        RosterHeader.ROUND_COUNT.standard_name,
        CamperRoundsOption,
        classify_camper_rounds,
    )
    PREFERENCE = (
        "preference",
        "Preference Filter",
        RosterHeader.UNREQUESTED_ACTIVITIES.standard_name,
        PreferenceOption,
        classify_preference,
    )
    SWIMLEVEL = (
        "swimlevel",
        "Swim Level Filter",
        RosterHeader.SWIMCONFLICTS.standard_name,
        SwimLevelOption,
        classify_swim_level,
    )
    MEDICAL = (
        "medical",
        "Medical Filter",
        RosterHeader.MEDICAL_NOTES.standard_name,
        MedicalOption,
        classify_medical,
    )

    def __init__(self, filter_id, filter_name, header, option_type, classifier):
        self.filter_id = filter_id
        self.filter_name = filter_name
        self.header = header
        self.option_type = option_type
        self.classifier = classifier


class RosterFilter(ABC):
    filter_id: str
    filter_name: str

    @abstractmethod
    def apply(self, camper: Camper) -> bool: ...


class OptionFilter(RosterFilter):
    """Shows or hides campers by which option their column value falls under."""

    def __init__(self, kind: FilterKind):
        self.kind = kind
        self.filter_id = kind.filter_id
        self.filter_name = kind.filter_name
        self._states = {option: option.default for option in kind.option_type}

    @property
    def options(self) -> list[FilterOption]:
        return list(self._states)

    def is_showing(self, option: FilterOption) -> bool:
        return self._states[self._check_option(option)]

    def set_option(self, option: FilterOption, shown: bool) -> None:
        self._states[self._check_option(option)] = shown

    def reset(self) -> None:
        for option in self._states:
            self._states[option] = option.default

    def _check_option(self, option: FilterOption) -> FilterOption:
        if option not in self._states:
            raise ValueError(f"{option!r} is not an option of filter {self.filter_id}")
        return option

    def apply(self, camper: Camper) -> bool:
        value = camper.get(self.kind.header)
        if value is None:
            return True
        option = self.kind.classifier(value)
        if option is None:
            return True
        return self._states[option]


class ProgramListFilter(RosterFilter):
    """Per-program visibility; programs it has never seen are visible."""

    filter_id = "program-list"
    filter_name = "Program Filter"

    def __init__(self, programs: Iterable[str] = ()):
        self._visibility = {program: True for program in programs}

    @property
    def programs(self) -> list[str]:
        return list(self._visibility)

    def is_program_visible(self, program: str) -> bool:
        return self._visibility.get(program, True)

    def set_program_visibility(self, program: str, visible: bool) -> None:
        self._visibility[program] = visible

    def set_all_programs_visibility(self, visible: bool) -> None:
        for program in self._visibility:
            self._visibility[program] = visible

    def apply(self, camper: Camper) -> bool:
        program = camper.get(RosterHeader.PROGRAM.standard_name)
        if program is None:
            return True
        return self.is_program_visible(program)


FEATURE_FILTERS = (
    (PREFERENCE_ID, FilterKind.PREFERENCE),
    (SWIMLEVEL_ID, FilterKind.SWIMLEVEL),
    (MEDICAL_ID, FilterKind.MEDICAL),
)


class FilterManager:
    """Registered filters, combined by AND."""

    def __init__(self):
        self._filters: dict[str, RosterFilter] = {}

    def add_filter(self, roster_filter: RosterFilter) -> None:
        self._filters[roster_filter.filter_id] = roster_filter

    def remove_filter(self, filter_id: str) -> None:
        self._filters.pop(filter_id, None)

    def get_filter(self, filter_id: str) -> RosterFilter | None:
        return self._filters.get(filter_id)

    def has_filter(self, filter_id: str) -> bool:
        return filter_id in self._filters

    def filter_count(self) -> int:
        return len(self._filters)

    def all_filters(self) -> list[RosterFilter]:
        return list(self._filters.values())

    def apply_filters(self, camper: Camper) -> bool:
        return all(roster_filter.apply(camper) for roster_filter in self._filters.values())

    def filter_records(self, campers: Iterable[Camper]) -> list[Camper]:
        return [camper for camper in campers if self.apply_filters(camper)]

    def create_filters_for_roster(self, roster: UnifiedRoster) -> None:
        """Replace the registered filters with the ones that make sense for this roster."""
        self._filters.clear()
        self.add_filter(OptionFilter(FilterKind.ASSIGNMENT))
        self.add_filter(OptionFilter(FilterKind.CAMPER_ROUNDS))

        if roster.has_feature(PROGRAM_ID):
            programs = sorted(
                {camper.get(RosterHeader.PROGRAM.standard_name) for camper in roster}
                - {None, ""}
            )
            self.add_filter(ProgramListFilter(programs))
        for feature_id, kind in FEATURE_FILTERS:
            if roster.has_feature(feature_id):
                self.add_filter(OptionFilter(kind))

        logging.debug(f"Created filters: {', '.join(self._filters)}")
