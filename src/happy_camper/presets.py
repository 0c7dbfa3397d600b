"""Named roster pairs used to exercise the pipeline from the command line."""

import os
from dataclasses import dataclass
from pathlib import Path
from happy_camper.settings import ImportSettings

DEFAULT_ROSTERS_FOLDER = "tests/data/rosters"

MINI_CAMPERS = "mini/campers.csv"
MINI_ACTIVITIES = "mini/activities.csv"
BASIC_CAMPERS = "basic/campers.csv"
BASIC_ACTIVITIES = "basic/activities.csv"


@dataclass(frozen=True)
class TestPreset:
    __test__ = False

    id: int
    name: str
    description: str
    camper_file: str
    activity_file: str
    features: tuple[str, ...] = ()
    session: int | None = 1

    def camper_path(self, rosters_folder=None) -> Path:
        return resolve_rosters_folder(rosters_folder) / self.camper_file

    def activity_path(self, rosters_folder=None) -> Path:
        return resolve_rosters_folder(rosters_folder) / self.activity_file

    def to_settings(self, rosters_folder=None, **overrides) -> ImportSettings:
        return ImportSettings(
            camper_file=self.camper_path(rosters_folder),
            activity_file=self.activity_path(rosters_folder),
            enabled_features=list(self.features),
            session=self.session,
            **overrides,
        )

    def report_lines(self) -> list[str]:
        lines = [
            f"Preset {self.id}: {self.name}",
            f"  {self.description}",
            f"  Campers:    {self.camper_file}",
            f"  Activities: {self.activity_file}",
            f"  Session:    {self.session if self.session is not None else 'auto'}",
        ]
        if self.features:
            lines.append(f"  Features:   {', '.join(self.features)}")
        return lines


PRESETS = (
    TestPreset(1, "MINI_NORMAL", "Normal pair of mini rosters. 3 campers, 3 total assignments",
               MINI_CAMPERS, MINI_ACTIVITIES),
    TestPreset(2, "MINI_MALFORMED_EXTRA", "Checks malformed data error. Camper file has an extra cell",
               "mini/campers_extra_cell.csv", MINI_ACTIVITIES),
    TestPreset(3, "MINI_MALFORMED_MISSING", "Checks malformed data error. Camper file lacks a cell",
               "mini/campers_missing_cell.csv", MINI_ACTIVITIES),
    TestPreset(4, "MINI_WRONG_FORMAT", "Checks invalid extension error. Camper file has a .txt extension",
               "mini/campers.txt", MINI_ACTIVITIES),
    TestPreset(5, "MINI_NO_ROWS", "Checks missing data error. Camper file has no rows",
               "mini/campers_no_rows.csv", MINI_ACTIVITIES),
    TestPreset(6, "MINI_EMPTY", "Checks missing data error. Camper file has no data",
               "mini/empty.csv", MINI_ACTIVITIES),
    TestPreset(7, "MINI_WRONG_SESSION", "Checks program parsing warning. Campers lack programs for session 2",
               MINI_CAMPERS, MINI_ACTIVITIES, ("program",), 2),
    TestPreset(8, "MINI_UNMATCHED_CAMPERS", "Campers without activities get empty assignments",
               BASIC_CAMPERS, MINI_ACTIVITIES),
    TestPreset(9, "MINI_UNMATCHED_ACTIVITIES", "Activity assignments without a matching camper",
               MINI_CAMPERS, BASIC_ACTIVITIES),
    TestPreset(10, "MINI_DUPLICATE_ACTIVITIES", "Two assignments for the same camper and period",
               MINI_CAMPERS, "mini/activities_duplicates.csv"),
    TestPreset(11, "MINI_MISSING_HEADER", "Camper file lacks the required Grade header",
               "mini/campers_missing_header.csv", MINI_ACTIVITIES),
    TestPreset(12, "MINI_BAD_HEADER_CHARACTERS", "Header row carries a byte-order mark and stray whitespace",
               "mini/campers_bad_header_characters.csv", MINI_ACTIVITIES),
    TestPreset(101, "BASIC", "Basic cabin roster",
               BASIC_CAMPERS, BASIC_ACTIVITIES, (), 6),
    TestPreset(110, "BASIC_ALL_FEATURES", "Basic cabin roster, including preferences, medical, and swim colors",
               BASIC_CAMPERS, BASIC_ACTIVITIES, ("program", "preference", "swimlevel", "medical"), 6),
)


def resolve_rosters_folder(rosters_folder=None) -> Path:
    if rosters_folder is None:
        rosters_folder = os.getenv("ROSTERS_FOLDER", DEFAULT_ROSTERS_FOLDER)
    return Path(rosters_folder)


def preset_from_id(preset_id: int) -> TestPreset:
    for preset in PRESETS:
        if preset.id == preset_id:
            return preset
    raise ValueError(f"No test preset with id {preset_id}")
