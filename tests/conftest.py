import csv
from pathlib import Path
import pytest
from happy_camper.headers import RosterHeader
from happy_camper.models import Camper, UnifiedRoster
from happy_camper.settings import ImportSettings
from happy_camper.validation.helpers import build_identity_key
from happy_camper.validation.warning_log import WarningLog

ROSTERS_FOLDER = Path(__file__).parent / "data" / "rosters"

CAMPER_HEADERS = [
    "First Name",
    "Preferred Name",
    "Last Name",
    "Grade",
    "Enrolled Sessions/Programs",
]
ACTIVITY_HEADERS = ["Period", "First Name", "Preferred Name", "Last Name", "Grade", "Activity"]


@pytest.fixture
def rosters_folder():
    return ROSTERS_FOLDER


@pytest.fixture
def write_csv(tmp_path):
    """Factory writing rows (first row is the header) to a CSV file under tmp_path."""

    def _write(rows, name="roster.csv"):
        path = tmp_path / name
        with path.open("w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerows(rows)
        return path

    return _write


@pytest.fixture
def camper_row():
    """Factory for one camper-roster record with sensible defaults."""

    def _create(first="Alice", preferred=None, last="Anderson", **kwargs):
        defaults = {
            "First Name": first,
            "Preferred Name": preferred if preferred is not None else first,
            "Last Name": last,
            "Grade": "4th",
            "Enrolled Sessions/Programs": "Session 1/Adventure Camp",
        }
        defaults.update(kwargs)
        return defaults

    return _create


@pytest.fixture
def activity_row():
    """Factory for one activity-roster record with sensible defaults."""

    def _create(first="Alice", preferred=None, last="Anderson", period="1", activity="Archery", **kwargs):
        defaults = {
            "Period": period,
            "First Name": first,
            "Preferred Name": preferred if preferred is not None else first,
            "Last Name": last,
            "Grade": "4th",
            "Activity": activity,
        }
        defaults.update(kwargs)
        return defaults

    return _create


@pytest.fixture
def roster_files(write_csv):
    """Factory writing a camper and activity roster from record dicts; returns both paths."""

    def _rows(records, headers):
        columns = list(headers)
        for record in records:
            columns += [h for h in record if h not in columns]
        return [columns] + [[record.get(h, "") for h in columns] for record in records]

    def _create(campers, activities):
        camper_file = write_csv(_rows(campers, CAMPER_HEADERS), "campers.csv")
        activity_file = write_csv(_rows(activities, ACTIVITY_HEADERS), "activities.csv")
        return camper_file, activity_file

    return _create


@pytest.fixture
def import_settings(roster_files):
    """Factory for ImportSettings over freshly written roster files."""

    def _create(campers, activities, **kwargs):
        camper_file, activity_file = roster_files(campers, activities)
        return ImportSettings(camper_file=camper_file, activity_file=activity_file, **kwargs)

    return _create


@pytest.fixture
def unified_roster_factory():
    """Factory for a UnifiedRoster built straight from record dicts."""

    def _create(records, features=()):
        roster = UnifiedRoster()
        for header in RosterHeader.sort_headers([h for record in records for h in record]):
            roster.add_header(header)
        for record in records:
            roster.add_camper(Camper(build_identity_key(record), dict(record)))
        for feature_id in features:
            roster.enable_feature(feature_id)
        return roster

    return _create


@pytest.fixture
def log():
    return WarningLog()
