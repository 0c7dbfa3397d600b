import pytest
from happy_camper.models import ActivityRoster, Camper
from happy_camper.validation.helpers import build_identity_key


@pytest.fixture
def activity_roster_factory():
    """Factory for an ActivityRoster built straight from record dicts."""

    def _create(records):
        roster = ActivityRoster()
        for record in records:
            roster.add_camper(Camper(build_identity_key(record), dict(record)))
        return roster

    return _create


@pytest.fixture
def assigned_row(camper_row):
    """Factory for a camper record that already carries its Round columns."""

    def _create(first="Alice", rounds=("", "", ""), **kwargs):
        row = camper_row(first=first, **kwargs)
        for number, activity in enumerate(rounds, start=1):
            row[f"Round {number}"] = activity
        row["Round Count"] = str(sum(1 for activity in rounds if activity))
        return row

    return _create
