import pytest
from happy_camper.features.swim_level import SwimLevelFeature
from happy_camper.settings import SwimLevelSettings
from happy_camper.validation.warning_log import WarningType

pytestmark = pytest.mark.unit


@pytest.fixture
def swim_roster(unified_roster_factory, assigned_row):
    """Factory for a roster of (first name, swim color, rounds) campers."""

    def _create(*campers):
        records = [
            assigned_row(first, rounds=rounds, last="Lake", SwimColor=color)
            for first, color, rounds in campers
        ]
        return unified_roster_factory(records, features=("activity",))

    return _create


def conflicts(roster, first):
    return roster.get_value(f"{first.lower()}_{first.lower()}_lake", "Swim Conflicts")


class TestSwimConflicts:
    def test_compatible_assignments(self, swim_roster, log):
        roster = swim_roster(("Dana", "Blue", ("Sailing", "Skiing", "Archery")))
        feature = SwimLevelFeature()
        assert feature.pre_validate(roster, log)
        feature.apply(roster, log)
        assert conflicts(roster, "Dana") == ""
        assert roster.has_feature("swimlevel")
        assert not log.has_warnings()

    def test_conflicts_listed_in_round_order(self, swim_roster, log):
        roster = swim_roster(("Eli", "Red", ("Sailing", "Paddlesports", "Archery")))
        SwimLevelFeature().apply(roster, log)
        assert conflicts(roster, "Eli") == "Sailing, Paddlesports"

    def test_level_boundary(self, swim_roster, log):
        roster = swim_roster(("Fay", "White", ("Paddlesports", "Sailing", "")))
        SwimLevelFeature().apply(roster, log)
        assert conflicts(roster, "Fay") == "Sailing"

    def test_missing_level(self, swim_roster, log):
        roster = swim_roster(("Hana", "", ("Sailing", "", "")))
        SwimLevelFeature().apply(roster, log)
        assert conflicts(roster, "Hana") == ""
        [warning] = log.warnings(WarningType.CAMPER_MISSING_FIELD)
        assert warning.cells == ("Hana Lake", "SwimColor", "Swim Level Validation")

    def test_unknown_level(self, swim_roster, log):
        roster = swim_roster(("Gus", "Green", ("Sailing", "", "")))
        SwimLevelFeature().apply(roster, log)
        assert conflicts(roster, "Gus") == ""
        [warning] = log.warnings(WarningType.UNKNOWN_SWIM_LEVEL)
        assert warning.cells == ("Gus Lake", "Green", "Blue, White, Red")

    def test_custom_levels(self, swim_roster, log):
        settings = SwimLevelSettings(level_names={"Shark": 2, "Minnow": 0})
        roster = swim_roster(("Dana", "Minnow", ("Sailing", "", "")))
        SwimLevelFeature(settings).apply(roster, log)
        assert conflicts(roster, "Dana") == "Sailing"

    def test_requires_swim_column(self, unified_roster_factory, assigned_row, log):
        roster = unified_roster_factory([assigned_row()])
        assert not SwimLevelFeature().pre_validate(roster, log)


class TestUnknownActivities:
    def test_ignored_once_per_activity(self, swim_roster, log):
        roster = swim_roster(
            ("Dana", "Red", ("Pottery", "", "")),
            ("Eli", "Red", ("Pottery", "Weaving", "")),
        )
        SwimLevelFeature().apply(roster, log)
        assert conflicts(roster, "Eli") == ""
        warnings = log.warnings(WarningType.UNKNOWN_SWIM_ACTIVITY_IGNORED)
        assert [w.cells for w in warnings] == [("Pottery",), ("Weaving",)]

    def test_flagged(self, swim_roster, log):
        settings = SwimLevelSettings(flag_unknown_activities=True)
        roster = swim_roster(("Dana", "Blue", ("Pottery", "Sailing", "")))
        SwimLevelFeature(settings).apply(roster, log)
        assert conflicts(roster, "Dana") == "Pottery"
        assert log.warning_count(WarningType.UNKNOWN_SWIM_ACTIVITY_FLAGGED) == 1

    def test_definitions_not_required(self, swim_roster, log):
        settings = SwimLevelSettings(require_all_definitions=False, flag_unknown_activities=True)
        roster = swim_roster(("Dana", "Red", ("Pottery", "", "")))
        SwimLevelFeature(settings).apply(roster, log)
        assert conflicts(roster, "Dana") == ""
        assert not log.has_warnings()


class TestApproveActivity:
    @pytest.mark.parametrize(
        "activity, level, expected",
        [("Sailing", 2, True), ("Sailing", 1, False), ("Archery", 0, True), ("Paddle Sports", 1, True)],
    )
    def test_known_activities(self, activity, level, expected):
        assert SwimLevelFeature().approve_activity(activity, level) is expected

    def test_unknown_activity_recorded(self):
        feature = SwimLevelFeature()
        assert feature.approve_activity("Pottery", 0)
        assert feature.unknown_activities == {"Pottery"}
