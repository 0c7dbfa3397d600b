import logging
from happy_camper.constants import EMPTY_VALUE, is_empty
from happy_camper.features.activity import assignments_for_camper
from happy_camper.features.base import RosterFeature
from happy_camper.headers import RosterHeader
from happy_camper.models import Camper, UnifiedRoster
from happy_camper.settings import SwimLevelSettings
from happy_camper.validation.warning_log import RosterWarning, WarningLog

FEATURE_ID = "swimlevel"


class SwimLevelFeature(RosterFeature):
    """Flag assignments that need a stronger swimmer than the camper's swim level."""

    feature_id = FEATURE_ID
    feature_name = "Swim Level Validation"
    required_headers = (RosterHeader.SWIMCOLOR.standard_name,)
    added_headers = (RosterHeader.SWIMCONFLICTS.standard_name,)

    def __init__(self, settings: SwimLevelSettings | None = None):
        self.settings = settings or SwimLevelSettings()
        self.unknown_activities: set[str] = set()

    def apply_to_roster(self, roster: UnifiedRoster, log: WarningLog) -> None:
        self.unknown_activities = set()
        for camper in roster:
            level = camper.get(RosterHeader.SWIMCOLOR.standard_name)
            if is_empty(level):
                log.log_warning(
                    RosterWarning.camper_missing_field(
                        camper.data, RosterHeader.SWIMCOLOR.standard_name, self.feature_name
                    )
                )
                continue
            conflicts = self.incompatible_activities(camper, level, log)
            camper.set(RosterHeader.SWIMCONFLICTS.standard_name, ", ".join(conflicts) if conflicts else EMPTY_VALUE)

        if self.settings.require_all_definitions:
            for activity in sorted(self.unknown_activities):
                log.log_warning(
                    RosterWarning.unknown_swim_activity(activity, self.settings.flag_unknown_activities)
                )
        if self.unknown_activities:
            logging.warning(f"Activities without swim requirements: {', '.join(sorted(self.unknown_activities))}")

    def incompatible_activities(self, camper: Camper, level_name: str, log: WarningLog) -> list[str]:
        level = self.settings.level_names.get(level_name)
        if level is None:
            log.log_warning(RosterWarning.unknown_swim_level(camper.data, level_name, self.settings.level_names))
            return []
        return [
            activity
            for activity in assignments_for_camper(camper)
            if not is_empty(activity) and not self.approve_activity(activity, level)
        ]

    def approve_activity(self, activity: str, level: int) -> bool:
        required = self.settings.activity_requirements.get(activity)
        if required is not None:
            return required <= level
        if not self.settings.require_all_definitions:
            return True
        self.unknown_activities.add(activity)
        return not self.settings.flag_unknown_activities
