from happy_camper.constants import is_empty, normalize_empty
from happy_camper.features.base import RosterFeature
from happy_camper.headers import RosterHeader
from happy_camper.models import UnifiedRoster
from happy_camper.validation.warning_log import RosterWarning, WarningLog

FEATURE_ID = "medical"


class MedicalFeature(RosterFeature):
    feature_id = FEATURE_ID
    feature_name = "Medical Notes"
    required_headers = (RosterHeader.MEDICAL_NOTES.standard_name,)

    def __init__(self, warn_on_missing_notes: bool = False):
        self.warn_on_missing_notes = warn_on_missing_notes

    def apply_to_roster(self, roster: UnifiedRoster, log: WarningLog) -> None:
        header = RosterHeader.MEDICAL_NOTES.standard_name
        for camper in roster:
            notes = camper.get(header)
            camper.set(header, normalize_empty(notes))
            if self.warn_on_missing_notes and is_empty(notes):
                log.log_warning(RosterWarning.camper_missing_field(camper.data, header, self.feature_name))
