import logging
from abc import ABC, abstractmethod
from happy_camper.models import UnifiedRoster
from happy_camper.validation.warning_log import RosterWarning, WarningLog


class RosterFeature(ABC):
    """A rule module that derives columns on the unified roster.

    The service calls pre_validate, then apply, then post_validate. A False from
    pre_validate means the feature is skipped for this run.
    """

    feature_id: str = ""
    feature_name: str = ""
    required_headers: tuple[str, ...] = ()
    added_headers: tuple[str, ...] = ()

    def pre_validate(self, roster: UnifiedRoster, log: WarningLog) -> bool:
        missing = [h for h in self.required_headers if not roster.has_header(h)]
        for header in missing:
            log.log_warning(RosterWarning.missing_feature_header(header, self.feature_name))
        if missing:
            logging.warning(f"Skipping {self.feature_name}: missing {', '.join(missing)}")
        return not missing

    def apply(self, roster: UnifiedRoster, log: WarningLog) -> None:
        for header in self.added_headers:
            roster.add_header(header)
        self.apply_to_roster(roster, log)
        roster.enable_feature(self.feature_id)
        logging.debug(f"Applied feature {self.feature_id}")

    @abstractmethod
    def apply_to_roster(self, roster: UnifiedRoster, log: WarningLog) -> None: ...

    def post_validate(self, roster: UnifiedRoster, log: WarningLog) -> bool:
        return True
