"""Import and export orchestration for one roster session."""

import logging
from pathlib import Path
from happy_camper.features import create_features
from happy_camper.file_io import write_roster_csv
from happy_camper.filters import FilterManager
from happy_camper.importer import (
    check_activity_formats,
    check_camper_formats,
    import_activity_roster,
    import_camper_roster,
    standardize_program_names,
)
from happy_camper.models import UnifiedRoster
from happy_camper.settings import ACTIVITY_FEATURE_ID, ExportSettings, ImportSettings
from happy_camper.validation.errors import RosterError
from happy_camper.validation.files import check_export_file
from happy_camper.validation.warning_log import WarningLog

MERGE_FAILURE = "An error occurred while merging rosters"
EXPORT_FAILURE = "An error occurred while exporting the roster"


class RosterService:
    """Runs imports and exports; keeps the warning log of the latest import."""

    def __init__(self):
        self.warning_log = WarningLog()

    def create_unified_roster(self, settings: ImportSettings) -> UnifiedRoster | None:
        """
        Import both rosters and merge them into one unified roster.

        Returns None when the import failed; the reason is in warning_log.
        """
        self.warning_log = WarningLog()
        log = self.warning_log
        try:
            camper_roster = import_camper_roster(settings.camper_file, log)
            activity_roster = import_activity_roster(settings.activity_file)

            standardize_program_names(camper_roster)
            log.log_warnings(check_camper_formats(camper_roster))
            log.log_warnings(check_activity_formats(activity_roster))

            roster = UnifiedRoster.from_camper_roster(camper_roster)
            for feature in create_features(settings, activity_roster):
                if not feature.pre_validate(roster, log):
                    if feature.feature_id == ACTIVITY_FEATURE_ID:
                        logging.error("Activity assignments could not be merged")
                        return None
                    continue
                feature.apply(roster, log)
                feature.post_validate(roster, log)

            roster.sort_headers()
        except RosterError as e:
            logging.error(str(e))
            log.log_error(e)
            return None
        except Exception as e:
            error = RosterError.wrap(f"{MERGE_FAILURE}: {e}", e)
            if settings.print_stack_traces:
                logging.exception(MERGE_FAILURE)
            else:
                logging.error(error.summary)
            log.log_error(error)
            return None

        logging.info(
            f"Unified roster ready: {len(roster)} camper(s), "
            f"{log.warning_count()} warning(s)"
        )
        return roster

    def export_roster(
        self,
        roster: UnifiedRoster,
        filter_manager: FilterManager | None,
        export_settings: ExportSettings,
    ) -> Path:
        """Write the roster to CSV. Raises RosterError when the destination is unusable."""
        destination = check_export_file(export_settings.destination).raise_for_failure()

        headers = roster.ordered_headers() if export_settings.all_columns else roster.visible_headers()
        campers = roster.campers
        if not export_settings.all_rows and filter_manager is not None:
            campers = filter_manager.filter_records(campers)

        try:
            write_roster_csv(headers, campers, destination, export_settings.use_empty_placeholder)
        except Exception as e:
            raise RosterError.wrap(f"{EXPORT_FAILURE}: {e}", e) from e
        return destination
