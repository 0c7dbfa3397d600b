import argparse
import logging
import os
import sys
from pydantic import ValidationError
from happy_camper import utils
from happy_camper.filters import FilterManager
from happy_camper.presets import DEFAULT_ROSTERS_FOLDER, preset_from_id
from happy_camper.service import RosterService
from happy_camper.settings import ExportSettings, ImportSettings
from happy_camper.validation.errors import RosterError

FEATURE_CHOICES = "program, preference, swimlevel, medical"


def prompt_settings() -> tuple[ImportSettings, str | None]:
    """Ask for the two files, the session, the features and an optional export path."""
    camper_file = input("Camper roster CSV: ").strip()
    activity_file = input("Activity roster CSV: ").strip()
    session = input("Session number (blank to detect): ").strip()
    features = input(f"Features ({FEATURE_CHOICES}; blank for none): ").strip()
    export_path = input("Export to (blank to skip): ").strip()

    settings = ImportSettings(
        camper_file=camper_file,
        activity_file=activity_file,
        session=session or None,
        enabled_features=features,
    )
    return settings, export_path or None


def run(settings: ImportSettings, export_path: str | None = None) -> int:
    service = RosterService()
    roster = service.create_unified_roster(settings)
    utils.print_report(roster, service.warning_log)

    if roster is not None and export_path:
        filter_manager = FilterManager()
        filter_manager.create_filters_for_roster(roster)
        try:
            destination = service.export_roster(
                roster, filter_manager, ExportSettings(destination=export_path)
            )
        except RosterError as exc:
            logging.error(str(exc))
            return 1
        print(f"Exported roster to {destination}")

    if roster is None or service.warning_log.has_errors():
        return 1
    return 0


def main(argv=None):
    # Default from environment if available
    default_rosters_folder = os.getenv("ROSTERS_FOLDER", DEFAULT_ROSTERS_FOLDER)

    parser = argparse.ArgumentParser(description="HappyCamper roster reconciliation CLI")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose (DEBUG) logging")
    parser.add_argument(
        "--rosters-folder",
        type=str,
        default=default_rosters_folder,
        help=f"Folder that test preset files resolve against (default: {DEFAULT_ROSTERS_FOLDER})",
    )
    parser.add_argument("preset", nargs="*", help="Test preset id; omit for interactive mode")

    args = parser.parse_args(argv)
    utils.setup_logging(verbose=args.verbose)

    export_path = None
    if not args.preset:
        try:
            settings, export_path = prompt_settings()
        except ValidationError as exc:
            logging.error(str(exc))
            sys.exit(1)
    else:
        try:
            if len(args.preset) != 1:
                raise ValueError("expected exactly one argument")
            preset = preset_from_id(int(args.preset[0]))
        except ValueError:
            print("Invalid arguments", file=sys.stderr)
            print("Expects a single integer indicating test preset", file=sys.stderr)
            sys.exit(1)
        for line in preset.report_lines():
            print(line)
        print()
        settings = preset.to_settings(args.rosters_folder)

    sys.exit(run(settings, export_path))


if __name__ == "__main__":
    main()
