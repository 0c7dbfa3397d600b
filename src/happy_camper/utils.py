import logging
from happy_camper.constants import NAME_VERSION, display_value
from happy_camper.models import Roster
from happy_camper.validation.warning_log import WarningLog


def setup_logging(verbose=False):
    stream_log_level = logging.DEBUG if verbose else logging.INFO

    # stream level is set by the verbose arg
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(stream_log_level)

    # file level is alway DEBUG
    file_handler = logging.FileHandler("debug.log")
    file_handler.setLevel(logging.DEBUG)

    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[stream_handler, file_handler],
    )


def format_roster(roster: Roster, headers: list[str] | None = None) -> list[str]:
    """Render the roster as aligned text columns, one line per camper."""
    headers = headers if headers is not None else roster.visible_headers()
    rows = [[display_value(camper.get(h)) for h in headers] for camper in roster]
    widths = [max([len(h)] + [len(row[i]) for row in rows]) for i, h in enumerate(headers)]

    lines = [" | ".join(h.ljust(w) for h, w in zip(headers, widths))]
    lines.append("-+-".join("-" * w for w in widths))
    for row in rows:
        lines.append(" | ".join(cell.ljust(w) for cell, w in zip(row, widths)))
    return lines


def format_warning_log(log: WarningLog) -> list[str]:
    lines = []
    for error in log.errors():
        lines.append(f"ERROR: {error}")
    for warning_type, warnings in log.warning_log.items():
        lines.append(f"WARNING: {warning_type.general_explanation} ({len(warnings)})")
        lines.append(f"  {warning_type.secondary_explanation}")
        for warning in warnings:
            pairs = [f"{h}: {c}" for h, c in zip(warning_type.display_headers, warning.cells)]
            lines.append("  - " + ", ".join(pairs))
    return lines


def print_report(roster: Roster | None, log: WarningLog):
    print(NAME_VERSION)
    print()
    if roster is not None:
        for line in format_roster(roster):
            print(line)
        print()
        print(f"{len(roster)} camper(s)")
        print()
    if not log.has_warnings() and not log.has_errors():
        print("No warnings or errors.")
        return
    for line in format_warning_log(log):
        print(line)
