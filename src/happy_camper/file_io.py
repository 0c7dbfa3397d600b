import csv
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from happy_camper.constants import export_value
from happy_camper.models import Camper
from happy_camper.validation.errors import FileIssue, RosterError

COMMENT_PREFIX = "#"


@dataclass
class ParsedRow:
    cells: list[str]
    line_number: int


@dataclass
class ParsedCSV:
    """Header list plus raw data rows, with cell counts left exactly as read."""

    headers: list[str] = field(default_factory=list)
    rows: list[ParsedRow] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.rows

    def records(self) -> list[dict[str, str]]:
        """Header -> cell dicts for rows whose cell count matches the header count."""
        return [
            dict(zip(self.headers, row.cells))
            for row in self.rows
            if len(row.cells) == len(self.headers)
        ]


def _normalize_text(s):
    # Replace smart quotes (‘, ’, “, ”) with ASCII quotes
    s = (
        s.replace("’", "'")
        .replace("‘", "'")
        .replace("“", '"')
        .replace("”", '"')
    )
    return re.sub(r"\s+", " ", s.strip())


def _is_skipped(cells: list[str]) -> bool:
    if not cells or all(not cell.strip() for cell in cells):
        return True
    return cells[0].lstrip().startswith(COMMENT_PREFIX)


def parse_csv(filename) -> ParsedCSV:
    """Parse a CSV file into headers and rows, skipping blank and '#' comment lines."""
    path = Path(filename)
    parsed = ParsedCSV()
    try:
        with path.open(newline="", encoding="utf-8-sig") as csvfile:
            reader = csv.reader(csvfile)
            for cells in reader:
                if _is_skipped(cells):
                    continue
                if not parsed.headers:
                    parsed.headers = [name.strip() for name in cells]
                    continue
                parsed.rows.append(
                    ParsedRow([_normalize_text(cell) for cell in cells], reader.line_num)
                )
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        raise RosterError.file_error(
            FileIssue.CANNOT_READ_FILE.text,
            f"Failed to parse CSV file '{path.name}': {e}",
            issue=FileIssue.CANNOT_READ_FILE,
            cause=e,
        ) from e

    logging.debug(f"Parsed {len(parsed.rows)} row(s) from {path.name}")
    return parsed


def write_roster_csv(
    headers: list[str],
    campers: Iterable[Camper],
    output_path,
    use_empty_placeholder: bool = True,
) -> int:
    """Write the given columns of each camper, quoting every field. Returns the row count."""
    output_path = Path(output_path)
    count = 0
    with output_path.open("w", newline="", encoding="utf-8") as csvfile:
        writer = csv.writer(csvfile, quoting=csv.QUOTE_ALL)
        writer.writerow(headers)
        for camper in campers:
            writer.writerow(
                [export_value(camper.get(header), use_empty_placeholder) for header in headers]
            )
            count += 1
    logging.info(f"Roster saved to {output_path}")
    return count
