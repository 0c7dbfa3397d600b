"""Roster error handling and wrapping."""

import traceback
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

MAX_ROWS_DISPLAYED = 10


class ErrorType(Enum):
    MALFORMED = "malformed"
    MISSING_DATA = "missing_data"
    HEADER = "header"
    FILE = "file"
    INTERNAL = "internal"
    WRAPPER = "wrapper"


class FileIssue(Enum):
    INVALID_FILE = "Invalid File"
    FILE_NOT_FOUND = "File Not Found"
    INVALID_FILE_EXTENSION = "Invalid File Extension"
    CANNOT_READ_FILE = "Cannot Read File"
    MISSING_DATA = "Missing Data"
    MALFORMED_DATA = "Malformed Data"
    MISSING_HEADERS = "Missing Headers"
    CANNOT_CREATE_DIRECTORY = "Cannot Create Directory"
    CANNOT_WRITE_FILE = "Cannot Write To File"
    INVALID_FILE_NAME = "Invalid File Name"

    @property
    def text(self) -> str:
        return self.value


@dataclass(frozen=True)
class TableData:
    """Tabular context attached to an error for detailed display."""

    headers: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]

    @classmethod
    def of(cls, headers, rows) -> "TableData":
        return cls(tuple(headers), tuple(tuple(str(cell) for cell in row) for row in rows))


class RosterError(Exception):
    """User-facing import/export failure, categorized by ErrorType."""

    def __init__(
        self,
        error_type: ErrorType,
        summary: str,
        explanation: str,
        table: TableData | None = None,
        issue: FileIssue | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(summary)
        self.error_type = error_type
        self.summary = summary
        self.explanation = explanation
        self.table = table
        self.issue = issue
        self.cause = cause
        # set for MALFORMED errors
        self.row_number: int | None = None
        self.cell_count: int | None = None
        self.header_count: int | None = None

    @property
    def is_wrapper(self) -> bool:
        return self.cause is not None

    @property
    def has_table(self) -> bool:
        return self.table is not None and bool(self.table.headers) and bool(self.table.rows)

    def __str__(self) -> str:
        lines = [f"{self.summary}"]
        lines.extend(f"  {line}" for line in self.explanation.splitlines() if line.strip())

        if self.has_table:
            for row in self.table.rows[:MAX_ROWS_DISPLAYED]:
                cells = [f"{h.strip()}: {c}" if h.strip() else c for h, c in zip(self.table.headers, row)]
                lines.append("  - " + ", ".join(cells))
            if len(self.table.rows) > MAX_ROWS_DISPLAYED:
                remaining = len(self.table.rows) - MAX_ROWS_DISPLAYED
                lines.append(f"  ... and {remaining} more row(s)")

        return "\n".join(lines)

    @classmethod
    def file_error(
        cls, summary: str, explanation: str, issue: FileIssue | None = None, cause=None
    ) -> "RosterError":
        return cls(ErrorType.FILE, summary, explanation, issue=issue, cause=cause)

    @classmethod
    def malformed_row(
        cls, file_name: str, header_count: int, cell_count: int, row_number: int
    ) -> "RosterError":
        comparison_word = "more" if cell_count > header_count else "fewer"
        summary = "Malformed data detected - double check file contents before selecting"
        explanation = f"A row in file '{file_name}' has {comparison_word} columns than the header row."
        table = TableData.of(
            (" ", " "),
            [
                ("Malformed Row Index", row_number),
                ("Items in row", cell_count),
                ("Number of headers (rows should match this)", header_count),
            ],
        )
        error = cls(
            ErrorType.MALFORMED, summary, explanation, table=table, issue=FileIssue.MALFORMED_DATA
        )
        error.row_number = row_number
        error.cell_count = cell_count
        error.header_count = header_count
        return error

    @classmethod
    def no_data(cls, file_name: str | None, has_headers: bool) -> "RosterError":
        file_reference = f"CSV file '{file_name}'" if file_name else "Provided file"
        missing_content = " contains headers but no rows." if has_headers else " contains no data rows."
        explanation = f"{file_reference}{missing_content}\nDouble check file contents before selecting."
        return cls(
            ErrorType.MISSING_DATA,
            "Missing data detected",
            explanation,
            issue=FileIssue.MISSING_DATA,
        )

    @classmethod
    def missing_headers(
        cls, file_path: str | Path, headers: list[str], required_for: str = "Basic Setup"
    ) -> "RosterError":
        table = TableData.of(("Missing Header", "Required For"), [(h, required_for) for h in headers])
        return cls(
            ErrorType.HEADER,
            f"File {Path(file_path).name} lacks required headers",
            "Check the user guide for more context",
            table=table,
            issue=FileIssue.MISSING_HEADERS,
        )

    @classmethod
    def internal(cls, summary: str, explanation: str) -> "RosterError":
        return cls(ErrorType.INTERNAL, f"Internal Error: {summary}", explanation)

    @classmethod
    def wrap(cls, summary: str, exc: BaseException) -> "RosterError":
        """Wrap an unexpected exception, keeping its traceback as table rows."""
        trace_lines = [
            line.rstrip()
            for chunk in traceback.format_exception(type(exc), exc, exc.__traceback__)
            for line in chunk.splitlines()
            if line.strip()
        ]
        return cls(
            ErrorType.WRAPPER,
            summary,
            "If this keeps happening, try using a different file, or report the problem.",
            table=TableData.of(("Stack Trace",), [(line,) for line in trace_lines]),
            cause=exc,
        )
