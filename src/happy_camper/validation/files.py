"""File-level validation for roster imports and exports."""

import os
import re
from pathlib import Path
from happy_camper.validation.errors import FileIssue, RosterError
from happy_camper.validation.helpers import missing_items
from happy_camper.validation.result import ValidationResult

IMPORT_EXTENSION = ".csv"
INVALID_FILE_NAME_CHARS = re.compile(r'[<>:"|?*$]')


def _check_not_null(path) -> ValidationResult[Path]:
    if path is None:
        return ValidationResult.from_issue(FileIssue.INVALID_FILE, "The file path is null")
    return ValidationResult.success(Path(path))


def _check_exists(path: Path) -> ValidationResult[Path]:
    if not path.exists():
        return ValidationResult.from_issue(
            FileIssue.FILE_NOT_FOUND,
            f"Couldn't find file '{path.name}'\n"
            "It may have been moved or deleted.\n"
            f"Full file path:\n{path}",
        )
    return ValidationResult.success(path)


def _check_readable(path: Path) -> ValidationResult[Path]:
    if not path.is_file() or not os.access(path, os.R_OK):
        return ValidationResult.from_issue(
            FileIssue.CANNOT_READ_FILE,
            f"Cannot read file '{path.name}'\n"
            "Make sure another application isn't using it and you have permission to access it.",
        )
    return ValidationResult.success(path)


def _check_import_extension(path: Path) -> ValidationResult[Path]:
    if not path.name.lower().endswith(IMPORT_EXTENSION):
        return ValidationResult.from_issue(
            FileIssue.INVALID_FILE_EXTENSION,
            f"The file '{path.name}' is not a valid CSV file.\n"
            "Please provide a file with the .csv extension.",
        )
    return ValidationResult.success(path)


def check_basic_file(path) -> ValidationResult[Path]:
    """Existence, readability, then extension; stops at the first failure."""
    return (
        _check_not_null(path)
        .and_then(_check_exists)
        .and_then(_check_readable)
        .and_then(_check_import_extension)
    )


def validate_basic_file(path) -> Path:
    """Raise a FILE RosterError unless the path is an existing, readable .csv file."""
    return check_basic_file(path).raise_for_failure()


def validate_has_content(path: Path, parsed) -> None:
    if not parsed.headers:
        raise RosterError.no_data(Path(path).name, has_headers=False)
    if parsed.is_empty():
        raise RosterError.no_data(Path(path).name, has_headers=True)


def validate_headers(path: Path, parsed, required_headers: list[str] | None) -> None:
    if not required_headers:
        return
    missing = missing_items(required_headers, parsed.headers)
    if missing:
        raise RosterError.missing_headers(path, missing)


def validate_row_consistency(path: Path, parsed) -> None:
    header_count = len(parsed.headers)
    for row in parsed.rows:
        if len(row.cells) != header_count:
            raise RosterError.malformed_row(
                Path(path).name, header_count, len(row.cells), row.line_number
            )


def validate_csv_file(path, parsed, required_headers: list[str] | None = None) -> None:
    """Content, required headers, then per-row cell counts."""
    validate_has_content(path, parsed)
    validate_headers(path, parsed, required_headers)
    validate_row_consistency(path, parsed)


def _check_export_extension(path: Path, extensions: tuple[str, ...]) -> ValidationResult[Path]:
    if not extensions:
        return ValidationResult.success(path)
    name = path.name.lower()
    if not any(name.endswith(f".{ext.lower()}") for ext in extensions):
        return ValidationResult.failure(
            "Invalid file extension",
            f"Invalid file extension. Allowed extensions: {', '.join(extensions)}",
            FileIssue.INVALID_FILE_EXTENSION,
        )
    return ValidationResult.success(path)


def _check_directory(path: Path) -> ValidationResult[Path]:
    parent = path.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError:
            return ValidationResult.from_issue(
                FileIssue.CANNOT_CREATE_DIRECTORY, f"Cannot create directory: {parent.resolve()}"
            )
    return ValidationResult.success(path)


def _check_writable(path: Path) -> ValidationResult[Path]:
    if path.exists() and not os.access(path, os.W_OK):
        return ValidationResult.from_issue(
            FileIssue.CANNOT_WRITE_FILE,
            "Cannot write to file. It may be in use by another application or you don't have permission.",
        )
    return ValidationResult.success(path)


def _check_file_name(path: Path) -> ValidationResult[Path]:
    if INVALID_FILE_NAME_CHARS.search(path.name):
        return ValidationResult.from_issue(
            FileIssue.INVALID_FILE_NAME, "File name contains invalid characters"
        )
    return ValidationResult.success(path)


def check_export_file(path, extensions: tuple[str, ...] = ("csv",)) -> ValidationResult[Path]:
    if path is None:
        return ValidationResult.failure(
            "No file selected", "Please select a file to export to.", FileIssue.INVALID_FILE
        )
    return (
        ValidationResult.success(Path(path))
        .and_then(lambda p: _check_export_extension(p, extensions))
        .and_then(_check_directory)
        .and_then(_check_writable)
        .and_then(_check_file_name)
    )


def ensure_extension(path, extensions: tuple[str, ...] = ("csv",)) -> Path | None:
    """Append the first allowed extension unless the path already has one of them."""
    if path is None or not extensions:
        return path
    path = Path(path)
    name = path.name.lower()
    if any(name.endswith(f".{ext.lower()}") for ext in extensions):
        return path
    return path.with_name(f"{path.name}.{extensions[0]}")
