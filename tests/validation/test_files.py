import os
import pytest
from happy_camper.file_io import parse_csv
from happy_camper.validation import (
    ErrorType,
    FileIssue,
    RosterError,
    check_basic_file,
    check_export_file,
    ensure_extension,
    validate_basic_file,
    validate_csv_file,
)

pytestmark = pytest.mark.unit

REQUIRED = ["First Name", "Last Name", "Grade"]


class TestCheckBasicFile:
    def test_valid_csv(self, csv_path):
        result = check_basic_file(csv_path)
        assert result.is_valid
        assert result.value == csv_path

    def test_none_path(self):
        result = check_basic_file(None)
        assert result.issue == FileIssue.INVALID_FILE

    def test_missing_file(self, tmp_path):
        result = check_basic_file(tmp_path / "nope.csv")
        assert result.issue == FileIssue.FILE_NOT_FOUND
        assert "nope.csv" in result.error_message

    def test_directory_is_not_readable_file(self, tmp_path):
        folder = tmp_path / "folder.csv"
        folder.mkdir()
        result = check_basic_file(folder)
        assert result.issue == FileIssue.CANNOT_READ_FILE

    @pytest.mark.parametrize("name", ["roster.txt", "roster.csv.bak", "roster"])
    def test_wrong_extension(self, tmp_path, name):
        path = tmp_path / name
        path.write_text("First Name\nAlice\n")
        result = check_basic_file(path)
        assert result.issue == FileIssue.INVALID_FILE_EXTENSION
        assert name in result.error_message

    def test_extension_is_case_insensitive(self, tmp_path):
        path = tmp_path / "ROSTER.CSV"
        path.write_text("First Name\nAlice\n")
        assert check_basic_file(path).is_valid

    def test_missing_file_reported_before_extension(self, tmp_path):
        result = check_basic_file(tmp_path / "nope.txt")
        assert result.issue == FileIssue.FILE_NOT_FOUND


class TestValidateBasicFile:
    def test_returns_path(self, csv_path):
        assert validate_basic_file(csv_path) == csv_path

    def test_wrong_extension_raises_file_error(self, tmp_path):
        path = tmp_path / "campers.txt"
        path.write_text("First Name\nAlice\n")
        with pytest.raises(RosterError) as e:
            validate_basic_file(path)
        assert e.value.error_type == ErrorType.FILE
        assert e.value.issue == FileIssue.INVALID_FILE_EXTENSION


class TestValidateCsvFile:
    def test_valid_file(self, write_csv):
        path = write_csv([REQUIRED, ["Alice", "Anderson", "4th"]])
        validate_csv_file(path, parse_csv(path), REQUIRED)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.csv"
        path.write_text("")
        with pytest.raises(RosterError) as e:
            validate_csv_file(path, parse_csv(path), REQUIRED)
        assert e.value.error_type == ErrorType.MISSING_DATA
        assert "contains no data rows" in e.value.explanation

    def test_headers_without_rows(self, write_csv):
        path = write_csv([REQUIRED], "campers.csv")
        with pytest.raises(RosterError) as e:
            validate_csv_file(path, parse_csv(path), REQUIRED)
        assert e.value.error_type == ErrorType.MISSING_DATA
        assert "CSV file 'campers.csv' contains headers but no rows" in e.value.explanation

    def test_missing_header_lists_only_missing(self, write_csv):
        path = write_csv([["First Name", "Last Name"], ["Alice", "Anderson"]], "campers.csv")
        with pytest.raises(RosterError) as e:
            validate_csv_file(path, parse_csv(path), REQUIRED)
        assert e.value.error_type == ErrorType.HEADER
        assert e.value.summary == "File campers.csv lacks required headers"
        assert e.value.table.headers == ("Missing Header", "Required For")
        assert e.value.table.rows == (("Grade", "Basic Setup"),)

    def test_header_match_is_literal(self, write_csv):
        path = write_csv([["first name", "Last Name", "Grade"], ["Alice", "Anderson", "4th"]])
        with pytest.raises(RosterError) as e:
            validate_csv_file(path, parse_csv(path), REQUIRED)
        assert e.value.table.rows == (("First Name", "Basic Setup"),)

    @pytest.mark.parametrize(
        "row, word, count",
        [
            (["Ben", "Brown", "5th", "extra"], "more", 4),
            (["Ben", "Brown"], "fewer", 2),
        ],
    )
    def test_malformed_row_reports_physical_row(self, write_csv, row, word, count):
        path = write_csv([REQUIRED, ["Alice", "Anderson", "4th"], row])
        with pytest.raises(RosterError) as e:
            validate_csv_file(path, parse_csv(path), REQUIRED)
        error = e.value
        assert error.error_type == ErrorType.MALFORMED
        assert word in error.explanation
        assert error.row_number == 3
        assert error.cell_count == count
        assert error.header_count == 3
        assert error.table.rows[0] == ("Malformed Row Index", "3")

    def test_row_number_counts_skipped_lines(self, tmp_path):
        path = tmp_path / "campers.csv"
        path.write_text("# exported roster\nFirst Name,Last Name,Grade\n\nAlice,Anderson\n")
        with pytest.raises(RosterError) as e:
            validate_csv_file(path, parse_csv(path), REQUIRED)
        assert e.value.row_number == 4

    def test_only_first_malformed_row_reported(self, write_csv):
        path = write_csv([REQUIRED, ["Alice"], ["Ben"]])
        with pytest.raises(RosterError) as e:
            validate_csv_file(path, parse_csv(path), REQUIRED)
        assert e.value.row_number == 2


class TestCheckExportFile:
    def test_valid_destination(self, tmp_path):
        result = check_export_file(tmp_path / "out.csv")
        assert result.is_valid

    def test_none_destination(self):
        result = check_export_file(None)
        assert result.error_summary == "No file selected"

    def test_wrong_extension(self, tmp_path):
        result = check_export_file(tmp_path / "out.xlsx")
        assert result.issue == FileIssue.INVALID_FILE_EXTENSION
        assert "csv" in result.error_message

    def test_creates_missing_directory(self, tmp_path):
        result = check_export_file(tmp_path / "nested" / "dir" / "out.csv")
        assert result.is_valid
        assert (tmp_path / "nested" / "dir").is_dir()

    @pytest.mark.skipif(os.name == "nt", reason="pipes are not valid in Windows paths")
    def test_invalid_name_characters(self, tmp_path):
        result = check_export_file(tmp_path / "out|put.csv")
        assert result.issue == FileIssue.INVALID_FILE_NAME


class TestEnsureExtension:
    def test_appends_first_extension(self, tmp_path):
        assert ensure_extension(tmp_path / "out") == tmp_path / "out.csv"

    def test_keeps_existing_extension(self, tmp_path):
        assert ensure_extension(tmp_path / "out.CSV") == tmp_path / "out.CSV"

    def test_none_passes_through(self):
        assert ensure_extension(None) is None
