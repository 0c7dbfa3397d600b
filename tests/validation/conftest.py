import pytest
from happy_camper.validation.warning_log import WarningType


def assert_error_for_field(errors, field, msg_substring=None):
    # row-schema errors are located by alias; file-schema errors by (row index, alias)
    matching = [e for e in errors if e["loc"] and field in e["loc"]]

    assert matching, {
        "expected_field": field,
        "all_errors": errors,
    }

    if msg_substring:
        assert any(msg_substring in e["msg"] for e in matching), {
            "expected_message": msg_substring,
            "matching_errors": matching,
            "all_errors": errors,
        }


def assert_warning_for_column(warnings, column, value=None):
    matching = [
        w for w in warnings if w.type == WarningType.BAD_DATA_FORMAT and w.cells[1] == column
    ]

    assert matching, {
        "expected_column": column,
        "all_warnings": [str(w) for w in warnings],
    }

    if value is not None:
        assert any(w.cells[2] == value for w in matching), {
            "expected_value": value,
            "matching_warnings": [str(w) for w in matching],
        }


@pytest.fixture
def csv_path(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text("First Name\nAlice\n", encoding="utf-8")
    return path
