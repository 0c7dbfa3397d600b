import pytest
from happy_camper.validation.errors import ErrorType, FileIssue, RosterError
from happy_camper.validation.result import ValidationResult

pytestmark = pytest.mark.unit


class TestValidationResult:
    def test_success_is_valid(self):
        result = ValidationResult.success(42)
        assert result.is_valid
        assert result.value == 42
        assert result.issue is None

    def test_failure_is_not_valid(self):
        result = ValidationResult.failure("Summary", "Details", FileIssue.FILE_NOT_FOUND)
        assert not result.is_valid
        assert result.error_summary == "Summary"
        assert result.error_message == "Details"
        assert result.issue == FileIssue.FILE_NOT_FOUND

    def test_from_issue_uses_issue_text_as_summary(self):
        result = ValidationResult.from_issue(FileIssue.CANNOT_READ_FILE, "locked")
        assert result.error_summary == "Cannot Read File"
        assert result.issue == FileIssue.CANNOT_READ_FILE

    def test_and_then_runs_next_step_on_success(self):
        result = ValidationResult.success(2).and_then(lambda v: ValidationResult.success(v * 10))
        assert result.is_valid
        assert result.value == 20

    def test_and_then_short_circuits_on_failure(self):
        calls = []

        def step(value):
            calls.append(value)
            return ValidationResult.success(value)

        failed = ValidationResult.from_issue(FileIssue.INVALID_FILE, "null path")
        result = failed.and_then(step).and_then(step)

        assert calls == []
        assert result.error_summary == failed.error_summary
        assert result.error_message == failed.error_message
        assert result.issue == FileIssue.INVALID_FILE

    def test_first_failure_wins(self):
        result = (
            ValidationResult.success(1)
            .and_then(lambda v: ValidationResult.failure("First", "first failure"))
            .and_then(lambda v: ValidationResult.failure("Second", "second failure"))
        )
        assert result.error_summary == "First"

    def test_raise_for_failure_returns_value(self):
        assert ValidationResult.success("ok").raise_for_failure() == "ok"

    def test_raise_for_failure_raises_file_error(self):
        result = ValidationResult.from_issue(FileIssue.FILE_NOT_FOUND, "gone")
        with pytest.raises(RosterError) as e:
            result.raise_for_failure()
        assert e.value.error_type == ErrorType.FILE
        assert e.value.issue == FileIssue.FILE_NOT_FOUND
        assert e.value.explanation == "gone"

    def test_result_is_frozen(self):
        result = ValidationResult.success(1)
        with pytest.raises(AttributeError):
            result.value = 2
