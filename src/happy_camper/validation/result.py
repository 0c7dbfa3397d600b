"""Railway-style validation results."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar
from happy_camper.validation.errors import FileIssue, RosterError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Success carrying a value, or failure carrying a summary and explanation.

    Steps are chained with `and_then`; once a step fails, later steps never run and
    the first failure is passed along unchanged.
    """

    value: T | None = None
    error_summary: str | None = None
    error_message: str | None = None
    issue: FileIssue | None = None

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(
        cls, error_summary: str, error_message: str, issue: FileIssue | None = None
    ) -> "ValidationResult[T]":
        return cls(error_summary=error_summary, error_message=error_message, issue=issue)

    @classmethod
    def from_issue(cls, issue: FileIssue, error_message: str) -> "ValidationResult[T]":
        return cls.failure(issue.text, error_message, issue)

    @property
    def is_valid(self) -> bool:
        return self.error_summary is None and self.error_message is None

    def and_then(self, next_check: Callable[[T], "ValidationResult[R]"]) -> "ValidationResult[R]":
        if not self.is_valid:
            return ValidationResult.failure(self.error_summary, self.error_message, self.issue)
        return next_check(self.value)

    def raise_for_failure(self) -> T:
        """Return the value, or raise the failure as a FILE RosterError."""
        if self.is_valid:
            return self.value
        raise RosterError.file_error(self.error_summary, self.error_message, issue=self.issue)
