"""
Validation layer for HappyCamper roster imports.

This module checks roster files before and after parsing and records what went
wrong. It validates paths and in-memory structures only; file IO happens elsewhere.

Public API:
  - Schemas: Direct Pydantic validation of parsed rows (CamperCsvFileSchema, ActivityCsvFileSchema)
  - File checks: path and content validation (validate_basic_file, validate_csv_file, check_export_file)
  - Results and errors: ValidationResult, RosterError and its categories
  - Warning log: per-run warnings and errors (WarningLog, RosterWarning, WarningType)
"""

# Errors
from happy_camper.validation.errors import ErrorType, FileIssue, RosterError, TableData

# Schemas for direct Pydantic validation
from happy_camper.validation.file_schemas.activity_csv import (
    ActivityCsvFileSchema,
    ActivityCsvRowSchema,
)
from happy_camper.validation.file_schemas.camper_csv import (
    CamperCsvFileSchema,
    CamperCsvRowSchema,
)

# File and content checks
from happy_camper.validation.files import (
    check_basic_file,
    check_export_file,
    ensure_extension,
    validate_basic_file,
    validate_csv_file,
)
from happy_camper.validation.result import ValidationResult

# Warning log
from happy_camper.validation.warning_log import (
    RosterWarning,
    WarningLog,
    WarningType,
    warnings_from_validation_error,
)

__all__ = [
    "ActivityCsvFileSchema",
    "ActivityCsvRowSchema",
    "CamperCsvFileSchema",
    "CamperCsvRowSchema",
    "ErrorType",
    "FileIssue",
    "RosterError",
    "RosterWarning",
    "TableData",
    "ValidationResult",
    "WarningLog",
    "WarningType",
    "check_basic_file",
    "check_export_file",
    "ensure_extension",
    "validate_basic_file",
    "validate_csv_file",
    "warnings_from_validation_error",
]
