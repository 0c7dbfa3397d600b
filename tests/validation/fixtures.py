"""Shared test data factories for validation test suite.

These factories create default test data that can be customized via overrides.
Use the convention: call factory with defaults, only override what you're testing.

Example:
    schema = CamperCsvRowSchema.model_validate(camper_data({"Grade": "13th"}))
"""


def camper_data(overrides: dict | None = None) -> dict:
    """Factory for valid CamperCsvRowSchema test data.

    Creates a default camper enrolled in one session.
    """
    defaults = {
        "First Name": "Alice",
        "Preferred Name": "Ali",
        "Last Name": "Anderson",
        "Grade": "4th",
        "Enrolled Sessions/Programs": "Session 1/Adventure Camp",
        "Activity Preferences": "Archery, Sailing and Drama",
    }
    return {**defaults, **(overrides or {})}


def activity_data(overrides: dict | None = None) -> dict:
    """Factory for valid ActivityCsvRowSchema test data.

    Creates a default first-period assignment.
    """
    defaults = {
        "Period": "1",
        "First Name": "Alice",
        "Preferred Name": "Ali",
        "Last Name": "Anderson",
        "Grade": "4th",
        "Cabin": "Pine",
        "Activity": "Archery",
    }
    return {**defaults, **(overrides or {})}
