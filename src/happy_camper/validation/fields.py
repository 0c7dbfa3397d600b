from typing import Annotated
from pydantic import BeforeValidator, StringConstraints

SESSION_PROGRAM = r"Session [1-6][AB]?(-[1-6][AB]?)?/[A-Za-z ,-]+"
SESSION_PROGRAM_OR_EXTRA = rf"({SESSION_PROGRAM}|.*Family Camp.*|.*Echo Corps.*)"

ENROLLMENT_PATTERN = rf"^{SESSION_PROGRAM_OR_EXTRA}( and {SESSION_PROGRAM_OR_EXTRA})*$"
PERSON_NAME_PATTERN = r"^[A-Za-zÁÉÍÓÚáéíóúÑñüÜ '’.,/()-]+$"
CAMPER_GRADE_PATTERN = r"^(1st|2nd|3rd|[4-9]th|1[0-2]th|12th\+)$"
ACTIVITY_GRADE_PATTERN = r"^(1st|2nd|3rd|4th|5th|6th|7th|8th|9th|10th|11th|12th|12th\+)$"
PERIOD_PATTERN = r"^(1|2|3)$"
ACTIVITY_NAME_PATTERN = r"^.+$"
PREFERENCE_LIST_PATTERN = r"^[^,]+(,[^,]+)*(\s+and\s+[^,]+)?$"

PersonNameStr = Annotated[str, StringConstraints(pattern=PERSON_NAME_PATTERN)]
CamperGradeStr = Annotated[str, StringConstraints(pattern=CAMPER_GRADE_PATTERN)]
ActivityGradeStr = Annotated[str, StringConstraints(pattern=ACTIVITY_GRADE_PATTERN)]
EnrollmentStr = Annotated[str, StringConstraints(pattern=ENROLLMENT_PATTERN)]
PeriodStr = Annotated[str, StringConstraints(pattern=PERIOD_PATTERN)]
ActivityNameStr = Annotated[str, StringConstraints(pattern=ACTIVITY_NAME_PATTERN)]
PreferenceListStr = Annotated[str, StringConstraints(pattern=PREFERENCE_LIST_PATTERN)]


def blank_to_none(v):
    if isinstance(v, str) and not v.strip():
        return None
    return v


OptionalPreferenceListStr = Annotated[PreferenceListStr | None, BeforeValidator(blank_to_none)]
OptionalPersonNameStr = Annotated[PersonNameStr | None, BeforeValidator(blank_to_none)]
