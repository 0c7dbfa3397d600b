from pydantic import BaseModel, ConfigDict, Field, RootModel
from happy_camper.validation.fields import (
    CamperGradeStr,
    EnrollmentStr,
    OptionalPersonNameStr,
    OptionalPreferenceListStr,
    PersonNameStr,
)


class CamperCsvRowSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    first_name: PersonNameStr = Field(alias="First Name")
    preferred_name: OptionalPersonNameStr = Field(default=None, alias="Preferred Name")
    last_name: PersonNameStr = Field(alias="Last Name")
    grade: CamperGradeStr = Field(alias="Grade")
    enrolled_sessions_programs: EnrollmentStr = Field(alias="Enrolled Sessions/Programs")
    activity_preferences: OptionalPreferenceListStr = Field(default=None, alias="Activity Preferences")


class CamperCsvFileSchema(RootModel[list[CamperCsvRowSchema]]):
    pass
