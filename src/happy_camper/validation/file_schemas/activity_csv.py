from pydantic import BaseModel, ConfigDict, Field, RootModel
from happy_camper.validation.fields import (
    ActivityGradeStr,
    ActivityNameStr,
    PeriodStr,
    OptionalPersonNameStr,
    PersonNameStr,
)


class ActivityCsvRowSchema(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    period: PeriodStr = Field(alias="Period")
    first_name: PersonNameStr = Field(alias="First Name")
    preferred_name: OptionalPersonNameStr = Field(default=None, alias="Preferred Name")
    last_name: PersonNameStr = Field(alias="Last Name")
    grade: ActivityGradeStr = Field(alias="Grade")
    activity: ActivityNameStr = Field(alias="Activity")


class ActivityCsvFileSchema(RootModel[list[ActivityCsvRowSchema]]):
    pass
