"""Import and export configuration."""

from enum import Enum
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from happy_camper.constants import (
    DEFAULT_EXEMPT_ACTIVITIES,
    DEFAULT_SWIM_ACTIVITY_REQUIREMENTS,
    DEFAULT_SWIM_LEVELS,
    PREFERENCE_COUNT,
    UNKNOWN_VALUE,
)

ACTIVITY_FEATURE_ID = "activity"
FEATURE_IDS = (ACTIVITY_FEATURE_ID, "program", "preference", "swimlevel", "medical")


class UnmatchedPolicy(Enum):
    SKIP = "skip"
    ADD = "add"


class ScoringMode(Enum):
    RANKED = "ranked"
    FRACTION = "fraction"


class PreferenceSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: ScoringMode = ScoringMode.RANKED
    preference_count: int = Field(default=PREFERENCE_COUNT, ge=1)
    exempt_activities: tuple[str, ...] = DEFAULT_EXEMPT_ACTIVITIES


class SwimLevelSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    activity_requirements: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_SWIM_ACTIVITY_REQUIREMENTS)
    )
    level_names: dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_SWIM_LEVELS))
    require_all_definitions: bool = True
    flag_unknown_activities: bool = False

    @field_validator("level_names")
    @classmethod
    def validate_level_names(cls, v):
        if not v:
            raise ValueError("at least one swim level is required")
        return v


class ImportSettings(BaseModel):
    """Everything one import run needs: the two files and how to treat their data."""

    model_config = ConfigDict(str_strip_whitespace=True)

    camper_file: Path
    activity_file: Path
    enabled_features: list[str] = Field(default_factory=lambda: [ACTIVITY_FEATURE_ID])
    session: int | None = Field(default=None, ge=1)
    unmatched_policy: UnmatchedPolicy = UnmatchedPolicy.SKIP
    placeholder: str = UNKNOWN_VALUE
    preference: PreferenceSettings = Field(default_factory=PreferenceSettings)
    swim: SwimLevelSettings = Field(default_factory=SwimLevelSettings)
    warn_on_missing_notes: bool = False
    print_stack_traces: bool = False

    @field_validator("enabled_features", mode="before")
    @classmethod
    def validate_enabled_features(cls, v):
        if v is None:
            return []
        if isinstance(v, str):
            return [part.strip() for part in v.split(",") if part.strip()]
        return v

    @field_validator("enabled_features")
    @classmethod
    def validate_known_features(cls, v):
        unknown = [feature_id for feature_id in v if feature_id not in FEATURE_IDS]
        if unknown:
            raise ValueError(f"unknown feature id(s): {', '.join(unknown)}")
        return list(dict.fromkeys(v))

    @model_validator(mode="after")
    def ensure_activity_feature(self):
        # merging assignments is not optional
        if ACTIVITY_FEATURE_ID not in self.enabled_features:
            self.enabled_features.insert(0, ACTIVITY_FEATURE_ID)
        return self


class ExportSettings(BaseModel):
    destination: Path
    all_columns: bool = True
    all_rows: bool = True
    use_empty_placeholder: bool = True
