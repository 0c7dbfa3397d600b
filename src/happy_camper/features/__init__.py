"""
Roster features: rule modules that derive columns on the unified roster.

Features run in registry order, so later features can read what earlier ones
wrote (preference and swim level both read the Round columns from activity).
"""

from happy_camper.features.activity import ActivityFeature
from happy_camper.features.base import RosterFeature
from happy_camper.features.medical import MedicalFeature
from happy_camper.features.preference import PreferenceFeature
from happy_camper.features.program import ProgramFeature
from happy_camper.features.swim_level import SwimLevelFeature
from happy_camper.models import ActivityRoster
from happy_camper.settings import ImportSettings

FEATURE_REGISTRY: tuple[type[RosterFeature], ...] = (
    ActivityFeature,
    ProgramFeature,
    PreferenceFeature,
    SwimLevelFeature,
    MedicalFeature,
)


def create_features(settings: ImportSettings, activity_roster: ActivityRoster) -> list[RosterFeature]:
    """Instantiate the enabled features, configured from settings, in registry order."""
    factories = {
        ActivityFeature.feature_id: lambda: ActivityFeature(
            activity_roster, settings.unmatched_policy, settings.placeholder
        ),
        ProgramFeature.feature_id: lambda: ProgramFeature(settings.session),
        PreferenceFeature.feature_id: lambda: PreferenceFeature(settings.preference),
        SwimLevelFeature.feature_id: lambda: SwimLevelFeature(settings.swim),
        MedicalFeature.feature_id: lambda: MedicalFeature(settings.warn_on_missing_notes),
    }
    return [
        factories[feature.feature_id]()
        for feature in FEATURE_REGISTRY
        if feature.feature_id in settings.enabled_features
    ]


__all__ = [
    "FEATURE_REGISTRY",
    "ActivityFeature",
    "MedicalFeature",
    "PreferenceFeature",
    "ProgramFeature",
    "RosterFeature",
    "SwimLevelFeature",
    "create_features",
]
