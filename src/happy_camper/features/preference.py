import logging
from happy_camper.constants import EMPTY_VALUE, is_empty
from happy_camper.features.activity import assignments_for_camper
from happy_camper.features.base import RosterFeature
from happy_camper.headers import RosterHeader
from happy_camper.models import Camper, UnifiedRoster
from happy_camper.settings import PreferenceSettings, ScoringMode
from happy_camper.validation.warning_log import WarningLog

FEATURE_ID = "preference"
# exports join the last two preferences with " and " instead of a comma
PENULTIMATE_TOKEN = " and "


def parse_preference_field(value: str | None) -> list[str]:
    """
    Split a preference list into activity names, in ranked order.

    Examples:
        "Archery, Sailing and Drama" -> ["Archery", "Sailing", "Drama"]
        "" -> []
    """
    if is_empty(value):
        return []
    items = [item.strip() for item in value.split(",")]
    if items and PENULTIMATE_TOKEN in items[-1]:
        last = items.pop()
        items.extend(part.strip() for part in last.split(PENULTIMATE_TOKEN))
    return [item for item in items if item]


def is_exempt(activity: str, settings: PreferenceSettings) -> bool:
    return activity in settings.exempt_activities


def unrequested_activities(
    preferences: list[str], assignments: list[str], settings: PreferenceSettings
) -> list[str]:
    return [
        activity
        for activity in assignments
        if not is_empty(activity) and activity not in preferences and not is_exempt(activity, settings)
    ]


def round_points(
    preferences: list[str], assignments: list[str], settings: PreferenceSettings
) -> list[int]:
    """Points per round: preference_count for a first choice, one less per rank after that."""
    points = []
    for activity in assignments:
        if is_empty(activity) or is_exempt(activity, settings) or activity not in preferences:
            points.append(0)
            continue
        points.append(max(settings.preference_count - preferences.index(activity), 0))
    return points


def max_points(scored_rounds: int, settings: PreferenceSettings) -> int:
    """Best achievable total for the given number of non-exempt rounds (10, 19, 27 with 10 preferences)."""
    return sum(max(settings.preference_count - rank, 0) for rank in range(scored_rounds))


def preference_score(
    preferences: list[str], assignments: list[str], settings: PreferenceSettings
) -> float:
    scored = [a for a in assignments if not is_empty(a) and not is_exempt(a, settings)]

    if settings.mode == ScoringMode.FRACTION:
        requested = [p for p in preferences if not is_exempt(p, settings)]
        possible = min(len(requested), len(scored))
        if possible == 0:
            return 1.0
        received = sum(1 for activity in scored if activity in preferences)
        return received / possible

    best = max_points(len(scored), settings)
    if best == 0:
        return 1.0
    return sum(round_points(preferences, assignments, settings)) / best


def percentiles(scores: dict[str, float]) -> dict[str, float]:
    """Share of scores at or below each camper's score, times 100."""
    values = list(scores.values())
    return {
        camper_id: sum(1 for other in values if other <= score) / len(values) * 100
        for camper_id, score in scores.items()
    }


def format_percent(value: float) -> str:
    return "%.0f" % value


class PreferenceFeature(RosterFeature):
    feature_id = FEATURE_ID
    feature_name = "Preference Evaluation"
    required_headers = (
        RosterHeader.PREFERENCES.standard_name,
        RosterHeader.ROUND_COUNT.standard_name,
    )
    added_headers = (
        RosterHeader.PREFERENCE_SCORE.standard_name,
        RosterHeader.PREFERENCE_PERCENTILE.standard_name,
        RosterHeader.UNREQUESTED_ACTIVITIES.standard_name,
        RosterHeader.SCORE_BY_ROUND.standard_name,
    )

    def __init__(self, settings: PreferenceSettings | None = None):
        self.settings = settings or PreferenceSettings()

    def apply_to_roster(self, roster: UnifiedRoster, log: WarningLog) -> None:
        scores: dict[str, float] = {}
        for camper in roster:
            preferences = parse_preference_field(camper.get(RosterHeader.PREFERENCES.standard_name))
            if not preferences:
                continue
            scores[camper.id] = self.apply_to_camper(camper, preferences)

        for camper_id, percentile in percentiles(scores).items():
            roster.set_value(
                camper_id, RosterHeader.PREFERENCE_PERCENTILE.standard_name, format_percent(percentile)
            )
        logging.debug(f"Scored preferences for {len(scores)} camper(s)")

    def apply_to_camper(self, camper: Camper, preferences: list[str]) -> float:
        assignments = assignments_for_camper(camper)
        points = round_points(preferences, assignments, self.settings)
        score = preference_score(preferences, assignments, self.settings)
        unrequested = unrequested_activities(preferences, assignments, self.settings)

        camper.set(RosterHeader.PREFERENCE_SCORE.standard_name, format_percent(score * 100))
        camper.set(RosterHeader.SCORE_BY_ROUND.standard_name, ", ".join(str(p) for p in points))
        camper.set(
            RosterHeader.UNREQUESTED_ACTIVITIES.standard_name,
            ", ".join(unrequested) if unrequested else EMPTY_VALUE,
        )
        return score
