NAME = "HappyCamper"
VERSION = "2.1.5"
NAME_VERSION = f"{NAME} {VERSION}"

MAX_ROUNDS = 3

EMPTY_VALUE = ""
DISPLAY_EMPTY = " - "
DISPLAY_NO_DATA = "No Data"
EXPORT_EMPTY = ""
UNKNOWN_VALUE = "Unknown"

DEFAULT_EXEMPT_ACTIVITIES = ("Swimming", "Horseback Riding")
PREFERENCE_COUNT = 10

DEFAULT_SWIM_ACTIVITY_REQUIREMENTS = {
    "Sailing": 2,
    "Paddlesports": 1,
    "Paddle Sports": 1,
    "Skiing": 2,
    "Gold Swimming": 2,
    "Archery": 0,
    "Arts & Crafts": 0,
    "Biking": 0,
    "Challenge": 0,
    "Dance": 0,
    "Drama": 0,
    "Horseback Riding": 0,
    "Fishing": 0,
    "Friendship Bracelet": 0,
    "Nature": 0,
    "Sports": 0,
}
DEFAULT_SWIM_LEVELS = {"Blue": 2, "White": 1, "Red": 0}


def is_empty(value: str | None) -> bool:
    """True for None, blank strings, and the display placeholders."""
    if value is None:
        return True
    value = value.strip()
    return value in (EMPTY_VALUE, DISPLAY_NO_DATA, DISPLAY_EMPTY.strip())


def normalize_empty(value: str | None) -> str:
    if is_empty(value):
        return EMPTY_VALUE
    return value.strip()


def display_value(value: str | None, use_placeholder: bool = False) -> str:
    if is_empty(value):
        return DISPLAY_NO_DATA if use_placeholder else DISPLAY_EMPTY
    return value


def export_value(value: str | None, use_placeholder: bool = False) -> str:
    if is_empty(value):
        return DISPLAY_NO_DATA if use_placeholder else EXPORT_EMPTY
    return value
