import re
from happy_camper.constants import UNKNOWN_VALUE
from happy_camper.headers import RosterHeader

NAME_HEADERS = (RosterHeader.FIRST_NAME, RosterHeader.PREFERRED_NAME, RosterHeader.LAST_NAME)


def _spelling(header: RosterHeader, source: str | None) -> str:
    if source == "activity":
        return header.activity_name or header.standard_name
    if source == "camper":
        return header.camper_name or header.standard_name
    return header.standard_name


def normalize_name_part(value: str | None) -> str:
    """
    Normalize one name part for identity matching.

    Examples:
        "  Mary Ann " -> "mary_ann"
        None -> ""
    """
    if not value:
        return ""
    return re.sub(r"\s+", "_", value.strip().lower())


def build_identity_key(row: dict[str, str], source: str | None = None) -> str:
    """
    Build the camper identity key from first, preferred and last name.

    An empty preferred name falls back to the first name, so a roster that leaves
    it blank still matches one that repeats the first name.
    """
    first = normalize_name_part(row.get(_spelling(RosterHeader.FIRST_NAME, source)))
    preferred = normalize_name_part(row.get(_spelling(RosterHeader.PREFERRED_NAME, source)))
    last = normalize_name_part(row.get(_spelling(RosterHeader.LAST_NAME, source)))
    return f"{first}_{preferred or first}_{last}"


def build_name_string(row: dict[str, str]) -> str:
    """Human-readable camper name, e.g. "Robert 'Bobby' Smith" or "Ann Lee"."""

    def _lookup(header: RosterHeader, default: str) -> str:
        for spelling in (header.camper_name, header.activity_name, header.standard_name):
            if spelling and row.get(spelling):
                return row[spelling]
        return default

    first = _lookup(RosterHeader.FIRST_NAME, UNKNOWN_VALUE)
    preferred = _lookup(RosterHeader.PREFERRED_NAME, first)
    last = _lookup(RosterHeader.LAST_NAME, UNKNOWN_VALUE)

    if first == UNKNOWN_VALUE and last == UNKNOWN_VALUE:
        cells = [value for value in row.values() if value]
        return f"Data row ({', '.join(cells)})" if cells else "Empty data row"
    if first == preferred:
        return f"{preferred} {last}"
    return f"{first} '{preferred}' {last}"


def missing_items(required, present) -> list[str]:
    present = set(present)
    return [item for item in required if item not in present]
