from dataclasses import dataclass, field
from happy_camper.constants import EMPTY_VALUE
from happy_camper.headers import RosterHeader


@dataclass
class Camper:
    """One roster row: an identity key plus header -> value cells."""

    id: str
    data: dict[str, str] = field(default_factory=dict)

    def get(self, header: str) -> str | None:
        return self.data.get(header)

    def set(self, header: str, value: str) -> None:
        self.data[header] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self.data)


class Roster:
    """Ordered headers plus records that all expose the same header set."""

    source: str | None = None
    unique_ids = True

    def __init__(self):
        self._headers: list[str] = []
        self._visibility: dict[str, bool] = {}
        self._campers: list[Camper] = []
        self._index: dict[str, Camper] = {}

    def __len__(self):
        return len(self._campers)

    def __iter__(self):
        return iter(self._campers)

    @property
    def campers(self) -> list[Camper]:
        return list(self._campers)

    @property
    def headers(self) -> list[str]:
        return list(self._headers)

    def has_header(self, header: str | RosterHeader) -> bool:
        if isinstance(header, RosterHeader):
            header = header.standard_name
        return header in self._visibility

    def add_header(self, header: str | RosterHeader, default: str = EMPTY_VALUE) -> None:
        """Add a header if new, filling `default` into every record that lacks it."""
        if isinstance(header, RosterHeader):
            header = header.standard_name
        if header not in self._visibility:
            self._headers.append(header)
            self._visibility[header] = RosterHeader.default_visibility_for(header)
        for camper in self._campers:
            if header not in camper.data:
                camper.set(header, default)

    def add_camper(self, camper: Camper) -> None:
        if self.unique_ids and camper.id in self._index:
            raise ValueError(f"duplicate camper id: {camper.id}")
        for header in camper.data:
            if header not in self._visibility:
                self.add_header(header)
        for header in self._headers:
            camper.data.setdefault(header, EMPTY_VALUE)
        self._campers.append(camper)
        self._index.setdefault(camper.id, camper)

    def has_camper(self, camper_id: str) -> bool:
        return camper_id in self._index

    def get_camper(self, camper_id: str) -> Camper | None:
        return self._index.get(camper_id)

    def get_value(self, camper_id: str, header: str) -> str | None:
        camper = self.get_camper(camper_id)
        if camper is None:
            return None
        return camper.get(header)

    def set_value(self, camper_id: str, header: str, value: str) -> None:
        camper = self.get_camper(camper_id)
        if camper is None:
            return
        if not self.has_header(header):
            self.add_header(header)
        camper.set(header, value)

    def ordered_headers(self) -> list[str]:
        return RosterHeader.sort_headers(self._headers)

    def sort_headers(self) -> None:
        self._headers = self.ordered_headers()

    def visible_headers(self) -> list[str]:
        return [h for h in self.ordered_headers() if self._visibility[h]]

    def is_header_visible(self, header: str | RosterHeader) -> bool:
        if isinstance(header, RosterHeader):
            header = header.standard_name
        return self._visibility.get(header, True)

    def set_header_visibility(self, header: str | RosterHeader, visible: bool) -> None:
        if isinstance(header, RosterHeader):
            header = header.standard_name
        if header in self._visibility:
            self._visibility[header] = visible

    def set_headers_visibility(self, headers: list[str], visible: bool) -> None:
        for header in headers:
            self.set_header_visibility(header, visible)

    def set_all_headers_visibility(self, visible: bool) -> None:
        for header in self._headers:
            self._visibility[header] = visible

    def reset_header_visibility(self) -> None:
        for header in self._headers:
            self._visibility[header] = RosterHeader.default_visibility_for(header)

    def header_visibility(self) -> dict[str, bool]:
        return {h: self._visibility[h] for h in self.ordered_headers()}


class CamperRoster(Roster):
    source = "camper"
    REQUIRED_HEADERS = [
        RosterHeader.FIRST_NAME.camper_name,
        RosterHeader.PREFERRED_NAME.camper_name,
        RosterHeader.LAST_NAME.camper_name,
        RosterHeader.GRADE.camper_name,
        RosterHeader.ESP.camper_name,
    ]


class ActivityRoster(Roster):
    # one row per assignment, so a camper's key repeats
    source = "activity"
    unique_ids = False
    REQUIRED_HEADERS = [
        RosterHeader.ROUND.activity_name,
        RosterHeader.FIRST_NAME.activity_name,
        RosterHeader.PREFERRED_NAME.activity_name,
        RosterHeader.LAST_NAME.activity_name,
        RosterHeader.GRADE.activity_name,
        RosterHeader.ACTIVITY.activity_name,
    ]


class UnifiedRoster(Roster):
    """Camper roster enriched with assignments and derived feature columns."""

    def __init__(self):
        super().__init__()
        self._enabled_features: set[str] = set()

    @classmethod
    def from_camper_roster(cls, camper_roster: CamperRoster) -> "UnifiedRoster":
        roster = cls()
        for header in camper_roster.headers:
            roster.add_header(header)
        for camper in camper_roster:
            roster.add_camper(Camper(camper.id, camper.snapshot()))
        return roster

    def enable_feature(self, feature_id: str) -> None:
        self._enabled_features.add(feature_id)

    def has_feature(self, feature_id: str) -> bool:
        return feature_id in self._enabled_features

    @property
    def enabled_features(self) -> frozenset[str]:
        return frozenset(self._enabled_features)
