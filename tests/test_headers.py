import pytest
from happy_camper.headers import RosterHeader, is_round, round_header, round_headers

pytestmark = pytest.mark.unit


class TestRosterHeaderLookup:
    def test_standard_name(self):
        assert RosterHeader.lookup("Round Count") == RosterHeader.ROUND_COUNT

    def test_scoped_to_activity_roster(self):
        assert RosterHeader.lookup("Period", "activity") == RosterHeader.ROUND
        assert RosterHeader.lookup("Cabin", "activity") == RosterHeader.CABIN

    def test_scoped_spelling_absent_from_roster(self):
        assert RosterHeader.lookup("Activity Preferences", "activity") is None
        assert RosterHeader.lookup("Period", "camper") is None

    def test_unknown(self):
        assert RosterHeader.lookup("Shoe Size") is None

    def test_bad_source(self):
        with pytest.raises(ValueError):
            RosterHeader.lookup("Grade", "medical")


class TestRosterHeaderAttributes:
    def test_input_only(self):
        assert {h for h in RosterHeader if h.input_only} == {RosterHeader.ACTIVITY, RosterHeader.ROUND}

    def test_numeric_sort(self):
        assert {h for h in RosterHeader if h.numeric_sort} == {
            RosterHeader.GRADE,
            RosterHeader.PREFERENCE_SCORE,
            RosterHeader.PREFERENCE_PERCENTILE,
        }

    def test_default_visibility(self):
        assert RosterHeader.default_visibility_for("Round 1") is True
        assert RosterHeader.default_visibility_for("First Name") is False
        assert RosterHeader.default_visibility_for("Shoe Size") is True


class TestSortHeaders:
    def test_canonical_order_with_unknown_last(self):
        headers = ["Shoe Size", "Round 2", "Last Name", "Round 1", "Hometown", "First Name"]
        assert RosterHeader.sort_headers(headers) == [
            "First Name",
            "Last Name",
            "Round 1",
            "Round 2",
            "Shoe Size",
            "Hometown",
        ]

    def test_full_canonical_order(self):
        names = [h.standard_name for h in RosterHeader]
        assert RosterHeader.sort_headers(list(reversed(names))) == names


class TestRoundHeaders:
    def test_round_header(self):
        assert round_header(2) == "Round 2"

    def test_round_headers(self):
        assert round_headers() == ["Round 1", "Round 2", "Round 3"]

    @pytest.mark.parametrize(
        "header, expected",
        [("Round 1", True), ("Round 12", True), ("Round Count", False), ("round 1", False)],
    )
    def test_is_round(self, header, expected):
        assert is_round(header) is expected
