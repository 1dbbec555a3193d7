"""
Tests for roster and box-score extraction in both upstream encodings.
"""

from scoreline.domain.transformers.rosters import extract_players, is_flat, is_grouped


def grouped_payload():
    return {
        "team": {"id": "1"},
        "statistics": [
            {
                "name": "starters",
                "labels": ["PTS", "REB"],
                "athletes": [{
                    "athlete": {
                        "id": "23",
                        "displayName": "Big Man",
                        "position": {"abbreviation": "C", "displayName": "Center"},
                        "jersey": "12",
                        "headshot": {"href": "https://img.example/23.png"},
                    },
                    "stats": ["24", "10"],
                }],
            },
            {
                "name": "bench",
                "labels": ["PTS", "REB"],
                "athletes": [
                    {"athlete": {"id": "5", "displayName": "Sixth Man"}, "stats": ["8"]},
                    {"athlete": {"id": "6", "displayName": "Starter On Bench"}, "starter": True, "stats": [None, 2.0]},
                ],
            },
        ],
    }


def flat_payload():
    return {
        "team": {"id": "360"},
        "roster": [
            {
                "athlete": {"id": "9", "displayName": "Striker", "position": {"abbreviation": "F"}},
                "jersey": "9",
                "starter": True,
                "active": True,
                "formationPlace": "9",
                "subbedOut": {"didSub": True},
                "stats": [
                    {"name": "totalGoals", "displayValue": "2", "value": 2.0},
                    {"abbreviation": "SH", "value": 5.0},
                    {"name": "foulsCommitted"},
                ],
            },
            {
                "athlete": {"id": "14", "displayName": "Super Sub"},
                "starter": False,
                "subbedIn": True,
                "stats": {"totalGoals": 1, "appearances": "1"},
            },
        ],
    }


class TestGroupedForm:
    """Labels zipped with positional athlete stats."""

    def test_labels_zip_with_stats(self):
        star = extract_players(grouped_payload())[0]
        assert star.stats == {"PTS": "24", "REB": "10"}

    def test_identity_fields(self):
        star = extract_players(grouped_payload())[0]
        assert (star.id, star.name, star.position, star.position_name, star.jersey) == (
            "23", "Big Man", "C", "Center", "12",
        )
        assert star.headshot == "https://img.example/23.png"

    def test_starter_from_group_name_and_category(self):
        star, sixth, _ = extract_players(grouped_payload())
        assert star.is_starter and star.category == "starters"
        assert not sixth.is_starter and sixth.category == "bench"

    def test_explicit_starter_flag_wins(self):
        flagged = extract_players(grouped_payload())[2]
        assert flagged.is_starter

    def test_missing_values_are_omitted(self):
        _, sixth, flagged = extract_players(grouped_payload())
        assert sixth.stats == {"PTS": "8"}
        assert flagged.stats == {"REB": "2"}

    def test_detection(self):
        assert is_grouped(grouped_payload())
        assert not is_flat(grouped_payload())


class TestFlatForm:
    """Roster entries carrying their own stats."""

    def test_stat_pairs_prefer_display_value(self):
        striker = extract_players(flat_payload())[0]
        assert striker.stats == {"totalGoals": "2", "SH": "5"}

    def test_stat_mapping(self):
        sub = extract_players(flat_payload())[1]
        assert sub.stats == {"totalGoals": "1", "appearances": "1"}

    def test_flags(self):
        striker, sub = extract_players(flat_payload())
        assert striker.is_starter and striker.category == "starters"
        assert striker.active is True
        assert striker.formation_place == 9
        assert striker.subbed_out is True and striker.subbed_in is None
        assert not sub.is_starter and sub.category == "substitutes"
        assert sub.subbed_in is True and sub.active is None

    def test_detection(self):
        assert is_flat(flat_payload())
        assert not is_grouped(flat_payload())


class TestUnknownShapes:
    def test_empty_and_garbage_payloads(self):
        assert extract_players({}) == []
        assert extract_players(None) == []
        assert extract_players({"statistics": "nope", "roster": 5}) == []
