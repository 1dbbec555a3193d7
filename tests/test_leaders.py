"""
Tests for statistical leaders normalization.
"""

import pytest

from scoreline.domain.transformers.leaders import (
    clean_display_value, normalize_category, normalize_leaders, transform_leader,
)


def athlete_leader(athlete_id, name, display, value=None, **extra):
    leader = {
        "athlete": {
            "id": athlete_id,
            "displayName": name,
            "headshot": {"href": f"https://img.example/{athlete_id}.png"},
            "team": {"id": "13", "abbreviation": "LAL", "logos": [{"href": "https://logos.example/lal.png"}]},
        },
        "displayValue": display,
    }
    if value is not None:
        leader["value"] = value
    leader.update(extra)
    return leader


class TestDisplayValueCleanup:
    """Verbose upstream strings reduce to a bare number."""

    def test_trailing_digit_run_without_value(self):
        assert clean_display_value("Matches: 10, Goals: 7", None) == "7"

    def test_numeric_value_preferred(self):
        assert clean_display_value("Matches: 10, Goals: 7", 7.0) == "7"
        assert clean_display_value("Avg: 1.5", 1.5) == "1.5"

    def test_plain_strings_untouched(self):
        assert clean_display_value("25.3", None) == "25.3"
        assert clean_display_value("", None) == ""

    def test_no_digits_left_unchanged(self):
        assert clean_display_value("Goals: n/a", None) == "Goals: n/a"


class TestTransformLeader:
    """Entity and value resolution for one leader."""

    def test_athlete_leader(self):
        leader = transform_leader(athlete_leader("3", "LeBron", "25.3", 25.3, rank=4), 0)
        assert (leader.id, leader.name, leader.team) == ("3", "LeBron", "LAL")
        assert leader.team_logo == "https://logos.example/lal.png"
        assert leader.headshot == "https://img.example/3.png"
        assert (leader.value, leader.display_value, leader.rank) == (25.3, "25.3", 4)
        assert not leader.is_team

    def test_team_leader(self):
        raw = {"team": {"id": "13", "displayName": "Lakers", "abbreviation": "LAL"}, "value": 118.2}
        leader = transform_leader(raw, 2)
        assert leader.is_team
        assert (leader.id, leader.name, leader.headshot) == ("13", "Lakers", None)
        assert leader.team_logo is None
        assert leader.display_value == "118.2"
        assert leader.rank == 3

    def test_nested_statistics_preferred(self):
        raw = athlete_leader("9", "Haaland", "Matches: 20, Goals: 1", 1.0,
                             statistics=[{"value": 18.0, "displayValue": "Matches: 20, Goals: 18"}])
        leader = transform_leader(raw, 0)
        assert (leader.value, leader.display_value) == (18.0, "18")

    def test_verbose_display_without_value(self):
        leader = transform_leader(athlete_leader("9", "Haaland", "Matches: 10, Goals: 7"), 0)
        assert leader.display_value == "7"
        assert leader.value == 7.0


class TestCategories:
    """Category shapes and ordering."""

    def test_nested_groups_preferred(self):
        category = {
            "name": "pointsPerGame",
            "displayName": "Points Per Game",
            "groups": [{"athletes": [athlete_leader("1", "First", "30.1"), athlete_leader("2", "Second", "29.0")]}],
            "leaders": [athlete_leader("3", "Ignored", "1.0")],
        }
        normalized = normalize_category(category)
        assert normalized.display_name == "Points Per Game"
        assert [l.name for l in normalized.leaders] == ["First", "Second"]
        assert [l.rank for l in normalized.leaders] == [1, 2]

    def test_flat_leaders_fallback(self):
        category = {"name": "goals", "leaders": [athlete_leader("3", "Striker", "12")]}
        assert [l.name for l in normalize_category(category).leaders] == ["Striker"]

    def test_upstream_order_is_kept(self):
        category = {"name": "x", "leaders": [
            athlete_leader("1", "Low", "1", 1.0),
            athlete_leader("2", "High", "9", 9.0),
        ]}
        assert [l.name for l in normalize_category(category).leaders] == ["Low", "High"]

    @pytest.mark.parametrize("payload", [
        {"leaders": {"categories": [{"name": "pts", "leaders": [athlete_leader("1", "A", "1")]}]}},
        {"categories": [{"name": "pts", "leaders": [athlete_leader("1", "A", "1")]}]},
        {"stats": [{"name": "pts", "leaders": [athlete_leader("1", "A", "1")]}]},
        {"leaders": [{"name": "pts", "leaders": [athlete_leader("1", "A", "1")]}]},
    ])
    def test_document_shapes(self, payload):
        categories = normalize_leaders(payload)
        assert [c.name for c in categories] == ["pts"]

    def test_empty_categories_dropped(self):
        payload = {"categories": [{"name": "empty", "leaders": []}, {"name": "broken"}]}
        assert normalize_leaders(payload) == []
        assert normalize_leaders({}) == []
