"""
Tests for the Scoreboard facade: neutral values at the public boundary.
"""

import logging
from datetime import date
from unittest.mock import patch
from zoneinfo import ZoneInfo

import pytest

from scoreline import Scoreboard, quick_matches, quick_news
from scoreline.config.settings import Settings
from scoreline.core.exceptions import APIServerError, ConfigurationError
from scoreline.domain.models.match import MatchesResult, MatchStatus
from test_utils import FakeEspnClient, make_article, make_event, make_scoreboard, make_standing


class TestConstruction:
    def test_rejects_unregistered_top_league(self):
        with pytest.raises(ConfigurationError):
            Scoreboard(client=FakeEspnClient(), settings=Settings(top_leagues=["nba", "mlb"]))

    def test_rejects_nested_top(self):
        with pytest.raises(ConfigurationError):
            Scoreboard(client=FakeEspnClient(), settings=Settings(top_news_leagues=["top"]))

    @pytest.mark.asyncio
    async def test_borrowed_client_is_not_entered(self):
        client = FakeEspnClient()
        async with Scoreboard(client=client) as board:
            assert board.client is client
        assert not client.entered and not client.exited


class TestPublicContract:
    """Every operation answers with data or a neutral value."""

    @pytest.mark.asyncio
    async def test_end_to_end_nba_scoreboard(self):
        client = FakeEspnClient().route("scoreboard", "nba", "20240315", payload=make_scoreboard(
            make_event("401", "2024-03-15T23:30Z", state="in", home_score="88", away_score="84"),
        ))

        async with Scoreboard(client=client) as board:
            result = await board.get_matches("nba", date(2024, 3, 15), ZoneInfo("America/New_York"))

        (match,) = result.matches
        assert match.status is MatchStatus.LIVE
        assert (match.home_score, match.away_score) == (88, 84)
        assert result.to_dict()["matches"][0]["status"] == "LIVE"

    @pytest.mark.asyncio
    async def test_standings_and_leaders(self):
        client = (
            FakeEspnClient()
            .route("standings", "eng.1", payload={"standings": {"entries": [make_standing("1", "Arsenal", points=65)]}})
            .route("leaders", "eng.1", payload={"stats": [{"name": "goals", "leaders": [
                {"athlete": {"id": "9", "displayName": "Striker"}, "displayValue": "Matches: 10, Goals: 7"},
            ]}]})
        )
        board = Scoreboard(client=client)

        standings = await board.get_standings("eng.1")
        leaders = await board.get_player_leaders("eng.1")

        assert [(e.team.name, e.stats.points) for e in standings] == [("Arsenal", 65)]
        assert leaders[0].leaders[0].display_value == "7"

    @pytest.mark.asyncio
    async def test_top_is_rejected_where_unsupported(self, caplog):
        client = FakeEspnClient()
        board = Scoreboard(client=client)

        with caplog.at_level(logging.WARNING):
            assert await board.get_standings("top") == []
            assert await board.get_player_leaders("top") == []
            assert await board.get_match_detail("401", "top") is None

        assert "top" in caplog.text
        client.get_standings.assert_not_called()
        client.get_leaders.assert_not_called()
        client.get_summary.assert_not_called()

    @pytest.mark.asyncio
    async def test_transport_failures_never_escape(self):
        client = FakeEspnClient()
        for key in (("standings", "nba"), ("leaders", "nba"), ("news", "nba"), ("summary", "nba", "1")):
            client.route(*key, payload=APIServerError(500))
        board = Scoreboard(client=client)

        assert await board.get_standings("nba") == []
        assert await board.get_player_leaders("nba") == []
        assert await board.get_news("nba") == []
        assert await board.get_match_detail("1", "nba") is None

    @pytest.mark.asyncio
    async def test_unknown_league_everywhere(self):
        board = Scoreboard(client=FakeEspnClient())
        assert await board.get_matches("curling", date(2024, 3, 15)) == MatchesResult()
        assert await board.get_standings("curling") == []
        assert await board.get_news("curling") == []


class TestQuickFunctions:
    """Module-level helpers open and close their own client."""

    @pytest.mark.asyncio
    async def test_quick_news(self):
        client = FakeEspnClient().route("news", "nba", payload={"articles": [make_article("Buzzer beater")]})
        with patch("scoreline.scoreboard.EspnClient", return_value=client):
            articles = await quick_news("nba")

        assert [a.headline for a in articles] == ["Buzzer beater"]
        assert client.entered and client.exited

    @pytest.mark.asyncio
    async def test_quick_matches(self):
        client = FakeEspnClient()
        with patch("scoreline.scoreboard.EspnClient", return_value=client):
            result = await quick_matches("nba", date(2024, 3, 15))

        assert result == MatchesResult()
        assert client.get_scoreboard.await_count == 2
        assert client.exited
