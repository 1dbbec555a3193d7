"""
Tests for the ESPN client against a fake aiohttp session (no network).
"""

import asyncio
from unittest.mock import AsyncMock

import aiohttp
import pytest

from scoreline.adapters.external.espn_client import APIResponse, EspnClient
from scoreline.config.settings import Settings
from scoreline.core.exceptions import (
    APIConnectionError, APINotFoundError, APIResponseError, APIServerError, APITimeoutError,
)
from scoreline.domain.models.league import get_league

SITE = "https://site.api.espn.com/apis/site/v2/sports"


class FakeResponse:
    def __init__(self, status=200, payload=None, json_error=None, text="error body"):
        self.status = status
        self._payload = payload if payload is not None else {}
        self._json_error = json_error
        self._text = text

    async def json(self, content_type="application/json"):
        if self._json_error:
            raise self._json_error
        return self._payload

    async def text(self):
        return self._text


class FakeRequest:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error

    async def __aenter__(self):
        if self.error:
            raise self.error
        return self.response

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        return False


class FakeSession:
    """Records every GET and answers with one canned response or error."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []
        self.close = AsyncMock()

    def get(self, url, params=None):
        self.calls.append((url, params))
        return FakeRequest(self.response, self.error)


def client_with(session):
    return EspnClient(settings=Settings(), session=session)


class TestUrlBuilding:
    """Per-family endpoint routing."""

    @pytest.mark.asyncio
    async def test_scoreboard(self):
        session = FakeSession()
        await client_with(session).get_scoreboard(get_league("nba"), "20240315")
        assert session.calls == [(f"{SITE}/basketball/nba/scoreboard", {"dates": "20240315"})]

    @pytest.mark.asyncio
    async def test_summary_and_team(self):
        session = FakeSession()
        client = client_with(session)
        await client.get_summary(get_league("eng.1"), "700")
        await client.get_team(get_league("nba"), "2")
        assert session.calls == [
            (f"{SITE}/soccer/eng.1/summary", {"event": "700"}),
            (f"{SITE}/basketball/nba/teams/2", None),
        ]

    @pytest.mark.asyncio
    async def test_standings(self):
        session = FakeSession()
        await client_with(session).get_standings(get_league("nfl"))
        assert session.calls[0][0] == "https://site.api.espn.com/apis/v2/sports/football/nfl/standings"

    @pytest.mark.asyncio
    async def test_leaders_per_family(self):
        session = FakeSession()
        client = client_with(session)
        await client.get_leaders(get_league("nba"))
        await client.get_leaders(get_league("esp.1"))
        assert [url for url, _ in session.calls] == [
            "https://site.web.api.espn.com/apis/site/v3/sports/basketball/nba/leaders",
            f"{SITE}/soccer/esp.1/statistics",
        ]

    @pytest.mark.asyncio
    async def test_news_params(self):
        session = FakeSession()
        client = client_with(session)
        await client.get_news(get_league("nba"))
        await client.get_news(get_league("nba"), event_id="401", limit=5)
        assert session.calls == [
            (f"{SITE}/basketball/nba/news", None),
            (f"{SITE}/basketball/nba/news", {"event": "401", "limit": 5}),
        ]


class TestStatusMapping:
    """Transport outcomes to typed exceptions."""

    @pytest.mark.asyncio
    async def test_success(self):
        session = FakeSession(FakeResponse(payload={"events": []}))
        response = await client_with(session).get_scoreboard(get_league("nba"), "20240315")
        assert isinstance(response, APIResponse)
        assert response.success
        assert response.data == {"events": []}
        assert response.league == "nba"

    @pytest.mark.asyncio
    async def test_not_found(self):
        session = FakeSession(FakeResponse(status=404))
        with pytest.raises(APINotFoundError):
            await client_with(session).get_summary(get_league("nba"), "1")

    @pytest.mark.asyncio
    async def test_server_error_keeps_status_and_body(self):
        session = FakeSession(FakeResponse(status=503, text="maintenance"))
        with pytest.raises(APIServerError) as excinfo:
            await client_with(session).get_standings(get_league("nba"))
        assert excinfo.value.status_code == 503
        assert excinfo.value.response_data == "maintenance"
        assert excinfo.value.context.league == "nba"

    @pytest.mark.asyncio
    async def test_invalid_json(self):
        session = FakeSession(FakeResponse(json_error=ValueError("Expecting value")))
        with pytest.raises(APIResponseError):
            await client_with(session).get_news(get_league("nba"))

    @pytest.mark.asyncio
    async def test_non_object_json(self):
        session = FakeSession(FakeResponse(payload=[1, 2, 3]))
        with pytest.raises(APIResponseError):
            await client_with(session).get_news(get_league("nba"))

    @pytest.mark.asyncio
    async def test_timeout(self):
        session = FakeSession(error=asyncio.TimeoutError())
        with pytest.raises(APITimeoutError):
            await client_with(session).get_scoreboard(get_league("nba"), "20240315")

    @pytest.mark.asyncio
    async def test_connection_error(self):
        session = FakeSession(error=aiohttp.ClientConnectionError("refused"))
        with pytest.raises(APIConnectionError) as excinfo:
            await client_with(session).get_scoreboard(get_league("nba"), "20240315")
        assert isinstance(excinfo.value.original_error, aiohttp.ClientConnectionError)


class TestSessionLifecycle:
    @pytest.mark.asyncio
    async def test_borrowed_session_is_not_closed(self):
        session = FakeSession()
        async with client_with(session) as client:
            assert client.session is session
        session.close.assert_not_called()

    @pytest.mark.asyncio
    async def test_request_without_session_fails(self):
        with pytest.raises(RuntimeError):
            await EspnClient(settings=Settings()).get_scoreboard(get_league("nba"), "20240315")

    @pytest.mark.asyncio
    async def test_owned_session_is_closed(self):
        client = EspnClient(settings=Settings())
        async with client:
            assert isinstance(client.session, aiohttp.ClientSession)
        assert client.session is None
