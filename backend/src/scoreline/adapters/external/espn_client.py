"""
ESPN public site API client for scoreboard, summary, standings, leaders and news data.
Supports the basketball, football and soccer league families with per-family routing.
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import aiohttp

from ...config.settings import Settings, settings as default_settings
from ...core.exceptions import (
    APIConnectionError, APITimeoutError, APINotFoundError,
    APIServerError, APIResponseError, ErrorContext
)
from ...domain.models.league import League, SportFamily

logger = logging.getLogger(__name__)


@dataclass
class APIResponse:
    """Standardized API response structure."""
    data: Dict[str, Any]
    success: bool
    league: Optional[str] = None


class EspnClient:
    """
    Async client for the ESPN site API.
    Raises typed transport errors; callers decide where to absorb them.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self.settings = settings or default_settings
        self.site_base_url = self.settings.espn_site_base_url.rstrip('/')
        self.standings_base_url = self.settings.espn_standings_base_url.rstrip('/')
        self.web_base_url = self.settings.espn_web_base_url.rstrip('/')
        self.timeout = self.settings.request_timeout
        self.user_agent = self.settings.api_user_agent

        self.session: Optional[aiohttp.ClientSession] = session
        self._owns_session = session is None

    async def __aenter__(self):
        """Async context manager entry."""
        if self.session is None:
            connector = aiohttp.TCPConnector(
                limit=self.settings.connection_limit,
                limit_per_host=self.settings.connection_limit_per_host,
            )
            self.session = aiohttp.ClientSession(
                headers={"User-Agent": self.user_agent, "Accept": "application/json"},
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            )
            self._owns_session = True
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        if self.session and self._owns_session:
            await self.session.close()
            self.session = None

    def _site_url(self, league: League, endpoint: str) -> str:
        return f"{self.site_base_url}/{league.sport}/{league.id}/{endpoint.lstrip('/')}"

    def _standings_url(self, league: League) -> str:
        return f"{self.standings_base_url}/{league.sport}/{league.id}/standings"

    def _leaders_url(self, league: League) -> str:
        if league.family is SportFamily.SOCCER:
            return self._site_url(league, "statistics")
        return f"{self.web_base_url}/{league.sport}/{league.id}/leaders"

    async def _make_request(
        self,
        league: League,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        operation: str = "api_request",
    ) -> APIResponse:
        """Make a single GET request and decode its JSON object body."""
        if self.session is None:
            raise RuntimeError("EspnClient must be used as an async context manager")

        context = ErrorContext(
            operation=operation,
            league=league.id,
            endpoint=url,
            parameters=params,
        )

        logger.debug(f"Making request to {url} with params: {params}")
        try:
            async with self.session.get(url, params=params) as response:
                if response.status == 404:
                    raise APINotFoundError(resource=url, context=context)

                if response.status != 200:
                    response_data = None
                    try:
                        response_data = await response.text()
                    except (aiohttp.ClientError, UnicodeDecodeError) as e:
                        logger.debug(f"Could not read error body from {url}: {e}")
                    raise APIServerError(
                        status_code=response.status,
                        response_data=response_data,
                        context=context
                    )

                try:
                    data = await response.json(content_type=None)
                except ValueError as e:
                    raise APIResponseError(
                        expected_format="JSON object",
                        actual_content=str(e),
                        context=context
                    )

        except asyncio.TimeoutError:
            raise APITimeoutError(timeout=self.timeout, context=context)
        except aiohttp.ClientError as e:
            raise APIConnectionError(url=url, context=context, original_error=e)

        if not isinstance(data, dict):
            raise APIResponseError(
                expected_format="JSON object",
                actual_content=type(data).__name__,
                context=context
            )

        return APIResponse(
            data=data,
            success=True,
            league=league.id,
        )

    async def get_scoreboard(self, league: League, date_str: str) -> APIResponse:
        """Get the scoreboard for one YYYYMMDD date."""
        return await self._make_request(
            league, self._site_url(league, "scoreboard"), {"dates": date_str},
            operation="get_scoreboard",
        )

    async def get_summary(self, league: League, event_id: str) -> APIResponse:
        """Get the game summary for one event."""
        return await self._make_request(
            league, self._site_url(league, "summary"), {"event": event_id},
            operation="get_summary",
        )

    async def get_standings(self, league: League) -> APIResponse:
        return await self._make_request(
            league, self._standings_url(league), operation="get_standings",
        )

    async def get_leaders(self, league: League) -> APIResponse:
        return await self._make_request(
            league, self._leaders_url(league), operation="get_leaders",
        )

    async def get_news(
        self,
        league: League,
        event_id: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> APIResponse:
        """Get league news, optionally narrowed to one event."""
        params = {}
        if event_id:
            params["event"] = event_id
        if limit:
            params["limit"] = limit
        return await self._make_request(
            league, self._site_url(league, "news"), params or None,
            operation="get_news",
        )

    async def get_team(self, league: League, team_id: str) -> APIResponse:
        """Get one team, including its season record."""
        return await self._make_request(
            league, self._site_url(league, f"teams/{team_id}"), operation="get_team",
        )
