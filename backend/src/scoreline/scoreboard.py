"""
Scoreboard facade: the read-only contract the presentation layer consumes.

Every method returns a neutral value (empty result, empty list or None)
instead of raising.
"""

from datetime import date, datetime, tzinfo
from typing import List, Optional, Union

from .adapters.external.espn_client import EspnClient
from .config.settings import Settings, settings as default_settings
from .core.exceptions import ConfigurationError
from .domain.models.league import LEAGUES, TOP_LEAGUE_ID
from .domain.models.match import MatchDetail, MatchesResult
from .domain.models.news import Article
from .domain.models.player import PlayerStatCategory
from .domain.models.standings import StandingEntry
from .domain.services import LeadersService, MatchService, NewsService, StandingsService


def validate_top_leagues(settings: Settings) -> None:
    """
    Raises:
        ConfigurationError: a "top" roster names an unknown league or "top" itself
    """
    for setting in ("top_leagues", "top_news_leagues"):
        for league_id in getattr(settings, setting):
            if league_id == TOP_LEAGUE_ID or league_id not in LEAGUES:
                raise ConfigurationError(setting, f"'{league_id}' is not a registered league")


class Scoreboard:
    """
    Entry point for matches, match details, standings, leaders and news.

    Usage:
        async with Scoreboard() as board:
            result = await board.get_matches("nba", date(2024, 3, 15))
    """

    def __init__(self, client=None, settings: Optional[Settings] = None):
        """
        Args:
            client: Upstream client; a fresh EspnClient is created and owned
                when omitted
            settings: Settings to use instead of the global instance

        Raises:
            ConfigurationError: the configured "top" rosters are invalid
        """
        self.settings = settings or default_settings
        validate_top_leagues(self.settings)

        self._owns_client = client is None
        self.client = client or EspnClient(settings=self.settings)

        self.matches = MatchService(self.client, self.settings)
        self.standings = StandingsService(self.client, self.settings)
        self.leaders = LeadersService(self.client, self.settings)
        self.news = NewsService(self.client, self.settings)

    async def __aenter__(self):
        if self._owns_client:
            await self.client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self._owns_client:
            await self.client.__aexit__(exc_type, exc_val, exc_tb)

    async def get_matches(
        self,
        league_id: str,
        day: Union[date, datetime],
        local_tz: Optional[tzinfo] = None,
    ) -> MatchesResult:
        """Matches on ``day`` (caller-local) for a league or "top"."""
        return await self.matches.get_matches(league_id, day, local_tz)

    async def get_match_detail(self, match_id: str, league_id: str) -> Optional[MatchDetail]:
        """Full match detail, or None."""
        return await self.matches.get_match_detail(match_id, league_id)

    async def get_standings(self, league_id: str) -> List[StandingEntry]:
        return await self.standings.get_standings(league_id)

    async def get_player_leaders(self, league_id: str) -> List[PlayerStatCategory]:
        return await self.leaders.get_player_leaders(league_id)

    async def get_news(self, league_id: str, match_id: Optional[str] = None) -> List[Article]:
        return await self.news.get_news(league_id, match_id)


# Convenience functions for common operations
async def quick_matches(
    league_id: str,
    day: Union[date, datetime],
    local_tz: Optional[tzinfo] = None,
) -> MatchesResult:
    """Quick scoreboard lookup with a throwaway client."""
    async with Scoreboard() as board:
        return await board.get_matches(league_id, day, local_tz)


async def quick_news(league_id: str = TOP_LEAGUE_ID, match_id: Optional[str] = None) -> List[Article]:
    """Quick news lookup with a throwaway client."""
    async with Scoreboard() as board:
        return await board.get_news(league_id, match_id)
