"""
League registry: which upstream sport path, display data and home timezone
each supported league uses.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

from ...core.exceptions import InvalidLeagueError
from .base import ValueRecord

TOP_LEAGUE_ID = "top"

DEFAULT_TEAM_LOGO = "https://a.espncdn.com/combiner/i?img=/i/teamlogos/default-team-logo-500.png&w=100&h=100"


class SportFamily(str, Enum):
    """
    League families; the value is the upstream sport path segment.
    """
    BASKETBALL = "basketball"
    FOOTBALL = "football"
    SOCCER = "soccer"

    @property
    def uses_league_table(self) -> bool:
        """Soccer standings are points tables rather than win-percentage lists."""
        return self is SportFamily.SOCCER


@dataclass(frozen=True)
class League(ValueRecord):
    id: str
    name: str
    family: SportFamily
    logo: str = ""
    timezone: Optional[str] = None

    @property
    def sport(self) -> str:
        return self.family.value

    @property
    def is_virtual(self) -> bool:
        return self.id == TOP_LEAGUE_ID


_CDN = "https://a.espncdn.com/i/leaguelogos/soccer/500"

LEAGUES: Dict[str, League] = {
    league.id: league for league in (
        League(TOP_LEAGUE_ID, "Top", SportFamily.SOCCER),
        League("nba", "NBA", SportFamily.BASKETBALL,
               "https://a.espncdn.com/i/teamlogos/leagues/500/nba.png", "America/New_York"),
        League("nfl", "NFL", SportFamily.FOOTBALL,
               "https://a.espncdn.com/i/teamlogos/leagues/500/nfl.png", "America/New_York"),
        League("uefa.champions", "UEFA", SportFamily.SOCCER, f"{_CDN}/2.png", "Europe/Paris"),
        League("eng.1", "Premier", SportFamily.SOCCER, f"{_CDN}/23.png", "Europe/London"),
        League("esp.1", "La Liga", SportFamily.SOCCER, f"{_CDN}/15.png", "Europe/Madrid"),
        League("ita.1", "Serie A", SportFamily.SOCCER, f"{_CDN}/12.png", "Europe/Rome"),
        League("ger.1", "Bundesliga", SportFamily.SOCCER, f"{_CDN}/10.png", "Europe/Berlin"),
        League("fra.1", "Ligue 1", SportFamily.SOCCER, f"{_CDN}/9.png", "Europe/Paris"),
        League("uefa.europa", "Europa", SportFamily.SOCCER, f"{_CDN}/2310.png", "Europe/Paris"),
        League("uefa.europa.conf", "Conference", SportFamily.SOCCER, f"{_CDN}/20296.png", "Europe/Paris"),
        # Domestic cups have no registered zone and query by UTC date.
        League("esp.copa_del_rey", "Copa del Rey", SportFamily.SOCCER, f"{_CDN}/80.png"),
        League("ita.coppa_italia", "Coppa Italia", SportFamily.SOCCER, f"{_CDN}/2192.png"),
        League("eng.fa", "FA Cup", SportFamily.SOCCER, f"{_CDN}/10.png"),
    )
}


def get_league(league_id: str, allow_virtual: bool = False) -> League:
    """
    Look up a registered league.

    Raises:
        InvalidLeagueError: unknown id, or the "top" pseudo-league when
            ``allow_virtual`` is False
    """
    league = LEAGUES.get(league_id)
    if league is None:
        raise InvalidLeagueError(league_id, valid_leagues=sorted(LEAGUES))
    if league.is_virtual and not allow_virtual:
        raise InvalidLeagueError(league_id, reason="the top pseudo-league is not supported here")
    return league
