"""
Domain models for Scoreline.
Immutable value records shared by every sport the data layer normalizes.
"""

from .base import ValueRecord
from .league import (
    SportFamily,
    League,
    LEAGUES,
    TOP_LEAGUE_ID,
    DEFAULT_TEAM_LOGO,
    get_league,
)
from .player import PlayerStat, PlayerLeader, PlayerStatCategory
from .match import (
    MatchStatus,
    Linescore,
    Team,
    Match,
    EventParticipant,
    MatchEvent,
    MatchStat,
    MatchDetail,
    CalendarEntry,
    MatchesResult,
)
from .standings import StandingStats, StandingEntry
from .news import Article

__all__ = [
    # Base models
    "ValueRecord",

    # League registry
    "SportFamily",
    "League",
    "LEAGUES",
    "TOP_LEAGUE_ID",
    "DEFAULT_TEAM_LOGO",
    "get_league",

    # Player models
    "PlayerStat",
    "PlayerLeader",
    "PlayerStatCategory",

    # Match models
    "MatchStatus",
    "Linescore",
    "Team",
    "Match",
    "EventParticipant",
    "MatchEvent",
    "MatchStat",
    "MatchDetail",
    "CalendarEntry",
    "MatchesResult",

    # Standings models
    "StandingStats",
    "StandingEntry",

    # News models
    "Article",
]
