"""
Match domain models: teams, matches, match detail and calendar entries.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from .base import ValueRecord
from .player import PlayerStat


class MatchStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    LIVE = "LIVE"
    HALFTIME = "HT"
    FINISHED = "FINISHED"


@dataclass(frozen=True)
class Linescore(ValueRecord):
    """One period's score for a team."""
    value: float = 0.0
    display_value: str = ""


@dataclass(frozen=True)
class Team(ValueRecord):
    id: str
    name: str
    short_name: str = ""
    logo: str = ""
    record: Optional[str] = None
    linescores: List[Linescore] = field(default_factory=list)


@dataclass(frozen=True)
class Match(ValueRecord):
    """
    A scheduled, live or finished fixture.

    ``status`` comes only from the upstream state tag, never from scores or
    clock. ``start_time`` is an aware UTC datetime.
    """
    id: str
    league_id: str
    home_team: Team
    away_team: Team
    home_score: int = 0
    away_score: int = 0
    status: MatchStatus = MatchStatus.SCHEDULED
    minute: Optional[Union[str, int]] = None
    start_time: Optional[datetime] = None
    venue: Optional[str] = None

    @property
    def is_live(self) -> bool:
        return self.status in (MatchStatus.LIVE, MatchStatus.HALFTIME)

    @property
    def is_finished(self) -> bool:
        return self.status is MatchStatus.FINISHED


@dataclass(frozen=True)
class EventParticipant(ValueRecord):
    name: str
    role: Optional[str] = None


@dataclass(frozen=True)
class MatchEvent(ValueRecord):
    id: str
    type: str = ""
    description: str = ""
    minute: str = ""
    team_id: str = ""
    player: str = ""
    assist: Optional[str] = None
    participants: List[EventParticipant] = field(default_factory=list)


@dataclass(frozen=True)
class MatchStat(ValueRecord):
    """One named team statistic with both sides' display values."""
    name: str
    home_value: str = ""
    away_value: str = ""
    is_percentage: bool = False


@dataclass(frozen=True)
class MatchDetail(Match):
    """
    A match plus its summary data. Sport-specific extensions (drives,
    scoring plays, win probability, game info) are passed through as-is.
    """
    events: List[MatchEvent] = field(default_factory=list)
    stats: List[MatchStat] = field(default_factory=list)
    home_players: List[PlayerStat] = field(default_factory=list)
    away_players: List[PlayerStat] = field(default_factory=list)
    drives: List[Dict[str, Any]] = field(default_factory=list)
    scoring_plays: List[Dict[str, Any]] = field(default_factory=list)
    win_probability: List[Dict[str, Any]] = field(default_factory=list)
    game_info: Dict[str, Any] = field(default_factory=dict)

    @property
    def home_record(self) -> Optional[str]:
        return self.home_team.record

    @property
    def away_record(self) -> Optional[str]:
        return self.away_team.record


@dataclass(frozen=True)
class CalendarEntry(ValueRecord):
    """A day on which a league has at least one fixture."""
    date: str
    sport: str
    league_id: str


@dataclass(frozen=True)
class MatchesResult(ValueRecord):
    matches: List[Match] = field(default_factory=list)
    calendar_entries: List[CalendarEntry] = field(default_factory=list)
