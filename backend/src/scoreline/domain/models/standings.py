"""
Standings domain models.
"""

from dataclasses import dataclass, field
from typing import Optional

from .base import ValueRecord
from .match import Team


@dataclass(frozen=True)
class StandingStats(ValueRecord):
    """
    Per-sport stats bag. Every numeric field defaults to 0; which ones are
    meaningful depends on the league family.
    """
    rank: Optional[int] = None
    games_played: int = 0
    wins: int = 0
    losses: int = 0
    # Basketball-like
    win_pct: float = 0.0
    games_behind: float = 0.0
    # Football-like
    ties: int = 0
    points_for: int = 0
    points_against: int = 0
    differential: int = 0
    streak: str = ""
    # League tables
    draws: int = 0
    points: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_diff: int = 0


@dataclass(frozen=True)
class StandingEntry(ValueRecord):
    team: Team
    stats: StandingStats = field(default_factory=StandingStats)
    group: Optional[str] = None
