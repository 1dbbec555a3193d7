"""
Player domain models: box-score rows and statistical leaders.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .base import ValueRecord


@dataclass(frozen=True)
class PlayerStat(ValueRecord):
    """
    One player's box-score row.

    ``stats`` maps upstream stat labels to display strings. Labels depend on
    sport and category; a missing label means "no value", not zero.
    """
    id: str
    name: str
    position: str = ""
    position_name: Optional[str] = None
    jersey: str = ""
    stats: Dict[str, str] = field(default_factory=dict)
    is_starter: bool = False
    category: str = ""
    active: Optional[bool] = None
    formation_place: Optional[int] = None
    subbed_in: Optional[bool] = None
    subbed_out: Optional[bool] = None
    headshot: Optional[str] = None


@dataclass(frozen=True)
class PlayerLeader(ValueRecord):
    """A ranked athlete or team in a statistical category."""
    id: str
    name: str
    team: str = ""
    team_logo: Optional[str] = None
    headshot: Optional[str] = None
    value: float = 0.0
    display_value: str = ""
    rank: int = 0
    is_team: bool = False


@dataclass(frozen=True)
class PlayerStatCategory(ValueRecord):
    name: str
    display_name: str = ""
    leaders: List[PlayerLeader] = field(default_factory=list)
