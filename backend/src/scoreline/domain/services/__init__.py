"""
Domain services for Scoreline.
Async orchestration over the upstream client; public methods never raise.
"""

from .base_service import BaseService
from .match_service import MatchService
from .standings_service import StandingsService
from .leaders_service import LeadersService
from .news_service import NewsService

__all__ = [
    "BaseService",
    "MatchService",
    "StandingsService",
    "LeadersService",
    "NewsService",
]
