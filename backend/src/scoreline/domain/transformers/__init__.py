"""
Upstream payload transformers.
Pure functions from loosely-typed provider JSON to domain records.
"""

from .events import (
    map_status,
    parse_score,
    extract_record,
    extract_team,
    transform_event,
    transform_match_event,
    transform_summary,
    extract_events,
    extract_calendar,
)
from .rosters import extract_players
from .standings import flatten_standings, walk_groups
from .leaders import normalize_category, normalize_leaders, clean_display_value
from .news import transform_article, extract_articles, sort_by_published

__all__ = [
    "map_status",
    "parse_score",
    "extract_record",
    "extract_team",
    "transform_event",
    "transform_match_event",
    "transform_summary",
    "extract_events",
    "extract_calendar",
    "extract_players",
    "flatten_standings",
    "walk_groups",
    "normalize_category",
    "normalize_leaders",
    "clean_display_value",
    "transform_article",
    "extract_articles",
    "sort_by_published",
]
