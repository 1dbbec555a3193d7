"""
Statistical leaders normalization.

A category lists its leaders either as ``groups[0].athletes`` or as a flat
``leaders`` array; each leader is attributed to an athlete or to a team.
Leader order from upstream is kept as-is and assumed to be rank order.
"""

from typing import Any, Dict, List, Optional

from ...core.lookup import (
    as_dict, dicts, dig, first_present, is_present,
    to_float, to_int, to_text, trailing_number,
)
from ..models.player import PlayerLeader, PlayerStatCategory
from .events import team_logo


def raw_leaders(category: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Nested group athletes first, then the flat leaders array."""
    return dicts(dig(category, "groups", 0, "athletes")) or dicts(category.get("leaders"))


def extract_categories(payload: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Category list from either the leaders document or the statistics document."""
    return (
        dicts(dig(payload, "leaders", "categories"))
        or dicts(payload.get("categories"))
        or dicts(payload.get("stats"))
        or dicts(payload.get("leaders"))
    )


def _format_number(value: float) -> str:
    return str(int(value)) if value.is_integer() else str(value)


def clean_display_value(display: str, value: Optional[float]) -> str:
    """
    Reduce verbose strings such as "Matches: 10, Goals: 7" to the number.

    A colon marks a verbose string: the numeric value wins, then the trailing
    digit run. Strings without digits come back unchanged.
    """
    if ":" not in display:
        return display
    if value is not None:
        return _format_number(value)
    return trailing_number(display) or display


def _resolve_value(leader: Dict[str, Any]):
    stat = as_dict(dig(leader, "statistics", 0))
    source = stat if is_present(stat.get("value")) or is_present(stat.get("displayValue")) else leader
    return source.get("value"), to_text(source.get("displayValue"))


def transform_leader(leader: Dict[str, Any], position: int) -> PlayerLeader:
    """Normalize one raw leader; ``position`` is its 0-based index upstream."""
    athlete = as_dict(leader.get("athlete"))
    is_team = not athlete

    if is_team:
        team = as_dict(leader.get("team"))
        entity_id = team.get("id")
        name = first_present(team.get("displayName"), team.get("name"), team.get("abbreviation"), default="")
        headshot = None
    else:
        team = as_dict(first_present(athlete.get("team"), leader.get("team"), default={}))
        entity_id = athlete.get("id")
        name = first_present(athlete.get("displayName"), athlete.get("fullName"), athlete.get("shortName"), default="")
        headshot = first_present(dig(athlete, "headshot", "href"), athlete.get("headshot"), default=None)
        if not isinstance(headshot, str):
            headshot = None

    raw_value, display = _resolve_value(leader)
    value = to_float(raw_value, None)
    display = clean_display_value(display, value)
    if not display and value is not None:
        display = _format_number(value)
    if value is None:
        value = to_float(display, 0.0)

    rank = to_int(leader.get("rank"), 0)

    return PlayerLeader(
        id=to_text(entity_id),
        name=to_text(name),
        team=to_text(first_present(team.get("abbreviation"), team.get("id"), team.get("displayName"), default="")),
        team_logo=team_logo(team, default="") or None,
        headshot=headshot,
        value=value,
        display_value=display,
        rank=rank or position + 1,
        is_team=is_team,
    )


def normalize_category(category: Dict[str, Any]) -> PlayerStatCategory:
    """Map one upstream statistical category to a PlayerStatCategory."""
    name = to_text(first_present(category.get("name"), category.get("abbreviation"), default=""))
    display_name = to_text(first_present(
        category.get("displayName"),
        category.get("shortDisplayName"),
        default=name,
    ))
    return PlayerStatCategory(
        name=name,
        display_name=display_name,
        leaders=[transform_leader(leader, i) for i, leader in enumerate(raw_leaders(category))],
    )


def normalize_leaders(payload: Dict[str, Any]) -> List[PlayerStatCategory]:
    """All categories that carry at least one leader."""
    categories = [normalize_category(category) for category in extract_categories(payload)]
    return [category for category in categories if category.leaders]
