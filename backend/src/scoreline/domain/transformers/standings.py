"""
Standings tree flattening.

The upstream standings document is a tree of named groups (league ->
conference -> division, or just a league). Each node may hold entries
directly under ``standings.entries`` and/or child nodes under ``children``.
"""

from typing import Any, Dict, List, Optional, Tuple

from ...core.lookup import MISSING, as_dict, dicts, dig, first_present, to_float, to_int, to_text
from ..models.league import SportFamily
from ..models.match import Team
from ..models.standings import StandingEntry, StandingStats
from .events import team_logo

RANK_CODES = ("rank", "playoffSeed")


def walk_groups(root: Dict[str, Any]) -> List[Tuple[Optional[str], Dict[str, Any]]]:
    """
    Depth-first walk yielding ``(group, raw_entry)`` pairs.

    Each entry is tagged with the name of its nearest named ancestor; a
    child's own name overrides the one inherited from its parent.
    """
    collected: List[Tuple[Optional[str], Dict[str, Any]]] = []

    def visit(node: Dict[str, Any], inherited: Optional[str]) -> None:
        group = to_text(first_present(node.get("name"), node.get("abbreviation"), default="")) or inherited
        for entry in dicts(dig(node, "standings", "entries")):
            collected.append((group, entry))
        for child in dicts(node.get("children")):
            visit(child, group)

    visit(as_dict(root), None)
    return collected


def _stat_index(entry: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    index: Dict[str, Dict[str, Any]] = {}
    for stat in dicts(entry.get("stats")):
        for key in (stat.get("name"), stat.get("type")):
            if isinstance(key, str) and key not in index:
                index[key] = stat
    return index


def _number(stats: Dict[str, Dict[str, Any]], *codes: str) -> Any:
    for code in codes:
        stat = stats.get(code)
        if stat is None:
            continue
        value = first_present(stat.get("value"), stat.get("displayValue"), default=MISSING)
        if to_float(value, None) is not None:
            return value
    return MISSING


def _int(stats, *codes) -> int:
    return to_int(_number(stats, *codes), 0)


def _float(stats, *codes) -> float:
    return to_float(_number(stats, *codes), 0.0)


def build_stats(raw_stats: Dict[str, Dict[str, Any]], family: SportFamily) -> StandingStats:
    """Read the family's stat codes; every absent numeric field is 0."""
    rank_value = _number(raw_stats, *RANK_CODES)
    common = dict(
        rank=to_int(rank_value, 0) if rank_value is not MISSING else None,
        games_played=_int(raw_stats, "gamesPlayed"),
        wins=_int(raw_stats, "wins"),
        losses=_int(raw_stats, "losses"),
    )

    if family is SportFamily.SOCCER:
        return StandingStats(
            **common,
            draws=_int(raw_stats, "draws", "ties"),
            points=_int(raw_stats, "points"),
            goals_for=_int(raw_stats, "pointsFor", "goalsFor"),
            goals_against=_int(raw_stats, "pointsAgainst", "goalsAgainst"),
            goal_diff=_int(raw_stats, "pointDifferential", "goalDifference"),
        )

    if family is SportFamily.FOOTBALL:
        return StandingStats(
            **common,
            ties=_int(raw_stats, "ties"),
            win_pct=_float(raw_stats, "winPercent"),
            points_for=_int(raw_stats, "pointsFor"),
            points_against=_int(raw_stats, "pointsAgainst"),
            differential=_int(raw_stats, "differential", "pointDifferential"),
            streak=to_text(dig(raw_stats, "streak", "displayValue", default="")),
        )

    return StandingStats(
        **common,
        win_pct=_float(raw_stats, "winPercent"),
        games_behind=_float(raw_stats, "gamesBehind"),
        streak=to_text(dig(raw_stats, "streak", "displayValue", default="")),
    )


def build_team(raw_team: Dict[str, Any]) -> Team:
    name = to_text(first_present(
        raw_team.get("displayName"),
        raw_team.get("shortDisplayName"),
        raw_team.get("name"),
        default="Unknown Team",
    ))
    return Team(
        id=to_text(raw_team.get("id")),
        name=name,
        short_name=to_text(first_present(raw_team.get("abbreviation"), default=name[:3].upper())),
        logo=team_logo(raw_team),
    )


def transform_entry(raw_entry: Dict[str, Any], group: Optional[str], family: SportFamily) -> StandingEntry:
    return StandingEntry(
        team=build_team(as_dict(raw_entry.get("team"))),
        stats=build_stats(_stat_index(raw_entry), family),
        group=group,
    )


def sort_entries(entries: List[StandingEntry], family: SportFamily) -> List[StandingEntry]:
    """
    Order entries group by group (groups keep their first-seen order).

    Within a group: ascending rank when every entry has one, otherwise
    descending points (league tables) or win percentage. Python's sort is
    stable, so ties keep upstream order. Rank ordering is per group: two
    groups' rank-1 teams are never interleaved into one global ranking.
    """
    group_order: Dict[Optional[str], int] = {}
    for entry in entries:
        group_order.setdefault(entry.group, len(group_order))

    if entries and all(entry.stats.rank is not None for entry in entries):
        return sorted(entries, key=lambda e: (group_order[e.group], e.stats.rank))

    if family.uses_league_table:
        return sorted(entries, key=lambda e: (group_order[e.group], -e.stats.points))
    return sorted(entries, key=lambda e: (group_order[e.group], -e.stats.win_pct))


def flatten_standings(root: Dict[str, Any], family: SportFamily) -> List[StandingEntry]:
    """Flat, ranked standing entries from an arbitrarily nested standings tree."""
    entries = [transform_entry(raw, group, family) for group, raw in walk_groups(root)]
    return sort_entries(entries, family)
