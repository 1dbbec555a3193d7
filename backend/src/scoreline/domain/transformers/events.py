"""
Scoreboard event and game summary transformation.

Basketball, football and soccer share one transform; sport differences are
absorbed by field-name fallbacks rather than per-sport branches.
"""

from dataclasses import fields
from typing import Any, Dict, List, Optional, Tuple

from ...core.exceptions import MatchNotFoundError
from ...core.lookup import (
    as_dict, as_list, dicts, dig, first_present, find_first,
    is_present, to_float, to_int, to_text,
)
from ...core.utils import parse_datetime
from ..models.league import DEFAULT_TEAM_LOGO, League
from ..models.match import (
    CalendarEntry, EventParticipant, Linescore, Match, MatchDetail,
    MatchEvent, MatchStat, MatchStatus, Team,
)
from .rosters import extract_players

STATE_MAP = {
    "pre": MatchStatus.SCHEDULED,
    "in": MatchStatus.LIVE,
    "post": MatchStatus.FINISHED,
    "halftime": MatchStatus.HALFTIME,
}

PLACEHOLDER_NAMES = {"home": "Home Team", "away": "Away Team"}

RECORD_TYPES = ("total", "overall", "ytd")


def map_status(status: Any) -> MatchStatus:
    """
    Map an upstream status block to MatchStatus from its state tag alone.
    Status names, scores and clock are never consulted; unknown tags are SCHEDULED.
    """
    state = dig(status, "type", "state")
    if not isinstance(state, str):
        return MatchStatus.SCHEDULED
    return STATE_MAP.get(state, MatchStatus.SCHEDULED)


def live_minute(status: Any, match_status: MatchStatus) -> Optional[Any]:
    if match_status is MatchStatus.HALFTIME:
        return "HT"
    if match_status is not MatchStatus.LIVE:
        return None
    minute = first_present(dig(status, "displayClock"), dig(status, "period"), default=None)
    return minute


def parse_score(value: Any) -> int:
    """Missing or non-numeric scores are 0."""
    if isinstance(value, dict):
        value = first_present(value.get("value"), value.get("displayValue"), default=None)
    return to_int(value, 0)


def _record_from_list(items: Any) -> Optional[str]:
    entries = dicts(items)
    for record_type in RECORD_TYPES:
        entry = find_first(entries, type=record_type) or find_first(entries, name=record_type)
        summary = first_present(entry.get("summary"), entry.get("displayValue"), default=None)
        if summary:
            return str(summary)
    return None


def extract_record(competitor: Dict[str, Any]) -> Optional[str]:
    """
    Season record string from a competitor, trying in order: a plain string,
    a structured list with an overall/total entry, a standing summary string,
    and the alternate ``records`` list.
    """
    record = competitor.get("record")
    if isinstance(record, str) and record.strip():
        return record.strip()

    candidates = (
        lambda: _record_from_list(record),
        lambda: to_text(first_present(
            competitor.get("standingSummary"),
            dig(competitor, "team", "standingSummary"),
            default=None,
        )) or None,
        lambda: _record_from_list(competitor.get("records")),
    )
    for candidate in candidates:
        result = candidate()
        if result:
            return result
    return None


def team_logo(team: Dict[str, Any], default: str = DEFAULT_TEAM_LOGO) -> str:
    """Direct logo, else the first entry of the logos list, else ``default``."""
    return to_text(first_present(
        team.get("logo"),
        dig(team, "logos", 0, "href"),
        default=default,
    )) or default


def extract_team(competitor: Dict[str, Any], side: str, with_record: bool = False) -> Team:
    """Build a Team from a competitor; the name is never empty."""
    team = as_dict(competitor.get("team"))
    name = to_text(first_present(
        team.get("shortDisplayName"),
        team.get("displayName"),
        team.get("name"),
        default=PLACEHOLDER_NAMES.get(side, "Team"),
    ))
    linescores = [
        Linescore(
            value=to_float(first_present(item.get("value"), item.get("displayValue"), default=0), 0.0),
            display_value=to_text(first_present(item.get("displayValue"), item.get("value"), default="")),
        )
        for item in dicts(competitor.get("linescores"))
    ]
    return Team(
        id=to_text(first_present(competitor.get("id"), team.get("id"), default="")),
        name=name,
        short_name=to_text(first_present(team.get("abbreviation"), default=name[:3].upper())),
        logo=team_logo(team),
        record=extract_record(competitor) if with_record else None,
        linescores=linescores,
    )


def split_competitors(competition: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """(home, away) competitors; falls back to list order when homeAway is absent."""
    competitors = dicts(competition.get("competitors"))
    home = find_first(competitors, homeAway="home")
    away = find_first(competitors, homeAway="away")
    if not home and competitors:
        home = competitors[0]
    if not away and len(competitors) > 1:
        away = next((c for c in competitors if c is not home), {})
    return home, away


def transform_event(event: Dict[str, Any], league_id: str, with_records: bool = False) -> Match:
    """
    Map one scoreboard event, or a summary header, to a Match.

    Raises:
        MatchNotFoundError: the record has no competition with competitors
    """
    competition = as_dict(dig(event, "competitions", 0))
    home, away = split_competitors(competition)
    event_id = to_text(first_present(event.get("id"), competition.get("id"), default=""))
    if not (home or away):
        raise MatchNotFoundError(event_id or "<unknown>", league_id)

    status_block = first_present(event.get("status"), competition.get("status"), default={})
    status = map_status(status_block)

    return Match(
        id=event_id,
        league_id=league_id,
        home_team=extract_team(home, "home", with_records),
        away_team=extract_team(away, "away", with_records),
        home_score=parse_score(home.get("score")),
        away_score=parse_score(away.get("score")),
        status=status,
        minute=live_minute(status_block, status),
        start_time=parse_datetime(first_present(event.get("date"), competition.get("date"), default=None)),
        venue=to_text(dig(competition, "venue", "fullName", default=None)) or None,
    )


def _infer_role(event_type: str, index: int) -> Optional[str]:
    lowered = event_type.lower()
    if "substitution" in lowered:
        return ("out", "in")[index] if index < 2 else None
    if "goal" in lowered:
        return ("scorer", "assist")[index] if index < 2 else None
    return None


def _participant_name(participant: Dict[str, Any]) -> str:
    athlete = as_dict(participant.get("athlete")) or participant
    return to_text(first_present(
        athlete.get("displayName"),
        athlete.get("shortName"),
        athlete.get("fullName"),
        default="",
    ))


def transform_match_event(raw: Dict[str, Any]) -> MatchEvent:
    """Map one key event or scoring play to a MatchEvent."""
    event_type = to_text(first_present(dig(raw, "type", "text"), raw.get("type"), default=""))
    raw_participants = dicts(raw.get("participants")) or dicts(raw.get("athletesInvolved"))

    participants = []
    for index, participant in enumerate(raw_participants):
        role = first_present(participant.get("role"), participant.get("type"), default=None)
        if not isinstance(role, str):
            role = _infer_role(event_type, index)
        participants.append(EventParticipant(name=_participant_name(participant), role=role))

    assist = next((p.name for p in participants if p.role == "assist"), None)

    return MatchEvent(
        id=to_text(raw.get("id")),
        type=event_type,
        description=to_text(first_present(raw.get("text"), raw.get("shortText"), default="")),
        minute=to_text(first_present(dig(raw, "clock", "displayValue"), raw.get("clock"), default="")),
        team_id=to_text(dig(raw, "team", "id", default="")),
        player=participants[0].name if participants else "",
        assist=assist,
        participants=participants,
    )


def split_sides(
    items: List[Dict[str, Any]], home_id: str, away_id: str
) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """
    Assign per-team payloads to (home, away) by team id, then by the
    homeAway tag, then by position (away first, as the box score lists them).
    """
    home = next((i for i in items if home_id and to_text(dig(i, "team", "id")) == home_id), {})
    away = next((i for i in items if away_id and to_text(dig(i, "team", "id")) == away_id), {})
    home = home or find_first(items, homeAway="home")
    away = away or find_first(items, homeAway="away")
    if not home and not away and len(items) == 2:
        away, home = items
    return home, away


def _is_percentage(stat: Dict[str, Any]) -> bool:
    name = to_text(stat.get("name")).lower()
    label = to_text(stat.get("label"))
    return (
        "pct" in name
        or "percent" in name
        or "%" in label
        or to_text(stat.get("displayValue")).endswith("%")
    )


def transform_team_stats(boxscore: Dict[str, Any], home_id: str, away_id: str) -> List[MatchStat]:
    """One MatchStat per named team statistic, in upstream order."""
    home, away = split_sides(dicts(boxscore.get("teams")), home_id, away_id)
    home_stats = {to_text(s.get("name")): s for s in dicts(home.get("statistics"))}
    away_stats = {to_text(s.get("name")): s for s in dicts(away.get("statistics"))}

    rows = []
    for name in list(home_stats) + [n for n in away_stats if n not in home_stats]:
        home_stat = home_stats.get(name, {})
        away_stat = away_stats.get(name, {})
        reference = home_stat or away_stat
        rows.append(MatchStat(
            name=to_text(first_present(reference.get("label"), name, default=name)),
            home_value=to_text(home_stat.get("displayValue")),
            away_value=to_text(away_stat.get("displayValue")),
            is_percentage=_is_percentage(reference),
        ))
    return rows


def transform_summary(summary: Dict[str, Any], league: League) -> MatchDetail:
    """
    Map a game summary payload to a MatchDetail.

    Raises:
        MatchNotFoundError: the summary carries no usable header
    """
    header = as_dict(summary.get("header"))
    match = transform_event(header, league.id, with_records=True)
    home_id, away_id = match.home_team.id, match.away_team.id

    game_info = as_dict(summary.get("gameInfo"))
    venue = match.venue or to_text(dig(game_info, "venue", "fullName", default=None)) or None

    raw_events = dicts(summary.get("keyEvents")) or dicts(summary.get("scoringPlays"))
    boxscore = as_dict(summary.get("boxscore"))

    players = dicts(boxscore.get("players")) or dicts(summary.get("rosters"))
    home_payload, away_payload = split_sides(players, home_id, away_id)

    drives = summary.get("drives")
    if isinstance(drives, dict):
        drives = drives.get("previous")

    base = {f.name: getattr(match, f.name) for f in fields(Match)}
    base["venue"] = venue
    return MatchDetail(
        **base,
        events=[transform_match_event(raw) for raw in raw_events],
        stats=transform_team_stats(boxscore, home_id, away_id),
        home_players=extract_players(home_payload),
        away_players=extract_players(away_payload),
        drives=dicts(drives),
        scoring_plays=dicts(summary.get("scoringPlays")),
        win_probability=dicts(summary.get("winprobability")),
        game_info=game_info,
    )


def extract_events(scoreboard: Dict[str, Any], league_id: str) -> List[Match]:
    """All matches on a scoreboard; malformed events are skipped."""
    matches = []
    for event in dicts(scoreboard.get("events")):
        try:
            matches.append(transform_event(event, league_id))
        except MatchNotFoundError:
            continue
    return matches


def _calendar_dates(item: Any) -> List[str]:
    if isinstance(item, str):
        parsed = parse_datetime(item)
        return [parsed.date().isoformat()] if parsed else []
    if isinstance(item, dict):
        nested = as_list(item.get("entries"))
        if nested:
            return [d for entry in nested for d in _calendar_dates(entry)]
        return _calendar_dates(item.get("startDate"))
    return []


def extract_calendar(scoreboard: Dict[str, Any], league: League) -> List[CalendarEntry]:
    """Days with fixtures, from the scoreboard's league calendar."""
    calendar = as_list(dig(scoreboard, "leagues", 0, "calendar"))
    return [
        CalendarEntry(date=day, sport=league.sport, league_id=league.id)
        for item in calendar
        for day in _calendar_dates(item)
        if is_present(day)
    ]
