"""
Match domain service: scoreboard aggregation and match detail assembly.
"""

import asyncio
from dataclasses import replace
from datetime import date, datetime, tzinfo
from typing import Dict, Iterable, List, Optional

from ...core.dates import league_query_date, previous_day, same_calendar_day, to_local
from ...core.error_handler import gather_settled, safe_execute, with_fallback
from ...core.exceptions import ValidationError
from ...core.lookup import dig
from ..models.league import League, SportFamily
from ..models.match import Match, MatchDetail, MatchesResult, MatchStatus
from ..transformers.events import (
    extract_calendar, extract_events, extract_record, transform_summary,
)
from .base_service import BaseService

_FAR_FUTURE = datetime.max.replace(tzinfo=None)


def merge_results(results: Iterable[MatchesResult]) -> MatchesResult:
    """
    Union several results: matches de-duplicated by id (last write wins,
    first-seen position kept), calendar entries simply concatenated.
    """
    by_id: Dict[str, Match] = {}
    calendar = []
    for result in results:
        for match in result.matches:
            by_id[match.id] = match
        calendar.extend(result.calendar_entries)
    return MatchesResult(matches=list(by_id.values()), calendar_entries=calendar)


def filter_to_day(matches: Iterable[Match], day: date, local_tz: Optional[tzinfo] = None) -> List[Match]:
    """Keep matches whose start falls on ``day`` in the caller's local time."""
    return [
        match for match in matches
        if match.start_time is not None
        and same_calendar_day(to_local(match.start_time, local_tz), day)
    ]


def top_sort_key(match: Match):
    """LIVE first regardless of time, then ascending kickoff."""
    start = match.start_time.replace(tzinfo=None) if match.start_time else _FAR_FUTURE
    return (0 if match.status is MatchStatus.LIVE else 1, start)


class MatchService(BaseService):
    """
    Domain service for scoreboards and match details.
    Orchestrates concurrent scoreboard fetches, merging and filtering.
    """

    async def fetch_scoreboard(self, league: League, query_date: str) -> MatchesResult:
        """One scoreboard fetch. Raises on transport errors."""
        response = await self.api_client.get_scoreboard(league, query_date)
        return MatchesResult(
            matches=extract_events(response.data, league.id),
            calendar_entries=extract_calendar(response.data, league),
        )

    async def get_league_matches(
        self,
        league: League,
        day: date,
        local_tz: Optional[tzinfo] = None,
    ) -> MatchesResult:
        """
        Matches of one league on one local calendar day.

        Games near midnight can sit on the previous day in the league's home
        zone, so the previous day is fetched too and everything is re-filtered
        to ``day``. Either fetch failing counts as an empty scoreboard.
        """
        query_dates = [
            league_query_date(previous_day(day), league.timezone, local_tz),
            league_query_date(day, league.timezone, local_tz),
        ]
        results = await gather_settled(
            (self.fetch_scoreboard(league, query_date) for query_date in query_dates),
            MatchesResult,
            labels=[f"{league.id}:{query_date}" for query_date in query_dates],
        )
        merged = merge_results(results)
        return MatchesResult(
            matches=filter_to_day(merged.matches, day, local_tz),
            calendar_entries=merged.calendar_entries,
        )

    @with_fallback(MatchesResult)
    async def get_top_matches(self, day: date, local_tz: Optional[tzinfo] = None) -> MatchesResult:
        """Fan out over the configured top leagues and merge the results."""
        leagues = [self.resolve_league(league_id) for league_id in self.settings.top_leagues]
        results = await gather_settled(
            (self.get_league_matches(league, day, local_tz) for league in leagues),
            MatchesResult,
            labels=[league.id for league in leagues],
        )

        matches = sorted((m for result in results for m in result.matches), key=top_sort_key)
        calendar = [entry for result in results for entry in result.calendar_entries]
        self.logger.info(f"Top matches for {day}: {len(matches)} from {len(leagues)} leagues")
        return MatchesResult(matches=matches, calendar_entries=calendar)

    @with_fallback(MatchesResult)
    async def get_matches(
        self,
        league_id: str,
        day: date,
        local_tz: Optional[tzinfo] = None,
    ) -> MatchesResult:
        """
        Matches for a league (or "top") on a calendar day.

        Args:
            league_id: Registered league id, or "top"
            day: The caller's calendar day; aware datetimes are first
                converted to ``local_tz``
            local_tz: Caller's zone; None means the host zone

        Returns:
            MatchesResult, empty on any failure
        """
        if isinstance(day, datetime):
            day = to_local(day, local_tz).date()
        elif not isinstance(day, date):
            raise ValidationError("day", day, "must be a date or datetime")

        league = self.resolve_league(league_id, allow_virtual=True)
        if league.is_virtual:
            return await self.get_top_matches(day, local_tz)
        return await self.get_league_matches(league, day, local_tz)

    async def fetch_team_record(self, league: League, team_id: str) -> Optional[str]:
        """Season record of one team from the team endpoint. Raises on transport errors."""
        response = await self.api_client.get_team(league, team_id)
        items = dig(response.data, "team", "record", "items", default=[])
        return extract_record({"record": items})

    async def backfill_records(self, detail: MatchDetail, league: League) -> MatchDetail:
        """
        Fill missing basketball team records from the team endpoint.

        Both lookups run concurrently; a failed lookup leaves the record blank.
        """
        if league.family is not SportFamily.BASKETBALL:
            return detail

        teams = {"home_team": detail.home_team, "away_team": detail.away_team}
        missing = {side: team for side, team in teams.items() if not team.record and team.id}
        if not missing:
            return detail

        records = await asyncio.gather(*(
            safe_execute(self.fetch_team_record, league, team.id)
            for team in missing.values()
        ))
        updates = {
            side: replace(team, record=record)
            for (side, team), record in zip(missing.items(), records)
            if record
        }
        return replace(detail, **updates) if updates else detail

    @with_fallback(lambda: None)
    async def get_match_detail(self, match_id: str, league_id: str) -> Optional[MatchDetail]:
        """
        Full detail for one match, or None when it cannot be loaded.
        """
        league = self.resolve_league(league_id)
        response = await self.api_client.get_summary(league, match_id)
        detail = transform_summary(response.data, league)
        return await self.backfill_records(detail, league)
