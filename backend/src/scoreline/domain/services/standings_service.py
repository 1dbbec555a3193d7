"""
Standings domain service.
"""

from typing import List

from ...core.error_handler import with_fallback
from ..models.standings import StandingEntry
from ..transformers.standings import flatten_standings
from .base_service import BaseService


class StandingsService(BaseService):
    """Domain service for league standings tables."""

    @with_fallback(list)
    async def get_standings(self, league_id: str) -> List[StandingEntry]:
        """
        Flat, ranked standings for one league.

        Args:
            league_id: Registered league id ("top" is not supported)

        Returns:
            Standing entries tagged with their group, empty on any failure
        """
        league = self.resolve_league(league_id)
        response = await self.api_client.get_standings(league)
        entries = flatten_standings(response.data, league.family)
        self.logger.debug(f"Standings for {league.id}: {len(entries)} entries")
        return entries
