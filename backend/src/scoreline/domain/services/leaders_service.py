"""
Statistical leaders domain service.
"""

from typing import List

from ...core.error_handler import with_fallback
from ..models.player import PlayerStatCategory
from ..transformers.leaders import normalize_leaders
from .base_service import BaseService


class LeadersService(BaseService):
    """Domain service for per-category statistical leaders."""

    @with_fallback(list)
    async def get_player_leaders(self, league_id: str) -> List[PlayerStatCategory]:
        """
        Leader categories for one league, in upstream order.

        Soccer leagues read the statistics document, the other families the
        leaders document; both normalize to the same categories.
        """
        league = self.resolve_league(league_id)
        response = await self.api_client.get_leaders(league)
        return normalize_leaders(response.data)
