"""
News domain service: per-league articles and the "top" news fan-out.
"""

from typing import List, Optional

from ...core.error_handler import gather_settled, with_fallback
from ..models.league import League
from ..models.news import Article
from ..transformers.news import extract_articles, sort_by_published
from .base_service import BaseService


class NewsService(BaseService):
    """Domain service for news articles."""

    async def fetch_league_news(self, league: League, match_id: Optional[str] = None) -> List[Article]:
        """Articles for one league. Raises on transport errors."""
        response = await self.api_client.get_news(league, event_id=match_id)
        return extract_articles(response.data, league.id)

    async def get_top_news(self) -> List[Article]:
        """
        Articles from every configured top news league, newest first.
        A failing league contributes no articles.
        """
        leagues = [self.resolve_league(league_id) for league_id in self.settings.top_news_leagues]
        per_league = await gather_settled(
            (self.fetch_league_news(league) for league in leagues),
            list,
            labels=[league.id for league in leagues],
        )
        articles = sort_by_published([article for batch in per_league for article in batch])
        self.logger.info(f"Top news: {len(articles)} articles from {len(leagues)} leagues")
        return articles

    @with_fallback(list)
    async def get_news(self, league_id: str, match_id: Optional[str] = None) -> List[Article]:
        """
        News for a league, "top", or one match.

        Args:
            league_id: Registered league id, or "top"
            match_id: Narrow the feed to one event (ignored for "top")

        Returns:
            Articles, empty on any failure
        """
        league = self.resolve_league(league_id, allow_virtual=True)
        if league.is_virtual:
            return await self.get_top_news()
        return await self.fetch_league_news(league, match_id)
