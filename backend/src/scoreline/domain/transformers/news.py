"""
News article normalization.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from ...core.lookup import dicts, dig, first_present, to_text
from ...core.utils import parse_datetime
from ..models.news import Article

_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def transform_article(raw: Dict[str, Any], league_id: Optional[str] = None) -> Article:
    """Map one upstream article; missing links and images become empty values."""
    return Article(
        headline=to_text(first_present(raw.get("headline"), raw.get("title"), default="")),
        description=to_text(raw.get("description")) or None,
        published=parse_datetime(first_present(raw.get("published"), raw.get("lastModified"), default=None)),
        link=to_text(first_present(dig(raw, "links", "web", "href"), raw.get("link"), default="")),
        images=[to_text(image.get("url")) for image in dicts(raw.get("images")) if to_text(image.get("url"))],
        league_id=league_id,
    )


def extract_articles(payload: Dict[str, Any], league_id: Optional[str] = None) -> List[Article]:
    return [transform_article(raw, league_id) for raw in dicts(payload.get("articles"))]


def sort_by_published(articles: List[Article]) -> List[Article]:
    """Newest first; undated articles sink to the end."""
    return sorted(articles, key=lambda a: a.published or _OLDEST, reverse=True)
