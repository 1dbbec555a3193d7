"""
News domain models.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .base import ValueRecord


@dataclass(frozen=True)
class Article(ValueRecord):
    headline: str
    description: Optional[str] = None
    published: Optional[datetime] = None
    link: str = ""
    images: List[str] = field(default_factory=list)
    league_id: Optional[str] = None
