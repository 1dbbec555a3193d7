"""
Scoreline: normalization and aggregation of multi-sport scoreboard data.
Turns heterogeneous ESPN payloads into one consistent match/standings/news model.
"""

__version__ = "0.1.0"

from .scoreboard import Scoreboard, quick_matches, quick_news

__all__ = [
    "Scoreboard",
    "quick_matches",
    "quick_news",
]
