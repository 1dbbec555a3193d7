"""
Core package for Scoreline.
Contains exceptions, error boundaries, lookup helpers and date utilities.
"""

from .exceptions import (
    ErrorContext,
    ScorelineException,
    ValidationError,
    ConfigurationError,
    APIException,
    APIConnectionError,
    APITimeoutError,
    APINotFoundError,
    APIServerError,
    APIResponseError,
    DomainException,
    InvalidLeagueError,
    MatchNotFoundError,
)
from .error_handler import with_fallback, safe_execute, gather_settled
from .utils import LoggerFactory, parse_datetime
from .dates import same_calendar_day, league_query_date, previous_day, to_local

__all__ = [
    # Base exceptions
    "ErrorContext",
    "ScorelineException",
    "ValidationError",
    "ConfigurationError",

    # API exceptions
    "APIException",
    "APIConnectionError",
    "APITimeoutError",
    "APINotFoundError",
    "APIServerError",
    "APIResponseError",

    # Domain exceptions
    "DomainException",
    "InvalidLeagueError",
    "MatchNotFoundError",

    # Error boundaries
    "with_fallback",
    "safe_execute",
    "gather_settled",

    # Utilities
    "LoggerFactory",
    "parse_datetime",
    "same_calendar_day",
    "league_query_date",
    "previous_day",
    "to_local",
]
