"""
Exception hierarchy for the Scoreline data layer.
Transport and domain errors carry context so absorption points can log them.
"""

from typing import Any, Dict, Optional, List
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class ErrorContext:
    """Context information for errors."""
    operation: str
    league: Optional[str] = None
    endpoint: Optional[str] = None
    parameters: Optional[Dict[str, Any]] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """Convert error context to dictionary."""
        return {
            'operation': self.operation,
            'league': self.league,
            'endpoint': self.endpoint,
            'parameters': self.parameters,
            'timestamp': self.timestamp.isoformat(),
        }


class ScorelineException(Exception):
    """
    Base exception class for all Scoreline-specific errors.
    Provides rich context and error categorization.
    """

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        error_code: Optional[str] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.context = context
        self.original_error = original_error
        self.error_code = error_code
        self.recoverable = recoverable
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code,
            'recoverable': self.recoverable,
            'timestamp': self.timestamp.isoformat(),
            'context': self.context.to_dict() if self.context else None,
            'original_error': str(self.original_error) if self.original_error else None
        }

    def __str__(self) -> str:
        base_msg = self.message
        if self.context and self.context.league:
            base_msg += f" (League: {self.context.league})"
        if self.error_code:
            base_msg += f" [Code: {self.error_code}]"
        return base_msg


# =============================================================================
# Validation and Configuration Exceptions
# =============================================================================

class ValidationError(ScorelineException):
    """Raised when input validation fails."""

    def __init__(
        self,
        field: str,
        value: Any,
        constraint: str,
        context: Optional[ErrorContext] = None
    ):
        message = f"Validation failed for field '{field}': {constraint}. Got: {value}"
        super().__init__(
            message=message,
            context=context,
            error_code="VALIDATION_ERROR",
            recoverable=True
        )
        self.field = field
        self.value = value
        self.constraint = constraint


class ConfigurationError(ScorelineException):
    """Raised when configuration is invalid or missing."""

    def __init__(self, setting: str, message: str, context: Optional[ErrorContext] = None):
        full_message = f"Configuration error for '{setting}': {message}"
        super().__init__(
            message=full_message,
            context=context,
            error_code="CONFIG_ERROR",
            recoverable=False
        )
        self.setting = setting


# =============================================================================
# API-Related Exceptions
# =============================================================================

class APIException(ScorelineException):
    """Base class for all upstream transport errors."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_data: Optional[Any] = None,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        recoverable: bool = False
    ):
        super().__init__(
            message=message,
            context=context,
            original_error=original_error,
            error_code="API_ERROR",
            recoverable=recoverable
        )
        self.status_code = status_code
        self.response_data = response_data

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'status_code': self.status_code,
            'response_data': self.response_data
        })
        return base_dict


class APIConnectionError(APIException):
    """Raised when unable to connect to the API."""

    def __init__(self, url: str, context: Optional[ErrorContext] = None, original_error: Optional[Exception] = None):
        message = f"Failed to connect to API endpoint: {url}"
        super().__init__(
            message=message,
            context=context,
            original_error=original_error,
            recoverable=True
        )
        self.url = url
        self.error_code = "API_CONNECTION_ERROR"


class APITimeoutError(APIException):
    """Raised when API request times out."""

    def __init__(self, timeout: float, context: Optional[ErrorContext] = None):
        message = f"API request timed out after {timeout} seconds"
        super().__init__(
            message=message,
            context=context,
            recoverable=True
        )
        self.timeout = timeout
        self.error_code = "API_TIMEOUT_ERROR"


class APINotFoundError(APIException):
    """Raised when API endpoint or resource is not found."""

    def __init__(self, resource: str, context: Optional[ErrorContext] = None):
        message = f"API resource not found: {resource}"
        super().__init__(
            message=message,
            status_code=404,
            context=context,
            recoverable=False
        )
        self.resource = resource
        self.error_code = "API_NOT_FOUND_ERROR"


class APIServerError(APIException):
    """Raised when the API answers with any other non-success status."""

    def __init__(
        self,
        status_code: int,
        response_data: Optional[Any] = None,
        context: Optional[ErrorContext] = None
    ):
        message = f"API server error (HTTP {status_code})"
        super().__init__(
            message=message,
            status_code=status_code,
            response_data=response_data,
            context=context,
            recoverable=500 <= status_code < 600
        )
        self.error_code = "API_SERVER_ERROR"


class APIResponseError(APIException):
    """Raised when API response is invalid or malformed."""

    def __init__(
        self,
        expected_format: str,
        actual_content: Any = None,
        context: Optional[ErrorContext] = None
    ):
        message = f"Invalid API response format. Expected: {expected_format}"
        super().__init__(
            message=message,
            context=context,
            recoverable=False
        )
        self.expected_format = expected_format
        self.actual_content = actual_content
        self.error_code = "API_RESPONSE_ERROR"


# =============================================================================
# Domain-Level Exceptions
# =============================================================================

class DomainException(ScorelineException):
    """Base class for domain logic errors."""

    def __init__(
        self,
        message: str,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None,
        error_code: str = "DOMAIN_ERROR",
        recoverable: bool = True
    ):
        super().__init__(
            message=message,
            context=context,
            original_error=original_error,
            error_code=error_code,
            recoverable=recoverable
        )


class InvalidLeagueError(DomainException):
    """Raised when an unknown league id is used, or "top" where it is unsupported."""

    def __init__(
        self,
        league_id: str,
        valid_leagues: Optional[List[str]] = None,
        reason: Optional[str] = None,
        context: Optional[ErrorContext] = None
    ):
        message = f"Invalid league: '{league_id}'"
        if reason:
            message += f" ({reason})"
        if valid_leagues:
            message += f". Valid leagues: {', '.join(valid_leagues)}"

        super().__init__(
            message=message,
            context=context,
            error_code="INVALID_LEAGUE",
            recoverable=True
        )
        self.league_id = league_id
        self.valid_leagues = valid_leagues


class MatchNotFoundError(DomainException):
    """Raised when a game summary carries no usable header."""

    def __init__(
        self,
        match_id: str,
        league_id: Optional[str] = None,
        context: Optional[ErrorContext] = None
    ):
        message = f"Match with ID {match_id} not found"
        if league_id:
            message += f" in {league_id}"

        super().__init__(
            message=message,
            context=context,
            error_code="MATCH_NOT_FOUND",
            recoverable=False
        )
        self.match_id = match_id
        self.league_id = league_id
