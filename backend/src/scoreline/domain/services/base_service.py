"""
Base service class for Scoreline domain services.
Provides the shared client/settings wiring and league resolution.
"""

from typing import Optional

from ...config.settings import Settings, settings as default_settings
from ...core.utils import LoggerFactory
from ..models.league import League, get_league


class BaseService:
    """
    Common wiring for services that read from the upstream client.
    Public methods of subclasses never raise; they return neutral values.
    """

    def __init__(self, api_client, settings: Optional[Settings] = None):
        """
        Args:
            api_client: Upstream client (an EspnClient or compatible fake)
            settings: Settings to use instead of the global instance
        """
        self.api_client = api_client
        self.settings = settings or default_settings
        self.logger = LoggerFactory.get_logger(self.__class__.__name__)

    def resolve_league(self, league_id: str, allow_virtual: bool = False) -> League:
        """Registered league for ``league_id``; raises InvalidLeagueError otherwise."""
        return get_league(league_id, allow_virtual=allow_virtual)
