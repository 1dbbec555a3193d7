"""External API adapters."""

from .espn_client import EspnClient, APIResponse

__all__ = ["EspnClient", "APIResponse"]
