"""
Base domain model patterns shared by every value record.
"""

from dataclasses import fields
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict


def _serialize(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    return value


class ValueRecord:
    """
    Mixin for frozen dataclass records.
    Records are built fresh from one upstream response and never mutated.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to a JSON-ready dictionary."""
        return {f.name: _serialize(getattr(self, f.name)) for f in fields(self)}
