"""
Total lookup helpers for best-effort upstream dictionaries.

Upstream payloads are loosely typed: any level may be missing, null, or of an
unexpected type. These helpers never raise; they return ``MISSING`` or a
caller-supplied default instead.
"""

import math
import re
from typing import Any, Dict, Iterable, List, Optional


class _Missing:
    """Explicit absent marker, distinct from an upstream null."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()

_NUMBER_RE = re.compile(r"-?\d+(?:\.\d+)?")


def dig(data: Any, *path: Any, default: Any = MISSING) -> Any:
    """
    Walk ``path`` through nested dicts/lists.

    String keys index dicts, int keys index lists. Any miss, null, or type
    mismatch along the way yields ``default``.
    """
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return default
            current = current[key]
        else:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        if current is None:
            return default
    return current


def is_present(value: Any) -> bool:
    """True for anything except MISSING, None and empty strings."""
    if value is MISSING or value is None:
        return False
    if isinstance(value, str) and not value.strip():
        return False
    return True


def first_present(*values: Any, default: Any = MISSING) -> Any:
    """Return the first value that is present."""
    for value in values:
        if is_present(value):
            return value
    return default


def as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def dicts(value: Any) -> List[Dict[str, Any]]:
    """Only the dict items of a list; everything else is dropped."""
    return [item for item in as_list(value) if isinstance(item, dict)]


def to_text(value: Any, default: str = "") -> str:
    if not is_present(value) or isinstance(value, (dict, list)):
        return default
    return str(value)


def to_int(value: Any, default: int = 0) -> int:
    """Parse an int from an int, float or numeric string; ``default`` otherwise."""
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else default
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            try:
                return int(float(text))
            except (ValueError, OverflowError):
                return default
    return default


def to_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return float(value) if value == value else default
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return default
    return default


def trailing_number(text: str) -> Optional[str]:
    """The last numeric run in ``text``, e.g. "Matches: 10, Goals: 7" -> "7"."""
    matches = _NUMBER_RE.findall(text or "")
    return matches[-1] if matches else None


def find_first(items: Iterable[Dict[str, Any]], **criteria: Any) -> Dict[str, Any]:
    """First dict whose keys match all ``criteria``; empty dict when none do."""
    for item in items:
        if isinstance(item, dict) and all(item.get(k) == v for k, v in criteria.items()):
            return item
    return {}
