"""
Roster and box-score extraction.

Two upstream encodings exist and are told apart by shape, not by sport:

* grouped: ``statistics`` is a list of named groups, each with a ``labels``
  array and athletes whose ``stats`` array is aligned with it by position;
* flat: ``roster`` is a list of entries that carry their own stats, either
  as ``[{name, displayValue}]`` pairs or as a plain mapping.
"""

from typing import Any, Dict, List, Optional

from ...core.lookup import as_dict, as_list, dicts, dig, first_present, is_present, to_int, to_text
from ..models.player import PlayerStat

STARTER_GROUPS = {"starters", "starter"}


def _display(value: Any) -> Optional[str]:
    """Stat value as its display string; None when absent."""
    if not is_present(value) or isinstance(value, (dict, list)):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _headshot(athlete: Dict[str, Any]) -> Optional[str]:
    headshot = athlete.get("headshot")
    if isinstance(headshot, str):
        return headshot or None
    return to_text(dig(headshot, "href", default=None)) or None


def _flag(value: Any) -> Optional[bool]:
    """Explicit boolean flags; ``{"didSub": true}`` objects are unwrapped."""
    if isinstance(value, dict):
        value = value.get("didSub")
    return value if isinstance(value, bool) else None


def _identity(entry: Dict[str, Any]) -> Dict[str, Any]:
    athlete = as_dict(entry.get("athlete"))
    position = as_dict(first_present(athlete.get("position"), entry.get("position"), default={}))
    return {
        "id": to_text(first_present(athlete.get("id"), entry.get("id"), default="")),
        "name": to_text(first_present(
            athlete.get("displayName"),
            athlete.get("shortName"),
            athlete.get("fullName"),
            default="",
        )),
        "position": to_text(position.get("abbreviation")),
        "position_name": to_text(position.get("displayName")) or None,
        "jersey": to_text(first_present(entry.get("jersey"), athlete.get("jersey"), default="")),
        "headshot": _headshot(athlete),
    }


def is_grouped(payload: Dict[str, Any]) -> bool:
    return any("athletes" in group or "labels" in group for group in dicts(payload.get("statistics")))


def is_flat(payload: Dict[str, Any]) -> bool:
    return bool(dicts(payload.get("roster")))


def _group_name(group: Dict[str, Any]) -> str:
    return to_text(first_present(group.get("name"), group.get("type"), group.get("text"), default=""))


def extract_grouped(payload: Dict[str, Any]) -> List[PlayerStat]:
    """Zip each group's labels with every athlete's positional stats."""
    rows = []
    for group in dicts(payload.get("statistics")):
        group_name = _group_name(group)
        labels = [
            to_text(label)
            for label in as_list(group.get("labels")) or as_list(group.get("names")) or as_list(group.get("keys"))
        ]
        for entry in dicts(group.get("athletes")):
            starter = entry.get("starter")
            if not isinstance(starter, bool):
                starter = group_name.lower() in STARTER_GROUPS

            stats = {}
            for label, value in zip(labels, as_list(entry.get("stats"))):
                display = _display(value)
                if label and display is not None:
                    stats[label] = display

            rows.append(PlayerStat(
                **_identity(entry),
                stats=stats,
                is_starter=starter,
                category=group_name or ("starters" if starter else "bench"),
                active=entry.get("active") if isinstance(entry.get("active"), bool) else None,
            ))
    return rows


def _flat_stats(raw: Any) -> Dict[str, str]:
    if isinstance(raw, dict):
        pairs = ((key, value) for key, value in raw.items())
    else:
        pairs = (
            (
                first_present(item.get("name"), item.get("label"), item.get("abbreviation"), default=None),
                first_present(item.get("displayValue"), item.get("value"), default=None),
            )
            for item in dicts(raw)
        )

    stats = {}
    for key, value in pairs:
        display = _display(value)
        if is_present(key) and display is not None:
            stats[str(key)] = display
    return stats


def extract_flat(payload: Dict[str, Any]) -> List[PlayerStat]:
    rows = []
    for entry in dicts(payload.get("roster")):
        starter = entry.get("starter") is True
        formation_place = to_int(entry.get("formationPlace"), 0)
        rows.append(PlayerStat(
            **_identity(entry),
            stats=_flat_stats(entry.get("stats")),
            is_starter=starter,
            category="starters" if starter else "substitutes",
            active=_flag(entry.get("active")),
            formation_place=formation_place or None,
            subbed_in=_flag(entry.get("subbedIn")),
            subbed_out=_flag(entry.get("subbedOut")),
        ))
    return rows


def extract_players(payload: Dict[str, Any]) -> List[PlayerStat]:
    """Player rows from one team's roster payload, whichever encoding it uses."""
    payload = as_dict(payload)
    if is_grouped(payload):
        return extract_grouped(payload)
    if is_flat(payload):
        return extract_flat(payload)
    return []
