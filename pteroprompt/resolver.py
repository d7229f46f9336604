# pteroprompt/resolver.py
from __future__ import annotations

from .errors import PlayerNotFound


def resolve_player(client, name: str) -> str:
    """Turn a display name into a player ID.

    The roster is fetched on every call. Matching is exact and case
    sensitive; if two connected players share a name the first one listed
    by the server wins.
    """
    for player in client.get_player_list():
        if player.name == name:
            return player.id
    raise PlayerNotFound(name)


def resolve_or_literal(client, names: list[str]) -> list[str]:
    """Resolve each name, keeping the input as-is when nobody by that name
    is online (the operator may have typed a raw ID for an absent player)."""
    ids = []
    for name in names:
        try:
            ids.append(resolve_player(client, name))
        except PlayerNotFound:
            ids.append(name)
    return ids
