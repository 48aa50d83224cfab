"""In-memory store of device tables and the loaded catalog. Only this module writes round state."""

from typing import Any

from impostor.state import Item, RoundState

# game_id -> { state, num_players }
_store: dict[str, dict[str, Any]] = {}

_catalog: list[Item] = []


def create(game_id: str, num_players: int) -> None:
    _store[game_id] = {
        "state": RoundState(),
        "num_players": num_players,
    }


def get(game_id: str) -> dict[str, Any] | None:
    return _store.get(game_id)


def update(game_id: str, state: RoundState) -> None:
    if game_id in _store:
        _store[game_id]["state"] = state


def set_num_players(game_id: str, num_players: int) -> None:
    if game_id in _store:
        _store[game_id]["num_players"] = num_players


def delete(game_id: str) -> None:
    _store.pop(game_id, None)


def list_games() -> list[str]:
    return list(_store.keys())


def set_catalog(items: list[Item]) -> None:
    """Replace the catalog (called once at startup, or by tests)."""
    global _catalog
    _catalog = list(items)


def get_catalog() -> list[Item]:
    return _catalog
