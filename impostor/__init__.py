"""Round and turn logic for the impostor word game."""

from impostor.engine import (
    start_game,
    reveal_card,
    next_player,
    reset_game,
    advance,
    handle_key,
    get_turn_state,
    current_card,
)
from impostor.round_setup import start_round, usable_items, validate_player_count
from impostor.rules import Role, TurnState, View
from impostor.state import Card, Item, Player, RoundState

__all__ = [
    "start_game",
    "reveal_card",
    "next_player",
    "reset_game",
    "advance",
    "handle_key",
    "get_turn_state",
    "current_card",
    "start_round",
    "usable_items",
    "validate_player_count",
    "Role",
    "TurnState",
    "View",
    "Card",
    "Item",
    "Player",
    "RoundState",
]
