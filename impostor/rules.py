"""Game rules and constants for the impostor word game."""

from enum import Enum


class Role(str, Enum):
    """Player roles in a round."""

    NORMAL = "normal"
    IMPOSTOR = "impostor"


class TurnState(str, Enum):
    """Where the turn sequencer currently is."""

    NO_ROUND = "no_round"
    AWAITING_REVEAL = "awaiting_reveal"
    CARD_SHOWN = "card_shown"
    ROUND_ENDED = "round_ended"


class View(str, Enum):
    """Screen the device should render for a given state."""

    SETUP = "setup"
    READY = "ready"
    CARD = "card"
    ENDED = "ended"


# Player count bounds (inclusive)
MIN_PLAYERS = 3
MAX_PLAYERS = 12

DEFAULT_NUM_PLAYERS = 4

# Key code of the single shared "advance" input
ADVANCE_KEY = "Space"
