"""Round state types for the impostor word game."""

from dataclasses import dataclass, field
from typing import Optional

from impostor.rules import Role, TurnState


@dataclass(frozen=True)
class Item:
    """A catalog entry: the secret word, its candidate clues and an image reference."""

    word: str
    clues: tuple[str, ...]
    imagen: str


@dataclass(frozen=True)
class Player:
    """A player in the round. Role is fixed once the roster is built."""

    id: int
    role: Role = Role.NORMAL


@dataclass(frozen=True)
class Card:
    """What the current player sees when their card is shown.

    Impostor cards carry only the clue; normal cards carry only word and image.
    """

    player_id: int
    role: Role
    word: Optional[str] = None
    imagen: Optional[str] = None
    clue: Optional[str] = None

    @property
    def player_number(self) -> int:
        """1-based number shown on the card."""
        return self.player_id + 1


@dataclass
class RoundState:
    """Full session state of one device. Empty before a round starts."""

    players: list[Player] = field(default_factory=list)
    current_player_index: int = 0
    selected_item: Optional[Item] = None
    impostor_clue: Optional[str] = None
    card_revealed: bool = False
    round_ended: bool = False

    @property
    def turn_state(self) -> TurnState:
        if not self.players:
            return TurnState.NO_ROUND
        if self.round_ended:
            return TurnState.ROUND_ENDED
        if self.card_revealed:
            return TurnState.CARD_SHOWN
        return TurnState.AWAITING_REVEAL

    def get_current_player(self) -> Optional[Player]:
        """Return the player whose turn it is, or None outside an active round."""
        if not self.players or self.round_ended:
            return None
        return self.players[self.current_player_index]

    def is_last_player(self) -> bool:
        return self.current_player_index + 1 >= len(self.players)
