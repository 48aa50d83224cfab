"""Read-only view model for the device screen."""

from dataclasses import dataclass
from typing import Optional

from impostor.engine import current_card
from impostor.rules import ADVANCE_KEY, Role, TurnState, View
from impostor.state import Card, RoundState

_VIEW_BY_STATE = {
    TurnState.NO_ROUND: View.SETUP,
    TurnState.AWAITING_REVEAL: View.READY,
    TurnState.CARD_SHOWN: View.CARD,
    TurnState.ROUND_ENDED: View.ENDED,
}

_PROMPTS = {
    View.SETUP: "Press {key} to start",
    View.READY: "Player {number}, get ready to see your card. Press {key} to reveal",
    View.CARD: "Press {key} to continue",
    View.ENDED: "Round over. Press {key} to start again",
}

_ROLE_LABELS = {
    Role.IMPOSTOR: "You are the IMPOSTOR",
    Role.NORMAL: "Normal player",
}


@dataclass(frozen=True)
class ScreenView:
    """One of the four screens plus the card when it is the card screen."""

    view: View
    prompt: str
    player_number: Optional[int] = None
    card: Optional[Card] = None
    role_label: Optional[str] = None


def build_view(state: RoundState) -> ScreenView:
    """Pick the screen for state. Only the card view carries round secrets."""
    view = _VIEW_BY_STATE[state.turn_state]
    player = state.get_current_player()
    number = player.id + 1 if player is not None else None
    prompt = _PROMPTS[view].format(key=ADVANCE_KEY, number=number)
    card = current_card(state) if view == View.CARD else None
    role_label = _ROLE_LABELS[card.role] if card is not None else None
    return ScreenView(view=view, prompt=prompt, player_number=number, card=card, role_label=role_label)
