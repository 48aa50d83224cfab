"""Turn sequencer: pure state transitions driven by a single advance input."""

import copy
import logging
import random
from collections.abc import Callable, Sequence
from typing import Optional

from impostor.round_setup import start_round
from impostor.rules import ADVANCE_KEY, Role, TurnState
from impostor.state import Card, Item, RoundState

logger = logging.getLogger(__name__)


def get_turn_state(state: RoundState) -> TurnState:
    """Return the sequencer state derived from the round fields."""
    return state.turn_state


def start_game(
    state: RoundState,
    catalog: Sequence[Item],
    player_count: int,
    rng: Optional[random.Random] = None,
) -> RoundState:
    """
    Run round setup from NoRound. Returns new state.
    Outside NoRound, or when the catalog has no usable item, returns the state unchanged.
    """
    if state.turn_state != TurnState.NO_ROUND:
        return state
    new_state = start_round(catalog, player_count, rng=rng)
    if new_state is None:
        return state
    return new_state


def reveal_card(state: RoundState) -> RoundState:
    """Show the current player's card. No-op unless awaiting a reveal. Returns new state."""
    if state.turn_state != TurnState.AWAITING_REVEAL:
        return state
    state = copy.deepcopy(state)
    state.card_revealed = True
    return state


def next_player(state: RoundState) -> RoundState:
    """Hide the card and pass to the next player, or end the round after the last one. Returns new state."""
    if state.turn_state != TurnState.CARD_SHOWN:
        return state
    state = copy.deepcopy(state)
    state.card_revealed = False
    if state.is_last_player():
        state.round_ended = True
        logger.info("Round ended after %d players", len(state.players))
    else:
        state.current_player_index += 1
    return state


def reset_game(state: RoundState) -> RoundState:
    """Discard the finished round. No-op unless the round has ended. Returns new state."""
    if state.turn_state != TurnState.ROUND_ENDED:
        return state
    return RoundState()


def advance(
    state: RoundState,
    catalog: Sequence[Item],
    player_count: int,
    rng: Optional[random.Random] = None,
) -> RoundState:
    """Apply the state-appropriate action for one advance input. Returns new state."""
    action = _ADVANCE_ACTIONS[state.turn_state]
    return action(state, catalog, player_count, rng)


_AdvanceAction = Callable[[RoundState, Sequence[Item], int, Optional[random.Random]], RoundState]

# One entry per TurnState; advance is total over the state set.
_ADVANCE_ACTIONS: dict[TurnState, _AdvanceAction] = {
    TurnState.NO_ROUND: start_game,
    TurnState.AWAITING_REVEAL: lambda state, *_: reveal_card(state),
    TurnState.CARD_SHOWN: lambda state, *_: next_player(state),
    TurnState.ROUND_ENDED: lambda state, *_: reset_game(state),
}


def handle_key(
    state: RoundState,
    code: str,
    catalog: Sequence[Item],
    player_count: int,
    rng: Optional[random.Random] = None,
) -> tuple[RoundState, bool]:
    """
    Keyboard dispatcher. Returns (new_state, handled).
    handled is True only for the advance key; the caller must then suppress the key's default action.
    Any other key leaves the state untouched.
    """
    if code != ADVANCE_KEY:
        return state, False
    return advance(state, catalog, player_count, rng=rng), True


def current_card(state: RoundState) -> Optional[Card]:
    """Return the card of the current player while it is shown, else None."""
    if state.turn_state != TurnState.CARD_SHOWN:
        return None
    player = state.get_current_player()
    item = state.selected_item
    if player is None or item is None:
        return None
    if player.role == Role.IMPOSTOR:
        return Card(player_id=player.id, role=Role.IMPOSTOR, clue=state.impostor_clue)
    return Card(player_id=player.id, role=Role.NORMAL, word=item.word, imagen=item.imagen)
