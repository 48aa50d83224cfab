"""Pydantic request/response models for the API."""

from pydantic import BaseModel, Field

from impostor.rules import MAX_PLAYERS, MIN_PLAYERS
from impostor.state import RoundState
from impostor.views import build_view


class GameCreateRequest(BaseModel):
    """Body for POST /games. num_players defaults to the server setting when omitted."""

    num_players: int | None = Field(default=None, ge=MIN_PLAYERS, le=MAX_PLAYERS)


class GameConfigRequest(BaseModel):
    """Body for PATCH /games/{id}."""

    num_players: int = Field(..., ge=MIN_PLAYERS, le=MAX_PLAYERS)


class KeyEventRequest(BaseModel):
    """Body for POST /games/{id}/key: the key code as reported by the device (e.g. Space)."""

    code: str


class CardPublic(BaseModel):
    """Current player's card. Impostor: clue only. Normal: word and image only."""

    player_number: int
    role: str
    word: str | None = None
    imagen: str | None = None
    clue: str | None = None


class GameStateResponse(BaseModel):
    """What the device renders. Never carries the roster roles."""

    game_id: str
    view: str = Field(..., description="setup, ready, card or ended")
    turn_state: str
    prompt: str
    num_players: int
    player_number: int | None = Field(default=None, description="1-based number of the player whose turn it is")
    card: CardPublic | None = Field(default=None, description="Only set on the card view")
    role_label: str | None = Field(default=None, description="Role heading shown above the card")
    round_ended: bool = False
    message: str | None = Field(default=None, description="Operator diagnostic, e.g. round did not start")


class KeyEventResponse(BaseModel):
    """Result of a key event. prevent_default tells the device to suppress the key's native action."""

    handled: bool
    prevent_default: bool
    game: GameStateResponse


def game_state_to_public(
    game_id: str,
    state: RoundState,
    num_players: int,
    message: str | None = None,
) -> GameStateResponse:
    """Build public response from RoundState through the screen view model."""
    screen = build_view(state)
    card_public = None
    if screen.card is not None:
        card_public = CardPublic(
            player_number=screen.card.player_number,
            role=screen.card.role.value,
            word=screen.card.word,
            imagen=screen.card.imagen,
            clue=screen.card.clue,
        )
    return GameStateResponse(
        game_id=game_id,
        view=screen.view.value,
        turn_state=state.turn_state.value,
        prompt=screen.prompt,
        num_players=num_players,
        player_number=screen.player_number,
        card=card_public,
        role_label=screen.role_label,
        round_ended=state.round_ended,
        message=message,
    )
