"""FastAPI app: one table per device, driven by button routes or the advance key."""

import logging
import uuid
from collections.abc import Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from impostor.catalog import load_catalog
from impostor.engine import (
    advance,
    handle_key,
    next_player,
    reset_game,
    reveal_card,
    start_game,
)
from impostor.rules import TurnState
from impostor.state import RoundState
from api.game_store import (
    create as store_create,
    delete as store_delete,
    get as store_get,
    get_catalog,
    list_games,
    set_catalog,
    set_num_players,
    update as store_update,
)
from api.models import (
    GameConfigRequest,
    GameCreateRequest,
    GameStateResponse,
    KeyEventRequest,
    KeyEventResponse,
    game_state_to_public,
)
from api.settings import get_cors_origins, get_default_num_players, get_items_path

logger = logging.getLogger(__name__)

ROUND_NOT_STARTED_MESSAGE = "No items with clues are available; round not started"


@asynccontextmanager
async def lifespan(app: FastAPI):
    set_catalog(load_catalog(get_items_path()))
    if not get_catalog():
        logger.warning("Starting with an empty catalog; rounds cannot start")
    yield


app = FastAPI(title="Impostor API", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_entry(game_id: str) -> dict:
    entry = store_get(game_id)
    if not entry:
        raise HTTPException(404, "Game not found")
    return entry


def _not_started_message(before: RoundState, after: RoundState) -> str | None:
    """Diagnostic when a start was attempted from NoRound but setup was a no-op."""
    if before.turn_state == TurnState.NO_ROUND and after.turn_state == TurnState.NO_ROUND:
        return ROUND_NOT_STARTED_MESSAGE
    return None


def _apply(game_id: str, transition: Callable[[RoundState], RoundState], starts: bool = False) -> GameStateResponse:
    entry = _get_entry(game_id)
    state = entry["state"]
    new_state = transition(state)
    store_update(game_id, new_state)
    message = _not_started_message(state, new_state) if starts else None
    return game_state_to_public(game_id, new_state, entry["num_players"], message=message)


@app.post("/games", response_model=dict, tags=["Games"], summary="Create table")
def create_game(body: GameCreateRequest):
    """Create a new table in the pre-round state. Returns game_id."""
    game_id = str(uuid.uuid4())
    num_players = body.num_players if body.num_players is not None else get_default_num_players()
    store_create(game_id, num_players)
    return {"game_id": game_id}


@app.get("/games", response_model=list[str], tags=["Games"], summary="List table IDs")
def list_games_route():
    """List all table IDs."""
    return list_games()


@app.get("/games/{game_id}", response_model=GameStateResponse, tags=["Games"], summary="Get table view")
def get_game(game_id: str):
    """Get the screen the device should render."""
    entry = _get_entry(game_id)
    return game_state_to_public(game_id, entry["state"], entry["num_players"])


@app.patch("/games/{game_id}", response_model=GameStateResponse, tags=["Games"], summary="Configure table")
def configure_game(game_id: str, body: GameConfigRequest):
    """Set the player count. Only allowed before a round starts."""
    entry = _get_entry(game_id)
    if entry["state"].turn_state != TurnState.NO_ROUND:
        raise HTTPException(400, "Player count can only change before a round starts")
    set_num_players(game_id, body.num_players)
    return game_state_to_public(game_id, entry["state"], body.num_players)


@app.delete("/games/{game_id}", response_model=dict, tags=["Games"], summary="Delete table")
def delete_game(game_id: str):
    _get_entry(game_id)
    store_delete(game_id)
    return {"deleted": game_id}


@app.post("/games/{game_id}/start", response_model=GameStateResponse, tags=["Round"], summary="Start round")
def start_game_endpoint(game_id: str):
    """Run round setup. No-op outside the pre-round state."""
    num_players = _get_entry(game_id)["num_players"]
    return _apply(game_id, lambda s: start_game(s, get_catalog(), num_players), starts=True)


@app.post("/games/{game_id}/reveal", response_model=GameStateResponse, tags=["Round"], summary="Reveal card")
def reveal_card_endpoint(game_id: str):
    """Show the current player's card. No-op unless awaiting a reveal."""
    return _apply(game_id, reveal_card)


@app.post("/games/{game_id}/next", response_model=GameStateResponse, tags=["Round"], summary="Next player")
def next_player_endpoint(game_id: str):
    """Hide the card and pass the device on. No-op unless a card is shown."""
    return _apply(game_id, next_player)


@app.post("/games/{game_id}/reset", response_model=GameStateResponse, tags=["Round"], summary="Reset")
def reset_game_endpoint(game_id: str):
    """Back to the pre-round state. No-op unless the round has ended."""
    return _apply(game_id, reset_game)


@app.post("/games/{game_id}/advance", response_model=GameStateResponse, tags=["Round"], summary="Advance")
def advance_endpoint(game_id: str):
    """The single advance action: start, reveal, next or reset depending on state."""
    num_players = _get_entry(game_id)["num_players"]
    return _apply(game_id, lambda s: advance(s, get_catalog(), num_players), starts=True)


@app.post("/games/{game_id}/key", response_model=KeyEventResponse, tags=["Round"], summary="Key event")
def key_event_endpoint(game_id: str, body: KeyEventRequest):
    """Keyboard input. Only the advance key does anything; other keys are ignored."""
    entry = _get_entry(game_id)
    state = entry["state"]
    new_state, handled = handle_key(state, body.code, get_catalog(), entry["num_players"])
    message = None
    if handled:
        store_update(game_id, new_state)
        message = _not_started_message(state, new_state)
    return KeyEventResponse(
        handled=handled,
        prevent_default=handled,
        game=game_state_to_public(game_id, new_state, entry["num_players"], message=message),
    )


@app.get("/health", tags=["System"], summary="Health check")
def health():
    return {"status": "ok", "catalog_items": len(get_catalog())}
