"""Round setup: pick the secret item, the impostor clue and the impostor."""

import logging
import random
import secrets
from collections.abc import Sequence
from typing import Optional

from impostor.rules import MAX_PLAYERS, MIN_PLAYERS, Role
from impostor.state import Item, Player, RoundState

logger = logging.getLogger(__name__)


def validate_player_count(player_count: int) -> int:
    """Return player_count if within [MIN_PLAYERS, MAX_PLAYERS], else raise ValueError."""
    if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
        raise ValueError(
            f"player_count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {player_count}"
        )
    return player_count


def usable_items(catalog: Sequence[Item]) -> list[Item]:
    """Items that can produce an impostor clue (at least one clue)."""
    return [item for item in catalog if item.clues]


def _pick_impostor_index(player_count: int) -> int:
    # Impostor identity must not be reproducible, so this never uses the seedable rng.
    return secrets.randbelow(player_count)


def start_round(
    catalog: Sequence[Item],
    player_count: int,
    rng: Optional[random.Random] = None,
) -> Optional[RoundState]:
    """
    Build a fresh RoundState for player_count players.

    Item and clue are drawn from rng (seedable, content variety only). The
    impostor seat is drawn from the OS secure source regardless of rng.
    Returns None when the catalog has no usable item; the caller keeps its
    current state.
    """
    validate_player_count(player_count)
    candidates = usable_items(catalog)
    if not candidates:
        if catalog:
            logger.warning("All %d catalog items have no clues; round not started", len(catalog))
        else:
            logger.warning("Catalog is empty; round not started")
        return None
    if len(candidates) < len(catalog):
        logger.warning("Skipping %d catalog items without clues", len(catalog) - len(candidates))

    rng = rng or random.Random()
    item = rng.choice(candidates)
    clue = rng.choice(item.clues)

    impostor_index = _pick_impostor_index(player_count)
    players = [
        Player(id=i, role=Role.IMPOSTOR if i == impostor_index else Role.NORMAL)
        for i in range(player_count)
    ]
    logger.info("Round started with %d players", player_count)
    return RoundState(
        players=players,
        current_player_index=0,
        selected_item=item,
        impostor_clue=clue,
        card_revealed=False,
        round_ended=False,
    )
