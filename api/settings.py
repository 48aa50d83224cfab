"""Environment configuration for the impostor API."""

import logging
import os
from pathlib import Path

from impostor.catalog import BUNDLED_CATALOG_PATH
from impostor.rules import DEFAULT_NUM_PLAYERS, MAX_PLAYERS, MIN_PLAYERS

logger = logging.getLogger(__name__)

# Env var names
ENV_ITEMS_PATH = "IMPOSTOR_ITEMS_PATH"
ENV_CORS_ORIGINS = "IMPOSTOR_CORS_ORIGINS"
ENV_DEFAULT_PLAYERS = "IMPOSTOR_DEFAULT_PLAYERS"

DEFAULT_ITEMS_PATH = BUNDLED_CATALOG_PATH


def get_items_path() -> Path:
    """Catalog file: IMPOSTOR_ITEMS_PATH or the bundled data/items.json."""
    value = os.environ.get(ENV_ITEMS_PATH)
    return Path(value) if value else DEFAULT_ITEMS_PATH


def get_cors_origins() -> list[str]:
    """Comma-separated IMPOSTOR_CORS_ORIGINS; defaults to all origins."""
    value = os.environ.get(ENV_CORS_ORIGINS, "").strip()
    if not value:
        return ["*"]
    return [o.strip() for o in value.split(",") if o.strip()]


def get_default_num_players() -> int:
    """Default player count for new tables, clamped into the allowed range."""
    value = os.environ.get(ENV_DEFAULT_PLAYERS)
    if not value:
        return DEFAULT_NUM_PLAYERS
    try:
        n = int(value)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", ENV_DEFAULT_PLAYERS, value)
        return DEFAULT_NUM_PLAYERS
    return max(MIN_PLAYERS, min(MAX_PLAYERS, n))
