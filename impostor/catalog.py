"""Item catalog loading. The catalog is a JSON list of {word, clues, imagen} records."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from impostor.state import Item

logger = logging.getLogger(__name__)

BUNDLED_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "items.json"


class ItemRecord(BaseModel):
    """One catalog record as authored in the JSON file."""

    word: str = Field(..., min_length=1)
    clues: list[str] = Field(default_factory=list)
    imagen: str = ""

    def to_item(self) -> Item:
        return Item(word=self.word, clues=tuple(c for c in self.clues if c), imagen=self.imagen)


def parse_catalog(data: Any) -> list[Item]:
    """Turn decoded JSON into Items, dropping records that fail validation."""
    if not isinstance(data, list):
        logger.warning("Catalog must be a JSON list, got %s", type(data).__name__)
        return []
    items: list[Item] = []
    for i, raw in enumerate(data):
        try:
            record = ItemRecord.model_validate(raw)
        except ValidationError as e:
            logger.warning("Dropping catalog record %d: %s", i, e.errors()[0].get("msg", e))
            continue
        items.append(record.to_item())
    return items


def load_catalog(path: str | Path) -> list[Item]:
    """Read the catalog file once. Failures are logged and give an empty catalog."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Failed to load catalog from %s: %s", path, e)
        return []
    items = parse_catalog(data)
    logger.info("Loaded %d catalog items from %s", len(items), path)
    return items
