"""Tests for catalog loading."""

import json

from impostor.catalog import load_catalog, parse_catalog
from impostor.state import Item


def test_parse_catalog():
    items = parse_catalog([{"word": "Dog", "clues": ["Barks"], "imagen": "dog.png"}])
    assert items == [Item(word="Dog", clues=("Barks",), imagen="dog.png")]


def test_parse_catalog_drops_invalid_records():
    data = [
        {"word": "Dog", "clues": ["Barks"], "imagen": "dog.png"},
        {"clues": ["No word"], "imagen": "x.png"},
        {"word": "Cat", "clues": "not a list", "imagen": "cat.png"},
        "junk",
    ]
    items = parse_catalog(data)
    assert [i.word for i in items] == ["Dog"]


def test_parse_catalog_keeps_item_without_clues():
    items = parse_catalog([{"word": "Ghost", "clues": [], "imagen": "ghost.png"}])
    assert items[0].clues == ()


def test_parse_catalog_not_a_list():
    assert parse_catalog({"word": "Dog"}) == []


def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "items.json"
    path.write_text(json.dumps([{"word": "Sun", "clues": ["Hot"], "imagen": "sun.png"}]), encoding="utf-8")
    assert load_catalog(path) == [Item(word="Sun", clues=("Hot",), imagen="sun.png")]


def test_load_catalog_missing_file_is_empty(tmp_path):
    assert load_catalog(tmp_path / "missing.json") == []


def test_load_catalog_bad_json_is_empty(tmp_path):
    path = tmp_path / "items.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_catalog(path) == []


def test_bundled_catalog_loads():
    from api.settings import DEFAULT_ITEMS_PATH

    items = load_catalog(DEFAULT_ITEMS_PATH)
    assert items
    assert all(i.clues for i in items)


def test_load_catalog_undecodable_file_is_empty(tmp_path):
    path = tmp_path / "items.json"
    path.write_bytes(b"\xff\xfe\x00garbage")
    assert load_catalog(path) == []
