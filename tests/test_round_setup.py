"""Unit tests for round setup."""

import random
from collections import Counter

import pytest
from impostor.round_setup import start_round, usable_items, validate_player_count
from impostor.rules import MAX_PLAYERS, MIN_PLAYERS, Role, TurnState
from impostor.state import Item

DOG = Item(word="Dog", clues=("Barks",), imagen="dog.png")
CAT = Item(word="Cat", clues=("Meows", "Whiskers"), imagen="cat.png")


def _impostors(state):
    return [p for p in state.players if p.role == Role.IMPOSTOR]


@pytest.mark.parametrize("player_count", range(MIN_PLAYERS, MAX_PLAYERS + 1))
def test_roster_size_and_single_impostor(player_count):
    state = start_round([DOG, CAT], player_count)
    assert state is not None
    assert len(state.players) == player_count
    assert [p.id for p in state.players] == list(range(player_count))
    assert len(_impostors(state)) == 1


def test_post_state():
    state = start_round([DOG], 5)
    assert state.current_player_index == 0
    assert state.card_revealed is False
    assert state.round_ended is False
    assert state.turn_state == TurnState.AWAITING_REVEAL


def test_clue_belongs_to_selected_item():
    rng = random.Random(7)
    for _ in range(50):
        state = start_round([DOG, CAT], 4, rng=rng)
        assert state.selected_item in (DOG, CAT)
        assert state.impostor_clue in state.selected_item.clues


def test_seeded_rng_reproduces_item_and_clue():
    catalog = [DOG, CAT, Item(word="Sun", clues=("Hot", "Bright"), imagen="sun.png")]
    a = start_round(catalog, 4, rng=random.Random(3))
    b = start_round(catalog, 4, rng=random.Random(3))
    assert a.selected_item == b.selected_item
    assert a.impostor_clue == b.impostor_clue


def test_seeded_rng_does_not_fix_impostor():
    seats = set()
    for _ in range(200):
        state = start_round([DOG], 6, rng=random.Random(1))
        seats.add(_impostors(state)[0].id)
    assert len(seats) > 1


def test_empty_catalog_is_noop():
    assert start_round([], 4) is None


def test_items_without_clues_are_skipped():
    broken = Item(word="Ghost", clues=(), imagen="ghost.png")
    for _ in range(30):
        state = start_round([broken, DOG], 3)
        assert state.selected_item == DOG


def test_all_items_without_clues_is_noop():
    broken = Item(word="Ghost", clues=(), imagen="ghost.png")
    assert start_round([broken], 3) is None
    assert usable_items([broken, DOG]) == [DOG]


@pytest.mark.parametrize("bad", [0, 2, 13, -1])
def test_validate_player_count_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        validate_player_count(bad)
    with pytest.raises(ValueError):
        start_round([DOG], bad)


def test_impostor_index_uniform():
    """Chi-square goodness of fit over the impostor seat. Critical value is far above p=0.001 for 5 dof."""
    player_count = 6
    trials = 6000
    counts = Counter(
        _impostors(start_round([DOG], player_count))[0].id
        for _ in range(trials)
    )
    expected = trials / player_count
    chi2 = sum((counts[i] - expected) ** 2 / expected for i in range(player_count))
    assert set(counts) == set(range(player_count))
    assert chi2 < 30.0
