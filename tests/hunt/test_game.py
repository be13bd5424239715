"""Unit tests for src/hunt/game.py"""

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.core.models import Coordinate, GameDetails, ItemModel
from src.core.shared_types import Difficulty
from src.hunt.game import apply_update, average_rating, is_listed, is_owned_by, new_game

NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

DETAILS = GameDetails(
    is_private=False,
    name="Harbour Hunt",
    description="Spot the cranes",
    address="Kaai 7",
    country="Netherlands",
    coordinate=Coordinate(latitude=51.92, longitude=4.48),
    image_name="harbour.jpg",
    difficulty=Difficulty.EASY,
    tags=frozenset({"water"}),
)


@pytest.mark.parametrize(
    "ratings, expected",
    [
        ([], 0),
        ([5], 5),
        ([3, 4], 3.5),
        ([1, 2, 2], 5 / 3),
    ],
)
def test_average_rating(ratings: list[int], expected: float) -> None:
    assert average_rating(ratings) == pytest.approx(expected)


def test_new_game_is_owned_by_creator() -> None:
    owner = uuid4()
    game = new_game(DETAILS, owner_user_id=owner, now=NOW)

    assert game.owner_user_id == owner
    assert game.last_updated == NOW
    assert game.items == ()
    assert game.ratings == ()
    assert game.name == DETAILS.name
    assert game.coordinate == DETAILS.coordinate
    assert game.tags == DETAILS.tags


def test_new_games_get_fresh_ids() -> None:
    owner = uuid4()
    ids = {new_game(DETAILS, owner_user_id=owner, now=NOW).id for _ in range(20)}
    assert len(ids) == 20


def test_apply_update_replaces_editable_fields() -> None:
    """id, owner, items and ratings survive, everything else comes from the new details."""
    stored = new_game(DETAILS, owner_user_id=uuid4(), now=NOW)
    stored = replace(
        stored,
        items=(ItemModel(uuid4(), stored.id, "Crane", "Big and red", "crane.png"),),
        ratings=(4, 5),
    )
    changes = replace(
        DETAILS,
        is_private=True,
        name="Night Harbour Hunt",
        coordinate=Coordinate(latitude=51.9, longitude=4.5),
        difficulty=Difficulty.HARD,
        tags=frozenset({"night", "water"}),
    )
    later = NOW + timedelta(hours=1)

    updated = apply_update(stored, changes, now=later)

    assert updated.id == stored.id
    assert updated.owner_user_id == stored.owner_user_id
    assert updated.items == stored.items
    assert updated.ratings == stored.ratings
    assert updated.is_private is True
    assert updated.name == "Night Harbour Hunt"
    assert updated.coordinate == Coordinate(latitude=51.9, longitude=4.5)
    assert updated.difficulty == Difficulty.HARD
    assert updated.tags == frozenset({"night", "water"})
    assert updated.last_updated == later


def test_apply_update_leaves_stored_game_untouched() -> None:
    stored = new_game(DETAILS, owner_user_id=uuid4(), now=NOW)
    apply_update(stored, replace(DETAILS, name="Changed"), now=NOW + timedelta(minutes=5))
    assert stored.name == DETAILS.name
    assert stored.last_updated == NOW


def test_visibility_and_ownership() -> None:
    owner = uuid4()
    public = new_game(DETAILS, owner_user_id=owner, now=NOW)
    private = replace(public, is_private=True)

    assert is_listed(public)
    assert not is_listed(private)
    assert is_owned_by(public, owner)
    assert not is_owned_by(public, uuid4())
