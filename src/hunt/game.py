"""
Business rules of the Game aggregate.

The service layer never builds or mutates a GameModel by hand: new games come from new_game(),
changes come from apply_update(). Both return fresh frozen values.
"""

from dataclasses import replace
from datetime import datetime
from typing import Iterable
from uuid import UUID, uuid4

from src.core.models import GameDetails, GameModel


def new_game(details: GameDetails, owner_user_id: UUID, now: datetime) -> GameModel:
    """A game as first stored: server assigned id, caller as owner, no items or ratings yet."""
    return GameModel(
        id=uuid4(),
        owner_user_id=owner_user_id,
        is_private=details.is_private,
        name=details.name,
        description=details.description,
        address=details.address,
        country=details.country,
        coordinate=details.coordinate,
        image_name=details.image_name,
        difficulty=details.difficulty,
        tags=frozenset(details.tags),
        last_updated=now,
    )


def apply_update(game: GameModel, details: GameDetails, now: datetime) -> GameModel:
    """
    Replace every editable field of the game.

    id, owner, items and ratings are carried over from the stored game.
    """
    return replace(
        game,
        is_private=details.is_private,
        name=details.name,
        description=details.description,
        address=details.address,
        country=details.country,
        coordinate=details.coordinate,
        image_name=details.image_name,
        difficulty=details.difficulty,
        tags=frozenset(details.tags),
        last_updated=now,
    )


def average_rating(ratings: Iterable[int]) -> float:
    """Mean of all scores, 0 when the game has not been rated."""
    scores = list(ratings)
    if not scores:
        return 0.0
    return sum(scores) / len(scores)


def is_listed(game: GameModel) -> bool:
    """Only public games show up in the game list."""
    return not game.is_private


def is_owned_by(game: GameModel, user_id: UUID) -> bool:
    return game.owner_user_id == user_id
