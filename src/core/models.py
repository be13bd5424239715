"""
Boundary layer data model(s).

These objects are used to communicate with the Service.
The API layer (higher) and the domain/db layers (lower) both send and receive the models defined here,
which decouples the DB schema and the request/response shapes from the information needed across boundaries.
Models are frozen: a change is expressed by building a new value (see src/hunt/game.py).
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from src.core.shared_types import Difficulty


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ItemModel:
    """A collectible belonging to exactly one game."""

    id: UUID
    game_id: UUID
    name: str
    description: str
    image_name: str


@dataclass(frozen=True)
class GameModel:
    """Aggregate root of a scavenger hunt: owns its coordinate, items, ratings and tags."""

    id: UUID
    owner_user_id: UUID
    is_private: bool
    name: str
    description: str
    address: str
    country: str
    coordinate: Coordinate
    image_name: str
    difficulty: Difficulty
    last_updated: datetime
    items: tuple[ItemModel, ...] = ()
    ratings: tuple[int, ...] = ()
    tags: frozenset[str] = field(default_factory=frozenset)


@dataclass(frozen=True)
class TeamModel:
    """Participating team. Keyed by (id, owner_user_id)."""

    id: UUID
    owner_user_id: UUID
    name: str
    description: str
    image_name: str
    last_updated: datetime
    members: tuple[UUID, ...] = ()


@dataclass(frozen=True)
class UserModel:
    id: UUID
    name: str
    email: str


@dataclass(frozen=True)
class RequestContext:
    """What the transport layer knows about the caller."""

    user_id: UUID


@dataclass(frozen=True)
class ImageUpload:
    filename: str
    content_type: str
    data: bytes


@dataclass(frozen=True)
class GameDetails:
    """Every caller-editable field of a game (what a create or update request carries)."""

    is_private: bool
    name: str
    description: str
    address: str
    country: str
    coordinate: Coordinate
    image_name: str
    difficulty: Difficulty
    tags: frozenset[str] = field(default_factory=frozenset)
