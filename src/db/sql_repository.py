"""Implementation of KeyedRepository using SQLAlchemy"""

import logging
from datetime import datetime, timezone
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from src.core.exceptions import PersistenceError
from src.core.models import Coordinate, GameModel, ItemModel, TeamModel
from src.core.shared_types import Difficulty
from src.db.schema import DBGame, DBItem, DBTeam

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
RowT = TypeVar("RowT", DBGame, DBTeam)


def _as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes, everything stored is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLRepository(Generic[ModelT, RowT]):
    """
    Data stored using SQL / methods implemented using SQLAlchemy.

    Subclasses only describe their table and how to convert rows to models and back.
    The session is the unit of work: create/update/delete stage changes on it, save_changes() commits.
    """

    table: type[RowT]

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_all(self) -> list[ModelT]:
        """Every record, oldest first."""
        query = self._select().order_by(self.table.created_at)
        return [self._to_model(row) for row in self._run(query)]

    def get_by_id(self, record_id: UUID) -> ModelT | None:
        """Get record by ID, if it exists."""
        rows = self._run(self._select().where(self.table.id == record_id))
        return self._to_model(rows[0]) if rows else None

    def get(self, record_id: UUID, owner_user_id: UUID) -> ModelT | None:
        """Get record by ID, only if it is owned by the given user."""
        row = self._fetch_row(record_id, owner_user_id)
        if row is None:
            return None
        return self._to_model(row)

    def create(self, record: ModelT) -> None:
        """Stage a new record."""
        self.db.add(self._new_row(record))

    def update(self, record: ModelT) -> None:
        """Stage replacing an existing record (no-op if it does not exist)."""
        row = self._fetch_row(record.id, record.owner_user_id)
        if row is None:
            logger.debug("No %s row with id=%s to update", self.table.__tablename__, record.id)
            return
        self._copy_to_row(record, row)

    def delete(self, record: ModelT) -> None:
        """Stage removal of a record (dependent rows cascade)."""
        row = self._fetch_row(record.id, record.owner_user_id)
        if row is None:
            return
        self.db.delete(row)

    def save_changes(self) -> None:
        """Commit everything staged since the last commit. Rolls back entirely on failure."""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning("Commit on %s failed: %s", self.table.__tablename__, e)
            raise PersistenceError(str(e)) from e

    # -- Internal helpers --
    def _select(self) -> Select:
        return select(self.table)

    def _fetch_row(self, record_id: UUID, owner_user_id: UUID) -> RowT | None:
        rows = self._run(
            self._select().where(
                self.table.id == record_id, self.table.owner_user_id == owner_user_id
            )
        )
        return rows[0] if rows else None

    def _run(self, query: Select) -> list[RowT]:
        try:
            return list(self.db.scalars(query).all())
        except SQLAlchemyError as e:
            logger.warning("Query on %s failed: %s", self.table.__tablename__, e)
            raise PersistenceError(str(e)) from e

    def _new_row(self, record: ModelT) -> RowT:
        row = self.table(id=record.id, owner_user_id=record.owner_user_id)
        self._copy_to_row(record, row)
        return row

    def _copy_to_row(self, record: ModelT, row: RowT) -> None:
        """Write every non-key field of the model onto the row."""
        raise NotImplementedError

    def _to_model(self, row: RowT) -> ModelT:
        """Convert SQLAlchemy model to data transfer model."""
        raise NotImplementedError


class SQLGameRepository(SQLRepository[GameModel, DBGame]):
    """Games, together with their items, ratings and tags."""

    table = DBGame

    def _select(self) -> Select:
        return select(DBGame).options(selectinload(DBGame.items))

    def _copy_to_row(self, record: GameModel, row: DBGame) -> None:
        row.is_private = record.is_private
        row.name = record.name
        row.description = record.description
        row.address = record.address
        row.country = record.country
        row.latitude = record.coordinate.latitude
        row.longitude = record.coordinate.longitude
        row.image_name = record.image_name
        row.difficulty = int(record.difficulty)
        row.ratings = list(record.ratings)
        row.tags = sorted(record.tags)
        row.last_updated = record.last_updated

        # Keep the rows of items that survive, removed ones are deleted as orphans
        existing = {item.id: item for item in row.items}
        items = []
        for position, item in enumerate(record.items):
            item_db = existing.get(item.id) or DBItem(id=item.id)
            item_db.position = position
            item_db.name = item.name
            item_db.description = item.description
            item_db.image_name = item.image_name
            items.append(item_db)
        row.items = items

    def _to_model(self, row: DBGame) -> GameModel:
        return GameModel(
            id=row.id,
            owner_user_id=row.owner_user_id,
            is_private=row.is_private,
            name=row.name,
            description=row.description,
            address=row.address,
            country=row.country,
            coordinate=Coordinate(latitude=row.latitude, longitude=row.longitude),
            image_name=row.image_name,
            difficulty=Difficulty(row.difficulty),
            last_updated=_as_utc(row.last_updated),
            items=tuple(
                ItemModel(
                    id=item.id,
                    game_id=row.id,
                    name=item.name,
                    description=item.description,
                    image_name=item.image_name,
                )
                for item in row.items
            ),
            ratings=tuple(row.ratings),
            tags=frozenset(row.tags),
        )


class SQLTeamRepository(SQLRepository[TeamModel, DBTeam]):
    """Teams, keyed by (id, owner_user_id)."""

    table = DBTeam

    def _copy_to_row(self, record: TeamModel, row: DBTeam) -> None:
        row.name = record.name
        row.description = record.description
        row.image_name = record.image_name
        row.members = [str(member) for member in record.members]
        row.last_updated = record.last_updated

    def _to_model(self, row: DBTeam) -> TeamModel:
        return TeamModel(
            id=row.id,
            owner_user_id=row.owner_user_id,
            name=row.name,
            description=row.description,
            image_name=row.image_name,
            last_updated=_as_utc(row.last_updated),
            members=tuple(UUID(member) for member in row.members),
        )
