"""Protocol repository (implemented with SQLAlchemy in sql_repository.py, mocked in the service tests)"""

from typing import Protocol, TypeVar
from uuid import UUID

from src.core.models import GameModel, TeamModel

ModelT = TypeVar("ModelT")


class KeyedRepository(Protocol[ModelT]):
    """
    Persistence gateway for one aggregate type.

    Mutations are only staged; nothing reaches storage before save_changes(), which commits everything
    staged since the previous commit, or nothing at all. Every method may raise PersistenceError.
    """

    def get_all(self) -> list[ModelT]:
        """Every record, oldest first."""
        ...

    def get_by_id(self, record_id: UUID) -> ModelT | None:
        """Get record by ID, if it exists."""
        ...

    def get(self, record_id: UUID, owner_user_id: UUID) -> ModelT | None:
        """Get record by ID, only if it is owned by the given user."""
        ...

    def create(self, record: ModelT) -> None:
        """Stage a new record. Its id must already be set."""
        ...

    def update(self, record: ModelT) -> None:
        """Stage replacing an existing record (no-op if it does not exist)."""
        ...

    def delete(self, record: ModelT) -> None:
        """Stage removal of a record and its dependent entities."""
        ...

    def save_changes(self) -> None:
        """Commit all staged changes atomically."""
        ...


GameRepository = KeyedRepository[GameModel]
TeamRepository = KeyedRepository[TeamModel]
