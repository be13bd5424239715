"""Resolve the caller of a request to a known user."""

from typing import Protocol

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.core.exceptions import PersistenceError
from src.core.models import RequestContext, UserModel
from src.db.schema import DBUser


class IdentityResolver(Protocol):
    def get_current_user(self, context: RequestContext) -> UserModel | None:
        """User making the request, or None if it is unknown. No side effects."""
        ...


class SQLIdentityResolver:
    """Look the caller up in the users table."""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_current_user(self, context: RequestContext) -> UserModel | None:
        query = select(DBUser).where(DBUser.id == context.user_id)
        try:
            user_db = self.db.scalar(query)
        except SQLAlchemyError as e:
            raise PersistenceError(str(e)) from e
        if user_db is None:
            return None
        return UserModel(id=user_db.id, name=user_db.name, email=user_db.email)
