"""FastAPI dependencies: one session, repository and service per request."""

from uuid import UUID

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from src.core.config import Config
from src.core.exceptions import UnauthorizedError
from src.core.models import RequestContext
from src.db.database import get_db
from src.db.sql_repository import SQLGameRepository
from src.identity.resolver import SQLIdentityResolver
from src.services.game_service import GameService
from src.storage.blob_store import LocalBlobStore


def get_request_context(x_user_id: str | None = Header(default=None)) -> RequestContext:
    """Caller identity as forwarded by the authentication proxy."""
    if not x_user_id:
        raise UnauthorizedError("Authentication required")
    try:
        return RequestContext(user_id=UUID(x_user_id))
    except ValueError:
        raise UnauthorizedError(f"Invalid user id: {x_user_id!r}")


def get_game_service(db: Session = Depends(get_db)) -> GameService:
    return GameService(
        repository=SQLGameRepository(db),
        identity=SQLIdentityResolver(db),
        blob_store=LocalBlobStore(Config.IMAGE_STORAGE_DIR, Config.IMAGE_BASE_URL),
    )
