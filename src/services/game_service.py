"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Mapping
from uuid import UUID

from src.api.models import (
    CoordinateSchema,
    GameCreateRequest,
    GameDetailResponse,
    GameSummaryResponse,
    ItemResponse,
    parse_game_request,
)
from src.core.config import Config
from src.core.exceptions import (
    BadGatewayError,
    BadRequestError,
    NotFoundError,
    PersistenceError,
    StorageError,
    ValidationError,
)
from src.core.models import GameModel, ImageUpload, RequestContext, UserModel
from src.db.repository import GameRepository
from src.hunt.game import apply_update, average_rating, is_listed, is_owned_by, new_game
from src.identity.resolver import IdentityResolver
from src.storage.blob_store import BlobStore

logger = logging.getLogger(__name__)

GamePayload = GameCreateRequest | Mapping[str, Any]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GameService:
    """
    Orchestration of layers for scavenger hunt games.

    Every public method is one unit of work: at most one staged change followed by one commit.
    Ownership failures on update/delete are reported exactly like a missing game, the logs keep the real reason.
    """

    def __init__(
        self,
        repository: GameRepository,
        identity: IdentityResolver,
        blob_store: BlobStore,
        clock: Callable[[], datetime] = utc_now,
        help_url: str = Config.HELP_URL,
    ) -> None:
        self.repo = repository
        self.identity = identity
        self.blob_store = blob_store
        self.clock = clock
        self.help_url = help_url

    # -- API routes logic ---
    def list_games(self) -> list[GameSummaryResponse]:
        """All public games, in the order the repository returns them (oldest first)."""
        games = self.repo.get_all()
        return [self._create_summary(game) for game in games if is_listed(game)]

    def get_game(self, game_id: UUID) -> GameDetailResponse:
        """
        Full game including its items.
        ----
        No visibility check: a private game can be read by anyone who knows its id.
        """
        game = self.repo.get_by_id(game_id)
        if game is None:
            raise NotFoundError("Requested game not found")
        return self._create_detail(game)

    def create_game(self, payload: GamePayload, context: RequestContext) -> UUID:
        """Store a new game owned by the caller and return its id."""
        request = parse_game_request(payload)
        user = self._current_user(context)

        game = new_game(request.to_details(), owner_user_id=user.id, now=self.clock())
        self.repo.create(game)
        self._commit("create", game.id)

        logger.info("Game %s created by user %s", game.id, user.id)
        return game.id

    def update_game(
        self, game_id: UUID, payload: GamePayload, context: RequestContext
    ) -> None:
        """Replace every editable field of a game owned by the caller."""
        request = parse_game_request(payload)
        user = self._current_user(context)

        # Owner scoped fetch: "no such game" and "not your game" look the same from here on
        stored = self.repo.get(game_id, user.id)
        if stored is None:
            self._log_rejected("update", game_id, user.id, self.repo.get_by_id(game_id))
            raise NotFoundError("Game not found")

        updated = apply_update(stored, request.to_details(), now=self.clock())
        self.repo.update(updated)
        self._commit("update", game_id)

        logger.info("Game %s updated by user %s", game_id, user.id)

    def upload_image(self, image: ImageUpload, context: RequestContext) -> str:
        """Store an image and return its URL. Linking it to a game is a separate update."""
        if not image.data:
            raise ValidationError("No image file provided")
        user = self._current_user(
            context, title="Login Error", detail="The User doesn't exist"
        )

        try:
            url = self.blob_store.save_image(image)
        except StorageError as e:
            logger.info("Possible storage error for user %s: %s", user.id, e)
            raise BadGatewayError(str(e), details=[str(e), f"Visit {self.help_url}"]) from e

        logger.info("Image %r stored at %s", image.filename, url)
        return url

    def delete_game(self, game_id: UUID, context: RequestContext) -> None:
        """Delete a game owned by the caller, together with its items."""
        user = self._current_user(context)

        game = self.repo.get_by_id(game_id)
        if game is None or not is_owned_by(game, user.id):
            self._log_rejected("delete", game_id, user.id, game)
            raise BadRequestError("Game with provided id not found")

        self.repo.delete(game)
        self._commit("delete", game_id)

        logger.info("Game %s deleted by user %s", game_id, user.id)

    # -- Internal helpers --
    def _current_user(
        self,
        context: RequestContext,
        title: str | None = None,
        detail: str = "User does not exist",
    ) -> UserModel:
        user = self.identity.get_current_user(context)
        if user is None:
            logger.info("Unknown user %s", context.user_id)
            raise NotFoundError("User does not exist", details=[detail], title=title)
        return user

    def _commit(self, operation: str, game_id: UUID) -> None:
        """Commit the staged change, turning storage failures into a client visible error."""
        try:
            self.repo.save_changes()
        except PersistenceError as e:
            logger.warning("Could not %s game %s: %s", operation, game_id, e)
            raise BadRequestError(str(e)) from e

    def _log_rejected(
        self,
        operation: str,
        game_id: UUID,
        user_id: UUID,
        game: GameModel | None,
    ) -> None:
        """Callers get one answer for a missing and a foreign game, the log says which one it was."""
        reason = "missing" if game is None else "not_owner"
        logger.info(
            "Rejected %s of game %s by user %s (reason=%s)",
            operation,
            game_id,
            user_id,
            reason,
            extra={"reason": reason},
        )

    def _create_summary(self, game: GameModel) -> GameSummaryResponse:
        return GameSummaryResponse(**self._summary_fields(game))

    def _create_detail(self, game: GameModel) -> GameDetailResponse:
        items = [
            ItemResponse(
                id=item.id,
                name=item.name,
                description=item.description,
                image_name=item.image_name,
            )
            for item in game.items
        ]
        return GameDetailResponse(**self._summary_fields(game), items=items)

    def _summary_fields(self, game: GameModel) -> dict[str, Any]:
        return {
            "id": game.id,
            "is_private": game.is_private,
            "name": game.name,
            "description": game.description,
            "address": game.address,
            "country": game.country,
            "coordinate": CoordinateSchema(
                latitude=game.coordinate.latitude, longitude=game.coordinate.longitude
            ),
            "image_name": game.image_name,
            "difficulty": game.difficulty,
            "ratings": average_rating(game.ratings),
            "tags": sorted(game.tags),
        }
