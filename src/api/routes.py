"""HTTP routes for /games"""

from uuid import UUID

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from src.api.dependencies import get_game_service, get_request_context
from src.api.models import (
    ErrorResponse,
    GameCreatedResponse,
    GameCreateRequest,
    GameDetailResponse,
    GameSummaryResponse,
    ImageUploadResponse,
)
from src.core.models import ImageUpload, RequestContext
from src.services.game_service import GameService

ERROR_RESPONSES = {
    code: {"model": ErrorResponse} for code in (400, 401, 404, 502)
}

games_router = APIRouter(
    prefix="/games",
    tags=["games"],
    dependencies=[Depends(get_request_context)],
    responses=ERROR_RESPONSES,
)


@games_router.get("", response_model=list[GameSummaryResponse])
def list_games(service: GameService = Depends(get_game_service)):
    return service.list_games()


# Declared before "/{game_id}" so that "image" is never parsed as an id
@games_router.put(
    "/image", status_code=status.HTTP_201_CREATED, response_model=ImageUploadResponse
)
def upload_image(
    response: Response,
    image_file: UploadFile = File(alias="imageFile"),
    context: RequestContext = Depends(get_request_context),
    service: GameService = Depends(get_game_service),
):
    image = ImageUpload(
        filename=image_file.filename or "",
        content_type=image_file.content_type or "application/octet-stream",
        data=image_file.file.read(),
    )
    url = service.upload_image(image, context)
    response.headers["Location"] = url
    return ImageUploadResponse(image_path=url)


@games_router.get("/{game_id}", response_model=GameDetailResponse)
def get_game(game_id: UUID, service: GameService = Depends(get_game_service)):
    return service.get_game(game_id)


@games_router.post(
    "", status_code=status.HTTP_201_CREATED, response_model=GameCreatedResponse
)
def create_game(
    request: GameCreateRequest,
    context: RequestContext = Depends(get_request_context),
    service: GameService = Depends(get_game_service),
):
    game_id = service.create_game(request, context)
    return GameCreatedResponse(id=game_id)


@games_router.put("/{game_id}", status_code=status.HTTP_200_OK)
def update_game(
    game_id: UUID,
    request: GameCreateRequest,
    context: RequestContext = Depends(get_request_context),
    service: GameService = Depends(get_game_service),
) -> None:
    service.update_game(game_id, request, context)


@games_router.delete("/{game_id}", status_code=status.HTTP_200_OK)
def delete_game(
    game_id: UUID,
    context: RequestContext = Depends(get_request_context),
    service: GameService = Depends(get_game_service),
) -> None:
    service.delete_game(game_id, context)
