"""Requests and Response models"""

from typing import Any, Mapping
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from src.core.exceptions import ValidationError
from src.core.models import Coordinate, GameDetails
from src.core.shared_types import Difficulty


class CamelModel(BaseModel):
    """JSON field names are camelCase, python attributes snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CoordinateSchema(CamelModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


# --- REQUEST MODELS ---
class GameCreateRequest(CamelModel):
    """Body of both create and update. Server assigned fields (id, owner, lastUpdated) are ignored if sent."""

    model_config = ConfigDict(extra="ignore")

    is_private: bool = False
    name: str = Field(min_length=1, max_length=100)
    description: str = Field(max_length=2000)
    address: str = Field(min_length=1, max_length=200)
    country: str = Field(min_length=1, max_length=100)
    coordinate: CoordinateSchema
    image_name: str = ""
    difficulty: Difficulty
    tags: set[str] = Field(default_factory=set)

    @field_validator("name", "address", "country")
    @classmethod
    def validate_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, value: set[str]) -> set[str]:
        tags = {tag.strip() for tag in value}
        if "" in tags:
            raise ValueError("tags must not be blank")
        return tags

    def to_details(self) -> GameDetails:
        return GameDetails(
            is_private=self.is_private,
            name=self.name,
            description=self.description,
            address=self.address,
            country=self.country,
            coordinate=Coordinate(
                latitude=self.coordinate.latitude, longitude=self.coordinate.longitude
            ),
            image_name=self.image_name,
            difficulty=self.difficulty,
            tags=frozenset(self.tags),
        )


def parse_game_request(payload: GameCreateRequest | Mapping[str, Any]) -> GameCreateRequest:
    """Accept an already validated request or validate a raw JSON mapping."""
    if isinstance(payload, GameCreateRequest):
        return payload
    try:
        return GameCreateRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            "Invalid game payload", details=validation_details(e.errors())
        ) from e


def validation_details(errors: Any) -> list[str]:
    """One readable line per violated field, e.g. 'coordinate.latitude: Input should be ...'."""
    details = []
    for error in errors:
        location = ".".join(str(part) for part in error["loc"] if part != "body")
        details.append(f"{location}: {error['msg']}" if location else error["msg"])
    return details


# --- RESPONSE MODELS ---
class ItemResponse(CamelModel):
    id: UUID
    name: str
    description: str
    image_name: str


class GameSummaryResponse(CamelModel):
    id: UUID
    is_private: bool
    name: str
    description: str
    address: str
    country: str
    coordinate: CoordinateSchema
    image_name: str
    difficulty: Difficulty
    ratings: float
    tags: list[str]


class GameDetailResponse(GameSummaryResponse):
    items: list[ItemResponse]


class GameCreatedResponse(CamelModel):
    id: UUID


class ImageUploadResponse(CamelModel):
    image_path: str


class ErrorResponse(CamelModel):
    title: str
    status_code: int
    details: list[str]
