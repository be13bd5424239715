"""Database tables / schema"""

from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import JSON, DateTime, ForeignKey
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class DBUser(Base):
    __tablename__ = "users"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    name: Mapped[str]
    email: Mapped[str]


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    owner_user_id: Mapped[UUID] = mapped_column(index=True)
    is_private: Mapped[bool] = mapped_column(default=False)
    name: Mapped[str]
    description: Mapped[str]
    address: Mapped[str]
    country: Mapped[str]
    # Coordinate is embedded by value
    latitude: Mapped[float]
    longitude: Mapped[float]
    image_name: Mapped[str]
    difficulty: Mapped[int]
    ratings: Mapped[list[int]] = mapped_column(JSON, default=list)
    tags: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True))

    items: Mapped[list["DBItem"]] = relationship(
        back_populates="game",
        cascade="all, delete-orphan",
        order_by="DBItem.position",
    )


class DBItem(Base):
    __tablename__ = "items"
    id: Mapped[UUID] = mapped_column(primary_key=True)
    game_id: Mapped[UUID] = mapped_column(ForeignKey("games.id", ondelete="CASCADE"))
    position: Mapped[int] = mapped_column(default=0)
    name: Mapped[str]
    description: Mapped[str]
    image_name: Mapped[str]

    game: Mapped[DBGame] = relationship(back_populates="items")


class DBTeam(Base):
    __tablename__ = "teams"
    # Composite key: a team is looked up together with the user owning it
    id: Mapped[UUID] = mapped_column(primary_key=True)
    owner_user_id: Mapped[UUID] = mapped_column(primary_key=True)
    name: Mapped[str]
    description: Mapped[str]
    image_name: Mapped[str]
    members: Mapped[list[str]] = mapped_column(JSON, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utc_now)
    last_updated: Mapped[datetime] = mapped_column(DateTime(timezone=True))
