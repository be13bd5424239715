"""Generate database session"""

from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import Config
from src.db.schema import Base

engine = create_engine(Config.DATABASE_URL, echo=Config.SQL_ECHO)
SessionLocal = sessionmaker(bind=engine)


def init_db() -> None:
    """Ensure all tables are created"""
    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    """One session (= one unit of work) per request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
