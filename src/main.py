"""Application entrypoint: `uvicorn src.main:app`"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.api.errors import register_exception_handlers
from src.api.routes import games_router
from src.core.config import Config
from src.db.database import init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield
    logging.getLogger(__name__).info("Stop Server")


def create_app(create_tables: bool = True) -> FastAPI:
    logging.basicConfig(
        level=Config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = FastAPI(
        title="Scavenger Hunt",
        lifespan=lifespan if create_tables else None,
    )
    register_exception_handlers(app)
    app.include_router(games_router)
    return app


app = create_app()
