"""FastAPI application entrypoint."""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from sqlalchemy.exc import SQLAlchemyError

from stockroom.api import api_router
from stockroom.core.config import Settings, get_settings
from stockroom.core.context import AppContext
from stockroom.core.errors import StockroomError, sqlalchemy_exception_handler, stockroom_exception_handler
from stockroom.db.session import create_tables

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    context: AppContext = app.state.context
    await create_tables(context.engine)
    logger.info("Connected to database %s", context.engine.url.render_as_string(hide_password=True))
    try:
        yield
    finally:
        await context.dispose()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build an application bound to its own database engine and secret key."""

    settings = settings or get_settings()
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.context = AppContext.from_settings(settings)

    app.add_exception_handler(StockroomError, stockroom_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.include_router(api_router)
    return app
