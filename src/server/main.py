"""FastAPI application for how-awesome."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from how_awesome.config import HOW_AWESOME_GITHUB_TOKEN
from how_awesome.session import SessionStore
from how_awesome.utils.logging_config import configure_logging, get_logger
from server.routers.awesome import router
from server.server_config import PERSIST_SESSION, SESSION_PATH

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    session: SessionStore = app.state.session
    if PERSIST_SESSION:
        await session.load(SESSION_PATH)
    state = session.api_state()
    if HOW_AWESOME_GITHUB_TOKEN and not state.token:
        state.token = HOW_AWESOME_GITHUB_TOKEN
    try:
        yield
    finally:
        if PERSIST_SESSION:
            await session.save(SESSION_PATH)
            logger.info("Session saved", extra={"path": str(SESSION_PATH)})


def create_app(session: SessionStore | None = None) -> FastAPI:
    configure_logging()
    app = FastAPI(title="how-awesome", lifespan=lifespan)
    app.state.session = session or SessionStore()
    app.include_router(router)
    return app


app = create_app()
