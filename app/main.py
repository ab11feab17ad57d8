# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from app.api.health import router as health_router
from app.api.users import router as users_router
from app.config import Settings, get_settings
from app.db.engine import get_engine, init_db
from app.db.seed import load_seed_dataset, seed_users
from app.repositories.users import SqlUserRepository, UserRepository

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Origin, X-Requested-With, Content-Type, Accept",
}


def connect_store(app: FastAPI) -> None:
    """
    Open the store, create the users collection if needed and seed it when empty.

    Failures are logged and startup carries on; requests that touch the store
    fail at query time instead.
    """
    settings: Settings = app.state.settings
    try:
        engine = get_engine(settings.DB_URL, echo=settings.DB_ECHO)
    except (SQLAlchemyError, ImportError):
        # Bad URI or missing driver: /users answers 503 until restart
        logger.exception("Could not create a user store engine")
        return

    app.state.engine = engine
    app.state.user_repository = SqlUserRepository(engine)

    try:
        init_db(engine)
    except SQLAlchemyError:
        logger.exception("Could not connect to the user store")
        return

    try:
        records = load_seed_dataset(settings.SEED_FILE)
        seed_users(engine, records)
    except (SQLAlchemyError, OSError, ValueError):
        logger.exception("Seeding users from %s failed", settings.SEED_FILE)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if app.state.user_repository is None:
        await run_in_threadpool(connect_store, app)

    yield

    engine = app.state.engine
    if engine is not None:
        engine.dispose()
        app.state.engine = None


def create_app(
    settings: Optional[Settings] = None,
    user_repository: Optional[UserRepository] = None,
) -> FastAPI:
    """
    Build the API. When `user_repository` is given the store connection and
    seeding are skipped and the repository is used as is.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_TITLE,
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = None
    app.state.user_repository = user_repository

    @app.middleware("http")
    async def add_cors_headers(request: Request, call_next):
        try:
            response = await call_next(request)
        except Exception:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = JSONResponse(
                status_code=500, content={"detail": "Internal Server Error"}
            )
        response.headers.update(CORS_HEADERS)
        return response

    app.include_router(health_router)
    app.include_router(users_router)

    return app


app = create_app()
