"""
Task tracker API — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from api.errors import register_exception_handlers
from api.middleware import register_middleware
from auth.jwt import TokenIssuer
from auth.routes import router as auth_router
from config.settings import Settings, get_settings
from database.session import Database

logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
        stream=sys.stdout,
    )
    for _noisy in ("sqlalchemy.engine", "asyncio"):
        logging.getLogger(_noisy).setLevel(logging.WARNING)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db = database or Database(settings.sqlalchemy_url, echo=settings.debug)
        app.state.settings = settings
        app.state.database = db
        app.state.token_issuer = TokenIssuer(
            settings.jwt_secret, settings.jwt_expiry_seconds
        )

        logger.info("Connecting to the database and creating tables…")
        try:
            await db.create_schema()
            logger.info("Application ready to accept requests.")
            yield
        finally:
            await db.dispose()

    app = FastAPI(
        title="Task Tracker API",
        version="1.0.0",
        description="Account registration and login for the task tracker.",
        lifespan=lifespan,
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router, prefix="/api/auth")

    return app


def main() -> None:
    settings = get_settings()
    configure_logging(settings.debug)
    logger.info("Server starting on port %d", settings.port)
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
