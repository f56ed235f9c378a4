"""User API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserApiError -> {status, message} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and controller wired once on startup via the lifespan context manager
"""

import logging
from contextlib import asynccontextmanager
from datetime import timedelta

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.api.user_controller import build_user_controller
from user_api.config import Settings, get_settings
from user_api.core.auth_tokens import TokenIssuer
from user_api.infrastructure.database import init_db
from user_api.infrastructure.observability import setup_logging
from user_api.infrastructure.user_repository import SqlAlchemyUserRepository

logger = logging.getLogger(__name__)


def build_token_issuer(settings: Settings) -> TokenIssuer:
    return TokenIssuer(
        settings.jwt_secret,
        lifetime=timedelta(seconds=settings.jwt_expires_in_seconds),
        algorithm=settings.jwt_algorithm,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = init_db(settings.database_url, **settings.engine_options())
    app.state.user_controller = build_user_controller(
        SqlAlchemyUserRepository(db_manager), build_token_issuer(settings),
    )
    logger.info("User API started")
    yield
    logger.info("User API shutting down")
    await db_manager.dispose()


app = FastAPI(title="User API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
