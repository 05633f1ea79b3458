"""FastAPI application entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from app import models  # noqa: F401
from app.api.v1.audio_router import router as audio_router
from app.api.v1.chat_router import router as chat_router
from app.api.v1.journal_router import router as journal_router
from app.api.v1.mood_router import router as mood_router
from app.api.v1.user_router import router as user_router
from app.core.config import settings
from app.core.database import Base, engine
from app.core.exceptions import (
    AppException,
    app_exception_handler,
    database_exception_handler,
    validation_exception_handler,
)
from app.core.middleware import AuthMiddleware
from app.core.rate_limit import limiter, rate_limit_exceeded_handler
from app.core.redis import close_redis, init_redis
from app.schemas.response_schema import ApiResponse, success_response

logger = structlog.get_logger()

API_VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.app.env,
        llm_provider=settings.llm.provider,
        context_window=settings.chat.context_window,
    )
    if settings.chat.send_lock_enabled:
        await init_redis()
    if settings.app.is_development:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    yield
    await close_redis()
    await engine.dispose()
    logger.info("Shutting down application")


app = FastAPI(
    title=settings.app.name,
    description="Mental wellness companion API: mood, journal, audio and AI chat",
    version=API_VERSION,
    lifespan=lifespan,
    debug=settings.app.debug,
)

app.state.limiter = limiter

# Exception handlers
app.add_exception_handler(AppException, app_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_exception_handler)  # type: ignore[arg-type]

# Middleware (registration order: inner→outer, execution order: outer→inner)
app.add_middleware(AuthMiddleware)
app.add_middleware(SlowAPIMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.get("/health", response_model=ApiResponse[dict])
async def health_check() -> dict:
    """Health check endpoint."""
    return success_response({"status": "healthy"})


@app.get("/", response_model=ApiResponse[dict])
async def root() -> dict:
    """Root endpoint."""
    return success_response(
        {
            "app": settings.app.name,
            "version": API_VERSION,
            "docs": "/docs",
        }
    )


# Register routers
app.include_router(user_router)
app.include_router(chat_router)
app.include_router(mood_router)
app.include_router(journal_router)
app.include_router(audio_router)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    uvicorn.run(
        "app.main:app",
        host=settings.server.host,
        port=settings.server.port,
        log_level=settings.server.log_level,
        reload=settings.app.is_development,
    )
