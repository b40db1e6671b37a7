"""FastAPI application — main entry point."""

import structlog
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.database import Database

from rental_api.config import get_settings
from rental_api.core.exceptions import register_exception_handlers
from rental_api.core.logging import configure_logging
from rental_api.core.middleware import setup_middleware
from rental_api.domain.models.user import User
from rental_api.infrastructure.database import create_client, ensure_indexes
from rental_api.infrastructure.repositories.user_repository import MongoUserRepository
from rental_api.interfaces.api.deps import AUTH_HEADER

# Import routers
from rental_api.interfaces.api.auth import router as auth_router
from rental_api.interfaces.api.customers import router as customers_router
from rental_api.interfaces.api.genres import router as genres_router
from rental_api.interfaces.api.movies import router as movies_router
from rental_api.interfaces.api.rentals import router as rentals_router
from rental_api.interfaces.api.returns import router as returns_router
from rental_api.interfaces.api.users import router as users_router

settings = get_settings()

# Configure logging immediately
configure_logging()
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan — open the database, seed, close on shutdown."""
    logger.info("Starting rental API...", env=settings.ENVIRONMENT)

    client = None
    if getattr(app.state, "db", None) is None:
        client = create_client(settings)
        app.state.db = client[settings.MONGO_DB]
        logger.info("Connected to MongoDB", database=settings.MONGO_DB)

    db: Database = app.state.db
    ensure_indexes(db)

    from rental_api.application.services.auth_service import ensure_default_admin
    ensure_default_admin(MongoUserRepository(db, User), settings)

    yield

    if client is not None:
        client.close()
        app.state.db = None
    logger.info("Rental API stopped")


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application; pass `database` to use an already-open handle."""
    app = FastAPI(
        title="Vidly — Rental Management API",
        description="Genres, movies, customers, rentals and returns",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.db = database

    # Setup Middleware (Correlation ID, Logging)
    setup_middleware(app)

    # Error envelope for app errors, validation errors and everything else
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[AUTH_HEADER],
    )

    # Include routers
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(genres_router)
    app.include_router(customers_router)
    app.include_router(movies_router)
    app.include_router(rentals_router)
    app.include_router(returns_router)

    @app.get("/")
    def root():
        return {
            "name": "Vidly Rental API",
            "version": "1.0.0",
            "status": "running",
            "docs": "/docs",
        }

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app


app = create_app()
