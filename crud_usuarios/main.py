"""CRUD de Usuarios API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map every failure to the {"error", "details"?} envelope
    - CORS configured from settings (not hardcoded)
    - Connection pool created on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: cleanup runs on SIGINT/SIGTERM when uvicorn stops
    - Startup connectivity check only logs: the API starts even if the database is down,
      requests then fail with 500 and /health/ready reports 503
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crud_usuarios import __version__
from crud_usuarios.api.error_handlers import register_error_handlers
from crud_usuarios.api.routes import docs, health, usuarios
from crud_usuarios.config import get_settings
from crud_usuarios.infrastructure.database import close_db, init_db
from crud_usuarios.infrastructure.observability import log_requests, setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.sqlalchemy_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if await manager.health_check():
        logger.info("Database connection verified")
    else:
        logger.error("Database unreachable at startup")
    logger.info(f"CRUD de Usuarios API listening on port {settings.port}")
    yield
    logger.info("CRUD de Usuarios API shutting down")
    await close_db()
    logger.info("Database connections closed")


app = FastAPI(
    title="CRUD de Usuarios API", version=__version__, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(log_requests)

app.include_router(docs.router)
app.include_router(health.router)
app.include_router(usuarios.router)

register_error_handlers(app)
