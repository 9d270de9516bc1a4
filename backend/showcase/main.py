"""Portfolio Showcase API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShowcaseError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database, seeding, and stores initialized on startup via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Single process, single data layer instance: stores cache their collection
      in memory, so running several workers against one database is unsupported
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showcase.api.error_handlers import register_error_handlers
from showcase.api.routes import auth, health, portfolios, users
from showcase.config import get_settings
from showcase.infrastructure.database import init_db
from showcase.infrastructure.document_persistence import SqlDocumentPersistence
from showcase.infrastructure.observability import setup_logging
from showcase.services.bootstrap import init_showcase

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(settings.database_url)
    init_showcase(SqlDocumentPersistence(manager), seed=settings.seed_on_startup)
    logger.info("Portfolio showcase API started")
    yield
    manager.dispose()
    logger.info("Portfolio showcase API shutting down")


app = FastAPI(
    title="Portfolio Showcase API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(portfolios.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve on localhost only."""
    import uvicorn

    uvicorn.run("showcase.main:app", host="127.0.0.1", port=8000)
