"""FixIt AI — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fixit.config import settings
from fixit.infrastructure.api.routes_analysis import router as analysis_router
from fixit.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if settings.ai_service_url:
        logger.info("AI service URL: %s (timeout %.0fs)", settings.ai_service_url, settings.ai_service_timeout)
    else:
        logger.warning("AI_SERVICE_URL is empty, all complaints use the built-in analyzer")
    yield


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="FixIt AI — Complaint Classification Engine",
        description="Category, priority, department and risk score for campus maintenance complaints",
        version="0.1.0",
        lifespan=lifespan,
    )

    # CORS for the React frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(analysis_router, prefix="/api")

    return app


app = create_app()
