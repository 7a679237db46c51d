"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from childfood_api.api.routes import analysis, history, meal_plans, ocr, profiles, reports
from childfood_api.core.config import get_settings
from childfood_api.core.exceptions import APIError
from childfood_api.db.mongo import MongoDB
from childfood_api.db.unit_of_work import UnitOfWork
from childfood_api.services.llm import get_llm_info

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.api_version}")

    if await MongoDB.connect(settings):
        try:
            await UnitOfWork(MongoDB.get_database()).analyses.ensure_indexes()
        except PyMongoError as e:
            logger.warning(f"Could not create history indexes, analysis history disabled: {e}")
            MongoDB.close()

    if not settings.is_llm_configured:
        logger.warning("No LLM API key configured, analyses will use fallback results")

    yield

    # Shutdown
    logger.info("Shutting down...")
    MongoDB.close()


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.api_version,
        description="AI-assisted food label analysis for children",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[analysis.SOURCE_HEADER, "Content-Disposition"],
    )

    # Exception handlers
    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        """Handle custom API errors."""
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "error": exc.message,
                "details": exc.details,
            },
        )

    # Health check endpoint
    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.api_version,
            "mongodb": MongoDB.is_connected(),
            "llm": get_llm_info(settings),
        }

    # Root endpoint
    @app.get("/")
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.app_name,
            "version": settings.api_version,
            "docs": "/docs",
            "health": "/health",
        }

    # Include routers
    app.include_router(ocr.router, prefix="/api", tags=["OCR"])
    app.include_router(analysis.router, prefix="/api", tags=["Analysis"])
    app.include_router(history.router, prefix="/api/history", tags=["History"])
    app.include_router(reports.router, prefix="/api", tags=["Reports"])
    app.include_router(profiles.router, prefix="/api/profile", tags=["Profile"])
    app.include_router(meal_plans.router, prefix="/api/meal-plans", tags=["Meal Plans"])

    return app


# Create app instance
app = create_app()
