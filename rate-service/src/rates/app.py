"""
rate-service/src/rates/app.py

FastAPI application factory for the rate service.

This module wires together:
- Logging configuration (file-based under rate-service/logs/)
- Database engine, schema creation and seeding, run before traffic is served
- The rates router under /api and the RateNotFound -> 404 mapping
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from starlette.requests import Request

from .api.rates import router as rates_router
from .config import Settings, load_settings
from .db.seed import initialize
from .db.session import create_engine, create_session_factory, init_db
from .errors import RateNotFound
from .logging_config import get_logger, setup_logging
from .services.rate_service import RateService

logger = get_logger("rate_service")


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or load_settings()

    # Configure logging before creating the app
    setup_logging(settings.log_level, settings.log_dir, settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Rate service starting up")
        engine = create_engine(settings.database_url, echo=settings.sql_echo)
        session_factory = create_session_factory(engine)
        try:
            await init_db(engine)
            await initialize(session_factory)
            app.state.rate_service = RateService(session_factory)
            yield
        finally:
            await engine.dispose()
            logger.info("Rate service shutting down")

    app = FastAPI(title="Rate Service API", version="1.0.0", lifespan=lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """
        Lightweight request logger to help trace rate-service traffic.
        """
        response = await call_next(request)
        logger.info(
            "HTTP %s %s from %s -> %s",
            request.method,
            request.url.path,
            request.client.host if request.client else "?",
            response.status_code,
        )
        return response

    @app.exception_handler(RateNotFound)
    async def rate_not_found_handler(request: Request, exc: RateNotFound):
        return JSONResponse(status_code=404, content={"error": str(exc)})

    @app.get("/api/health")
    async def health():
        """
        Simple health check endpoint.
        """
        return {"status": "healthy"}

    app.include_router(rates_router, prefix="/api")
    return app
