"""FastAPI application entry point.

Market Data Service - cache-aside market snapshots by symbol.
"""

from contextlib import asynccontextmanager
from collections.abc import AsyncGenerator
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from market_data_service.routes import api_router
from market_data_service.schemas import ErrorDetail, ErrorResponse
from market_data_service.services import MarketDataService, MarketDataUnavailableError
from market_data_service.settings import get_settings
from market_data_service.stores.postgres import PostgresRecordStore, create_engine, create_session_factory
from market_data_service.stores.redis import RedisCacheStore, create_redis_client

logger = logging.getLogger("uvicorn.error")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Builds the cache and record store clients once and shares them
    with every request through `app.state`.
    """
    # Startup
    settings = get_settings()

    engine = create_engine(settings.async_database_url, echo=settings.debug)
    records = PostgresRecordStore(create_session_factory(engine), engine=engine)
    cache = RedisCacheStore(create_redis_client(settings.redis_url))

    # Connectivity checks only log; requests fail individually while a backend is down.
    try:
        await records.ping()
        logger.info("Postgres connected")
    except Exception:
        logger.exception("Postgres init failed")

    try:
        await cache.ping()
    except Exception:
        logger.exception("Redis init failed")

    app.state.market_data_service = MarketDataService(cache=cache, records=records)

    yield

    # Shutdown
    try:
        await cache.close()
    finally:
        await records.close()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Market data snapshots by symbol",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MarketDataUnavailableError)
    async def market_data_unavailable_handler(
        request: Request, exc: MarketDataUnavailableError
    ) -> JSONResponse:
        """Backend (cache or record store) failure for a single request."""
        body = ErrorResponse(
            error=ErrorDetail(
                code="MARKET_DATA_UNAVAILABLE",
                message=str(exc),
                detail={"symbol": exc.symbol},
            )
        )
        return JSONResponse(status_code=503, content=body.model_dump())

    # Exception handler for structured error format
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler returning structured error format."""
        return JSONResponse(
            status_code=500,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": str(exc) if settings.debug else "Internal server error",
                    "detail": None,
                }
            },
        )

    # Health check endpoint
    @app.get("/health", tags=["health"], response_class=PlainTextResponse)
    async def health_check() -> str:
        """Health check endpoint."""
        return "OK"

    # Include API routes
    app.include_router(api_router)

    return app


# Application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    logger.info(f"Market data service listening on port {settings.port}")
    uvicorn.run(
        "market_data_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
