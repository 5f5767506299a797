"""
Shopify Analytics Relay
Main FastAPI application entry point
"""
import logging
from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from analytics_relay.api.routes import router as api_router
from analytics_relay.core.config import Settings
from analytics_relay.core.errors import ConfigurationError, RelayError

logger = structlog.get_logger()

SERVICE_NAME = "shopify-analytics-relay"
VERSION = "1.0.0"


def configure_logging(level: str) -> None:
    """Configure structured logging"""
    logging.basicConfig(format="%(message)s", level=level.upper())

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed requests are client errors, reported in the relay's error shape"""
    # Request bodies are parsed before dependencies run; missing secrets still take precedence
    missing = request.app.state.settings.missing_secrets()
    if missing:
        return await relay_error_handler(request, ConfigurationError(missing))

    details = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    )
    logger.warning("Invalid request", path=request.url.path, errors=details)
    return JSONResponse(status_code=400, content={"error": f"Invalid request: {details}"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    Settings are read once here and shared with every request through
    ``app.state``.
    """
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Shopify Analytics Relay",
        description="Relays Shopify store reports to Gemini for AI-powered analysis",
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc"
    )
    app.state.settings = settings

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include API routes
    app.include_router(api_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "version": VERSION
        }

    @app.on_event("startup")
    async def startup_event():
        missing = settings.missing_secrets()
        if missing:
            logger.warning("Starting with incomplete configuration", missing=missing)
        logger.info("Starting Shopify Analytics Relay", api_version=settings.SHOPIFY_API_VERSION)

    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info("Shutting down Shopify Analytics Relay")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=app.state.settings.DEBUG
    )
