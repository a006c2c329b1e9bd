"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from pb_challenge.api.middleware import RequestIDMiddleware, MetricsMiddleware
from pb_challenge.api.v1 import catalog, evaluation, games
from pb_challenge.infrastructure.observability.logging import setup_logging
from pb_challenge.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="PB Challenge",
        description="Private banker investment game: round evaluation and game sessions",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(catalog.router, prefix="/v1", tags=["catalog"])
    app.include_router(evaluation.router, prefix="/v1", tags=["evaluation"])
    app.include_router(games.router, prefix="/v1", tags=["games"])

    return app


app = create_app()
