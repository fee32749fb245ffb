"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from homeloan_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from homeloan_gateway.api.v1 import calculator, contact, product
from homeloan_gateway.infrastructure.observability.logging import setup_logging
from homeloan_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Home Loan Gateway",
        description="Mortgage calculator, eligibility check, lead capture and product display service",
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
    app.include_router(calculator.router, prefix="/v1", tags=["calculator"])
    app.include_router(contact.router, prefix="/v1", tags=["leads"])
    app.include_router(product.router, prefix="/v1", tags=["products"])

    return app


app = create_app()
