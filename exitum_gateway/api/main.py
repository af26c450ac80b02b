"""Exitum gateway ASGI app: calculators, back-office and chat under /v1"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from exitum_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from exitum_gateway.api.v1 import articles, backup, calculators, chat, content, leads
from exitum_gateway.infrastructure.observability.logging import setup_logging
from exitum_gateway.config import settings

setup_logging(settings.log_level, settings.service_name)

# (router module, OpenAPI tag)
V1_ROUTERS = [
    (calculators, "calculators"),
    (leads, "leads"),
    (chat, "chat"),
    (articles, "articles"),
    (content, "content"),
    (backup, "backup"),
]


def create_app() -> FastAPI:
    """Build the gateway with request IDs, metrics and all v1 routers mounted"""
    app = FastAPI(
        title="Exitum Practice Gateway",
        description="Legal practice site back-end: fee and NPV calculators, leads, articles, AI assistant",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Request ID is assigned before the timing middleware runs
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    @app.get("/health")
    def health_check():
        """Liveness probe for the load balancer"""
        return {"status": "ok", "service": settings.service_name}

    @app.get("/metrics")
    def metrics():
        """Calculator, lead, chat and HTTP metrics in Prometheus text format"""
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    for module, tag in V1_ROUTERS:
        app.include_router(module.router, prefix="/v1", tags=[tag])

    return app


app = create_app()
