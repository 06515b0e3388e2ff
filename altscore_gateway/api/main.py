"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from altscore_gateway.api.middleware import RequestIDMiddleware, MetricsMiddleware
from altscore_gateway.api.v1 import score, chat, content
from altscore_gateway.infrastructure.observability.logging import setup_logging
from altscore_gateway.infrastructure.sessions import ChatSessionStore
from altscore_gateway.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Alternative Credit Score Gateway",
        description="Score calculator, FAQ chat bot and page content for the alternative credit scoring client",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Chat sessions live only as long as this app instance
    app.state.chat_sessions = ChatSessionStore(
        max_sessions=settings.max_chat_sessions,
        ttl_seconds=settings.chat_session_ttl_seconds,
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
    app.include_router(score.router, prefix="/v1", tags=["score"])
    app.include_router(chat.router, prefix="/v1", tags=["chat"])
    app.include_router(content.router, prefix="/v1", tags=["content"])

    return app


app = create_app()
