"""
FastAPI Application Factory.
Creates and configures the FastAPI application with routers, middleware, and DI.

The container is passed in so tests can wire an in-memory store while main.py
wires the configured backend.
"""

from contextlib import asynccontextmanager
from logging import getLogger

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka

from conversation_core import __version__
from conversation_core.config.logging_config import NO_CORRELATION_ID, correlation_id_var
from conversation_core.domain.exceptions import DomainError
from conversation_core.presentation.api import (
    bookmarks_router,
    conversations_router,
    messages_router,
)

logger = getLogger(__name__)


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


def create_fastapi_app(container: AsyncContainer) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: dishka container built by setup.ioc.create_container

    Returns:
        FastAPI application instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Conversation service started. DI container initialized.")
        yield
        # Closes APP-scoped resources (disconnects Prisma)
        await container.close()
        logger.info("Conversation service shutdown. DI container closed.")

    app = FastAPI(
        title="Conversation Core API",
        description="Conversations, messages, read receipts, reactions and bookmarks",
        version=__version__,
        lifespan=lifespan,
    )

    # Dishka adds middleware, so this must happen before the app starts
    setup_dishka(container, app)

    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(DomainError)
    async def domain_exception_handler(request: Request, exc: DomainError):
        logger.info(
            "[DOMAIN ERROR %s] %s %s: %s",
            exc.status_hint,
            request.method,
            request.url.path,
            exc.message,
        )
        return JSONResponse(
            status_code=exc.status_hint,
            content={"error": exc.message},
        )

    # Malformed identifiers in paths and bodies surface as ValueError
    @app.exception_handler(ValueError)
    async def value_error_handler(request: Request, exc: ValueError):
        logger.info("[BAD REQUEST] %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=400, content={"error": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = jsonable_encoder(exc.errors())
        logger.info("[VALIDATION ERROR] %s", errors)
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "details": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        logger.info("[HTTP ERROR %s] %s", exc.status_code, exc.detail)
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception("[GLOBAL ERROR] %s: %s", type(exc).__name__, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    @app.get("/", tags=["health"])
    async def root():
        return {"message": "Conversation service is running."}

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    app.include_router(conversations_router)  # /conversations/...
    app.include_router(messages_router)  # /messages/{message_id}/...
    app.include_router(bookmarks_router)  # GET /bookmarks

    return app
