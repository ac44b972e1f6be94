"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from aion.application.interfaces import ChatProvider
from aion.config import Settings, get_settings
from aion.infrastructure.llm import OpenAIChatClient
from aion.infrastructure.logging.log_config import setup_logging
from aion.infrastructure.store import InMemoryEntityStore
from aion.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging before serving requests."""
    setup_logging(app.state.settings)
    logger.info(
        "%s %s starting (%s)",
        app.state.settings.app_title,
        app.state.settings.app_version,
        app.state.settings.app_env,
    )
    yield


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and query parameters are client errors: 400, not 422."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Invalid request data", "errors": jsonable_encoder(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Server error", "error": str(exc)},
    )


def create_app(
    settings: Settings | None = None,
    store: InMemoryEntityStore | None = None,
    chat_provider: ChatProvider | None = None,
) -> FastAPI:
    """Factory function that builds and configures the FastAPI application.

    The entity store and chat provider live on ``app.state`` for the
    lifetime of the application; pass them in to replace the defaults.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store or InMemoryEntityStore(seed_demo_user=settings.seed_demo_user)
    app.state.chat_provider = chat_provider or OpenAIChatClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout_seconds=settings.suggestion_timeout_seconds,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "aion.main:app",
        host="0.0.0.0",
        port=5000,
        reload=True,
    )
