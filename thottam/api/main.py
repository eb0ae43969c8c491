# thottam/api/main.py
"""FastAPI application entry point."""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator

import anyio
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..content.errors import ContentNotFoundError, ContentPathError, ContentRenderError
from ..i18n import LANGUAGE_COOKIE, error_message, parse_language
from ..models.content import Language
from .dependencies import get_config, get_config_sync, cleanup_dependencies
from .routes import content
from .schemas import ErrorResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Warn early about a missing content root, drop singletons on shutdown."""
    config = await get_config()
    if not await anyio.Path(config.content.path).is_dir():
        logger.warning("Content directory %s does not exist; every page will 404", config.content.path)

    yield

    await cleanup_dependencies()


def _request_language(request: Request, default: str) -> Language:
    """Language negotiated by the route, or read again from the raw request."""
    language = getattr(request.state, "language", None)
    if language is not None:
        return language
    fallback = parse_language(request.cookies.get(LANGUAGE_COOKIE), default)
    return parse_language(request.query_params.get("lang"), fallback)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Content errors raised by the resolver are mapped here, once for every
    route, to localized `{"detail": ...}` bodies: missing page 404, path
    outside the content root 403, broken frontmatter 500.
    """
    config = get_config_sync()

    app = FastAPI(
        title="Thottam Content API",
        description="Bilingual (Tamil/English) content tree and pages",
        version=__version__,
        lifespan=lifespan,
        debug=config.api.debug,
    )

    def content_error(request: Request, status_code: int, exc: Exception) -> JSONResponse:
        language = _request_language(request, config.content.default_language)
        body = ErrorResponse(detail=error_message(str(exc), language))
        return JSONResponse(status_code=status_code, content=body.model_dump())

    @app.exception_handler(ContentNotFoundError)
    async def content_not_found_handler(request: Request, exc: ContentNotFoundError):
        logger.info("No content for %s: %s", request.url.path, exc)
        return content_error(request, 404, exc)

    @app.exception_handler(ContentPathError)
    async def content_path_handler(request: Request, exc: ContentPathError):
        logger.warning("Rejected content path %s: %s", request.url.path, exc)
        return content_error(request, 403, exc)

    @app.exception_handler(ContentRenderError)
    async def content_render_handler(request: Request, exc: ContentRenderError):
        logger.error("Failed to render %s: %s", request.url.path, exc)
        return content_error(request, 500, exc)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        error_id = str(uuid.uuid4())[:8]
        logger.exception("Unhandled exception [%s]: %s", error_id, exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal Server Error", "error_id": error_id},
        )

    # Pages are read-only; only GET/OPTIONS by default
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.api.cors_origins,
        allow_credentials=True,
        allow_methods=config.api.cors_methods,
        allow_headers=config.api.cors_headers,
    )

    app.include_router(content.router, prefix="/api/content", tags=["content"])

    @app.get("/health", tags=["health"])
    async def health_check():
        return {
            "status": "healthy",
            "version": __version__,
            "contents": config.content.path,
            "formats": config.content.formats,
        }

    @app.get("/api", tags=["root"])
    async def api_root():
        return {
            "name": "Thottam Content API",
            "version": __version__,
            "languages": [language.value for language in Language],
            "endpoints": {
                "tree": "/api/content/tree",
                "home": "/api/content/home",
                "pages": "/api/content/pages/{slug}",
                "strings": "/api/content/strings",
                "health": "/health",
            },
        }

    return app


app = create_app()
